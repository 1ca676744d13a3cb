# Copyright 2026, dictspell authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .comparator import Collator, Comparator, validate_comparator
from .dictionary import DEFAULT_SEARCH_RADIUS, Dictionary

import functools
import logging

BYTE_ORDER_MARK = "\ufeff"


class SpellCheckerService:
    """Builds dictionaries from raw word list text.

    The same comparator sorts the text in `normalize_dictionary` and searches
    the resulting `Dictionary`, which keeps the sort order invariant intact.
    """

    def __init__(self, compare: Comparator | None = None, search_radius: int = DEFAULT_SEARCH_RADIUS) -> None:
        self.log = logging.getLogger("SpellCheckerService")
        self.compare = validate_comparator(compare if compare is not None else Collator())
        self.search_radius = search_radius

    def get_dictionary(self, raw_content: str) -> Dictionary:
        """Dictionary over the lines of already normalized text"""
        return Dictionary(raw_content.split("\n"), compare=self.compare, search_radius=self.search_radius)

    def normalize_dictionary(self, content: str) -> str:
        """Strip BOM and carriage returns, drop empty lines and sort"""
        stripped = self._strip_bom(content).replace("\r", "")
        lines = sorted(filter(None, stripped.split("\n")), key=functools.cmp_to_key(self.compare))
        self.log.debug("normalized word list, %d lines", len(lines))
        return "\n".join(lines)

    def load_dictionary(self, content: str) -> Dictionary:
        return self.get_dictionary(self.normalize_dictionary(content))

    @staticmethod
    def _strip_bom(text: str) -> str:
        return text[1:] if text.startswith(BYTE_ORDER_MARK) else text

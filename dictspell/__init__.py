# Copyright 2026, dictspell authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .binarysearch import closest, NOT_FOUND, search
from .comparator import Collator, Comparator
from .dictionary import DEFAULT_SEARCH_RADIUS, Dictionary, PatternLike, PatternMatcher, SpellCheckResult
from .editdistance import distance
from .service import SpellCheckerService

try:
    from .version import __version__
except ImportError:
    __version__ = "UNKNOWN"

__all__ = [
    "Collator",
    "Comparator",
    "DEFAULT_SEARCH_RADIUS",
    "Dictionary",
    "NOT_FOUND",
    "PatternLike",
    "PatternMatcher",
    "SpellCheckResult",
    "SpellCheckerService",
    "closest",
    "distance",
    "search",
]

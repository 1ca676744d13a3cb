# Copyright 2026, dictspell authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""String comparators used to sort and search word lists"""
from __future__ import annotations

from typing import Callable, Final, Iterable

import functools
import unicodedata

Comparator = Callable[[str, str], int]

SENSITIVITIES: Final = ("base", "accent", "case", "variant")


def strip_accents(value: str) -> str:
    decomposed = unicodedata.normalize("NFD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _common_prefix_length(a: str, b: str) -> int:
    length = 0
    for ch_a, ch_b in zip(a, b):
        if ch_a != ch_b:
            break
        length += 1
    return length


class Collator:
    """Compare strings at a given sensitivity level.

    The levels follow the usual collation vocabulary:

    * ``base``: ``a == A == á``
    * ``accent``: ``a == A``, ``a != á``
    * ``case``: ``a == á``, ``a != A``
    * ``variant``: all three differ

    The sign of the result orders the collation keys by code point. Its
    magnitude is the length of the longer key minus the shared prefix, so a
    word that shares more leading characters with the target compares
    closer to it. ``closest`` relies on that magnitude.
    """

    def __init__(self, sensitivity: str = "accent") -> None:
        if sensitivity not in SENSITIVITIES:
            raise ValueError(
                "Unknown sensitivity {!r}: expected one of {}".format(sensitivity, ", ".join(SENSITIVITIES))
            )
        self.sensitivity = sensitivity

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(sensitivity={self.sensitivity!r})"

    def key(self, word: str) -> str:
        if self.sensitivity == "base":
            return strip_accents(word).casefold()
        if self.sensitivity == "accent":
            return word.casefold()
        if self.sensitivity == "case":
            return strip_accents(word)
        return word

    def __call__(self, a: str, b: str) -> int:
        key_a, key_b = self.key(a), self.key(b)
        if key_a == key_b:
            return 0
        magnitude = max(len(key_a), len(key_b)) - _common_prefix_length(key_a, key_b)
        return -magnitude if key_a < key_b else magnitude

    def sort(self, words: Iterable[str]) -> list[str]:
        return sorted(words, key=functools.cmp_to_key(self))


def validate_comparator(compare: object) -> Comparator:
    if not callable(compare):
        raise TypeError("Comparator must be callable, got {!r}".format(type(compare).__name__))
    return compare  # type: ignore[return-value]

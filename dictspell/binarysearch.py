# Copyright 2026, dictspell authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Binary search over sequences sorted by a comparator"""
from __future__ import annotations

from .comparator import Comparator
from typing import Final, Sequence

NOT_FOUND: Final = -1


def search(items: Sequence[str], target: str, compare: Comparator) -> int:
    """Index of an element comparing equal to `target`, or NOT_FOUND"""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = (start + end) // 2
        comparison = compare(items[mid], target)
        if comparison == 0:
            return mid
        if comparison < 0:
            start = mid + 1
        else:
            end = mid - 1
    return NOT_FOUND


def closest(items: Sequence[str], target: str, compare: Comparator) -> int:
    """Index of the element nearest to `target` along the bisection path.

    Returns at once on an exact match. Otherwise every probed midpoint is
    scored by ``abs(compare(items[mid], target))`` and the first index with
    the smallest score wins. Only an empty sequence yields NOT_FOUND.
    """
    if not items:
        return NOT_FOUND

    start, end = 0, len(items) - 1
    closest_index = NOT_FOUND
    closest_score = 0

    while start <= end:
        mid = (start + end) // 2
        comparison = compare(items[mid], target)
        if comparison == 0:
            return mid

        score = abs(comparison)
        if closest_index == NOT_FOUND or score < closest_score:
            closest_index, closest_score = mid, score

        if comparison < 0:
            start = mid + 1
        else:
            end = mid - 1

    return closest_index

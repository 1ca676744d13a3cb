# Copyright 2026, dictspell authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Damerau-Levenshtein edit distance

Insertions, deletions, substitutions and transpositions of two adjacent
characters all cost 1. A substring is never edited twice (optimal string
alignment), which is what makes ``distance("ca", "abc") == 3``.
"""
from __future__ import annotations


def _initial_matrix(rows: int, cols: int) -> list[list[int]]:
    """Matrix with row 0 and column 0 holding the cost of an empty prefix"""
    matrix = [[0] * cols for _ in range(rows)]
    for row in range(rows):
        matrix[row][0] = row
    for col in range(cols):
        matrix[0][col] = col
    return matrix


def distance(source: str, target: str) -> int:
    """Minimum number of edits turning `source` into `target`.

    Comparison is case sensitive; lowercase both strings first when case
    should not count as an edit.
    """
    if source == target:
        return 0
    if not source:
        return len(target)
    if not target:
        return len(source)

    rows, cols = len(source) + 1, len(target) + 1
    matrix = _initial_matrix(rows, cols)

    for i in range(1, rows):
        current = matrix[i]
        previous = matrix[i - 1]
        for j in range(1, cols):
            cost = 0 if source[i - 1] == target[j - 1] else 1
            value = min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + cost,  # substitution
            )
            if i > 1 and j > 1 and source[i - 1] == target[j - 2] and source[i - 2] == target[j - 1]:
                value = min(value, matrix[i - 2][j - 2] + cost)
            current[j] = value

    return matrix[-1][-1]

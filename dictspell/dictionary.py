# Copyright 2026, dictspell authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from . import binarysearch, editdistance
from .comparator import Collator, Comparator, validate_comparator
from typing import Callable, Final, Iterable, Iterator, NamedTuple, Sequence, Union

import logging
import re

DEFAULT_SEARCH_RADIUS: Final = 1000
DEFAULT_LIMIT: Final = 5
DEFAULT_MAX_DISTANCE: Final = 3

PatternMatcher = Callable[[str], bool]
PatternLike = Union[str, "re.Pattern[str]", PatternMatcher]


class SpellCheckResult(NamedTuple):
    misspelled: bool
    suggestions: list[str]


class _State(NamedTuple):
    words: Sequence[str]
    compare: Comparator
    patterns: tuple[PatternMatcher, ...]


def to_matcher(pattern: PatternLike) -> PatternMatcher:
    """Turn a regex string, compiled regex or predicate into a predicate"""
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    if isinstance(pattern, re.Pattern):
        compiled = pattern
        return lambda word: compiled.search(word) is not None
    if callable(pattern):
        return pattern
    raise TypeError("Pattern must be a string, a compiled regex or a callable, got {!r}".format(type(pattern).__name__))


def neighborhood(center: int, radius: int) -> Iterator[int]:
    """Yield `radius` indexes alternating around `center`.

    Even offsets step left, odd offsets step right:
    center, center + 1, center - 1, center + 2, center - 2, ...
    Indexes are not bounds checked.
    """
    for offset in range(radius):
        if offset % 2 == 0:
            yield center - offset // 2
        else:
            yield center + (offset + 1) // 2


def effective_max_distance(word: str, max_distance: int) -> int:
    return max(min(max_distance, len(word) - 1), 1)


class Dictionary:
    """Spell checker over a sorted word list.

    The word list must be sorted with the same comparator the dictionary
    uses; it is never re-sorted here. Words matching any allow-list pattern
    are always considered correct.
    """

    def __init__(
        self,
        words: Iterable[str] = (),
        compare: Comparator | None = None,
        patterns: Iterable[PatternLike] = (),
        search_radius: int = DEFAULT_SEARCH_RADIUS,
    ) -> None:
        if search_radius < 1:
            raise ValueError("search_radius must be positive, got {!r}".format(search_radius))
        self.log = logging.getLogger("Dictionary")
        self.search_radius = search_radius
        self._state = _State(
            words=list(words),
            compare=validate_comparator(compare if compare is not None else Collator()),
            patterns=tuple(to_matcher(pattern) for pattern in patterns),
        )

    def __len__(self) -> int:
        return len(self._state.words)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(words={len(self)}, search_radius={self.search_radius})"

    @property
    def words(self) -> Sequence[str]:
        return self._state.words

    @property
    def compare(self) -> Comparator:
        return self._state.compare

    def length(self) -> int:
        return len(self)

    def set_word_list(self, words: Iterable[str]) -> None:
        words = list(words)
        self._state = self._state._replace(words=words)
        self.log.debug("word list replaced, %d words", len(words))

    def set_comparator(self, compare: Comparator) -> None:
        """Replace the comparator. The word list must already be sorted by it."""
        self._state = self._state._replace(compare=validate_comparator(compare))

    def set_patterns(self, patterns: Iterable[PatternLike]) -> None:
        self._state = self._state._replace(patterns=tuple(to_matcher(pattern) for pattern in patterns))

    def clear_patterns(self) -> None:
        self._state = self._state._replace(patterns=())

    def spell_check(self, word: str) -> bool:
        """True when `word` matches an allow-list pattern or is in the word list"""
        if not word:
            return False
        state = self._state
        if self._matches_pattern(state, word):
            return True
        return binarysearch.search(state.words, word.lower(), state.compare) != binarysearch.NOT_FOUND

    def is_misspelled(self, word: str) -> bool:
        return not self.spell_check(word)

    def get_suggestions(self, word: str, limit: int = DEFAULT_LIMIT, max_distance: int = DEFAULT_MAX_DISTANCE) -> list[str]:
        """Words near `word` ordered by edit distance.

        Only `search_radius` positions around the closest list entry are
        examined, so close matches sorted far away from `word` are missed.
        """
        if not word:
            return []
        return self._suggest(self._state, word, limit, max_distance)

    def check_and_suggest(
        self, word: str, limit: int = DEFAULT_LIMIT, max_distance: int = DEFAULT_MAX_DISTANCE
    ) -> SpellCheckResult:
        """Check `word` and suggest replacements in one pass.

        The word counts as correct when the best suggestion is the word
        itself, ignoring case, or when an allow-list pattern matches it.
        The binary search used by `spell_check` is not consulted, so the two
        methods can disagree, for example on a word list that is not sorted
        with the dictionary comparator.
        """
        state = self._state
        normalized = word.lower()
        raw = self._suggest(state, word, limit + 1, max_distance) if word else []

        misspelled = not raw or raw[0].lower() != normalized
        suggestions = raw[:limit] if misspelled else raw[1:]
        return SpellCheckResult(
            misspelled=misspelled and not self._matches_pattern(state, word),
            suggestions=suggestions,
        )

    def _matches_pattern(self, state: _State, word: str) -> bool:
        return any(matcher(word) for matcher in state.patterns)

    def _suggest(self, state: _State, word: str, limit: int, max_distance: int) -> list[str]:
        normalized = word.lower()
        max_distance = effective_max_distance(normalized, max_distance)
        words = state.words
        center = binarysearch.closest(words, normalized, state.compare)
        if center == binarysearch.NOT_FOUND:
            return []

        buckets: list[list[str]] = [[] for _ in range(max_distance + 1)]
        for index in neighborhood(center, self.search_radius):
            if not 0 <= index < len(words):
                continue
            candidate = words[index]
            candidate_distance = editdistance.distance(normalized, candidate.lower())
            if candidate_distance <= max_distance:
                buckets[candidate_distance].append(candidate)

        self.log.debug(
            "suggestions for %r around %r: %s",
            normalized,
            words[center],
            [len(bucket) for bucket in buckets],
        )
        return [candidate for bucket in buckets for candidate in bucket][: max(limit, 0)]

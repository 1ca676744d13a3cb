# Copyright 2026, dictspell authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from dictspell.comparator import Collator
from dictspell.dictionary import Dictionary
from dictspell.service import SpellCheckerService

import pytest


@pytest.mark.parametrize(
    "content,expected",
    [
        ("\ufeffbanana\r\napple\r\n\r\ncherry\n", "apple\nbanana\ncherry"),
        ("b\nB\na", "a\nb\nB"),
        ("", ""),
        ("\ufeff\r\n\r\n", ""),
        ("only", "only"),
    ],
)
def test_normalize_dictionary(content: str, expected: str) -> None:
    assert SpellCheckerService().normalize_dictionary(content) == expected


def test_normalize_dictionary_only_strips_leading_bom() -> None:
    assert SpellCheckerService(compare=Collator("variant")).normalize_dictionary("b\n\ufeffa") == "b\n\ufeffa"


def test_normalize_dictionary_uses_comparator() -> None:
    service = SpellCheckerService(compare=Collator("variant"))
    assert service.normalize_dictionary("b\nB\na") == "B\na\nb"


def test_get_dictionary() -> None:
    dictionary = SpellCheckerService().get_dictionary("apple\nbanana\norange")
    assert isinstance(dictionary, Dictionary)
    assert len(dictionary) == 3
    assert dictionary.spell_check("banana") is True


def test_get_dictionary_does_not_filter() -> None:
    assert len(SpellCheckerService().get_dictionary("apple\nbanana\n")) == 3


def test_load_dictionary_normalizes() -> None:
    dictionary = SpellCheckerService().load_dictionary("orange\r\nApple\r\n\r\nbanana\r\n")
    assert list(dictionary.words) == ["Apple", "banana", "orange"]
    assert dictionary.spell_check("apple") is True
    assert dictionary.get_suggestions("aple", 3, 2) == ["Apple"]


def test_dictionary_shares_service_settings() -> None:
    collator = Collator("base")
    service = SpellCheckerService(compare=collator, search_radius=7)
    dictionary = service.load_dictionary("creme\nbrulee")
    assert dictionary.compare is collator
    assert dictionary.search_radius == 7
    assert dictionary.spell_check("crème") is True


def test_invalid_comparator() -> None:
    with pytest.raises(TypeError):
        SpellCheckerService(compare=42)  # type: ignore[arg-type]

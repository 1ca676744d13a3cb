# Copyright 2026, dictspell authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from dictspell.session import fetch_text, get_requests_session, has_declared_charset, is_url, read_text, WordListAdapter
from pathlib import Path
from requests import Session
from unittest import mock
from unittest.mock import MagicMock

import pytest
import requests


def test_valid_requests_session() -> None:
    """Test that get_requests_session returns a valid Session that has the expected parameters set."""

    session = get_requests_session()

    assert isinstance(session, Session)
    assert "dictspell" in session.headers["User-Agent"]

    adapter = session.adapters["https://"]
    assert isinstance(adapter, WordListAdapter)
    assert adapter.timeout is None


@pytest.mark.parametrize("value", [30, 0])
def test_adapter_timeout_is_passed_along(value: int) -> None:
    session = get_requests_session(timeout=value)
    for prefix in ("http://", "https://"):
        adapter = session.adapters[prefix]
        assert isinstance(adapter, WordListAdapter)
        assert adapter.timeout == value


@pytest.mark.parametrize(
    "source,expected",
    [
        ("https://example.com/words.txt", True),
        ("http://example.com/words.txt", True),
        ("words.txt", False),
        ("/usr/share/dict/words", False),
        ("ftp://example.com/words.txt", False),
    ],
)
def test_is_url(source: str, expected: bool) -> None:
    assert is_url(source) is expected


def _session_returning(text: str, content_type: str = "text/plain") -> MagicMock:
    response = MagicMock()
    response.text = text
    response.encoding = "ISO-8859-1"
    response.headers = {"content-type": content_type}
    session = MagicMock()
    session.get.return_value = response
    return session


def test_fetch_text() -> None:
    session = _session_returning("apple\nbanana")
    assert fetch_text("https://example.com/words.txt", session=session) == "apple\nbanana"
    session.get.assert_called_once_with("https://example.com/words.txt")
    session.get.return_value.raise_for_status.assert_called_once_with()
    session.close.assert_not_called()


def test_fetch_text_defaults_to_utf8() -> None:
    session = _session_returning("apple", content_type="text/plain")
    fetch_text("https://example.com/words.txt", session=session)
    assert session.get.return_value.encoding == "utf-8"


def test_fetch_text_keeps_declared_charset() -> None:
    session = _session_returning("apple", content_type="text/plain; Charset=ISO-8859-1")
    fetch_text("https://example.com/words.txt", session=session)
    assert session.get.return_value.encoding == "ISO-8859-1"


@pytest.mark.parametrize(
    "content_type,expected",
    [
        (None, False),
        ("", False),
        ("text/plain", False),
        ("text/plain; charset=utf-8", True),
        ("text/plain;CHARSET=iso-8859-1", True),
        ("text/plain; format=flowed", False),
    ],
)
def test_has_declared_charset(content_type: str | None, expected: bool) -> None:
    assert has_declared_charset(content_type) is expected


def test_fetch_text_closes_its_own_session() -> None:
    session = _session_returning("apple")
    session.__enter__.return_value = session
    with mock.patch("dictspell.session.get_requests_session", return_value=session) as get_session:
        assert fetch_text("https://example.com/words.txt", timeout=7) == "apple"
    get_session.assert_called_once_with(timeout=7)
    session.__exit__.assert_called_once()


def test_fetch_text_http_error() -> None:
    session = _session_returning("")
    session.get.return_value.raise_for_status.side_effect = requests.exceptions.HTTPError("404 Client Error")
    with pytest.raises(requests.exceptions.HTTPError):
        fetch_text("https://example.com/missing.txt", session=session)


def test_read_text_from_file(tmp_path: Path) -> None:
    path = tmp_path / "words.txt"
    path.write_text("crème\nbrûlée\n", encoding="utf-8")
    assert read_text(str(path)) == "crème\nbrûlée\n"


def test_read_text_from_url() -> None:
    session = _session_returning("apple")
    assert read_text("https://example.com/words.txt", session=session) == "apple"


def test_read_text_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_text(str(tmp_path / "missing.txt"))

# Copyright 2026, dictspell authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from requests import adapters, models, Session
from requests.structures import CaseInsensitiveDict
from typing import Any

import logging

try:
    from .version import __version__
except ImportError:
    __version__ = "UNKNOWN"

log = logging.getLogger("dictspell_http")


class WordListAdapter(adapters.HTTPAdapter):
    def __init__(self, *args: Any, timeout: int | None = None, **kwargs: Any) -> None:
        self.timeout = timeout
        super().__init__(*args, **kwargs)

    def send(self, *args: Any, **kwargs: Any) -> models.Response:
        if not kwargs.get("timeout"):
            kwargs["timeout"] = self.timeout
        return super().send(*args, **kwargs)


def get_requests_session(*, timeout: int | None = None) -> Session:
    adapter = WordListAdapter(timeout=timeout)

    session = Session()
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.verify = True
    session.headers = CaseInsensitiveDict(
        {
            "accept": "text/plain",
            "user-agent": "dictspell/" + __version__,
        }
    )

    return session


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def has_declared_charset(content_type: str | None) -> bool:
    if not content_type:
        return False
    params = content_type.split(";")[1:]
    return any(param.strip().lower().startswith("charset=") for param in params)


def fetch_text(url: str, *, timeout: int | None = None, session: Session | None = None) -> str:
    """GET `url` and return the body decoded as text (UTF-8 unless the server declares a charset)"""
    if session is None:
        with get_requests_session(timeout=timeout) as owned_session:
            return _get_text(owned_session, url)
    return _get_text(session, url)


def _get_text(session: Session, url: str) -> str:
    log.debug("GET %s", url)
    response = session.get(url)
    log.debug("%s %s", response.status_code, response.reason)
    response.raise_for_status()
    if not has_declared_charset(response.headers.get("content-type")):
        # requests falls back to latin-1 for text/* without a charset
        response.encoding = "utf-8"
    return response.text


def read_text(source: str, *, timeout: int | None = None, session: Session | None = None) -> str:
    """Word list text from an http(s) URL or a local UTF-8 file"""
    if is_url(source):
        return fetch_text(source, timeout=timeout, session=session)
    with open(source, encoding="utf-8") as fp:
        return fp.read()

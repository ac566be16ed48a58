# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Load candidate vocabularies from files, stdin or HTTP(S) URLs

A vocabulary is either a JSON document (a list of strings, or an object whose keys
are used) or plain text with one entry per line. Content starting with "[" or "{"
that does not parse as JSON is read as plain text. In plain text, blank lines and
lines starting with "#" are ignored.
"""
from __future__ import annotations

from .argx import UserError
from .session import get_requests_session
from requests import Session
from typing import Any

import json as jsonlib
import logging
import sys

log = logging.getLogger(__name__)

URL_SCHEMES = ("http://", "https://")


class VocabularyError(UserError):
    def __init__(self, message: str) -> None:
        super().__init__()
        self.message = message

    def __str__(self) -> str:
        return self.message


def _from_json(source: str, data: Any) -> list[str]:
    if isinstance(data, dict):
        return list(data)
    if isinstance(data, list) and all(isinstance(item, str) for item in data):
        return data
    raise VocabularyError(f"Vocabulary {source!r} must be a JSON list of strings or a JSON object")


def parse_vocabulary(text: str, source: str = "<string>") -> list[str]:
    stripped = text.strip()
    if stripped.startswith(("[", "{")):
        try:
            data = jsonlib.loads(stripped)
        except ValueError:
            log.debug("Vocabulary %r is not JSON, reading it one word per line", source)
        else:
            return _from_json(source, data)

    words = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        words.append(line)
    return words


def _read_url(source: str, session: Session | None, timeout: float | None) -> str:
    if session is None:
        session = get_requests_session(timeout=timeout)
    response = session.get(source)
    if not response.ok:
        raise VocabularyError(f"Failed to fetch vocabulary {source!r}: HTTP {response.status_code}")
    return response.text


def _read_file(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    try:
        with open(source, encoding="utf-8") as fp:
            return fp.read()
    except (OSError, UnicodeDecodeError) as ex:
        raise VocabularyError(f"Failed to read vocabulary {source!r}: {ex.__class__.__name__}: {ex}") from ex


def load_vocabulary(source: str, *, session: Session | None = None, timeout: float | None = None) -> list[str]:
    """Return the words of the vocabulary at `source`, in their original order"""
    if source.startswith(URL_SCHEMES):
        text = _read_url(source, session, timeout)
    else:
        text = _read_file(source)

    words = parse_vocabulary(text, source)
    log.debug("Loaded %d word(s) from %r", len(words), source)
    return words

# Copyright 2021, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .suggestion_list import suggestion_list
from typing import Iterable, Sequence

MAX_SUGGESTIONS = 5


def suggest(word_to_check: str, known_words: Iterable[str]) -> str | None:
    """Most probable spelling correction for word, or None if nothing is close enough."""
    candidates = suggestion_list(word_to_check, known_words)
    return candidates[0] if candidates else None


def did_you_mean(suggestions: Sequence[str], sub_message: str | None = None) -> str:
    """Format a hint to append to an error message, e.g. ' Did you mean "a" or "b"?'

    Only the first MAX_SUGGESTIONS suggestions are listed. Returns an empty string
    when there is nothing to suggest.
    """
    if not suggestions:
        return ""

    message = " Did you mean "
    if sub_message:
        message += sub_message + " "

    quoted = ['"{}"'.format(suggestion) for suggestion in suggestions[:MAX_SUGGESTIONS]]
    if len(quoted) == 1:
        return message + quoted[0] + "?"
    if len(quoted) == 2:
        return message + quoted[0] + " or " + quoted[1] + "?"
    return message + ", ".join(quoted[:-1]) + ", or " + quoted[-1] + "?"

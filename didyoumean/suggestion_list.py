# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .lexical_distance import LexicalDistance
from typing import Iterable

import logging

log = logging.getLogger(__name__)


def suggestion_list(input_: str, options: Iterable[str]) -> list[str]:
    """Get list with suggestions for a given input.

    Given an invalid input string and a list of valid options, returns a filtered list
    of valid options sorted based on their similarity with the input. Options with the
    same distance are sorted by code point order. Repeated options are only returned once.
    """
    options_by_distance: dict[str, int] = {}
    lexical_distance = LexicalDistance(input_)

    input_threshold = len(input_) / 2
    for option in options:
        distance = lexical_distance.measure(option)
        threshold = max(input_threshold, len(option) / 2, 1)
        if distance <= threshold:
            options_by_distance[option] = distance

    log.debug("%d option(s) close to %r", len(options_by_distance), input_)
    return sorted(options_by_distance, key=lambda option: (options_by_distance[option], option))

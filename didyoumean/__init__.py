# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from .lexical_distance import LexicalDistance
from .speller import did_you_mean, suggest
from .suggestion_list import suggestion_list

try:
    from .version import __version__
except ImportError:
    __version__ = "UNKNOWN"

__all__ = ["did_you_mean", "LexicalDistance", "suggest", "suggestion_list", "__version__"]

# Copyright 2015, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Configurable parameters via environment variables
"""

import os

USER_HOME = os.path.expanduser("~")

DIDYOUMEAN_CONFIG_DIR = os.environ.get("DIDYOUMEAN_CONFIG_DIR", os.path.join(USER_HOME, ".config", "didyoumean"))

DIDYOUMEAN_CONFIG = os.environ.get("DIDYOUMEAN_CONFIG", os.path.join(DIDYOUMEAN_CONFIG_DIR, "didyoumean.json"))
DIDYOUMEAN_VOCABULARY = os.environ.get("DIDYOUMEAN_VOCABULARY")
DIDYOUMEAN_REQUEST_TIMEOUT = os.environ.get("DIDYOUMEAN_REQUEST_TIMEOUT")

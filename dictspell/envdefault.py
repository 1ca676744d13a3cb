# Copyright 2026, dictspell authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Configurable parameters via environment variables
"""

import os

USER_HOME = os.path.expanduser("~")

DICTSPELL_CONFIG_DIR = os.environ.get("DICTSPELL_CONFIG_DIR", os.path.join(USER_HOME, ".config", "dictspell"))

DICTSPELL_CONFIG = os.environ.get("DICTSPELL_CONFIG", os.path.join(DICTSPELL_CONFIG_DIR, "dictspell.json"))
DICTSPELL_LOG_LEVEL = os.environ.get("DICTSPELL_LOG_LEVEL", "INFO")
DICTSPELL_SEARCH_RADIUS = os.environ.get("DICTSPELL_SEARCH_RADIUS")
DICTSPELL_SENSITIVITY = os.environ.get("DICTSPELL_SENSITIVITY")
DICTSPELL_WORDLIST = os.environ.get("DICTSPELL_WORDLIST")

"""Centralized configuration for Vieta.

This module defines:
- The default input document location
- Digit alphabet and supported radix range
- Input validation limits
- Default logging level

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with VIETA_)
"""

import os
import string

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("vieta")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Input document
DEFAULT_INPUT_FILE = os.getenv("VIETA_INPUT_FILE", "input.json")
RESERVED_KEY = "keys"

# Input validation limits
MAX_INPUT_LENGTH = int(
    os.getenv("VIETA_MAX_INPUT_LENGTH", "1000000")
)  # characters

# Radix configuration
DIGITS = string.digits + string.ascii_lowercase
MIN_BASE = 2
MAX_BASE = len(DIGITS)

# Logging
LOG_LEVEL = os.getenv("VIETA_LOG_LEVEL", "WARNING").upper()

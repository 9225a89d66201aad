"""Main entry point for running vieta_pkg as a module.

This allows running Vieta with:
    python -m vieta_pkg
    python -m vieta_pkg path/to/input.json
    python -m vieta_pkg --health-check

This is equivalent to running:
    python -m vieta_pkg.cli
    python vieta.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())

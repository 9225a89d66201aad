#!/usr/bin/env python3
"""
Vieta - polynomial constant term calculator

Thin wrapper that delegates all functionality to the vieta_pkg package.

Usage:
    python vieta.py                       # Read ./input.json
    python vieta.py roots.json            # Read another document
    python vieta.py --format json -       # Read stdin, emit JSON
    python vieta.py --help                # Show help
"""

from __future__ import annotations

import sys

from vieta_pkg.cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())

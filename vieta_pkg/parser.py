"""Reading and validating the input document.

The document is a JSON object holding a reserved ``keys`` entry with the
root count ``n`` and leading coefficient ``k``, and one entry per root::

    {
      "keys": {"n": 2, "k": "1"},
      "r1": {"base": "10", "value": "4"},
      "r2": {"base": "2", "value": "11"}
    }

Root entries keep the order in which they appear in the document.
"""

from __future__ import annotations

import json
import re
import sys
from pathlib import Path
from typing import Any

from .config import MAX_INPUT_LENGTH, RESERVED_KEY
from .decoder import check_base
from .logging_config import get_logger
from .types import (
    InputUnavailableError,
    MalformedInputError,
    MissingFieldError,
    PolynomialInput,
    RootDescriptor,
)

logger = get_logger("parser")

# Roots and coefficients may run past the 4300-digit int/str conversion limit
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)

INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")


def read_source(path: str | Path) -> str:
    """Read the whole input document. ``"-"`` reads standard input."""
    if str(path) == "-":
        try:
            return sys.stdin.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputUnavailableError(f"Cannot read standard input: {e}")
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise InputUnavailableError(f"Input file '{source}' not found")
    except IsADirectoryError:
        raise InputUnavailableError(f"Input path '{source}' is a directory")
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnavailableError(f"Cannot read input file '{source}': {e}")
    logger.debug("Read %d characters from %s", len(text), source)
    return text


def parse_document(text: str) -> dict[str, Any]:
    """Parse JSON text into a mapping, preserving key order."""
    if len(text) > MAX_INPUT_LENGTH:
        raise MalformedInputError(
            f"Input too long ({len(text)} characters, limit {MAX_INPUT_LENGTH})",
            code="TOO_LONG",
        )
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"Input is not valid JSON: {e}")
    except ValueError as e:
        raise MalformedInputError(f"Input holds an unreadable number: {e}")
    if not isinstance(data, dict):
        raise MalformedInputError(
            f"Input must be a JSON object, got {type(data).__name__}"
        )
    return data


def _parse_integer(raw: Any, name: str) -> int:
    """Accept an int, an integral float, or a decimal integer string."""
    if isinstance(raw, bool):
        raise MalformedInputError(
            f"Field '{name}' must be an integer, got {raw!r}", code="INVALID_NUMBER"
        )
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if raw.is_integer():
            return int(raw)
        raise MalformedInputError(
            f"Field '{name}' must be an integer, got {raw!r}", code="INVALID_NUMBER"
        )
    if isinstance(raw, str) and INTEGER_RE.match(raw.strip()):
        try:
            return int(raw.strip())
        except ValueError as e:
            raise MalformedInputError(
                f"Field '{name}' cannot be read as an integer: {e}",
                code="INVALID_NUMBER",
            )
    raise MalformedInputError(
        f"Field '{name}' must be an integer, got {raw!r}", code="INVALID_NUMBER"
    )


def _parse_base(raw: Any, name: str) -> int:
    if isinstance(raw, str):
        stripped = raw.strip()
        if not stripped.isascii() or not stripped.isdigit():
            raise MalformedInputError(
                f"Field '{name}' must be a decimal integer, got {raw!r}",
                code="INVALID_BASE",
            )
        raw = int(stripped)
    return check_base(raw)


def _require(mapping: dict[str, Any], key: str, path: str) -> Any:
    if key not in mapping or mapping[key] is None:
        raise MissingFieldError(path)
    return mapping[key]


def parse_root(root_id: str, entry: Any) -> RootDescriptor:
    """Validate one root entry holding ``base`` and ``value``."""
    if not isinstance(entry, dict):
        raise MalformedInputError(
            f"Root entry '{root_id}' must be an object, got {type(entry).__name__}"
        )
    base = _parse_base(_require(entry, "base", f"{root_id}.base"), f"{root_id}.base")
    value = _require(entry, "value", f"{root_id}.value")
    if not isinstance(value, str):
        raise MalformedInputError(
            f"Field '{root_id}.value' must be a string, got {type(value).__name__}"
        )
    return RootDescriptor(root_id=root_id, base=base, value=value)


def parse_input(data: dict[str, Any]) -> PolynomialInput:
    """Build a PolynomialInput from a parsed document.

    Raises:
        MissingFieldError: If ``keys``, ``keys.n``, ``keys.k`` or a root's
            ``base``/``value`` is absent
        MalformedInputError: If a field has the wrong shape
    """
    if not isinstance(data, dict):
        raise MalformedInputError(
            f"Input must be a JSON object, got {type(data).__name__}"
        )
    keys = _require(data, RESERVED_KEY, RESERVED_KEY)
    if not isinstance(keys, dict):
        raise MalformedInputError(f"Field '{RESERVED_KEY}' must be an object")
    n = _parse_integer(_require(keys, "n", f"{RESERVED_KEY}.n"), f"{RESERVED_KEY}.n")
    k = _parse_integer(_require(keys, "k", f"{RESERVED_KEY}.k"), f"{RESERVED_KEY}.k")

    roots: dict[str, RootDescriptor] = {}
    for root_id, entry in data.items():
        if root_id == RESERVED_KEY:
            continue
        roots[root_id] = parse_root(root_id, entry)

    if n != len(roots):
        logger.warning(
            "Declared root count n=%d differs from the %d root entries supplied",
            n,
            len(roots),
        )
    return PolynomialInput(n=n, k=k, roots=roots)


def load_input(path: str | Path) -> PolynomialInput:
    """Read, parse and validate the input document at ``path``."""
    return parse_input(parse_document(read_source(path)))

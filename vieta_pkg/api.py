"""Public API for Vieta - returns structured objects without side effects."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .logging_config import get_logger
from .parser import load_input, parse_document, parse_input
from .solver import solve
from .types import ConstantTermResult, VietaError

logger = get_logger("api")


def _failure(error: VietaError, source: str | None = None) -> ConstantTermResult:
    logger.debug("Run aborted: %s", error.message, extra={"code": error.code})
    return ConstantTermResult(
        ok=False, error=error.message, code=error.code, source=source
    )


def compute_constant_term(data: dict[str, Any]) -> ConstantTermResult:
    """Compute the constant term from an already parsed input mapping.

    Args:
        data: Mapping with a ``keys`` entry and one entry per root

    Returns:
        ConstantTermResult with decoded roots, product, sign and constant

    Example:
        >>> from vieta_pkg.api import compute_constant_term
        >>> result = compute_constant_term({
        ...     "keys": {"n": 2, "k": "1"},
        ...     "r1": {"base": "10", "value": "4"},
        ...     "r2": {"base": "2", "value": "11"},
        ... })
        >>> result.constant
        12
    """
    try:
        return solve(parse_input(data))
    except VietaError as e:
        return _failure(e)


def compute_from_text(text: str) -> ConstantTermResult:
    """Compute the constant term from a JSON document given as text."""
    try:
        return solve(parse_input(parse_document(text)))
    except VietaError as e:
        return _failure(e)


def compute_from_file(path: str | Path) -> ConstantTermResult:
    """Compute the constant term from the JSON document at ``path``.

    Example:
        >>> from vieta_pkg.api import compute_from_file
        >>> result = compute_from_file("missing.json")
        >>> result.ok, result.code
        (False, 'INPUT_UNAVAILABLE')
    """
    source = "<stdin>" if str(path) == "-" else str(path)
    try:
        result = solve(load_input(path))
    except VietaError as e:
        return _failure(e, source=source)
    result.source = source
    return result


def validate_input(data: dict[str, Any]) -> tuple[bool, str | None]:
    """Validate an input mapping, including every root's digits, without reporting.

    Returns:
        Tuple of (is_valid, error_message)
    """
    result = compute_constant_term(data)
    if result.ok:
        return True, None
    return False, result.error

"""Positional numeral conversion for radices 2 through 36.

Digits are ``0-9`` followed by ``a-z`` (case-insensitive), so ``"ff"`` and
``"FF"`` both decode to 255 in base 16. All arithmetic uses Python's
arbitrary-precision ``int``.
"""

from __future__ import annotations

from .config import DIGITS, MAX_BASE, MIN_BASE
from .logging_config import get_logger
from .types import InvalidDigitError, MalformedInputError

logger = get_logger("decoder")

_DIGIT_WEIGHTS = {ch: weight for weight, ch in enumerate(DIGITS)}


def check_base(base: int) -> int:
    """Ensure ``base`` is an integer radix within the supported range."""
    if isinstance(base, bool) or not isinstance(base, int):
        raise MalformedInputError(
            f"Base must be an integer, got {base!r}", code="INVALID_BASE"
        )
    if not MIN_BASE <= base <= MAX_BASE:
        raise MalformedInputError(
            f"Base {base} is outside the supported range {MIN_BASE}-{MAX_BASE}",
            code="INVALID_BASE",
        )
    return base


def digit_value(ch: str) -> int | None:
    """Return the weight of a single digit character, or None if it has none."""
    if len(ch) != 1 or not ch.isascii():
        return None
    return _DIGIT_WEIGHTS.get(ch.lower())


def decode(value: str, base: int) -> int:
    """Convert a digit string in ``base`` to an integer.

    Digits are consumed most-significant first (``result * base + digit``).
    An empty string decodes to 0.

    Args:
        value: Digit string, e.g. ``"1011"`` or ``"FF"``
        base: Radix between 2 and 36

    Returns:
        Non-negative integer value

    Raises:
        InvalidDigitError: If a character is not a legal digit for ``base``
        MalformedInputError: If ``base`` is out of range
    """
    check_base(base)
    result = 0
    for ch in value:
        digit = digit_value(ch)
        if digit is None or digit >= base:
            raise InvalidDigitError(ch, base)
        result = result * base + digit
    logger.debug("Decoded %r in base %d to %d", value, base, result)
    return result


def encode(number: int, base: int) -> str:
    """Render a non-negative integer in ``base`` using canonical lowercase digits."""
    check_base(base)
    if number < 0:
        raise ValueError("Cannot encode a negative number")
    if number == 0:
        return "0"
    out = []
    while number:
        number, digit = divmod(number, base)
        out.append(DIGITS[digit])
    return "".join(reversed(out))

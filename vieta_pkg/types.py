"""Type definitions, result dataclasses and error classes for Vieta."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class RootDescriptor:
    """A single root entry as supplied in the input document."""

    root_id: str
    base: int
    value: str


@dataclass
class PolynomialInput:
    """Validated input: the reserved ``keys`` entry plus ordered root entries."""

    n: int
    k: int
    roots: dict[str, RootDescriptor] = field(default_factory=dict)


@dataclass
class ConstantTermResult:
    """Result of computing the constant term of a polynomial."""

    ok: bool
    n: int | None = None
    k: int | None = None
    roots: list[int] | None = None
    bases: list[int] | None = None
    product: int | None = None
    sign: int | None = None
    constant: int | None = None
    error: str | None = None
    code: str | None = None
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        Integers are rendered as decimal strings so that arbitrarily large
        values survive consumers with fixed-width number types.
        """
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.source is not None:
            result_dict["source"] = self.source
        if not self.ok:
            result_dict["error"] = self.error
            if self.code is not None:
                result_dict["code"] = self.code
            return result_dict
        result_dict["n"] = self.n
        result_dict["k"] = str(self.k)
        result_dict["roots"] = [str(r) for r in self.roots or []]
        result_dict["product"] = str(self.product)
        result_dict["sign"] = self.sign
        result_dict["constant"] = str(self.constant)
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"ConstantTermResult(ok=False, code={self.code!r}, error={self.error!r})"
        parts = [f"ok={self.ok}", f"n={self.n}", f"k={self.k}"]
        if self.roots is not None:
            parts.append(f"roots={self.roots!r}")
        parts.append(f"product={self.product}")
        parts.append(f"sign={self.sign}")
        parts.append(f"constant={self.constant}")
        return f"ConstantTermResult({', '.join(parts)})"


class VietaError(Exception):
    """Base class for every failure that aborts a run."""

    def __init__(self, message: str, code: str = "VIETA_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InputUnavailableError(VietaError):
    """Raised when the input resource cannot be located or read."""

    def __init__(self, message: str, code: str = "INPUT_UNAVAILABLE"):
        super().__init__(message, code)


class MalformedInputError(VietaError):
    """Raised when the input is not well-formed structured data."""

    def __init__(self, message: str, code: str = "MALFORMED_INPUT"):
        super().__init__(message, code)


class MissingFieldError(VietaError):
    """Raised when a required field is absent."""

    def __init__(self, field_name: str, code: str = "MISSING_FIELD"):
        self.field = field_name
        super().__init__(f"Missing required field '{field_name}'", code)


class InvalidDigitError(VietaError):
    """Raised when a character is not a legal digit for the declared base."""

    def __init__(self, char: str, base: int, code: str = "INVALID_DIGIT"):
        self.char = char
        self.base = base
        super().__init__(f"Invalid digit '{char}' for base {base}", code)

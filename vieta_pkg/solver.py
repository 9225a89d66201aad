"""Constant term of a polynomial from its roots (Vieta's formulas).

For a polynomial of degree ``n`` with leading coefficient ``k`` and roots
``r1..rn``::

    k * (x - r1) * ... * (x - rn)

the constant term is ``k * (-1)**n * r1 * ... * rn``.
"""

from __future__ import annotations

import math
from typing import Iterable

import sympy as sp

from .decoder import decode
from .logging_config import get_logger
from .types import ConstantTermResult, PolynomialInput

logger = get_logger("solver")

X = sp.Symbol("x")


def sign_factor(n: int) -> int:
    """Return (-1)**n: 1 for even n, -1 for odd n."""
    return 1 if n % 2 == 0 else -1


def product_of_roots(roots: Iterable[int]) -> int:
    """Multiply the roots together; the empty product is 1."""
    return math.prod(roots, start=1)


def constant_term(n: int, k: int, roots: Iterable[int]) -> int:
    """Compute k * (-1)**n * product(roots)."""
    return k * sign_factor(n) * product_of_roots(roots)


def decode_roots(poly_input: PolynomialInput) -> list[int]:
    """Decode every root entry in declaration order."""
    decoded = []
    for root_id, root in poly_input.roots.items():
        value = decode(root.value, root.base)
        logger.debug("Root %s (base %d) -> %d", root_id, root.base, value)
        decoded.append(value)
    return decoded


def solve(poly_input: PolynomialInput) -> ConstantTermResult:
    """Decode the roots and compute the constant term.

    The sign factor always follows the declared ``n``, even when the number
    of root entries differs from it.
    """
    roots = decode_roots(poly_input)
    product = product_of_roots(roots)
    sign = sign_factor(poly_input.n)
    constant = poly_input.k * sign * product
    logger.info(
        "n=%d k=%d product=%d sign=%d constant=%d",
        poly_input.n,
        poly_input.k,
        product,
        sign,
        constant,
    )
    return ConstantTermResult(
        ok=True,
        n=poly_input.n,
        k=poly_input.k,
        roots=roots,
        bases=[root.base for root in poly_input.roots.values()],
        product=product,
        sign=sign,
        constant=constant,
    )


def build_polynomial(k: int, roots: Iterable[int]) -> sp.Poly:
    """Expand k * prod(x - r) into an exact integer polynomial in x.

    Example:
        >>> build_polynomial(1, [4, 3]).all_coeffs()
        [1, -7, 12]
    """
    poly = sp.Poly(sp.Integer(k), X, domain=sp.ZZ)
    for root in roots:
        poly = poly * sp.Poly(X - sp.Integer(root), X, domain=sp.ZZ)
    return poly


def polynomial_constant_term(poly: sp.Poly) -> int:
    """Return the degree-0 coefficient of ``poly`` as a Python int."""
    return int(poly.coeff_monomial(1))


def cross_check(result: ConstantTermResult) -> bool:
    """Verify a result against the SymPy expansion of its roots.

    Only meaningful when ``n`` matches the number of decoded roots, since
    the expansion's degree is the number of roots.
    """
    if not result.ok or result.roots is None:
        return False
    if result.n != len(result.roots):
        logger.debug("Skipping cross-check: n=%d, %d roots", result.n, len(result.roots))
        return True
    poly = build_polynomial(result.k, result.roots)
    return polynomial_constant_term(poly) == result.constant

from __future__ import annotations

import argparse
import json
import sys

import sympy as sp

from .api import compute_from_file
from .config import DEFAULT_INPUT_FILE, MAX_INPUT_LENGTH, VERSION
from .decoder import encode
from .logging_config import LOG_LEVELS, get_logger, resolve_level, setup_logging
from .solver import build_polynomial, cross_check
from .types import ConstantTermResult

logger = get_logger("cli")

_HINTS = {
    "INPUT_UNAVAILABLE": "Please make sure '{source}' exists and is readable.",
    "MALFORMED_INPUT": "Please make sure '{source}' is a valid JSON object.",
    "TOO_LONG": (
        "Documents are limited to {limit} characters; "
        "set VIETA_MAX_INPUT_LENGTH to read '{source}'."
    ),
}

_EXAMPLES = [
    (
        {
            "keys": {"n": 2, "k": "1"},
            "r1": {"base": "10", "value": "4"},
            "r2": {"base": "2", "value": "11"},
        },
        12,
    ),
    (
        {
            "keys": {"n": 3, "k": "2"},
            "r1": {"base": "16", "value": "a"},
            "r2": {"base": "8", "value": "10"},
            "r3": {"base": "10", "value": "1"},
        },
        -160,
    ),
]


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running Vieta health check...")
    print("-" * 50)

    print(f"[OK] SymPy {sp.__version__} imported successfully")
    checks_passed += 1

    try:
        from .decoder import decode

        if decode("ff", 16) == decode("FF", 16) == 255:
            print("[OK] Base-N decoding works")
            checks_passed += 1
        else:
            print("[FAIL] Base-N decoding returned unexpected values")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Decoding check failed: {e}")
        checks_failed += 1

    try:
        from .api import compute_constant_term

        for data, expected in _EXAMPLES:
            result = compute_constant_term(data)
            if result.ok and result.constant == expected and cross_check(result):
                print(f"[OK] Constant term {expected} reproduced")
                checks_passed += 1
            else:
                print(f"[FAIL] Expected constant term {expected}, got {result}")
                checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Solving check failed: {e}")
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Core functionality may be impaired.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_error(res: ConstantTermResult) -> None:
    """Report a failed run on stderr."""
    print(f"Error: {res.error}", file=sys.stderr)
    hint = _HINTS.get(res.code or "")
    if hint and res.source:
        print(hint.format(source=res.source, limit=MAX_INPUT_LENGTH), file=sys.stderr)


def print_result_pretty(
    res: ConstantTermResult,
    output_format: str = "human",
    show_polynomial: bool = False,
) -> None:
    """Print result in specified format.

    Args:
        res: Result of a run
        output_format: "json" for JSON output, "human" for human-readable
        show_polynomial: Also print the expanded polynomial
    """
    if output_format == "json":
        data = res.to_dict()
        if res.ok and show_polynomial:
            poly = build_polynomial(res.k, res.roots)
            data["polynomial"] = sp.sstr(poly.as_expr())
            data["coefficients"] = [str(c) for c in poly.all_coeffs()]
        print(json.dumps(data, indent=2, ensure_ascii=False))
        return
    if not res.ok:
        print_error(res)
        return

    print(f"Successfully read data from {res.source or 'input'}")
    print("\nPolynomial Parameters:")
    print(f"  - Number of roots (n): {res.n}")
    print(f"  - Leading coefficient (k): {res.k}")

    print("\nConverted Roots (decimal):")
    bases = res.bases or [10] * len(res.roots or [])
    for i, (root, base) in enumerate(zip(res.roots or [], bases), 1):
        print(f"  - Root {i}: {root} ({encode(root, base)} in base {base})")

    print("\nCalculation:")
    print(f"  - Product of roots: {res.product}")
    print(f"  - Sign factor (-1)^{res.n}: {res.sign}")

    if show_polynomial:
        poly = build_polynomial(res.k, res.roots or [])
        print(f"\nPolynomial: {sp.sstr(poly.as_expr())}")
        if len(res.roots or []) != res.n:
            print(
                f"  (degree {poly.degree()} from {len(res.roots or [])} roots; "
                f"n={res.n} was declared)"
            )

    print(f"\n## Final Constant Term: {res.constant} ##")


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for Vieta CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        prog="vieta",
        description="Compute a polynomial's constant term from roots given in bases 2-36.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT_FILE,
        help=f"JSON input document, '-' for stdin (default: {DEFAULT_INPUT_FILE})",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "--show-polynomial",
        action="store_true",
        help="Also print the polynomial expanded from the roots",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=LOG_LEVELS,
        default=resolve_level(),
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.version:
        print(VERSION)
        return 0

    if args.health_check:
        return _health_check()

    logger.debug("Reading input from %s", args.input)
    res = compute_from_file(args.input)
    print_result_pretty(
        res, output_format=args.format, show_polynomial=args.show_polynomial
    )
    return 0 if res.ok else 1


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m vieta_pkg.cli"""
    sys.exit(main_entry())

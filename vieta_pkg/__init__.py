"""Vieta package: constant term of a polynomial from roots given in bases 2-36."""

__all__ = [
    "config",
    "decoder",
    "parser",
    "solver",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "compute_constant_term",
    "compute_from_file",
    "compute_from_text",
    "validate_input",
]

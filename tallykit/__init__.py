"""Top-level package for tallykit.

This package provides a variadic accumulator, callback helpers, and a small CLI.
"""

from .core import (  # noqa: F401
    CapturedResult,
    InvalidInput,
    add,
    add_numbers,
    combine_then_callback,
    combine_with_callback,
    subtract,
    sum_numbers,
)

__all__ = [
    "cli",
    "core",
    "CapturedResult",
    "InvalidInput",
    "add",
    "add_numbers",
    "combine_then_callback",
    "combine_with_callback",
    "subtract",
    "sum_numbers",
]

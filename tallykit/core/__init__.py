"""Core operations for tallykit.

Each sub-module is a pure function layer; nothing here prints or keeps state.
"""

from .errors import InvalidInput  # noqa: F401
from .numeric import ensure_number, parse_number  # noqa: F401
from .accumulate import add, add_numbers, subtract, sum_numbers  # noqa: F401
from .callbacks import CapturedResult, combine_then_callback, combine_with_callback  # noqa: F401
from .report import render, to_payload  # noqa: F401

__all__ = [
    "InvalidInput",
    "ensure_number",
    "parse_number",
    "sum_numbers",
    "add_numbers",
    "add",
    "subtract",
    "CapturedResult",
    "combine_with_callback",
    "combine_then_callback",
    "to_payload",
    "render",
]

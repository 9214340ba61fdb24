"""Numeric validation and parsing of operands."""
from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
import math
import numbers
from typing import Any, Optional, Union

from .errors import InvalidInput

Number = Union[int, float, Fraction, Decimal]


def ensure_number(value: Any, position: Optional[int] = None) -> Number:
    """Return *value* unchanged if it is a finite number, else raise ``InvalidInput``.

    ``bool`` is rejected even though it subclasses ``int``.
    """

    where = f" at position {position}" if position is not None else ""
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise InvalidInput(
            f"expected a number{where}, got {type(value).__name__}: {value!r}",
            value=value,
            position=position,
        )
    # rationals are always finite; math.isfinite would overflow on huge ints
    if isinstance(value, Decimal):
        finite = value.is_finite()
    elif isinstance(value, numbers.Rational):
        finite = True
    else:
        finite = math.isfinite(value)
    if not finite:
        raise InvalidInput(f"non-finite number{where}: {value!r}", value=value, position=position)
    return value


def parse_number(text: str) -> Number:
    """Parse a command-line token into an ``int``, ``Fraction`` or ``float``."""

    token = text.strip()
    try:
        return int(token)
    except ValueError:
        pass

    try:
        if "/" in token:
            value: Number = Fraction(token)
        else:
            value = float(token)
    except (ValueError, ZeroDivisionError) as exc:
        raise InvalidInput(f"not a number: {text!r}", value=text) from exc

    return ensure_number(value)


__all__ = ["Number", "ensure_number", "parse_number"]

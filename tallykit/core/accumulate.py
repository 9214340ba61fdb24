"""Variadic accumulator and the binary arithmetic helpers built on it."""
from __future__ import annotations

import decimal
from decimal import Decimal
from fractions import Fraction
import math
from typing import Any, Iterable, List

from .errors import InvalidInput
from .numeric import Number, ensure_number


def _collect(numbers: Iterable[Any]) -> List[Number]:
    try:
        items = iter(numbers)
    except TypeError as exc:
        raise InvalidInput(
            f"expected a sequence of numbers, got {type(numbers).__name__}", value=numbers
        ) from exc
    return [ensure_number(value, idx) for idx, value in enumerate(items)]


def _sum_as_float(values: List[Number]) -> float:
    # floats convert to Fraction without loss, so only the final float() rounds
    exact = sum((Fraction(v) for v in values), Fraction(0))
    try:
        total = float(exact)
    except OverflowError as exc:
        raise InvalidInput(f"sum does not fit in a float: {exc}") from exc
    if not math.isfinite(total):
        raise InvalidInput("sum does not fit in a float")
    return total


def sum_numbers(numbers: Iterable[Any]) -> Number:
    """Return the sum of *numbers*; ``0`` when there are none.

    Integer, ``Fraction`` and ``Decimal`` operands are added exactly. As soon as
    one operand is a ``float`` the exact total is rounded once to a ``float``,
    so the result does not depend on operand order.
    """

    values = _collect(numbers)

    if any(isinstance(v, float) for v in values):
        if any(isinstance(v, Decimal) for v in values):
            raise InvalidInput("cannot add Decimal and float operands together")
        return _sum_as_float(values)

    result: Number = 0
    with decimal.localcontext() as ctx:
        # Decimal additions must never round; Inexact turns any rounding into an error
        ctx.prec = decimal.MAX_PREC
        ctx.traps[decimal.Inexact] = True
        for idx, value in enumerate(values):
            try:
                result = result + value
            except TypeError as exc:
                raise InvalidInput(
                    f"cannot add {type(value).__name__} at position {idx} to {type(result).__name__}",
                    value=value,
                    position=idx,
                ) from exc
            except decimal.DecimalException as exc:
                raise InvalidInput(
                    f"Decimal sum out of range at position {idx}: {exc!r}",
                    value=value,
                    position=idx,
                ) from exc
    return result


def add_numbers(*numbers: Any) -> Number:
    """Variadic form of :func:`sum_numbers`: ``add_numbers(10, 20, 30, 40) == 100``."""
    return sum_numbers(numbers)


def add(a: Any, b: Any) -> Number:
    return sum_numbers((a, b))


def subtract(a: Any, b: Any) -> Number:
    # validate before negating so a bad b is reported at position 1
    a, b = _collect((a, b))
    # unary minus on a Decimal rounds to the context precision; copy_negate does not
    negated = b.copy_negate() if isinstance(b, Decimal) else -b
    return sum_numbers((a, negated))


__all__ = ["sum_numbers", "add_numbers", "add", "subtract"]

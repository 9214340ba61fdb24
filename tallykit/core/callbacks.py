"""Higher-order helpers that hand a computed sum to a callback."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .accumulate import add
from .numeric import Number


@dataclass(frozen=True)
class CapturedResult:
    """A previously computed sum that can be reported on demand.

    Calling the object with no arguments is the same as :meth:`report`.
    """

    value: Number

    def report(self) -> Number:
        return self.value

    def __call__(self) -> Number:
        return self.report()


def _combine(a: Any, b: Any, callback: Callable[[Number], Any]) -> Number:
    if not callable(callback):
        raise TypeError(f"callback must be callable, got {type(callback).__name__}")
    total = add(a, b)
    callback(total)
    return total


def combine_with_callback(a: Any, b: Any, callback: Callable[[Number], Any]) -> None:
    """Add *a* and *b*, then invoke ``callback(total)`` exactly once."""
    _combine(a, b, callback)


def combine_then_callback(a: Any, b: Any, callback: Callable[[Number], Any]) -> CapturedResult:
    """Like :func:`combine_with_callback` but return the sum as a :class:`CapturedResult`."""
    return CapturedResult(_combine(a, b, callback))


__all__ = ["CapturedResult", "combine_with_callback", "combine_then_callback"]

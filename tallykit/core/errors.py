"""Error kinds raised by tallykit operations."""
from __future__ import annotations

from typing import Any, Optional


class InvalidInput(ValueError):
    """Raised when an operand is not a number tallykit can add up."""

    def __init__(self, message: str, value: Any = None, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.value = value
        self.position = position


__all__ = ["InvalidInput"]

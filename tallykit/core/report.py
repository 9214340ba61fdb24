"""Rendering of operation results for the command line."""
from __future__ import annotations

import json
from typing import Any, Dict, Sequence

from .numeric import Number


# ---------------------------------------------------------------------------
# Payload helpers
# ---------------------------------------------------------------------------


def _jsonable(value: Number) -> Any:
    # bool never reaches here; Fraction and Decimal have no JSON number form
    if isinstance(value, (int, float)):
        return value
    return str(value)


def to_payload(operation: str, operands: Sequence[Number], result: Number) -> Dict[str, Any]:  # noqa: D401
    """Build a JSON-serialisable record of one operation."""

    return {
        "operation": operation,
        "operands": [_jsonable(v) for v in operands],
        "count": len(operands),
        "result": _jsonable(result),
    }


# ---------------------------------------------------------------------------
# Text output
# ---------------------------------------------------------------------------


def render(payload: Dict[str, Any], as_json: bool = False) -> str:
    """Return *payload* as indented JSON or a one-line summary."""

    if as_json:
        return json.dumps(payload, indent=2)

    operands = ", ".join(str(v) for v in payload["operands"])
    return f"{payload['operation']}({operands}) = {payload['result']}"


__all__ = ["to_payload", "render"]

"""Aggregations over a model's full domain."""

from __future__ import annotations

from typing import Any, Optional, Tuple

from .errors import UnsupportedOperationError
from .iterator import iter_positions


def _require_numeric(model) -> None:
    kind = model.value_kind
    if not kind.is_numeric:
        raise UnsupportedOperationError(f"{kind.value} models do not support arithmetic")


def total(model) -> Any:
    """Sum of every value in the domain."""
    _require_numeric(model)
    result = 0
    for coordinates in iter_positions(model):
        result = result + model.value_at(coordinates)
    return result


def min_and_max(model, parity: Optional[bool] = None) -> Optional[Tuple[Any, Any]]:
    """Return ``(min, max)`` of the values, or ``None`` if no position matches."""
    _require_numeric(model)
    found = False
    minimum = maximum = None
    for coordinates in iter_positions(model, parity):
        value = model.value_at(coordinates)
        if not found:
            minimum = maximum = value
            found = True
        elif value < minimum:
            minimum = value
        elif value > maximum:
            maximum = value
    if not found:
        return None
    return minimum, maximum

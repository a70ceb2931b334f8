"""Canonical nested traversal of a model's ragged domain."""

from __future__ import annotations

from typing import Any, Iterator, List, Optional

from .coordinates import Coordinates, is_even_position


def iter_positions(model, parity: Optional[bool] = None) -> Iterator[Coordinates]:
    """Yield the in-bounds coordinates of ``model``.

    Axis 0 is outermost and ascending; each inner axis runs over its bounds
    conditioned on the outer prefix already fixed.
    """
    dimension = model.grid_dimension()
    if dimension == 0:
        if parity is None or parity:
            yield ()
        return
    yield from _walk(model, [None] * dimension, 0, parity)


def _walk(model, partial: List[Optional[int]], axis: int, parity: Optional[bool]) -> Iterator[Coordinates]:
    fixed = tuple(partial)
    lower = model.min_coordinate(axis, fixed)
    upper = model.max_coordinate(axis, fixed)
    innermost = axis == len(partial) - 1
    for coordinate in range(lower, upper + 1):
        partial[axis] = coordinate
        if not innermost:
            yield from _walk(model, partial, axis + 1, parity)
        elif parity is None or is_even_position(partial) == parity:
            yield tuple(partial)
    partial[axis] = None


class ModelIterator:
    """Pull-based, one-shot sequence of a model's values."""

    def __init__(self, model) -> None:
        self._model = model
        self._positions = iter_positions(model)

    def __iter__(self) -> "ModelIterator":
        return self

    def __next__(self) -> Any:
        return self._model.value_at(next(self._positions))

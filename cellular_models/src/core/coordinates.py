"""Helpers for full and partial coordinate tuples."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .errors import IllegalArgumentError

Coordinates = Tuple[int, ...]
PartialCoordinates = Tuple[Optional[int], ...]


def unconstrained(dimension: int) -> PartialCoordinates:
    """Partial coordinates with every axis free."""
    return (None,) * dimension


def as_partial(coordinates: Optional[Sequence[Optional[int]]], dimension: int) -> PartialCoordinates:
    """Normalise ``coordinates`` to a tuple of length ``dimension``."""
    if coordinates is None:
        return unconstrained(dimension)
    partial = tuple(coordinates)
    if len(partial) != dimension:
        raise IllegalArgumentError(
            f"Expected {dimension} coordinates, got {len(partial)}"
        )
    return partial


def with_coordinate(coordinates: PartialCoordinates, axis: int, value: Optional[int]) -> PartialCoordinates:
    """Return a copy of ``coordinates`` with ``axis`` set to ``value``."""
    return coordinates[:axis] + (value,) + coordinates[axis + 1 :]


def insert_coordinate(coordinates: Sequence[Optional[int]], axis: int, value: Optional[int]) -> PartialCoordinates:
    """Return ``coordinates`` with ``value`` inserted before position ``axis``."""
    coordinates = tuple(coordinates)
    return coordinates[:axis] + (value,) + coordinates[axis:]


def is_even_position(coordinates: Sequence[int]) -> bool:
    """Whether the coordinate sum is even."""
    return sum(coordinates) % 2 == 0


def check_axis(axis: int, dimension: int) -> None:
    if not 0 <= axis < dimension:
        raise IllegalArgumentError(
            f"The axis must be in [0, {dimension - 1}], got {axis}"
        )

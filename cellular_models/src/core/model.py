"""Abstract value-per-coordinate model over a possibly ragged integer domain."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional, Sequence, Tuple

from .coordinates import Coordinates, as_partial, unconstrained, with_coordinate
from .errors import UnsupportedOperationError
from .values import ValueKind


class Model(ABC):
    """A field of values over an integer coordinate domain at one generation.

    Bounds are layered: ``min_coordinate(axis, coordinates)`` answers the
    range of ``axis`` once the non-``None`` entries of ``coordinates`` are
    fixed. Consumers must query the most specific bound before calling
    ``value_at``, which does no bounds checking of its own.

    Models are single writer: every iterator, aggregate and view reading a
    model must be finished before ``step()`` is called on it.
    """

    _value_kind: ValueKind = ValueKind.OBJECT

    @property
    def value_kind(self) -> ValueKind:
        return self._value_kind

    # ------------------------------------------------------------------
    # Shape and bounds
    # ------------------------------------------------------------------
    @abstractmethod
    def grid_dimension(self) -> int:
        """Number of axes."""

    @abstractmethod
    def axis_label(self, axis: int) -> str:
        """Display name of ``axis``."""

    @abstractmethod
    def min_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        """Smallest legal coordinate of ``axis`` given the fixed ``coordinates``."""

    @abstractmethod
    def max_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        """Largest legal coordinate of ``axis`` given the fixed ``coordinates``."""

    @abstractmethod
    def value_at(self, coordinates: Sequence[int]) -> Any:
        """Return the value at ``coordinates``; undefined outside the bounds."""

    def is_within_bounds(self, coordinates: Sequence[Optional[int]]) -> bool:
        """Whether every fixed entry of ``coordinates`` lies inside the domain.

        Each axis is checked against its bound conditioned on the fixed
        entries of the axes before it.
        """
        dimension = self.grid_dimension()
        partial = as_partial(coordinates, dimension)
        fixed = unconstrained(dimension)
        for axis, coordinate in enumerate(partial):
            if coordinate is None:
                continue
            if coordinate < self.min_coordinate(axis, fixed) or coordinate > self.max_coordinate(axis, fixed):
                return False
            fixed = with_coordinate(fixed, axis, coordinate)
        return True

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def step(self) -> bool:
        """Advance one generation and return whether any value changed."""
        raise UnsupportedOperationError(f"{type(self).__name__} cannot step")

    def is_changed(self) -> Optional[bool]:
        raise UnsupportedOperationError(f"{type(self).__name__} has no generations")

    def current_generation(self) -> int:
        raise UnsupportedOperationError(f"{type(self).__name__} has no generations")

    def name(self) -> str:
        raise UnsupportedOperationError(f"{type(self).__name__} has no name")

    def subfolder_path(self) -> str:
        raise UnsupportedOperationError(f"{type(self).__name__} has no subfolder path")

    def back_up(self, backup_path: str, backup_name: str) -> None:
        raise UnsupportedOperationError(f"{type(self).__name__} cannot be backed up")

    def memory_footprint(self) -> int:
        """Bytes held by the model's own dense storage."""
        raise UnsupportedOperationError(f"{type(self).__name__} cannot report a size")

    # ------------------------------------------------------------------
    # Traversal and aggregates
    # ------------------------------------------------------------------
    def positions(self, parity: Optional[bool] = None) -> Iterator[Coordinates]:
        """Yield in-bounds coordinates in canonical nested order.

        ``parity=True`` keeps even coordinate sums, ``False`` odd ones.
        """
        from .iterator import iter_positions

        return iter_positions(self, parity)

    def iterate(self):
        """Return a fresh one-shot iterator over the values."""
        from .iterator import ModelIterator

        return ModelIterator(self)

    def __iter__(self):
        return self.iterate()

    def total(self) -> Any:
        from .aggregates import total

        return total(self)

    def min_and_max(self) -> Optional[Tuple[Any, Any]]:
        from .aggregates import min_and_max

        return min_and_max(self)

    def even_odd_min_and_max(self, is_even: bool) -> Optional[Tuple[Any, Any]]:
        """Min and max over positions whose coordinate sum has the given parity."""
        from .aggregates import min_and_max

        return min_and_max(self, parity=is_even)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    def cross_section(self, axis: int, coordinate: int) -> "Model":
        """View with ``axis`` fixed at ``coordinate``."""
        from cellular_models.src.views.cross_section import ModelCrossSection

        return ModelCrossSection(self, axis, coordinate)

    def diagonal_cross_section(
        self, first_axis: int, second_axis: int, positive_slope: bool, offset: int
    ) -> "Model":
        """View along ``second = (+/-)first + offset``."""
        from cellular_models.src.views.diagonal_cross_section import ModelDiagonalCrossSection

        return ModelDiagonalCrossSection(self, first_axis, second_axis, positive_slope, offset)

    def subsection(
        self,
        min_coordinates: Sequence[Optional[int]],
        max_coordinates: Sequence[Optional[int]],
    ) -> "Model":
        """View restricted to the inclusive ranges given per axis."""
        from cellular_models.src.views.sub_model import SubModel

        return SubModel(self, min_coordinates, max_coordinates)

"""View of a model along the line ``second = slope * first + offset``."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from cellular_models.src.core.coordinates import (
    PartialCoordinates,
    as_partial,
    check_axis,
    insert_coordinate,
    with_coordinate,
)
from cellular_models.src.core.decorator import ModelDecorator
from cellular_models.src.core.errors import IllegalArgumentError, OutOfBoundsError
from cellular_models.src.core.model import Model
from cellular_models.src.utils.logger import get_logger

logger = get_logger(__name__)


class ModelDiagonalCrossSection(ModelDecorator):
    """``source`` restricted to a diagonal of slope +1 or -1 between two axes.

    The axes are normalised so that ``first_axis < second_axis``; the second
    axis is dropped from the view and derived from the first one.
    """

    def __init__(
        self,
        source: Model,
        first_axis: int,
        second_axis: int,
        positive_slope: bool,
        offset: int,
    ) -> None:
        dimension = source.grid_dimension()
        check_axis(first_axis, dimension)
        check_axis(second_axis, dimension)
        if first_axis == second_axis:
            raise IllegalArgumentError("The axes of a diagonal cross-section must differ")
        if first_axis > second_axis:
            first_axis, second_axis = second_axis, first_axis
            if positive_slope:
                offset = -offset
        super().__init__(source)
        self.first_axis = first_axis
        self.second_axis = second_axis
        self.slope = 1 if positive_slope else -1
        self.offset = offset
        self._diagonal: List[int] = []
        self._update_diagonal()

    def _second(self, first: int) -> int:
        return self.slope * first + self.offset

    def _update_diagonal(self) -> None:
        """Cache the first-axis coordinates whose diagonal point is in bounds."""
        lower = self.source.min_coordinate(self.first_axis)
        upper = self.source.max_coordinate(self.first_axis)
        free = (None,) * self.source.grid_dimension()
        self._diagonal = [
            first for first in range(lower, upper + 1)
            if self.source.is_within_bounds(self._on_diagonal(free, first))
        ]
        if not self._diagonal:
            raise OutOfBoundsError(
                f"The diagonal {self._describe()} does not cross the model's domain"
            )

    def _on_diagonal(self, partial: PartialCoordinates, first: int) -> PartialCoordinates:
        partial = with_coordinate(partial, self.first_axis, first)
        return with_coordinate(partial, self.second_axis, self._second(first))

    def _source_axis(self, axis: int) -> int:
        check_axis(axis, self.grid_dimension())
        return axis if axis < self.second_axis else axis + 1

    def _source_coordinates(self, coordinates: Optional[Sequence[Optional[int]]]) -> PartialCoordinates:
        partial = as_partial(coordinates, self.grid_dimension())
        first = partial[self.first_axis]
        return insert_coordinate(partial, self.second_axis, None if first is None else self._second(first))

    def _bounds(self, axis: int, coordinates) -> Tuple[int, int]:
        source_axis = self._source_axis(axis)
        partial = self._source_coordinates(coordinates)
        if source_axis != self.first_axis and partial[self.first_axis] is not None:
            return (
                self.source.min_coordinate(source_axis, partial),
                self.source.max_coordinate(source_axis, partial),
            )
        partial = with_coordinate(partial, source_axis, None)
        candidates = [
            self._on_diagonal(partial, first) for first in self._diagonal
        ]
        candidates = [c for c in candidates if self.source.is_within_bounds(c)]
        if not candidates:
            return 0, -1
        if source_axis == self.first_axis:
            return candidates[0][self.first_axis], candidates[-1][self.first_axis]
        return (
            min(self.source.min_coordinate(source_axis, c) for c in candidates),
            max(self.source.max_coordinate(source_axis, c) for c in candidates),
        )

    def grid_dimension(self) -> int:
        return self.source.grid_dimension() - 1

    def axis_label(self, axis: int) -> str:
        return self.source.axis_label(self._source_axis(axis))

    def min_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        return self._bounds(axis, coordinates)[0]

    def max_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        return self._bounds(axis, coordinates)[1]

    def value_at(self, coordinates: Sequence[int]) -> Any:
        first = coordinates[self.first_axis]
        return self.source.value_at(insert_coordinate(coordinates, self.second_axis, self._second(first)))

    def step(self) -> bool:
        changed = self.source.step()
        try:
            self._update_diagonal()
        except OutOfBoundsError:
            logger.warning("Diagonal %s no longer crosses its source", self._describe())
            raise
        return changed

    def _describe(self) -> str:
        first_label = self.source.axis_label(self.first_axis)
        second_label = self.source.axis_label(self.second_axis)
        sign = "" if self.slope == 1 else "-"
        shift = "" if self.offset == 0 else f"{self.offset:+d}"
        return f"{second_label}={sign}{first_label}{shift}"

    def subfolder_path(self) -> str:
        return f"{self.source.subfolder_path()}/{self._describe()}"

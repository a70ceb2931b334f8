"""View of a model with one axis fixed at a constant coordinate."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from cellular_models.src.core.coordinates import as_partial, check_axis, insert_coordinate
from cellular_models.src.core.decorator import ModelDecorator
from cellular_models.src.core.errors import OutOfBoundsError
from cellular_models.src.core.model import Model
from cellular_models.src.utils.logger import get_logger

logger = get_logger(__name__)


class ModelCrossSection(ModelDecorator):
    """``source`` restricted to ``axis == coordinate``, one dimension lower.

    Axis ``i`` of the view is axis ``i`` of the source below the fixed axis
    and axis ``i + 1`` from it on; labels follow the source's.
    """

    def __init__(self, source: Model, axis: int, coordinate: int) -> None:
        check_axis(axis, source.grid_dimension())
        super().__init__(source)
        self.axis = axis
        self.coordinate = coordinate
        self._check_coordinate()

    def _check_coordinate(self) -> None:
        lower = self.source.min_coordinate(self.axis)
        upper = self.source.max_coordinate(self.axis)
        if not lower <= self.coordinate <= upper:
            raise OutOfBoundsError(
                f"Coordinate {self.coordinate} is out of bounds [{lower}, {upper}] "
                f"on axis {self.source.axis_label(self.axis)}"
            )

    def _source_axis(self, axis: int) -> int:
        check_axis(axis, self.grid_dimension())
        return axis if axis < self.axis else axis + 1

    def _source_coordinates(self, coordinates: Optional[Sequence[Optional[int]]]):
        partial = as_partial(coordinates, self.grid_dimension())
        return insert_coordinate(partial, self.axis, self.coordinate)

    def grid_dimension(self) -> int:
        return self.source.grid_dimension() - 1

    def axis_label(self, axis: int) -> str:
        return self.source.axis_label(self._source_axis(axis))

    def min_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        return self.source.min_coordinate(self._source_axis(axis), self._source_coordinates(coordinates))

    def max_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        return self.source.max_coordinate(self._source_axis(axis), self._source_coordinates(coordinates))

    def value_at(self, coordinates: Sequence[int]) -> Any:
        return self.source.value_at(insert_coordinate(coordinates, self.axis, self.coordinate))

    def step(self) -> bool:
        changed = self.source.step()
        try:
            self._check_coordinate()
        except OutOfBoundsError:
            logger.warning("Cross-section %s no longer intersects its source", self.subfolder_path())
            raise
        return changed

    def subfolder_path(self) -> str:
        label = self.source.axis_label(self.axis)
        return f"{self.source.subfolder_path()}/{label}={self.coordinate}"

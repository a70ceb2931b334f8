"""View of a model restricted to inclusive per-axis coordinate ranges."""

from __future__ import annotations

from typing import Optional, Sequence

from cellular_models.src.core.coordinates import as_partial, check_axis
from cellular_models.src.core.decorator import ModelDecorator
from cellular_models.src.core.errors import IllegalArgumentError, OutOfBoundsError
from cellular_models.src.core.model import Model
from cellular_models.src.utils.logger import get_logger

logger = get_logger(__name__)


class SubModel(ModelDecorator):
    """``source`` intersected with ``[min, max]`` on every restricted axis.

    ``None`` leaves that side of an axis unrestricted. A restriction that
    misses a ragged part of the domain is legal; the view is then empty there.
    """

    def __init__(
        self,
        source: Model,
        min_coordinates: Sequence[Optional[int]],
        max_coordinates: Sequence[Optional[int]],
    ) -> None:
        dimension = source.grid_dimension()
        mins = as_partial(min_coordinates, dimension)
        maxs = as_partial(max_coordinates, dimension)
        if all(c is None for c in mins + maxs):
            raise IllegalArgumentError("At least one coordinate restriction is required")
        for axis, (lower, upper) in enumerate(zip(mins, maxs)):
            if lower is not None and upper is not None and lower > upper:
                raise IllegalArgumentError(
                    f"Min coordinate {lower} is greater than max coordinate {upper} on axis {axis}"
                )
        super().__init__(source)
        self.min_restrictions = mins
        self.max_restrictions = maxs
        self._check_restrictions()

    def _check_restrictions(self) -> None:
        for axis, (lower, upper) in enumerate(zip(self.min_restrictions, self.max_restrictions)):
            source_lower = self.source.min_coordinate(axis)
            source_upper = self.source.max_coordinate(axis)
            if (lower is not None and lower > source_upper) or (upper is not None and upper < source_lower):
                raise OutOfBoundsError(
                    f"Restriction on axis {self.source.axis_label(axis)} lies outside "
                    f"[{source_lower}, {source_upper}]"
                )

    def min_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        check_axis(axis, self.grid_dimension())
        bound = self.source.min_coordinate(axis, coordinates)
        restriction = self.min_restrictions[axis]
        return bound if restriction is None else max(bound, restriction)

    def max_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        check_axis(axis, self.grid_dimension())
        bound = self.source.max_coordinate(axis, coordinates)
        restriction = self.max_restrictions[axis]
        return bound if restriction is None else min(bound, restriction)

    def step(self) -> bool:
        changed = self.source.step()
        try:
            self._check_restrictions()
        except OutOfBoundsError:
            logger.warning("Sub-region %s no longer intersects its source", self.subfolder_path())
            raise
        return changed

    def subfolder_path(self) -> str:
        parts = []
        for axis, (lower, upper) in enumerate(zip(self.min_restrictions, self.max_restrictions)):
            if lower is None and upper is None:
                continue
            left = "(-∞" if lower is None else f"[{lower}"
            right = "∞)" if upper is None else f"{upper}]"
            parts.append(f"{self.source.axis_label(axis)}{left},{right}")
        return f"{self.source.subfolder_path()}/{'_'.join(parts)}"

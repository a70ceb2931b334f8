"""Five dimensional models with named ``v, w, x, y, z`` axes."""

from __future__ import annotations

from typing import Optional, Sequence

from cellular_models.src.core.coordinates import check_axis
from cellular_models.src.core.decorator import ModelDecorator
from cellular_models.src.core.errors import IllegalArgumentError
from cellular_models.src.core.model import Model

AXES = ("v", "w", "x", "y", "z")


class Model5D(Model):
    """Model with five axes and a named, layered bound API.

    ``min_w()`` is the unconditional bound of ``w``; ``min_w(v=3)`` the bound
    at ``v == 3``; ``min_w(v=3, y=1)`` the bound at ``v == 3`` and ``y == 1``,
    and so on for every axis and every subset of the others. Subclasses
    answer each level in constant time through ``min_coordinate`` and
    ``max_coordinate``.
    """

    def grid_dimension(self) -> int:
        return 5

    def axis_label(self, axis: int) -> str:
        check_axis(axis, 5)
        return AXES[axis]

    # Layered bound queries ------------------------------------------------
    def min_v(self, w: Optional[int] = None, x: Optional[int] = None, y: Optional[int] = None, z: Optional[int] = None) -> int:
        return self.min_coordinate(0, (None, w, x, y, z))

    def max_v(self, w: Optional[int] = None, x: Optional[int] = None, y: Optional[int] = None, z: Optional[int] = None) -> int:
        return self.max_coordinate(0, (None, w, x, y, z))

    def min_w(self, v: Optional[int] = None, x: Optional[int] = None, y: Optional[int] = None, z: Optional[int] = None) -> int:
        return self.min_coordinate(1, (v, None, x, y, z))

    def max_w(self, v: Optional[int] = None, x: Optional[int] = None, y: Optional[int] = None, z: Optional[int] = None) -> int:
        return self.max_coordinate(1, (v, None, x, y, z))

    def min_x(self, v: Optional[int] = None, w: Optional[int] = None, y: Optional[int] = None, z: Optional[int] = None) -> int:
        return self.min_coordinate(2, (v, w, None, y, z))

    def max_x(self, v: Optional[int] = None, w: Optional[int] = None, y: Optional[int] = None, z: Optional[int] = None) -> int:
        return self.max_coordinate(2, (v, w, None, y, z))

    def min_y(self, v: Optional[int] = None, w: Optional[int] = None, x: Optional[int] = None, z: Optional[int] = None) -> int:
        return self.min_coordinate(3, (v, w, x, None, z))

    def max_y(self, v: Optional[int] = None, w: Optional[int] = None, x: Optional[int] = None, z: Optional[int] = None) -> int:
        return self.max_coordinate(3, (v, w, x, None, z))

    def min_z(self, v: Optional[int] = None, w: Optional[int] = None, x: Optional[int] = None, y: Optional[int] = None) -> int:
        return self.min_coordinate(4, (v, w, x, y, None))

    def max_z(self, v: Optional[int] = None, w: Optional[int] = None, x: Optional[int] = None, y: Optional[int] = None) -> int:
        return self.max_coordinate(4, (v, w, x, y, None))

    # Cross-sections -------------------------------------------------------
    def cross_section_at_v(self, v: int) -> Model:
        return self.cross_section(0, v)

    def cross_section_at_w(self, w: int) -> Model:
        return self.cross_section(1, w)

    def cross_section_at_x(self, x: int) -> Model:
        return self.cross_section(2, x)

    def cross_section_at_y(self, y: int) -> Model:
        return self.cross_section(3, y)

    def cross_section_at_z(self, z: int) -> Model:
        return self.cross_section(4, z)

    # Diagonal cross-sections, one per axis pair ---------------------------
    def diagonal_cross_section_on_vw(self, positive_slope: bool, offset: int) -> Model:
        return self.diagonal_cross_section(0, 1, positive_slope, offset)

    def diagonal_cross_section_on_vx(self, positive_slope: bool, offset: int) -> Model:
        return self.diagonal_cross_section(0, 2, positive_slope, offset)

    def diagonal_cross_section_on_vy(self, positive_slope: bool, offset: int) -> Model:
        return self.diagonal_cross_section(0, 3, positive_slope, offset)

    def diagonal_cross_section_on_vz(self, positive_slope: bool, offset: int) -> Model:
        return self.diagonal_cross_section(0, 4, positive_slope, offset)

    def diagonal_cross_section_on_wx(self, positive_slope: bool, offset: int) -> Model:
        return self.diagonal_cross_section(1, 2, positive_slope, offset)

    def diagonal_cross_section_on_wy(self, positive_slope: bool, offset: int) -> Model:
        return self.diagonal_cross_section(1, 3, positive_slope, offset)

    def diagonal_cross_section_on_wz(self, positive_slope: bool, offset: int) -> Model:
        return self.diagonal_cross_section(1, 4, positive_slope, offset)

    def diagonal_cross_section_on_xy(self, positive_slope: bool, offset: int) -> Model:
        return self.diagonal_cross_section(2, 3, positive_slope, offset)

    def diagonal_cross_section_on_xz(self, positive_slope: bool, offset: int) -> Model:
        return self.diagonal_cross_section(2, 4, positive_slope, offset)

    def diagonal_cross_section_on_yz(self, positive_slope: bool, offset: int) -> Model:
        return self.diagonal_cross_section(3, 4, positive_slope, offset)

    def subsection(
        self,
        min_coordinates: Sequence[Optional[int]],
        max_coordinates: Sequence[Optional[int]],
    ) -> "Model5D":
        """Sub-region view that keeps the named 5D API."""
        return ModelAs5D(super().subsection(min_coordinates, max_coordinates))


class ModelAs5D(ModelDecorator, Model5D):
    """Exposes any five dimensional model through the ``Model5D`` API."""

    def __init__(self, source: Model) -> None:
        dimension = source.grid_dimension()
        if dimension != 5:
            raise IllegalArgumentError(f"Expected a model of dimension 5, got {dimension}")
        super().__init__(source)

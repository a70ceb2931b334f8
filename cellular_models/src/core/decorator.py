"""Shared delegation for views wrapping a single source model."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from .model import Model
from .values import ValueKind


class ModelDecorator(Model):
    """Forwards every query and the lifecycle to ``source``.

    The source is borrowed, never copied; the view is only valid while the
    source stays at the generation the view was built or last stepped at.
    """

    def __init__(self, source: Model) -> None:
        self.source = source

    @property
    def value_kind(self) -> ValueKind:
        return self.source.value_kind

    def grid_dimension(self) -> int:
        return self.source.grid_dimension()

    def axis_label(self, axis: int) -> str:
        return self.source.axis_label(axis)

    def min_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        return self.source.min_coordinate(axis, coordinates)

    def max_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        return self.source.max_coordinate(axis, coordinates)

    def value_at(self, coordinates: Sequence[int]) -> Any:
        return self.source.value_at(coordinates)

    def step(self) -> bool:
        return self.source.step()

    def is_changed(self) -> Optional[bool]:
        return self.source.is_changed()

    def current_generation(self) -> int:
        return self.source.current_generation()

    def name(self) -> str:
        return self.source.name()

    def subfolder_path(self) -> str:
        return self.source.subfolder_path()

    def back_up(self, backup_path: str, backup_name: str) -> None:
        self.source.back_up(backup_path, backup_name)

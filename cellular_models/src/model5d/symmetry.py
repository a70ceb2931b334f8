"""Folding of sign and permutation symmetric models onto their canonical domain."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Optional, Sequence, Tuple

from cellular_models.src.core.coordinates import PartialCoordinates, as_partial, check_axis
from cellular_models.src.core.decorator import ModelDecorator
from cellular_models.src.core.model import Model
from cellular_models.src.core.values import ValueKind

from .model5d import Model5D


def canonicalize(coordinates: Sequence[int]) -> Tuple[int, ...]:
    """Absolute values sorted in descending order by repeated adjacent swaps."""
    coords = [abs(c) for c in coordinates]
    is_sorted = False
    while not is_sorted:
        is_sorted = True
        for i in range(len(coords) - 1):
            if coords[i] < coords[i + 1]:
                coords[i], coords[i + 1] = coords[i + 1], coords[i]
                is_sorted = False
    return tuple(coords)


def canonical_min(axis: int, coordinates: PartialCoordinates) -> int:
    """Lower bound of ``axis`` in ``c0 >= c1 >= ... >= 0``: nearest fixed later axis."""
    for coordinate in coordinates[axis + 1 :]:
        if coordinate is not None:
            return coordinate
    return 0


def canonical_max(axis: int, coordinates: PartialCoordinates, upper: int) -> int:
    """Upper bound of ``axis`` in ``upper >= c0 >= c1 >= ...``: nearest fixed earlier axis."""
    for coordinate in reversed(coordinates[:axis]):
        if coordinate is not None:
            return coordinate
    return upper


class SymmetricModel5D(Model5D):
    """Model invariant under sign flips and permutations of its coordinates."""

    @abstractmethod
    def asymmetric_min_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        """Lower bound of ``axis`` inside the canonical domain."""

    @abstractmethod
    def asymmetric_max_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        """Upper bound of ``axis`` inside the canonical domain."""

    @abstractmethod
    def asymmetric_value_at(self, coordinates: Sequence[int]) -> Any:
        """Value at canonical ``coordinates``."""

    def value_at(self, coordinates: Sequence[int]) -> Any:
        return self.asymmetric_value_at(canonicalize(coordinates))

    def asymmetric_section(self) -> "AsymmetricModelSection5D":
        return AsymmetricModelSection5D(self)


class IsotropicHypercubicModel5DA(SymmetricModel5D):
    """Symmetric model over the hypercube ``[-M, M]^5`` with ``M = asymmetric_max_v()``."""

    @abstractmethod
    def asymmetric_max_v(self) -> int:
        """Largest canonical ``v``."""

    def min_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        check_axis(axis, 5)
        return -self.asymmetric_max_v()

    def max_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        check_axis(axis, 5)
        return self.asymmetric_max_v()

    def asymmetric_min_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        check_axis(axis, 5)
        return canonical_min(axis, as_partial(coordinates, 5))

    def asymmetric_max_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        check_axis(axis, 5)
        return canonical_max(axis, as_partial(coordinates, 5), self.asymmetric_max_v())

    def get_size(self) -> int:
        """Number of canonical values along ``v``."""
        return self.asymmetric_max_v() + 1


class AsymmetricModelSection5D(ModelDecorator, Model5D):
    """View of a symmetric model restricted to ``v >= w >= x >= y >= z >= 0``."""

    def __init__(self, source: SymmetricModel5D) -> None:
        super().__init__(source)

    def min_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        return self.source.asymmetric_min_coordinate(axis, coordinates)

    def max_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        return self.source.asymmetric_max_coordinate(axis, coordinates)

    def value_at(self, coordinates: Sequence[int]) -> Any:
        return self.source.asymmetric_value_at(coordinates)

    def subfolder_path(self) -> str:
        return f"{self.source.subfolder_path()}/asymmetric_section"

    def memory_footprint(self) -> int:
        return self.source.memory_footprint()


class IsotropicHypercubicModel5D(IsotropicHypercubicModel5DA):
    """Full symmetric model unfolded from a model of its canonical domain.

    ``section`` must answer the canonical bounds, as ``AnisotropicArrayGrid5D``
    does; its values are mirrored onto every sign flip and permutation.
    """

    def __init__(self, section: Model) -> None:
        self.section = section

    @property
    def value_kind(self) -> ValueKind:
        return self.section.value_kind

    def asymmetric_max_v(self) -> int:
        return self.section.max_coordinate(0)

    def asymmetric_value_at(self, coordinates: Sequence[int]) -> Any:
        return self.section.value_at(coordinates)

    def step(self) -> bool:
        return self.section.step()

    def is_changed(self) -> Optional[bool]:
        return self.section.is_changed()

    def current_generation(self) -> int:
        return self.section.current_generation()

    def name(self) -> str:
        return self.section.name()

    def subfolder_path(self) -> str:
        return self.section.subfolder_path()

    def back_up(self, backup_path: str, backup_name: str) -> None:
        self.section.back_up(backup_path, backup_name)

    def memory_footprint(self) -> int:
        return self.section.memory_footprint()

"""Views of the difference between the current and an earlier generation."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Optional, Sequence

from cellular_models.src.arrays.triangular import TriangularArray, copy_triangular_array, measure_footprint
from cellular_models.src.core.errors import IllegalArgumentError, UnsupportedOperationError
from cellular_models.src.core.values import ValueKind
from cellular_models.src.utils.logger import get_logger

from .anisotropic import IsotropicHypercubicArrayModel5DA
from .symmetry import IsotropicHypercubicModel5DA

logger = get_logger(__name__)

_SUFFIXES = {1: "delta", 2: "two_steps_delta"}


class IsotropicHypercubicArrayModel5DStepsDelta(IsotropicHypercubicModel5DA):
    """``model`` at generation N minus ``model`` at generation N - ``steps_back``.

    Construction steps ``model`` ``steps_back`` times, copying its storage
    before each step. Every later ``step()`` drops the oldest copy, copies
    the current storage and only then steps ``model``. The domain is the
    part of the current canonical domain the oldest copy also covers.
    """

    def __init__(self, model: IsotropicHypercubicArrayModel5DA, steps_back: int = 1) -> None:
        if steps_back not in _SUFFIXES:
            raise IllegalArgumentError(f"steps_back must be 1 or 2, got {steps_back}")
        if not model.value_kind.is_numeric:
            raise UnsupportedOperationError(
                f"{model.value_kind.value} models do not support subtraction"
            )
        self.model = model
        self.steps_back = steps_back
        self._retained: Deque[TriangularArray] = deque()
        for _ in range(steps_back):
            self._retain()
            model.step()

    def _retain(self) -> None:
        self._retained.append(copy_triangular_array(self.model.grid))

    @property
    def value_kind(self) -> ValueKind:
        return self.model.value_kind

    def step(self) -> bool:
        self._retained.popleft()
        self._retain()
        logger.debug(
            "Retained generation %d of %s for %s",
            self.model.current_generation(), self.model.name(), _SUFFIXES[self.steps_back],
        )
        return self.model.step()

    def asymmetric_max_v(self) -> int:
        return min(self.model.asymmetric_max_v(), len(self._retained[0]) - 1)

    def asymmetric_value_at(self, coordinates: Sequence[int]) -> Any:
        v, w, x, y, z = coordinates
        older = self.value_kind.to_python(self._retained[0][v][w][x][y][z])
        return self.model.asymmetric_value_at(coordinates) - older

    def is_changed(self) -> Optional[bool]:
        return self.model.is_changed()

    def current_generation(self) -> int:
        return self.model.current_generation()

    def name(self) -> str:
        return self.model.name()

    def subfolder_path(self) -> str:
        return f"{self.model.subfolder_path()}/{_SUFFIXES[self.steps_back]}"

    def back_up(self, backup_path: str, backup_name: str) -> None:
        self.model.back_up(backup_path, backup_name)

    def memory_footprint(self) -> int:
        """Bytes held by the retained copies."""
        return sum(measure_footprint(snapshot) for snapshot in self._retained)

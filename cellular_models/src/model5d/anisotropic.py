"""Grids stored as triangular arrays over the canonical domain ``v >= w >= x >= y >= z >= 0``."""

from __future__ import annotations

import pickle
from pathlib import Path
from typing import Any, Callable, Optional, Sequence, Tuple

from cellular_models.src.arrays.triangular import (
    TriangularArray,
    as_triangular_array,
    measure_footprint,
    validate_triangular_array,
)
from cellular_models.src.core.coordinates import as_partial, check_axis
from cellular_models.src.core.values import ValueKind
from cellular_models.src.utils.logger import get_logger

from .model5d import Model5D
from .symmetry import IsotropicHypercubicModel5D, IsotropicHypercubicModel5DA, canonical_max, canonical_min

logger = get_logger(__name__)

# Update rule collaborator: (grid, generation) -> (next grid, changed).
# It may mutate ``grid`` in place and return it, or return a new array.
StepRule = Callable[[TriangularArray, int], Tuple[TriangularArray, bool]]


class AnisotropicArrayGrid5D(Model5D):
    """Immutable snapshot of a canonical domain of side ``len(values)``."""

    def __init__(self, values: Sequence[Any], value_kind: ValueKind = ValueKind.LONG) -> None:
        self._value_kind = value_kind
        self.grid = as_triangular_array(values, value_kind.dtype)

    def min_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        check_axis(axis, 5)
        return canonical_min(axis, as_partial(coordinates, 5))

    def max_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        check_axis(axis, 5)
        return canonical_max(axis, as_partial(coordinates, 5), len(self.grid) - 1)

    def value_at(self, coordinates: Sequence[int]) -> Any:
        v, w, x, y, z = coordinates
        return self._value_kind.to_python(self.grid[v][w][x][y][z])

    def memory_footprint(self) -> int:
        return measure_footprint(self.grid)

    def whole_grid(self) -> IsotropicHypercubicModel5D:
        """The full symmetric model this canonical domain stands for."""
        return IsotropicHypercubicModel5D(self)


class IsotropicHypercubicArrayModel5DA(IsotropicHypercubicModel5DA):
    """Live symmetric model whose canonical domain is held in ``grid``.

    Only ``step()`` mutates ``grid``, by handing it to ``step_rule``; the rule
    may clear, grow or replace the array between generations.
    """

    def __init__(
        self,
        grid: TriangularArray,
        step_rule: StepRule,
        name: str,
        value_kind: ValueKind = ValueKind.LONG,
        subfolder_path: Optional[str] = None,
        generation: int = 0,
    ) -> None:
        validate_triangular_array(grid)
        self.grid = grid
        self.step_rule = step_rule
        self._value_kind = value_kind
        self._name = name
        self._subfolder_path = subfolder_path if subfolder_path is not None else f"{name}/5D"
        self._generation = generation
        self._changed: Optional[bool] = None

    def asymmetric_max_v(self) -> int:
        return len(self.grid) - 1

    def asymmetric_value_at(self, coordinates: Sequence[int]) -> Any:
        v, w, x, y, z = coordinates
        return self._value_kind.to_python(self.grid[v][w][x][y][z])

    def step(self) -> bool:
        self.grid, changed = self.step_rule(self.grid, self._generation)
        self._generation += 1
        self._changed = bool(changed)
        logger.debug(
            "%s reached generation %d (changed=%s, side=%d)",
            self._name, self._generation, self._changed, len(self.grid),
        )
        return self._changed

    def is_changed(self) -> Optional[bool]:
        """``None`` until the first step."""
        return self._changed

    def current_generation(self) -> int:
        return self._generation

    def name(self) -> str:
        return self._name

    def subfolder_path(self) -> str:
        return self._subfolder_path

    def memory_footprint(self) -> int:
        return measure_footprint(self.grid)

    def back_up(self, backup_path: str, backup_name: str) -> None:
        """Pickle the storage and counters to ``backup_path/backup_name``."""
        path = Path(backup_path)
        path.mkdir(parents=True, exist_ok=True)
        state = {
            "grid": self.grid,
            "generation": self._generation,
            "changed": self._changed,
            "name": self._name,
            "subfolder_path": self._subfolder_path,
            "value_kind": self._value_kind.value,
        }
        with open(path / backup_name, "wb") as f:
            pickle.dump(state, f)
        logger.info("Backed up %s at generation %d to %s", self._name, self._generation, path / backup_name)

    @classmethod
    def from_backup(cls, backup_file: str, step_rule: StepRule) -> "IsotropicHypercubicArrayModel5DA":
        """Restore a model written by ``back_up``."""
        with open(backup_file, "rb") as f:
            state = pickle.load(f)
        model = cls(
            state["grid"],
            step_rule,
            state["name"],
            value_kind=ValueKind(state["value_kind"]),
            subfolder_path=state["subfolder_path"],
            generation=state["generation"],
        )
        model._changed = state["changed"]
        return model

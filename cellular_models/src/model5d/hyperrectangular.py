"""Snapshot grids with independent bounds per axis, backed by a 5-D numpy array."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from cellular_models.src.arrays.triangular import measure_footprint
from cellular_models.src.core.coordinates import check_axis
from cellular_models.src.core.errors import EmptyShapeError, IllegalArgumentError, IrregularShapeError
from cellular_models.src.core.values import ValueKind, to_storage
from cellular_models.src.utils import config_loader
from cellular_models.src.utils.logger import get_logger

from .model5d import AXES, Model5D

logger = get_logger(__name__)


def regular_shape(values: Any, dimension: int = 5) -> Tuple[int, ...]:
    """Return the shape of nested ``values`` or raise if it is empty or ragged."""
    if isinstance(values, np.ndarray):
        if values.ndim != dimension:
            raise IrregularShapeError(f"Expected {dimension} dimensions, got {values.ndim}")
        if 0 in values.shape:
            raise EmptyShapeError(f"The array has zero extent: shape {values.shape}")
        return tuple(values.shape)
    shape: List[int] = []
    level = values
    for axis in range(dimension):
        if not hasattr(level, "__len__"):
            raise IrregularShapeError(f"Expected {dimension} levels of nesting, got {axis}")
        if len(level) == 0:
            raise EmptyShapeError(f"The array has zero extent on axis {AXES[axis] if dimension == 5 else axis}")
        shape.append(len(level))
        level = level[0]
    _check_regular(values, shape, ())
    return tuple(shape)


def _check_regular(values: Any, shape: List[int], index: tuple) -> None:
    depth = len(index)
    if not hasattr(values, "__len__") or len(values) != shape[depth]:
        raise IrregularShapeError(
            f"The array is not regular: element {index} does not have length {shape[depth]}"
        )
    if depth + 1 < len(shape):
        for i, sub in enumerate(values):
            _check_regular(sub, shape, index + (i,))


class HyperrectangularArrayGrid5D(Model5D):
    """Immutable snapshot whose domain is ``[min, max]`` on every axis."""

    def __init__(self, min_coordinates: Sequence[int], shape: Sequence[int]) -> None:
        if len(min_coordinates) != 5 or len(shape) != 5:
            raise IllegalArgumentError("A 5D grid needs five min coordinates and five extents")
        self._mins = tuple(int(c) for c in min_coordinates)
        self._set_max_coordinates(shape)

    def _set_max_coordinates(self, shape: Sequence[int]) -> None:
        maxs = []
        for axis, (lower, extent) in enumerate(zip(self._mins, shape)):
            if lower < -config_loader.MAX_COORDINATE - 1:
                raise IllegalArgumentError(
                    f"Min {AXES[axis]} ({lower}) is below the supported min "
                    f"({-config_loader.MAX_COORDINATE - 1})"
                )
            upper = lower + int(extent) - 1
            if upper > config_loader.MAX_COORDINATE:
                raise IllegalArgumentError(
                    f"Resulting max {AXES[axis]} ({upper}) exceeds the supported max "
                    f"({config_loader.MAX_COORDINATE})"
                )
            maxs.append(upper)
        self._maxs = tuple(maxs)

    def min_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        check_axis(axis, 5)
        return self._mins[axis]

    def max_coordinate(self, axis: int, coordinates: Optional[Sequence[Optional[int]]] = None) -> int:
        check_axis(axis, 5)
        return self._maxs[axis]


class RegularArrayGrid5D(HyperrectangularArrayGrid5D):
    """Snapshot copied from a regular nested sequence or 5-D array.

    ``values[i][j][k][l][m]`` lands at ``min_coordinates + (i, j, k, l, m)``.
    """

    _value_kind = ValueKind.LONG

    def __init__(
        self,
        values: Any,
        min_coordinates: Sequence[int] = (0, 0, 0, 0, 0),
        value_kind: Optional[ValueKind] = None,
    ) -> None:
        if value_kind is not None:
            self._value_kind = value_kind
        shape = regular_shape(values)
        super().__init__(min_coordinates, shape)
        self.values = to_storage(values, self._value_kind.dtype)
        logger.debug("Built %s of shape %s at %s", type(self).__name__, shape, self._mins)

    def value_at(self, coordinates: Sequence[int]) -> Any:
        index = tuple(c - lower for c, lower in zip(coordinates, self._mins))
        return self._value_kind.to_python(self.values[index])

    def memory_footprint(self) -> int:
        return measure_footprint(self.values)


class RegularBooleanGrid5D(RegularArrayGrid5D):
    _value_kind = ValueKind.BOOLEAN


class RegularIntGrid5D(RegularArrayGrid5D):
    _value_kind = ValueKind.INT


class RegularLongGrid5D(RegularArrayGrid5D):
    _value_kind = ValueKind.LONG


class RegularNumericGrid5D(RegularArrayGrid5D):
    """Arbitrary precision values (``int``, ``Fraction``, ``Decimal``) in an object array."""

    _value_kind = ValueKind.NUMERIC

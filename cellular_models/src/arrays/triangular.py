"""Triangular (simplex) nested storage for canonical 5D domains.

A triangular array of side ``s`` and dimension ``d`` is a list of ``s``
triangular arrays of dimension ``d - 1`` whose sides are ``1 .. s``; the
one-dimensional level is a numpy vector. Element ``[v][w][x][y][z]`` exists
exactly when ``s > v >= w >= x >= y >= z >= 0``.
"""

from __future__ import annotations

import functools
import math
import struct
import sys
from typing import Any, List, Sequence, Union

import numpy as np

from cellular_models.src.core.errors import EmptyShapeError, IrregularShapeError
from cellular_models.src.core.values import to_storage
from cellular_models.src.utils import config_loader
from cellular_models.src.utils.logger import get_logger

logger = get_logger(__name__)

TriangularArray = Union[List[Any], np.ndarray]

_EMPTY_LIST_SIZE = sys.getsizeof([])
_POINTER_SIZE = struct.calcsize("P")


def build_triangular_array(side: int, dtype: Any, dimension: int = 5) -> TriangularArray:
    """Allocate a zero-filled triangular array."""
    if dimension == 1:
        return np.zeros(side, dtype=dtype)
    array: List[Any] = [None] * side
    for i in range(side):
        array[i] = build_triangular_array(i + 1, dtype, dimension - 1)
    return array


def copy_triangular_array(array: TriangularArray, dimension: int = 5) -> TriangularArray:
    """Return an independent deep copy sharing no buffers with ``array``."""
    if dimension == 1:
        return np.array(array)
    copy: List[Any] = [None] * len(array)
    for i, sub in enumerate(array):
        copy[i] = copy_triangular_array(sub, dimension - 1)
    return copy


def validate_triangular_array(values: Sequence[Any], dimension: int = 5) -> None:
    """Raise unless ``values`` is a non-empty triangular nesting of ``dimension`` levels."""
    if len(values) == 0:
        raise EmptyShapeError("A triangular array cannot be empty")
    _check_triangular(values, dimension, ())


def _check_triangular(values: Sequence[Any], dimension: int, index: tuple) -> None:
    if dimension == 1:
        if isinstance(values, np.ndarray) and values.ndim != 1:
            raise IrregularShapeError(f"Leaf at {index} must be one-dimensional")
        return
    for i, sub in enumerate(values):
        if not hasattr(sub, "__len__") or len(sub) != i + 1:
            raise IrregularShapeError(
                f"Sub-array at {index + (i,)} must have length {i + 1}"
            )
        _check_triangular(sub, dimension - 1, index + (i,))


def as_triangular_array(values: Sequence[Any], dtype: Any, dimension: int = 5) -> TriangularArray:
    """Validate nested ``values`` and copy them into fresh triangular storage."""
    validate_triangular_array(values, dimension)
    return _convert(values, dtype, dimension)


def _convert(values: Sequence[Any], dtype: Any, dimension: int) -> TriangularArray:
    if dimension == 1:
        return to_storage(values, dtype)
    array: List[Any] = [None] * len(values)
    for i, sub in enumerate(values):
        array[i] = _convert(sub, dtype, dimension - 1)
    return array


def triangular_position_count(dimension: int, side: int) -> int:
    """Number of positions ``side > c0 >= c1 >= ... >= 0`` in ``dimension`` axes."""
    if side <= 0:
        return 0
    return math.comb(side + dimension - 1, dimension)


# ----------------------------------------------------------------------
# Memory footprint
# ----------------------------------------------------------------------
def _round_up(size: int) -> int:
    granularity = config_loader.ALLOCATION_GRANULARITY
    return -(-size // granularity) * granularity


@functools.lru_cache(maxsize=None)
def _empty_vector_size(dtype: np.dtype) -> int:
    return sys.getsizeof(np.empty(0, dtype=dtype))


def _list_footprint(length: int) -> int:
    return _round_up(_EMPTY_LIST_SIZE + _POINTER_SIZE * length)


def _vector_footprint(length: int, dtype: np.dtype) -> int:
    return _round_up(_empty_vector_size(dtype) + dtype.itemsize * length)


def triangular_array_footprint(side: int, dtype: Any, dimension: int = 5) -> int:
    """Bytes a triangular array of ``side`` would occupy, computed without building it.

    Each list counts its header plus one pointer per slot and each numpy
    vector its header plus its element buffer, every allocation rounded up
    to ``ALLOCATION_GRANULARITY``. Referenced Python objects of ``object``
    vectors are not counted.
    """
    dtype = np.dtype(dtype)
    # sizes[k]: footprint of a triangular array of side k at the current level
    sizes = [_vector_footprint(k, dtype) for k in range(side + 1)]
    for _ in range(dimension - 1):
        running = 0
        next_sizes = []
        for k in range(side + 1):
            if k > 0:
                running += sizes[k]
            next_sizes.append(_list_footprint(k) + running)
        sizes = next_sizes
    return sizes[side]


def measure_footprint(array: TriangularArray) -> int:
    """Measure an allocated nested array with the rules of ``triangular_array_footprint``."""
    if isinstance(array, np.ndarray):
        return _round_up(sys.getsizeof(array))
    return _round_up(sys.getsizeof(array)) + sum(measure_footprint(sub) for sub in array)


def max_side_within(max_bytes: int, dtype: Any, dimension: int = 5) -> int:
    """Largest side whose triangular array fits in ``max_bytes``."""
    side = 0
    while triangular_array_footprint(side + 1, dtype, dimension) <= max_bytes:
        side += 1
    logger.debug("Max triangular side within %d bytes: %d", max_bytes, side)
    return side

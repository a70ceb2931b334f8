"""Dense nested storage helpers."""

from .triangular import (
    as_triangular_array,
    build_triangular_array,
    copy_triangular_array,
    max_side_within,
    measure_footprint,
    triangular_array_footprint,
    triangular_position_count,
    validate_triangular_array,
)

__all__ = [
    "as_triangular_array",
    "build_triangular_array",
    "copy_triangular_array",
    "max_side_within",
    "measure_footprint",
    "triangular_array_footprint",
    "triangular_position_count",
    "validate_triangular_array",
]

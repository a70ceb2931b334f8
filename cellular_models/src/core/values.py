"""Value capability variants shared by every model."""

from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np

from .errors import IllegalArgumentError


class ValueKind(Enum):
    """Tagged variant describing what a model stores and which arithmetic it offers."""

    BOOLEAN = "boolean"
    INT = "int"
    LONG = "long"
    NUMERIC = "numeric"
    OBJECT = "object"

    @property
    def dtype(self) -> np.dtype:
        """numpy dtype used by dense storage of this kind."""
        return np.dtype(_DTYPES[self])

    @property
    def is_numeric(self) -> bool:
        return self in (ValueKind.INT, ValueKind.LONG, ValueKind.NUMERIC)

    def to_python(self, value: Any) -> Any:
        """Convert a stored element to a plain Python value."""
        if self is ValueKind.BOOLEAN:
            return bool(value)
        if self in (ValueKind.INT, ValueKind.LONG):
            return int(value)
        return value


_DTYPES = {
    ValueKind.BOOLEAN: np.bool_,
    ValueKind.INT: np.int32,
    ValueKind.LONG: np.int64,
    ValueKind.NUMERIC: object,
    ValueKind.OBJECT: object,
}


def to_storage(values: Any, dtype: Any) -> np.ndarray:
    """Copy ``values`` into a new ``dtype`` array, refusing integers it cannot hold."""
    dtype = np.dtype(dtype)
    source = np.asarray(values)
    if dtype.kind in "iu" and source.size and source.dtype.kind in "iufO":
        info = np.iinfo(dtype)
        lowest, highest = source.min(), source.max()
        if lowest < info.min or highest > info.max:
            raise IllegalArgumentError(
                f"Values in [{lowest}, {highest}] do not fit in {dtype.name}"
            )
    return np.array(source, dtype=dtype)

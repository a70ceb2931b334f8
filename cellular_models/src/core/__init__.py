"""Model contract, value kinds and traversal helpers."""

from .errors import (
    EmptyShapeError,
    IllegalArgumentError,
    IrregularShapeError,
    ModelError,
    OutOfBoundsError,
    UnsupportedOperationError,
)
from .values import ValueKind
from .model import Model
from .decorator import ModelDecorator
from .iterator import ModelIterator, iter_positions

__all__ = [
    "EmptyShapeError",
    "IllegalArgumentError",
    "IrregularShapeError",
    "Model",
    "ModelDecorator",
    "ModelError",
    "ModelIterator",
    "OutOfBoundsError",
    "UnsupportedOperationError",
    "ValueKind",
    "iter_positions",
]

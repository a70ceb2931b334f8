"""Error kinds raised by models and views."""


class ModelError(Exception):
    """Base class for every model failure."""


class OutOfBoundsError(ModelError, ValueError):
    """A view was built, or re-validated after a step, outside its source's bounds."""


class UnsupportedOperationError(ModelError, NotImplementedError):
    """The model lacks the requested capability (stepping, backup, size, arithmetic)."""


class IrregularShapeError(ModelError, ValueError):
    """A dense grid was built from an array that is not (hyper)rectangular or triangular."""


class EmptyShapeError(ModelError, ValueError):
    """A dense grid was built from an array with zero extent along some axis."""


class IllegalArgumentError(ModelError, ValueError):
    """An argument is invalid, e.g. an axis index or a bound past ``MAX_COORDINATE``."""

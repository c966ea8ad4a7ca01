"""
Domain layer of ndarr: interfaces, error taxonomy and index arithmetic.

Nothing in this package depends on a storage backend; the concrete
NumPy-backed implementations live in :mod:`ndarr.infrastructure`.
"""

from ._errors import (
    AxisOutOfRangeError,
    DivisionByZeroError,
    IndexArityError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    NdArrayError,
    NumericDomainError,
    ShapeMismatchError,
    UnsupportedAxisError,
)
from ._ndarray import INdArray
from ._shape import IShape

__all__ = [
    AxisOutOfRangeError.__name__,
    DivisionByZeroError.__name__,
    IndexArityError.__name__,
    IndexOutOfBoundsError.__name__,
    InvalidArgumentError.__name__,
    NdArrayError.__name__,
    NumericDomainError.__name__,
    ShapeMismatchError.__name__,
    UnsupportedAxisError.__name__,
    INdArray.__name__,
    IShape.__name__,
]

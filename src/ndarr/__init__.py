"""
ndarr: an N-dimensional array engine on top of NumPy.

Arrays are flat row-major buffers paired with an immutable shape. The
engine provides broadcasting elementwise arithmetic, axis reductions,
extrema over the last two axes of batched matrices, concatenation along any
axis and structural transforms. Every operation returns a new array.

Logging
-------
The package logger carries a ``NullHandler``; call
:func:`configure_logging` to see engine ``DEBUG`` records.
"""

import logging

from .domain import (
    AxisOutOfRangeError,
    DivisionByZeroError,
    IndexArityError,
    IndexOutOfBoundsError,
    INdArray,
    InvalidArgumentError,
    IShape,
    NdArrayError,
    NumericDomainError,
    ShapeMismatchError,
    UnsupportedAxisError,
)
from .infrastructure import (
    NdArray,
    Settings,
    Shape,
    as_shape,
    axis_extrema,
    configure_logging,
    get_seq,
    get_settings,
    merge,
    reduction,
    reset_settings,
    to_int,
)
from .infrastructure._config import PACKAGE_LOGGER_NAME

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    AxisOutOfRangeError.__name__,
    DivisionByZeroError.__name__,
    IndexArityError.__name__,
    IndexOutOfBoundsError.__name__,
    INdArray.__name__,
    InvalidArgumentError.__name__,
    IShape.__name__,
    NdArrayError.__name__,
    NumericDomainError.__name__,
    ShapeMismatchError.__name__,
    UnsupportedAxisError.__name__,
    NdArray.__name__,
    Settings.__name__,
    Shape.__name__,
    as_shape.__name__,
    "axis_extrema",
    configure_logging.__name__,
    get_seq.__name__,
    get_settings.__name__,
    merge.__name__,
    "reduction",
    reset_settings.__name__,
    to_int.__name__,
]

"""
NumPy-backed implementations of the ndarr domain interfaces.

Public API
----------
- ``Shape`` / ``as_shape``            : concrete shape descriptor.
- ``NdArray``                         : concrete N-dimensional array.
- ``reduction``                       : global and per-axis reductions.
- ``axis_extrema``                    : extrema over the last two axes.
- ``merge`` / ``get_seq`` / ``to_int`` : array utilities.
"""

from . import axis_extrema, reduction
from ._config import (
    Settings,
    configure_logging,
    default_dtype,
    get_settings,
    reset_settings,
)
from ._ndarray_util import get_seq, merge, to_int
from .ndarray._ndarray import NdArray
from .shape._shape import Shape, as_shape

__all__ = [
    "axis_extrema",
    "reduction",
    Settings.__name__,
    configure_logging.__name__,
    default_dtype.__name__,
    get_settings.__name__,
    reset_settings.__name__,
    get_seq.__name__,
    merge.__name__,
    to_int.__name__,
    NdArray.__name__,
    Shape.__name__,
    as_shape.__name__,
]

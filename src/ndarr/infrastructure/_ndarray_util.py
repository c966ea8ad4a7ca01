"""
Array utilities: concatenation along an axis, integer sequences and
truncation to integers.

Public functions
----------------
- ``merge(axis, *arrays)`` : concatenate arrays along `axis`.
- ``get_seq(size)``        : ascending integers ``0 .. size - 1``.
- ``to_int(values)``       : truncate floats toward zero.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

import numpy as np

from ..domain._errors import InvalidArgumentError, ShapeMismatchError
from ..domain.utils._indexing import validate_axis
from .ops.merge_cpu import merge_cpu

if TYPE_CHECKING:
    from .ndarray._ndarray import NdArray

logger = logging.getLogger(__name__)


def merge(axis: int, *arrays: "NdArray") -> "NdArray":
    """
    Concatenate arrays along `axis`.

    Parameters
    ----------
    axis : int
        Merge axis, in ``[0, dim_num)`` of the inputs.
    *arrays : NdArray
        Arrays to join, in order. All must have the same number of
        dimensions and agree on every dimension except `axis`.

    Returns
    -------
    NdArray
        New array with the first input's shape, except that the `axis`
        dimension is the sum of the inputs' `axis` dimensions. A single
        input is returned as an independent copy.

    Raises
    ------
    InvalidArgumentError
        If no arrays are given.
    AxisOutOfRangeError
        If `axis` is invalid for the inputs.
    ShapeMismatchError
        If an input differs in rank or in a non-merge dimension; the
        message names the input position, the dimension and both sizes.

    Examples
    --------
    >>> merge(0, NdArray.of([[1, 2], [3, 4]]), NdArray.of([[5, 6]])).shape
    Shape(3, 2)
    """
    if not arrays:
        raise InvalidArgumentError("merge requires at least one array")

    first = arrays[0]
    if len(arrays) == 1:
        return first.copy()

    ref = first.shape.dims
    validate_axis(axis, len(ref))

    for k, arr in enumerate(arrays[1:], start=1):
        dims = arr.shape.dims
        if len(dims) != len(ref):
            raise ShapeMismatchError(
                "merge",
                ref,
                dims,
                f"array {k} has {len(dims)} dimension(s), expected {len(ref)}",
            )
        for d, (expected, actual) in enumerate(zip(ref, dims)):
            if d != axis and expected != actual:
                raise ShapeMismatchError(
                    "merge",
                    ref,
                    dims,
                    f"array {k} dimension {d}: {actual} vs {expected}",
                )

    out_dims = list(ref)
    out_dims[axis] = 0
    for arr in arrays:
        out_dims[axis] += arr.shape.dims[axis]

    logger.debug("merge n=%d axis=%d out=%s", len(arrays), axis, tuple(out_dims))
    out = merge_cpu(
        [a._buffer for a in arrays],
        [a.shape.dims for a in arrays],
        axis,
        out_dims,
        first.dtype,
    )
    return type(first)._wrap(out, out_dims)


def get_seq(size: int) -> np.ndarray:
    """
    Return the integers ``0, 1, ..., size - 1``.

    Raises
    ------
    InvalidArgumentError
        If `size` is negative.
    """
    if size < 0:
        raise InvalidArgumentError(f"get_seq size must be >= 0, got {size}")
    return np.arange(size, dtype=np.int64)


def to_int(values: Optional[Iterable[float]]) -> Optional[np.ndarray]:
    """
    Truncate every value toward zero.

    Parameters
    ----------
    values : Iterable[float] or None
        Values to convert. ``None`` passes through unchanged.

    Returns
    -------
    np.ndarray or None
        Integer array (``1.9 -> 1``, ``-1.9 -> -1``).
    """
    if values is None:
        return None
    arr = np.asarray(list(values), dtype=np.float64)
    return np.trunc(arr).astype(np.int64)

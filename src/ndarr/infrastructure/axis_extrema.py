"""
Axis-extrema engine: max, min, arg_max and arg_min over the last two axes.

The input is treated as a batch of matrices ``[...batch, rows, cols]``; all
leading dimensions fold into one batch count. Only two axes are accepted:

- ``dim_num - 2`` ("rows"): for each batch and column, scan the rows.
- ``dim_num - 1`` ("cols"): for each batch and row, scan the columns.

The reduced axis is kept with size 1 in the output (callers squeeze if
needed). Index results are stored as floating-point values, and ties
resolve to the lowest index. NaN elements are skipped; a slice with no
candidate yields ``-1`` for indices and ``-inf`` / ``+inf`` for values.

Any other axis raises `UnsupportedAxisError` naming both permitted values.
A general-axis maximum that drops the axis is available from
:mod:`ndarr.infrastructure.reduction`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..domain._errors import UnsupportedAxisError
from ..domain.utils._indexing import validate_axis
from .ops.axis_extrema_cpu import Direction, Kind, extrema_cpu
from .shape._shape import Shape

if TYPE_CHECKING:
    from .ndarray._ndarray import NdArray

logger = logging.getLogger(__name__)


def _resolve_direction(op: str, shape: Shape, axis: int) -> Direction:
    dim_num = shape.dim_num
    validate_axis(axis, dim_num)
    if axis == dim_num - 1:
        return "cols"
    if axis == dim_num - 2:
        return "rows"
    raise UnsupportedAxisError(op, axis, dim_num - 2, dim_num - 1)


def _run(op: Kind, a: "NdArray", axis: int) -> "NdArray":
    direction = _resolve_direction(op, a.shape, axis)
    logger.debug("%s shape=%s axis=%d over=%s", op, a.shape.dims, axis, direction)

    out = extrema_cpu(a._buffer, a.shape.dims, direction, op, a.dtype)
    dims = list(a.shape.dims)
    dims[axis] = 1
    return type(a)._wrap(out, Shape(dims))


def max(a: "NdArray", axis: int) -> "NdArray":
    """
    Maximum over rows or columns, keeping the axis at size 1.

    Raises
    ------
    AxisOutOfRangeError
        If ``axis`` is outside ``[0, dim_num)``.
    UnsupportedAxisError
        If ``axis`` is not one of the last two axes.
    """
    return _run("max", a, axis)


def min(a: "NdArray", axis: int) -> "NdArray":
    """Minimum over rows or columns, keeping the axis at size 1."""
    return _run("min", a, axis)


def arg_max(a: "NdArray", axis: int) -> "NdArray":
    """
    Index of the maximum over rows or columns.

    Examples
    --------
    >>> arg_max(NdArray.of([[[1, 5, 2], [9, 0, 3]]]), 2).to_list()
    [[[1.0], [0.0]]]
    """
    return _run("arg_max", a, axis)


def arg_min(a: "NdArray", axis: int) -> "NdArray":
    """Index of the minimum over rows or columns."""
    return _run("arg_min", a, axis)

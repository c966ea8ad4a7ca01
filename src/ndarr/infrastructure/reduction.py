"""
Reduction engine: global and per-axis sum, mean, variance, max and min.

Public functions
----------------
- ``sum_all(a)``   : scalar array holding the sum of every element.
- ``max_all(a)``   : Python float, the largest element (``-inf`` if empty).
- ``sum(a, axis)`` / ``mean(a, axis)`` / ``var(a, axis)``
- ``max(a, axis)`` / ``min(a, axis)``

Per-axis reductions validate the axis first, then return an array whose
shape is the input shape with the axis removed. ``var`` is the population
variance (divides by the axis size) and uses the same "axis is the dimension
being collapsed" convention as ``sum`` and ``mean``.

Design notes
------------
- The engine never imports the concrete array class; results are built via
  ``type(a)._wrap`` so the array core can depend on this module without a
  cycle.
- Function names intentionally shadow the builtins ``sum``/``max``/``min``
  inside this module; call sites use ``reduction.sum(...)``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..domain.utils._indexing import validate_axis
from .ops.reduce_cpu import (
    extremum_axis_cpu,
    max_all_cpu,
    mean_axis_cpu,
    sum_all_cpu,
    sum_axis_cpu,
    var_axis_cpu,
)
from .shape._shape import Shape

if TYPE_CHECKING:
    from .ndarray._ndarray import NdArray

logger = logging.getLogger(__name__)


def _reduced_shape(shape: Shape, axis: int) -> Shape:
    dims = shape.dims
    return Shape(dims[:axis] + dims[axis + 1 :])


def sum_all(a: "NdArray") -> "NdArray":
    """
    Sum every element into a scalar array.

    Returns
    -------
    NdArray
        Array of shape ``()``.
    """
    logger.debug("sum_all shape=%s", a.shape.dims)
    value = sum_all_cpu(a._buffer)
    return type(a).scalar(value, dtype=a.dtype)


def max_all(a: "NdArray") -> float:
    """
    Return the largest element as a Python float.

    The running value starts at negative infinity, so an empty array yields
    ``-inf``. NaN elements never win the comparison and are skipped.
    """
    logger.debug("max_all shape=%s", a.shape.dims)
    return max_all_cpu(a._buffer)


def sum(a: "NdArray", axis: int) -> "NdArray":
    """
    Sum along `axis`.

    Parameters
    ----------
    a : NdArray
        Input array.
    axis : int
        Axis to collapse, in ``[0, dim_num)``.

    Returns
    -------
    NdArray
        Array with ``axis`` removed from the shape.

    Raises
    ------
    AxisOutOfRangeError
        If ``axis`` is outside ``[0, dim_num)``.

    Examples
    --------
    >>> sum(NdArray.of([[1, 2, 3], [4, 5, 6]]), 1).to_list()
    [6.0, 15.0]
    """
    validate_axis(axis, a.shape.dim_num)
    logger.debug("sum shape=%s axis=%d", a.shape.dims, axis)
    out = sum_axis_cpu(a._buffer, a.shape.dims, axis, a.dtype)
    return type(a)._wrap(out, _reduced_shape(a.shape, axis))


def mean(a: "NdArray", axis: int) -> "NdArray":
    """
    Arithmetic mean along `axis` (sum divided by the axis size).

    Raises
    ------
    AxisOutOfRangeError
        If ``axis`` is outside ``[0, dim_num)``.
    """
    validate_axis(axis, a.shape.dim_num)
    logger.debug("mean shape=%s axis=%d", a.shape.dims, axis)
    out = mean_axis_cpu(a._buffer, a.shape.dims, axis, a.dtype)
    return type(a)._wrap(out, _reduced_shape(a.shape, axis))


def var(a: "NdArray", axis: int) -> "NdArray":
    """
    Population variance along `axis`.

    For every output cell the mean across the axis is computed first, then
    the squared deviations from that mean are averaged over the axis size.

    Raises
    ------
    AxisOutOfRangeError
        If ``axis`` is outside ``[0, dim_num)``.
    """
    validate_axis(axis, a.shape.dim_num)
    logger.debug("var shape=%s axis=%d", a.shape.dims, axis)
    out = var_axis_cpu(a._buffer, a.shape.dims, axis, a.dtype)
    return type(a)._wrap(out, _reduced_shape(a.shape, axis))


def max(a: "NdArray", axis: int) -> "NdArray":
    """
    Maximum along `axis`, removing the axis from the shape.

    See Also
    --------
    ndarr.infrastructure.axis_extrema.max : last-two-axes variant that keeps
        the reduced axis at size 1.
    """
    validate_axis(axis, a.shape.dim_num)
    logger.debug("max shape=%s axis=%d", a.shape.dims, axis)
    out = extremum_axis_cpu(a._buffer, a.shape.dims, axis, True, a.dtype)
    return type(a)._wrap(out, _reduced_shape(a.shape, axis))


def min(a: "NdArray", axis: int) -> "NdArray":
    """Minimum along `axis`, removing the axis from the shape."""
    validate_axis(axis, a.shape.dim_num)
    logger.debug("min shape=%s axis=%d", a.shape.dims, axis)
    out = extremum_axis_cpu(a._buffer, a.shape.dims, axis, False, a.dtype)
    return type(a)._wrap(out, _reduced_shape(a.shape, axis))

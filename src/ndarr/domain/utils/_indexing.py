"""
Index arithmetic and argument validation shared by the array engines.

The helpers here are deliberately free of any storage concern: they operate
on plain dimension tuples and integers so that the shape layer, the array
core, the reduction engine, the axis-extrema engine and the merge utility
all validate and convert indices the same way.

Conventions
-----------
- Layout is row-major: the last dimension varies fastest.
- Axes are non-negative and must lie in ``[0, dim_num)``.
"""

from __future__ import annotations

import numbers
from math import prod
from typing import Any, Iterable, Sequence

from .._errors import (
    AxisOutOfRangeError,
    IndexArityError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    ShapeMismatchError,
)


def compute_strides(dims: Sequence[int]) -> tuple[int, ...]:
    """
    Compute row-major element strides for a dimension sequence.

    Parameters
    ----------
    dims : Sequence[int]
        Dimension sizes.

    Returns
    -------
    tuple[int, ...]
        ``stride[i] = prod(dims[i + 1:])``; empty for a scalar.
    """
    strides = [1] * len(dims)
    acc = 1
    for i in range(len(dims) - 1, -1, -1):
        strides[i] = acc
        acc *= dims[i]
    return tuple(strides)


def validate_axis(axis: int, dim_num: int) -> int:
    """
    Check that `axis` addresses an existing dimension.

    Parameters
    ----------
    axis : int
        Requested axis.
    dim_num : int
        Number of dimensions of the array.

    Returns
    -------
    int
        The validated axis, unchanged.

    Raises
    ------
    AxisOutOfRangeError
        If ``axis`` is outside ``[0, dim_num)``.
    """
    if not 0 <= axis < dim_num:
        raise AxisOutOfRangeError(axis, dim_num)
    return axis


def validate_multi_index(dims: Sequence[int], indices: Sequence[int]) -> None:
    """
    Validate arity and per-dimension bounds of a multi-index.

    Raises
    ------
    IndexArityError
        If the number of components differs from ``len(dims)``.
    IndexOutOfBoundsError
        If a component lies outside ``[0, dims[i])``.
    """
    if len(indices) != len(dims):
        raise IndexArityError(len(dims), len(indices))
    for dim, (idx, size) in enumerate(zip(indices, dims)):
        if not 0 <= idx < size:
            raise IndexOutOfBoundsError(dim, idx, size)


def flat_to_multi_index(flat_index: int, dims: Sequence[int]) -> tuple[int, ...]:
    """
    Convert a flat row-major offset into a multi-index.

    Parameters
    ----------
    flat_index : int
        Offset in ``[0, prod(dims))``.
    dims : Sequence[int]
        Dimension sizes.

    Returns
    -------
    tuple[int, ...]
        The multi-index whose row-major offset equals ``flat_index``.

    Raises
    ------
    IndexOutOfBoundsError
        If ``flat_index`` is outside ``[0, prod(dims))``.
    """
    total = prod(dims)
    if not 0 <= flat_index < total:
        raise IndexOutOfBoundsError(0, flat_index, total)

    out = [0] * len(dims)
    remaining = flat_index
    for i in range(len(dims) - 1, -1, -1):
        remaining, out[i] = divmod(remaining, dims[i])
    return tuple(out)


def to_index_list(values: Iterable[Any]) -> list[int]:
    """
    Convert index values to Python ints without losing information.

    Integer types pass through. Floats are accepted only when integral, so
    index arrays produced by `arg_max` (stored as floats) can be passed back
    directly, while a value such as ``1.7`` is rejected rather than truncated.

    Raises
    ------
    InvalidArgumentError
        If a value is neither an integer nor an integral float.
    """
    out = []
    for v in values:
        if isinstance(v, numbers.Integral):
            out.append(int(v))
        elif isinstance(v, numbers.Real) and float(v).is_integer():
            out.append(int(v))
        else:
            raise InvalidArgumentError(f"Index {v!r} is not an integer")
    return out



def split_at_axis(dims: Sequence[int], axis: int) -> tuple[int, int, int]:
    """
    Factor a shape around `axis` into ``(before, axis_size, after)``.

    ``before`` is the product of the dimensions preceding the axis (the
    number of outer slices) and ``after`` the product of those following it
    (the element stride of one step along the axis). For ``axis == 0``
    ``before`` is 1.
    """
    before = prod(dims[:axis])
    after = prod(dims[axis + 1 :])
    return before, dims[axis], after


def broadcast_shapes(
    op: str, dims_a: Sequence[int], dims_b: Sequence[int]
) -> tuple[int, ...]:
    """
    Resolve the broadcast result shape of two operands.

    Dimensions are compared from the trailing end; a missing leading
    dimension behaves like size 1, and a size-1 dimension is repeated
    (stride 0) against the other operand's size.

    Parameters
    ----------
    op : str
        Operation name used in the error message.
    dims_a, dims_b : Sequence[int]
        Operand shapes.

    Returns
    -------
    tuple[int, ...]
        The broadcast shape.

    Raises
    ------
    ShapeMismatchError
        If any aligned pair differs and neither side is 1.
    """
    rank = max(len(dims_a), len(dims_b))
    pa = (1,) * (rank - len(dims_a)) + tuple(dims_a)
    pb = (1,) * (rank - len(dims_b)) + tuple(dims_b)

    out = []
    for i, (da, db) in enumerate(zip(pa, pb)):
        if da == db or db == 1:
            out.append(da)
        elif da == 1:
            out.append(db)
        else:
            raise ShapeMismatchError(
                op, dims_a, dims_b, f"dimension {i} from the left: {da} vs {db}"
            )
    return tuple(out)

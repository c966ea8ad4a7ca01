"""
Structural mixin: reshape, gather, slice, tile and axis permutations.

:class:`NdArrayMixinStructural` contributes the operations that rearrange
elements without arithmetic:

- ``reshape``       : same elements under a new shape of equal size.
- ``index_select``  : gather slices along one axis (repeats allowed).
- ``slice_range``   : contiguous half-open range along one axis.
- ``repeat``        : tile along every axis.
- ``flatten``       : single row of shape ``(1, size)``.
- ``transpose``     : axis permutation (matrix swap when no order given).
- ``broadcast_to`` / ``sum_to`` : expand along broadcast dimensions and its
  adjoint reduction.
- ``squeeze``       : drop one size-1 axis.

Arguments are validated before the output buffer is allocated; results
never share storage with the receiver.
"""

from __future__ import annotations

import logging
from abc import ABC
from typing import Sequence, Union

from .....domain._errors import (
    IndexOutOfBoundsError,
    InvalidArgumentError,
    ShapeMismatchError,
)
from .....domain._ndarray import INdArray
from .....domain._shape import IShape
from .....domain.utils._indexing import (
    broadcast_shapes,
    to_index_list,
    validate_axis,
)
from ....ops.elementwise_cpu import broadcast_to_cpu, sum_to_cpu
from ....ops.structural_cpu import (
    index_select_cpu,
    repeat_cpu,
    slice_range_cpu,
    transpose_cpu,
)
from ....shape._shape import as_shape

logger = logging.getLogger(__name__)

ShapeLike = Union[IShape, Sequence[int]]


class NdArrayMixinStructural(ABC):
    """Shape-changing and element-rearranging operations for `NdArray`."""

    def reshape(self: INdArray, shape: ShapeLike) -> "INdArray":
        """
        Return the same row-major elements under `shape`.

        Raises
        ------
        ShapeMismatchError
            If ``shape.size()`` differs from this array's size.
        """
        target = as_shape(shape)
        if target.size() != self.shape.size():
            raise ShapeMismatchError(
                "reshape",
                self.shape.dims,
                target.dims,
                f"size {self.shape.size()} vs {target.size()}",
            )
        return type(self)._wrap(self._buffer.copy(), target)

    def index_select(self: INdArray, axis: int, indices: Sequence[int]) -> "INdArray":
        """
        Gather slices along `axis` in the order of `indices`.

        Parameters
        ----------
        axis : int
            Axis to gather along.
        indices : Sequence[int]
            Positions along `axis`; duplicates are allowed.

        Returns
        -------
        NdArray
            Array whose `axis` dimension equals ``len(indices)``.

        Raises
        ------
        AxisOutOfRangeError
            If `axis` is invalid.
        IndexOutOfBoundsError
            If any index lies outside ``[0, dims[axis])``.
        InvalidArgumentError
            If an index is not integral (``1.7`` is rejected, ``2.0`` is
            accepted).
        """
        dims = self.shape.dims
        validate_axis(axis, len(dims))
        idx = to_index_list(indices)
        for i in idx:
            if not 0 <= i < dims[axis]:
                raise IndexOutOfBoundsError(axis, i, dims[axis])

        logger.debug("index_select shape=%s axis=%d n=%d", dims, axis, len(idx))
        out = index_select_cpu(self._buffer, dims, axis, idx)
        out_dims = dims[:axis] + (len(idx),) + dims[axis + 1 :]
        return type(self)._wrap(out, out_dims)

    def slice_range(self: INdArray, axis: int, start: int, end: int) -> "INdArray":
        """
        Copy the half-open range ``[start, end)`` along `axis`.

        Raises
        ------
        AxisOutOfRangeError
            If `axis` is invalid.
        InvalidArgumentError
            Unless ``0 <= start <= end <= dims[axis]``.
        """
        dims = self.shape.dims
        validate_axis(axis, len(dims))
        if not 0 <= start <= end <= dims[axis]:
            raise InvalidArgumentError(
                f"slice_range: invalid range [{start}, {end}) for axis {axis} "
                f"of size {dims[axis]}"
            )
        out = slice_range_cpu(self._buffer, dims, axis, start, end)
        out_dims = dims[:axis] + (end - start,) + dims[axis + 1 :]
        return type(self)._wrap(out, out_dims)

    def repeat(self: INdArray, *counts: int) -> "INdArray":
        """
        Tile the array ``counts[i]`` times along axis ``i``.

        Raises
        ------
        InvalidArgumentError
            If the number of counts differs from ``dim_num`` or a count is
            negative.

        Examples
        --------
        >>> NdArray.of([[1, 2]]).repeat(2, 2).to_list()
        [[1.0, 2.0, 1.0, 2.0], [1.0, 2.0, 1.0, 2.0]]
        """
        dims = self.shape.dims
        if len(counts) != len(dims):
            raise InvalidArgumentError(
                f"repeat expects {len(dims)} count(s), got {len(counts)}"
            )
        if any(c < 0 for c in counts):
            raise InvalidArgumentError(f"repeat counts must be >= 0, got {counts}")

        out = repeat_cpu(self._buffer, dims, counts)
        out_dims = tuple(d * c for d, c in zip(dims, counts))
        return type(self)._wrap(out, out_dims)

    def flatten(self: INdArray) -> "INdArray":
        """Single-row copy of shape ``(1, size)``."""
        return type(self)._wrap(self._buffer.copy(), (1, self.shape.size()))

    def transpose(self: INdArray, *order: int) -> "INdArray":
        """
        Permute axes.

        Parameters
        ----------
        *order : int
            New axis order; output axis ``i`` is input axis ``order[i]``.
            May be omitted for a matrix, which swaps rows and columns.

        Raises
        ------
        InvalidArgumentError
            If no order is given for a non-matrix, or `order` is not a
            permutation of ``range(dim_num)``.
        """
        dims = self.shape.dims
        if not order:
            if len(dims) != 2:
                raise InvalidArgumentError(
                    f"transpose() without an order requires a matrix, got {dims}"
                )
            order = (1, 0)
        if sorted(order) != list(range(len(dims))):
            raise InvalidArgumentError(
                f"transpose order {order} is not a permutation of {len(dims)} axes"
            )

        out = transpose_cpu(self._buffer, dims, order)
        return type(self)._wrap(out, tuple(dims[i] for i in order))

    def broadcast_to(self: INdArray, shape: ShapeLike) -> "INdArray":
        """
        Expand size-1 (or missing leading) dimensions to `shape`.

        Raises
        ------
        ShapeMismatchError
            If this array cannot be broadcast to exactly `shape`.
        """
        target = as_shape(shape)
        resolved = broadcast_shapes("broadcast_to", self.shape.dims, target.dims)
        if resolved != target.dims:
            raise ShapeMismatchError("broadcast_to", self.shape.dims, target.dims)
        out = broadcast_to_cpu(self._buffer, self.shape.dims, target.dims)
        return type(self)._wrap(out, target)

    def sum_to(self: INdArray, shape: ShapeLike) -> "INdArray":
        """
        Sum over broadcast dimensions to reach `shape`.

        ``a.broadcast_to(s).sum_to(a.shape)`` multiplies each element of
        ``a`` by the number of times it was repeated.

        Raises
        ------
        ShapeMismatchError
            If `shape` does not broadcast to this array's shape.
        """
        target = as_shape(shape)
        resolved = broadcast_shapes("sum_to", target.dims, self.shape.dims)
        if resolved != self.shape.dims:
            raise ShapeMismatchError("sum_to", self.shape.dims, target.dims)
        out = sum_to_cpu(self._buffer, self.shape.dims, target.dims)
        return type(self)._wrap(out, target)

    def squeeze(self: INdArray, axis: int) -> "INdArray":
        """
        Remove the size-1 dimension `axis`.

        Raises
        ------
        AxisOutOfRangeError
            If `axis` is invalid.
        InvalidArgumentError
            If ``dims[axis] != 1``.
        """
        dims = self.shape.dims
        validate_axis(axis, len(dims))
        if dims[axis] != 1:
            raise InvalidArgumentError(
                f"squeeze: axis {axis} has size {dims[axis]}, expected 1"
            )
        return type(self)._wrap(self._buffer.copy(), dims[:axis] + dims[axis + 1 :])

"""
Row/column indexing mixin: gather, scatter-add and sub-block extraction.

:class:`NdArrayMixinIndexing` works on the last two axes of an array of
rank 2 or more, treating any leading axes as a batch that is carried
through unchanged:

- ``get_item(rows, cols)``     : point gather when both index lists are
  given, otherwise a grid gather where ``None`` selects every row/column.
- ``add_at(rows, cols, other)`` : the scatter-add counterpart of
  ``get_item``; returns a copy with `other` accumulated at the selected
  positions.
- ``sub_ndarray(r0, r1, c0, c1)``: rectangular block with bounds clamped to
  the array.

Like every other operation these never modify the receiver.
"""

from __future__ import annotations

import logging
from abc import ABC
from math import prod
from typing import Any, Optional, Sequence

from .....domain._errors import (
    IndexOutOfBoundsError,
    InvalidArgumentError,
    ShapeMismatchError,
)
from .....domain._ndarray import INdArray
from .....domain.utils._indexing import to_index_list
from ....ops.gather_cpu import gather_rc_cpu, scatter_add_rc_cpu

logger = logging.getLogger(__name__)


class NdArrayMixinIndexing(ABC):
    """Gather and scatter over the last two axes for `NdArray`."""

    def _resolve_rc(
        self: INdArray,
        op: str,
        rows: Optional[Sequence[Any]],
        cols: Optional[Sequence[Any]],
    ) -> tuple[list[int], list[int], bool]:
        dims = self.shape.dims
        if len(dims) < 2:
            raise InvalidArgumentError(
                f"{op} requires an array of rank >= 2, got shape {dims}"
            )
        row_axis, col_axis = len(dims) - 2, len(dims) - 1
        pointwise = rows is not None and cols is not None
        r = list(range(dims[row_axis])) if rows is None else to_index_list(rows)
        c = list(range(dims[col_axis])) if cols is None else to_index_list(cols)
        if pointwise and len(r) != len(c):
            raise InvalidArgumentError(
                f"{op}: {len(r)} row indices vs {len(c)} column indices"
            )
        for axis, idx in ((row_axis, r), (col_axis, c)):
            for i in idx:
                if not 0 <= i < dims[axis]:
                    raise IndexOutOfBoundsError(axis, i, dims[axis])
        return r, c, pointwise

    def get_item(
        self: INdArray,
        rows: Optional[Sequence[int]] = None,
        cols: Optional[Sequence[int]] = None,
    ) -> "INdArray":
        """
        Gather elements from the last two axes.

        Parameters
        ----------
        rows, cols : Sequence[int] or None
            Row and column indices. When both are given they are paired
            element by element (point mode). When either is ``None`` it
            selects every row (column) and the result is the grid of all
            combinations.

        Returns
        -------
        NdArray
            Point mode: shape ``(*batch, 1, n)``. Grid mode: shape
            ``(*batch, len(rows), len(cols))``.

        Raises
        ------
        InvalidArgumentError
            If the array has rank < 2, an index is not integral, or the two
            lists differ in length in point mode.
        IndexOutOfBoundsError
            If an index is outside its axis.

        Examples
        --------
        >>> x = NdArray.of([[1, 2, 3], [4, 5, 6]])
        >>> x.get_item([0, 1], [2, 0]).to_list()
        [[3.0, 4.0]]
        >>> x.get_item(None, [1]).to_list()
        [[2.0], [5.0]]
        """
        r, c, pointwise = self._resolve_rc("get_item", rows, cols)
        dims = self.shape.dims
        logger.debug(
            "get_item shape=%s rows=%d cols=%d pointwise=%s",
            dims, len(r), len(c), pointwise,
        )
        out = gather_rc_cpu(self._buffer, dims, r, c, pointwise)
        tail = (1, len(r)) if pointwise else (len(r), len(c))
        return type(self)._wrap(out, dims[:-2] + tail)

    def add_at(
        self: INdArray,
        rows: Optional[Sequence[int]],
        cols: Optional[Sequence[int]],
        other: "INdArray",
    ) -> "INdArray":
        """
        Return a copy with `other` added at the positions `get_item` reads.

        The selection follows `get_item` exactly; `other` holds one value
        per selected element in the order `get_item` would return them, or
        a single value added everywhere. Positions selected more than once
        receive every contribution.

        Raises
        ------
        InvalidArgumentError
            For the same selection errors as `get_item`, or when `other` is
            empty.
        ShapeMismatchError
            If `other` holds neither one value nor one per selected element.

        Examples
        --------
        >>> x = NdArray.zeros((2, 3))
        >>> x.add_at([0, 0, 1], [1, 1, 2], NdArray.of([1, 2, 3])).to_list()
        [[0.0, 3.0, 0.0], [0.0, 0.0, 3.0]]
        """
        r, c, pointwise = self._resolve_rc("add_at", rows, cols)
        dims = self.shape.dims
        batch = prod(dims[:-2])
        expected = batch * (len(r) if pointwise else len(r) * len(c))
        n = other.shape.size()
        if n == 0:
            raise InvalidArgumentError("add_at: the array to add is empty")
        if n != 1 and n != expected:
            raise ShapeMismatchError(
                "add_at",
                dims,
                other.shape.dims,
                f"expected 1 or {expected} values, got {n}",
            )
        logger.debug(
            "add_at shape=%s rows=%d cols=%d pointwise=%s",
            dims, len(r), len(c), pointwise,
        )
        out = scatter_add_rc_cpu(self._buffer, dims, r, c, other._buffer, pointwise)
        return type(self)._wrap(out, dims)

    def sub_ndarray(
        self: INdArray, start_row: int, end_row: int, start_col: int, end_col: int
    ) -> "INdArray":
        """
        Copy the block ``[start_row, end_row) x [start_col, end_col)``.

        Bounds are clamped to the array, so out-of-range values shrink the
        block instead of raising; an inverted range gives an empty extent.

        Raises
        ------
        InvalidArgumentError
            If the array has rank < 2.
        """
        dims = self.shape.dims
        if len(dims) < 2:
            raise InvalidArgumentError(
                f"sub_ndarray requires an array of rank >= 2, got shape {dims}"
            )
        row_axis, col_axis = len(dims) - 2, len(dims) - 1
        r0 = min(max(0, start_row), dims[row_axis])
        r1 = max(r0, min(end_row, dims[row_axis]))
        c0 = min(max(0, start_col), dims[col_axis])
        c1 = max(c0, min(end_col, dims[col_axis]))
        return self.slice_range(row_axis, r0, r1).slice_range(col_axis, c0, c1)

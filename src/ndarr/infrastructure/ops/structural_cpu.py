"""
CPU kernels for structural array transforms (NumPy backend).

These kernels gather, slice, tile or permute a flat row-major buffer and
always return a newly allocated, contiguous flat buffer. Argument checking
(axis range, index bounds, permutation validity) is done by the caller.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ...domain.utils._indexing import split_at_axis


def index_select_cpu(
    buf: np.ndarray, dims: Sequence[int], axis: int, indices: Sequence[int]
) -> np.ndarray:
    """
    Gather slices along `axis` in the order given by `indices`.

    Repeated indices are allowed and produce repeated slices.

    Returns
    -------
    np.ndarray
        Flat buffer of shape ``dims`` with ``dims[axis] = len(indices)``.
    """
    view = buf.reshape(split_at_axis(dims, axis))
    idx = np.asarray(indices, dtype=np.intp)
    return np.take(view, idx, axis=1).reshape(-1)


def slice_range_cpu(
    buf: np.ndarray, dims: Sequence[int], axis: int, start: int, end: int
) -> np.ndarray:
    """Copy the half-open range ``[start, end)`` along `axis`."""
    view = buf.reshape(split_at_axis(dims, axis))
    return np.array(view[:, start:end, :], copy=True).reshape(-1)


def repeat_cpu(
    buf: np.ndarray, dims: Sequence[int], counts: Sequence[int]
) -> np.ndarray:
    """
    Tile the array `counts[i]` times along each axis ``i``.

    Output element ``o`` reads input element ``o % dims`` per axis.
    """
    return np.tile(buf.reshape(tuple(dims)), tuple(counts)).reshape(-1)


def transpose_cpu(
    buf: np.ndarray, dims: Sequence[int], order: Sequence[int]
) -> np.ndarray:
    """Permute axes so that output axis ``i`` is input axis ``order[i]``."""
    view = buf.reshape(tuple(dims)).transpose(tuple(order))
    return np.ascontiguousarray(view).reshape(-1)


def dot_cpu(
    a: np.ndarray,
    a_dims: Sequence[int],
    b: np.ndarray,
    b_dims: Sequence[int],
    dtype: np.dtype,
) -> np.ndarray:
    """
    Matrix product over the last two axes.

    For 2-D operands this is the plain ``(m, k) @ (k, n)`` product. For
    higher ranks, leading (batch) dimensions must match and each batch
    entry is multiplied independently.
    """
    out = np.matmul(a.reshape(tuple(a_dims)), b.reshape(tuple(b_dims)))
    return np.asarray(out, dtype=dtype).reshape(-1)

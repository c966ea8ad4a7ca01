"""
CPU block-copy kernel for concatenating buffers along one axis.

Layout reasoning (row-major):

- ``before`` = product of dimensions preceding the merge axis, i.e. the
  number of repeating outer slices.
- ``after`` = product of dimensions following the merge axis, i.e. the
  element stride of one step along the merge axis.

Within every outer slice, input ``k`` owns one contiguous run of
``axis_k * after`` elements, starting at the running merge-axis offset
``sum(axis_j for j < k) * after``. The kernel therefore issues
``before * len(inputs)`` bulk slice copies instead of per-element writes.
For ``axis == 0`` ``before`` is 1 and each input is appended as one block.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ...domain.utils._indexing import split_at_axis


def merge_cpu(
    buffers: Sequence[np.ndarray],
    dims_list: Sequence[Sequence[int]],
    axis: int,
    out_dims: Sequence[int],
    dtype: np.dtype,
) -> np.ndarray:
    """
    Concatenate flat buffers along `axis` into a new flat buffer.

    Parameters
    ----------
    buffers : Sequence[np.ndarray]
        Flat input buffers, already validated for compatibility.
    dims_list : Sequence[Sequence[int]]
        Shape of each input.
    axis : int
        Merge axis.
    out_dims : Sequence[int]
        Merged shape (input dims with the merge axis summed).
    dtype : np.dtype
        Output dtype.

    Returns
    -------
    np.ndarray
        Flat merged buffer.
    """
    before, out_axis, after = split_at_axis(out_dims, axis)
    out = np.empty(before * out_axis * after, dtype=dtype)
    out_slice = out_axis * after

    axis_offset = 0
    for src, dims in zip(buffers, dims_list):
        block = dims[axis] * after
        dst_start = axis_offset * after
        for s in range(before):
            src_start = s * block
            dst = s * out_slice + dst_start
            out[dst : dst + block] = src[src_start : src_start + block]
        axis_offset += dims[axis]

    return out

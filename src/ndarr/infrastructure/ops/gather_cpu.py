"""
CPU kernels for gathering and scatter-adding over the last two axes.

The input is viewed as ``[batch, rows, cols]`` (leading dimensions folded
into ``batch``) and the same row/column selection is applied to every batch
entry. Two selection modes exist:

- point mode: ``rows[i]`` and ``cols[i]`` name one element each, giving
  ``n`` elements per batch entry;
- grid mode: every combination of ``rows`` and ``cols``, giving a
  ``len(rows) x len(cols)`` block per batch entry.

Index validation is done by the caller.
"""

from __future__ import annotations

from math import prod
from typing import Sequence

import numpy as np


def _batched(buf: np.ndarray, dims: Sequence[int]) -> np.ndarray:
    return buf.reshape(prod(dims[:-2]), dims[-2], dims[-1])


def _selector(rows: Sequence[int], cols: Sequence[int], pointwise: bool) -> tuple:
    r = np.asarray(rows, dtype=np.intp)
    c = np.asarray(cols, dtype=np.intp)
    if pointwise:
        return (slice(None), r, c)
    return (slice(None), r[:, None], c[None, :])


def gather_rc_cpu(
    buf: np.ndarray,
    dims: Sequence[int],
    rows: Sequence[int],
    cols: Sequence[int],
    pointwise: bool,
) -> np.ndarray:
    """
    Copy the selected elements into a new flat buffer.

    Returns
    -------
    np.ndarray
        ``batch * len(rows)`` values in point mode, otherwise
        ``batch * len(rows) * len(cols)`` values, in row-major order.
    """
    view = _batched(buf, dims)
    return np.array(view[_selector(rows, cols, pointwise)], copy=True).reshape(-1)


def scatter_add_rc_cpu(
    buf: np.ndarray,
    dims: Sequence[int],
    rows: Sequence[int],
    cols: Sequence[int],
    values: np.ndarray,
    pointwise: bool,
) -> np.ndarray:
    """
    Add `values` into a copy of `buf` at the selected positions.

    `values` is either a single element, added at every position, or a flat
    buffer laid out like the output of `gather_rc_cpu` for the same
    selection. Repeated positions accumulate.
    """
    out = buf.copy()
    view = _batched(out, dims)
    sel = _selector(rows, cols, pointwise)
    if values.size == 1:
        src = values.reshape(())
    elif pointwise:
        src = values.reshape(view.shape[0], len(rows))
    else:
        src = values.reshape(view.shape[0], len(rows), len(cols))
    # np.add.at accumulates repeated indices instead of keeping the last write
    np.add.at(view, sel, src.astype(out.dtype, copy=False))
    return out

"""
CPU kernels for extrema over the last two axes of batched matrices.

The input is interpreted as ``[batch, rows, cols]`` where every leading
dimension is folded into ``batch``. Two scan directions are supported:

- ``over="rows"``: for each batch and column, scan all rows.
- ``over="cols"``: for each batch and row, scan all columns.

Index results use first-seen tie breaking (the lowest index wins), which is
what a strict ``>`` / ``<`` running comparison produces.

A 1-D input is treated as a single row, i.e. ``[1, 1, n]``.
"""

from __future__ import annotations

from math import prod
from typing import Literal, Sequence

import numpy as np

Direction = Literal["rows", "cols"]
Kind = Literal["max", "min", "arg_max", "arg_min"]


def as_batched(buf: np.ndarray, dims: Sequence[int]) -> np.ndarray:
    """
    View a flat buffer as ``(batch, rows, cols)``.

    Parameters
    ----------
    buf : np.ndarray
        Flat row-major buffer.
    dims : Sequence[int]
        Shape with at least one dimension.
    """
    if len(dims) == 1:
        return buf.reshape(1, 1, dims[0])
    rows, cols = dims[-2], dims[-1]
    return buf.reshape(prod(dims[:-2]), rows, cols)


def extrema_cpu(
    buf: np.ndarray,
    dims: Sequence[int],
    over: Direction,
    kind: Kind,
    dtype: np.dtype,
) -> np.ndarray:
    """
    Compute a max/min value or index along rows or columns.

    Parameters
    ----------
    buf : np.ndarray
        Flat input buffer.
    dims : Sequence[int]
        Input shape (rank >= 1).
    over : {"rows", "cols"}
        Direction to scan.
    kind : {"max", "min", "arg_max", "arg_min"}
        Which statistic to emit.
    dtype : np.dtype
        Output dtype; indices are stored as floating-point values.

    Returns
    -------
    np.ndarray
        Flat buffer laid out like the input with the scanned axis at size 1.

    Notes
    -----
    When the scanned axis is empty, value kinds produce the initial running
    value (``-inf`` for max, ``+inf`` for min) and index kinds produce ``-1``.
    NaN elements are skipped, so a slice holding nothing but NaN (or the
    starting bound itself) gives the same result as an empty one.
    """
    view = as_batched(buf, dims)
    axis = 1 if over == "rows" else 2

    if view.shape[axis] == 0:
        fill = {"max": -np.inf, "min": np.inf}.get(kind, -1.0)
        out_shape = list(view.shape)
        out_shape[axis] = 1
        return np.full(prod(out_shape), fill, dtype=dtype)

    if kind not in ("max", "min", "arg_max", "arg_min"):
        raise ValueError(f"Unknown extrema kind: {kind!r}")

    find_max = kind in ("max", "arg_max")
    bound = -np.inf if find_max else np.inf
    # Only elements strictly beyond the starting bound can win; NaN never does.
    eligible = view > bound if find_max else view < bound
    scanned = np.where(eligible, view, bound)

    if kind == "max":
        out = np.max(scanned, axis=axis, keepdims=True)
    elif kind == "min":
        out = np.min(scanned, axis=axis, keepdims=True)
    else:
        pick = np.argmax if find_max else np.argmin
        idx = pick(scanned, axis=axis, keepdims=True)
        out = np.where(np.any(eligible, axis=axis, keepdims=True), idx, -1)

    return np.asarray(out, dtype=dtype).reshape(-1)

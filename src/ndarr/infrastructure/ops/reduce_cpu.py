"""
CPU reduction kernels (NumPy backend).

Axis reductions factor the input shape around the reduced axis into
``(before, axis_size, after)`` and view the flat buffer as a 3-D array of
that shape. Reducing over the middle dimension then visits every input
element exactly once regardless of where the axis sits, and produces one
output cell per ``(before, after)`` pair in row-major order, which is
exactly the input shape with the axis removed.

All kernels return newly allocated buffers.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ...domain.utils._indexing import split_at_axis


def _as_3d(buf: np.ndarray, dims: Sequence[int], axis: int) -> np.ndarray:
    return buf.reshape(split_at_axis(dims, axis))


def _skip_nan(buf: np.ndarray, fill: float) -> np.ndarray:
    return np.where(np.isnan(buf), fill, buf)


def sum_all_cpu(buf: np.ndarray) -> float:
    """Sum of all elements; ``0.0`` for an empty buffer."""
    return float(np.sum(buf, dtype=np.float64))


def max_all_cpu(buf: np.ndarray) -> float:
    """Largest non-NaN element; negative infinity when there is none."""
    return float(np.max(_skip_nan(buf, -np.inf), initial=-np.inf))


def sum_axis_cpu(
    buf: np.ndarray, dims: Sequence[int], axis: int, dtype: np.dtype
) -> np.ndarray:
    """Sum over `axis`; returns a flat buffer of the reduced shape."""
    view = _as_3d(buf, dims, axis)
    return np.sum(view, axis=1, dtype=dtype).reshape(-1)


def mean_axis_cpu(
    buf: np.ndarray, dims: Sequence[int], axis: int, dtype: np.dtype
) -> np.ndarray:
    """
    Arithmetic mean over `axis`.

    Notes
    -----
    An empty axis yields NaN (``0 / 0``), matching IEEE float semantics.
    """
    view = _as_3d(buf, dims, axis)
    n = view.shape[1]
    with np.errstate(invalid="ignore", divide="ignore"):
        out = np.sum(view, axis=1, dtype=dtype) / dtype.type(n)
    return np.asarray(out, dtype=dtype).reshape(-1)


def var_axis_cpu(
    buf: np.ndarray, dims: Sequence[int], axis: int, dtype: np.dtype
) -> np.ndarray:
    """
    Population variance over `axis`.

    Two passes per output cell: the mean across the axis, then the sum of
    squared deviations from that mean, divided by the axis size (not
    ``size - 1``).
    """
    view = _as_3d(buf, dims, axis)
    n = view.shape[1]
    with np.errstate(invalid="ignore", divide="ignore"):
        mean = np.sum(view, axis=1, keepdims=True, dtype=dtype) / dtype.type(n)
        dev = view - mean
        out = np.sum(dev * dev, axis=1, dtype=dtype) / dtype.type(n)
    return np.asarray(out, dtype=dtype).reshape(-1)


def extremum_axis_cpu(
    buf: np.ndarray, dims: Sequence[int], axis: int, find_max: bool, dtype: np.dtype
) -> np.ndarray:
    """
    Running maximum (or minimum) over `axis`.

    The running value starts at negative (positive) infinity, so an empty
    axis reduces to that initial value. NaN elements are skipped.
    """
    view = _as_3d(buf, dims, axis)
    if find_max:
        out = np.max(_skip_nan(view, -np.inf), axis=1, initial=-np.inf)
    else:
        out = np.min(_skip_nan(view, np.inf), axis=1, initial=np.inf)
    return np.asarray(out, dtype=dtype).reshape(-1)


def softmax_axis_cpu(
    buf: np.ndarray, dims: Sequence[int], axis: int, floor: float, dtype: np.dtype
) -> np.ndarray:
    """
    Numerically stable softmax over `axis`.

    The per-slice maximum is subtracted before exponentiating, and the
    normalising sum is floored at `floor` so an all-``-inf`` slice cannot
    divide by zero. Returns a flat buffer of the input shape.
    """
    view = _as_3d(buf, dims, axis)
    if view.size == 0:
        return np.array(buf, dtype=dtype, copy=True)
    with np.errstate(over="ignore", invalid="ignore"):
        shifted = view - np.max(view, axis=1, keepdims=True)
        e = np.exp(shifted)
        total = np.maximum(np.sum(e, axis=1, keepdims=True), floor)
        out = e / total
    return np.asarray(out, dtype=dtype).reshape(-1)

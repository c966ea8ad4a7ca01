"""
CPU kernels for broadcasting elementwise operations (NumPy backend).

Every kernel takes flat row-major buffers plus their dimension tuples and
returns a newly allocated flat buffer; inputs are never written to.

Broadcasting follows the trailing-alignment rule: operands are left-padded
with size-1 dimensions to a common rank, and a size-1 dimension is repeated
(stride 0) against the other operand's extent. Shape resolution and its
error reporting live in `broadcast_shapes`; the kernels here assume the
shapes have already been validated.
"""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

BinaryKernel = Callable[[np.ndarray, np.ndarray], np.ndarray]


def _padded(buf: np.ndarray, dims: Sequence[int], rank: int) -> np.ndarray:
    """View `buf` under `dims` left-padded with ones to `rank` dimensions."""
    return buf.reshape((1,) * (rank - len(dims)) + tuple(dims))


def binary_broadcast_cpu(
    a: np.ndarray,
    a_dims: Sequence[int],
    b: np.ndarray,
    b_dims: Sequence[int],
    out_dims: Sequence[int],
    kernel: BinaryKernel,
    dtype: np.dtype,
) -> np.ndarray:
    """
    Apply `kernel` elementwise to two broadcast-compatible buffers.

    Parameters
    ----------
    a, b : np.ndarray
        Flat operand buffers.
    a_dims, b_dims : Sequence[int]
        Operand shapes.
    out_dims : Sequence[int]
        Broadcast result shape (as returned by `broadcast_shapes`).
    kernel : Callable
        NumPy ufunc-like callable, e.g. ``np.add``.
    dtype : np.dtype
        Output element dtype.

    Returns
    -------
    np.ndarray
        Flat, contiguous buffer of ``prod(out_dims)`` elements.
    """
    rank = len(out_dims)
    av = _padded(a, a_dims, rank)
    bv = _padded(b, b_dims, rank)

    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        out = kernel(av, bv)

    out = np.broadcast_to(out, tuple(out_dims))
    return np.array(out, dtype=dtype, copy=True).reshape(-1)


def scalar_cpu(
    a: np.ndarray, scalar: float, kernel: BinaryKernel, dtype: np.dtype
) -> np.ndarray:
    """Apply ``kernel(a, scalar)`` elementwise into a fresh buffer."""
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        out = kernel(a, dtype.type(scalar))
    return np.asarray(out, dtype=dtype).copy()


def unary_cpu(
    a: np.ndarray, kernel: Callable[[np.ndarray], np.ndarray], dtype: np.dtype
) -> np.ndarray:
    """Apply a unary elementwise kernel into a fresh buffer."""
    with np.errstate(over="ignore", invalid="ignore"):
        out = kernel(a)
    return np.asarray(out, dtype=dtype).copy()


def broadcast_to_cpu(
    a: np.ndarray, dims: Sequence[int], target_dims: Sequence[int]
) -> np.ndarray:
    """
    Materialize `a` repeated along broadcast dimensions of `target_dims`.

    Returns
    -------
    np.ndarray
        Flat buffer of ``prod(target_dims)`` elements.
    """
    view = _padded(a, dims, len(target_dims))
    return np.array(np.broadcast_to(view, tuple(target_dims)), copy=True).reshape(-1)


def sum_to_cpu(
    a: np.ndarray, dims: Sequence[int], target_dims: Sequence[int]
) -> np.ndarray:
    """
    Reduce `a` onto `target_dims` by summing over broadcast dimensions.

    This is the adjoint of `broadcast_to_cpu`: leading dimensions missing
    from the target are summed away, and target dimensions of size 1 sum
    the corresponding source dimension.

    Returns
    -------
    np.ndarray
        Flat buffer of ``prod(target_dims)`` elements.
    """
    dims = tuple(dims)
    target = tuple(target_dims)
    view = a.reshape(dims)

    lead = len(dims) - len(target)
    if lead:
        view = view.sum(axis=tuple(range(lead)))

    keep_axes = tuple(
        i for i, (sd, td) in enumerate(zip(view.shape, target)) if td == 1 and sd != 1
    )
    if keep_axes:
        view = view.sum(axis=keep_axes, keepdims=True)

    return np.array(view, dtype=a.dtype, copy=True).reshape(-1)

"""
Array-engine exceptions for ndarr.

This module defines the error taxonomy raised by the shape, array, reduction,
axis-extrema and merge layers. Every error derives from `NdArrayError` and
from the closest builtin exception, so callers may catch either the precise
ndarr type or the familiar builtin (`ValueError`, `IndexError`, ...).

All errors are raised during argument validation, before any output buffer
is allocated, so a failing call never leaves partially-written results.
Callers should treat them as programming errors rather than transient
faults; nothing in the engine retries.
"""

from __future__ import annotations

from typing import Sequence


class NdArrayError(Exception):
    """Base class of every error raised by the array engine."""


class InvalidArgumentError(NdArrayError, ValueError):
    """
    Raised for malformed construction or call arguments.

    Typical causes are an empty merge list, a negative sequence length, a
    negative dimension size, or a flat buffer whose length does not match the
    requested shape.
    """


class IndexArityError(InvalidArgumentError):
    """
    Raised when a multi-index does not have exactly one component per axis.

    Attributes
    ----------
    expected : int
        Number of dimensions of the addressed shape.
    actual : int
        Number of index components supplied.
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Index arity mismatch: shape has {expected} dimension(s) "
            f"but {actual} index component(s) were given."
        )
        self.expected = expected
        self.actual = actual


class IndexOutOfBoundsError(NdArrayError, IndexError):
    """
    Raised when a multi-index component falls outside its dimension.

    Attributes
    ----------
    dim : int
        The dimension that was addressed out of range.
    index : int
        The offending index component.
    size : int
        The extent of that dimension.
    """

    def __init__(self, dim: int, index: int, size: int) -> None:
        super().__init__(
            f"Index {index} is out of bounds for dimension {dim} with size {size}."
        )
        self.dim = dim
        self.index = index
        self.size = size


class AxisOutOfRangeError(NdArrayError, IndexError):
    """
    Raised when an axis argument lies outside ``[0, dim_num)``.

    Attributes
    ----------
    axis : int
        The axis that was requested.
    dim_num : int
        Number of dimensions of the array the axis refers to.
    """

    def __init__(self, axis: int, dim_num: int) -> None:
        super().__init__(f"Axis {axis} is out of range [0, {dim_num}).")
        self.axis = axis
        self.dim_num = dim_num


class ShapeMismatchError(NdArrayError, ValueError):
    """
    Raised when two or more shapes cannot be combined by an operation.

    The message always names the operation and both shapes involved so the
    failing call site can be identified from the traceback alone.

    Attributes
    ----------
    op : str
        Operation name (e.g., "add", "merge", "dot").
    shape_a, shape_b : tuple[int, ...]
        The incompatible shapes.
    """

    def __init__(
        self,
        op: str,
        shape_a: Sequence[int],
        shape_b: Sequence[int],
        detail: str = "",
    ) -> None:
        msg = f"{op}: incompatible shapes {tuple(shape_a)} and {tuple(shape_b)}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg + ".")
        self.op = op
        self.shape_a = tuple(shape_a)
        self.shape_b = tuple(shape_b)


class UnsupportedAxisError(NdArrayError, ValueError):
    """
    Raised by the axis-extrema engine for axes other than the last two.

    Attributes
    ----------
    op : str
        Operation name ("max", "min", "arg_max", "arg_min").
    axis : int
        The rejected axis.
    rows_axis, cols_axis : int
        The two permitted axes (``dim_num - 2`` and ``dim_num - 1``).
    """

    def __init__(self, op: str, axis: int, rows_axis: int, cols_axis: int) -> None:
        super().__init__(
            f"{op}: unsupported axis {axis}; only {rows_axis} (rows) "
            f"or {cols_axis} (cols) are supported."
        )
        self.op = op
        self.axis = axis
        self.rows_axis = rows_axis
        self.cols_axis = cols_axis


class DivisionByZeroError(NdArrayError, ZeroDivisionError):
    """Raised when a divisor (element or scalar) is numerically zero."""


class NumericDomainError(NdArrayError, ArithmeticError):
    """Raised when an element lies outside a math function's domain."""

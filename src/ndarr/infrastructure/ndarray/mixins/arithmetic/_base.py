"""
Arithmetic mixin implementing broadcasting elementwise operators.

This module defines :class:`NdArrayMixinArithmetic`, which contributes
``add``/``sub``/``mul``/``div``, their scalar forms ``*_num`` and the
corresponding Python operators to `NdArray`.

Broadcasting follows trailing alignment: shapes are compared from the last
dimension backwards, a missing leading dimension behaves like size 1, and a
size-1 dimension is repeated against the other operand. The result shape is
resolved (and validated) before any buffer is allocated.
"""

from __future__ import annotations

from abc import ABC
from typing import Callable, Union

import numpy as np

from .....domain._errors import DivisionByZeroError
from .....domain._ndarray import INdArray
from .....domain.utils._indexing import broadcast_shapes
from ....ops.elementwise_cpu import binary_broadcast_cpu, scalar_cpu

Number = Union[int, float]
"""Scalar types accepted by the arithmetic operators."""

EPSILON = 1e-7
"""Divisors with magnitude below this value are treated as zero."""

_NUMBER_TYPES = (int, float, np.integer, np.floating)


def _is_number(x: object) -> bool:
    return isinstance(x, _NUMBER_TYPES)


class NdArrayMixinArithmetic(ABC):
    """
    Elementwise arithmetic for `NdArray`.

    Notes
    -----
    - Every method returns a new array; neither operand is modified.
    - Operators accept either another array or a Python/NumPy number on
      both sides (``2 - a`` works through ``__rsub__``).
    """

    def _binary(
        self: INdArray,
        other: INdArray,
        op: str,
        kernel: Callable[[np.ndarray, np.ndarray], np.ndarray],
    ) -> "INdArray":
        out_dims = broadcast_shapes(op, self.shape.dims, other.shape.dims)
        out = binary_broadcast_cpu(
            self._buffer,
            self.shape.dims,
            other._buffer,
            other.shape.dims,
            out_dims,
            kernel,
            self.dtype,
        )
        return type(self)._wrap(out, out_dims)

    def _scalar(
        self: INdArray,
        number: Number,
        kernel: Callable[[np.ndarray, np.ndarray], np.ndarray],
    ) -> "INdArray":
        return type(self)._wrap(
            scalar_cpu(self._buffer, number, kernel, self.dtype), self.shape
        )

    # ----------------------------
    # Array-array
    # ----------------------------
    def add(self, other: "INdArray") -> "INdArray":
        """
        Elementwise ``self + other`` with broadcasting.

        Raises
        ------
        ShapeMismatchError
            If the shapes cannot be broadcast; the message names both.

        Examples
        --------
        >>> NdArray.of([[1, 2], [3, 4]]).add(NdArray.of([10, 20])).to_list()
        [[11.0, 22.0], [13.0, 24.0]]
        """
        return self._binary(other, "add", np.add)

    def sub(self, other: "INdArray") -> "INdArray":
        """Elementwise ``self - other`` with broadcasting."""
        return self._binary(other, "sub", np.subtract)

    def mul(self, other: "INdArray") -> "INdArray":
        """Elementwise ``self * other`` with broadcasting."""
        return self._binary(other, "mul", np.multiply)

    def div(self, other: "INdArray") -> "INdArray":
        """
        Elementwise ``self / other`` with broadcasting.

        Raises
        ------
        ShapeMismatchError
            If the shapes cannot be broadcast.
        DivisionByZeroError
            If any element of `other` has magnitude below ``1e-7``.
        """
        broadcast_shapes("div", self.shape.dims, other.shape.dims)
        if np.any(np.abs(other._buffer) < EPSILON):
            raise DivisionByZeroError("div: divisor contains a zero element")
        return self._binary(other, "div", np.divide)

    # ----------------------------
    # Array-scalar
    # ----------------------------
    def add_num(self, number: Number) -> "INdArray":
        return self._scalar(number, np.add)

    def sub_num(self, number: Number) -> "INdArray":
        return self._scalar(number, np.subtract)

    def mul_num(self, number: Number) -> "INdArray":
        return self._scalar(number, np.multiply)

    def div_num(self, number: Number) -> "INdArray":
        """
        Divide every element by `number`.

        Raises
        ------
        DivisionByZeroError
            If ``abs(number) < 1e-7``.
        """
        if abs(number) < EPSILON:
            raise DivisionByZeroError(f"div_num: divisor {number} is zero")
        return self._scalar(number, np.divide)

    # ----------------------------
    # Operators
    # ----------------------------
    def __add__(self, other: Union["INdArray", Number]) -> "INdArray":
        if _is_number(other):
            return self.add_num(other)
        if isinstance(other, NdArrayMixinArithmetic):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other: Number) -> "INdArray":
        if _is_number(other):
            return self.add_num(other)
        return NotImplemented

    def __sub__(self, other: Union["INdArray", Number]) -> "INdArray":
        if _is_number(other):
            return self.sub_num(other)
        if isinstance(other, NdArrayMixinArithmetic):
            return self.sub(other)
        return NotImplemented

    def __rsub__(self, other: Number) -> "INdArray":
        if _is_number(other):
            return self._scalar(other, lambda a, s: s - a)
        return NotImplemented

    def __mul__(self, other: Union["INdArray", Number]) -> "INdArray":
        if _is_number(other):
            return self.mul_num(other)
        if isinstance(other, NdArrayMixinArithmetic):
            return self.mul(other)
        return NotImplemented

    def __rmul__(self, other: Number) -> "INdArray":
        if _is_number(other):
            return self.mul_num(other)
        return NotImplemented

    def __truediv__(self, other: Union["INdArray", Number]) -> "INdArray":
        if _is_number(other):
            return self.div_num(other)
        if isinstance(other, NdArrayMixinArithmetic):
            return self.div(other)
        return NotImplemented

    def __rtruediv__(self, other: Number) -> "INdArray":
        if not _is_number(other):
            return NotImplemented
        if np.any(np.abs(self._buffer) < EPSILON):
            raise DivisionByZeroError("rtruediv: divisor contains a zero element")
        return self._scalar(other, lambda a, s: s / a)

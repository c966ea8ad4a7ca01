"""
Unary mixin implementing elementwise math functions.

:class:`NdArrayMixinUnary` contributes ``neg``, ``abs``, ``pow``,
``square``, ``sqrt``, ``exp``, ``log``, ``sin``, ``cos``, ``tanh`` and
``sigmoid``. Each returns a new array of the receiver's shape.

Floating-point overflow follows IEEE semantics (``exp`` of a large value is
``inf``); the only domain check performed is for ``log``.
"""

from __future__ import annotations

from abc import ABC
from typing import Callable, Union

import numpy as np

from .....domain._errors import NumericDomainError
from .....domain._ndarray import INdArray
from ....ops.elementwise_cpu import unary_cpu

Number = Union[int, float]


def _sigmoid(x: np.ndarray) -> np.ndarray:
    return 1.0 / (1.0 + np.exp(-x))


class NdArrayMixinUnary(ABC):
    """Elementwise unary math for `NdArray`."""

    def _unary(
        self: INdArray, kernel: Callable[[np.ndarray], np.ndarray]
    ) -> "INdArray":
        return type(self)._wrap(
            unary_cpu(self._buffer, kernel, self.dtype), self.shape
        )

    def neg(self) -> "INdArray":
        return self._unary(np.negative)

    def __neg__(self) -> "INdArray":
        return self.neg()

    def abs(self) -> "INdArray":
        return self._unary(np.abs)

    def __abs__(self) -> "INdArray":
        return self.abs()

    def pow(self, p: Number) -> "INdArray":
        """
        Raise every element to the power `p`.

        Negative bases with a non-integer exponent yield NaN.
        """
        return self._unary(lambda a: np.power(a, p))

    def __pow__(self, p: Number) -> "INdArray":
        if isinstance(p, (int, float, np.integer, np.floating)):
            return self.pow(p)
        return NotImplemented

    def square(self) -> "INdArray":
        return self._unary(np.square)

    def sqrt(self) -> "INdArray":
        return self._unary(np.sqrt)

    def exp(self) -> "INdArray":
        return self._unary(np.exp)

    def log(self) -> "INdArray":
        """
        Natural logarithm of every element.

        Raises
        ------
        NumericDomainError
            If any element is zero or negative.
        """
        if np.any(self._buffer <= 0):
            raise NumericDomainError("log: input contains a non-positive element")
        return self._unary(np.log)

    def sin(self) -> "INdArray":
        return self._unary(np.sin)

    def cos(self) -> "INdArray":
        return self._unary(np.cos)

    def tanh(self) -> "INdArray":
        return self._unary(np.tanh)

    def sigmoid(self) -> "INdArray":
        """Logistic function ``1 / (1 + exp(-x))``."""
        return self._unary(_sigmoid)

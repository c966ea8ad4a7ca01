"""
Comparison mixin producing float masks.

:class:`NdArrayMixinComparison` contributes the elementwise comparisons
``eq``, ``gt`` and ``lt`` (with broadcasting), the thresholding helpers
``maximum``, ``mask`` and ``clip``, and the whole-array predicate
``is_lar``.

Masks are stored in the array's float dtype: ``1.0`` where the comparison
holds and ``0.0`` elsewhere.
"""

from __future__ import annotations

from abc import ABC
from typing import Union

import numpy as np

from .....domain._errors import InvalidArgumentError, ShapeMismatchError
from .....domain._ndarray import INdArray
from ....ops.elementwise_cpu import unary_cpu

Number = Union[int, float]


class NdArrayMixinComparison(ABC):
    """Elementwise comparisons and thresholding for `NdArray`."""

    def eq(self, other: "INdArray") -> "INdArray":
        """
        Elementwise equality mask with broadcasting.

        Raises
        ------
        ShapeMismatchError
            If the shapes cannot be broadcast.
        """
        return self._binary(other, "eq", np.equal)

    def gt(self, other: "INdArray") -> "INdArray":
        """Elementwise ``self > other`` mask with broadcasting."""
        return self._binary(other, "gt", np.greater)

    def lt(self, other: "INdArray") -> "INdArray":
        """Elementwise ``self < other`` mask with broadcasting."""
        return self._binary(other, "lt", np.less)

    def is_lar(self: INdArray, other: "INdArray") -> bool:
        """
        Return True if every element is strictly greater than its peer.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ (no broadcasting).
        """
        if self.shape != other.shape:
            raise ShapeMismatchError("is_lar", self.shape.dims, other.shape.dims)
        return bool(np.all(self._buffer > other._buffer))

    def maximum(self, number: Number) -> "INdArray":
        """Replace every element below `number` with `number`."""
        return self._unary(lambda a: np.maximum(a, number))

    def mask(self, number: Number) -> "INdArray":
        """``1.0`` where the element is greater than `number`, else ``0.0``."""
        return self._unary(lambda a: a > number)

    def clip(self: INdArray, lo: Number, hi: Number) -> "INdArray":
        """
        Limit every element to ``[lo, hi]``.

        Raises
        ------
        InvalidArgumentError
            If ``lo > hi``.
        """
        if lo > hi:
            raise InvalidArgumentError(f"clip: lower bound {lo} exceeds upper {hi}")
        return type(self)._wrap(
            unary_cpu(self._buffer, lambda a: np.clip(a, lo, hi), self.dtype),
            self.shape,
        )

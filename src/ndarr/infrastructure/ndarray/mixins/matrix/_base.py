"""
Matrix mixin: matrix products and softmax normalisation.

:class:`NdArrayMixinMatrix` contributes

- ``dot(other)``: 2-D matrix product, or a batched product over the last
  two axes when both operands share the same leading (batch) dimensions.
- ``softmax(axis=None)``: numerically stable softmax along one axis.
"""

from __future__ import annotations

import logging
from abc import ABC
from typing import Optional

from .....domain._errors import InvalidArgumentError, ShapeMismatchError
from .....domain._ndarray import INdArray
from .....domain.utils._indexing import validate_axis
from ....ops.reduce_cpu import softmax_axis_cpu
from ....ops.structural_cpu import dot_cpu

logger = logging.getLogger(__name__)

SOFTMAX_FLOOR = 1e-7
"""Lower bound applied to the softmax normalising sum."""


class NdArrayMixinMatrix(ABC):
    """Matrix products and normalisation for `NdArray`."""

    def dot(self: INdArray, other: "INdArray") -> "INdArray":
        """
        Matrix product over the last two axes.

        Parameters
        ----------
        other : NdArray
            Right operand. For 2-D operands, ``(m, k) @ (k, n)`` gives
            ``(m, n)``. For higher ranks both operands must have the same
            rank and identical leading dimensions.

        Raises
        ------
        InvalidArgumentError
            If either operand has fewer than two dimensions.
        ShapeMismatchError
            If the inner dimensions or the batch dimensions differ.

        Examples
        --------
        >>> NdArray.of([[1, 2], [3, 4]]).dot(NdArray.eye((2, 2))).to_list()
        [[1.0, 2.0], [3.0, 4.0]]
        """
        a_dims, b_dims = self.shape.dims, other.shape.dims
        if len(a_dims) < 2 or len(b_dims) < 2:
            raise InvalidArgumentError(
                f"dot requires operands with at least 2 dimensions, got "
                f"{a_dims} and {b_dims}"
            )
        if a_dims[-1] != b_dims[-2]:
            raise ShapeMismatchError(
                "dot", a_dims, b_dims, f"inner dimensions {a_dims[-1]} vs {b_dims[-2]}"
            )
        if a_dims[:-2] != b_dims[:-2]:
            raise ShapeMismatchError(
                "dot", a_dims, b_dims, "batch dimensions differ"
            )

        logger.debug("dot %s x %s", a_dims, b_dims)
        out = dot_cpu(self._buffer, a_dims, other._buffer, b_dims, self.dtype)
        return type(self)._wrap(out, a_dims[:-1] + (b_dims[-1],))

    def softmax(self: INdArray, axis: Optional[int] = None) -> "INdArray":
        """
        Softmax along `axis`.

        Parameters
        ----------
        axis : int, optional
            Axis to normalise. Defaults to the last axis (axis 0 for a
            vector).

        Returns
        -------
        NdArray
            Array of the same shape whose slices along `axis` sum to 1.

        Raises
        ------
        AxisOutOfRangeError
            If `axis` is invalid (a scalar has no axis to normalise).
        """
        dims = self.shape.dims
        if axis is None:
            axis = len(dims) - 1
        validate_axis(axis, len(dims))
        out = softmax_axis_cpu(self._buffer, dims, axis, SOFTMAX_FLOOR, self.dtype)
        return type(self)._wrap(out, self.shape)

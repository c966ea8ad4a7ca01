"""
Reduction mixin exposing the reduction and axis-extrema engines as methods.

:class:`NdArrayMixinReduction` is a thin method surface; the computation and
argument validation live in :mod:`ndarr.infrastructure.reduction` and
:mod:`ndarr.infrastructure.axis_extrema`.

Two families of extrema are exposed:

- ``max(axis)`` / ``min(axis)`` / ``arg_max`` / ``arg_min`` use the
  axis-extrema engine: only the last two axes are accepted and the reduced
  axis is kept at size 1.
- ``reduce_max(axis)`` / ``reduce_min(axis)`` use the general reduction
  engine: any axis is accepted and the axis is removed.
"""

from __future__ import annotations

from abc import ABC
from typing import Optional, Union

from .....domain._ndarray import INdArray
from .... import axis_extrema as _extrema
from .... import reduction as _reduction


class NdArrayMixinReduction(ABC):
    """Reductions and axis extrema for `NdArray`."""

    def sum(self, axis: Optional[int] = None) -> "INdArray":
        """
        Sum all elements, or along `axis`.

        Parameters
        ----------
        axis : int, optional
            Axis to collapse. If None, every element is summed into a scalar
            (shape ``()``) array.

        Raises
        ------
        AxisOutOfRangeError
            If `axis` is outside ``[0, dim_num)``.
        """
        if axis is None:
            return _reduction.sum_all(self)
        return _reduction.sum(self, axis)

    def mean(self, axis: int) -> "INdArray":
        return _reduction.mean(self, axis)

    def var(self, axis: int) -> "INdArray":
        """Population variance along `axis` (axis removed)."""
        return _reduction.var(self, axis)

    def max(self, axis: Optional[int] = None) -> Union[float, "INdArray"]:
        """
        Global maximum, or maximum over one of the last two axes.

        Returns
        -------
        float or NdArray
            A Python float when `axis` is None (``-inf`` for an empty
            array); otherwise an array with `axis` kept at size 1.

        Raises
        ------
        UnsupportedAxisError
            If `axis` is not ``dim_num - 2`` or ``dim_num - 1``.
        """
        if axis is None:
            return _reduction.max_all(self)
        return _extrema.max(self, axis)

    def min(self, axis: int) -> "INdArray":
        """Minimum over one of the last two axes, keeping it at size 1."""
        return _extrema.min(self, axis)

    def arg_max(self, axis: int) -> "INdArray":
        """
        Index of the maximum over one of the last two axes.

        Ties resolve to the lowest index. Indices are stored as floats.
        """
        return _extrema.arg_max(self, axis)

    def arg_min(self, axis: int) -> "INdArray":
        return _extrema.arg_min(self, axis)

    def reduce_max(self, axis: int) -> "INdArray":
        """Maximum along any axis, removing it from the shape."""
        return _reduction.max(self, axis)

    def reduce_min(self, axis: int) -> "INdArray":
        """Minimum along any axis, removing it from the shape."""
        return _reduction.min(self, axis)

"""
Arithmetic mixin for NdArray.

Public API
----------
- ``NdArrayMixinArithmetic``
"""

from ._base import EPSILON, NdArrayMixinArithmetic

__all__ = [
    NdArrayMixinArithmetic.__name__,
    "EPSILON",
]

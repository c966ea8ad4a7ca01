"""
Matrix product and softmax mixin for NdArray.

Public API
----------
- ``NdArrayMixinMatrix``
"""

from ._base import NdArrayMixinMatrix

__all__ = [
    NdArrayMixinMatrix.__name__,
]

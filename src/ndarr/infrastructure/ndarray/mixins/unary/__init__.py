"""
Unary math mixin for NdArray.

Public API
----------
- ``NdArrayMixinUnary``
"""

from ._base import NdArrayMixinUnary

__all__ = [
    NdArrayMixinUnary.__name__,
]

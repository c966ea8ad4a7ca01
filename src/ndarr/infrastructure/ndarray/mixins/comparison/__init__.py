"""
Comparison mixin for NdArray.

Public API
----------
- ``NdArrayMixinComparison``
"""

from ._base import NdArrayMixinComparison

__all__ = [
    NdArrayMixinComparison.__name__,
]

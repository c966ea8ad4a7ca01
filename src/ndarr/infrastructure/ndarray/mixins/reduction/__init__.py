"""
Reduction mixin for NdArray.

Public API
----------
- ``NdArrayMixinReduction``
"""

from ._base import NdArrayMixinReduction

__all__ = [
    NdArrayMixinReduction.__name__,
]

"""
Structural (reshape / gather / slice / tile) mixin for NdArray.

Public API
----------
- ``NdArrayMixinStructural``
"""

from ._base import NdArrayMixinStructural

__all__ = [
    NdArrayMixinStructural.__name__,
]

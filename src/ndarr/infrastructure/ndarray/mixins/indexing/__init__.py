"""
Row/column indexing (gather / scatter-add / sub-block) mixin for NdArray.

Public API
----------
- ``NdArrayMixinIndexing``
"""

from ._base import NdArrayMixinIndexing

__all__ = [
    NdArrayMixinIndexing.__name__,
]

"""
Shape interface definitions.

This module defines the domain-level interface for shape descriptors using
structural typing. A shape is an ordered, immutable sequence of non-negative
dimension sizes interpreted in row-major order (the last dimension varies
fastest).

The interface is intentionally small: it captures what the array core and
the engines need (rank, extents, total size and flat-offset computation).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IShape(Protocol):
    """
    Shape interface.

    Notes
    -----
    - ``dim_num == 0`` denotes a scalar, ``1`` a vector and ``2`` a matrix.
    - ``size()`` is the product of all dimensions (``1`` for a scalar).
    - ``get_index`` maps a full multi-index to a flat row-major offset and is
      a bijection from the valid multi-indices onto ``[0, size())``.
    """

    @property
    def dims(self) -> tuple[int, ...]:
        """Return the dimension sizes as a tuple."""
        ...

    @property
    def dim_num(self) -> int:
        """Return the number of dimensions."""
        ...

    def size(self) -> int:
        """Return the total number of elements described by the shape."""
        ...

    def get_dimension(self, dim_index: int) -> int:
        """Return the size of dimension ``dim_index``."""
        ...

    def get_index(self, *indices: int) -> int:
        """
        Compute the flat row-major offset of a multi-index.

        Raises
        ------
        IndexArityError
            If ``len(indices) != dim_num``.
        IndexOutOfBoundsError
            If any component lies outside its dimension.
        """
        ...

    def is_scalar(self) -> bool: ...

    def is_vector(self) -> bool: ...

    def is_matrix(self) -> bool: ...

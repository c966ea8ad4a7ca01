"""
Concrete row-major shape descriptor.

`Shape` is the single shape implementation used by the engine. It is an
immutable value object: dimension sizes and strides are computed once at
construction and never change, so shapes can be shared freely between arrays
and used as dictionary keys.

Instances are created through the `Shape.of` factory (or `as_shape` for
coercion from plain integer sequences).
"""

from __future__ import annotations

from math import prod
from typing import Iterator, Sequence, Union

from ...domain._errors import InvalidArgumentError
from ...domain._shape import IShape
from ...domain.utils._indexing import compute_strides, validate_multi_index


class Shape(IShape):
    """
    Immutable, row-major shape.

    Parameters
    ----------
    dims : Sequence[int]
        Dimension sizes. An empty sequence denotes a scalar.

    Raises
    ------
    InvalidArgumentError
        If a dimension is not an integer or is negative.

    Notes
    -----
    - ``size()`` is the product of all dimensions, ``1`` for a scalar.
    - ``get_index`` computes ``sum(indices[i] * strides[i])`` with
      ``strides[i] = prod(dims[i + 1:])``.
    - `__slots__` keeps instances small; shapes are created for every result.
    """

    __slots__ = ("_dims", "_strides", "_size")

    def __init__(self, dims: Sequence[int]) -> None:
        normalized = []
        for i, d in enumerate(dims):
            if isinstance(d, bool) or not hasattr(d, "__index__"):
                raise InvalidArgumentError(
                    f"Dimension {i} must be an integer, got {d!r}"
                )
            d = d.__index__()  # numpy integers
            if d < 0:
                raise InvalidArgumentError(
                    f"Dimension {i} must be non-negative, got {d}"
                )
            normalized.append(d)

        self._dims: tuple[int, ...] = tuple(normalized)
        self._strides: tuple[int, ...] = compute_strides(self._dims)
        self._size: int = prod(self._dims)

    @classmethod
    def of(cls, *dims: int) -> "Shape":
        """
        Build a shape from dimension sizes.

        ``Shape.of()`` is a scalar, ``Shape.of(n)`` a vector and
        ``Shape.of(rows, cols)`` a matrix.
        """
        return cls(dims)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def dims(self) -> tuple[int, ...]:
        return self._dims

    @property
    def strides(self) -> tuple[int, ...]:
        """Row-major element strides, one per dimension."""
        return self._strides

    @property
    def dim_num(self) -> int:
        return len(self._dims)

    def size(self) -> int:
        return self._size

    def get_dimension(self, dim_index: int) -> int:
        """
        Return the size of one dimension.

        Raises
        ------
        InvalidArgumentError
            If ``dim_index`` is outside ``[0, dim_num)``.
        """
        if not 0 <= dim_index < len(self._dims):
            raise InvalidArgumentError(
                f"Dimension index {dim_index} out of range [0, {len(self._dims)})"
            )
        return self._dims[dim_index]

    def get_index(self, *indices: int) -> int:
        """
        Compute the flat row-major offset of a full multi-index.

        Parameters
        ----------
        *indices : int
            One component per dimension.

        Returns
        -------
        int
            Offset in ``[0, size())``.

        Raises
        ------
        IndexArityError
            If ``len(indices) != dim_num``.
        IndexOutOfBoundsError
            If any component lies outside ``[0, dims[i])``.
        """
        validate_multi_index(self._dims, indices)
        return sum(i * s for i, s in zip(indices, self._strides))

    def is_scalar(self) -> bool:
        return len(self._dims) == 0

    def is_vector(self) -> bool:
        return len(self._dims) == 1

    def is_matrix(self) -> bool:
        return len(self._dims) == 2

    @property
    def row(self) -> int:
        """Number of rows of a matrix shape."""
        self._require_matrix("row")
        return self._dims[0]

    @property
    def column(self) -> int:
        """Number of columns of a matrix shape."""
        self._require_matrix("column")
        return self._dims[1]

    def _require_matrix(self, what: str) -> None:
        if len(self._dims) != 2:
            raise InvalidArgumentError(
                f"Shape.{what} is only defined for 2-D shapes, got {self._dims}"
            )

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Shape):
            return self._dims == other._dims
        if isinstance(other, tuple):
            return self._dims == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._dims)

    def __iter__(self) -> Iterator[int]:
        return iter(self._dims)

    def __len__(self) -> int:
        return len(self._dims)

    def __getitem__(self, i: int) -> int:
        return self._dims[i]

    def __repr__(self) -> str:
        return f"Shape{self._dims}"


def as_shape(shape: Union[Shape, IShape, Sequence[int]]) -> Shape:
    """
    Coerce a shape-like value into a `Shape`.

    Parameters
    ----------
    shape : Shape, IShape or Sequence[int]
        An existing shape (returned as is) or a sequence of dimension sizes.

    Raises
    ------
    InvalidArgumentError
        If `shape` is neither a shape nor a sequence of integers.
    """
    if isinstance(shape, Shape):
        return shape
    if isinstance(shape, IShape):
        return Shape(shape.dims)
    if isinstance(shape, (str, bytes)) or not hasattr(shape, "__iter__"):
        raise InvalidArgumentError(f"Expected a shape or int sequence, got {shape!r}")
    return Shape(tuple(shape))

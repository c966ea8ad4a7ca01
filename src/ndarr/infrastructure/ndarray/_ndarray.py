"""
Concrete N-dimensional array (NumPy backend).

`NdArray` pairs a flat, contiguous, row-major NumPy buffer with an immutable
`Shape`. It satisfies the domain-level `INdArray` protocol; the operation
families (arithmetic, unary math, comparison, structural transforms,
row/column indexing, reductions, matrix products) are contributed by
mixins so this module only holds construction, element access,
conversions and value equality.

Design notes
------------
- The buffer is always 1-D and exclusively owned by one instance. Every
  operation allocates a fresh buffer for its result, so holding a reference
  to an array guarantees its contents never change unless `set` is called
  on that very instance.
- Results are built through ``type(self)._wrap`` from the mixins and the
  engine modules, which lets them avoid importing this class.
- The buffer dtype comes from `ndarr.infrastructure._config` unless given
  explicitly.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

import numpy as np
from typing_extensions import Self

from ...domain._errors import InvalidArgumentError
from ...domain._ndarray import INdArray
from ...domain._shape import IShape
from .._config import default_dtype
from ..shape._shape import Shape, as_shape
from .mixins.arithmetic import NdArrayMixinArithmetic
from .mixins.comparison import NdArrayMixinComparison
from .mixins.indexing import NdArrayMixinIndexing
from .mixins.matrix import NdArrayMixinMatrix
from .mixins.reduction import NdArrayMixinReduction
from .mixins.structural import NdArrayMixinStructural
from .mixins.unary import NdArrayMixinUnary

Number = Union[int, float]
ShapeLike = Union[IShape, Sequence[int]]


def _resolve_dtype(dtype: Any) -> np.dtype:
    if dtype is None:
        return default_dtype()
    try:
        dt = np.dtype(dtype)
    except TypeError as e:
        raise InvalidArgumentError(f"Unknown dtype: {dtype!r}") from e
    # Integer buffers would truncate mean/var/div results.
    if not np.issubdtype(dt, np.floating):
        raise InvalidArgumentError(
            f"NdArray buffers must be floating point, got dtype {dt}"
        )
    return dt


class NdArray(
    NdArrayMixinArithmetic,
    NdArrayMixinUnary,
    NdArrayMixinComparison,
    NdArrayMixinStructural,
    NdArrayMixinIndexing,
    NdArrayMixinReduction,
    NdArrayMixinMatrix,
    INdArray,
):
    """
    Row-major N-dimensional float array.

    Parameters
    ----------
    shape : Shape or Sequence[int]
        Array shape. An empty shape denotes a scalar holding one element.
    dtype : np.dtype, optional
        Element dtype. Defaults to the configured dtype (``float32`` unless
        ``NDARR_DTYPE`` says otherwise).

    Notes
    -----
    The constructor allocates a zero-filled buffer. Use the ``of`` factory
    to build an array from nested data or from a flat buffer and a shape.
    """

    # NumPy operands defer to the reflected operators defined here.
    __array_ufunc__ = None

    def __init__(self, shape: ShapeLike, *, dtype: Any = None) -> None:
        self._shape: Shape = as_shape(shape)
        self._buffer: np.ndarray = np.zeros(
            self._shape.size(), dtype=_resolve_dtype(dtype)
        )

    @classmethod
    def _wrap(cls, buffer: np.ndarray, shape: ShapeLike) -> Self:
        """
        Build an array that takes ownership of `buffer` without copying.

        Internal use only. The caller guarantees that `buffer` is a fresh
        1-D array of ``shape.size()`` elements that nothing else references.
        """
        obj = cls.__new__(cls)
        obj._shape = as_shape(shape)
        obj._buffer = buffer
        return obj

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def of(
        cls,
        data: Any,
        shape: Optional[ShapeLike] = None,
        *,
        dtype: Any = None,
    ) -> Self:
        """
        Create an array from nested data, a flat buffer plus a shape, or a
        single number.

        Parameters
        ----------
        data : number, nested sequence or flat sequence
            - a number produces a scalar (shape ``()``);
            - nested sequences infer the shape from their nesting;
            - with `shape` given, `data` is read as a flat row-major buffer.
        shape : Shape or Sequence[int], optional
            Target shape for flat data.
        dtype : np.dtype, optional
            Element dtype.

        Returns
        -------
        NdArray
            A new array that does not alias `data`.

        Raises
        ------
        InvalidArgumentError
            If nesting is ragged, elements are not numeric, or the flat
            buffer length differs from ``shape.size()``.

        Examples
        --------
        >>> NdArray.of([[1, 2], [3, 4]]).shape
        Shape(2, 2)
        >>> NdArray.of([1, 2, 3, 4, 5, 6], Shape.of(2, 3)).get(1, 0)
        4.0
        """
        dt = _resolve_dtype(dtype)
        if data is None:
            raise InvalidArgumentError("Cannot build an array from None")
        if isinstance(data, NdArray):
            data = data.to_numpy()
        try:
            arr = np.array(data, dtype=dt)
        except (ValueError, TypeError) as e:
            raise InvalidArgumentError(
                f"Cannot build an array from {type(data).__name__} data: {e}"
            ) from e

        if shape is None:
            return cls._wrap(arr.reshape(-1), Shape(arr.shape))

        target = as_shape(shape)
        flat = arr.reshape(-1)
        if flat.size != target.size():
            raise InvalidArgumentError(
                f"Buffer length {flat.size} does not match shape {target.dims} "
                f"(size {target.size()})"
            )
        return cls._wrap(flat, target)

    @classmethod
    def from_numpy(cls, arr: np.ndarray, *, dtype: Any = None) -> Self:
        """Copy a NumPy array of any shape into a new array."""
        dt = _resolve_dtype(dtype)
        src = np.asarray(arr)
        return cls._wrap(np.array(src, dtype=dt, copy=True).reshape(-1), src.shape)

    @classmethod
    def zeros(cls, shape: ShapeLike, *, dtype: Any = None) -> Self:
        return cls(shape, dtype=dtype)

    @classmethod
    def ones(cls, shape: ShapeLike, *, dtype: Any = None) -> Self:
        return cls.full(shape, 1.0, dtype=dtype)

    @classmethod
    def full(cls, shape: ShapeLike, value: Number, *, dtype: Any = None) -> Self:
        """Create an array of `shape` with every element equal to `value`."""
        s = as_shape(shape)
        return cls._wrap(np.full(s.size(), value, dtype=_resolve_dtype(dtype)), s)

    @classmethod
    def scalar(cls, value: Number, *, dtype: Any = None) -> Self:
        """Wrap a single number as a shape-``()`` array."""
        return cls.full((), value, dtype=dtype)

    @classmethod
    def eye(cls, shape: ShapeLike, *, dtype: Any = None) -> Self:
        """
        Identity-like matrix: ones on the main diagonal, zeros elsewhere.

        Non-square shapes are allowed; the diagonal stops at the shorter
        side.

        Raises
        ------
        InvalidArgumentError
            If `shape` is not 2-D.
        """
        s = as_shape(shape)
        if not s.is_matrix():
            raise InvalidArgumentError(f"eye requires a 2-D shape, got {s.dims}")
        buf = np.eye(s.row, s.column, dtype=_resolve_dtype(dtype)).reshape(-1)
        return cls._wrap(buf, s)

    @classmethod
    def linspace(
        cls, start: Number, stop: Number, num: int, *, dtype: Any = None
    ) -> Self:
        """
        `num` evenly spaced values over ``[start, stop]`` (inclusive).

        Raises
        ------
        InvalidArgumentError
            If ``num <= 0``.
        """
        if num <= 0:
            raise InvalidArgumentError(f"linspace requires num > 0, got {num}")
        buf = np.linspace(start, stop, num, dtype=np.float64)
        return cls._wrap(buf.astype(_resolve_dtype(dtype)), (num,))

    @classmethod
    def rand_normal(
        cls, shape: ShapeLike, seed: Optional[int] = None, *, dtype: Any = None
    ) -> Self:
        """Standard-normal samples; `seed` makes the draw reproducible."""
        s = as_shape(shape)
        rng = np.random.default_rng(seed)
        buf = rng.standard_normal(s.size()).astype(_resolve_dtype(dtype))
        return cls._wrap(buf, s)

    @classmethod
    def rand_uniform(
        cls,
        low: Number,
        high: Number,
        shape: ShapeLike,
        seed: Optional[int] = None,
        *,
        dtype: Any = None,
    ) -> Self:
        """Uniform samples from ``[low, high)``."""
        if low > high:
            raise InvalidArgumentError(
                f"rand_uniform requires low <= high, got {low} > {high}"
            )
        s = as_shape(shape)
        rng = np.random.default_rng(seed)
        buf = rng.uniform(low, high, s.size()).astype(_resolve_dtype(dtype))
        return cls._wrap(buf, s)

    def like(self, value: Number) -> Self:
        """Array of this array's shape and dtype filled with `value`."""
        return type(self).full(self._shape, value, dtype=self.dtype)

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------
    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def dtype(self) -> np.dtype:
        return self._buffer.dtype

    def size(self) -> int:
        return self._shape.size()

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    def get(self, *indices: int) -> float:
        """
        Read one element.

        Raises
        ------
        IndexArityError
            If the number of indices differs from ``dim_num``.
        IndexOutOfBoundsError
            If an index component is out of range.
        """
        return float(self._buffer[self._shape.get_index(*indices)])

    def set(self, value: Number, *indices: int) -> None:
        """
        Write one element in place.

        This is the only mutating operation; it exists for filling freshly
        constructed arrays.
        """
        self._buffer[self._shape.get_index(*indices)] = value

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------
    def to_numpy(self) -> np.ndarray:
        """Return a copy of the contents shaped like this array."""
        return self._buffer.reshape(self._shape.dims).copy()

    def to_list(self) -> Any:
        """Nested Python lists (a bare float for a scalar)."""
        return self.to_numpy().tolist()

    def get_array(self) -> np.ndarray:
        """Return a flat, row-major copy of the buffer."""
        return self._buffer.copy()

    def item(self) -> float:
        """
        Return the value of a single-element array.

        Raises
        ------
        InvalidArgumentError
            If the array holds more or fewer than one element.
        """
        if self._buffer.size != 1:
            raise InvalidArgumentError(
                f"item() requires exactly one element, array has {self._buffer.size}"
            )
        return float(self._buffer[0])

    def get_matrix(self) -> list:
        """
        Return the contents of a 2-D array as a list of row lists.

        Raises
        ------
        InvalidArgumentError
            If the array is not 2-D.
        """
        if not self._shape.is_matrix():
            raise InvalidArgumentError(
                f"get_matrix requires a 2-D array, got shape {self._shape.dims}"
            )
        return self.to_list()

    def copy(self) -> Self:
        """Independent copy with the same shape and contents."""
        return type(self)._wrap(self._buffer.copy(), self._shape)

    def __eq__(self, other: object) -> bool:
        """
        Value equality: same shape and the same element values.

        NaN compares equal to NaN here so that an array always equals its
        own copy. The dtype is not compared. Use `eq` for an elementwise
        mask.
        """
        if not isinstance(other, NdArray):
            return NotImplemented
        return self._shape == other._shape and bool(
            np.array_equal(self._buffer, other._buffer, equal_nan=True)
        )

    def __hash__(self) -> int:
        # Canonicalise so equal arrays hash equally: widen to float64 (exact
        # for float32), fold -0.0 into 0.0 and every NaN payload into one.
        canon = self._buffer.astype(np.float64) + 0.0
        canon[np.isnan(canon)] = np.nan
        return hash((self._shape, canon.tobytes()))

    def __len__(self) -> int:
        if self._shape.is_scalar():
            raise TypeError("len() of a scalar array")
        return self._shape.dims[0]

    def __repr__(self) -> str:
        body = np.array2string(self.to_numpy(), separator=", ")
        return f"NdArray({body}, shape={self._shape.dims}, dtype={self.dtype})"

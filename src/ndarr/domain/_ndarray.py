"""
N-dimensional array interface definitions.

This module defines `INdArray`, the structural interface that external
collaborators (an autograd/graph layer, neural-network layers, training
loops) program against. It mirrors the public surface of the concrete
NumPy-backed `NdArray` so higher layers can type against the protocol and
stay decoupled from the storage implementation.

Notes
-----
- Every operation returns a freshly allocated array; implementations must not
  mutate their inputs. Autograd layers rely on this to retain references to
  forward values safely.
- The only mutator is `set`, intended for filling arrays right after
  construction.
- Callers must not assume any buffer layout beyond row-major ordering.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, Union, runtime_checkable

from ._shape import IShape

Number = Union[int, float]


@runtime_checkable
class INdArray(Protocol):
    """
    N-dimensional array interface.

    The protocol groups the operations into element access, elementwise
    arithmetic, structural views, reductions and axis extrema. Semantics are
    documented on the concrete implementation.
    """

    # ---------------------------------------------------------------------
    # Identity / element access
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> IShape:
        """Return the array's shape."""
        ...

    def get(self, *indices: int) -> float: ...

    def set(self, value: Number, *indices: int) -> None: ...

    def to_numpy(self) -> Any:
        """Return a copy of the contents as a NumPy array of the array's shape."""
        ...

    def get_array(self) -> Any:
        """Return a flat copy of the row-major buffer."""
        ...

    # ---------------------------------------------------------------------
    # Elementwise arithmetic (broadcasting)
    # ---------------------------------------------------------------------
    def add(self, other: "INdArray") -> "INdArray": ...

    def sub(self, other: "INdArray") -> "INdArray": ...

    def mul(self, other: "INdArray") -> "INdArray": ...

    def div(self, other: "INdArray") -> "INdArray": ...

    def add_num(self, number: Number) -> "INdArray": ...

    def sub_num(self, number: Number) -> "INdArray": ...

    def mul_num(self, number: Number) -> "INdArray": ...

    def div_num(self, number: Number) -> "INdArray": ...

    # ---------------------------------------------------------------------
    # Structural views
    # ---------------------------------------------------------------------
    def reshape(self, shape: Union[IShape, Sequence[int]]) -> "INdArray": ...

    def index_select(self, axis: int, indices: Sequence[int]) -> "INdArray": ...

    def slice_range(self, axis: int, start: int, end: int) -> "INdArray": ...

    def repeat(self, *counts: int) -> "INdArray": ...

    # ---------------------------------------------------------------------
    # Reductions and axis extrema
    # ---------------------------------------------------------------------
    def sum(self, axis: Optional[int] = None) -> "INdArray": ...

    def mean(self, axis: int) -> "INdArray": ...

    def var(self, axis: int) -> "INdArray": ...

    def max(self, axis: Optional[int] = None) -> Union[float, "INdArray"]: ...

    def min(self, axis: int) -> "INdArray": ...

    def arg_max(self, axis: int) -> "INdArray": ...

    def arg_min(self, axis: int) -> "INdArray": ...

"""
Core protocols for pydecomp.

Every decomposition accepts anything that behaves like a 2-D numeric
buffer: an owned ndarray, a read-only array, a strided window obtained by
basic slicing, or any object exposing ``__array__``. We use Protocol
(structural typing) rather than a class hierarchy so that all three
variants are accepted without wrapping.

Design Principles:
    - Minimal contract: row/col extent, element indexing, array export
    - Algorithms are generic over the capability set, not over a base class
    - Inputs are borrowed; decompositions copy before mutating
"""

from typing import Protocol, Any, runtime_checkable


@runtime_checkable
class MatrixLike(Protocol):
    """
    Minimal protocol for a matrix operand.

    numpy.ndarray satisfies it directly, including views produced by
    slicing (``A[1:4, ::2]``) and arrays with ``flags.writeable`` cleared.
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """(rows, cols) extent."""
        ...

    def __getitem__(self, key: Any) -> Any:
        """Checked element and block indexing."""
        ...

    def __array__(self, *args: Any, **kwargs: Any) -> Any:
        """Export the addressed elements as an ndarray."""
        ...

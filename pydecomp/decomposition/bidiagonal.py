"""
Two-sided Householder reduction to bidiagonal form.

For each column k a left reflector clears the entries below the diagonal,
and (for all but the last two columns) a right reflector clears the
entries to the right of the super-diagonal. The reflectors are
accumulated into U and V so that A == U @ B @ V.T.

The reduction assumes rows >= cols. Wide matrices are transposed first
and the factors swapped back at the end, which turns the super-diagonal
into a sub-diagonal.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydecomp.core.exceptions import DecompositionError, NumericalError
from pydecomp.core.validation import as_matrix
from pydecomp.core.compute.linalg.householder import make_householder

Array = NDArray[np.floating[Any]]


def _householder(column: Array) -> Array:
    try:
        return make_householder(column)
    except NumericalError as e:
        raise DecompositionError("Cannot compute bidiagonal form.") from e


def _bidiagonalize(M: Array) -> tuple[Array, Array, Array]:
    """Upper bidiagonal reduction of a tall (rows >= cols) working array."""
    m, n = M.shape
    U = np.eye(m, dtype=M.dtype)
    V = np.eye(n, dtype=M.dtype)

    for k in range(n):
        # Left reflector kills everything below the diagonal in column k
        h = _householder(M[k:, k])
        M[k:, k:] = h @ M[k:, k:]
        U[:, k:] = U[:, k:] @ h

        if k < n - 2:
            # Right reflector kills row k right of the super-diagonal
            h = _householder(M[k, k + 1:])
            M[k:, k + 1:] = M[k:, k + 1:] @ h
            V[:, k + 1:] = V[:, k + 1:] @ h

    # Trim off the zeroed rows
    return M[:n, :n].copy(), U[:, :n].copy(), V


def bidiagonal_decomp(A: ArrayLike) -> tuple[Array, Array, Array]:
    """
    Bidiagonal decomposition of a rectangular matrix.

    Args:
        A: Matrix (m x n), any matrix-like. The caller's data is copied.

    Returns:
        (B, U, V) with A == U @ B @ V.T. B is k x k with k = min(m, n),
        upper bidiagonal when m >= n and lower bidiagonal when m < n.
        U is m x k and V is n x k, both with orthonormal columns.

    Raises:
        DecompositionError: If a column or row to be reflected is all zero

    Example:
        >>> A = np.arange(1.0, 16.0).reshape(5, 3) ** 2
        >>> B, U, V = bidiagonal_decomp(A)
        >>> np.allclose(U @ B @ V.T, A)
        True
    """
    M = as_matrix(A)

    if M.shape[0] < M.shape[1]:
        B, U, V = _bidiagonalize(M.T.copy())
        return B.T, V, U

    return _bidiagonalize(M)

"""
Triangular solvers and small matrix utilities.

Forward and back substitution go through scipy.linalg.solve_triangular
(LAPACK trtrs). A zero on the diagonal is reported through the
decomposition failure channel before LAPACK is called, so callers see
SingularMatrixError rather than a LinAlgError.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.linalg import solve_triangular

from pydecomp.core.exceptions import SingularMatrixError


def _check_triangular_diagonal(T: NDArray[np.floating[Any]], name: str) -> None:
    zero = np.flatnonzero(np.diagonal(T) == 0)
    if zero.size > 0:
        raise SingularMatrixError(
            f"Matrix is singular: zero at diagonal index {int(zero[0])} of {name}.",
            matrix_name=name,
            pivot_index=int(zero[0]),
        )


def forward_substitution(
    L: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Solve L x = y for lower triangular L.

    Args:
        L: Lower triangular matrix (n x n)
        y: Right-hand side (n,) or block of right-hand sides (n x k)

    Returns:
        Solution x with the same shape as y

    Raises:
        SingularMatrixError: If L has a zero on its diagonal
    """
    _check_triangular_diagonal(L, 'L')
    return solve_triangular(L, y, lower=True, check_finite=False)


def back_substitution(
    U: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Solve U x = y for upper triangular U.

    Raises:
        SingularMatrixError: If U has a zero on its diagonal
    """
    _check_triangular_diagonal(U, 'U')
    return solve_triangular(U, y, lower=False, check_finite=False)


def argmax(values: ArrayLike) -> tuple[int, Any]:
    """
    Index and value of the largest entry.

    Compares signed values, not magnitudes. Ties resolve to the first
    occurrence.
    """
    arr = np.asarray(values)
    idx = int(np.argmax(arr))
    return idx, arr[idx]


def parity(P: ArrayLike) -> int:
    """
    Sign of a permutation matrix: +1 for even, -1 for odd.

    Counts cycles of the permutation; a cycle of even length is an odd
    number of transpositions.
    """
    perm = np.argmax(np.asarray(P), axis=1)
    n = perm.shape[0]
    seen = np.zeros(n, dtype=bool)
    sign = 1

    for start in range(n):
        if seen[start]:
            continue
        length = 0
        j = start
        while not seen[j]:
            seen[j] = True
            j = perm[j]
            length += 1
        if length % 2 == 0:
            sign = -sign

    return sign


def is_diag(A: NDArray[np.floating[Any]]) -> bool:
    """True if every off-diagonal entry is exactly zero."""
    off = A.copy()
    np.fill_diagonal(off, 0)
    return not np.any(off)

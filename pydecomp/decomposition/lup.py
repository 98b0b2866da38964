"""
LU decomposition with partial pivoting, and the operations built on it.

lup_decomp computes L (unit lower triangular), U (upper triangular) and
a permutation matrix P with L @ U == P @ A via the Doolittle recursion.

Pivot selection compares signed values, not magnitudes: for column i the
pivot row is the arg-max of A[i:, i] with ties going to the first
occurrence. This can pick a zero pivot on a matrix that magnitude-based
pivoting would factor; such matrices raise SingularMatrixError. The
permutation parity used by det() follows the same convention.

The arg-max is taken over the rows of the input, not of the partially
permuted matrix, and its offset is relative to row i: rows i and
i + offset of P are exchanged, never row i and the row numbered by the
bare offset.

solve, inverse and det route through lup_decomp and re-raise its
failures with their own messages.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydecomp.core.exceptions import (
    DecompositionError,
    SingularMatrixError,
)
from pydecomp.core.validation import (
    as_square_matrix,
    check_1d,
    check_array,
    check_consistent_length,
)
from pydecomp.core.compute.linalg.triangular import (
    argmax,
    back_substitution,
    forward_substitution,
    is_diag,
    parity,
)

Array = NDArray[np.floating[Any]]


def _lup(A: Array) -> tuple[Array, Array, Array]:
    """LUP on an already validated square working array."""
    n = A.shape[0]
    dtype = A.dtype

    L = np.zeros((n, n), dtype=dtype)
    U = np.zeros((n, n), dtype=dtype)
    P = np.eye(n, dtype=dtype)

    # Permutation from the signed arg-max of each column below the diagonal
    for i in range(n):
        offset, _ = argmax(A[i:, i])
        if offset != 0:
            P[[i, i + offset]] = P[[i + offset, i]]

    A2 = P @ A

    for i in range(n):
        L[i, i] = 1

        for j in range(i + 1):
            U[j, i] = A2[j, i] - L[j, :j] @ U[:j, i]

        denom = U[i, i]
        if denom == 0:
            # A zero pivot over a zero residual column means column i of
            # the Schur complement vanishes, so A itself is singular.
            residual = A2[i + 1:, i] - L[i + 1:, :i] @ U[:i, i]
            raise SingularMatrixError(
                "Matrix could not be LUP decomposed.",
                matrix_name='U',
                pivot_index=i,
                rank_deficient=not np.any(residual),
            )

        for j in range(i, n):
            L[j, i] = (A2[j, i] - L[j, :i] @ U[:i, i]) / denom

    return L, U, P


def lup_decomp(A: ArrayLike) -> tuple[Array, Array, Array]:
    """
    LUP decomposition of a square matrix.

    Args:
        A: Square matrix (n x n), any matrix-like

    Returns:
        (L, U, P) with L unit lower triangular, U upper triangular,
        P a permutation matrix and L @ U == P @ A

    Raises:
        DimensionError: If A is not square
        SingularMatrixError: If a zero pivot is met

    Example:
        >>> A = np.array([[1., 2., 0.], [0., 3., 4.], [5., 1., 2.]])
        >>> L, U, P = lup_decomp(A)
        >>> np.allclose(L @ U, P @ A)
        True
    """
    return _lup(as_square_matrix(A))


def solve(A: ArrayLike, y: ArrayLike) -> Array:
    """
    Solve A x = y.

    Args:
        A: Square matrix (n x n)
        y: Right-hand side of length n

    Returns:
        Solution vector x (n,)

    Raises:
        DimensionError: If A is not square or y is not a vector of length n
        DecompositionError: If A cannot be LUP decomposed
        SingularMatrixError: If there is no unique solution

    Example:
        >>> solve([[2., 3.], [1., 2.]], [13., 8.])
        array([2., 3.])
    """
    A_arr = as_square_matrix(A)
    y_arr = check_array(y, 'y')
    if y_arr.ndim == 2 and y_arr.shape[1] == 1:
        y_arr = y_arr.ravel()
    check_1d(y_arr, 'y')
    check_consistent_length(A_arr, y_arr, names=('A', 'y'))

    try:
        L, U, P = _lup(A_arr)
    except DecompositionError as e:
        raise DecompositionError(
            "Could not compute LUP decomposition to solve the system."
        ) from e

    b = forward_substitution(L, P @ y_arr)
    return back_substitution(U, b)


def inverse(A: ArrayLike) -> Array:
    """
    Inverse of a square matrix.

    Raises:
        DimensionError: If A is not square
        DecompositionError: If A cannot be LUP decomposed
        SingularMatrixError: If A has zero determinant

    Example:
        >>> inverse([[2., 3.], [1., 2.]])
        array([[ 2., -3.],
               [-1.,  2.]])
    """
    A_arr = as_square_matrix(A)

    try:
        L, U, P = _lup(A_arr)
    except DecompositionError as e:
        raise DecompositionError(
            "Could not compute LUP factorization for inverse."
        ) from e

    d = np.prod(np.diagonal(L)) * np.prod(np.diagonal(U))
    if d == 0:
        raise SingularMatrixError(
            "Matrix is singular and cannot be inverted.",
            matrix_name='A',
        )

    # Every column of P is P @ e_i, so solving against P yields all of
    # A⁻¹'s columns at once.
    return back_substitution(U, forward_substitution(L, P))


def det(A: ArrayLike) -> Any:
    """
    Determinant of a square matrix.

    Diagonal, 2x2 and 3x3 matrices use closed forms; everything else
    multiplies the LUP diagonals and applies the permutation parity.

    Raises:
        DimensionError: If A is not square
        DecompositionError: If a matrix larger than 3x3 cannot be LUP
            decomposed and the failure does not prove it singular

    Example:
        >>> float(det(np.ones((4, 4))))
        0.0
    """
    A_arr = as_square_matrix(A)
    n = A_arr.shape[0]

    if is_diag(A_arr):
        return np.prod(np.diagonal(A_arr))

    a = A_arr
    if n == 2:
        return a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0]
    if n == 3:
        return (
            a[0, 0] * a[1, 1] * a[2, 2]
            + a[0, 1] * a[1, 2] * a[2, 0]
            + a[0, 2] * a[1, 0] * a[2, 1]
            - a[0, 0] * a[1, 2] * a[2, 1]
            - a[0, 1] * a[1, 0] * a[2, 2]
            - a[0, 2] * a[1, 1] * a[2, 0]
        )

    try:
        L, U, P = _lup(A_arr)
    except SingularMatrixError as e:
        if e.rank_deficient:
            return A_arr.dtype.type(0)
        raise DecompositionError(
            "Could not compute LUP decomposition for determinant."
        ) from e

    d = np.prod(np.diagonal(L)) * np.prod(np.diagonal(U))
    return parity(P) * d

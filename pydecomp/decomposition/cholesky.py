"""Cholesky decomposition."""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydecomp.core.exceptions import NotPositiveDefiniteError
from pydecomp.core.validation import as_square_matrix


def cholesky(A: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Cholesky decomposition of a positive definite matrix.

    Builds lower triangular L with L @ L.T == A row by row. Only the lower
    triangle of A is read.

    Args:
        A: Square symmetric positive definite matrix (n x n)

    Returns:
        Lower triangular L (n x n)

    Raises:
        DimensionError: If A is not square
        NotPositiveDefiniteError: As soon as a non-finite entry of L is
            produced (negative residual under the square root, or a
            division by a zero diagonal)

    Example:
        >>> A = np.array([[1.0, 0.5, 0.5], [0.5, 1.0, 0.5], [0.5, 0.5, 1.0]])
        >>> L = cholesky(A)
        >>> np.allclose(L @ L.T, A)
        True
    """
    A_arr = as_square_matrix(A)
    n = A_arr.shape[0]
    L = np.zeros_like(A_arr)

    with np.errstate(invalid='ignore', divide='ignore'):
        for i in range(n):
            for j in range(i + 1):
                s = A_arr[i, j] - L[i, :j] @ L[j, :j]

                if j == i:
                    value = np.sqrt(s)
                else:
                    value = s / L[j, j]

                if not np.isfinite(value):
                    raise NotPositiveDefiniteError(
                        "Matrix is not positive definite.",
                        matrix_name='A',
                        row=i,
                    )
                L[i, j] = value

    return L

"""
QR decomposition via Householder reflections.

For each column i a reflector is built from R[i:, i] and embedded as the
block diagonal matrix diag(I_i, H_i). Q accumulates the reflectors on the
right and R is updated on the left, so A == Q @ R holds after every step.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydecomp.core.exceptions import DecompositionError, NumericalError
from pydecomp.core.validation import as_matrix
from pydecomp.core.compute.linalg.householder import make_householder


def qr_decomp(A: ArrayLike) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    QR decomposition of a rectangular matrix.

    Args:
        A: Matrix (m x n), any matrix-like. The caller's data is copied.

    Returns:
        (Q, R) with Q orthogonal (m x m), R upper triangular (m x n)
        and Q @ R == A

    Raises:
        DecompositionError: If a column below the diagonal is all zero

    Example:
        >>> A = np.array([[1.0, 0.5, 0.5], [0.5, 1.0, 0.5], [0.5, 0.5, 1.0]])
        >>> Q, R = qr_decomp(A)
        >>> np.allclose(Q @ R, A)
        True
    """
    R = as_matrix(A)
    m, n = R.shape
    Q = np.eye(m, dtype=R.dtype)

    # The last row of a square or wide matrix has nothing below the
    # diagonal to eliminate.
    for i in range(min(n, m - 1)):
        try:
            holder = make_householder(R[i:, i])
        except NumericalError as e:
            raise DecompositionError("Cannot compute QR decomposition.") from e

        H = np.eye(m, dtype=R.dtype)
        H[i:, i:] = holder

        Q = Q @ H
        R = H @ R

    return Q, R

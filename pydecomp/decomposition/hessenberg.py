"""
Reduction to upper Hessenberg form.

Each step k builds a Householder direction u from the sub-column
H[k+1:, k] and applies the reflector I - 2 u uᵗ on both sides as rank-1
updates: on the left to rows k+1.., on the right to columns k+1...
The similarity transform preserves eigenvalues.

upper_hess_decomp additionally accumulates the reflectors into an
orthogonal transform Q with Qᵗ A Q == H. Accumulation runs in reverse
step order starting from the identity, so each update only touches the
trailing block that the reflector acts on.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydecomp.core.exceptions import DecompositionError, NumericalError
from pydecomp.core.validation import as_square_matrix, check_nonempty
from pydecomp.core.compute.linalg.householder import make_householder_vec

Array = NDArray[np.floating[Any]]


def _reduce(H: Array) -> list[Array]:
    """Reduce H in place; return the per-step reflector directions."""
    n = H.shape[0]
    directions = []

    for k in range(n - 2):
        try:
            u = make_householder_vec(H[k + 1:, k])
        except NumericalError as e:
            raise DecompositionError("Cannot compute upper Hessenberg form.") from e

        block = H[k + 1:, k:]
        block -= 2 * u @ (u.T @ block)

        block = H[:, k + 1:]
        block -= 2 * (block @ u) @ u.T

        directions.append(u)

    # Clear rounding noise below the sub-diagonal
    H[np.tril_indices(n, -2)] = 0
    return directions


def upper_hessenberg(A: ArrayLike) -> Array:
    """
    Upper Hessenberg form of a square matrix.

    Use upper_hess_decomp if the transform is also required.

    Args:
        A: Square matrix (n x n)

    Returns:
        H, similar to A, with zeros below the first sub-diagonal

    Raises:
        DimensionError: If A is not square or is empty
        DecompositionError: If a sub-column to be eliminated is all zero
    """
    H = as_square_matrix(A)
    check_nonempty(H, 'A')
    _reduce(H)
    return H


def upper_hess_decomp(A: ArrayLike) -> tuple[Array, Array]:
    """
    Upper Hessenberg form together with its orthogonal transform.

    Args:
        A: Square matrix (n x n)

    Returns:
        (Q, H) where Q is orthogonal and Q.T @ A @ Q == H

    Raises:
        DimensionError: If A is not square or is empty
        DecompositionError: If a sub-column to be eliminated is all zero

    Example:
        >>> A = np.array([[1., 2., 3.], [4., 5., 6.], [7., 8., 9.]])
        >>> Q, H = upper_hess_decomp(A)
        >>> np.allclose(Q.T @ A @ Q, H)
        True
    """
    H = as_square_matrix(A)
    check_nonempty(H, 'A')
    n = H.shape[0]

    directions = _reduce(H)

    transform = np.eye(n, dtype=H.dtype)
    for k in reversed(range(len(directions))):
        u = directions[k]
        block = transform[k + 1:, k + 1:]
        block -= 2 * u @ (u.T @ block)

    return transform, H

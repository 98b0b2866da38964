"""
Radix-2 matrix balancing.

Balancing applies a diagonal similarity D⁻¹ A D that brings the norm of
each row close to the norm of the matching column. Eigenvalues are
unchanged, while the Francis iteration that follows sees a matrix with a
smaller norm and better conditioned eigenvalues.

Scale factors are powers of the radix, so balancing introduces no
rounding error.

References:
    James, Langou and Lowery, "On Matrix Balancing and EigenVector
    computation", arXiv:1401.5766
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydecomp.core.validation import as_square_matrix
from pydecomp.core.compute.tolerances import (
    BALANCE_IMPROVEMENT,
    BALANCE_RADIX,
    cast_literal,
)

Array = NDArray[np.floating[Any]]


def _balance_inplace(M: Array) -> Array:
    """Balance square M in place; return the diagonal of D."""
    n = M.shape[0]
    radix = cast_literal(BALANCE_RADIX, M.dtype)
    improvement = cast_literal(BALANCE_IMPROVEMENT, M.dtype)
    d = np.ones(n, dtype=M.dtype)

    converged = False
    while not converged:
        converged = True

        for i in range(n):
            c = np.linalg.norm(M[:, i])
            r = np.linalg.norm(M[i, :])

            # A zero norm can never be rescaled to meet the other one.
            if c == 0 or r == 0:
                continue

            s = c * c + r * r
            f = M.dtype.type(1)

            while c < r / radix:
                c *= radix
                r /= radix
                f *= radix

            while c >= r * radix:
                c /= radix
                r *= radix
                f /= radix

            if c * c + r * r < improvement * s:
                converged = False
                d[i] *= f
                M[:, i] *= f
                M[i, :] /= f

    return d


def balance_matrix(A: ArrayLike) -> tuple[Array, Array]:
    """
    Balance a square matrix by radix-2 diagonal scaling.

    Args:
        A: Square matrix (n x n). The caller's data is copied.

    Returns:
        (B, d) where B = diag(d)⁻¹ @ A @ diag(d) is the balanced matrix

    Raises:
        DimensionError: If A is not square
    """
    B = as_square_matrix(A)
    d = _balance_inplace(B)
    return B, d

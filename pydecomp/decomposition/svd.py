"""
Singular value decomposition via the Golub-Reinsch algorithm.

The matrix is first reduced to upper bidiagonal form B = Uᵗ A V. Each
sweep then:

    1. Scans the super-diagonal from the bottom up and zeroes every entry
       that is negligible next to its two diagonal neighbours. The scan
       yields q, the size of the trailing block that is already diagonal,
       and p, the first row of the unreduced block above it.
    2. Stops once q == n - 1.
    3. Handles a diagonal entry of the active block that is zero at
       working precision (below eps times the largest entry of B) by
       chasing its row, or for the last entry its column, out with Givens
       rotations. The block then splits and the scan starts over.
    4. Runs one implicit-shift Golub-Kahan step on rows/columns [p, n - q).
       A step that leaves every magnitude in the block unchanged cannot
       make progress; the smallest super-diagonal entry is then zeroed.

There is no iteration cap: the loop ends when the convergence scan says
so. Every rotation applied to B is accumulated into U or V, so
A == U @ B @ V.T holds throughout up to the entries zeroed as
negligible.

References:
    Golub & Van Loan, "Matrix Computations" (4th ed.), Section 8.6
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydecomp.core.exceptions import DecompositionError, NumericalError
from pydecomp.core.validation import as_matrix
from pydecomp.core.compute.tolerances import machine_eps, min_positive
from pydecomp.core.compute.linalg.givens import givens_rot
from pydecomp.decomposition.bidiagonal import _bidiagonalize
from pydecomp.decomposition.eigen import eigenvalues

Array = NDArray[np.floating[Any]]


def golub_kahan_svd_step(B: Array, U: Array, V: Array, p: int, q: int) -> int:
    """
    One implicit-shift QR step on the active block of a bidiagonal matrix.

    Operates in place on B, U and V. The active block is rows and columns
    p .. n-q-1 of the n x n upper bidiagonal B, and it must hold at least
    two rows.

    The shift is the eigenvalue of the trailing 2x2 block of TᵗT (T being
    the active block) closest to its bottom-right entry. The bulge created
    by the first rotation is chased down the band, one right rotation
    (accumulated into V) and one left rotation (accumulated into U) per
    column.

    Args:
        B: Upper bidiagonal matrix (n x n), modified in place
        U: Left factor (m x n), modified in place
        V: Right factor (n x n), modified in place
        p: First row of the active block
        q: Size of the converged trailing block

    Returns:
        Number of rotation pairs applied

    Raises:
        DecompositionError: If the shift cannot be computed
    """
    n = B.shape[0]
    end = n - q

    Y = B[end - 2:end, end - 2:end]
    C = Y.T @ Y
    if end - p - 2 > 0:
        X = B[p:end - 2, end - 2:end]
        C = C + X.T @ X

    c_eigs = eigenvalues(C)

    # Shift by the eigenvalue closest to C[1, 1]
    if abs(c_eigs[0] - C[1, 1]) < abs(c_eigs[1] - C[1, 1]):
        lam = c_eigs[0]
    else:
        lam = c_eigs[1]

    b_pp = B[p, p]
    alpha = b_pp * b_pp - lam
    beta = b_pp * B[p, p + 1]

    for k in range(p, end - 1):
        # Rotate columns k, k+1 to zero (alpha, beta)
        c, s = givens_rot(alpha, beta)
        G = np.array([[c, s], [-s, c]], dtype=B.dtype)

        top = max(k - 1, 0)
        B[top:top + 3, k:k + 2] = B[top:top + 3, k:k + 2] @ G
        V[:, k:k + 2] = V[:, k:k + 2] @ G
        if k > p:
            B[k - 1, k + 1] = 0

        alpha = B[k, k]
        beta = B[k + 1, k]

        # Rotate rows k, k+1 to zero the bulge below the diagonal
        c, s = givens_rot(alpha, beta)
        G = np.array([[c, -s], [s, c]], dtype=B.dtype)

        B[k:k + 2, k:k + 3] = G @ B[k:k + 2, k:k + 3]
        U[:, k:k + 2] = U[:, k:k + 2] @ G.T
        B[k + 1, k] = 0

        if k + 2 < end:
            alpha = B[k, k + 1]
            beta = B[k, k + 2]

    return end - 1 - p


def _chase_zero_diagonal(B: Array, U: Array, i: int, end: int) -> None:
    """
    Zero row i of the active block when B[i, i] is negligible.

    Rotates row i against rows i+1, i+2, ... from the left; each rotation
    kills the entry in row i and pushes a smaller one a column further
    right, where it vanishes at the block boundary.
    """
    for j in range(i + 1, end):
        if B[i, j] == 0:
            break
        c, s = givens_rot(B[j, j], B[i, j])
        G = np.array([[c, -s], [s, c]], dtype=B.dtype)

        B[[j, i], j:j + 2] = G @ B[[j, i], j:j + 2]
        U[:, [j, i]] = U[:, [j, i]] @ G.T
        B[i, j] = 0


def _chase_zero_last_diagonal(B: Array, V: Array, p: int, end: int) -> None:
    """
    Zero column end-1 of the active block when its diagonal entry is negligible.

    Rotates the last column against columns end-2, end-3, ... from the
    right; each rotation kills the entry above the diagonal and pushes a
    smaller one a row further up, where it vanishes at row p.
    """
    last = end - 1
    for j in reversed(range(p, last)):
        if B[j, last] == 0:
            break
        c, s = givens_rot(B[j, j], B[j, last])
        G = np.array([[c, s], [-s, c]], dtype=B.dtype)

        top = max(j - 1, 0)
        B[top:j + 1, [j, last]] = B[top:j + 1, [j, last]] @ G
        V[:, [j, last]] = V[:, [j, last]] @ G
        B[j, last] = 0


def _deflate_smallest(B: Array, p: int, end: int) -> None:
    """Zero the smallest super-diagonal entry of the active block."""
    superdiag = np.abs(np.diagonal(B, 1)[p:end - 1])
    k = p + int(np.argmin(superdiag))
    B[k, k + 1] = 0


def _sort_singular_values(S: Array, U: Array, V: Array) -> tuple[Array, Array, Array]:
    """Make the diagonal non-negative, then sort it in descending order."""
    d = np.diagonal(S).copy()

    negative = d < 0
    d[negative] = -d[negative]
    V = V.copy()
    V[:, negative] = -V[:, negative]

    order = np.argsort(d, kind='stable')[::-1]
    return np.diag(d[order]), U[:, order], V[:, order]


def _golub_reinsch(M: Array) -> tuple[Array, Array, Array, int]:
    """SVD of a tall working array; also returns the sweep count."""
    n = M.shape[1]

    try:
        B, U, V = _bidiagonalize(M)
    except NumericalError as e:
        raise DecompositionError("Could not compute SVD.") from e

    tiny = min_positive(B.dtype)
    # Diagonal entries below this are zero singular values at working precision
    negligible = machine_eps(B.dtype) * np.max(np.abs(B))
    sweeps = 0

    while True:
        # Size of the converged trailing block
        q = 0
        on_lower = True

        # Start of the unreduced middle block
        p = 0
        on_middle = False

        for i in reversed(range(n - 1)):
            threshold = tiny * (abs(B[i, i]) + abs(B[i + 1, i + 1]))
            if abs(B[i, i + 1]) <= threshold:
                if on_lower:
                    q += 1
                elif on_middle:
                    on_middle = False
                    p = i + 1
                B[i, i + 1] = 0
            elif on_lower:
                on_lower = False
                on_middle = True

        if q >= n - 1:
            break

        end = n - q
        chased = False
        for i in range(p, end - 1):
            if abs(B[i, i]) <= negligible:
                B[i, i] = 0
                _chase_zero_diagonal(B, U, i, end)
                chased = True

        if not chased and abs(B[end - 1, end - 1]) <= negligible:
            B[end - 1, end - 1] = 0
            _chase_zero_last_diagonal(B, V, p, end)
            chased = True

        # A chase splits the block; rescan before stepping
        if chased:
            continue

        before = np.abs(B[p:end, p:end])
        try:
            golub_kahan_svd_step(B, U, V, p, q)
        except NumericalError as e:
            raise DecompositionError("Could not compute SVD.") from e
        sweeps += 1

        # No rotation moved anything at working precision
        if np.array_equal(before, np.abs(B[p:end, p:end])):
            _deflate_smallest(B, p, end)

    S, U, V = _sort_singular_values(B, U, V)
    return S, U, V, sweeps


def _svd(A: ArrayLike) -> tuple[Array, Array, Array, int, bool]:
    M = as_matrix(A)

    # The algorithm assumes rows >= cols; transpose and swap back otherwise.
    flipped = M.shape[0] < M.shape[1]
    if flipped:
        S, U, V, sweeps = _golub_reinsch(M.T.copy())
        return S.T, V, U, sweeps, flipped

    S, U, V, sweeps = _golub_reinsch(M)
    return S, U, V, sweeps, flipped


def svd(A: ArrayLike) -> tuple[Array, Array, Array]:
    """
    Singular value decomposition.

    Args:
        A: Matrix (m x n), any matrix-like. The caller's data is copied.

    Returns:
        (S, U, V) with A == U @ S @ V.T. S is a k x k diagonal matrix
        (k = min(m, n)) holding the singular values in descending order,
        U is m x k and V is n x k, both with orthonormal columns.

    Raises:
        DecompositionError: If the bidiagonal form or a shift cannot be
            computed

    Example:
        >>> A = np.array([[1., 2., 3.], [4., 5., 2.], [4., 1., 2.], [1., 3., 1.]])
        >>> S, U, V = svd(A)
        >>> np.allclose(U @ S @ V.T, A)
        True
    """
    S, U, V, _, _ = _svd(A)
    return S, U, V

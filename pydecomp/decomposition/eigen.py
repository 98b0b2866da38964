"""
Eigenvalues and eigenvectors of real square matrices.

Dispatch is by size:

    n == 1: the single entry
    n == 2: quadratic formula on λ² - tr·λ + det
    n > 2:  implicit double-shift Francis QR on the balanced upper
            Hessenberg form

Complex eigenvalues are not supported; they raise ComplexEigenvalueError.

The Francis iteration chases a 3x3 Householder bulge down the
sub-diagonal and closes each sweep with a Givens rotation. After a sweep
the bottom of the active block is tested for deflation: a negligible
H[p, p-1] splits off one eigenvalue, a negligible H[p-1, p-2] splits off
a 2x2 block, which is then rotated to triangular form. There is no
iteration cap.

Eigenvectors from eigendecomp are only guaranteed to be correct for
real symmetric input; for other matrices the columns are Schur vectors.

References:
    Arbenz, "The QR algorithm for eigen decomposition", lecture notes
    (http://people.inf.ethz.ch/arbenz/ewp/Lnotes/chapter4.pdf)
"""

import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydecomp.core.exceptions import (
    ComplexEigenvalueError,
    DecompositionError,
    NumericalError,
)
from pydecomp.core.validation import as_square_matrix, check_nonempty
from pydecomp.core.compute.tolerances import (
    EIGEN_DEFLATION_EPS,
    cast_literal,
    machine_eps,
)
from pydecomp.core.compute.linalg.householder import make_householder
from pydecomp.core.compute.linalg.givens import givens_rot
from pydecomp.decomposition.hessenberg import upper_hessenberg, upper_hess_decomp
from pydecomp.decomposition.balance import balance_matrix

Array = NDArray[np.floating[Any]]


def _direct_2x2_eigenvalues(A: Array) -> Array:
    a, b, c, d = A[0, 0], A[0, 1], A[1, 0], A[1, 1]

    # Roots of λ² - (a + d)λ + (ad - bc). The discriminant is written as
    # (a - d)² + 4bc, which equals tr² - 4·det and cannot go negative
    # through cancellation when b == c.
    tr = a + d
    discr = (a - d) * (a - d) + 4 * b * c

    if discr < 0:
        raise ComplexEigenvalueError(
            "Matrix has complex eigenvalues. Currently unsupported.",
            discriminant=float(discr),
        )

    # The root of larger magnitude adds terms of equal sign; the other
    # follows from the product of the roots.
    root = np.sqrt(discr)
    big = (tr + np.copysign(root, tr)) / 2
    small = (a * d - b * c) / big if big != 0 else big

    return np.sort(np.array([small, big], dtype=A.dtype))


def _eigenvector_2x2(A: Array, value: Any) -> Array:
    """Unnormalized eigenvector of a 2x2 block, from its better conditioned row."""
    a, b, c, d = A[0, 0], A[0, 1], A[1, 0], A[1, 1]
    from_lower = np.array([value - d, c], dtype=A.dtype)
    from_upper = np.array([b, value - a], dtype=A.dtype)
    if np.linalg.norm(from_lower) >= np.linalg.norm(from_upper):
        return from_lower
    return from_upper


def _direct_2x2_eigendecomp(A: Array) -> tuple[Array, Array]:
    values = _direct_2x2_eigenvalues(A)
    a, b, c, d = A[0, 0], A[0, 1], A[1, 0], A[1, 1]

    if b == 0 and c == 0:
        # Diagonal: values are ascending, so the axes may need swapping
        order = [0, 1] if a <= d else [1, 0]
        vectors = np.eye(2, dtype=A.dtype)[:, order]
    else:
        vectors = np.column_stack([_eigenvector_2x2(A, value) for value in values])

    vectors /= np.linalg.norm(vectors, axis=0)
    return values, vectors


def _triangularize_2x2(H: Array, Z: Array | None, i: int, failure_message: str) -> None:
    """Rotate the isolated block H[i:i+2, i:i+2] to upper triangular form."""
    block = H[i:i + 2, i:i + 2]

    # Already triangular at working precision
    eps = machine_eps(H.dtype)
    if abs(block[1, 0]) <= eps * (abs(block[0, 0]) + abs(block[1, 1])):
        H[i + 1, i] = 0
        return

    try:
        values = _direct_2x2_eigenvalues(block)
    except ComplexEigenvalueError as e:
        raise ComplexEigenvalueError(failure_message, discriminant=e.discriminant) from e

    # First column of the rotation is the eigenvector of values[0]
    v = _eigenvector_2x2(block, values[0])
    v /= np.linalg.norm(v)
    G = np.array([[v[0], -v[1]], [v[1], v[0]]], dtype=H.dtype)

    H[i:i + 2, :] = G.T @ H[i:i + 2, :]
    H[:, i:i + 2] = H[:, i:i + 2] @ G
    H[i + 1, i] = 0

    if Z is not None:
        Z[:, i:i + 2] = Z[:, i:i + 2] @ G


def _francis_shift(H: Array, Z: Array | None, failure_message: str) -> int:
    """
    Run the double-shift Francis iteration on Hessenberg H in place.

    If Z is given, every transform applied to H is accumulated into it
    on the right, so that Z₀ᵗ H₀ Z₀ ... = Zᵗ H_initial Z holds.

    Returns:
        Number of sweeps performed
    """
    n = H.shape[0]
    eps = cast_literal(EIGEN_DEFLATION_EPS, H.dtype)

    # Final index of the active block
    p = n - 1
    sweeps = 0

    while p > 1:
        q = p - 1
        s = H[q, q] + H[p, p]
        t = H[q, q] * H[p, p] - H[q, p] * H[p, q]

        # First column of (H - σ₁I)(H - σ₂I)
        x = H[0, 0] * H[0, 0] + H[0, 1] * H[1, 0] - H[0, 0] * s + t
        y = H[1, 0] * (H[0, 0] + H[1, 1] - s)
        z = H[1, 0] * H[2, 1]

        for k in range(p - 1):
            try:
                householder = make_householder(np.array([x, y, z], dtype=H.dtype))
            except NumericalError as e:
                raise DecompositionError(failure_message) from e

            r = max(1, k) - 1
            H[k:k + 3, r:] = householder @ H[k:k + 3, r:]

            r = min(k + 4, p + 1)
            H[:r, k:k + 3] = H[:r, k:k + 3] @ householder.T

            if Z is not None:
                Z[:, k:k + 3] = Z[:, k:k + 3] @ householder.T

            x = H[k + 1, k]
            y = H[k + 2, k]
            if k < p - 2:
                z = H[k + 3, k]

        cos, sin = givens_rot(x, y)
        G = np.array([[cos, -sin], [sin, cos]], dtype=H.dtype)

        H[q:q + 2, p - 2:] = G @ H[q:q + 2, p - 2:]
        H[:p + 1, q:q + 2] = H[:p + 1, q:q + 2] @ G.T

        if Z is not None:
            Z[:, q:q + 2] = Z[:, q:q + 2] @ G.T

        sweeps += 1

        # Check for convergence
        if abs(H[p, q]) < eps * (abs(H[q, q]) + abs(H[p, p])):
            H[p, q] = 0
            p -= 1
        elif abs(H[p - 1, q - 1]) < eps * (abs(H[q - 1, q - 1]) + abs(H[q, q])):
            H[p - 1, q - 1] = 0
            _triangularize_2x2(H, Z, q, failure_message)
            p -= 2

    if p == 1 and abs(H[1, 0]) >= eps * (abs(H[0, 0]) + abs(H[1, 1])):
        _triangularize_2x2(H, Z, 0, failure_message)
    elif p == 1:
        H[1, 0] = 0

    return sweeps


def _francis_eigenvalues(A: Array) -> tuple[Array, int]:
    try:
        H = upper_hessenberg(A)
    except NumericalError as e:
        raise DecompositionError("Could not compute eigenvalues.") from e

    H, _ = balance_matrix(H)
    sweeps = _francis_shift(H, None, "Could not compute eigenvalues.")
    return np.diagonal(H).copy(), sweeps


def _francis_eigendecomp(A: Array) -> tuple[Array, Array, int]:
    n = A.shape[0]

    try:
        Q, H = upper_hess_decomp(A)
    except NumericalError as e:
        raise DecompositionError("Could not compute eigen decomposition.") from e

    H, d = balance_matrix(H)
    Z = np.eye(n, dtype=H.dtype)
    sweeps = _francis_shift(H, Z, "Could not compute eigen decomposition.")

    # Undo the balancing scale D before applying the Hessenberg transform
    vectors = Q @ (d[:, np.newaxis] * Z)
    vectors /= np.linalg.norm(vectors, axis=0)
    return np.diagonal(H).copy(), vectors, sweeps


def _eigen(A: ArrayLike, vectors: bool) -> tuple[Array, Array | None, int]:
    """Shared dispatch; also reports the number of Francis sweeps."""
    A_arr = as_square_matrix(A)
    check_nonempty(A_arr, 'A')
    n = A_arr.shape[0]

    if n == 1:
        ones = np.ones((1, 1), dtype=A_arr.dtype) if vectors else None
        return A_arr[0].copy(), ones, 0

    if n == 2:
        if vectors:
            values, vecs = _direct_2x2_eigendecomp(A_arr)
            return values, vecs, 0
        return _direct_2x2_eigenvalues(A_arr), None, 0

    if not vectors:
        values, sweeps = _francis_eigenvalues(A_arr)
        return values, None, sweeps

    if not np.allclose(A_arr, A_arr.T):
        warnings.warn(
            "eigendecomp: input is not symmetric; eigenvectors are only "
            "guaranteed for real symmetric matrices",
            UserWarning,
            stacklevel=3,
        )

    return _francis_eigendecomp(A_arr)


def eigenvalues(A: ArrayLike) -> Array:
    """
    Eigenvalues of a square matrix.

    Args:
        A: Square matrix (n x n), any matrix-like

    Returns:
        1D array of the n real eigenvalues. For n == 2 they are in
        ascending order; for n > 2 they follow the diagonal of the
        converged Schur form.

    Raises:
        DimensionError: If A is not square or is empty
        ComplexEigenvalueError: If A has complex eigenvalues
        DecompositionError: If the eigenvalues cannot be computed

    Example:
        >>> eigenvalues(np.array([[1., 2.], [3., 4.]]))
        array([-0.37228132,  5.37228132])
    """
    values, _, _ = _eigen(A, vectors=False)
    return values


def eigendecomp(A: ArrayLike) -> tuple[Array, Array]:
    """
    Eigendecomposition of a square matrix.

    Args:
        A: Square matrix (n x n), any matrix-like

    Returns:
        (values, vectors) with the eigenvectors as unit columns of
        vectors, ordered like values

    Raises:
        DimensionError: If A is not square or is empty
        ComplexEigenvalueError: If A has complex eigenvalues
        DecompositionError: If the decomposition cannot be computed

    Warns:
        UserWarning: If A (n > 2) is not symmetric

    Example:
        >>> A = np.array([[3., 2., 4.], [2., 0., 2.], [4., 2., 3.]])
        >>> values, vectors = eigendecomp(A)
        >>> np.allclose(A @ vectors, vectors * values)
        True
    """
    values, vectors, _ = _eigen(A, vectors=True)
    return values, vectors

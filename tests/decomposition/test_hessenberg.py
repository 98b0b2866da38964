"""
Tests for upper Hessenberg reduction.

Validates:
    - Zeros below the first sub-diagonal
    - Qᵗ A Q == H with Q orthogonal
    - Eigenvalues preserved
    - Zero sub-column raises DecompositionError
"""

import numpy as np
import pytest

from pydecomp import upper_hess_decomp, upper_hessenberg
from pydecomp.core.exceptions import DecompositionError, DimensionError


# ═══════════════════════════════════════════════════════════════════════
# upper_hessenberg
# ═══════════════════════════════════════════════════════════════════════


class TestUpperHessenberg:

    def test_zero_below_subdiagonal(self, rng):
        H = upper_hessenberg(rng.standard_normal((6, 6)))
        np.testing.assert_array_equal(np.tril(H, -2), 0.0)

    def test_preserves_eigenvalues(self, symmetric_5x5):
        H = upper_hessenberg(symmetric_5x5)
        np.testing.assert_allclose(
            np.linalg.eigvalsh(symmetric_5x5),
            np.sort(np.linalg.eigvals(H).real),
            atol=1e-10,
        )

    def test_symmetric_becomes_tridiagonal(self, symmetric_5x5):
        H = upper_hessenberg(symmetric_5x5)
        np.testing.assert_allclose(np.triu(H, 2), 0.0, atol=1e-10)

    @pytest.mark.parametrize("n", [1, 2])
    def test_small_matrices_unchanged(self, n):
        A = np.arange(1.0, n * n + 1).reshape(n, n)
        np.testing.assert_array_equal(upper_hessenberg(A), A)

    def test_input_unchanged(self, symmetric_5x5):
        before = symmetric_5x5.copy()
        upper_hessenberg(symmetric_5x5)
        np.testing.assert_array_equal(symmetric_5x5, before)


# ═══════════════════════════════════════════════════════════════════════
# upper_hess_decomp
# ═══════════════════════════════════════════════════════════════════════


class TestUpperHessDecomp:

    def test_similarity(self, rng):
        A = rng.standard_normal((6, 6))
        Q, H = upper_hess_decomp(A)
        np.testing.assert_allclose(Q.T @ A @ Q, H, atol=1e-10)

    def test_orthogonal_transform(self, rng):
        Q, _ = upper_hess_decomp(rng.standard_normal((5, 5)))
        np.testing.assert_allclose(Q.T @ Q, np.eye(5), atol=1e-12)

    def test_first_basis_vector_fixed(self, rng):
        Q, _ = upper_hess_decomp(rng.standard_normal((4, 4)))
        np.testing.assert_allclose(Q[:, 0], [1.0, 0.0, 0.0, 0.0], atol=1e-15)

    def test_matches_plain_reduction(self, symmetric_5x5):
        _, H = upper_hess_decomp(symmetric_5x5)
        np.testing.assert_array_equal(H, upper_hessenberg(symmetric_5x5))


# ═══════════════════════════════════════════════════════════════════════
# Failures
# ═══════════════════════════════════════════════════════════════════════


class TestHessenbergFailures:

    def test_zero_subcolumn(self):
        """An upper triangular matrix has nothing to reflect in column 0."""
        A = np.triu(np.ones((4, 4)))
        with pytest.raises(DecompositionError, match="upper Hessenberg"):
            upper_hessenberg(A)

    @pytest.mark.parametrize("func", [upper_hessenberg, upper_hess_decomp])
    def test_non_square(self, func):
        with pytest.raises(DimensionError):
            func(np.ones((3, 4)))

    @pytest.mark.parametrize("func", [upper_hessenberg, upper_hess_decomp])
    def test_empty(self, func):
        with pytest.raises(DimensionError):
            func(np.zeros((0, 0)))

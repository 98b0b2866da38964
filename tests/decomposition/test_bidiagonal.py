"""
Tests for bidiagonal decomposition.

Validates:
    - U @ B @ V.T == A for square, tall and wide matrices
    - Upper bidiagonal band for rows >= cols, lower for rows < cols
    - Orthonormal columns in U and V
"""

import numpy as np
import pytest

from pydecomp import bidiagonal_decomp
from pydecomp.core.exceptions import DecompositionError


def _scale(A):
    return max(1.0, float(np.max(np.abs(A))))


# ═══════════════════════════════════════════════════════════════════════
# Factorization
# ═══════════════════════════════════════════════════════════════════════


class TestBidiagonal:

    def test_square(self):
        A = np.array([
            [1.0, 2.0, 3.0, 4.0],
            [5.0, 6.0, 7.0, 1.0],
            [2.0, 0.5, 3.0, 9.0],
            [4.0, 4.0, 1.0, 2.0],
        ])
        B, U, V = bidiagonal_decomp(A)
        np.testing.assert_allclose(U @ B @ V.T, A, atol=1e-10)
        np.testing.assert_allclose(np.triu(B, 2), 0.0, atol=1e-10)
        np.testing.assert_allclose(np.tril(B, -1), 0.0, atol=1e-10)

    def test_tall(self, tall_matrix):
        B, U, V = bidiagonal_decomp(tall_matrix)
        assert B.shape == (3, 3)
        assert U.shape == (5, 3)
        assert V.shape == (3, 3)
        np.testing.assert_allclose(
            U @ B @ V.T, tall_matrix, atol=1e-10 * _scale(tall_matrix)
        )
        np.testing.assert_allclose(np.triu(B, 2), 0.0, atol=1e-10 * _scale(tall_matrix))
        np.testing.assert_allclose(np.tril(B, -1), 0.0, atol=1e-10 * _scale(tall_matrix))

    def test_wide_is_lower_bidiagonal(self, tall_matrix):
        A = tall_matrix.T
        B, U, V = bidiagonal_decomp(A)
        assert B.shape == (3, 3)
        assert U.shape == (3, 3)
        assert V.shape == (5, 3)
        np.testing.assert_allclose(U @ B @ V.T, A, atol=1e-10 * _scale(A))
        np.testing.assert_allclose(np.tril(B, -2), 0.0, atol=1e-10 * _scale(A))
        np.testing.assert_allclose(np.triu(B, 1), 0.0, atol=1e-10 * _scale(A))

    @pytest.mark.parametrize("shape", [(5, 5), (7, 4), (4, 7)])
    def test_orthonormal_factors(self, rng, shape):
        B, U, V = bidiagonal_decomp(rng.standard_normal(shape))
        k = min(shape)
        np.testing.assert_allclose(U.T @ U, np.eye(k), atol=1e-12)
        np.testing.assert_allclose(V.T @ V, np.eye(k), atol=1e-12)

    def test_input_unchanged(self, tall_matrix):
        before = tall_matrix.copy()
        bidiagonal_decomp(tall_matrix)
        np.testing.assert_array_equal(tall_matrix, before)


# ═══════════════════════════════════════════════════════════════════════
# Failures
# ═══════════════════════════════════════════════════════════════════════


class TestBidiagonalFailures:

    def test_zero_matrix(self):
        with pytest.raises(DecompositionError, match="bidiagonal form"):
            bidiagonal_decomp(np.zeros((3, 2)))

"""
Tests for Cholesky decomposition.

Validates:
    - L lower triangular with L @ L.T == A
    - Agreement with numpy.linalg.cholesky
    - Non positive definite input raises NotPositiveDefiniteError
"""

import numpy as np
import pytest

from pydecomp import cholesky
from pydecomp.core.exceptions import (
    DecompositionError,
    DimensionError,
    NotPositiveDefiniteError,
)


# ═══════════════════════════════════════════════════════════════════════
# Factorization
# ═══════════════════════════════════════════════════════════════════════


class TestCholesky:

    def test_known_matrix(self):
        A = np.array([[1.0, 0.5, 0.5], [0.5, 1.0, 0.5], [0.5, 0.5, 1.0]])
        L = cholesky(A)
        np.testing.assert_allclose(L @ L.T, A, atol=1e-12)
        np.testing.assert_array_equal(np.triu(L, 1), 0.0)

    def test_matches_numpy(self, spd_matrix):
        np.testing.assert_allclose(
            cholesky(spd_matrix), np.linalg.cholesky(spd_matrix), atol=1e-10
        )

    def test_positive_diagonal(self, spd_matrix):
        assert np.all(np.diagonal(cholesky(spd_matrix)) > 0)

    def test_input_unchanged(self, spd_matrix):
        before = spd_matrix.copy()
        cholesky(spd_matrix)
        np.testing.assert_array_equal(spd_matrix, before)

    def test_one_by_one(self):
        np.testing.assert_allclose(cholesky([[9.0]]), [[3.0]])


# ═══════════════════════════════════════════════════════════════════════
# Failures
# ═══════════════════════════════════════════════════════════════════════


class TestCholeskyFailures:

    def test_indefinite(self):
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            cholesky([[1.0, 2.0], [2.0, 1.0]])
        assert exc_info.value.row == 1
        assert exc_info.value.matrix_name == 'A'

    def test_negative_diagonal(self):
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            cholesky([[-1.0]])
        assert exc_info.value.row == 0

    def test_zero_matrix(self):
        """A zero pivot makes the next division non-finite."""
        with pytest.raises(DecompositionError, match="not positive definite"):
            cholesky(np.zeros((2, 2)))

    def test_no_runtime_warning(self):
        import warnings
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            with pytest.raises(NotPositiveDefiniteError):
                cholesky([[-4.0, 0.0], [0.0, 1.0]])

    def test_non_square(self):
        with pytest.raises(DimensionError):
            cholesky(np.ones((3, 2)))

"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def spd_matrix(rng):
    """Well-conditioned symmetric positive definite 5x5 matrix."""
    X = rng.standard_normal((8, 5))
    return X.T @ X + 5 * np.eye(5)

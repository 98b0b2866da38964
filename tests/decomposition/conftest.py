"""
Shared matrices for decomposition tests.
"""

import pytest
import numpy as np


@pytest.fixture
def symmetric_5x5():
    """Symmetric matrix with known eigenvalues {12.174, 5.2681, -4.4942, 2.9279, -2.8758}."""
    return np.array([
        [1.0, 2.0, 3.0, 4.0, 5.0],
        [2.0, 4.0, 1.0, 2.0, 1.0],
        [3.0, 1.0, 7.0, 1.0, 1.0],
        [4.0, 2.0, 1.0, -1.0, 3.0],
        [5.0, 1.0, 1.0, 3.0, 2.0],
    ])


@pytest.fixture
def dominant_matrix(rng):
    """
    Positive, strictly diagonally dominant 5x5 matrix.

    Every column's largest entry sits on the diagonal, so LUP needs no
    row exchanges and all pivots are well away from zero.
    """
    return rng.uniform(0.0, 1.0, size=(5, 5)) + 5 * np.eye(5)


@pytest.fixture
def tall_matrix():
    """5x3 matrix of squares 1..225."""
    return np.arange(1.0, 16.0).reshape(5, 3) ** 2

"""
Householder reflector builders.

Given a column x, both builders construct the reflector that maps x onto
a multiple of the first basis vector:

    alpha = x[0] + sign(x[0]) * ||x||
    v     = x / alpha,  v[0] = 1
    H     = I - 2 v vᵗ / (vᵗ v)

make_householder returns H itself, for places that multiply a small
block by the reflector (QR, bidiagonalization, the Francis 3x3 chase).
make_householder_vec returns the unit direction v / ||v|| as an (n, 1)
column so that callers can apply the reflector as a rank-1 update,
``block -= 2 v (vᵗ block)``, without forming H.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydecomp.core.exceptions import DecompositionError, InvalidArgumentError


def _reflector_direction(column: ArrayLike) -> NDArray[np.floating[Any]]:
    """Normalized reflector direction with its first entry fixed to 1."""
    x = np.asarray(column)
    if x.ndim != 1:
        x = x.ravel()

    if x.shape[0] == 0:
        raise InvalidArgumentError(
            "Column for householder transform cannot be empty."
        )

    # sign(+0.0) is +1 so an exactly zero leading entry still reflects
    # onto the norm.
    denom = x[0] + np.copysign(1.0, x[0]) * np.sqrt(x @ x)

    if denom == 0:
        raise DecompositionError(
            "Cannot produce householder transform from column as first "
            "entry is 0."
        )

    v = x / denom
    v[0] = 1
    return v


def make_householder(column: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Full Householder reflector for a column.

    Args:
        column: 1D column x of length n (any contiguous or strided view)

    Returns:
        n x n orthogonal, symmetric matrix H with H @ x = (±||x||, 0, ..., 0)

    Raises:
        InvalidArgumentError: If the column is empty
        DecompositionError: If alpha == 0 (all-zero column)
    """
    v = _reflector_direction(column)
    v_norm_sq = v @ v
    return np.eye(v.shape[0], dtype=v.dtype) - np.outer(v, v) * (2 / v_norm_sq)


def make_householder_vec(column: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Unit Householder direction for a column.

    Args:
        column: 1D column x of length n

    Returns:
        (n, 1) unit vector u such that I - 2 u uᵗ reflects x onto e1

    Raises:
        InvalidArgumentError: If the column is empty
        DecompositionError: If alpha == 0 (all-zero column)
    """
    v = _reflector_direction(column)
    return (v / np.linalg.norm(v)).reshape(-1, 1)

"""
Linear algebra kernels for pydecomp.

These are the leaf building blocks the decompositions are assembled from.

All functions follow these conventions:
    - Operate on NumPy arrays (contiguous or strided views)
    - Never modify their inputs
    - Numerical failures raise a NumericalError subclass immediately

Submodules:
    householder: Householder reflector matrix / direction vector
    givens: Givens rotation coefficients
    triangular: Forward/back substitution, permutation parity, arg-max
"""

from pydecomp.core.compute.linalg.householder import (
    make_householder,
    make_householder_vec,
)
from pydecomp.core.compute.linalg.givens import givens_rot
from pydecomp.core.compute.linalg.triangular import (
    argmax,
    back_substitution,
    forward_substitution,
    is_diag,
    parity,
)

__all__ = [
    # Householder
    "make_householder",
    "make_householder_vec",
    # Givens
    "givens_rot",
    # Triangular
    "argmax",
    "back_substitution",
    "forward_substitution",
    "is_diag",
    "parity",
]

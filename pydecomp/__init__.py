"""
pydecomp: dense matrix decompositions for NumPy arrays.

Householder and Givens based factorizations of real matrices: LUP,
Cholesky, QR, bidiagonal, SVD, upper Hessenberg and eigendecomposition,
together with solve, inverse and determinant built on LUP.

Submodules:
    decomposition: The factorization routines and decompose()
    core: Exceptions, validation, result envelope and numeric kernels
"""

__version__ = "0.1.0"

from pydecomp.core.exceptions import (
    PyDecompError,
    ValidationError,
    DimensionError,
    NumericalError,
    InvalidArgumentError,
    DecompositionError,
    SingularMatrixError,
    NotPositiveDefiniteError,
    ComplexEigenvalueError,
)
from pydecomp.decomposition import (
    decompose,
    lup_decomp,
    cholesky,
    qr_decomp,
    upper_hessenberg,
    upper_hess_decomp,
    balance_matrix,
    bidiagonal_decomp,
    svd,
    golub_kahan_svd_step,
    eigenvalues,
    eigendecomp,
    solve,
    inverse,
    det,
)

__all__ = [
    "__version__",
    "decompose",
    "lup_decomp",
    "cholesky",
    "qr_decomp",
    "upper_hessenberg",
    "upper_hess_decomp",
    "balance_matrix",
    "bidiagonal_decomp",
    "svd",
    "golub_kahan_svd_step",
    "eigenvalues",
    "eigendecomp",
    "solve",
    "inverse",
    "det",
    "PyDecompError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "InvalidArgumentError",
    "DecompositionError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    "ComplexEigenvalueError",
]

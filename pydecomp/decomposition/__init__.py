"""
Dense matrix decompositions.

Public API:
    lup_decomp(A) -> (L, U, P)
    cholesky(A) -> L
    qr_decomp(A) -> (Q, R)
    upper_hessenberg(A) -> H
    upper_hess_decomp(A) -> (Q, H)
    balance_matrix(A) -> (B, d)
    bidiagonal_decomp(A) -> (B, U, V)
    svd(A) -> (S, U, V)
    golub_kahan_svd_step(B, U, V, p, q) -> int
    eigenvalues(A) -> values
    eigendecomp(A) -> (values, vectors)
    solve(A, y) -> x
    inverse(A) -> A⁻¹
    det(A) -> scalar
    decompose(A, method=...) -> DecompositionSolution

The standalone routines return bare factor tuples. decompose() runs the
same computation and wraps it with timing, metadata and warnings.

Example:
    >>> from pydecomp.decomposition import decompose
    >>> result = decompose(A, method='svd')
    >>> S, U, V = result.factors
    >>> print(result.summary())
"""

from pydecomp.decomposition.lup import lup_decomp, solve, inverse, det
from pydecomp.decomposition.cholesky import cholesky
from pydecomp.decomposition.qr import qr_decomp
from pydecomp.decomposition.hessenberg import upper_hessenberg, upper_hess_decomp
from pydecomp.decomposition.balance import balance_matrix
from pydecomp.decomposition.bidiagonal import bidiagonal_decomp
from pydecomp.decomposition.svd import svd, golub_kahan_svd_step
from pydecomp.decomposition.eigen import eigenvalues, eigendecomp
from pydecomp.decomposition.solution import (
    DecompositionSolution,
    LUPParams,
    CholeskyParams,
    QRParams,
    BidiagonalParams,
    SVDParams,
    HessenbergParams,
    EigenParams,
)
from pydecomp.decomposition.solvers import decompose

__all__ = [
    "decompose",
    # Factorizations
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
    # Linear systems
    "solve",
    "inverse",
    "det",
    # Solution types
    "DecompositionSolution",
    "LUPParams",
    "CholeskyParams",
    "QRParams",
    "BidiagonalParams",
    "SVDParams",
    "HessenbergParams",
    "EigenParams",
]

"""
Dispatch for decompositions.

This module provides the decompose() function (public API) and method
selection. The standalone routines (lup_decomp, svd, ...) return bare
factor tuples; decompose() wraps the same computation in a Result
envelope with timing, metadata and captured warnings.
"""

import warnings
from typing import Any, Callable, Literal

from numpy.typing import ArrayLike

from pydecomp.core.result import Result
from pydecomp.core.validation import check_array, check_2d, check_finite
from pydecomp.core.compute.timing import Timer
from pydecomp.decomposition.lup import lup_decomp
from pydecomp.decomposition.cholesky import cholesky
from pydecomp.decomposition.qr import qr_decomp
from pydecomp.decomposition.hessenberg import upper_hess_decomp
from pydecomp.decomposition.bidiagonal import bidiagonal_decomp
from pydecomp.decomposition.svd import _svd
from pydecomp.decomposition.eigen import _eigen
from pydecomp.decomposition.solution import (
    BidiagonalParams,
    CholeskyParams,
    DecompositionSolution,
    EigenParams,
    HessenbergParams,
    LUPParams,
    QRParams,
    SVDParams,
)


# Type alias for method selection
MethodChoice = Literal['lup', 'cholesky', 'qr', 'bidiagonal', 'svd', 'hessenberg', 'eigen']

# A runner computes the factors and returns (params, extra info, backend name)
Runner = Callable[[Any, Timer], tuple[Any, dict[str, Any], str]]


def decompose(A: ArrayLike, *, method: MethodChoice = 'lup') -> DecompositionSolution:
    """
    Decompose a matrix.

    This is the envelope-returning entry point. All input validation,
    method selection and result wrapping happens here.

    Args:
        A: Matrix to decompose. Can be any array-like.
        method: Decomposition to compute:
            - 'lup': P @ A == L @ U (square)
            - 'cholesky': A == L @ L.T (square, positive definite)
            - 'qr': A == Q @ R
            - 'bidiagonal': A == U @ B @ V.T
            - 'svd': A == U @ S @ V.T
            - 'hessenberg': Q.T @ A @ Q == H (square)
            - 'eigen': eigenvalues and eigenvectors (square)

    Returns:
        DecompositionSolution with factors, metadata and timing

    Raises:
        ValueError: If method is unknown
        ValidationError: If A is not a finite real 2D array
        DimensionError: If a square-only method gets a non-square matrix
        DecompositionError: If the decomposition fails numerically

    Example:
        >>> import numpy as np
        >>> from pydecomp import decompose
        >>>
        >>> A = np.array([[4., 2.], [2., 3.]])
        >>> result = decompose(A, method='cholesky')
        >>> L, = result.factors
        >>> print(result.summary())
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    A_arr = check_array(A, 'A')
    check_2d(A_arr, 'A')
    check_finite(A_arr, 'A')

    # === Select Method ===
    runner = _get_runner(method)

    # === Solve ===
    timer = Timer()
    timer.start()
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter('always')
        params, extra_info, backend_name = runner(A_arr, timer)
    timer.stop()

    # Captured warnings go into the envelope and are passed on to the caller
    for w in caught:
        warnings.warn_explicit(w.message, w.category, w.filename, w.lineno)

    info = {
        'method': method,
        'shape': A_arr.shape,
        'dtype': str(A_arr.dtype),
    }
    info.update(extra_info)

    result = Result(
        params=params,
        info=info,
        timing=timer.result(),
        backend_name=backend_name,
        warnings=tuple(str(w.message) for w in caught),
    )

    # === Wrap and Return ===
    return DecompositionSolution(_result=result, _input=A_arr)


def _run_lup(A, timer):
    with timer.section('lup'):
        L, U, P = lup_decomp(A)
    return LUPParams(L=L, U=U, P=P), {}, 'cpu_doolittle'


def _run_cholesky(A, timer):
    with timer.section('cholesky'):
        L = cholesky(A)
    return CholeskyParams(L=L), {}, 'cpu_cholesky_banachiewicz'


def _run_qr(A, timer):
    with timer.section('qr'):
        Q, R = qr_decomp(A)
    return QRParams(Q=Q, R=R), {}, 'cpu_householder_qr'


def _run_bidiagonal(A, timer):
    with timer.section('bidiagonal'):
        B, U, V = bidiagonal_decomp(A)
    info = {'flipped': A.shape[0] < A.shape[1]}
    return BidiagonalParams(B=B, U=U, V=V), info, 'cpu_householder_bidiagonal'


def _run_svd(A, timer):
    with timer.section('svd'):
        S, U, V, sweeps, flipped = _svd(A)
    info = {'sweeps': sweeps, 'flipped': flipped}
    return SVDParams(S=S, U=U, V=V), info, 'cpu_golub_reinsch'


def _run_hessenberg(A, timer):
    with timer.section('hessenberg'):
        Q, H = upper_hess_decomp(A)
    return HessenbergParams(Q=Q, H=H), {}, 'cpu_householder_hessenberg'


def _run_eigen(A, timer):
    with timer.section('eigen'):
        values, vectors, sweeps = _eigen(A, vectors=True)
    info = {'sweeps': sweeps}
    return EigenParams(values=values, vectors=vectors), info, 'cpu_francis_qr'


_RUNNERS: dict[str, Runner] = {
    'lup': _run_lup,
    'cholesky': _run_cholesky,
    'qr': _run_qr,
    'bidiagonal': _run_bidiagonal,
    'svd': _run_svd,
    'hessenberg': _run_hessenberg,
    'eigen': _run_eigen,
}


def _get_runner(choice: MethodChoice) -> Runner:
    """
    Select the runner for a method.

    Raises:
        ValueError: If unknown method specified
    """
    try:
        return _RUNNERS[choice]
    except KeyError:
        raise ValueError(f"Unknown method: {choice!r}") from None

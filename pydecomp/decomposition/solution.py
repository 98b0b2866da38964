"""
Decomposition solution types.

Contains the per-method factor payloads and the user-facing solution
wrapper returned by decompose().
"""

from dataclasses import dataclass, fields
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pydecomp.core.result import Result
from pydecomp.decomposition.lup import inverse

Array = NDArray[np.floating[Any]]


@dataclass(frozen=True)
class LUPParams:
    """
    Factors of P @ A == L @ U.

    L is unit lower triangular, U upper triangular and P a permutation
    matrix.
    """
    L: Array
    U: Array
    P: Array

    def reconstruct(self) -> Array:
        # P is orthogonal, so A == Pᵗ L U
        return self.P.T @ self.L @ self.U


@dataclass(frozen=True)
class CholeskyParams:
    """Lower triangular factor of A == L @ L.T."""
    L: Array

    def reconstruct(self) -> Array:
        return self.L @ self.L.T


@dataclass(frozen=True)
class QRParams:
    Q: Array
    R: Array

    def reconstruct(self) -> Array:
        return self.Q @ self.R


@dataclass(frozen=True)
class BidiagonalParams:
    """Factors of A == U @ B @ V.T with B bidiagonal."""
    B: Array
    U: Array
    V: Array

    def reconstruct(self) -> Array:
        return self.U @ self.B @ self.V.T


@dataclass(frozen=True)
class SVDParams:
    """Factors of A == U @ S @ V.T with S diagonal and descending."""
    S: Array
    U: Array
    V: Array

    @property
    def singular_values(self) -> Array:
        return np.diagonal(self.S).copy()

    def reconstruct(self) -> Array:
        return self.U @ self.S @ self.V.T


@dataclass(frozen=True)
class HessenbergParams:
    """Factors of Q.T @ A @ Q == H with H upper Hessenberg."""
    Q: Array
    H: Array

    def reconstruct(self) -> Array:
        return self.Q @ self.H @ self.Q.T


@dataclass(frozen=True)
class EigenParams:
    """
    Eigenvalues and unit eigenvectors (as columns).

    Reconstruction as V @ diag(values) @ V⁻¹ is exact only when the
    columns really are eigenvectors, which for n > 2 requires symmetric
    input.
    """
    values: Array
    vectors: Array

    def reconstruct(self) -> Array:
        return self.vectors @ np.diag(self.values) @ inverse(self.vectors)


@dataclass
class DecompositionSolution:
    """
    User-facing decomposition results.

    Wraps the Result envelope and the validated input so the factors can
    be checked against it.
    """
    _result: Result[Any]
    _input: Array

    @property
    def params(self) -> Any:
        return self._result.params

    @property
    def factors(self) -> tuple[Array, ...]:
        """Factor arrays in the order the standalone routine returns them."""
        params = self._result.params
        return tuple(getattr(params, f.name) for f in fields(params))

    @property
    def method(self) -> str:
        return self._result.info['method']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    def reconstruct(self) -> Array:
        """Multiply the factors back together."""
        return self._result.params.reconstruct()

    def reconstruction_error(self) -> float:
        """Largest absolute elementwise difference between input and reconstruction."""
        return float(np.max(np.abs(self.reconstruct() - self._input), initial=0.0))

    def summary(self) -> str:
        lines = [
            f"Decomposition: {self.method}",
            "=" * 40,
            f"Shape: {self.info['shape']}",
            f"Dtype: {self.info['dtype']}",
        ]
        if 'sweeps' in self.info:
            lines.append(f"Sweeps: {self.info['sweeps']}")
        lines.append(f"Reconstruction error: {self.reconstruction_error():.3e}")
        if self.timing is not None:
            lines.append(f"Time: {self.timing['total_seconds']:.6f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        shape = self.info.get('shape')
        return f"DecompositionSolution(method={self.method!r}, shape={shape})"

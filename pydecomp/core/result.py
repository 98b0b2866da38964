"""
Generic result container for pydecomp computations.

The Result class provides a standardized envelope that every decomposition
result uses. This enables shared tooling for timing, reproducibility and
inspection while each method defines its own factor payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, shape, sweeps)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np
import scipy

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata of the libraries that produced a result."""
    from pydecomp import __version__

    return {
        'pydecomp_version': __version__,
        'numpy_version': np.__version__,
        'scipy_version': scipy.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for decompositions.

    Type Parameters:
        P: The method-specific factor payload type

    Attributes:
        params: Method-specific factors (L/U/P, Q/R, singular values, ...)
        info: Structured metadata (method, shape, sweeps)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the routine that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions used for the computation

    Examples:
        >>> # Direct method (no iteration)
        >>> Result(
        ...     params=LUPParams(L=L, U=U, P=P),
        ...     info={'method': 'lup', 'shape': (3, 3)},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_lup'
        ... )

        >>> # Iterative method
        >>> Result(
        ...     params=SVDParams(S=S, U=U, V=V),
        ...     info={'method': 'svd', 'sweeps': 7},
        ...     timing={'total_seconds': 0.01, 'bidiagonal': 0.004},
        ...     backend_name='cpu_golub_reinsch'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

"""
Core infrastructure for pydecomp.

This module provides shared abstractions, utilities, and numeric kernels
used by the decomposition routines.

Key components:
    protocols: MatrixLike capability protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, linear algebra kernels
"""

from pydecomp.core.protocols import MatrixLike
from pydecomp.core.result import Result
from pydecomp.core.exceptions import (
    ErrorKind,
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

__all__ = [
    # Protocols
    "MatrixLike",
    # Result
    "Result",
    # Exceptions
    "ErrorKind",
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

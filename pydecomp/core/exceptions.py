"""
Exception hierarchy for pydecomp.

All exceptions inherit from PyDecompError to allow catching any
library-specific error. There are two channels:

    ValidationError: precondition violations (non-square input to a
        square-only operation, empty operands, mismatched shapes). These
        are programmer errors and the library never catches them.

    NumericalError: numerically recoverable failures (singular matrix,
        non positive definite matrix, degenerate Householder column,
        complex eigenvalues). Each carries an ErrorKind tag so callers
        can branch on the kind without inspecting the class.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Composite operations re-raise inner failures with a higher-level
      message, chaining the original via ``raise ... from err``
    - Never catch and re-raise with less information
"""

from enum import Enum


class ErrorKind(Enum):
    """Tag carried by every recoverable failure."""
    DECOMP_FAILURE = 'decomp_failure'
    INVALID_ARG = 'invalid_arg'


class PyDecompError(Exception):
    """Base exception for all pydecomp errors."""
    pass


class ValidationError(PyDecompError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an operation that requires a square matrix receives a
    rectangular one, when an operand is empty, or when a right-hand side
    does not match the matrix.
    """
    pass


class NumericalError(PyDecompError):
    """
    Numerical computation failed.

    Base class for the recoverable failure channel.

    Attributes:
        kind: ErrorKind tag for this failure
    """
    kind: ErrorKind = ErrorKind.DECOMP_FAILURE


class InvalidArgumentError(NumericalError):
    """
    An internal building block received an argument it cannot use.

    Raised by the Householder builders when asked to reflect an empty
    column.
    """
    kind = ErrorKind.INVALID_ARG


class DecompositionError(NumericalError):
    """
    A decomposition could not be computed.

    Raised directly for degenerate forms (zero Householder column) and
    re-raised at every composition boundary with a message naming the
    higher-level operation.
    """
    kind = ErrorKind.DECOMP_FAILURE


class SingularMatrixError(DecompositionError):
    """
    Matrix is singular or a zero pivot was met.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Index of the zero pivot or zero diagonal, if known
        rank_deficient: True when the failure proves the matrix singular,
            False when only the pivot choice is to blame
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        rank_deficient: bool = False,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.rank_deficient = rank_deficient


class NotPositiveDefiniteError(DecompositionError):
    """
    Matrix is not positive definite.

    Raised by Cholesky the moment a non-finite entry is produced.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        row: Row of L being built when the failure was detected
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        row: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.row = row


class ComplexEigenvalueError(DecompositionError):
    """
    Matrix has complex eigenvalues, which are not supported.

    Attributes:
        discriminant: Value of tr² - 4·det for the offending 2x2 block
    """

    def __init__(self, message: str, discriminant: float | None = None):
        super().__init__(message)
        self.discriminant = discriminant

"""
Input validation utilities for pydecomp.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Shape preconditions (square, non-empty, matching right-hand side) raise
DimensionError. They are contract violations, not numerical failures, and
no decomposition routine catches them.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Integer data is promoted to float64, float32 is preserved
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any, Union

from pydecomp.core.exceptions import ValidationError, DimensionError
from pydecomp.core.protocols import MatrixLike


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data)
    and complex inputs.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with real floating dtype

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if np.issubdtype(result.dtype, np.bool_):
        result = result.astype(np.float64)

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype} is not supported"
        )

    # Ensure floating point for numerical stability
    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array has as many rows as columns.

    Args:
        array: 2D array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If the matrix is not square
    """
    rows, cols = array.shape
    if rows != cols:
        raise DimensionError(
            f"{name}: matrix must be square, got shape ({rows}, {cols})"
        )


def check_nonempty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element.

    Raises:
        DimensionError: If the array is empty
    """
    if array.size == 0:
        raise DimensionError(f"{name}: operand is empty with shape {array.shape}")


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def as_matrix(A: Union[MatrixLike, ArrayLike], name: str = 'A') -> NDArray[np.floating[Any]]:
    """
    Borrow a matrix-like operand as a private, writable 2D float array.

    The returned array never shares memory with the caller's buffer, so
    decompositions may overwrite it block by block.

    Raises:
        ValidationError: If A is not numeric
        DimensionError: If A is not 2D
    """
    arr = check_array(A, name)
    check_2d(arr, name)
    return np.array(arr, copy=True)


def as_square_matrix(A: Union[MatrixLike, ArrayLike], name: str = 'A') -> NDArray[np.floating[Any]]:
    """as_matrix() plus the square-shape precondition."""
    arr = as_matrix(A, name)
    check_square(arr, name)
    return arr

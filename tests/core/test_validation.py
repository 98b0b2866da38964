"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object/complex rejection
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_square / check_nonempty: shape preconditions
    - check_consistent_length: multi-array length matching
    - as_matrix / as_square_matrix: private writable copies
    - MatrixLike: structural protocol for matrix operands
"""

import numpy as np
import pytest

from pydecomp.core.exceptions import DimensionError, ValidationError
from pydecomp.core.protocols import MatrixLike
from pydecomp.core.validation import (
    as_matrix,
    as_square_matrix,
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_ndim,
    check_nonempty,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([[1, 2], [3, 4]], "A")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [[1.0, 2.0], [3.0, 4.0]])

    def test_int_array_promoted_to_float(self):
        result = check_array(np.array([1, 2, 3], dtype=np.int32), "A")
        assert np.issubdtype(result.dtype, np.floating)

    def test_bool_promoted_to_float(self):
        result = check_array(np.array([True, False]), "A")
        assert result.dtype == np.float64

    def test_float32_preserved(self):
        result = check_array(np.ones(3, dtype=np.float32), "A")
        assert result.dtype == np.float32

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array(np.array([1, "a", None], dtype=object), "A")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "A")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array(np.array([1 + 2j]), "A")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="weights"):
            check_array(["x"], "weights")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.eye(3), "A")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([[1.0, np.nan]]), "A")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([np.inf, 1.0]), "A")


# ═══════════════════════════════════════════════════════════════════════
# check_ndim / check_1d / check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:

    def test_matching_ndim_passes(self):
        check_ndim(np.zeros((2, 2)), 2, "A")

    def test_wrong_ndim_raises(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_ndim(np.zeros(3), 2, "A")

    def test_check_1d(self):
        check_1d(np.zeros(3), "y")
        with pytest.raises(DimensionError):
            check_1d(np.zeros((3, 1)), "y")

    def test_check_2d_rejects_3d(self):
        with pytest.raises(DimensionError, match=r"\(2, 2, 2\)"):
            check_2d(np.zeros((2, 2, 2)), "A")


# ═══════════════════════════════════════════════════════════════════════
# Shape preconditions
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSquare:

    def test_square_passes(self):
        check_square(np.zeros((3, 3)), "A")

    @pytest.mark.parametrize("shape", [(2, 3), (3, 2), (1, 4)])
    def test_rectangular_raises(self, shape):
        with pytest.raises(DimensionError, match="must be square"):
            check_square(np.zeros(shape), "A")


class TestCheckNonempty:

    def test_nonempty_passes(self):
        check_nonempty(np.zeros((1, 1)), "A")

    def test_empty_raises(self):
        with pytest.raises(DimensionError, match="empty"):
            check_nonempty(np.zeros((0, 0)), "A")


class TestCheckConsistentLength:

    def test_same_length_passes(self):
        check_consistent_length(np.zeros((3, 3)), np.zeros(3), names=("A", "y"))

    def test_different_length_raises(self):
        with pytest.raises(DimensionError, match="A=3, y=2"):
            check_consistent_length(np.zeros((3, 3)), np.zeros(2), names=("A", "y"))

    def test_wrong_number_of_names(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.zeros(3), names=("A",))

    def test_single_array_passes(self):
        check_consistent_length(np.zeros(3), names=("A",))


# ═══════════════════════════════════════════════════════════════════════
# as_matrix / as_square_matrix
# ═══════════════════════════════════════════════════════════════════════


class TestAsMatrix:
    """The returned working array is private and writable."""

    def test_does_not_share_memory(self):
        A = np.arange(6.0).reshape(2, 3)
        M = as_matrix(A)
        assert not np.shares_memory(A, M)
        M[0, 0] = 100.0
        assert A[0, 0] == 0.0

    def test_read_only_input_gives_writable_copy(self):
        A = np.eye(3)
        A.flags.writeable = False
        M = as_matrix(A)
        assert M.flags.writeable

    def test_window_view(self):
        big = np.arange(25.0).reshape(5, 5)
        M = as_matrix(big[1:3, 2:5])
        np.testing.assert_array_equal(M, [[7.0, 8.0, 9.0], [12.0, 13.0, 14.0]])

    def test_rejects_1d(self):
        with pytest.raises(DimensionError):
            as_matrix(np.zeros(4))

    def test_as_square_rejects_rectangle(self):
        with pytest.raises(DimensionError, match="must be square"):
            as_square_matrix(np.zeros((2, 3)))


# ═══════════════════════════════════════════════════════════════════════
# MatrixLike
# ═══════════════════════════════════════════════════════════════════════


class _Grid:
    """Foreign matrix type exposing only shape, indexing and __array__."""

    def __init__(self, rows):
        self._rows = [list(r) for r in rows]

    @property
    def shape(self):
        return (len(self._rows), len(self._rows[0]))

    def __getitem__(self, key):
        i, j = key
        return self._rows[i][j]

    def __array__(self, dtype=None, copy=None):
        return np.array(self._rows, dtype=dtype)


class TestMatrixLike:

    def test_ndarray_and_views_satisfy_protocol(self):
        A = np.eye(4)
        assert isinstance(A, MatrixLike)
        assert isinstance(A[1:3, ::2], MatrixLike)

    def test_foreign_type_satisfies_protocol(self):
        assert isinstance(_Grid([[1.0, 2.0], [3.0, 4.0]]), MatrixLike)

    def test_foreign_type_converted(self):
        M = as_square_matrix(_Grid([[1.0, 2.0], [3.0, 4.0]]))
        np.testing.assert_array_equal(M, [[1.0, 2.0], [3.0, 4.0]])

"""Tests for Givens rotation coefficients."""

import numpy as np
import pytest

from pydecomp.core.compute.linalg.givens import givens_rot


class TestGivensRot:

    def test_three_four(self):
        c, s = givens_rot(3.0, 4.0)
        assert c == pytest.approx(0.6)
        assert s == pytest.approx(-0.8)

    def test_left_rotation_zeroes_second(self, rng):
        a, b = rng.standard_normal(2)
        c, s = givens_rot(a, b)
        G = np.array([[c, -s], [s, c]])
        y = G @ np.array([a, b])
        np.testing.assert_allclose(y, [np.hypot(a, b), 0.0], atol=1e-14)

    def test_right_rotation_zeroes_second(self, rng):
        a, b = rng.standard_normal(2)
        c, s = givens_rot(a, b)
        G = np.array([[c, s], [-s, c]])
        y = np.array([a, b]) @ G
        np.testing.assert_allclose(y, [np.hypot(a, b), 0.0], atol=1e-14)

    def test_unit_norm(self):
        c, s = givens_rot(-2.0, 7.0)
        assert c * c + s * s == pytest.approx(1.0)

    def test_b_zero_is_identity(self):
        c, s = givens_rot(5.0, 0.0)
        assert c == 1.0
        assert s == 0.0

    def test_no_overflow(self):
        c, s = givens_rot(1e200, 1e200)
        assert np.isfinite(c) and np.isfinite(s)
        assert c == pytest.approx(np.sqrt(0.5))

    def test_zero_vector_is_identity(self):
        with np.errstate(all='raise'):
            c, s = givens_rot(0.0, 0.0)
        assert c == 1.0
        assert s == 0.0

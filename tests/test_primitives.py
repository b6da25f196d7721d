"""Tests for the closed-form Doyle spiral geometry."""

import numpy as np
import pytest

from doyle_spiral import co_root, squared_distance, squared_radius_sum, radius_ratio_squared


class TestCoRoot:
    """Test the (p, q) spiral map."""

    def test_base_spiral_maps_to_unit_circle(self):
        """Exponent 0/1 sends every seed to modulus 1, argument 2*pi."""
        w, s = co_root(3.7, 0.4, 0, 1)
        assert w == 1.0
        assert s == pytest.approx(2 * np.pi)

    def test_modulus_and_argument(self):
        w, s = co_root(4.0, 0.3, 1, 2)
        assert w == pytest.approx(2.0)
        assert s == pytest.approx((0.3 + 2 * np.pi) / 2)


class TestSquaredDistance:
    """Test squared distance between the seed and its image."""

    @pytest.mark.parametrize("z,t,p,q", [
        (2.0, 0.0, 7, 32),
        (1.3, -0.4, 5, 8),
        (0.7, 1.1, 3, 4),
        (2.5, 0.2, 0, 1),
    ])
    def test_matches_complex_distance(self, z, t, p, q):
        w, s = co_root(z, t, p, q)
        expected = abs(z * np.exp(1j * t) - w * np.exp(1j * s)) ** 2
        assert squared_distance(z, t, p, q) == pytest.approx(expected, rel=1e-12)

    def test_base_spiral_distance_to_one(self):
        """With exponent 0/1 the image is the point 1 on the real axis."""
        assert squared_distance(2.0, 0.0, 0, 1) == pytest.approx(1.0)
        assert squared_distance(1.0, np.pi / 2, 0, 1) == pytest.approx(2.0)


class TestSquaredRadiusSum:
    """Test squared sum of origin distances."""

    def test_value(self):
        assert squared_radius_sum(4.0, 0.0, 1, 2) == pytest.approx(36.0)

    def test_independent_of_angle(self):
        values = [squared_radius_sum(1.7, t, 5, 8) for t in (-2.0, 0.0, 0.3, 4.0)]
        assert values == [values[0]] * 4


class TestRadiusRatioSquared:
    """Test the tangency ratio."""

    def test_quotient(self):
        z, t, p, q = 1.4, -0.2, 8, 13
        expected = squared_distance(z, t, p, q) / squared_radius_sum(z, t, p, q)
        assert radius_ratio_squared(z, t, p, q) == expected

    def test_base_spiral_at_starting_guess(self):
        """(2 - 1)^2 / (2 + 1)^2"""
        assert radius_ratio_squared(2.0, 0.0, 0, 1) == pytest.approx(1 / 9)

    @pytest.mark.parametrize("q", [3, 8, 16])
    def test_equal_indices_give_constant_ratio(self, q):
        """For p == q the image is a pure rotation by 2*pi/q."""
        for z, t in [(0.5, 0.0), (2.0, 1.0), (7.0, -0.3)]:
            assert radius_ratio_squared(z, t, q, q) == pytest.approx(np.sin(np.pi / q) ** 2)

    def test_vectorised_over_arrays(self):
        z = np.linspace(0.5, 3.0, 11)
        t = np.linspace(-1.0, 1.0, 11)
        values = radius_ratio_squared(z, t, 7, 32)
        assert values.shape == (11,)
        for i in range(11):
            assert values[i] == pytest.approx(radius_ratio_squared(float(z[i]), float(t[i]), 7, 32))

"""Tests for the point sampler."""

import numpy as np
import pytest

from ortho_calc.sampling import WINDOW_LIMIT, Curve, in_window, sample_curve, sample_ellipse


class TestSampleCurve:
    """Tests for sample_curve."""

    def test_unit_circle_keeps_every_point(self):
        """All 201 evaluations of the unit circle fit the window."""
        curve = sample_curve(lambda t, _p: (np.cos(t), np.sin(t)), 1.0, 0.0, 2 * np.pi, steps=200)
        assert len(curve) == 201
        np.testing.assert_allclose(curve.x ** 2 + curve.y ** 2, 1.0)

    def test_default_steps(self):
        curve = sample_curve(lambda t, _p: (t, t), 0.0, -1.0, 1.0)
        assert len(curve) == 201

    def test_out_of_window_points_dropped(self):
        """A function far outside the window yields an empty curve."""
        curve = sample_curve(lambda t, _p: (1000.0, 0.0), 0.0, 0.0, 1.0)
        assert curve.is_empty
        assert curve.to_dict() == {"x": [], "y": []}

    def test_window_is_strict(self):
        curve = sample_curve(lambda t, _p: (WINDOW_LIMIT, 0.0), 0.0, 0.0, 1.0, steps=4)
        assert curve.is_empty

    def test_none_skips_point(self):
        """Only t >= 0 evaluations survive when fn is undefined for t < 0."""
        curve = sample_curve(lambda t, _p: None if t < 0 else (t, t), 0.0, -1.0, 1.0, steps=2)
        assert curve.points() == [(0.0, 0.0), (1.0, 1.0)]

    def test_non_finite_points_dropped(self):
        curve = sample_curve(
            lambda t, _p: (t, float("nan") if t == 0 else 1.0 / t), 0.0, -1.0, 1.0, steps=2
        )
        assert curve.points() == [(-1.0, -1.0), (1.0, 1.0)]

    def test_overflow_is_filtered(self):
        curve = sample_curve(lambda t, _p: (t, np.exp(t * 1000.0)), 0.0, -1.0, 1.0, steps=2)
        assert len(curve) == 2

    def test_parameter_is_passed_through(self):
        curve = sample_curve(lambda t, p: (t, p * t), 3.0, 0.0, 1.0, steps=1)
        assert curve.param == 3.0
        assert curve.points() == [(0.0, 0.0), (1.0, 3.0)]

    def test_degenerate_interval(self):
        curve = sample_curve(lambda t, _p: (t, t), 0.0, 2.0, 2.0, steps=3)
        assert curve.points() == [(2.0, 2.0)] * 4

    def test_invalid_steps(self):
        with pytest.raises(ValueError):
            sample_curve(lambda t, _p: (t, t), 0.0, 0.0, 1.0, steps=0)

    def test_deterministic(self):
        def fn(t, p):
            return (np.cos(t) * p, np.sin(t))

        a = sample_curve(fn, 2.0, 0.0, 3.0)
        b = sample_curve(fn, 2.0, 0.0, 3.0)
        np.testing.assert_array_equal(a.x, b.x)
        np.testing.assert_array_equal(a.y, b.y)


class TestCurve:
    """Tests for the Curve container."""

    def test_empty(self):
        curve = Curve.empty(-1)
        assert curve.is_empty
        assert curve.param == -1.0

    def test_shape_mismatch(self):
        with pytest.raises(ValueError):
            Curve(0.0, np.zeros(2), np.zeros(3))

    def test_ellipse(self):
        curve = sample_ellipse(4.0, 2.0, 1.0)
        np.testing.assert_allclose(curve.x ** 2 / 4.0 + curve.y ** 2, 1.0)

    def test_in_window(self):
        assert in_window(19.9, -19.9)
        assert not in_window(20.0, 0.0)
        assert not in_window(float("inf"), 0.0)

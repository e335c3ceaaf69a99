"""Tests for the per-family curve generators."""

import numpy as np
import pytest

from ortho_calc.catalog import CATALOG
from ortho_calc.families import (
    CANONICAL_FAMILIES,
    CircleFamily,
    CubicFamily,
    ExponentialFamily,
    HorizontalParabolaFamily,
    HyperbolaFamily,
    LineFamily,
    LogarithmicFamily,
    ParabolaFamily,
    SineFamily,
)


def _all_points_in_window(curves):
    return all(
        np.all(np.isfinite(c.x)) and np.all(np.isfinite(c.y))
        and np.all(np.abs(c.x) < 20) and np.all(np.abs(c.y) < 20)
        for c in curves
    )


class TestCatalogEntries:
    """Properties shared by every family."""

    @pytest.mark.parametrize("family", CATALOG.families, ids=lambda f: f.name)
    def test_descriptor_fields(self, family):
        assert family.original
        assert family.orthogonal
        assert family.steps
        assert "boxed" in family.steps[-1]

    @pytest.mark.parametrize("family", CATALOG.families, ids=lambda f: f.name)
    def test_generated_points_respect_window(self, family):
        original = family.generate_original([-4, -2, -1, 1, 2, 4])
        orthogonal = family.generate_orthogonal([1, 4, 9, 16, 25])
        assert original and orthogonal
        assert _all_points_in_window(original)
        assert _all_points_in_window(orthogonal)

    def test_nine_families(self):
        assert len(CANONICAL_FAMILIES) == 9


class TestCircles:
    """Circles x^2 + y^2 = C and lines y = kx."""

    def test_original_radius(self):
        (curve,) = CircleFamily().generate_original([4])
        assert len(curve) == 201
        np.testing.assert_allclose(curve.x ** 2 + curve.y ** 2, 4.0)

    def test_negative_constant_uses_absolute_value(self):
        (curve,) = CircleFamily().generate_original([-9])
        np.testing.assert_allclose(curve.x ** 2 + curve.y ** 2, 9.0)

    def test_orthogonal_lines(self):
        (curve,) = CircleFamily().generate_orthogonal([2])
        np.testing.assert_allclose(curve.y, 2.0 * curve.x)
        assert np.all(np.abs(curve.x) < 10.0 + 1e-9)


class TestParabolas:
    """Parabolas y = Cx^2 and ellipses x^2 + 2y^2 = k."""

    def test_original(self):
        (curve,) = ParabolaFamily().generate_original([1])
        np.testing.assert_allclose(curve.y, curve.x ** 2)
        assert curve.x.min() == pytest.approx(-4.4, abs=0.1)

    def test_orthogonal_ellipse(self):
        (curve,) = ParabolaFamily().generate_orthogonal([4])
        np.testing.assert_allclose(curve.x ** 2 + 2 * curve.y ** 2, 4.0)

    @pytest.mark.parametrize("k", [0, -3])
    def test_non_positive_constant_gives_empty_curve(self, k):
        (curve,) = ParabolaFamily().generate_orthogonal([k])
        assert curve.is_empty


class TestHyperbolas:
    """Rectangular hyperbolas xy = C and x^2 - y^2 = k."""

    def test_two_disjoint_branches(self):
        right, left = HyperbolaFamily().generate_original([5])
        assert not right.is_empty and not left.is_empty
        assert np.all(right.x > 0)
        assert np.all(left.x < 0)
        np.testing.assert_allclose(right.x * right.y, 5.0)

    def test_zero_constant_skipped(self):
        assert HyperbolaFamily().generate_original([0]) == []

    def test_positive_k_left_right_branches(self):
        right, left = HyperbolaFamily().generate_orthogonal([4])
        assert np.all(right.x > 0) and np.all(left.x < 0)
        np.testing.assert_allclose(right.x ** 2 - right.y ** 2, 4.0)

    def test_negative_k_top_bottom_branches(self):
        top, bottom = HyperbolaFamily().generate_orthogonal([-4])
        assert np.all(top.y > 0) and np.all(bottom.y < 0)
        np.testing.assert_allclose(top.x ** 2 - top.y ** 2, -4.0)

    def test_zero_k_produces_nothing(self):
        assert HyperbolaFamily().generate_orthogonal([0]) == []


class TestExponential:
    """Exponentials y = Ce^x and parabolas y^2 + 2x = k."""

    def test_original(self):
        (curve,) = ExponentialFamily().generate_original([2])
        np.testing.assert_allclose(curve.y, 2.0 * np.exp(curve.x))

    def test_orthogonal_parabola(self):
        upper, lower = ExponentialFamily().generate_orthogonal([4])
        for curve in (upper, lower):
            assert not curve.is_empty
            np.testing.assert_allclose(curve.y ** 2 + 2 * curve.x, 4.0, atol=1e-9)
        assert np.all(upper.y >= 0) and np.all(lower.y <= 0)

    def test_upper_branches_come_first(self):
        curves = ExponentialFamily().generate_orthogonal([1, 4, 9])
        assert len(curves) == 6
        assert all(np.all(c.y >= 0) for c in curves[:3])
        assert all(np.all(c.y <= 0) for c in curves[3:])
        assert [c.param for c in curves] == [1, 4, 9, 1, 4, 9]


class TestLines:
    """Lines y = Cx and circles x^2 + y^2 = k."""

    def test_orthogonal_circle(self):
        (curve,) = LineFamily().generate_orthogonal([9])
        np.testing.assert_allclose(curve.x ** 2 + curve.y ** 2, 9.0)

    def test_non_positive_k(self):
        (curve,) = LineFamily().generate_orthogonal([0])
        assert curve.is_empty


class TestHorizontalParabolas:
    """Horizontal parabolas y^2 = Cx and ellipses 2x^2 + y^2 = k."""

    @pytest.mark.parametrize("c", [2.0, -2.0])
    def test_branches_open_towards_sign_of_c(self, c):
        upper, lower = HorizontalParabolaFamily().generate_original([c])
        assert np.all(np.sign(upper.x) == np.sign(c))
        assert np.all(upper.y > 0) and np.all(lower.y < 0)
        np.testing.assert_allclose(upper.y ** 2, c * upper.x)

    def test_orthogonal_ellipse(self):
        (curve,) = HorizontalParabolaFamily().generate_orthogonal([8])
        np.testing.assert_allclose(2 * curve.x ** 2 + curve.y ** 2, 8.0)


class TestLogarithmic:
    """Logarithms y = C ln(x); trajectories sampled as x^2 + 2y^2 = k."""

    def test_original_domain(self):
        (curve,) = LogarithmicFamily().generate_original([1])
        assert np.all(curve.x >= 0.1 - 1e-12)
        np.testing.assert_allclose(curve.y, np.log(curve.x))

    def test_orthogonal_is_sampled_ellipse(self):
        (curve,) = LogarithmicFamily().generate_orthogonal([4])
        np.testing.assert_allclose(curve.x ** 2 + 2 * curve.y ** 2, 4.0)


class TestCubic:
    """Cubics y = Cx^3 and ellipses x^2 + 3y^2 = k."""

    def test_original(self):
        (curve,) = CubicFamily().generate_original([0.5])
        np.testing.assert_allclose(curve.y, 0.5 * curve.x ** 3)

    def test_orthogonal_ellipse(self):
        (curve,) = CubicFamily().generate_orthogonal([9])
        np.testing.assert_allclose(curve.x ** 2 + 3 * curve.y ** 2, 9.0)


class TestSine:
    """Sine curves y = C sin(x) and y^2 = 2 ln|cos x| + k."""

    def test_original_range(self):
        (curve,) = SineFamily().generate_original([1])
        assert len(curve) == 201
        np.testing.assert_allclose(curve.y, np.sin(curve.x))

    def test_orthogonal_branches(self):
        upper, lower = SineFamily().generate_orthogonal([1])
        for curve in (upper, lower):
            assert not curve.is_empty
            assert np.all(np.cos(curve.x) > 0)
            np.testing.assert_allclose(curve.y ** 2, 2 * np.log(np.cos(curve.x)) + 1.0, atol=1e-9)
        assert np.all(upper.y >= 0) and np.all(lower.y <= 0)

    def test_negative_k_restricts_domain(self):
        upper, _ = SineFamily().generate_orthogonal([-0.5])
        assert upper.is_empty

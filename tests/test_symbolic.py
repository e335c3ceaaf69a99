"""Tests for the symbolic orthogonality check."""

import pytest
import sympy as sp

from ortho_calc.catalog import CATALOG
from ortho_calc.families import CircleFamily, LogarithmicFamily
from ortho_calc.symbolic import X, Y, implicit_forms, orthogonality_residual, verify_family

EXACT_FAMILIES = [f for f in CATALOG.families if not isinstance(f, LogarithmicFamily)]


class TestOrthogonality:
    """Gradients of each family and its trajectories are perpendicular."""

    @pytest.mark.parametrize("family", EXACT_FAMILIES, ids=lambda f: f.name)
    def test_exact_families(self, family):
        assert orthogonality_residual(family) == 0
        assert verify_family(family).is_exact

    def test_logarithmic_trajectories_are_approximate(self):
        report = verify_family(LogarithmicFamily())
        assert not report.is_exact
        assert report.residual.subs({X: sp.E, Y: 1}) != 0

    def test_implicit_forms(self):
        f, g = implicit_forms(CircleFamily())
        assert f == X ** 2 + Y ** 2
        assert g == Y / X

    def test_latex_labels(self):
        report = verify_family(CircleFamily())
        assert report.original_latex == "x^{2} + y^{2} = C"
        assert report.orthogonal_latex.endswith("= k")

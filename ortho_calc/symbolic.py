from __future__ import annotations

from dataclasses import dataclass

import sympy as sp

from .families import CurveFamily

X, Y = sp.symbols("x y", real=True)
_LOCALS: dict[str, sp.Basic] = {"x": X, "y": Y}


@dataclass(frozen=True, slots=True)
class OrthogonalityReport:
    family_name: str
    original_latex: str
    orthogonal_latex: str
    residual: sp.Expr

    @property
    def is_exact(self) -> bool:
        return self.residual == 0


def implicit_forms(family: CurveFamily) -> tuple[sp.Expr, sp.Expr]:
    """Return F(x, y), G(x, y) whose level sets are the two curve families."""
    f = sp.sympify(family.implicit_original, locals=_LOCALS)
    g = sp.sympify(family.implicit_orthogonal, locals=_LOCALS)
    return f, g


def orthogonality_residual(family: CurveFamily) -> sp.Expr:
    """∇F · ∇G, simplified.

    Level curves of F and G cross at right angles wherever this vanishes,
    so an exact pair of families gives an identically zero residual.
    """
    f, g = implicit_forms(family)
    dot = sp.diff(f, X) * sp.diff(g, X) + sp.diff(f, Y) * sp.diff(g, Y)
    return sp.simplify(dot)


def verify_family(family: CurveFamily) -> OrthogonalityReport:
    f, g = implicit_forms(family)
    return OrthogonalityReport(
        family_name=family.name,
        original_latex=rf"{sp.latex(f)} = C",
        orthogonal_latex=rf"{sp.latex(g)} = k",
        residual=orthogonality_residual(family),
    )

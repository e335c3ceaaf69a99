"""
Curve families with closed-form orthogonal trajectories: 9 canonical forms.

Family                       Original              Orthogonal trajectories
------                       --------              -----------------------
1.  Circles                  x² + y² = C           y = kx
2.  Parabolas                y = Cx²               x² + 2y² = k
3.  Cubic curves             y = Cx³               x² + 3y² = k
4.  Rectangular hyperbolas   xy = C                x² − y² = k
5.  Exponential curves       y = Ceˣ               y² + 2x = k
6.  Horizontal parabolas     y² = Cx               2x² + y² = k
7.  Logarithmic curves       y = C·ln(x)           x² + 2y² = k  (sampled)
8.  Sine curves              y = C·sin(x)          y² = 2·ln|cos x| + k
9.  Straight lines           y = Cx                x² + y² = k

Each family samples both sets of curves through ``sample_curve`` so every
point respects the rendering window.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import ClassVar, Optional, Sequence

import numpy as np

from .sampling import Curve, Point, sample_curve, sample_ellipse

# ---------------------------------------------------------------------------
# Pattern fragments (input is whitespace-collapsed and matched ignoring case)
# ---------------------------------------------------------------------------

_C = r"c\s*\*?\s*"                       # the constant, optional "*"
_SQUARED = r"(?:\^?\s*2|²)"
_CUBED = r"(?:\^?\s*3|³)"
_NO_EXPONENT = r"(?!\s*(?:\^|²|³|\d))"


def _pattern(source: str) -> re.Pattern[str]:
    return re.compile(source, re.IGNORECASE)


# ===========================================================================
# Abstract base family
# ===========================================================================

class CurveFamily(ABC):
    """One entry of the catalog: recognition rule, labels, derivation, generators."""

    name: ClassVar[str]
    pattern: ClassVar[re.Pattern[str]]
    original: ClassVar[str]
    orthogonal: ClassVar[str]
    description: ClassVar[str]
    example: ClassVar[str]
    steps: ClassVar[tuple[str, ...]]
    # Level-set functions F(x, y) and G(x, y) in sympy syntax; the orthogonal
    # one describes what generate_orthogonal actually samples.
    implicit_original: ClassVar[str]
    implicit_orthogonal: ClassVar[str]

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    @abstractmethod
    def generate_original(self, params: Sequence[float]) -> list[Curve]:
        raise NotImplementedError

    @abstractmethod
    def generate_orthogonal(self, params: Sequence[float]) -> list[Curve]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.original!r}>"

    @staticmethod
    def _ellipses(params: Sequence[float], x_div: float, y_div: float) -> list[Curve]:
        """Ellipses ``x²·x_div + y²·y_div = k``; empty curve when k <= 0."""
        curves: list[Curve] = []
        for k in params:
            if k <= 0:
                curves.append(Curve.empty(k))
                continue
            curves.append(sample_ellipse(k, float(np.sqrt(k / x_div)), float(np.sqrt(k / y_div))))
        return curves


# ===========================================================================
# Circles centred at the origin  x² + y² = C
# ===========================================================================

class CircleFamily(CurveFamily):

    name = "Circles centered at origin"
    pattern = _pattern(
        rf"(?:x\s*{_SQUARED}?\s*\+\s*y\s*{_SQUARED}?|y\s*{_SQUARED}?\s*\+\s*x\s*{_SQUARED}?)\s*=\s*c"
    )
    original = "x² + y² = C"
    orthogonal = "y = kx (straight lines through origin)"
    description = "Circles → Lines"
    example = "x^2 + y^2 = C"
    implicit_original = "x**2 + y**2"
    implicit_orthogonal = "y/x"
    steps = (
        r"\text{Given family: } x^2 + y^2 = C",
        r"\text{Differentiate w.r.t. } x: \quad 2x + 2y\frac{dy}{dx} = 0",
        r"\text{Solve for } \frac{dy}{dx}: \quad \frac{dy}{dx} = -\frac{x}{y}",
        r"\text{For orthogonal trajectory, replace } \frac{dy}{dx} \text{ with } -\frac{dx}{dy}:",
        r"-\frac{dx}{dy} = -\frac{x}{y} \quad \Rightarrow \quad \frac{dx}{dy} = \frac{x}{y}",
        r"\text{Rearranging: } \frac{dx}{x} = \frac{dy}{y}",
        r"\text{Integrating both sides: } \ln|x| = \ln|y| + \ln|k|",
        r"\text{Orthogonal Trajectory: } \boxed{y = kx}",
    )

    def generate_original(self, params: Sequence[float]) -> list[Curve]:
        curves: list[Curve] = []
        for c in params:
            r = float(np.sqrt(abs(c)))
            curves.append(sample_curve(
                lambda t, _c: (r * np.cos(t), r * np.sin(t)),
                c, 0.0, 2.0 * np.pi,
            ))
        return curves

    def generate_orthogonal(self, params: Sequence[float]) -> list[Curve]:
        return [sample_curve(lambda t, k: (t, k * t), k, -10.0, 10.0) for k in params]


# ===========================================================================
# Parabolas  y = Cx²
# ===========================================================================

class ParabolaFamily(CurveFamily):

    name = "Parabolas"
    pattern = _pattern(rf"y\s*=\s*{_C}x\s*{_SQUARED}(?!\s*\d)")
    original = "y = Cx²"
    orthogonal = "x² + 2y² = k (ellipses)"
    description = "Parabolas → Ellipses"
    example = "y = Cx^2"
    implicit_original = "y/x**2"
    implicit_orthogonal = "x**2 + 2*y**2"
    steps = (
        r"\text{Given family: } y = Cx^2",
        r"\text{Differentiate w.r.t. } x: \quad \frac{dy}{dx} = 2Cx",
        r"\text{From original equation: } C = \frac{y}{x^2}",
        r"\text{Substitute: } \frac{dy}{dx} = 2 \cdot \frac{y}{x^2} \cdot x = \frac{2y}{x}",
        r"\text{For orthogonal trajectory: } \frac{dy}{dx} = -\frac{x}{2y}",
        r"\text{Rearranging: } 2y\,dy = -x\,dx",
        r"\text{Integrating: } y^2 = -\frac{x^2}{2} + k",
        r"\text{Orthogonal Trajectory: } \boxed{x^2 + 2y^2 = k}",
    )

    def generate_original(self, params: Sequence[float]) -> list[Curve]:
        return [sample_curve(lambda t, c: (t, c * t * t), c, -5.0, 5.0) for c in params]

    def generate_orthogonal(self, params: Sequence[float]) -> list[Curve]:
        return self._ellipses(params, 1.0, 2.0)


# ===========================================================================
# Cubic curves  y = Cx³
# ===========================================================================

class CubicFamily(CurveFamily):

    name = "Cubic curves"
    pattern = _pattern(rf"y\s*=\s*{_C}x\s*{_CUBED}(?!\s*\d)")
    original = "y = Cx³"
    orthogonal = "x² + 3y² = k (ellipses)"
    description = "Cubics → Ellipses"
    example = "y = Cx^3"
    implicit_original = "y/x**3"
    implicit_orthogonal = "x**2 + 3*y**2"
    steps = (
        r"\text{Given family: } y = Cx^3",
        r"\text{Differentiate w.r.t. } x: \quad \frac{dy}{dx} = 3Cx^2",
        r"\text{From original equation: } C = \frac{y}{x^3}",
        r"\text{Substitute: } \frac{dy}{dx} = 3 \cdot \frac{y}{x^3} \cdot x^2 = \frac{3y}{x}",
        r"\text{For orthogonal trajectory: } \frac{dy}{dx} = -\frac{x}{3y}",
        r"\text{Rearranging: } 3y\,dy = -x\,dx",
        r"\text{Integrating: } \frac{3y^2}{2} = -\frac{x^2}{2} + C_1",
        r"\text{Orthogonal Trajectory: } \boxed{x^2 + 3y^2 = k}",
    )

    def generate_original(self, params: Sequence[float]) -> list[Curve]:
        return [sample_curve(lambda t, c: (t, c * t ** 3), c, -3.0, 3.0) for c in params]

    def generate_orthogonal(self, params: Sequence[float]) -> list[Curve]:
        return self._ellipses(params, 1.0, 3.0)


# ===========================================================================
# Rectangular hyperbolas  xy = C
# ===========================================================================

class HyperbolaFamily(CurveFamily):

    name = "Rectangular hyperbolas"
    pattern = _pattern(r"x\s*\*?\s*y\s*=\s*c")
    original = "xy = C"
    orthogonal = "x² - y² = k"
    description = "Hyperbolas → Hyperbolas"
    example = "xy = C"
    implicit_original = "x*y"
    implicit_orthogonal = "x**2 - y**2"
    steps = (
        r"\text{Given family: } xy = C",
        r"\text{Differentiate w.r.t. } x: \quad y + x\frac{dy}{dx} = 0",
        r"\text{Solve for } \frac{dy}{dx}: \quad \frac{dy}{dx} = -\frac{y}{x}",
        r"\text{For orthogonal trajectory: } \frac{dy}{dx} = \frac{x}{y}",
        r"\text{Rearranging: } y\,dy = x\,dx",
        r"\text{Integrating: } \frac{y^2}{2} = \frac{x^2}{2} + C_1",
        r"\text{Orthogonal Trajectory: } \boxed{x^2 - y^2 = k}",
    )

    @staticmethod
    def _branch_point(t: float, c: float) -> Optional[Point]:
        if t == 0:
            return None
        return t, c / t

    def generate_original(self, params: Sequence[float]) -> list[Curve]:
        curves: list[Curve] = []
        for c in params:
            if c == 0:
                continue
            curves.append(sample_curve(self._branch_point, c, 0.1, 10.0))
            curves.append(sample_curve(self._branch_point, c, -10.0, -0.1))
        return curves

    def generate_orthogonal(self, params: Sequence[float]) -> list[Curve]:
        curves: list[Curve] = []
        for k in params:
            a = float(np.sqrt(abs(k)))
            if k > 0:
                # right and left branches
                curves.append(sample_curve(
                    lambda t, _k: (a * np.cosh(t), a * np.sinh(t)), k, -2.0, 2.0))
                curves.append(sample_curve(
                    lambda t, _k: (-a * np.cosh(t), a * np.sinh(t)), k, -2.0, 2.0))
            elif k < 0:
                # top and bottom branches
                curves.append(sample_curve(
                    lambda t, _k: (a * np.sinh(t), a * np.cosh(t)), k, -2.0, 2.0))
                curves.append(sample_curve(
                    lambda t, _k: (a * np.sinh(t), -a * np.cosh(t)), k, -2.0, 2.0))
        return curves


# ===========================================================================
# Exponential curves  y = Ceˣ
# ===========================================================================

class ExponentialFamily(CurveFamily):

    name = "Exponential curves"
    pattern = _pattern(
        rf"y\s*=\s*{_C}(?:e\s*\^?\s*\(?\s*x\s*\)?|exp\s*\(\s*x\s*\))"
    )
    original = "y = Ce^x"
    orthogonal = "y² + 2x = k (parabolas)"
    description = "Exponentials → Parabolas"
    example = "y = Ce^x"
    implicit_original = "y*exp(-x)"
    implicit_orthogonal = "y**2 + 2*x"
    steps = (
        r"\text{Given family: } y = Ce^x",
        r"\text{Differentiate w.r.t. } x: \quad \frac{dy}{dx} = Ce^x",
        r"\text{From original equation: } C = ye^{-x}",
        r"\text{Substitute: } \frac{dy}{dx} = ye^{-x} \cdot e^x = y",
        r"\text{For orthogonal trajectory: } \frac{dy}{dx} = -\frac{1}{y}",
        r"\text{Rearranging: } y\,dy = -dx",
        r"\text{Integrating: } \frac{y^2}{2} = -x + C_1",
        r"\text{Orthogonal Trajectory: } \boxed{y^2 + 2x = k}",
    )

    def generate_original(self, params: Sequence[float]) -> list[Curve]:
        return [sample_curve(lambda t, c: (t, c * np.exp(t)), c, -3.0, 3.0) for c in params]

    @staticmethod
    def _upper(t: float, k: float) -> Optional[Point]:
        val = k - 2.0 * t
        if val < 0:
            return None
        return t, float(np.sqrt(val))

    @staticmethod
    def _lower(t: float, k: float) -> Optional[Point]:
        val = k - 2.0 * t
        if val < 0:
            return None
        return t, -float(np.sqrt(val))

    def generate_orthogonal(self, params: Sequence[float]) -> list[Curve]:
        # All upper halves first, then all lower halves.
        upper = [sample_curve(self._upper, k, -10.0, k / 2.0) for k in params]
        lower = [sample_curve(self._lower, k, -10.0, k / 2.0) for k in params]
        return upper + lower


# ===========================================================================
# Horizontal parabolas  y² = Cx
# ===========================================================================

class HorizontalParabolaFamily(CurveFamily):

    name = "Horizontal parabolas"
    pattern = _pattern(rf"y\s*{_SQUARED}\s*=\s*{_C}x{_NO_EXPONENT}")
    original = "y² = Cx"
    orthogonal = "2x² + y² = k (ellipses)"
    description = "Horizontal parabolas → Ellipses"
    example = "y^2 = Cx"
    implicit_original = "y**2/x"
    implicit_orthogonal = "2*x**2 + y**2"
    steps = (
        r"\text{Given family: } y^2 = Cx",
        r"\text{Differentiate w.r.t. } x: \quad 2y\frac{dy}{dx} = C",
        r"\text{From original equation: } C = \frac{y^2}{x}",
        r"\text{Substitute: } \frac{dy}{dx} = \frac{y^2}{x} \cdot \frac{1}{2y} = \frac{y}{2x}",
        r"\text{For orthogonal trajectory: } \frac{dy}{dx} = -\frac{2x}{y}",
        r"\text{Rearranging: } y\,dy = -2x\,dx",
        r"\text{Integrating: } \frac{y^2}{2} = -x^2 + C_1",
        r"\text{Orthogonal Trajectory: } \boxed{2x^2 + y^2 = k}",
    )

    def generate_original(self, params: Sequence[float]) -> list[Curve]:
        curves: list[Curve] = []
        for c in params:
            if c == 0:
                continue
            # the parabola opens towards the sign of C
            sign = float(np.sign(c))
            curves.append(sample_curve(
                lambda t, p: (sign * t, float(np.sqrt(abs(p) * t))), c, 0.01, 10.0))
            curves.append(sample_curve(
                lambda t, p: (sign * t, -float(np.sqrt(abs(p) * t))), c, 0.01, 10.0))
        return curves

    def generate_orthogonal(self, params: Sequence[float]) -> list[Curve]:
        return self._ellipses(params, 2.0, 1.0)


# ===========================================================================
# Logarithmic curves  y = C·ln(x)
# ===========================================================================

class LogarithmicFamily(CurveFamily):
    """The plotted trajectories are the ellipses x² + 2y² = k.

    The boxed result of the derivation is shown as text only.
    """

    name = "Logarithmic curves"
    pattern = _pattern(rf"y\s*=\s*{_C}(?:ln|log)\s*\(?\s*x\s*\)?")
    original = "y = C ln(x)"
    orthogonal = "y² + x² ln(x) = k"
    description = "Logarithms → Ellipse-like curves"
    example = "y = C*ln(x)"
    implicit_original = "y/log(x)"
    implicit_orthogonal = "x**2 + 2*y**2"
    steps = (
        r"\text{Given family: } y = C\ln x",
        r"\text{Differentiate w.r.t. } x: \quad \frac{dy}{dx} = \frac{C}{x}",
        r"\text{From original equation: } C = \frac{y}{\ln x}",
        r"\text{Substitute: } \frac{dy}{dx} = \frac{y}{x\ln x}",
        r"\text{For orthogonal trajectory: } \frac{dy}{dx} = -\frac{x\ln x}{y}",
        r"\text{Rearranging: } y\,dy = -x\ln x\,dx",
        r"\text{Integrating: } \frac{y^2}{2} = -\frac{x^2\ln x}{2} + \frac{x^2}{4} + C_1",
        r"\text{Orthogonal Trajectory: } \boxed{y^2 + x^2\ln x = k}",
    )

    @staticmethod
    def _point(t: float, c: float) -> Optional[Point]:
        if t <= 0:
            return None
        return t, c * float(np.log(t))

    def generate_original(self, params: Sequence[float]) -> list[Curve]:
        return [sample_curve(self._point, c, 0.1, 10.0) for c in params]

    def generate_orthogonal(self, params: Sequence[float]) -> list[Curve]:
        return self._ellipses(params, 1.0, 2.0)


# ===========================================================================
# Sine curves  y = C·sin(x)
# ===========================================================================

class SineFamily(CurveFamily):

    name = "Sine curves"
    pattern = _pattern(rf"y\s*=\s*{_C}sin\s*\(?\s*x\s*\)?")
    original = "y = C sin(x)"
    orthogonal = "y² = 2 ln|cos x| + k"
    description = "Sine waves → Log-cosine curves"
    example = "y = C*sin(x)"
    implicit_original = "y/sin(x)"
    implicit_orthogonal = "y**2 - 2*log(cos(x))"
    steps = (
        r"\text{Given family: } y = C\sin x",
        r"\text{Differentiate w.r.t. } x: \quad \frac{dy}{dx} = C\cos x",
        r"\text{From original equation: } C = \frac{y}{\sin x}",
        r"\text{Substitute: } \frac{dy}{dx} = \frac{y\cos x}{\sin x} = y\cot x",
        r"\text{For orthogonal trajectory: } \frac{dy}{dx} = -\frac{\tan x}{y}",
        r"\text{Rearranging: } y\,dy = -\tan x\,dx",
        r"\text{Integrating: } \frac{y^2}{2} = \ln|\cos x| + C_1",
        r"\text{Orthogonal Trajectory: } \boxed{y^2 = 2\ln|\cos x| + k}",
    )

    def generate_original(self, params: Sequence[float]) -> list[Curve]:
        return [
            sample_curve(lambda t, c: (t, c * np.sin(t)), c, -2.0 * np.pi, 2.0 * np.pi)
            for c in params
        ]

    @staticmethod
    def _branch(sign: float):
        def point(t: float, k: float) -> Optional[Point]:
            cos_t = float(np.cos(t))
            if cos_t <= 0:
                return None
            val = 2.0 * float(np.log(cos_t)) + k
            if val < 0:
                return None
            return t, sign * float(np.sqrt(val))
        return point

    def generate_orthogonal(self, params: Sequence[float]) -> list[Curve]:
        curves: list[Curve] = []
        for k in params:
            curves.append(sample_curve(self._branch(1.0), k, -1.5, 1.5))
            curves.append(sample_curve(self._branch(-1.0), k, -1.5, 1.5))
        return curves


# ===========================================================================
# Straight lines through the origin  y = Cx
# ===========================================================================

class LineFamily(CurveFamily):

    name = "Straight lines through origin"
    pattern = _pattern(rf"y\s*=\s*{_C}x{_NO_EXPONENT}")
    original = "y = Cx"
    orthogonal = "x² + y² = k (circles)"
    description = "Lines → Circles"
    example = "y = Cx"
    implicit_original = "y/x"
    implicit_orthogonal = "x**2 + y**2"
    steps = (
        r"\text{Given family: } y = Cx",
        r"\text{Differentiate w.r.t. } x: \quad \frac{dy}{dx} = C",
        r"\text{From original equation: } C = \frac{y}{x}",
        r"\text{Substitute: } \frac{dy}{dx} = \frac{y}{x}",
        r"\text{For orthogonal trajectory: } \frac{dy}{dx} = -\frac{x}{y}",
        r"\text{Rearranging: } y\,dy = -x\,dx",
        r"\text{Integrating: } \frac{y^2}{2} = -\frac{x^2}{2} + C_1",
        r"\text{Orthogonal Trajectory: } \boxed{x^2 + y^2 = k}",
    )

    def generate_original(self, params: Sequence[float]) -> list[Curve]:
        return [sample_curve(lambda t, c: (t, c * t), c, -10.0, 10.0) for c in params]

    def generate_orthogonal(self, params: Sequence[float]) -> list[Curve]:
        return self._ellipses(params, 1.0, 1.0)


# ---------------------------------------------------------------------------
# Canonical priority order.  The bare y = Cx pattern must stay last.
# ---------------------------------------------------------------------------

CANONICAL_FAMILIES: tuple[type[CurveFamily], ...] = (
    CircleFamily,
    ParabolaFamily,
    CubicFamily,
    HyperbolaFamily,
    ExponentialFamily,
    HorizontalParabolaFamily,
    LogarithmicFamily,
    SineFamily,
    LineFamily,
)

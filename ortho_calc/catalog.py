from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from .families import CANONICAL_FAMILIES, CurveFamily
from .log import get_logger
from .sampling import Curve, FloatArray

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# User-facing constants
# ---------------------------------------------------------------------------

UNRECOGNIZED_HINT: str = (
    "Equation not recognized. Try: x^2 + y^2 = C, y = Cx^2, xy = C, y = Ce^x, or y = Cx"
)

ORIGINAL_COLOR: tuple[int, int, int] = (59, 130, 246)      # blue
ORTHOGONAL_COLOR: tuple[int, int, int] = (239, 68, 68)     # red

_WHITESPACE = re.compile(r"\s+")


def normalize_equation(text: str) -> str:
    """Collapse whitespace runs to a single space and trim the ends."""
    return _WHITESPACE.sub(" ", text).strip()


# ===========================================================================
# Data-classes
# ===========================================================================

@dataclass(frozen=True, slots=True)
class DefaultParameters:
    original: tuple[float, ...] = (-4.0, -2.0, -1.0, 1.0, 2.0, 4.0)
    orthogonal: tuple[float, ...] = (1.0, 4.0, 9.0, 16.0, 25.0)


def default_params() -> DefaultParameters:
    """Constants plotted for every family, whichever one matched."""
    return DefaultParameters()


@dataclass(frozen=True, slots=True, eq=False)
class PlotTrace:
    role: str                           # "original" or "orthogonal"
    x: FloatArray
    y: FloatArray
    name: str
    color: tuple[int, int, int]
    show_legend: bool


@dataclass(frozen=True, slots=True, eq=False)
class TrajectoryResult:
    family: CurveFamily
    original_curves: tuple[Curve, ...]
    orthogonal_curves: tuple[Curve, ...]

    @property
    def steps(self) -> tuple[str, ...]:
        return self.family.steps

    def traces(self) -> list[PlotTrace]:
        """Plot traces for every non-empty curve, originals first.

        Only the first trace of each role carries a legend entry.
        """
        traces: list[PlotTrace] = []
        groups = (
            ("original", "Original Family", ORIGINAL_COLOR, self.original_curves),
            ("orthogonal", "Orthogonal Trajectories", ORTHOGONAL_COLOR, self.orthogonal_curves),
        )
        for role, label, color, curves in groups:
            first = True
            for curve in curves:
                if curve.is_empty:
                    continue
                traces.append(PlotTrace(
                    role=role,
                    x=curve.x,
                    y=curve.y,
                    name=label if first else "",
                    color=color,
                    show_legend=first,
                ))
                first = False
        return traces


# ===========================================================================
# Catalog / matcher service
# ===========================================================================

class TrajectoryCatalog:
    """Fixed-order registry of curve families.

    Families are tried in order and the first match wins, so more specific
    patterns must precede the generic ``y = Cx`` one.
    """

    def __init__(self, families: Optional[Sequence[CurveFamily]] = None) -> None:
        if families is None:
            families = tuple(cls() for cls in CANONICAL_FAMILIES)
        self._families: tuple[CurveFamily, ...] = tuple(families)

    @property
    def families(self) -> tuple[CurveFamily, ...]:
        return self._families

    @property
    def examples(self) -> tuple[str, ...]:
        return tuple(f.example for f in self._families)

    def match(self, equation: str) -> Optional[CurveFamily]:
        normalized = normalize_equation(equation)
        for family in self._families:
            if family.matches(normalized):
                logger.debug("Matched %r to %s", normalized, family.name)
                return family
        logger.debug("No family matches %r", normalized)
        return None

    def solve(
        self, equation: str, params: Optional[DefaultParameters] = None
    ) -> Optional[TrajectoryResult]:
        """Match *equation* and generate both curve sets, or return None."""
        family = self.match(equation)
        if family is None:
            return None
        p = params if params is not None else default_params()
        result = TrajectoryResult(
            family=family,
            original_curves=tuple(family.generate_original(p.original)),
            orthogonal_curves=tuple(family.generate_orthogonal(p.orthogonal)),
        )
        logger.debug(
            "%s: %d original and %d orthogonal curves",
            family.name, len(result.original_curves), len(result.orthogonal_curves),
        )
        return result


CATALOG = TrajectoryCatalog()


def find_matching_family(equation: str) -> Optional[CurveFamily]:
    return CATALOG.match(equation)

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

import numpy as np
from numpy.typing import NDArray

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

FloatArray = NDArray[np.floating[Any]]
Point = tuple[float, float]
PointFunction = Callable[[float, float], Optional[Point]]

# ---------------------------------------------------------------------------
# Rendering window: points with |x| or |y| >= WINDOW_LIMIT are dropped.
# ---------------------------------------------------------------------------

WINDOW_LIMIT: float = 20.0
DEFAULT_STEPS: int = 200


@dataclass(frozen=True, slots=True, eq=False)
class Curve:
    """Ordered samples of one member of a curve family."""

    param: float
    x: FloatArray
    y: FloatArray

    def __post_init__(self) -> None:
        if self.x.shape != self.y.shape:
            raise ValueError(f"x and y must have the same shape: {self.x.shape} != {self.y.shape}")

    def __len__(self) -> int:
        return int(self.x.shape[0])

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def points(self) -> list[Point]:
        return [(float(a), float(b)) for a, b in zip(self.x, self.y)]

    def to_dict(self) -> dict[str, list[float]]:
        """Plotting format: ``{"x": [...], "y": [...]}``."""
        return {"x": self.x.tolist(), "y": self.y.tolist()}

    @classmethod
    def empty(cls, param: float) -> Curve:
        return cls(float(param), np.empty(0, dtype=np.float64), np.empty(0, dtype=np.float64))


def in_window(x: float, y: float, limit: float = WINDOW_LIMIT) -> bool:
    return bool(np.isfinite(x) and np.isfinite(y) and abs(x) < limit and abs(y) < limit)


def sample_curve(
    fn: PointFunction,
    param: float,
    t_min: float,
    t_max: float,
    steps: int = DEFAULT_STEPS,
) -> Curve:
    """Evaluate *fn* at ``steps + 1`` evenly spaced parameter values.

    ``fn(t, param)`` returns an ``(x, y)`` pair, or ``None`` when the curve is
    undefined at *t*.  Undefined points, non-finite points and points outside
    the rendering window are skipped, so the result may be shorter than
    ``steps + 1`` or empty.
    """
    if steps < 1:
        raise ValueError(f"steps must be a positive integer, got {steps}")

    dt = (t_max - t_min) / steps
    xs: list[float] = []
    ys: list[float] = []
    with np.errstate(all="ignore"):
        for i in range(steps + 1):
            t = t_min + i * dt
            point = fn(t, param)
            if point is None:
                continue
            px, py = float(point[0]), float(point[1])
            if in_window(px, py):
                xs.append(px)
                ys.append(py)

    return Curve(
        float(param),
        np.asarray(xs, dtype=np.float64),
        np.asarray(ys, dtype=np.float64),
    )


def sample_ellipse(param: float, a: float, b: float, steps: int = DEFAULT_STEPS) -> Curve:
    """Full ellipse ``(a cos t, b sin t)`` for ``t`` in ``[0, 2*pi]``."""
    return sample_curve(
        lambda t, _p: (a * np.cos(t), b * np.sin(t)),
        param, 0.0, 2.0 * np.pi, steps,
    )

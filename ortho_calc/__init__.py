"""Orthogonal trajectory and carbon footprint calculators."""

from .catalog import (
    CATALOG,
    UNRECOGNIZED_HINT,
    DefaultParameters,
    TrajectoryCatalog,
    TrajectoryResult,
    default_params,
    find_matching_family,
)
from .emissions import EmissionResult, compute_emissions, saving_tips
from .families import CurveFamily
from .sampling import Curve, sample_curve

__all__ = [
    "CATALOG",
    "UNRECOGNIZED_HINT",
    "Curve",
    "CurveFamily",
    "DefaultParameters",
    "EmissionResult",
    "TrajectoryCatalog",
    "TrajectoryResult",
    "compute_emissions",
    "default_params",
    "find_matching_family",
    "sample_curve",
    "saving_tips",
]

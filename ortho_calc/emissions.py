from __future__ import annotations

import math
from dataclasses import dataclass

from .log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FuelFactor:
    factor: float       # kg CO2 per unit
    unit: str
    label: str


FUEL_EMISSION_FACTORS: dict[str, FuelFactor] = {
    "petrol": FuelFactor(2.31, "liters", "Petrol"),
    "diesel": FuelFactor(2.68, "liters", "Diesel"),
    "cng":    FuelFactor(2.0, "kg", "CNG (Compressed Natural Gas)"),
    "lpg":    FuelFactor(1.51, "liters", "LPG (Liquefied Petroleum Gas)"),
    "coal":   FuelFactor(2.42, "kg", "Coal"),
}

ELECTRICITY_EMISSION_FACTOR: float = 0.5    # kg CO2 per kWh
WASTE_EMISSION_FACTOR: float = 0.5          # kg CO2 per kg of waste

CATEGORIES: tuple[str, ...] = ("fuel", "electricity", "waste")
CATEGORY_LABELS: dict[str, str] = {
    "fuel": "Fuel",
    "electricity": "Electricity",
    "waste": "Waste",
}

_SAVING_TIPS: dict[str, tuple[str, ...]] = {
    "fuel": (
        "Consider switching to public transportation or carpooling",
        "Maintain your vehicle regularly for better fuel efficiency",
        "Plan your trips to reduce unnecessary driving",
        "Consider switching to an electric or hybrid vehicle",
        "Walk or cycle for short distances",
    ),
    "electricity": (
        "Switch to LED bulbs - they use 75% less energy",
        "Unplug devices when not in use to avoid phantom loads",
        "Use natural light during the day",
        "Set your AC to 24-26°C for optimal efficiency",
        "Consider installing solar panels",
    ),
    "waste": (
        "Start composting organic waste at home",
        "Reduce single-use plastic consumption",
        "Recycle paper, glass, and metal properly",
        "Buy products with minimal packaging",
        "Donate or repurpose items instead of throwing them away",
    ),
}


@dataclass(frozen=True, slots=True)
class EmissionResult:
    fuel: float
    electricity: float
    waste: float
    total: float
    highest_category: str

    @property
    def has_emissions(self) -> bool:
        return self.total > 0

    def by_category(self) -> dict[str, float]:
        return {"fuel": self.fuel, "electricity": self.electricity, "waste": self.waste}


def compute_emissions(
    fuel_kind: str,
    fuel_amount: float,
    electricity_kwh: float,
    waste_kg: float,
) -> EmissionResult:
    """Monthly emissions in kg CO2 per category.

    An unknown *fuel_kind* contributes nothing.  The highest category must be
    strictly larger than both others; ties fall back to ``"fuel"``.
    """
    for label, amount in (("fuel_amount", fuel_amount),
                          ("electricity_kwh", electricity_kwh),
                          ("waste_kg", waste_kg)):
        if amount < 0:
            raise ValueError(f"{label} cannot be negative: {amount}")

    fuel_factor = FUEL_EMISSION_FACTORS.get(fuel_kind)
    fuel = fuel_amount * (fuel_factor.factor if fuel_factor is not None else 0.0)
    electricity = electricity_kwh * ELECTRICITY_EMISSION_FACTOR
    waste = waste_kg * WASTE_EMISSION_FACTOR
    total = fuel + electricity + waste

    highest = "fuel"
    if electricity > fuel and electricity > waste:
        highest = "electricity"
    elif waste > fuel and waste > electricity:
        highest = "waste"

    logger.info("Emissions for %s: total %.2f kg CO2 (highest: %s)", fuel_kind, total, highest)
    return EmissionResult(fuel, electricity, waste, total, highest)


def saving_tips(category: str) -> tuple[str, ...]:
    return _SAVING_TIPS.get(category, ())


def parse_amount(text: str) -> float:
    """Coerce a text field to a non-negative amount; anything invalid is 0."""
    try:
        value = float(text)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value

"""
analysis/displacement_factors.py - Admiralty coefficient displacement classes

The speed-normalised Admiralty coefficient varies with displacement:
small fast hulls carry far more power per tonne and score low, mid-size
frigates score high, and large hulls recover. Each bucket records the
coefficient expected for its class and the multiplier that brings it to
the fleet average (73.5, excluding the Brooke-class outlier).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple
import math

from ..core.constants import FLEET_AVERAGE_COEFFICIENT, OUTLIER_THRESHOLD


@dataclass(frozen=True)
class DisplacementFactor:
    """Displacement bucket with expected coefficient and normalisation factor."""
    min_displacement: float
    max_displacement: float
    label: str
    expected_coefficient: float
    adjustment_factor: float

    def contains(self, displacement: float) -> bool:
        return self.min_displacement <= displacement <= self.max_displacement

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min_displacement": self.min_displacement,
            "max_displacement": None if math.isinf(self.max_displacement) else self.max_displacement,
            "label": self.label,
            "expected_coefficient": self.expected_coefficient,
            "adjustment_factor": self.adjustment_factor,
        }


# Expected coefficients at the 27 kt baseline:
#   Poti 22.1, Whitby 73.3, Leander 77.8, Charles F. Adams 83.2,
#   Kashin 62.2, County 74.2
DISPLACEMENT_FACTORS: Tuple[DisplacementFactor, ...] = (
    DisplacementFactor(0, 600, "Corvette/Fast Attack", 22.1, 3.32),
    DisplacementFactor(600, 2000, "Light Frigate", 60.0, 1.225),
    DisplacementFactor(2000, 2500, "Medium Frigate", 75.5, 0.973),
    DisplacementFactor(2500, 3500, "Large Frigate / Small Destroyer", 83.2, 0.884),
    DisplacementFactor(3500, 4500, "Destroyer", 68.2, 1.078),
    DisplacementFactor(4500, math.inf, "Large Destroyer / Cruiser", 74.2, 0.991),
)


def get_displacement_factor(displacement: float) -> DisplacementFactor:
    """First bucket containing the displacement; falls back to the largest class."""
    for factor in DISPLACEMENT_FACTORS:
        if factor.contains(displacement):
            return factor
    return DISPLACEMENT_FACTORS[-1]


def apply_displacement_adjustment(coefficient: float, displacement: float) -> float:
    return coefficient * get_displacement_factor(displacement).adjustment_factor


@dataclass(frozen=True)
class CoefficientAnalysis:
    """A coefficient placed in its displacement class."""
    raw_coefficient: float
    displacement: float
    displacement_class: str
    expected_coefficient: float
    adjustment_factor: float
    adjusted_coefficient: float
    is_outlier: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "raw_coefficient": round(self.raw_coefficient, 2),
            "displacement": self.displacement,
            "displacement_class": self.displacement_class,
            "expected_coefficient": self.expected_coefficient,
            "adjustment_factor": self.adjustment_factor,
            "adjusted_coefficient": round(self.adjusted_coefficient, 2),
            "is_outlier": self.is_outlier,
        }


def analyze_admiralty_coefficient(
    coefficient: float,
    displacement: float,
    fleet_average: float = FLEET_AVERAGE_COEFFICIENT,
    outlier_threshold: float = OUTLIER_THRESHOLD,
) -> CoefficientAnalysis:
    """Adjust a coefficient for its displacement class and flag outliers."""
    factor = get_displacement_factor(displacement)
    adjusted = coefficient * factor.adjustment_factor
    return CoefficientAnalysis(
        raw_coefficient=coefficient,
        displacement=displacement,
        displacement_class=factor.label,
        expected_coefficient=factor.expected_coefficient,
        adjustment_factor=factor.adjustment_factor,
        adjusted_coefficient=adjusted,
        is_outlier=abs(adjusted - fleet_average) > outlier_threshold,
    )

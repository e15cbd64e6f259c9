"""
SHIPENGINE Power Requirement Model

Required shaft power from displacement, speed and hull type using the
Admiralty coefficient method with a small-hull correction:

    P(kW) = D^(2/3) * V^3 / C
    P(hp) = P(kW) / planing_factor / 0.7457

The empirical power law kept alongside it is the alternate estimator used
by the calibration harness.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union
import logging
import math

from ..core.constants import (
    DISPLACEMENT_EXPONENT,
    SPEED_EXPONENT,
    HP_TO_KW,
    PLANING_HULL_DISPLACEMENT_MT,
    SMALL_HULL_DISPLACEMENT_MT,
    PLANING_EFFICIENCY_PLANING,
    PLANING_EFFICIENCY_SMALL_HULL,
    PLANING_EFFICIENCY_LARGE_HULL,
    EMPIRICAL_HP_COEFFICIENT,
    EMPIRICAL_DISPLACEMENT_EXPONENT,
    EMPIRICAL_DRAG_SCALE,
)
from ..core.enums import HullType
from ..errors import PowerRequirementError
from .hull_types import HullTypeRegistry, DEFAULT_HULL_REGISTRY

logger = logging.getLogger(__name__)


def planing_efficiency_factor(displacement: float) -> float:
    """Small/planing hull penalty: 0.82 below 1500 t, 0.91 below 4000 t, else 1.0."""
    if displacement < PLANING_HULL_DISPLACEMENT_MT:
        return PLANING_EFFICIENCY_PLANING
    if displacement < SMALL_HULL_DISPLACEMENT_MT:
        return PLANING_EFFICIENCY_SMALL_HULL
    return PLANING_EFFICIENCY_LARGE_HULL


def admiralty_power_kw(displacement: float, speed_kts: float, coefficient: float) -> float:
    """P = D^(2/3) * V^3 / C."""
    return displacement ** DISPLACEMENT_EXPONENT * speed_kts ** SPEED_EXPONENT / coefficient


def admiralty_coefficient(displacement: float, speed_kts: float, power_kw: float) -> float:
    """C = D^(2/3) * V^3 / P. Returns 0 for zero power."""
    if power_kw <= 0:
        return 0.0
    return displacement ** DISPLACEMENT_EXPONENT * speed_kts ** SPEED_EXPONENT / power_kw


def empirical_power(displacement: float, speed_kts: float, drag_coefficient: float) -> float:
    """
    Empirical power law (hp).

        P = 0.0035 * D^0.67 * V^3 * (1 + 8 * drag)
    """
    return (
        EMPIRICAL_HP_COEFFICIENT
        * displacement ** EMPIRICAL_DISPLACEMENT_EXPONENT
        * speed_kts ** SPEED_EXPONENT
        * (1 + EMPIRICAL_DRAG_SCALE * drag_coefficient)
    )


@dataclass(frozen=True)
class PowerRequirement:
    """Result of a power requirement calculation."""

    hull_type: HullType
    displacement: float
    speed_kts: float
    admiralty_coefficient: float
    planing_factor: float
    power_kw: float
    """Raw Admiralty power before the small-hull correction."""

    power_hp: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hull_type": self.hull_type.value,
            "displacement": self.displacement,
            "speed_kts": self.speed_kts,
            "admiralty_coefficient": self.admiralty_coefficient,
            "planing_factor": self.planing_factor,
            "power_kw": round(self.power_kw, 2),
            "power_hp": round(self.power_hp, 2),
        }


class PowerRequirementCalculator:
    """
    Admiralty-method power requirement.

    Displacement is validated against the hull type's envelope before any
    arithmetic; out-of-range values raise DisplacementOutOfRangeError.
    A result that is not a finite number raises PowerRequirementError.
    """

    def __init__(self, hull_types: Optional[HullTypeRegistry] = None):
        self.hull_types = hull_types if hull_types is not None else DEFAULT_HULL_REGISTRY

    def calculate(
        self,
        displacement: float,
        speed_kts: float,
        hull_type: Union[HullType, str],
    ) -> PowerRequirement:
        profile = self.hull_types.get(hull_type)
        profile.validate_displacement(displacement)

        coefficient = profile.admiralty_coefficient
        factor = planing_efficiency_factor(displacement)
        try:
            power_kw = admiralty_power_kw(displacement, speed_kts, coefficient)
        except OverflowError:
            raise PowerRequirementError(displacement, speed_kts) from None
        power_hp = power_kw / factor / HP_TO_KW
        if not math.isfinite(power_hp):
            raise PowerRequirementError(displacement, speed_kts)

        logger.debug(
            f"Power requirement {profile.hull_type.value} {displacement:g}t @ {speed_kts:g}kts: "
            f"C={coefficient:g} factor={factor:.2f} -> {power_hp:.0f}hp"
        )

        return PowerRequirement(
            hull_type=profile.hull_type,
            displacement=displacement,
            speed_kts=speed_kts,
            admiralty_coefficient=coefficient,
            planing_factor=factor,
            power_kw=power_kw,
            power_hp=power_hp,
        )


def compute_required_power(
    displacement: float,
    speed_kts: float,
    hull_type: Union[HullType, str],
    hull_types: Optional[HullTypeRegistry] = None,
) -> float:
    """Required power (hp) for a displacement/speed/hull type."""
    return PowerRequirementCalculator(hull_types).calculate(
        displacement, speed_kts, hull_type
    ).power_hp

"""
analysis/formulas.py - Candidate power prediction formulas

Each formula predicts installed power (SHP) for a historical vessel so the
calibration harness can score it against the published figure. All are
variations on D^(2/3) * V^3 / k with different ways of choosing k.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List

from ..core.constants import DISPLACEMENT_EXPONENT, SPEED_EXPONENT, HP_TO_KW
from ..core.enums import HullForm, PropulsionType
from ..physics.power import empirical_power
from .displacement_factors import get_displacement_factor
from .vessels import (
    VesselSpecification,
    admiralty_coefficient_by_year,
    hull_form_resistance_factor,
)

DEFAULT_HULL_DRAG = 0.12
COGAG_EFFICIENCY = 0.93


def _admiralty_base(displacement: float, speed: float) -> float:
    return displacement ** DISPLACEMENT_EXPONENT * speed ** SPEED_EXPONENT


def _cogag_efficiency(vessel: VesselSpecification) -> float:
    return COGAG_EFFICIENCY if vessel.propulsion_type == PropulsionType.COGAG else 1.0


class PowerFormula(ABC):
    """Base class for a power prediction formula."""

    name: str = ""
    description: str = ""

    @abstractmethod
    def predict(self, vessel: VesselSpecification) -> float:
        """Predicted installed power (SHP)."""
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name!r}>"


# =============================================================================
# DEFAULT FORMULA SET
# =============================================================================

class EmpiricalFormula(PowerFormula):
    """Empirical power law with hull-form resistance correction."""

    name = "Empirical"
    description = "0.0035 × Disp^0.67 × Speed^3 × HullDragFactor"

    def __init__(self, hull_drag: float = DEFAULT_HULL_DRAG):
        self.hull_drag = hull_drag

    def predict(self, vessel: VesselSpecification) -> float:
        displacement = vessel.design_displacement
        hull_form = HullForm.DISPLACEMENT if displacement > 4000 else HullForm.PLANING
        resistance = hull_form_resistance_factor(displacement, hull_form)
        return empirical_power(displacement, vessel.speed, self.hull_drag) / resistance


class AdmiraltyFormula(PowerFormula):
    """Admiralty coefficient chosen by design era, corrected for hull form."""

    name = "Admiralty Coefficient"
    description = "Disp^2/3 × Speed^3 / Historical Admiralty Coefficient"

    def predict(self, vessel: VesselSpecification) -> float:
        return admiralty_power(
            vessel.design_displacement, vessel.speed, vessel.design_year, vessel.hull_form
        )


class AdmiraltyResistanceFormula(PowerFormula):
    """Admiralty formula divided by the vessel's own resistance factor."""

    name = "Admiralty + Resistance Factor"
    description = "Admiralty formula with hull efficiency adjustment"

    def predict(self, vessel: VesselSpecification) -> float:
        base = AdmiraltyFormula().predict(vessel)
        return base / vessel.hydrodynamics.resistance_factor


class ShipTypeBucketFormula(PowerFormula):
    """Fixed scaling constant per displacement bucket."""

    name = "Discrete Ship Type Categories"
    description = "Disp^2/3 × Speed^3 / {500, 800, 1200, 2800} by displacement"

    BUCKETS = (
        (2000, 500.0),      # fast attack
        (5000, 800.0),      # frigate
        (15000, 1200.0),    # destroyer
    )
    CAPITAL_SCALING = 2800.0

    def scaling_for(self, displacement: float) -> float:
        for limit, scaling in self.BUCKETS:
            if displacement < limit:
                return scaling
        return self.CAPITAL_SCALING

    def predict(self, vessel: VesselSpecification) -> float:
        displacement = vessel.standard_displacement
        return _admiralty_base(displacement, vessel.speed) / self.scaling_for(displacement)


class ContinuousScalingFormula(PowerFormula):
    """Scaling constant varying smoothly with displacement."""

    name = "Continuous Displacement Scaling"
    description = "Disp^2/3 × Speed^3 / (500 × Disp^-0.1)"

    def __init__(self, base_scaling: float = 500.0, displacement_exponent: float = -0.1):
        self.base_scaling = base_scaling
        self.displacement_exponent = displacement_exponent

    def predict(self, vessel: VesselSpecification) -> float:
        displacement = vessel.standard_displacement
        scaling = self.base_scaling * displacement ** self.displacement_exponent
        return _admiralty_base(displacement, vessel.speed) / scaling


# =============================================================================
# EXTENDED FORMULA SET
# =============================================================================

class FixedAdmiraltyFormula(PowerFormula):
    """Admiralty formula with a single fleet-wide constant."""

    name = "Admiralty (fixed constant)"
    description = "Disp^2/3 × Speed^3 / 105"

    def __init__(self, scaling: float = 105.0):
        self.scaling = scaling

    def predict(self, vessel: VesselSpecification) -> float:
        return _admiralty_base(vessel.standard_displacement, vessel.speed) / self.scaling


class PropulsionEfficiencyFormula(PowerFormula):
    name = "Admiralty + Propulsion Efficiency"
    description = "Disp^2/3 × Speed^3 / 140 × efficiency (COGAG 0.93)"

    def predict(self, vessel: VesselSpecification) -> float:
        base = _admiralty_base(vessel.standard_displacement, vessel.speed) / 140.0
        return base * _cogag_efficiency(vessel)


class DisplacementClassFormula(PowerFormula):
    name = "Admiralty + Displacement Scaling"
    description = "Disp^2/3 × Speed^3 / (105 × displacement class factor)"

    def predict(self, vessel: VesselSpecification) -> float:
        displacement = vessel.standard_displacement
        scaling = 105.0 * get_displacement_factor(displacement).adjustment_factor
        return _admiralty_base(displacement, vessel.speed) / scaling


class SpeedNormalizedFormula(PowerFormula):
    name = "Speed-Normalised Admiralty"
    description = "Disp^2/3 × Speed^3 / 300 × ((V / Disp^1/3) / 1.5)^0.5"

    def predict(self, vessel: VesselSpecification) -> float:
        displacement = vessel.standard_displacement
        speed_normalized = vessel.speed / displacement ** (1 / 3)
        speed_factor = (speed_normalized / 1.5) ** 0.5
        return _admiralty_base(displacement, vessel.speed) / 300.0 * speed_factor


class HydrodynamicFormula(PowerFormula):
    name = "Hydrodynamic-Aware"
    description = "Disp^2/3 × Speed^3 / 130 × hull form × efficiency"

    def predict(self, vessel: VesselSpecification) -> float:
        displacement = vessel.standard_displacement
        resistance = (
            0.82 if vessel.hull_form == HullForm.PLANING and displacement < 1000 else 1.0
        )
        base = _admiralty_base(displacement, vessel.speed) / 130.0
        return base * resistance * _cogag_efficiency(vessel)


# =============================================================================
# HELPERS
# =============================================================================

def admiralty_power(
    displacement: float,
    speed: float,
    design_year: int = 1960,
    hull_form: HullForm = HullForm.DISPLACEMENT,
) -> float:
    """Era Admiralty power (SHP) corrected for hull form."""
    coefficient = admiralty_coefficient_by_year(design_year, displacement)
    power = _admiralty_base(displacement, speed) / coefficient / HP_TO_KW
    return power / hull_form_resistance_factor(displacement, hull_form)


def default_formulas() -> List[PowerFormula]:
    return [
        EmpiricalFormula(),
        AdmiraltyFormula(),
        AdmiraltyResistanceFormula(),
        ShipTypeBucketFormula(),
        ContinuousScalingFormula(),
    ]


def extended_formulas() -> List[PowerFormula]:
    return [
        FixedAdmiraltyFormula(),
        PropulsionEfficiencyFormula(),
        DisplacementClassFormula(),
        SpeedNormalizedFormula(),
        HydrodynamicFormula(),
    ]

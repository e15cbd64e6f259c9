"""
systems/propulsion/calculator.py - Engine system calculator

Turns an EngineDesignInput into an EngineSystemOutput. Steps run in a
fixed order because later figures consume earlier ones:

    configuration -> base power -> priority bias -> weight -> cost
    -> MTBF -> cruising speed -> cruise power -> fuel -> range
    -> acceleration / heat / complexity
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional
import logging

from ...core.constants import (
    HP_TO_KW,
    COST_PER_HP,
    FUEL_COST_PER_TONNE,
    BASE_FULL_POWER_CONSUMPTION,
    POWER_SETTING_EXPONENT,
    DEFAULT_CRUISE_POWER_SETTING,
    BASE_MTBF_HOURS,
    FUEL_LOAD_FRACTION,
    WEIGHT_PER_TONNE_DISPLACEMENT,
    WEIGHT_PER_HP,
    VOLUME_PER_TONNE,
    SLEEK_HULL_THRESHOLD,
    SLEEK_HULL_CRUISE_KTS,
    DEFAULT_CRUISE_KTS,
    ACCELERATION_POWER_TO_WEIGHT_REFERENCE,
    HEAT_CONSUMPTION_SCALE,
    HEAT_CONSUMPTION_CAP,
    RATING_MAX,
)
from ...core.enums import EnginePriority
from ...core.rounding import round_half_up, round_int
from ...physics.hull_types import HullTypeRegistry
from ...physics.power import PowerRequirementCalculator
from .configurations import ConfigurationRegistry, DEFAULT_REGISTRY, PropulsionConfiguration
from .schema import EngineDesignInput, EngineSystemOutput

logger = logging.getLogger(__name__)


# =============================================================================
# PRIORITY PROFILES
# =============================================================================

@dataclass(frozen=True)
class PriorityProfile:
    """Design-philosophy adjustments layered on the physical requirement."""

    power_bias: float = 1.0
    weight_adjustment: float = 0.0
    cost_surcharge: float = 1.0
    mtbf_multiplier: float = 1.0
    fuel_multiplier: float = 1.0


PRIORITY_PROFILES: Mapping[EnginePriority, PriorityProfile] = MappingProxyType({
    EnginePriority.EFFICIENCY: PriorityProfile(
        power_bias=0.98,
        weight_adjustment=0.05,
        cost_surcharge=1.05,
        fuel_multiplier=0.85,
    ),
    EnginePriority.POWER: PriorityProfile(
        power_bias=1.05,
        weight_adjustment=-0.10,
        cost_surcharge=1.08,
        mtbf_multiplier=0.85,
        fuel_multiplier=1.10,
    ),
    EnginePriority.RELIABILITY: PriorityProfile(
        weight_adjustment=0.08,
        cost_surcharge=1.10,
        mtbf_multiplier=1.25,
    ),
    EnginePriority.BALANCED: PriorityProfile(),
})


# =============================================================================
# STEP FUNCTIONS
# =============================================================================

def resolve_cruising_speed(
    desired_cruising_speed: Optional[float],
    displacement: float,
    drag_coefficient: float,
) -> float:
    """
    Cruising speed for a design.

    A supplied speed (> 0) is used verbatim. Otherwise sleek hulls
    (displacement * drag below 0.12) cruise at 18 kts and everything else
    at 15 kts.
    """
    if desired_cruising_speed is not None and desired_cruising_speed > 0:
        return desired_cruising_speed
    if displacement * drag_coefficient < SLEEK_HULL_THRESHOLD:
        return SLEEK_HULL_CRUISE_KTS
    return DEFAULT_CRUISE_KTS


def fuel_consumption(
    power_hp: float,
    fuel_efficiency_factor: float,
    power_setting: float = 1.0,
    priority_fuel_multiplier: float = 1.0,
) -> float:
    """
    Fuel burn (tonnes/hour) at a power setting, rounded to 4 dp.

    The setting^1.25 curve penalises running away from the 60-75% load
    sweet spot.
    """
    power_kw = power_hp * HP_TO_KW
    consumption = (
        power_kw
        * BASE_FULL_POWER_CONSUMPTION
        * fuel_efficiency_factor
        * power_setting ** POWER_SETTING_EXPONENT
        * priority_fuel_multiplier
    )
    return round_half_up(consumption, 4)


def calculate_range(displacement: float, cruise_fuel: float, cruising_speed: float) -> float:
    """Endurance range (nm); 0 when there is no fuel burn or no speed."""
    if cruise_fuel == 0 or cruising_speed == 0:
        return 0.0
    fuel_capacity = displacement * FUEL_LOAD_FRACTION
    return round_half_up(fuel_capacity / cruise_fuel * cruising_speed)


def acceleration_rating(power_hp: float, engine_weight: float) -> int:
    if engine_weight == 0:
        return 0
    power_to_weight = power_hp / engine_weight
    return min(RATING_MAX, round_int(power_to_weight / ACCELERATION_POWER_TO_WEIGHT_REFERENCE * 100))


def heat_signature(configuration: PropulsionConfiguration, full_power_fuel: float) -> float:
    fuel_contribution = min(HEAT_CONSUMPTION_CAP, full_power_fuel * HEAT_CONSUMPTION_SCALE)
    return min(RATING_MAX, configuration.heat_signature_base + fuel_contribution)


# =============================================================================
# CALCULATOR
# =============================================================================

class EngineSystemCalculator:
    """
    Engine system calculator.

    Registries are injected; the defaults are the built-in configuration
    and hull type tables.
    """

    def __init__(
        self,
        configurations: Optional[ConfigurationRegistry] = None,
        hull_types: Optional[HullTypeRegistry] = None,
    ):
        self.configurations = configurations if configurations is not None else DEFAULT_REGISTRY
        self.power_model = PowerRequirementCalculator(hull_types)

    def calculate(self, design: EngineDesignInput) -> EngineSystemOutput:
        # Configuration is resolved before any power arithmetic
        config = self.configurations.get(design.configuration_id)
        return self._calculate_for(config, design)

    def compare(self, design: EngineDesignInput) -> List[EngineSystemOutput]:
        """
        Evaluate the request against every configuration.

        When the request carries a design year, only configurations in
        service by that year are offered.
        """
        if design.year is not None:
            candidates = self.configurations.available_in(design.year)
        else:
            candidates = list(self.configurations)
        logger.debug(f"Comparing {len(candidates)} configurations")
        return [self._calculate_for(config, design) for config in candidates]

    def _calculate_for(
        self,
        config: PropulsionConfiguration,
        design: EngineDesignInput,
    ) -> EngineSystemOutput:
        profile = PRIORITY_PROFILES[design.engine_priority]
        displacement = design.ship_displacement
        top_speed = design.desired_top_speed

        base_power = self.power_model.calculate(
            displacement, top_speed, design.hull_type
        ).power_hp
        power = base_power * profile.power_bias

        weight = (
            (displacement * WEIGHT_PER_TONNE_DISPLACEMENT + power * WEIGHT_PER_HP)
            * config.weight_multiplier
            * (1 + profile.weight_adjustment)
        )

        cost = round_half_up(power * COST_PER_HP * config.cost_multiplier * profile.cost_surcharge)

        mtbf = round_half_up(BASE_MTBF_HOURS * config.reliability_factor * profile.mtbf_multiplier)
        reliability_score = mtbf / BASE_MTBF_HOURS * 100

        cruising_speed = resolve_cruising_speed(
            design.desired_cruising_speed, displacement, design.hull_drag_coefficient
        )

        full_fuel = fuel_consumption(
            power, config.fuel_efficiency_factor, 1.0, profile.fuel_multiplier
        )
        if design.has_custom_cruise:
            # Cubic law already scales power down; no second part-load curve
            cruise_power = power * (cruising_speed / top_speed) ** 3
            cruise_fuel = fuel_consumption(
                cruise_power, config.fuel_efficiency_factor, 1.0, profile.fuel_multiplier
            )
        else:
            cruise_fuel = fuel_consumption(
                power,
                config.fuel_efficiency_factor,
                DEFAULT_CRUISE_POWER_SETTING,
                profile.fuel_multiplier,
            )

        output = EngineSystemOutput(
            configuration_id=config.id.value,
            total_engine_weight=weight,
            total_cost=cost,
            engine_volume=weight * VOLUME_PER_TONNE,
            max_power=power,
            max_speed=top_speed,
            cruising_speed=cruising_speed,
            max_range=calculate_range(displacement, cruise_fuel, cruising_speed),
            mtbf=mtbf,
            reliability_score=reliability_score,
            fuel_consumption_at_full_power=full_fuel,
            fuel_consumption_at_cruise=cruise_fuel,
            operating_cost_per_hour=full_fuel * FUEL_COST_PER_TONNE,
            acceleration_rating=acceleration_rating(power, weight),
            heat_signature=heat_signature(config, full_fuel),
            complexity_rating=round_int(config.complexity_factor * 100),
        )

        logger.debug(
            f"{config.id.value} {design.engine_priority.value}: {power:.0f}hp, "
            f"{weight:.1f}t, range {output.max_range:.0f}nm"
        )
        return output


def calculate_engine_system(
    design: EngineDesignInput,
    configurations: Optional[ConfigurationRegistry] = None,
    hull_types: Optional[HullTypeRegistry] = None,
) -> EngineSystemOutput:
    """Calculate the engine system for one design request."""
    return EngineSystemCalculator(configurations, hull_types).calculate(design)


def compare_configurations(
    design: EngineDesignInput,
    configurations: Optional[ConfigurationRegistry] = None,
    hull_types: Optional[HullTypeRegistry] = None,
) -> List[EngineSystemOutput]:
    """Evaluate one design request against every available configuration."""
    return EngineSystemCalculator(configurations, hull_types).compare(design)

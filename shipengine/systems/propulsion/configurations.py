"""
systems/propulsion/configurations.py - Propulsion configuration registry

Hand-authored table of propulsion arrangements (single plants and
combined CODOG/CODAG/COGAG/... machinery) with the multipliers the
engine system calculator applies on top of the physical power
requirement.
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union
import logging

from ...core.enums import ConfigurationId, EngineType, GearboxType
from ...errors import ConfigurationNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PropulsionConfiguration:
    """Propulsion configuration record."""

    # === IDENTIFICATION ===
    id: ConfigurationId
    name: str
    display_name: str
    description: str

    # === MULTIPLIERS ===
    power_density: float
    """Relative power density (hp per tonne of machinery)."""

    weight_multiplier: float
    cost_multiplier: float
    reliability_factor: float
    """Multiplier on baseline MTBF."""

    fuel_efficiency_factor: float
    """Multiplier on baseline specific consumption (lower is better)."""

    complexity_factor: float
    """0-1, drives the complexity rating."""

    # === MACHINERY ===
    engine_types: Tuple[EngineType, ...] = ()
    gearbox_type: GearboxType = GearboxType.DIRECT

    # === HISTORY ===
    year_introduced: int = 1960
    tech_tier: int = 1

    # === SIGNATURE ===
    heat_signature_base: float = 50.0
    """Infrared signature before the fuel-burn contribution (30-90)."""

    @property
    def engine_count(self) -> int:
        return len(self.engine_types)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id.value,
            "name": self.name,
            "display_name": self.display_name,
            "description": self.description,
            "power_density": self.power_density,
            "weight_multiplier": self.weight_multiplier,
            "cost_multiplier": self.cost_multiplier,
            "reliability_factor": self.reliability_factor,
            "fuel_efficiency_factor": self.fuel_efficiency_factor,
            "complexity_factor": self.complexity_factor,
            "engine_count": self.engine_count,
            "engine_types": [e.value for e in self.engine_types],
            "gearbox_type": self.gearbox_type.value,
            "year_introduced": self.year_introduced,
            "tech_tier": self.tech_tier,
            "heat_signature_base": self.heat_signature_base,
        }


D = EngineType.DIESEL
GT = EngineType.GAS_TURBINE
ST = EngineType.STEAM


DEFAULT_CONFIGURATIONS: Tuple[PropulsionConfiguration, ...] = (
    PropulsionConfiguration(
        id=ConfigurationId.DIESEL,
        name="Single Diesel",
        display_name="Diesel",
        description=(
            "Single diesel engine. Cost-effective, reliable, excellent fuel "
            "economy. Limited power density."
        ),
        power_density=60,
        weight_multiplier=0.90,
        cost_multiplier=0.85,
        reliability_factor=1.30,
        fuel_efficiency_factor=0.75,
        complexity_factor=0.50,
        engine_types=(D,),
        gearbox_type=GearboxType.DIRECT,
        year_introduced=1960,
        tech_tier=1,
        heat_signature_base=35,
    ),
    PropulsionConfiguration(
        id=ConfigurationId.GAS_TURBINE,
        name="Single Gas Turbine",
        display_name="Gas Turbine",
        description=(
            "Single gas turbine. Highest power density, quick response, poor "
            "fuel economy and high operating cost."
        ),
        power_density=150,
        weight_multiplier=0.60,
        cost_multiplier=1.40,
        reliability_factor=0.70,
        fuel_efficiency_factor=1.50,
        complexity_factor=0.85,
        engine_types=(GT,),
        gearbox_type=GearboxType.DIRECT,
        year_introduced=1965,
        tech_tier=2,
        heat_signature_base=85,
    ),
    PropulsionConfiguration(
        id=ConfigurationId.STEAM_TURBINE,
        name="Steam Turbine",
        display_name="Steam Turbine",
        description=(
            "Steam turbine propulsion. Historical standard for WWII-era and "
            "post-war capital ships. Simple, reliable, poor efficiency."
        ),
        power_density=45,
        weight_multiplier=1.20,
        cost_multiplier=0.80,
        reliability_factor=1.10,
        fuel_efficiency_factor=2.00,
        complexity_factor=0.80,
        engine_types=(ST, ST, ST, ST),
        gearbox_type=GearboxType.COMBINED,
        year_introduced=1940,
        tech_tier=0,
        heat_signature_base=70,
    ),
    PropulsionConfiguration(
        id=ConfigurationId.CODOG,
        name="Combined Diesel Or Gas",
        display_name="CODOG",
        description=(
            "One diesel for cruise, one gas turbine for boost. Balanced "
            "efficiency and power."
        ),
        power_density=75,
        weight_multiplier=0.75,
        cost_multiplier=1.05,
        reliability_factor=1.00,
        fuel_efficiency_factor=0.95,
        complexity_factor=0.75,
        engine_types=(D, GT),
        gearbox_type=GearboxType.DIRECT,
        year_introduced=1970,
        tech_tier=2,
        heat_signature_base=50,
    ),
    PropulsionConfiguration(
        id=ConfigurationId.COGOG,
        name="Combined Gas Or Gas",
        display_name="COGOG",
        description=(
            "Two gas turbines which can have different operating "
            "characteristics. One for cruise efficiency, one for sprint "
            "power. High power density but complex and costly."
        ),
        power_density=90,
        weight_multiplier=0.70,
        cost_multiplier=1.20,
        reliability_factor=0.80,
        fuel_efficiency_factor=1.10,
        complexity_factor=0.80,
        engine_types=(GT, GT),
        gearbox_type=GearboxType.DIRECT,
        year_introduced=1965,
        tech_tier=3,
        heat_signature_base=90,
    ),
    PropulsionConfiguration(
        id=ConfigurationId.CODAG,
        name="Combined Diesel And Gas",
        display_name="CODAG",
        description=(
            "Two diesels plus gas turbine boost. Superior peak power, "
            "compact. Higher cost and complexity."
        ),
        power_density=80,
        weight_multiplier=0.65,
        cost_multiplier=1.25,
        reliability_factor=0.85,
        fuel_efficiency_factor=1.05,
        complexity_factor=0.90,
        engine_types=(D, D, GT),
        gearbox_type=GearboxType.COMBINED,
        year_introduced=1960,
        tech_tier=2,
        heat_signature_base=65,
    ),
    PropulsionConfiguration(
        id=ConfigurationId.COGAG,
        name="Combined Gas And Gas",
        display_name="COGAG",
        description=(
            "Two gas turbines with different operating characteristics, or "
            "two similar smaller turbines, driving together for sprint "
            "power. High power density but complex and costly."
        ),
        power_density=95,
        weight_multiplier=0.60,
        cost_multiplier=1.30,
        reliability_factor=0.75,
        fuel_efficiency_factor=1.20,
        complexity_factor=0.88,
        engine_types=(GT, GT),
        gearbox_type=GearboxType.COMBINED,
        year_introduced=1962,
        tech_tier=3,
        heat_signature_base=80,
    ),
    PropulsionConfiguration(
        id=ConfigurationId.CODAD,
        name="Combined Diesel And Diesel",
        display_name="CODAD",
        description=(
            "Two or more diesel engines combined for higher power output. "
            "Excellent fuel efficiency and reliability, but limited peak "
            "power density."
        ),
        power_density=70,
        weight_multiplier=0.80,
        cost_multiplier=1.10,
        reliability_factor=1.20,
        fuel_efficiency_factor=0.80,
        complexity_factor=0.70,
        engine_types=(D, D),
        gearbox_type=GearboxType.COMBINED,
        year_introduced=1975,
        tech_tier=1,
        heat_signature_base=30,
    ),
    PropulsionConfiguration(
        id=ConfigurationId.COSAG,
        name="Combined Steam And Gas",
        display_name="COSAG",
        description=(
            "Steam turbines for continuous operation, gas turbines for "
            "boost. Used in large destroyers/cruisers."
        ),
        power_density=70,
        weight_multiplier=0.90,
        cost_multiplier=1.15,
        reliability_factor=0.95,
        fuel_efficiency_factor=1.30,
        complexity_factor=0.85,
        engine_types=(ST, ST, GT, GT),
        gearbox_type=GearboxType.COMBINED,
        year_introduced=1962,
        tech_tier=2,
        heat_signature_base=75,
    ),
    PropulsionConfiguration(
        id=ConfigurationId.IEP,
        name="Integrated Electric Propulsion",
        display_name="IEP",
        description=(
            "Diesel generators and gas turbines drive electric motors. No "
            "mechanical shaft drive. Superior efficiency, reduced vibration, "
            "excellent flexibility. Complex but highly efficient."
        ),
        power_density=85,
        weight_multiplier=0.70,
        cost_multiplier=1.35,
        reliability_factor=0.95,
        fuel_efficiency_factor=0.88,
        complexity_factor=0.95,
        engine_types=(D, D, GT, GT),
        gearbox_type=GearboxType.DIRECT,
        year_introduced=1990,
        tech_tier=4,
        heat_signature_base=40,
    ),
)


ConfigurationKey = Union[ConfigurationId, str]


class ConfigurationRegistry:
    """
    Immutable lookup table of propulsion configurations.

    Built once and handed to the calculator; lookups of unknown ids raise
    ConfigurationNotFoundError instead of falling back to a default.
    """

    def __init__(self, configurations: Optional[Tuple[PropulsionConfiguration, ...]] = None):
        if configurations is None:
            configurations = DEFAULT_CONFIGURATIONS
        self._configurations: Mapping[ConfigurationId, PropulsionConfiguration] = MappingProxyType(
            {c.id: c for c in configurations}
        )

    def get(self, configuration_id: ConfigurationKey) -> PropulsionConfiguration:
        """Resolve a configuration by enum member or string value."""
        try:
            key = ConfigurationId(configuration_id)
        except ValueError:
            logger.warning(f"Rejected unknown configuration: {configuration_id!r}")
            raise ConfigurationNotFoundError(
                configuration_id, available=self.list_ids()
            ) from None

        config = self._configurations.get(key)
        if config is None:
            raise ConfigurationNotFoundError(configuration_id, available=self.list_ids())
        return config

    def list_ids(self) -> List[str]:
        return [key.value for key in self._configurations]

    def available_in(self, year: int) -> List[PropulsionConfiguration]:
        """Configurations already in service by the given design year."""
        return [c for c in self._configurations.values() if c.year_introduced <= year]

    def __contains__(self, configuration_id: object) -> bool:
        try:
            return ConfigurationId(configuration_id) in self._configurations
        except ValueError:
            return False

    def __iter__(self) -> Iterator[PropulsionConfiguration]:
        return iter(self._configurations.values())

    def __len__(self) -> int:
        return len(self._configurations)


DEFAULT_REGISTRY = ConfigurationRegistry()


def get_configuration(configuration_id: ConfigurationKey) -> PropulsionConfiguration:
    """Look up a configuration in the default registry."""
    return DEFAULT_REGISTRY.get(configuration_id)

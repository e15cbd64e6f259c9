"""
analysis/vessels.py - Historical warship reference dataset

Ground truth for the formula calibration harness: twenty post-war
warships with published displacement, speed and installed power, plus
the hydrodynamic values precomputed for each hull.

Any malformed entry (bad enum value, non-positive displacement, speed or
power) raises VesselDatasetError. The dataset is fixed at authoring time,
so there is no attempt to repair entries at runtime.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union
import json
import logging

from ..core.constants import DISPLACEMENT_EXPONENT, SPEED_EXPONENT
from ..core.enums import HullForm, PropulsionType, VesselType
from ..errors import VesselDatasetError

logger = logging.getLogger(__name__)


# =============================================================================
# PROPULSION TYPE DATA
# =============================================================================

@dataclass(frozen=True)
class PropulsionTypeProfile:
    """Qualitative profile of a historical propulsion type."""
    propulsion_type: PropulsionType
    description: str
    typical_cruise_efficiency: float


PROPULSION_TYPE_PROFILES: Mapping[PropulsionType, PropulsionTypeProfile] = MappingProxyType({
    p.propulsion_type: p for p in (
        PropulsionTypeProfile(
            PropulsionType.STEAM_TURBINE,
            "Steam turbines powered by boilers, common in mid-20th century warships. "
            "Less efficient at lower speeds.",
            0.55,
        ),
        PropulsionTypeProfile(
            PropulsionType.DIESEL,
            "Diesel engines. Maintain good fuel efficiency across a range of speeds.",
            0.75,
        ),
        PropulsionTypeProfile(
            PropulsionType.COGAG,
            "Combined Gas and Gas. Multiple gas turbines for different speed regimes; "
            "efficient at high speed, less so at cruise than diesels.",
            0.67,
        ),
        PropulsionTypeProfile(
            PropulsionType.COSAG,
            "Combined Steam and Gas. Steam turbines for cruising, gas turbines for "
            "high speed.",
            0.6,
        ),
        PropulsionTypeProfile(
            PropulsionType.IEP,
            "Integrated Electric Propulsion. Electric motors powered by various prime "
            "movers, efficient across a wide speed range.",
            0.9,
        ),
        PropulsionTypeProfile(
            PropulsionType.CODAG,
            "Combined Diesel and Gas. Diesels for cruising, gas turbines for sprints.",
            0.72,
        ),
        PropulsionTypeProfile(
            PropulsionType.CODOG,
            "Combined Diesel or Gas. Either diesels or gas turbines drive the ship.",
            0.75,
        ),
        PropulsionTypeProfile(
            PropulsionType.CODAD,
            "Combined Diesel and Diesel. Multiple diesels for different speed regimes.",
            0.78,
        ),
        PropulsionTypeProfile(
            PropulsionType.COGOG,
            "Combined Gas or Gas. Multiple gas turbines, one set active at a time.",
            0.65,
        ),
        PropulsionTypeProfile(
            PropulsionType.NUCLEAR,
            "Nuclear reactors raising steam for turbines. Consistent power and "
            "efficiency across all speeds.",
            0.85,
        ),
    )
})

# Aggregate propulsive efficiency by plant type (2-shaft baseline)
AGGREGATE_PROPULSION_EFFICIENCY: Mapping[PropulsionType, float] = MappingProxyType({
    PropulsionType.STEAM_TURBINE: 0.88,
    PropulsionType.DIESEL: 0.9,
    PropulsionType.COGAG: 0.85,
    PropulsionType.COSAG: 0.82,
    PropulsionType.CODAG: 0.85,
    PropulsionType.CODAD: 0.88,
    PropulsionType.CODOG: 0.85,
    PropulsionType.COGOG: 0.85,
    PropulsionType.IEP: 0.93,
    PropulsionType.NUCLEAR: 0.9,
})
DEFAULT_PROPULSION_EFFICIENCY = 0.85


# =============================================================================
# VESSEL SPECIFICATION
# =============================================================================

@dataclass(frozen=True)
class HydrodynamicValues:
    """Precomputed hydrodynamic parameters of a hull."""

    length_to_beam_ratio: float
    displacement_to_length: float
    """Disp / (0.01 * L)^3."""

    froude_number: float
    """V / sqrt(g * L)."""

    power_to_displacement: float
    """SHP per tonne."""

    resistance_factor: float
    """Hull efficiency multiplier (1.0 = baseline, > 1.0 = less efficient)."""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "length_to_beam_ratio": self.length_to_beam_ratio,
            "displacement_to_length": self.displacement_to_length,
            "froude_number": self.froude_number,
            "power_to_displacement": self.power_to_displacement,
            "resistance_factor": self.resistance_factor,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HydrodynamicValues':
        return cls(
            length_to_beam_ratio=data["length_to_beam_ratio"],
            displacement_to_length=data["displacement_to_length"],
            froude_number=data["froude_number"],
            power_to_displacement=data["power_to_displacement"],
            resistance_factor=data.get("resistance_factor", 1.0),
        )


@dataclass(frozen=True)
class VesselSpecification:
    """Historical warship record."""

    # === IDENTIFICATION ===
    name: str
    vessel_class: str
    nation: str
    design_year: int

    # === DISPLACEMENT (t) ===
    standard_displacement: float
    full_load_displacement: Optional[float]

    # === DIMENSIONS (m) ===
    length: float
    beam: float
    draught: float

    # === PERFORMANCE ===
    speed: float
    """Maximum speed (knots)."""

    cruise_speed: Optional[float]
    max_power_per_engine_group: float
    """SHP per engine group / shaft."""

    known_cruise_power: Optional[float]
    number_of_shafts: Optional[int]

    # === CLASSIFICATION ===
    propulsion_type: PropulsionType
    hull_form: HullForm
    vessel_type: VesselType

    hydrodynamics: HydrodynamicValues

    published_admiralty_coefficient: Optional[float] = None

    @property
    def actual_power(self) -> float:
        """Installed power (SHP): per-group power times shafts."""
        return self.max_power_per_engine_group * (self.number_of_shafts or 1)

    @property
    def design_displacement(self) -> float:
        """Full load displacement when known, else standard."""
        return self.full_load_displacement or self.standard_displacement

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "class": self.vessel_class,
            "nation": self.nation,
            "design_year": self.design_year,
            "displacement": {
                "standard": self.standard_displacement,
                "full_load": self.full_load_displacement,
            },
            "dimensions": {
                "length": self.length,
                "beam": self.beam,
                "draught": self.draught,
            },
            "speed": self.speed,
            "cruise_speed": self.cruise_speed,
            "max_power_per_engine_group": self.max_power_per_engine_group,
            "known_cruise_power": self.known_cruise_power,
            "number_of_shafts": self.number_of_shafts,
            "admiralty_coefficient": self.published_admiralty_coefficient,
            "propulsion_type": self.propulsion_type.value,
            "hull_form": self.hull_form.value,
            "vessel_type": self.vessel_type.value,
            "calculations": self.hydrodynamics.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VesselSpecification':
        """Create from dictionary; raises VesselDatasetError on malformed input."""
        name = data.get("name", "<unnamed>")
        try:
            displacement = data["displacement"]
            dimensions = data["dimensions"]
            vessel = cls(
                name=data["name"],
                vessel_class=data["class"],
                nation=data.get("nation", ""),
                design_year=int(data["design_year"]),
                standard_displacement=float(displacement["standard"]),
                full_load_displacement=displacement.get("full_load"),
                length=float(dimensions["length"]),
                beam=float(dimensions["beam"]),
                draught=float(dimensions["draught"]),
                speed=float(data["speed"]),
                cruise_speed=data.get("cruise_speed"),
                max_power_per_engine_group=float(data["max_power_per_engine_group"]),
                known_cruise_power=data.get("known_cruise_power"),
                number_of_shafts=data.get("number_of_shafts"),
                propulsion_type=PropulsionType(data["propulsion_type"]),
                hull_form=HullForm(data.get("hull_form", "displacement")),
                vessel_type=VesselType(data["vessel_type"]),
                hydrodynamics=HydrodynamicValues.from_dict(data["calculations"]),
                published_admiralty_coefficient=data.get("admiralty_coefficient"),
            )
        except KeyError as e:
            raise VesselDatasetError(name, f"missing field {e.args[0]!r}") from e
        except (TypeError, ValueError) as e:
            raise VesselDatasetError(name, str(e)) from e

        validate_vessel(vessel)
        return vessel


def _vessel(
    name: str,
    vessel_class: str,
    nation: str,
    design_year: int,
    displacement: Tuple[float, Optional[float]],
    dimensions: Tuple[float, float, float],
    speed: float,
    cruise_speed: Optional[float],
    power_per_group: float,
    shafts: Optional[int],
    known_cruise_power: Optional[float],
    propulsion_type: PropulsionType,
    vessel_type: VesselType,
    calculations: Tuple[float, float, float, float, float],
    hull_form: HullForm = HullForm.DISPLACEMENT,
    admiralty_coefficient: Optional[float] = None,
) -> VesselSpecification:
    return VesselSpecification(
        name=name,
        vessel_class=vessel_class,
        nation=nation,
        design_year=design_year,
        standard_displacement=displacement[0],
        full_load_displacement=displacement[1],
        length=dimensions[0],
        beam=dimensions[1],
        draught=dimensions[2],
        speed=speed,
        cruise_speed=cruise_speed,
        max_power_per_engine_group=power_per_group,
        known_cruise_power=known_cruise_power,
        number_of_shafts=shafts,
        propulsion_type=propulsion_type,
        hull_form=hull_form,
        vessel_type=vessel_type,
        hydrodynamics=HydrodynamicValues(*calculations),
        published_admiralty_coefficient=admiralty_coefficient,
    )


ST = PropulsionType.STEAM_TURBINE

# Source: published specifications of each class (Wikipedia, cross-checked)
VESSELS: Tuple[VesselSpecification, ...] = (
    # ==================== CORVETTES ====================
    _vessel("Poti", "Poti-class", "Soviet Navy", 1960,
            (508, 589), (59.4, 7.9, 2.0), 38, 15, 19000, 2, 8000,
            PropulsionType.CODAG, VesselType.CORVETTE,
            (7.52, 1.84, 0.431, 59.06, 0.95), hull_form=HullForm.PLANING),
    _vessel("Grisha", "Grisha-class", "Soviet Navy", 1966,
            (803, 980), (71.6, 19.8, 3.7), 34, 15, 12667, 3, 20000,
            PropulsionType.CODAG, VesselType.CORVETTE,
            (3.62, 2.74, 0.402, 15.77, 0.92), hull_form=HullForm.PLANING),

    # ==================== FRIGATES ====================
    _vessel("Niteroi", "Niteroi-class", "Brazil Navy", 1972,
            (2700, 3385), (129, 13.5, 5.5), 30, 22, 28000, 2, 17000,
            PropulsionType.CODOG, VesselType.FRIGATE,
            (9.56, 2.14, 0.267, 10.37, 1.0)),
    _vessel("HMS Whitby", "Whitby-class (Type 12)", "British Royal Navy", 1953,
            (2150, 2560), (110, 12, 5.2), 30, 16, 15000, 2, 3000,
            ST, VesselType.FRIGATE,
            (9.17, 2.12, 0.303, 13.95, 0.97)),
    _vessel("HMS Leander", "Leander-class (Type 12I)", "British Royal Navy", 1959,
            (2350, 2860), (113.4, 13.1, 4.5), 27, 17, 15000, 2, None,
            ST, VesselType.FRIGATE,
            (8.65, 2.17, 0.27, 12.77, 0.95)),
    _vessel("USS Brooke", "Brooke-class", "United States Navy", 1962,
            (2640, 3426), (118, 13.5, 4.42), 27.2, 17, 35000, 1, None,
            ST, VesselType.FRIGATE,
            (8.74, 2.28, 0.252, 13.26, 0.96)),
    _vessel("Razyashchiy", "Krivak-class (Project 1135)", "Soviet Navy", 1968,
            (3300, 3575), (123, 14.2, 4.6), 32, 19, 27475, 2, 14950,
            PropulsionType.COGAG, VesselType.FRIGATE,
            (8.66, 2.21, 0.288, 16.63, 0.98)),
    _vessel("Dinh Tien Hoang", "Gepard-class (Project 11661 E)", "Vietnam Navy", 2000,
            (2050, 2500), (102.4, 13.9, 5.7), 29, 16, 15000, 2, 8000,
            PropulsionType.CODOG, VesselType.FRIGATE,
            (7.37, 2.89, 0.283, 11.72, 1.0)),
    _vessel("USS Knox", "Knox-class", "United States Navy", 1966,
            (3385, 4130), (134, 14.25, 7.54), 27, 20, 35000, 1, None,
            ST, VesselType.FRIGATE,
            (9.4, 2.39, 0.241, 10.34, 0.99)),

    # ==================== DESTROYERS ====================
    _vessel("HMS Devonshire", "County-class", "British Royal Navy", 1962,
            (5080, 6200), (158, 16.5, 6.4), 30, 18, 30000, 2, 30000,
            PropulsionType.COSAG, VesselType.DESTROYER,
            (9.58, 1.69, 0.23, 9.68, 1.02)),
    _vessel("Komsomolets", "Kashin-class (Project 61)", "Soviet Navy", 1962,
            (3400, 4390), (144, 15.8, 4.6), 38, 18, 48000, 2, 48000,
            PropulsionType.COGAG, VesselType.DESTROYER,
            (9.11, 2.37, 0.356, 24.71, 1.0), admiralty_coefficient=204.3),
    _vessel("USS Charles F. Adams", "Charles F. Adams-class", "United States Navy", 1960,
            (3277, 4526), (133, 14, 4.6), 33, 20, 35000, 2, None,
            ST, VesselType.DESTROYER,
            (9.5, 2.54, 0.306, 10.69, 0.99)),

    # ==================== CRUISERS ====================
    _vessel("Vladivostok", "Kresta I-class (Project 1134)", "Soviet Navy", 1967,
            (6000, 7500), (159, 17, 6), 34, 20, 50000, 2, None,
            ST, VesselType.CRUISER,
            (9.35, 1.83, 0.271, 16.67, 1.01)),
    _vessel("USS Leahy", "Leahy-class", "United States Navy", 1962,
            (7000, 7800), (162, 17.1, 7.9), 32, 20, 42500, 2, None,
            ST, VesselType.CRUISER,
            (9.47, 1.88, 0.224, 12.14, 1.02)),

    # ==================== GAS TURBINE ERA ====================
    _vessel("HMCS Iroquois", "Iroquois-class", "Royal Canadian Navy", 1972,
            (4500, 5200), (129, 15, 4.42), 29, 20, 25000, 2, 12600,
            PropulsionType.COGOG, VesselType.DESTROYER,
            (8.6, 2.15, 0.254, 13.92, 0.98)),
    _vessel("Kortenaer", "Kortenaer-class", "Royal Netherlands Navy", 1978,
            (3100, 3690), (130.5, 14.6, 4.3), 30, 20, 25700, 2, 9800,
            PropulsionType.COGOG, VesselType.FRIGATE,
            (8.94, 2.08, 0.262, 13.93, 0.97)),
    _vessel("USS Spruance", "Spruance-class", "United States Navy", 1970,
            (7050, 8040), (172, 16.8, 8.8), 32.5, 20, 20000, 2, None,
            PropulsionType.COGAG, VesselType.DESTROYER,
            (10.24, 2.18, 0.247, 11.32, 0.99)),
    _vessel("USS Ticonderoga", "Ticonderoga-class", "United States Navy", 1980,
            (9000, 9600), (173, 16.8, 10.2), 32.5, 20, 25000, 2, None,
            PropulsionType.COGAG, VesselType.CRUISER,
            (10.31, 2.31, 0.245, 11.11, 1.0)),
    _vessel("La Fayette", "La Fayette-class", "French Navy", 1990,
            (3200, 3800), (125, 15.4, 4.1), 25, 15, 10500, 2, None,
            PropulsionType.DIESEL, VesselType.FRIGATE,
            (8.12, 2.24, 0.224, 5.53, 0.95)),
    _vessel("Scirocco", "Maestrale-class", "Italian Navy", 1982,
            (2990, 3040), (122.7, 12.9, 4.2), 33, 21, 18390, 2, None,
            PropulsionType.CODOG, VesselType.FRIGATE,
            (9.51, 2.02, 0.302, 16.25, 0.96)),
)

# Eight 1960s designs as commissioned; no cruise data. Power is per shaft.
VESSELS_1960S: Tuple[VesselSpecification, ...] = (
    # 30,000 hp of gas turbines plus 8,000 hp of diesels per shaft
    _vessel("Poti", "Poti-class", "Soviet Navy", 1960,
            (508, 589), (59.4, 7.9, 2.0), 38, None, 38000, 2, None,
            PropulsionType.CODAG, VesselType.CORVETTE,
            (7.52, 1.84, 0.431, 59.06, 0.95)),
    _vessel("HMS Whitby", "Whitby-class (Type 12)", "British Royal Navy", 1956,
            (2150, 2560), (110, 12, 5.2), 30, None, 30000, 2, None,
            ST, VesselType.FRIGATE,
            (9.17, 2.12, 0.303, 13.95, 0.97)),
    _vessel("HMS Leander", "Leander-class (Type 12I)", "British Royal Navy", 1963,
            (2350, 2860), (113.4, 12.5, 4.5), 27, None, 30000, 2, None,
            ST, VesselType.FRIGATE,
            (9.07, 2.17, 0.27, 12.77, 0.95)),
    _vessel("USS Brooke", "Brooke-class", "United States Navy", 1966,
            (2640, 3426), (118, 13.5, 4.42), 27.2, None, 35000, 1, None,
            ST, VesselType.FRIGATE,
            (8.74, 2.28, 0.252, 13.26, 0.96)),
    _vessel("Razyashchiy", "Krivak-class (Project 1135)", "Soviet Navy", 1970,
            (3300, 3575), (123, 14.2, 4.6), 32, None, 27500, 2, None,
            PropulsionType.COGAG, VesselType.FRIGATE,
            (8.66, 2.21, 0.288, 16.63, 0.98)),
    _vessel("HMS Devonshire", "County-class", "British Royal Navy", 1962,
            (6200, None), (158, 16.5, 6.4), 30, None, 60000, 2, None,
            PropulsionType.COSAG, VesselType.DESTROYER,
            (9.58, 1.69, 0.23, 9.68, 1.02)),
    _vessel("Komsomolets", "Kashin-class (Project 61)", "Soviet Navy", 1962,
            (3400, 4390), (144, 15.8, 4.6), 38, None, 48000, 2, None,
            PropulsionType.COGAG, VesselType.DESTROYER,
            (9.11, 2.37, 0.356, 24.71, 1.0)),
    _vessel("USS Charles F. Adams", "Charles F. Adams-class", "United States Navy", 1960,
            (3277, 4526), (133, 14, 4.6), 33, None, 35000, 2, None,
            ST, VesselType.DESTROYER,
            (9.5, 2.54, 0.306, 10.69, 0.99)),
)

BUILTIN_DATASETS: Mapping[str, Tuple[VesselSpecification, ...]] = MappingProxyType({
    "reference": VESSELS,
    "1960s": VESSELS_1960S,
})


# =============================================================================
# VALIDATION / LOADING
# =============================================================================

def validate_vessel(vessel: VesselSpecification) -> None:
    """Raise VesselDatasetError for a record the harness cannot score."""
    if vessel.standard_displacement <= 0:
        raise VesselDatasetError(vessel.name, "standard displacement must be positive")
    if vessel.full_load_displacement is not None and vessel.full_load_displacement <= 0:
        raise VesselDatasetError(vessel.name, "full load displacement must be positive")
    if vessel.speed <= 0:
        raise VesselDatasetError(vessel.name, "speed must be positive")
    if vessel.max_power_per_engine_group <= 0:
        raise VesselDatasetError(vessel.name, "power per engine group must be positive")
    if vessel.number_of_shafts is not None and vessel.number_of_shafts < 1:
        raise VesselDatasetError(vessel.name, "number of shafts must be at least 1")
    if vessel.cruise_speed is not None and not 0 < vessel.cruise_speed <= vessel.speed:
        raise VesselDatasetError(vessel.name, "cruise speed must lie in (0, speed]")


def validate_dataset(vessels: Iterable[VesselSpecification]) -> Tuple[VesselSpecification, ...]:
    """Validate every record; an empty dataset is also an error."""
    vessels = tuple(vessels)
    if not vessels:
        raise VesselDatasetError("<dataset>", "dataset is empty")
    for vessel in vessels:
        validate_vessel(vessel)
    return vessels


def load_vessel_dataset(path: Union[str, Path]) -> Tuple[VesselSpecification, ...]:
    """Load a JSON list of vessel records (the to_dict layout)."""
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("vessels", [])
    if not isinstance(data, list):
        raise VesselDatasetError(str(path), "expected a list of vessel records")

    vessels = validate_dataset(VesselSpecification.from_dict(item) for item in data)
    logger.info(f"Loaded {len(vessels)} vessels from {path}")
    return vessels


def resolve_vessel_dataset(source: Optional[str] = None) -> Tuple[VesselSpecification, ...]:
    """
    Resolve a dataset source for the calibration harness.

    No source gives the reference dataset, a name from BUILTIN_DATASETS gives
    that dataset, and anything else is read as a JSON file path.
    """
    if not source:
        return VESSELS
    if source in BUILTIN_DATASETS:
        return BUILTIN_DATASETS[source]
    return load_vessel_dataset(source)


# =============================================================================
# ANALYSIS HELPERS
# =============================================================================

def vessels_by_displacement_range(
    min_displacement: float,
    max_displacement: float,
    vessels: Iterable[VesselSpecification] = VESSELS,
) -> List[VesselSpecification]:
    """Vessels whose standard displacement lies in [min, max]."""
    return [
        v for v in vessels
        if min_displacement <= v.standard_displacement <= max_displacement
    ]


def vessels_by_propulsion(
    propulsion_type: Union[PropulsionType, str],
    vessels: Iterable[VesselSpecification] = VESSELS,
) -> List[VesselSpecification]:
    return [v for v in vessels if v.propulsion_type == propulsion_type]


def vessels_by_vessel_type(
    vessel_type: Union[VesselType, str],
    vessels: Iterable[VesselSpecification] = VESSELS,
) -> List[VesselSpecification]:
    return [v for v in vessels if v.vessel_type == vessel_type]


def average_power_to_displacement(vessels: Iterable[VesselSpecification] = VESSELS) -> float:
    vessels = list(vessels)
    if not vessels:
        return 0.0
    return sum(v.hydrodynamics.power_to_displacement for v in vessels) / len(vessels)


def hull_form_resistance_factor(
    displacement: float,
    hull_form: Union[HullForm, str] = HullForm.DISPLACEMENT,
) -> float:
    """0.82 for planing hulls under 1500 t, 0.91 under 4000 t, else 1.0."""
    if hull_form == HullForm.PLANING and displacement < 1500:
        return 0.82
    if displacement < 4000:
        return 0.91
    return 1.0


def admiralty_coefficient_by_year(year: int, displacement: float) -> float:
    """Era-dependent Admiralty coefficient; hulls under 1000 t get 15% less."""
    if year < 1950:
        coefficient = 190.0
    elif year < 1960:
        coefficient = 195.0
    elif year < 1970:
        coefficient = 200.0
    else:
        coefficient = 210.0

    if displacement < 1000:
        coefficient *= 0.85
    return coefficient


def aggregate_propulsion_efficiency(
    propulsion_type: Union[PropulsionType, str],
    shaft_count: int = 2,
) -> float:
    """Plant efficiency with a 3% penalty per shaft away from two."""
    try:
        efficiency = AGGREGATE_PROPULSION_EFFICIENCY[PropulsionType(propulsion_type)]
    except (KeyError, ValueError):
        efficiency = DEFAULT_PROPULSION_EFFICIENCY

    shaft_factor = 1.0 if shaft_count == 2 else 1.0 - abs(2 - shaft_count) * 0.03
    return efficiency * shaft_factor


def estimate_power(
    displacement: float,
    speed: float,
    propulsion_type: Union[PropulsionType, str] = PropulsionType.STEAM_TURBINE,
) -> float:
    """Rough power index: D^(2/3) * V^3 * resistance * efficiency * 0.8."""
    resistance = hull_form_resistance_factor(displacement, HullForm.DISPLACEMENT)
    efficiency = aggregate_propulsion_efficiency(propulsion_type)
    return (
        displacement ** DISPLACEMENT_EXPONENT
        * speed ** SPEED_EXPONENT
        * resistance
        * efficiency
        * 0.8
    )

"""
SHIPENGINE Core Enumerations

All enumeration types used throughout the SHIPENGINE system.
"""

from enum import Enum


class ConfigurationId(str, Enum):
    """
    Propulsion configuration identifiers.
    """
    DIESEL = "DIESEL"                # Single diesel engine
    GAS_TURBINE = "GAS_TURBINE"      # Single gas turbine
    STEAM_TURBINE = "STEAM_TURBINE"  # Single steam turbine plant
    CODOG = "CODOG"                  # Combined Diesel Or Gas
    COGOG = "COGOG"                  # Combined Gas Or Gas
    CODAG = "CODAG"                  # Combined Diesel And Gas
    COGAG = "COGAG"                  # Combined Gas And Gas
    CODAD = "CODAD"                  # Combined Diesel And Diesel
    COSAG = "COSAG"                  # Combined Steam And Gas
    IEP = "IEP"                      # Integrated Electric Propulsion


class HullType(str, Enum):
    """
    Warship hull categories, each with a displacement envelope.
    """
    CORVETTE = "corvette"
    FRIGATE = "frigate"
    DESTROYER = "destroyer"
    CRUISER = "cruiser"
    CARRIER = "carrier"


class EnginePriority(str, Enum):
    """
    Design philosophy applied on top of the physical power requirement.
    """
    EFFICIENCY = "efficiency"
    POWER = "power"
    RELIABILITY = "reliability"
    BALANCED = "balanced"


class EngineType(str, Enum):
    """Prime mover type."""
    DIESEL = "diesel"
    GAS_TURBINE = "gasturbine"
    STEAM = "steam"


class GearboxType(str, Enum):
    """How engine outputs are combined onto the shafts."""
    COMBINED = "combined"
    DIRECT = "direct"


class HullForm(str, Enum):
    """Hull form classification used by the calibration dataset."""
    PLANING = "planing"
    DISPLACEMENT = "displacement"


class VesselType(str, Enum):
    """Historical vessel classification."""
    CORVETTE = "corvette"
    MINESWEEPER = "minesweeper"
    FRIGATE = "frigate"
    DESTROYER = "destroyer"
    CRUISER = "cruiser"


class PropulsionType(str, Enum):
    """Propulsion type as recorded for historical vessels."""
    STEAM_TURBINE = "steam-turbine"
    DIESEL = "diesel"
    COGAG = "cogag"
    COSAG = "cosag"
    IEP = "iep"
    CODAG = "codag"
    CODOG = "codog"
    CODAD = "codad"
    COGOG = "cogog"
    NUCLEAR = "nuclear"

"""
SHIPENGINE Core

Shared enumerations and physical constants.
"""

from .enums import (
    ConfigurationId,
    HullType,
    EnginePriority,
    EngineType,
    GearboxType,
    HullForm,
    VesselType,
    PropulsionType,
)

__all__ = [
    "ConfigurationId",
    "HullType",
    "EnginePriority",
    "EngineType",
    "GearboxType",
    "HullForm",
    "VesselType",
    "PropulsionType",
]

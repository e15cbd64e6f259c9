"""
SHIPENGINE - Warship propulsion designer

Sizes a naval propulsion plant from hull displacement and target speed,
and calibrates the power formulas against historical warships.
"""

from .core.constants import SHIPENGINE_VERSION as __version__

from .core.enums import ConfigurationId, EnginePriority, HullType

from .errors import (
    ShipEngineError,
    ConfigurationNotFoundError,
    DisplacementOutOfRangeError,
    HullTypeNotFoundError,
    VesselDatasetError,
)

from .physics import compute_required_power

from .systems.propulsion import (
    EngineDesignInput,
    EngineSystemOutput,
    calculate_engine_system,
    compare_configurations,
)

from .analysis import run_formula_comparison, run_calibration


__all__ = [
    "__version__",
    "ConfigurationId",
    "EnginePriority",
    "HullType",
    "ShipEngineError",
    "ConfigurationNotFoundError",
    "DisplacementOutOfRangeError",
    "HullTypeNotFoundError",
    "VesselDatasetError",
    "compute_required_power",
    "EngineDesignInput",
    "EngineSystemOutput",
    "calculate_engine_system",
    "compare_configurations",
    "run_formula_comparison",
    "run_calibration",
]

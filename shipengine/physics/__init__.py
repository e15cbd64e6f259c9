"""
SHIPENGINE Physics

Power requirement estimation (Admiralty method and the empirical power law).
"""

from .hull_types import (
    HullTypeProfile,
    HullTypeRegistry,
    DEFAULT_HULL_TYPES,
    DEFAULT_HULL_REGISTRY,
    get_hull_type,
)

from .power import (
    PowerRequirement,
    PowerRequirementCalculator,
    compute_required_power,
    planing_efficiency_factor,
    admiralty_power_kw,
    admiralty_coefficient,
    empirical_power,
)

__all__ = [
    "HullTypeProfile",
    "HullTypeRegistry",
    "DEFAULT_HULL_TYPES",
    "DEFAULT_HULL_REGISTRY",
    "get_hull_type",
    "PowerRequirement",
    "PowerRequirementCalculator",
    "compute_required_power",
    "planing_efficiency_factor",
    "admiralty_power_kw",
    "admiralty_coefficient",
    "empirical_power",
]

"""
systems/propulsion/__init__.py - Propulsion system exports
"""

from .configurations import (
    PropulsionConfiguration,
    ConfigurationRegistry,
    DEFAULT_CONFIGURATIONS,
    DEFAULT_REGISTRY,
    get_configuration,
)

from .schema import EngineDesignInput, EngineSystemOutput

from .calculator import (
    PriorityProfile,
    PRIORITY_PROFILES,
    EngineSystemCalculator,
    calculate_engine_system,
    compare_configurations,
    resolve_cruising_speed,
    fuel_consumption,
    calculate_range,
)

from .report import format_engine_output, format_comparison_table


__all__ = [
    # Registry
    "PropulsionConfiguration",
    "ConfigurationRegistry",
    "DEFAULT_CONFIGURATIONS",
    "DEFAULT_REGISTRY",
    "get_configuration",
    # Schema
    "EngineDesignInput",
    "EngineSystemOutput",
    # Calculator
    "PriorityProfile",
    "PRIORITY_PROFILES",
    "EngineSystemCalculator",
    "calculate_engine_system",
    "compare_configurations",
    "resolve_cruising_speed",
    "fuel_consumption",
    "calculate_range",
    # Report
    "format_engine_output",
    "format_comparison_table",
]

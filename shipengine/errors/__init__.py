"""
errors/ - Error Taxonomy

Structured exception types for the calculation core and the
calibration harness.
"""

from .taxonomy import (
    ErrorCategory,
    ErrorCode,
    ShipEngineError,
    ConfigurationNotFoundError,
    HullTypeNotFoundError,
    DisplacementOutOfRangeError,
    PowerRequirementError,
    VesselDatasetError,
)

__all__ = [
    "ErrorCategory",
    "ErrorCode",
    "ShipEngineError",
    "ConfigurationNotFoundError",
    "HullTypeNotFoundError",
    "DisplacementOutOfRangeError",
    "PowerRequirementError",
    "VesselDatasetError",
]

"""
errors/taxonomy.py - Error classification system

Structured exception types raised by the calculation core and the
calibration harness. Every error propagates unchanged through the core;
surfaces (CLI, API) translate them to exit codes and HTTP responses.
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Tuple
from enum import Enum


class ErrorCategory(Enum):
    """Error categories."""
    # Configuration errors (1xxx)
    CONFIGURATION = "configuration"

    # Bounds errors (2xxx)
    BOUNDS = "bounds"

    # Dataset errors (3xxx)
    DATASET = "dataset"


class ErrorCode(Enum):
    """Specific error codes."""

    # Configuration (1xxx)
    CFG_UNKNOWN_CONFIGURATION = 1001
    CFG_UNKNOWN_HULL_TYPE = 1002

    # Bounds (2xxx)
    BND_DISPLACEMENT = 2001
    BND_POWER = 2002

    # Dataset (3xxx)
    DAT_MALFORMED_VESSEL = 3001


class ShipEngineError(Exception):
    """
    Base class for SHIPENGINE errors.

    Provides structured error information with:
    - Error code for programmatic handling
    - Human-readable message
    - Detailed context for debugging
    """

    code: ErrorCode = ErrorCode.CFG_UNKNOWN_CONFIGURATION
    category: ErrorCategory = ErrorCategory.CONFIGURATION

    def __init__(
        self,
        message: str = "",
        *,
        details: Optional[Dict[str, Any]] = None,
        **kwargs,
    ):
        self.message = message or self.__class__.__doc__ or "Ship engine error"
        self.details = details or {}
        self.details.update(kwargs)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "code": self.code.value,
            "error": self.__class__.__name__,
            "category": self.category.value,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationNotFoundError(ShipEngineError, KeyError):
    """Unknown propulsion configuration."""

    code = ErrorCode.CFG_UNKNOWN_CONFIGURATION
    category = ErrorCategory.CONFIGURATION

    def __init__(self, configuration_id: Any, **kwargs):
        self.configuration_id = getattr(configuration_id, "value", configuration_id)
        super().__init__(
            f"Unknown configuration: {self.configuration_id}",
            configuration_id=self.configuration_id,
            **kwargs,
        )

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class HullTypeNotFoundError(ShipEngineError, KeyError):
    """Unknown hull type."""

    code = ErrorCode.CFG_UNKNOWN_HULL_TYPE
    category = ErrorCategory.CONFIGURATION

    def __init__(self, hull_type: Any, **kwargs):
        self.hull_type = getattr(hull_type, "value", hull_type)
        super().__init__(
            f"Unknown hull type: {self.hull_type}",
            hull_type=self.hull_type,
            **kwargs,
        )

    def __str__(self) -> str:
        return self.message


class DisplacementOutOfRangeError(ShipEngineError, ValueError):
    """Ship displacement outside its hull type's declared envelope."""

    code = ErrorCode.BND_DISPLACEMENT
    category = ErrorCategory.BOUNDS

    def __init__(
        self,
        hull_type: Any,
        displacement: float,
        displacement_range: Tuple[float, float],
        **kwargs,
    ):
        self.hull_type = getattr(hull_type, "value", hull_type)
        self.displacement = displacement
        self.min_displacement, self.max_displacement = displacement_range
        message = (
            f"Displacement {displacement:g}t is out of range for hull type "
            f"{self.hull_type} ({self.min_displacement:g}t - {self.max_displacement:g}t)"
        )
        super().__init__(
            message,
            hull_type=self.hull_type,
            displacement=displacement,
            min_displacement=self.min_displacement,
            max_displacement=self.max_displacement,
            **kwargs,
        )


class VesselDatasetError(ShipEngineError, ValueError):
    """Malformed entry in the calibration vessel dataset."""

    code = ErrorCode.DAT_MALFORMED_VESSEL
    category = ErrorCategory.DATASET

    def __init__(self, vessel_name: str, reason: str, **kwargs):
        self.vessel_name = vessel_name
        self.reason = reason
        super().__init__(
            f"Malformed vessel entry '{vessel_name}': {reason}",
            vessel_name=vessel_name,
            reason=reason,
            **kwargs,
        )


class PowerRequirementError(ShipEngineError, ArithmeticError):
    """Required power is not a finite number for the given inputs."""

    code = ErrorCode.BND_POWER
    category = ErrorCategory.BOUNDS

    def __init__(self, displacement: float, speed_kts: float, **kwargs):
        self.displacement = displacement
        self.speed_kts = speed_kts
        super().__init__(
            f"Power requirement is not finite for {displacement:g}t at {speed_kts:g}kts",
            displacement=displacement,
            speed_kts=speed_kts,
            **kwargs,
        )

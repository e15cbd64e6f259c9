"""
systems/propulsion/schema.py - Engine design request and result types

EngineDesignInput is validated at construction (pydantic) and frozen
afterwards. EngineSystemOutput is a plain frozen dataclass recomputed
wholesale for every request.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ...core.constants import MAX_DISPLACEMENT_MT, MAX_DRAG_COEFFICIENT, MAX_TOP_SPEED_KTS
from ...core.enums import EnginePriority, HullType


class EngineDesignInput(BaseModel):
    """One engine design request."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    # Kept as a plain string so unknown ids reach the registry and raise
    # ConfigurationNotFoundError rather than a validation error.
    configuration_id: str
    desired_top_speed: float = Field(
        ..., gt=0, le=MAX_TOP_SPEED_KTS, description="Top speed (knots)"
    )
    desired_cruising_speed: Optional[float] = Field(
        None, ge=0, le=MAX_TOP_SPEED_KTS,
        description="Cruising speed (knots); None or 0 derives a default",
    )
    engine_priority: EnginePriority = EnginePriority.BALANCED
    ship_displacement: float = Field(
        ..., gt=0, le=MAX_DISPLACEMENT_MT, description="Displacement (tonnes)"
    )
    hull_drag_coefficient: float = Field(0.15, ge=0, le=MAX_DRAG_COEFFICIENT)
    hull_type: HullType = HullType.FRIGATE
    year: Optional[int] = Field(None, description="Design year, filters comparisons")

    @field_validator('configuration_id', mode='before')
    @classmethod
    def normalize_configuration_id(cls, v):
        return getattr(v, 'value', v)

    @model_validator(mode='after')
    def check_cruise_below_top(self):
        cruise = self.desired_cruising_speed
        if cruise is not None and cruise >= self.desired_top_speed:
            raise ValueError(
                f'desired_cruising_speed ({cruise}) must be below '
                f'desired_top_speed ({self.desired_top_speed})'
            )
        return self

    @property
    def has_custom_cruise(self) -> bool:
        return bool(self.desired_cruising_speed and self.desired_cruising_speed > 0)


@dataclass(frozen=True)
class EngineSystemOutput:
    """Derived engine system performance sheet."""

    configuration_id: str

    # === PHYSICAL ===
    total_engine_weight: float
    """Tonnes."""

    total_cost: float
    engine_volume: float
    """Cubic metres."""

    # === PERFORMANCE ===
    max_power: float
    """Horsepower-equivalent."""

    max_speed: float
    cruising_speed: float
    max_range: float
    """Nautical miles at cruising speed."""

    # === OPERATIONAL ===
    mtbf: float
    reliability_score: float
    fuel_consumption_at_full_power: float
    """Tonnes per hour."""

    fuel_consumption_at_cruise: float
    operating_cost_per_hour: float

    # === STRATEGIC (0-100) ===
    acceleration_rating: int
    heat_signature: float
    complexity_rating: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

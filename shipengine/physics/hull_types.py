"""
physics/hull_types.py - Hull type envelopes

Each hull category declares the displacement range a design must fall
inside and the baseline Admiralty coefficient used by the power model.
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from ..core.enums import HullType
from ..errors import DisplacementOutOfRangeError, HullTypeNotFoundError


@dataclass(frozen=True)
class HullTypeProfile:
    """Displacement envelope and Admiralty coefficient for a hull category."""

    hull_type: HullType
    min_displacement: float
    """Smallest accepted displacement (t), inclusive."""

    max_displacement: float
    """Largest accepted displacement (t), inclusive."""

    admiralty_coefficient: float

    @property
    def displacement_range(self) -> Tuple[float, float]:
        return (self.min_displacement, self.max_displacement)

    def contains(self, displacement: float) -> bool:
        return self.min_displacement <= displacement <= self.max_displacement

    def validate_displacement(self, displacement: float) -> None:
        """Raise DisplacementOutOfRangeError outside the envelope. No clamping."""
        if not self.contains(displacement):
            raise DisplacementOutOfRangeError(
                self.hull_type, displacement, self.displacement_range
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hull_type": self.hull_type.value,
            "min_displacement": self.min_displacement,
            "max_displacement": self.max_displacement,
            "admiralty_coefficient": self.admiralty_coefficient,
        }


DEFAULT_HULL_TYPES: Tuple[HullTypeProfile, ...] = (
    HullTypeProfile(HullType.CORVETTE, 500, 2000, 180),
    HullTypeProfile(HullType.FRIGATE, 2000, 6000, 210),
    HullTypeProfile(HullType.DESTROYER, 6000, 10000, 210),
    HullTypeProfile(HullType.CRUISER, 10000, 20000, 210),
    HullTypeProfile(HullType.CARRIER, 20000, 100000, 210),
)


class HullTypeRegistry:
    """Immutable lookup table of hull type profiles."""

    def __init__(self, profiles: Optional[Tuple[HullTypeProfile, ...]] = None):
        if profiles is None:
            profiles = DEFAULT_HULL_TYPES
        self._profiles: Mapping[HullType, HullTypeProfile] = MappingProxyType(
            {p.hull_type: p for p in profiles}
        )

    def get(self, hull_type: Union[HullType, str]) -> HullTypeProfile:
        try:
            key = HullType(hull_type)
        except ValueError:
            raise HullTypeNotFoundError(hull_type, available=self.list_types()) from None

        profile = self._profiles.get(key)
        if profile is None:
            raise HullTypeNotFoundError(hull_type, available=self.list_types())
        return profile

    def list_types(self) -> List[str]:
        return [key.value for key in self._profiles]

    def __iter__(self) -> Iterator[HullTypeProfile]:
        return iter(self._profiles.values())

    def __len__(self) -> int:
        return len(self._profiles)


DEFAULT_HULL_REGISTRY = HullTypeRegistry()


def get_hull_type(hull_type: Union[HullType, str]) -> HullTypeProfile:
    return DEFAULT_HULL_REGISTRY.get(hull_type)

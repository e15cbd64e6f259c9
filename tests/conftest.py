"""
SHIPENGINE Test Configuration and Fixtures
"""

import os

import pytest

from shipengine.bootstrap.config import ShipEngineConfig, reset_config
from shipengine.core.enums import EnginePriority, HullType
from shipengine.physics.hull_types import HullTypeRegistry
from shipengine.systems.propulsion import (
    ConfigurationRegistry,
    EngineDesignInput,
    EngineSystemCalculator,
)


def make_design(**overrides) -> EngineDesignInput:
    """
    Build an EngineDesignInput from the reference frigate request.

    Reference: CODAG, 30 kts top, 18 kts cruise, balanced priority,
    5000 t frigate, drag 0.15.
    """
    values = {
        "configuration_id": "CODAG",
        "desired_top_speed": 30.0,
        "desired_cruising_speed": 18.0,
        "engine_priority": EnginePriority.BALANCED,
        "ship_displacement": 5000.0,
        "hull_drag_coefficient": 0.15,
        "hull_type": HullType.FRIGATE,
    }
    values.update(overrides)
    return EngineDesignInput(**values)


@pytest.fixture
def base_design() -> EngineDesignInput:
    """Reference frigate request."""
    return make_design()


@pytest.fixture
def design_factory():
    """Callable building variations of the reference request."""
    return make_design


@pytest.fixture
def calculator() -> EngineSystemCalculator:
    return EngineSystemCalculator()


@pytest.fixture
def configuration_registry() -> ConfigurationRegistry:
    return ConfigurationRegistry()


@pytest.fixture
def hull_registry() -> HullTypeRegistry:
    return HullTypeRegistry()


@pytest.fixture
def config(monkeypatch) -> ShipEngineConfig:
    """Configuration built from a clean environment."""
    for key in list(os.environ):
        if key.startswith("SHIPENGINE_"):
            monkeypatch.delenv(key, raising=False)
    return ShipEngineConfig.from_env()


@pytest.fixture(autouse=True)
def _reset_global_config():
    reset_config()
    yield
    reset_config()

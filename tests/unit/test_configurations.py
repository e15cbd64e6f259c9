"""
Unit tests for the propulsion configuration registry.
"""

import pytest

from shipengine.core.enums import ConfigurationId, EngineType, GearboxType
from shipengine.errors import ConfigurationNotFoundError
from shipengine.systems.propulsion import (
    ConfigurationRegistry,
    DEFAULT_CONFIGURATIONS,
    get_configuration,
)


class TestConfigurationTable:
    """Tests for the built-in configuration records."""

    def test_all_ids_present(self):
        ids = {c.id for c in DEFAULT_CONFIGURATIONS}
        assert ids == set(ConfigurationId)

    def test_codag_values(self):
        codag = get_configuration("CODAG")
        assert codag.weight_multiplier == 0.65
        assert codag.cost_multiplier == 1.25
        assert codag.reliability_factor == 0.85
        assert codag.fuel_efficiency_factor == 1.05
        assert codag.complexity_factor == 0.90
        assert codag.engine_count == 3
        assert codag.gearbox_type == GearboxType.COMBINED

    def test_single_engine_plants_are_direct(self):
        for cid in ("DIESEL", "GAS_TURBINE"):
            config = get_configuration(cid)
            assert config.engine_count == 1
            assert config.gearbox_type == GearboxType.DIRECT

    def test_heat_bases_in_range(self):
        for config in DEFAULT_CONFIGURATIONS:
            assert 30 <= config.heat_signature_base <= 90

    def test_complexity_factors_in_unit_interval(self):
        for config in DEFAULT_CONFIGURATIONS:
            assert 0 <= config.complexity_factor <= 1

    def test_to_dict(self):
        d = get_configuration(ConfigurationId.IEP).to_dict()
        assert d["id"] == "IEP"
        assert d["engine_count"] == 4
        assert EngineType.DIESEL.value in d["engine_types"]
        assert d["year_introduced"] == 1990


class TestConfigurationRegistry:
    """Tests for registry lookup."""

    def test_lookup_by_enum_and_string(self, configuration_registry):
        assert configuration_registry.get(ConfigurationId.COGAG) is configuration_registry.get("COGAG")

    def test_unknown_id_raises(self, configuration_registry):
        with pytest.raises(ConfigurationNotFoundError) as exc_info:
            configuration_registry.get("WARP_DRIVE")
        assert exc_info.value.configuration_id == "WARP_DRIVE"
        assert "DIESEL" in exc_info.value.details["available"]

    def test_id_missing_from_custom_registry(self):
        registry = ConfigurationRegistry(tuple(
            c for c in DEFAULT_CONFIGURATIONS if c.id == ConfigurationId.DIESEL
        ))
        assert len(registry) == 1
        with pytest.raises(ConfigurationNotFoundError):
            registry.get("CODAG")

    def test_contains(self, configuration_registry):
        assert "CODAD" in configuration_registry
        assert "WARP_DRIVE" not in configuration_registry

    def test_iteration_order_matches_table(self, configuration_registry):
        assert [c.id for c in configuration_registry] == [c.id for c in DEFAULT_CONFIGURATIONS]
        assert configuration_registry.list_ids()[0] == "DIESEL"

    def test_available_in_year(self, configuration_registry):
        ids = {c.id.value for c in configuration_registry.available_in(1965)}
        assert "STEAM_TURBINE" in ids
        assert "GAS_TURBINE" in ids
        assert "CODOG" not in ids
        assert "IEP" not in ids

    def test_available_in_early_year_is_empty(self, configuration_registry):
        assert configuration_registry.available_in(1900) == []

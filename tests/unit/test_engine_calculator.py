"""
Unit tests for the engine system calculator.
"""

import pytest
from pydantic import ValidationError

from shipengine.core.enums import ConfigurationId, EnginePriority, HullType
from shipengine.core.rounding import round_half_up, round_int
from shipengine.errors import ConfigurationNotFoundError, DisplacementOutOfRangeError
from shipengine.physics.hull_types import HullTypeProfile, HullTypeRegistry
from shipengine.systems.propulsion import (
    ConfigurationRegistry,
    DEFAULT_CONFIGURATIONS,
    EngineSystemCalculator,
    calculate_engine_system,
    calculate_range,
    compare_configurations,
    fuel_consumption,
    resolve_cruising_speed,
)
from shipengine.systems.propulsion.calculator import acceleration_rating, heat_signature


ALL_IDS = [c.value for c in ConfigurationId]


class TestRounding:

    @pytest.mark.parametrize("value,expected", [(2.5, 3), (3.5, 4), (-2.5, -2), (2.49, 2)])
    def test_round_int_half_up(self, value, expected):
        assert round_int(value) == expected

    def test_round_half_up_digits(self):
        assert round_half_up(1.23455, 2) == 1.23
        assert round_half_up(0.125, 2) == 0.13
        assert round_half_up(1234.5) == 1235.0


class TestStepFunctions:
    """Tests for the individually exposed calculation steps."""

    def test_cruise_speed_supplied_is_used(self):
        assert resolve_cruising_speed(18, 5000, 0.15) == 18

    def test_cruise_speed_zero_derives_default(self):
        assert resolve_cruising_speed(0, 5000, 0.15) == 15.0

    def test_cruise_speed_sleek_hull(self):
        # 0.5 * 0.2 = 0.1 < 0.12
        assert resolve_cruising_speed(None, 0.5, 0.2) == 18.0

    def test_cruise_speed_ordinary_hull(self):
        assert resolve_cruising_speed(None, 5000, 0.15) == 15.0

    def test_fuel_consumption_full_power(self):
        # 1000 hp -> 745.7 kW * 0.00064 = 0.47725
        assert fuel_consumption(1000, 1.0) == pytest.approx(0.4772, abs=1e-4)

    def test_fuel_consumption_part_load_curve(self):
        full = fuel_consumption(10000, 1.0)
        part = fuel_consumption(10000, 1.0, 0.65)
        assert part == pytest.approx(full * 0.65 ** 1.25, abs=1e-3)

    def test_fuel_consumption_rounded_to_four_places(self):
        value = fuel_consumption(12345.678, 1.05, 0.65, 0.85)
        assert value == round_half_up(value, 4)

    def test_range_zero_divisors(self):
        assert calculate_range(5000, 0, 18) == 0
        assert calculate_range(5000, 5.0, 0) == 0

    def test_range(self):
        # 5000 * 0.35 / 5 * 18 = 6300
        assert calculate_range(5000, 5.0, 18) == 6300

    def test_acceleration_capped(self):
        assert acceleration_rating(50000, 100) == 100

    def test_acceleration_zero_weight(self):
        assert acceleration_rating(50000, 0) == 0

    def test_acceleration_scaled(self):
        # 2000 hp / 100 t = 20 hp/t -> 40
        assert acceleration_rating(2000, 100) == 40

    def test_heat_signature_caps(self):
        config = DEFAULT_CONFIGURATIONS[1]  # gas turbine, base 85
        assert heat_signature(config, 0.5) == 90
        assert heat_signature(config, 50) == 100


class TestReferenceDesign:
    """CODAG frigate, 5000 t, 30 kts top, 18 kts cruise, balanced."""

    def test_power(self, base_design):
        output = calculate_engine_system(base_design)
        assert output.max_power == pytest.approx(50414.5, rel=1e-4)

    def test_weight(self, base_design):
        output = calculate_engine_system(base_design)
        expected = (5000 * 0.14 + output.max_power * 0.003) * 0.65
        assert output.total_engine_weight == pytest.approx(expected)
        assert output.engine_volume == pytest.approx(expected * 2.5)

    def test_cost(self, base_design):
        output = calculate_engine_system(base_design)
        assert output.total_cost == round_half_up(output.max_power * 1500 * 1.25)

    def test_reliability(self, base_design):
        output = calculate_engine_system(base_design)
        assert output.mtbf == 6800
        assert output.reliability_score == pytest.approx(85)

    def test_custom_cruise_fuel_uses_cubic_law(self, base_design):
        output = calculate_engine_system(base_design)
        cruise_power = output.max_power * (18 / 30) ** 3
        assert output.cruising_speed == 18
        assert output.fuel_consumption_at_cruise == fuel_consumption(cruise_power, 1.05)

    def test_range(self, base_design):
        output = calculate_engine_system(base_design)
        assert output.max_range == pytest.approx(5773, abs=2)

    def test_strategic_ratings(self, base_design):
        output = calculate_engine_system(base_design)
        assert output.acceleration_rating == 100
        assert output.heat_signature == 85
        assert output.complexity_rating == 90

    def test_operating_cost(self, base_design):
        output = calculate_engine_system(base_design)
        assert output.operating_cost_per_hour == pytest.approx(
            output.fuel_consumption_at_full_power * 600
        )

    def test_deterministic(self, base_design):
        assert calculate_engine_system(base_design) == calculate_engine_system(base_design)

    def test_to_dict(self, base_design):
        d = calculate_engine_system(base_design).to_dict()
        assert d["configuration_id"] == "CODAG"
        assert d["max_speed"] == 30


class TestDefaultCruise:

    def test_no_cruise_uses_part_load_setting(self, design_factory):
        output = calculate_engine_system(design_factory(desired_cruising_speed=None))
        assert output.cruising_speed == 15.0
        assert output.fuel_consumption_at_cruise == fuel_consumption(
            output.max_power, 1.05, 0.65
        )

    def test_zero_cruise_treated_as_absent(self, design_factory):
        output = calculate_engine_system(design_factory(desired_cruising_speed=0))
        assert output.cruising_speed == 15.0


class TestPriorities:
    """Priority adjustments, all else held equal."""

    @pytest.mark.parametrize("configuration_id", ALL_IDS)
    def test_power_priority_increases_power(self, design_factory, configuration_id):
        balanced = calculate_engine_system(design_factory(configuration_id=configuration_id))
        power = calculate_engine_system(design_factory(
            configuration_id=configuration_id, engine_priority=EnginePriority.POWER
        ))
        assert power.max_power > balanced.max_power

    @pytest.mark.parametrize("configuration_id", ALL_IDS)
    def test_reliability_priority_increases_mtbf(self, design_factory, configuration_id):
        balanced = calculate_engine_system(design_factory(configuration_id=configuration_id))
        reliable = calculate_engine_system(design_factory(
            configuration_id=configuration_id, engine_priority="reliability"
        ))
        assert reliable.mtbf > balanced.mtbf

    @pytest.mark.parametrize("configuration_id", ALL_IDS)
    def test_efficiency_priority_reduces_full_power_fuel(self, design_factory, configuration_id):
        balanced = calculate_engine_system(design_factory(configuration_id=configuration_id))
        efficient = calculate_engine_system(design_factory(
            configuration_id=configuration_id, engine_priority=EnginePriority.EFFICIENCY
        ))
        assert efficient.fuel_consumption_at_full_power < balanced.fuel_consumption_at_full_power

    def test_efficiency_heavier_than_power(self, design_factory):
        efficient = calculate_engine_system(design_factory(engine_priority="efficiency"))
        power = calculate_engine_system(design_factory(engine_priority="power"))
        assert efficient.total_engine_weight > power.total_engine_weight


class TestDisplacement:
    """Envelope validation and displacement scaling."""

    @pytest.mark.parametrize("displacement", [2000, 6000])
    def test_boundaries_accepted(self, design_factory, displacement):
        output = calculate_engine_system(design_factory(ship_displacement=displacement))
        assert output.max_power > 0

    @pytest.mark.parametrize("displacement", [1999, 6001])
    def test_one_outside_boundary_rejected(self, design_factory, displacement):
        with pytest.raises(DisplacementOutOfRangeError):
            calculate_engine_system(design_factory(ship_displacement=displacement))

    def test_tiny_frigate_cites_bounds(self, design_factory):
        with pytest.raises(DisplacementOutOfRangeError) as exc_info:
            calculate_engine_system(design_factory(ship_displacement=100))
        err = exc_info.value
        assert (err.min_displacement, err.max_displacement) == (2000, 6000)
        assert err.hull_type == "frigate"

    def test_destroyer_envelope(self, design_factory):
        output = calculate_engine_system(design_factory(
            ship_displacement=8000, hull_type=HullType.DESTROYER
        ))
        assert output.max_power > 0

    @pytest.mark.parametrize("low,high", [(2000, 3000), (3000, 3999), (4000, 5000), (5000, 6000)])
    def test_power_and_weight_grow_within_band(self, design_factory, low, high):
        small = calculate_engine_system(design_factory(ship_displacement=low))
        large = calculate_engine_system(design_factory(ship_displacement=high))
        assert large.max_power >= small.max_power
        assert large.total_engine_weight >= small.total_engine_weight

    def test_injected_hull_registry(self, design_factory):
        registry = HullTypeRegistry((HullTypeProfile(HullType.FRIGATE, 100, 200, 210),))
        with pytest.raises(DisplacementOutOfRangeError):
            calculate_engine_system(design_factory(), hull_types=registry)


class TestConfigurationLookup:

    def test_unknown_configuration(self, design_factory):
        with pytest.raises(ConfigurationNotFoundError):
            calculate_engine_system(design_factory(configuration_id="WARP_DRIVE"))

    def test_unknown_configuration_before_displacement_check(self, design_factory):
        design = design_factory(configuration_id="WARP_DRIVE", ship_displacement=100)
        with pytest.raises(ConfigurationNotFoundError):
            calculate_engine_system(design)

    def test_enum_configuration_id(self, design_factory):
        output = calculate_engine_system(design_factory(configuration_id=ConfigurationId.CODAD))
        assert output.configuration_id == "CODAD"


class TestConfigurationRelations:
    """Relative behaviour between configurations on the reference hull."""

    def test_codad_more_reliable_than_codag(self, design_factory):
        codag = calculate_engine_system(design_factory(configuration_id="CODAG"))
        codad = calculate_engine_system(design_factory(configuration_id="CODAD"))
        assert codad.mtbf > codag.mtbf
        assert codad.fuel_consumption_at_full_power < codag.fuel_consumption_at_full_power

    def test_gas_turbine_lighter_and_thirstier_than_diesel(self, design_factory):
        diesel = calculate_engine_system(design_factory(configuration_id="DIESEL"))
        turbine = calculate_engine_system(design_factory(configuration_id="GAS_TURBINE"))
        assert turbine.total_engine_weight < diesel.total_engine_weight
        assert turbine.fuel_consumption_at_full_power > diesel.fuel_consumption_at_full_power
        assert turbine.heat_signature > diesel.heat_signature

    @pytest.mark.parametrize("configuration_id", ALL_IDS)
    def test_sanity_ranges(self, design_factory, configuration_id):
        output = calculate_engine_system(design_factory(configuration_id=configuration_id))
        assert output.total_engine_weight > 0
        assert output.total_cost > 0
        assert 0 <= output.acceleration_rating <= 100
        assert 0 <= output.heat_signature <= 100
        assert 0 <= output.complexity_rating <= 100
        assert output.cruising_speed < output.max_speed
        assert output.fuel_consumption_at_cruise < output.fuel_consumption_at_full_power


class TestCompare:

    def test_all_configurations(self, base_design):
        outputs = compare_configurations(base_design)
        assert [o.configuration_id for o in outputs] == ALL_IDS

    def test_same_power_requirement_for_all(self, base_design):
        outputs = compare_configurations(base_design)
        assert len({o.max_power for o in outputs}) == 1

    def test_year_filter(self, design_factory):
        outputs = compare_configurations(design_factory(year=1965))
        ids = {o.configuration_id for o in outputs}
        assert "IEP" not in ids
        assert "CODAD" not in ids
        assert "DIESEL" in ids

    def test_injected_registry(self, base_design):
        registry = ConfigurationRegistry(DEFAULT_CONFIGURATIONS[:2])
        outputs = EngineSystemCalculator(configurations=registry).compare(base_design)
        assert [o.configuration_id for o in outputs] == ["DIESEL", "GAS_TURBINE"]

    def test_comparison_ignores_request_configuration(self, design_factory):
        outputs = compare_configurations(design_factory(configuration_id="WARP_DRIVE"))
        assert len(outputs) == len(ALL_IDS)


class TestEngineDesignInput:
    """Validation of design requests."""

    def test_cruise_not_below_top_rejected(self, design_factory):
        with pytest.raises(ValidationError):
            design_factory(desired_cruising_speed=30)

    def test_non_positive_speed_rejected(self, design_factory):
        with pytest.raises(ValidationError):
            design_factory(desired_top_speed=0, desired_cruising_speed=None)

    def test_non_positive_displacement_rejected(self, design_factory):
        with pytest.raises(ValidationError):
            design_factory(ship_displacement=-5)

    def test_unknown_priority_rejected(self, design_factory):
        with pytest.raises(ValidationError):
            design_factory(engine_priority="stealth")

    def test_frozen(self, base_design):
        with pytest.raises(ValidationError):
            base_design.desired_top_speed = 40

    def test_defaults(self):
        from shipengine.systems.propulsion import EngineDesignInput
        design = EngineDesignInput(
            configuration_id="DIESEL", desired_top_speed=25, ship_displacement=3000
        )
        assert design.engine_priority == EnginePriority.BALANCED
        assert design.hull_type == HullType.FRIGATE
        assert design.hull_drag_coefficient == 0.15
        assert not design.has_custom_cruise


class TestInputEnvelope:
    """Non-finite and out-of-envelope numbers fail validation."""

    @pytest.mark.parametrize("speed", [float("inf"), float("nan"), 1e120, 100.5])
    def test_top_speed_rejected(self, design_factory, speed):
        with pytest.raises(ValidationError):
            design_factory(desired_top_speed=speed, desired_cruising_speed=None)

    def test_top_speed_upper_bound_inclusive(self, design_factory):
        output = calculate_engine_system(design_factory(desired_top_speed=100))
        assert output.max_speed == 100

    @pytest.mark.parametrize("cruise", [float("inf"), float("nan")])
    def test_cruise_speed_rejected(self, design_factory, cruise):
        with pytest.raises(ValidationError):
            design_factory(desired_cruising_speed=cruise)

    @pytest.mark.parametrize("displacement", [float("inf"), float("nan"), 1e9])
    def test_displacement_rejected(self, design_factory, displacement):
        with pytest.raises(ValidationError):
            design_factory(ship_displacement=displacement)

    @pytest.mark.parametrize("drag", [float("inf"), float("nan"), 11.0])
    def test_drag_rejected(self, design_factory, drag):
        with pytest.raises(ValidationError):
            design_factory(hull_drag_coefficient=drag)

    def test_fastest_carrier_is_finite(self, design_factory):
        output = calculate_engine_system(design_factory(
            desired_top_speed=100, ship_displacement=100000, hull_type=HullType.CARRIER,
        ))
        assert output.max_power > 0
        assert output.max_range > 0

"""
Unit tests for displacement classes and the candidate power formulas.
"""

import math

import pytest

from shipengine.core.constants import HP_TO_KW
from shipengine.core.enums import HullForm, PropulsionType
from shipengine.analysis import (
    DISPLACEMENT_FACTORS,
    PowerFormula,
    VESSELS,
    admiralty_power,
    analyze_admiralty_coefficient,
    apply_displacement_adjustment,
    default_formulas,
    extended_formulas,
    get_displacement_factor,
)
from shipengine.analysis.formulas import (
    AdmiraltyFormula,
    AdmiraltyResistanceFormula,
    ContinuousScalingFormula,
    EmpiricalFormula,
    FixedAdmiraltyFormula,
    HydrodynamicFormula,
    PropulsionEfficiencyFormula,
    ShipTypeBucketFormula,
)


def _by_name(name):
    return next(v for v in VESSELS if v.name == name)


class TestDisplacementFactors:
    """Tests for displacement class buckets."""

    def test_buckets_are_contiguous(self):
        for lower, upper in zip(DISPLACEMENT_FACTORS, DISPLACEMENT_FACTORS[1:]):
            assert lower.max_displacement == upper.min_displacement

    def test_last_bucket_unbounded(self):
        assert math.isinf(DISPLACEMENT_FACTORS[-1].max_displacement)

    @pytest.mark.parametrize("displacement,label", [
        (500, "Corvette/Fast Attack"),
        (1200, "Light Frigate"),
        (2200, "Medium Frigate"),
        (3000, "Large Frigate / Small Destroyer"),
        (4000, "Destroyer"),
        (9000, "Large Destroyer / Cruiser"),
    ])
    def test_lookup(self, displacement, label):
        assert get_displacement_factor(displacement).label == label

    def test_shared_boundary_goes_to_first_bucket(self):
        assert get_displacement_factor(600).label == "Corvette/Fast Attack"

    def test_adjustment(self):
        assert apply_displacement_adjustment(22.1, 500) == pytest.approx(22.1 * 3.32)

    def test_analysis_flags_outlier(self):
        analysis = analyze_admiralty_coefficient(10.0, 3000)
        assert analysis.displacement_class == "Large Frigate / Small Destroyer"
        assert analysis.adjusted_coefficient == pytest.approx(8.84)
        assert analysis.is_outlier

    def test_analysis_within_threshold(self):
        analysis = analyze_admiralty_coefficient(75.5, 2200)
        assert not analysis.is_outlier

    def test_to_dict_unbounded(self):
        assert DISPLACEMENT_FACTORS[-1].to_dict()["max_displacement"] is None


class TestAdmiraltyPower:

    def test_matches_closed_form(self):
        expected = 4000 ** (2 / 3) * 30 ** 3 / 210 / HP_TO_KW
        assert admiralty_power(4000, 30, 1975) == pytest.approx(expected)

    def test_planing_correction(self):
        displacement_form = admiralty_power(1000, 35, 1975, HullForm.DISPLACEMENT)
        planing = admiralty_power(1000, 35, 1975, HullForm.PLANING)
        assert planing == pytest.approx(displacement_form * 0.91 / 0.82)


class TestFormulaSets:
    """Tests for the formula collections."""

    def test_default_set(self):
        names = [f.name for f in default_formulas()]
        assert len(names) == 5
        assert "Admiralty Coefficient" in names
        assert "Empirical" in names

    def test_extended_set(self):
        assert len(extended_formulas()) == 5

    def test_names_unique(self):
        names = [f.name for f in default_formulas() + extended_formulas()]
        assert len(set(names)) == len(names)

    def test_fresh_lists(self):
        assert default_formulas() is not default_formulas()

    @pytest.mark.parametrize("formula", default_formulas() + extended_formulas(), ids=lambda f: f.name)
    def test_positive_predictions(self, formula):
        assert isinstance(formula, PowerFormula)
        for vessel in VESSELS:
            assert formula.predict(vessel) > 0


class TestIndividualFormulas:

    def test_admiralty_uses_design_displacement(self):
        vessel = _by_name("Niteroi")
        expected = admiralty_power(vessel.full_load_displacement, vessel.speed,
                                   vessel.design_year, vessel.hull_form)
        assert AdmiraltyFormula().predict(vessel) == pytest.approx(expected)

    def test_resistance_variant_divides_by_resistance(self):
        vessel = _by_name("Poti")
        base = AdmiraltyFormula().predict(vessel)
        assert AdmiraltyResistanceFormula().predict(vessel) == pytest.approx(base / 0.95)

    @pytest.mark.parametrize("displacement,scaling", [
        (1000, 500.0), (3000, 800.0), (8000, 1200.0), (20000, 2800.0),
    ])
    def test_bucket_scaling(self, displacement, scaling):
        assert ShipTypeBucketFormula().scaling_for(displacement) == scaling

    def test_continuous_scaling(self):
        vessel = _by_name("Niteroi")
        d = vessel.standard_displacement
        expected = d ** (2 / 3) * vessel.speed ** 3 / (500 * d ** -0.1)
        assert ContinuousScalingFormula().predict(vessel) == pytest.approx(expected)

    def test_empirical_drag_parameter(self):
        vessel = _by_name("Niteroi")
        assert EmpiricalFormula(0.2).predict(vessel) > EmpiricalFormula(0.1).predict(vessel)

    def test_cogag_efficiency(self):
        vessel = _by_name("Komsomolets")
        assert vessel.propulsion_type == PropulsionType.COGAG
        base = FixedAdmiraltyFormula(140.0).predict(vessel)
        assert PropulsionEfficiencyFormula().predict(vessel) == pytest.approx(base * 0.93)

    def test_hydrodynamic_non_cogag(self):
        vessel = _by_name("Niteroi")
        d = vessel.standard_displacement
        expected = d ** (2 / 3) * vessel.speed ** 3 / 130.0
        assert HydrodynamicFormula().predict(vessel) == pytest.approx(expected)

"""
Unit tests for the formula calibration harness.
"""

import pytest

from shipengine.core.constants import HP_TO_KW
from shipengine.errors import VesselDatasetError
from shipengine.analysis import (
    EfficiencyTier,
    PowerFormula,
    VESSELS,
    VESSELS_1960S,
    compute_class_coefficients,
    default_formulas,
    extended_formulas,
    normalized_admiralty_coefficient,
    recommendation_verdict,
    run_calibration,
    run_formula_comparison,
)
from shipengine.analysis.calibration import (
    classify_efficiency,
    coefficient_statistics,
    estimate_cruise_power,
    speed_penalties,
)


class ConstantFormula(PowerFormula):
    """Predicts a fixed multiple of the actual power."""

    def __init__(self, name, ratio):
        self.name = name
        self.description = f"{ratio} x actual"
        self.ratio = ratio

    def predict(self, vessel):
        return vessel.actual_power * self.ratio


class TestFormulaComparison:
    """Tests for ranking formulas by mean absolute error."""

    def test_ranked_ascending(self):
        ranking = run_formula_comparison()
        errors = [e.mean_abs_error for e in ranking.evaluations]
        assert errors == sorted(errors)
        assert ranking.vessel_count == len(VESSELS)

    def test_admiralty_mape_reproducible(self):
        first = run_formula_comparison().get("Admiralty Coefficient").mean_abs_error
        second = run_formula_comparison().get("Admiralty Coefficient").mean_abs_error
        assert first == pytest.approx(second, rel=1e-12)

    def test_default_ranking_order(self):
        ranking = run_formula_comparison()
        assert [e.name for e in ranking.evaluations] == [
            "Admiralty Coefficient",
            "Admiralty + Resistance Factor",
            "Empirical",
            "Continuous Displacement Scaling",
            "Discrete Ship Type Categories",
        ]
        assert ranking.recommendation == "acceptable"

    @pytest.mark.parametrize("name,mean,minimum,maximum", [
        ("Empirical", 24.98, 0.89, 143.46),
        ("Admiralty Coefficient", 19.52, 0.10, 119.94),
        ("Admiralty + Resistance Factor", 20.38, 0.02, 122.16),
        ("Discrete Ship Type Categories", 83.26, 73.71, 89.19),
        ("Continuous Displacement Scaling", 43.90, 9.71, 65.72),
    ])
    def test_default_formula_errors(self, name, mean, minimum, maximum):
        evaluation = run_formula_comparison().get(name)
        assert evaluation.mean_abs_error == pytest.approx(mean, abs=0.05)
        assert evaluation.min_abs_error == pytest.approx(minimum, abs=0.05)
        assert evaluation.max_abs_error == pytest.approx(maximum, abs=0.05)

    def test_extended_ranking_order(self):
        ranking = run_formula_comparison(formulas=default_formulas() + extended_formulas())
        assert [e.name for e in ranking.evaluations] == [
            "Admiralty Coefficient",
            "Admiralty + Resistance Factor",
            "Empirical",
            "Admiralty + Propulsion Efficiency",
            "Hydrodynamic-Aware",
            "Admiralty (fixed constant)",
            "Continuous Displacement Scaling",
            "Speed-Normalised Admiralty",
            "Admiralty + Displacement Scaling",
            "Discrete Ship Type Categories",
        ]

    @pytest.mark.parametrize("name,mean", [
        ("Admiralty (fixed constant)", 42.33),
        ("Admiralty + Propulsion Efficiency", 25.81),
        ("Admiralty + Displacement Scaling", 52.96),
        ("Speed-Normalised Admiralty", 44.62),
        ("Hydrodynamic-Aware", 26.52),
    ])
    def test_extended_formula_errors(self, name, mean):
        ranking = run_formula_comparison(formulas=extended_formulas())
        assert ranking.get(name).mean_abs_error == pytest.approx(mean, abs=0.05)

    def test_signed_error(self):
        ranking = run_formula_comparison(formulas=[ConstantFormula("high", 1.1)])
        for p in ranking.best.predictions:
            assert p.error_percent == pytest.approx(10.0)

    def test_exact_formula_ranks_first(self):
        formulas = [ConstantFormula("off", 1.3), ConstantFormula("exact", 1.0)]
        ranking = run_formula_comparison(formulas=formulas)
        assert ranking.best.name == "exact"
        assert ranking.best.mean_abs_error == pytest.approx(0.0)
        assert ranking.recommendation == "excellent"

    def test_ties_keep_input_order(self):
        formulas = [ConstantFormula("a", 1.2), ConstantFormula("b", 1.2)]
        ranking = run_formula_comparison(formulas=formulas)
        assert [e.name for e in ranking.evaluations] == ["a", "b"]

    def test_min_max(self):
        ranking = run_formula_comparison(formulas=[ConstantFormula("x", 1.2)])
        best = ranking.best
        assert best.min_abs_error == pytest.approx(20.0)
        assert best.max_abs_error == pytest.approx(20.0)

    def test_empty_dataset_rejected(self):
        with pytest.raises(VesselDatasetError):
            run_formula_comparison(vessels=[])

    def test_no_formulas(self):
        ranking = run_formula_comparison(formulas=[])
        assert ranking.best is None
        assert ranking.recommendation is None

    def test_to_dict(self):
        d = run_formula_comparison().to_dict()
        assert d["rankings"][0]["rank"] == 1
        assert d["best"] == d["rankings"][0]["name"]
        assert len(d["formulas"]) == len(default_formulas())

    @pytest.mark.parametrize("error,verdict", [
        (5.0, "excellent"), (12.0, "good"), (15.0, "acceptable"), (40.0, "acceptable"),
    ])
    def test_verdict(self, error, verdict):
        assert recommendation_verdict(error) == verdict


class TestClassCoefficients:
    """Tests for per-class Admiralty coefficients."""

    def test_normalized_coefficient(self):
        expected = 3000 ** (2 / 3) * 27 ** 3 / (40000 * HP_TO_KW)
        assert normalized_admiralty_coefficient(3000, 40000) == pytest.approx(expected)

    def test_one_entry_per_class(self):
        classes = compute_class_coefficients(VESSELS)
        assert len(classes) == len({v.vessel_class for v in VESSELS})
        assert sum(c.vessel_count for c in classes) == len(VESSELS)

    def test_sorted_by_displacement(self):
        classes = compute_class_coefficients(VESSELS)
        displacements = [c.avg_displacement for c in classes]
        assert displacements == sorted(displacements)

    def test_uses_standard_displacement(self):
        poti = VESSELS[0]
        [c] = compute_class_coefficients([poti])
        assert c.avg_displacement == poti.standard_displacement

    def test_raw_equals_normalized_at_own_speed(self):
        poti = VESSELS[0]
        [c] = compute_class_coefficients([poti], baseline_speed=poti.speed)
        assert c.coefficient == pytest.approx(c.normalized_coefficient)


class TestStatistics:

    def test_statistics(self):
        classes = compute_class_coefficients(VESSELS)
        stats = coefficient_statistics(classes)
        assert stats.minimum <= stats.median <= stats.maximum
        assert stats.range == pytest.approx(stats.maximum - stats.minimum)
        assert stats.ratio >= 1

    def test_statistics_empty(self):
        assert coefficient_statistics([]) is None

    @pytest.mark.parametrize("value,tier", [
        (40.0, EfficiencyTier.EXCELLENT),
        (40.1, EfficiencyTier.GOOD),
        (70.0, EfficiencyTier.GOOD),
        (100.0, EfficiencyTier.AVERAGE),
        (150.0, EfficiencyTier.POOR),
    ])
    def test_tiers(self, value, tier):
        assert classify_efficiency(value) == tier

    def test_speed_penalties_descending(self):
        penalties = speed_penalties(compute_class_coefficients(VESSELS))
        values = [p.percent_increase for p in penalties]
        assert values == sorted(values, reverse=True)


class TestCruisePower:

    def test_estimates_for_every_vessel(self):
        estimates = estimate_cruise_power(VESSELS)
        assert len(estimates) == len(VESSELS)
        for e in estimates:
            assert 0 < e.admiralty_cruise_power
            assert 0 < e.power_law_cruise_power

    def test_error_only_with_known_power(self):
        for e in estimate_cruise_power(VESSELS):
            if e.known_cruise_power:
                assert e.error_percent is not None
            else:
                assert e.error_percent is None


class TestCalibrationRun:
    """Tests for the full calibration report."""

    def test_default_run(self):
        report = run_calibration()
        assert len(report.ranking.evaluations) == 5
        assert report.baseline_speed == 27
        assert report.fleet_average == 73.5
        assert report.statistics is not None

    def test_extended_run(self):
        report = run_calibration(include_extended=True)
        assert len(report.ranking.evaluations) == 10

    def test_1960s_dataset_run(self):
        report = run_calibration(VESSELS_1960S)
        ranking = report.ranking
        assert ranking.vessel_count == 8
        assert [e.name for e in ranking.evaluations] == [
            "Admiralty + Resistance Factor",
            "Empirical",
            "Admiralty Coefficient",
            "Continuous Displacement Scaling",
            "Discrete Ship Type Categories",
        ]
        assert ranking.best.mean_abs_error == pytest.approx(24.38, abs=0.05)
        assert ranking.get("Admiralty Coefficient").mean_abs_error == pytest.approx(25.91, abs=0.05)
        assert len(report.cruise_estimates) == 8
        assert all(e.error_percent is None for e in report.cruise_estimates)

    def test_outliers_cover_every_class(self):
        report = run_calibration()
        assert len(report.outliers) == len(report.classes)

    def test_tiers_partition_classes(self):
        report = run_calibration()
        assert sum(len(m) for m in report.tiers.values()) == len(report.classes)

    def test_threshold_zero_flags_everything_off_average(self):
        report = run_calibration(outlier_threshold=0)
        assert len(report.outlier_classes) == len(report.classes)

    def test_propulsion_groups_sorted(self):
        averages = [g.average for g in run_calibration().by_propulsion_type]
        assert averages == sorted(averages)

    def test_to_dict(self):
        d = run_calibration().to_dict()
        for key in ("ranking", "classes", "statistics", "tiers", "outliers",
                    "speed_penalties", "by_vessel_type", "by_propulsion_type",
                    "cruise_estimates"):
            assert key in d

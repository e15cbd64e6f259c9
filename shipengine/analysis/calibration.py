"""
analysis/calibration.py - Formula calibration harness

Offline batch evaluation of candidate power formulas against the
historical vessel dataset:

- per-vessel percentage error (predicted - actual) / actual * 100
- per-formula mean / min / max absolute error and ranking
- per-class Admiralty coefficients (raw and normalised to a fixed speed)
- displacement-adjusted outlier analysis, statistics, tiers, groupings
- cruise power estimates against known cruise ratings

Everything here is a pure function of the dataset and formula set.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence
import math
import logging

import numpy as np

from ..core.constants import (
    HP_TO_KW,
    NORMALIZATION_BASELINE_SPEED_KTS,
    FLEET_AVERAGE_COEFFICIENT,
    OUTLIER_THRESHOLD,
)
from ..physics.power import admiralty_coefficient
from .displacement_factors import CoefficientAnalysis, analyze_admiralty_coefficient
from .formulas import PowerFormula, admiralty_power, default_formulas, extended_formulas
from .vessels import VESSELS, VesselSpecification, validate_dataset

logger = logging.getLogger(__name__)


# =============================================================================
# FORMULA RANKING
# =============================================================================

@dataclass(frozen=True)
class VesselPrediction:
    """One formula's prediction for one vessel."""
    vessel_name: str
    displacement: float
    speed: float
    actual_power: float
    predicted_power: float
    error_percent: float

    @property
    def abs_error(self) -> float:
        return abs(self.error_percent)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vessel": self.vessel_name,
            "displacement": self.displacement,
            "speed": self.speed,
            "actual_power": self.actual_power,
            "predicted_power": round(self.predicted_power, 1),
            "error_percent": round(self.error_percent, 2),
        }


@dataclass
class FormulaEvaluation:
    """Aggregate accuracy of one formula over the dataset."""
    name: str
    description: str
    predictions: List[VesselPrediction] = field(default_factory=list)

    @property
    def abs_errors(self) -> np.ndarray:
        return np.array([p.abs_error for p in self.predictions], dtype=float)

    @property
    def mean_abs_error(self) -> float:
        return float(self.abs_errors.mean()) if self.predictions else 0.0

    @property
    def min_abs_error(self) -> float:
        return float(self.abs_errors.min()) if self.predictions else 0.0

    @property
    def max_abs_error(self) -> float:
        return float(self.abs_errors.max()) if self.predictions else 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "mean_abs_error": round(self.mean_abs_error, 2),
            "min_abs_error": round(self.min_abs_error, 2),
            "max_abs_error": round(self.max_abs_error, 2),
            "predictions": [p.to_dict() for p in self.predictions],
        }


def recommendation_verdict(mean_abs_error: float) -> str:
    """Verdict for a formula's mean absolute error."""
    if mean_abs_error < 10:
        return "excellent"
    if mean_abs_error < 15:
        return "good"
    return "acceptable"


@dataclass
class RankingReport:
    """Formulas ranked ascending by mean absolute percentage error."""
    evaluations: List[FormulaEvaluation] = field(default_factory=list)
    vessel_count: int = 0

    @property
    def best(self) -> Optional[FormulaEvaluation]:
        return self.evaluations[0] if self.evaluations else None

    @property
    def recommendation(self) -> Optional[str]:
        if self.best is None:
            return None
        return recommendation_verdict(self.best.mean_abs_error)

    def get(self, name: str) -> Optional[FormulaEvaluation]:
        for evaluation in self.evaluations:
            if evaluation.name == name:
                return evaluation
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vessel_count": self.vessel_count,
            "rankings": [
                {"rank": i + 1, "name": e.name, "mean_abs_error": round(e.mean_abs_error, 2)}
                for i, e in enumerate(self.evaluations)
            ],
            "best": self.best.name if self.best else None,
            "recommendation": self.recommendation,
            "formulas": [e.to_dict() for e in self.evaluations],
        }


def evaluate_formula(
    formula: PowerFormula,
    vessels: Sequence[VesselSpecification],
) -> FormulaEvaluation:
    evaluation = FormulaEvaluation(name=formula.name, description=formula.description)
    for vessel in vessels:
        actual = vessel.actual_power
        predicted = formula.predict(vessel)
        evaluation.predictions.append(VesselPrediction(
            vessel_name=vessel.name,
            displacement=vessel.design_displacement,
            speed=vessel.speed,
            actual_power=actual,
            predicted_power=predicted,
            error_percent=(predicted - actual) / actual * 100,
        ))
    return evaluation


def run_formula_comparison(
    vessels: Optional[Sequence[VesselSpecification]] = None,
    formulas: Optional[Sequence[PowerFormula]] = None,
) -> RankingReport:
    """Score every formula against every vessel and rank them."""
    vessels = validate_dataset(VESSELS if vessels is None else vessels)
    formulas = default_formulas() if formulas is None else list(formulas)

    evaluations = [evaluate_formula(f, vessels) for f in formulas]
    # sorted() is stable: ties keep their input order
    evaluations = sorted(evaluations, key=lambda e: e.mean_abs_error)

    for e in evaluations:
        logger.debug(f"{e.name}: mean |error| {e.mean_abs_error:.1f}%")

    return RankingReport(evaluations=evaluations, vessel_count=len(vessels))


# =============================================================================
# ADMIRALTY COEFFICIENTS BY CLASS
# =============================================================================

def normalized_admiralty_coefficient(
    displacement: float,
    power_shp: float,
    baseline_speed: float = NORMALIZATION_BASELINE_SPEED_KTS,
) -> float:
    """Admiralty coefficient evaluated at a fixed baseline speed."""
    return admiralty_coefficient(displacement, baseline_speed, power_shp * HP_TO_KW)


@dataclass(frozen=True)
class ClassCoefficient:
    """Admiralty coefficients averaged over the vessels of one class."""
    vessel_class: str
    coefficient: float
    normalized_coefficient: float
    vessel_count: int
    avg_displacement: float
    avg_speed: float
    avg_power: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "class": self.vessel_class,
            "coefficient": round(self.coefficient, 2),
            "normalized_coefficient": round(self.normalized_coefficient, 2),
            "vessel_count": self.vessel_count,
            "avg_displacement": round(self.avg_displacement, 1),
            "avg_speed": round(self.avg_speed, 2),
            "avg_power": round(self.avg_power, 1),
        }


def compute_class_coefficients(
    vessels: Sequence[VesselSpecification],
    baseline_speed: float = NORMALIZATION_BASELINE_SPEED_KTS,
) -> List[ClassCoefficient]:
    """
    Raw and speed-normalised coefficient per class, on standard displacement.

    Sorted by average displacement, then speed, then power.
    """
    grouped: Dict[str, List[VesselSpecification]] = {}
    for vessel in vessels:
        grouped.setdefault(vessel.vessel_class, []).append(vessel)

    classes = []
    for vessel_class, members in grouped.items():
        displacement = np.array([v.standard_displacement for v in members], dtype=float)
        speed = np.array([v.speed for v in members], dtype=float)
        power = np.array([v.actual_power for v in members], dtype=float)

        raw = [
            admiralty_coefficient(d, s, p * HP_TO_KW)
            for d, s, p in zip(displacement, speed, power)
        ]
        normalized = [
            normalized_admiralty_coefficient(d, p, baseline_speed)
            for d, p in zip(displacement, power)
        ]

        classes.append(ClassCoefficient(
            vessel_class=vessel_class,
            coefficient=float(np.mean(raw)),
            normalized_coefficient=float(np.mean(normalized)),
            vessel_count=len(members),
            avg_displacement=float(displacement.mean()),
            avg_speed=float(speed.mean()),
            avg_power=float(power.mean()),
        ))

    classes.sort(key=lambda c: (c.avg_displacement, c.avg_speed, c.avg_power))
    return classes


@dataclass(frozen=True)
class ClassOutlierAnalysis:
    vessel_class: str
    analysis: CoefficientAnalysis

    @property
    def is_outlier(self) -> bool:
        return self.analysis.is_outlier

    def to_dict(self) -> Dict[str, Any]:
        data = self.analysis.to_dict()
        data["class"] = self.vessel_class
        return data


def analyze_class_outliers(
    classes: Sequence[ClassCoefficient],
    vessels: Sequence[VesselSpecification],
    fleet_average: float = FLEET_AVERAGE_COEFFICIENT,
    outlier_threshold: float = OUTLIER_THRESHOLD,
) -> List[ClassOutlierAnalysis]:
    """
    Place each class's normalised coefficient in its displacement class.

    The displacement used is that of the first listed vessel of the class.
    """
    results = []
    for c in classes:
        vessel = next((v for v in vessels if v.vessel_class == c.vessel_class), None)
        if vessel is None:
            continue
        analysis = analyze_admiralty_coefficient(
            c.normalized_coefficient,
            vessel.standard_displacement,
            fleet_average=fleet_average,
            outlier_threshold=outlier_threshold,
        )
        results.append(ClassOutlierAnalysis(c.vessel_class, analysis))

    results.sort(key=lambda r: r.analysis.displacement)
    return results


# =============================================================================
# STATISTICS / TIERS / GROUPS
# =============================================================================

@dataclass(frozen=True)
class CoefficientStatistics:
    minimum: float
    maximum: float
    mean: float
    median: float
    minimum_class: str
    maximum_class: str

    @property
    def range(self) -> float:
        return self.maximum - self.minimum

    @property
    def ratio(self) -> float:
        return self.maximum / self.minimum if self.minimum else 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "minimum": round(self.minimum, 2),
            "maximum": round(self.maximum, 2),
            "mean": round(self.mean, 2),
            "median": round(self.median, 2),
            "range": round(self.range, 2),
            "ratio": round(self.ratio, 2),
            "minimum_class": self.minimum_class,
            "maximum_class": self.maximum_class,
        }


def coefficient_statistics(classes: Sequence[ClassCoefficient]) -> Optional[CoefficientStatistics]:
    """Statistics over the normalised class coefficients."""
    if not classes:
        return None
    values = np.array([c.normalized_coefficient for c in classes], dtype=float)
    return CoefficientStatistics(
        minimum=float(values.min()),
        maximum=float(values.max()),
        mean=float(values.mean()),
        median=float(np.median(values)),
        minimum_class=classes[int(values.argmin())].vessel_class,
        maximum_class=classes[int(values.argmax())].vessel_class,
    )


class EfficiencyTier(Enum):
    """Efficiency tier of a normalised coefficient (inclusive upper bound)."""
    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    POOR = "poor"


TIER_LIMITS = (
    (EfficiencyTier.EXCELLENT, 40.0),
    (EfficiencyTier.GOOD, 70.0),
    (EfficiencyTier.AVERAGE, 100.0),
    (EfficiencyTier.POOR, math.inf),
)


def classify_efficiency(coefficient: float) -> EfficiencyTier:
    for tier, limit in TIER_LIMITS:
        if coefficient <= limit:
            return tier
    return EfficiencyTier.POOR


def efficiency_tiers(classes: Sequence[ClassCoefficient]) -> Dict[EfficiencyTier, List[ClassCoefficient]]:
    tiers: Dict[EfficiencyTier, List[ClassCoefficient]] = {tier: [] for tier, _ in TIER_LIMITS}
    for c in classes:
        tiers[classify_efficiency(c.normalized_coefficient)].append(c)
    return tiers


@dataclass(frozen=True)
class SpeedPenalty:
    """How far the design speed pushes the coefficient above its normalised value."""
    vessel_class: str
    actual: float
    normalized: float
    speed: float

    @property
    def penalty(self) -> float:
        return self.actual - self.normalized

    @property
    def percent_increase(self) -> float:
        if self.normalized == 0:
            return 0.0
        return (self.actual / self.normalized - 1) * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "class": self.vessel_class,
            "actual": round(self.actual, 2),
            "normalized": round(self.normalized, 2),
            "penalty": round(self.penalty, 2),
            "percent_increase": round(self.percent_increase, 1),
            "speed": self.speed,
        }


def speed_penalties(classes: Sequence[ClassCoefficient]) -> List[SpeedPenalty]:
    """Penalties sorted by percent increase, largest first."""
    penalties = [
        SpeedPenalty(c.vessel_class, c.coefficient, c.normalized_coefficient, c.avg_speed)
        for c in classes
    ]
    penalties.sort(key=lambda p: p.percent_increase, reverse=True)
    return penalties


@dataclass(frozen=True)
class GroupAverage:
    group: str
    classes: List[ClassCoefficient]

    @property
    def average(self) -> float:
        return float(np.mean([c.normalized_coefficient for c in self.classes]))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "group": self.group,
            "average": round(self.average, 2),
            "count": len(self.classes),
            "classes": [c.vessel_class for c in self.classes],
        }


def _group_classes(classes, vessels, key) -> List[GroupAverage]:
    by_class = {c.vessel_class: c for c in classes}
    groups: Dict[str, List[ClassCoefficient]] = {}
    for vessel in vessels:
        c = by_class.get(vessel.vessel_class)
        if c is None:
            continue
        members = groups.setdefault(key(vessel), [])
        if c not in members:
            members.append(c)
    return [GroupAverage(name, members) for name, members in groups.items()]


def group_by_vessel_type(
    classes: Sequence[ClassCoefficient],
    vessels: Sequence[VesselSpecification],
) -> List[GroupAverage]:
    """Class averages grouped by vessel type, in dataset order."""
    return _group_classes(classes, vessels, lambda v: v.vessel_type.value)


def group_by_propulsion_type(
    classes: Sequence[ClassCoefficient],
    vessels: Sequence[VesselSpecification],
) -> List[GroupAverage]:
    """Class averages grouped by propulsion type, most efficient first."""
    groups = _group_classes(classes, vessels, lambda v: v.propulsion_type.value)
    groups.sort(key=lambda g: g.average)
    return groups


# =============================================================================
# CRUISE POWER
# =============================================================================

@dataclass(frozen=True)
class CruisePowerEstimate:
    vessel_name: str
    cruise_speed: float
    admiralty_cruise_power: float
    power_law_cruise_power: float
    known_cruise_power: Optional[float]

    @property
    def error_percent(self) -> Optional[float]:
        """Admiralty estimate error against the known cruise rating."""
        if not self.known_cruise_power:
            return None
        return (self.admiralty_cruise_power - self.known_cruise_power) / self.known_cruise_power * 100

    def to_dict(self) -> Dict[str, Any]:
        error = self.error_percent
        return {
            "vessel": self.vessel_name,
            "cruise_speed": self.cruise_speed,
            "admiralty_cruise_power": round(self.admiralty_cruise_power, 1),
            "power_law_cruise_power": round(self.power_law_cruise_power, 1),
            "known_cruise_power": self.known_cruise_power,
            "error_percent": round(error, 2) if error is not None else None,
        }


def estimate_cruise_power(vessels: Sequence[VesselSpecification]) -> List[CruisePowerEstimate]:
    """
    Cruise power two ways: the Admiralty formula at cruise speed, and the
    cubic power law applied to the Admiralty top-speed power. Vessels with
    no cruise speed are taken at 60% of top speed (whole knots).
    """
    estimates = []
    for v in vessels:
        cruise_speed = v.cruise_speed or math.floor(v.speed * 0.6)
        displacement = v.design_displacement
        cruise_power = admiralty_power(displacement, cruise_speed, v.design_year, v.hull_form)
        max_power = admiralty_power(displacement, v.speed, v.design_year, v.hull_form)
        estimates.append(CruisePowerEstimate(
            vessel_name=v.name,
            cruise_speed=cruise_speed,
            admiralty_cruise_power=cruise_power,
            power_law_cruise_power=max_power * (cruise_speed / v.speed) ** 3,
            known_cruise_power=v.known_cruise_power,
        ))
    return estimates


# =============================================================================
# FULL CALIBRATION RUN
# =============================================================================

@dataclass
class CalibrationReport:
    """Everything the calibration run produces."""
    ranking: RankingReport
    classes: List[ClassCoefficient]
    outliers: List[ClassOutlierAnalysis]
    statistics: Optional[CoefficientStatistics]
    tiers: Dict[EfficiencyTier, List[ClassCoefficient]]
    penalties: List[SpeedPenalty]
    by_vessel_type: List[GroupAverage]
    by_propulsion_type: List[GroupAverage]
    cruise_estimates: List[CruisePowerEstimate]
    baseline_speed: float = NORMALIZATION_BASELINE_SPEED_KTS
    fleet_average: float = FLEET_AVERAGE_COEFFICIENT

    @property
    def outlier_classes(self) -> List[str]:
        return [o.vessel_class for o in self.outliers if o.is_outlier]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ranking": self.ranking.to_dict(),
            "baseline_speed": self.baseline_speed,
            "fleet_average": self.fleet_average,
            "classes": [c.to_dict() for c in self.classes],
            "outliers": [o.to_dict() for o in self.outliers],
            "outlier_classes": self.outlier_classes,
            "statistics": self.statistics.to_dict() if self.statistics else None,
            "tiers": {
                tier.value: [c.vessel_class for c in members]
                for tier, members in self.tiers.items()
            },
            "speed_penalties": [p.to_dict() for p in self.penalties],
            "by_vessel_type": [g.to_dict() for g in self.by_vessel_type],
            "by_propulsion_type": [g.to_dict() for g in self.by_propulsion_type],
            "cruise_estimates": [e.to_dict() for e in self.cruise_estimates],
        }


def run_calibration(
    vessels: Optional[Sequence[VesselSpecification]] = None,
    formulas: Optional[Sequence[PowerFormula]] = None,
    *,
    include_extended: bool = False,
    baseline_speed: float = NORMALIZATION_BASELINE_SPEED_KTS,
    fleet_average: float = FLEET_AVERAGE_COEFFICIENT,
    outlier_threshold: float = OUTLIER_THRESHOLD,
) -> CalibrationReport:
    """Run the formula ranking and the full coefficient analysis."""
    vessels = validate_dataset(VESSELS if vessels is None else vessels)
    if formulas is None:
        formulas = default_formulas()
        if include_extended:
            formulas += extended_formulas()

    ranking = run_formula_comparison(vessels, formulas)
    classes = compute_class_coefficients(vessels, baseline_speed)

    report = CalibrationReport(
        ranking=ranking,
        classes=classes,
        outliers=analyze_class_outliers(classes, vessels, fleet_average, outlier_threshold),
        statistics=coefficient_statistics(classes),
        tiers=efficiency_tiers(classes),
        penalties=speed_penalties(classes),
        by_vessel_type=group_by_vessel_type(classes, vessels),
        by_propulsion_type=group_by_propulsion_type(classes, vessels),
        cruise_estimates=estimate_cruise_power(vessels),
        baseline_speed=baseline_speed,
        fleet_average=fleet_average,
    )

    best = ranking.best
    logger.info(
        f"Calibration over {len(vessels)} vessels, {len(formulas)} formulas: "
        f"best {best.name if best else 'n/a'}, "
        f"{len(report.outlier_classes)} outlier classes"
    )
    return report

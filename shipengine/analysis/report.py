"""
analysis/report.py - Console rendering of calibration results
"""

from __future__ import annotations
from typing import List

from .calibration import CalibrationReport, FormulaEvaluation, RankingReport
from .displacement_factors import DISPLACEMENT_FACTORS

WIDTH = 92


def _rule(char: str = "─") -> str:
    return char * WIDTH


def _error_icon(abs_error: float) -> str:
    if abs_error < 10:
        return "✓"
    if abs_error < 20:
        return "⚠"
    return "✗"


def format_formula_evaluation(evaluation: FormulaEvaluation) -> List[str]:
    lines = [f"─ {evaluation.name}", f"  {evaluation.description}"]
    lines.append("  Ship                   | Displacement | Speed | Actual SHP |  Calc SHP |  Error")
    lines.append("  " + "─" * 82)
    for p in evaluation.predictions:
        lines.append(
            f"  {_error_icon(p.abs_error)} {p.vessel_name[:20]:<20} | "
            f"{p.displacement:>11,.0f}t | "
            f"{p.speed:>4g}kt | "
            f"{p.actual_power:>10,.0f} | "
            f"{p.predicted_power:>9.0f} | "
            f"{p.error_percent:>6.1f}%"
        )
    lines.append("  " + "─" * 82)
    lines.append(
        f"  Results: Avg {evaluation.mean_abs_error:.1f}% | "
        f"Min {evaluation.min_abs_error:.1f}% | Max {evaluation.max_abs_error:.1f}%"
    )
    return lines


def format_ranking(ranking: RankingReport, detailed: bool = True) -> str:
    lines = [f"Dataset: {ranking.vessel_count} vessels", ""]

    if detailed:
        for evaluation in ranking.evaluations:
            lines.extend(format_formula_evaluation(evaluation))
            lines.append("")

    lines.append(_rule("═"))
    lines.append("FORMULA RANKINGS")
    lines.append(_rule("═"))
    for i, e in enumerate(ranking.evaluations, start=1):
        lines.append(f"{i:>2}. {e.name:<45} {e.mean_abs_error:.1f}% avg error")

    best = ranking.best
    if best is not None:
        lines.append("")
        lines.append("RECOMMENDATION:")
        lines.append(f"  {best.name}")
        lines.append(f"  {best.mean_abs_error:.1f}% average error ({ranking.recommendation})")
    return "\n".join(lines)


def format_calibration_report(report: CalibrationReport, detailed: bool = True) -> str:
    """Render the full calibration run as console text."""
    lines = [format_ranking(report.ranking, detailed), ""]

    lines.append(_rule("═"))
    lines.append(f"ADMIRALTY COEFFICIENT BY SHIP CLASS (normalised to {report.baseline_speed:g} kt)")
    lines.append(_rule("═"))
    lines.append(
        f"  {'Class':<32} {'Actual':>8} {'@Baseline':>10} {'Vessels':>8} "
        f"{'Avg Disp':>9} {'Avg Speed':>10} {'Avg Power':>11}"
    )
    lines.append("  " + _rule()[:WIDTH - 2])
    for c in report.classes:
        lines.append(
            f"  {c.vessel_class[:32]:<32} {c.coefficient:>8.1f} {c.normalized_coefficient:>10.1f} "
            f"{c.vessel_count:>8} {c.avg_displacement:>8.0f}t {c.avg_speed:>8.1f}kt "
            f"{c.avg_power:>7.0f} SHP"
        )

    stats = report.statistics
    if stats is not None:
        lines.append("")
        lines.append("COEFFICIENT STATISTICS")
        lines.append(_rule())
        lines.append(f"  Minimum: {stats.minimum:>7.1f} ({stats.minimum_class})")
        lines.append(f"  Maximum: {stats.maximum:>7.1f} ({stats.maximum_class})")
        lines.append(f"  Average: {stats.mean:>7.1f}")
        lines.append(f"  Median:  {stats.median:>7.1f}")
        lines.append(f"  Range:   {stats.range:>7.1f}")
        lines.append(f"  Ratio:   {stats.ratio:>6.1f}x")

    lines.append("")
    lines.append("EFFICIENCY TIERS")
    lines.append(_rule())
    for tier, members in report.tiers.items():
        if members:
            names = ", ".join(
                f"{c.vessel_class.split('(')[0].strip()} ({c.normalized_coefficient:.1f})"
                for c in members
            )
            lines.append(f"  {tier.value.title()}: {names}")

    lines.append("")
    lines.append("SPEED DESIGN PENALTY")
    lines.append(_rule())
    for p in report.penalties:
        lines.append(
            f"  {p.vessel_class[:32]:<32} {p.actual:>8.1f} {p.normalized:>10.1f} "
            f"{p.penalty:>8.1f} {p.percent_increase:>7.1f}%"
        )

    for title, groups in (
        ("BY VESSEL TYPE", report.by_vessel_type),
        ("BY PROPULSION TYPE", report.by_propulsion_type),
    ):
        lines.append("")
        lines.append(title)
        lines.append(_rule())
        for g in groups:
            lines.append(f"  {g.group.upper():<20} avg {g.average:>6.1f} (n={len(g.classes)})")

    lines.append("")
    lines.append(_rule("═"))
    lines.append("DISPLACEMENT-ADJUSTED COEFFICIENT ANALYSIS")
    lines.append(_rule("═"))
    lines.append(f"  Fleet average baseline: {report.fleet_average:g}")
    for o in report.outliers:
        a = o.analysis
        flag = "✗" if a.is_outlier else " "
        lines.append(
            f"{flag} {o.vessel_class[:32]:<32} {a.displacement:>6.0f}t  {a.displacement_class:<32} "
            f"{a.raw_coefficient:>7.1f} {a.adjusted_coefficient:>7.1f}  {'YES' if a.is_outlier else 'no'}"
        )
    lines.append("")
    for f in DISPLACEMENT_FACTORS:
        upper = "+" if f.max_displacement == float("inf") else f"-{f.max_displacement:g}"
        lines.append(
            f"  {f.label:<32} {f.min_displacement:g}{upper}t  "
            f"Expected: {f.expected_coefficient:>5.1f}  Factor: {f.adjustment_factor:.3f}"
        )

    lines.append("")
    lines.append("CRUISE POWER ESTIMATES")
    lines.append(_rule())
    lines.append(f"  {'Ship':<20} {'Cruise kt':>9} {'Admiralty':>10} {'Power law':>10} {'Known':>8} {'Error':>8}")
    for e in report.cruise_estimates:
        known = f"{e.known_cruise_power:,.0f}" if e.known_cruise_power else "N/A"
        error = f"{e.error_percent:.1f}%" if e.error_percent is not None else ""
        lines.append(
            f"  {e.vessel_name[:20]:<20} {e.cruise_speed:>9g} {e.admiralty_cruise_power:>10.0f} "
            f"{e.power_law_cruise_power:>10.0f} {known:>8} {error:>8}"
        )

    return "\n".join(lines)

"""
systems/propulsion/report.py - Text rendering of engine system results
"""

from __future__ import annotations
from typing import List, Sequence

from .schema import EngineSystemOutput

RULE = "━" * 41


def format_engine_output(output: EngineSystemOutput) -> str:
    """Render one performance sheet."""
    lines = []

    lines.append(f"Engine System: {output.configuration_id}")
    lines.append(RULE)

    lines.append("Physical:")
    lines.append(f"  Weight: {output.total_engine_weight:.1f} tons")
    lines.append(f"  Cost: {output.total_cost:,.0f} credits")
    lines.append(f"  Volume: {output.engine_volume:.1f} m³")
    lines.append("")

    lines.append("Performance:")
    lines.append(f"  Max Power: {output.max_power:.0f} HP")
    lines.append(f"  Max Speed: {output.max_speed:.1f} knots")
    lines.append(f"  Cruising Speed: {output.cruising_speed:.1f} knots")
    lines.append(f"  Max Range: {output.max_range:.0f} nautical miles")
    lines.append("")

    lines.append("Operational:")
    lines.append(f"  MTBF: {output.mtbf:.0f} hours")
    lines.append(f"  Reliability Score: {output.reliability_score:.0f}/100")
    lines.append(f"  Full Power Consumption: {output.fuel_consumption_at_full_power:.2f} tons/hour")
    lines.append(f"  Cruise Consumption: {output.fuel_consumption_at_cruise:.2f} tons/hour")
    lines.append(f"  Operating Cost: {output.operating_cost_per_hour:.0f} credits/hour")
    lines.append("")

    lines.append("Strategic:")
    lines.append(f"  Acceleration: {output.acceleration_rating}/100")
    lines.append(f"  Heat Signature: {output.heat_signature:.0f}/100")
    lines.append(f"  Complexity: {output.complexity_rating}/100")

    return "\n".join(lines)


COMPARISON_HEADERS = (
    "Configuration", "Weight (t)", "Cost (M)", "Power (hp)", "Range (nm)",
    "MTBF (h)", "Fuel (t/h)", "Accel", "Heat", "Complexity",
)


def format_comparison_table(outputs: Sequence[EngineSystemOutput]) -> str:
    """Render several results side by side, one row per configuration."""
    rows: List[List[str]] = []
    for o in outputs:
        rows.append([
            o.configuration_id,
            f"{o.total_engine_weight:.1f}",
            f"{o.total_cost / 1e6:.1f}",
            f"{o.max_power:.0f}",
            f"{o.max_range:.0f}",
            f"{o.mtbf:.0f}",
            f"{o.fuel_consumption_at_full_power:.2f}",
            str(o.acceleration_rating),
            f"{o.heat_signature:.0f}",
            str(o.complexity_rating),
        ])

    widths = [len(h) for h in COMPARISON_HEADERS]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]

    def _line(cells: Sequence[str]) -> str:
        return "  ".join(cell.ljust(w) if i == 0 else cell.rjust(w)
                         for i, (cell, w) in enumerate(zip(cells, widths)))

    lines = [_line(COMPARISON_HEADERS), "  ".join("-" * w for w in widths)]
    lines.extend(_line(row) for row in rows)
    return "\n".join(lines)

"""
cli/commands/analysis.py - Calibration harness command
"""

from __future__ import annotations
import argparse
import json

from ..core import CLICommand, CommandResult, CLIContext
from ...analysis import format_calibration_report, resolve_vessel_dataset, run_calibration
from ...bootstrap.config import AnalysisConfig
from ...errors import ShipEngineError


class CalibrateCommand(CLICommand):
    """Score the power formulas against historical vessels."""

    name = "calibrate"
    description = "Run the power formula calibration harness"
    aliases = ["calibration"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--dataset",
                            help="Built-in dataset (reference, 1960s) or JSON vessel dataset path")
        parser.add_argument("--extended", action="store_true",
                            help="Include the extended formula set")
        parser.add_argument("--summary", action="store_true",
                            help="Omit per-vessel prediction tables")
        parser.add_argument("--baseline-speed", type=float, default=None,
                            help="Normalisation speed for class coefficients (knots)")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        settings = ctx.config.analysis if ctx.config else AnalysisConfig()
        dataset = args.dataset or settings.vessel_dataset

        try:
            vessels = resolve_vessel_dataset(dataset)
            report = run_calibration(
                vessels,
                include_extended=args.extended or settings.include_extended_formulas,
                baseline_speed=args.baseline_speed or settings.baseline_speed_kts,
                fleet_average=settings.fleet_average_coefficient,
                outlier_threshold=settings.outlier_threshold,
            )
        except ShipEngineError as e:
            return CommandResult.failure(e)
        except (OSError, json.JSONDecodeError) as e:
            return CommandResult.failure(
                ValueError(f"Cannot read dataset {dataset}: {e}")
            )

        return CommandResult(
            success=True,
            message=format_calibration_report(report, detailed=not args.summary),
            data=report.to_dict(),
            format_hint="report",
        )

"""
cli/commands/design.py - Engine design commands
"""

from __future__ import annotations
import argparse

from pydantic import ValidationError

from ..core import CLICommand, CommandResult, CLIContext
from ...core.enums import ConfigurationId, EnginePriority, HullType
from ...errors import ShipEngineError
from ...systems.propulsion import (
    DEFAULT_REGISTRY,
    EngineDesignInput,
    calculate_engine_system,
    compare_configurations,
    format_comparison_table,
    format_engine_output,
)


def add_design_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by design and compare."""
    parser.add_argument("--top-speed", "-s", type=float, required=True,
                        help="Desired top speed (knots)")
    parser.add_argument("--displacement", "-d", type=float, required=True,
                        help="Ship displacement (tonnes)")
    parser.add_argument("--cruise-speed", type=float, default=None,
                        help="Desired cruising speed (knots)")
    parser.add_argument("--priority", "-p", choices=[p.value for p in EnginePriority],
                        default=EnginePriority.BALANCED.value, help="Engine priority")
    parser.add_argument("--hull-type", "-t", choices=[h.value for h in HullType],
                        default=HullType.FRIGATE.value, help="Hull category")
    parser.add_argument("--drag", type=float, default=0.15,
                        help="Hull drag coefficient")


def design_input_from_args(args: argparse.Namespace, configuration_id: str) -> EngineDesignInput:
    return EngineDesignInput(
        configuration_id=configuration_id,
        desired_top_speed=args.top_speed,
        desired_cruising_speed=args.cruise_speed,
        engine_priority=args.priority,
        ship_displacement=args.displacement,
        hull_drag_coefficient=args.drag,
        hull_type=args.hull_type,
        year=getattr(args, "year", None),
    )


class DesignCommand(CLICommand):
    """Size one propulsion configuration."""

    name = "design"
    description = "Calculate the engine system for one configuration"
    aliases = ["calc"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("configuration", help="Configuration id, e.g. CODAG")
        add_design_arguments(parser)

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        try:
            design = design_input_from_args(args, args.configuration.upper())
            output = calculate_engine_system(design)
        except (ShipEngineError, ValidationError) as e:
            return CommandResult.failure(e)

        return CommandResult(
            success=True,
            message=format_engine_output(output),
            data=output.to_dict(),
            format_hint="report",
        )


class CompareCommand(CLICommand):
    """Size every configuration for the same hull."""

    name = "compare"
    description = "Compare all configurations for one design request"
    aliases = []

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        add_design_arguments(parser)
        parser.add_argument("--year", "-y", type=int, default=None,
                            help="Only configurations in service by this year")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        try:
            # The id is ignored by comparisons; any valid one satisfies the schema
            design = design_input_from_args(args, ConfigurationId.DIESEL.value)
            outputs = compare_configurations(design)
        except (ShipEngineError, ValidationError) as e:
            return CommandResult.failure(e)

        if not outputs:
            return CommandResult(
                success=True,
                message=f"No configurations in service by {args.year}",
                data=[],
                format_hint="report",
            )

        return CommandResult(
            success=True,
            message=format_comparison_table(outputs),
            data=[o.to_dict() for o in outputs],
            format_hint="report",
        )


class ConfigurationsCommand(CLICommand):
    """List the configuration table."""

    name = "configurations"
    description = "List available propulsion configurations"
    aliases = ["configs", "ls"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--year", "-y", type=int, default=None,
                            help="Only configurations in service by this year")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        if args.year is not None:
            configs = DEFAULT_REGISTRY.available_in(args.year)
        else:
            configs = list(DEFAULT_REGISTRY)

        lines = [f"{'ID':<14} {'Name':<36} {'Year':>5}  {'Tier':>4}  Engines"]
        for c in configs:
            engines = ", ".join(e.value for e in c.engine_types)
            lines.append(
                f"{c.id.value:<14} {c.display_name:<36} {c.year_introduced:>5}  "
                f"{c.tech_tier:>4}  {engines}"
            )

        return CommandResult(
            success=True,
            message="\n".join(lines),
            data=[c.to_dict() for c in configs],
            format_hint="report",
        )

"""
bootstrap/entrypoints.py - Application entry points

Provides the CLI and API server entry points.
"""

from __future__ import annotations
from typing import List, Optional
import argparse
import json
import logging
import sys

from ..core.constants import SHIPENGINE_VERSION

logger = logging.getLogger("bootstrap.entrypoints")

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Marks handlers installed by setup_logging so a second call replaces them
_HANDLER_TAG = "shipengine"


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record):
        return json.dumps({
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        })


def setup_logging(
    level: str = "INFO",
    log_file: str = None,
    json_format: bool = False,
    fmt: str = DEFAULT_LOG_FORMAT,
) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        json_format: Use JSON format for logs
        fmt: Format string for plain-text logs
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(fmt)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_TAG:
            root_logger.removeHandler(handler)
            handler.close()

    # Console handler; stderr keeps stdout clean for command output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(_HANDLER_TAG)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.set_name(_HANDLER_TAG)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    """Top-level parser with one subparser per registered command."""
    from ..cli import command_registry

    parser = argparse.ArgumentParser(
        description="SHIPENGINE warship propulsion designer",
        prog="shipengine",
    )

    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
        default=None,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (overrides configuration)",
    )
    parser.add_argument(
        "--log-file",
        help="Log file path",
        default=None,
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {SHIPENGINE_VERSION}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    for name, command in command_registry.get_all().items():
        sub = subparsers.add_parser(
            name,
            aliases=command.aliases,
            help=command.description,
            description=command.description,
        )
        command.configure_parser(sub)

    return parser


def cli_main(args: List[str] = None) -> int:
    """
    CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code. Argument errors exit through argparse with status 2.
    """
    from ..cli import CLIContext, OutputFormat, command_registry, format_output
    from .config import load_config

    parser = build_parser()
    parsed = parser.parse_args(args)

    config = load_config(parsed.config)

    # Setup logging
    if parsed.verbose:
        log_level = "DEBUG"
    else:
        log_level = parsed.log_level or config.logging.level
    setup_logging(
        level=log_level,
        log_file=parsed.log_file or config.logging.log_file,
        json_format=config.logging.json_logs,
        fmt=config.logging.format,
    )

    ctx = CLIContext(
        config=config,
        output_format=OutputFormat.JSON if parsed.json else OutputFormat.TEXT,
        verbose=parsed.verbose,
    )

    command = command_registry.get(parsed.command)
    try:
        result = command.execute(ctx, parsed)
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130

    output = format_output(result, ctx.output_format)
    if output:
        print(output)
    return result.exit_code


def api_main(args: List[str] = None) -> None:
    """
    API server entry point.

    Args:
        args: Command line arguments
    """
    import uvicorn

    from .config import load_config

    parser = argparse.ArgumentParser(
        description="SHIPENGINE API Server",
        prog="shipengine-api",
    )

    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
        default=None,
    )
    parser.add_argument(
        "-p", "--port",
        type=int,
        help="API port",
        default=None,
    )
    parser.add_argument(
        "-H", "--host",
        help="API host",
        default=None,
    )
    parser.add_argument(
        "-w", "--workers",
        type=int,
        help="Number of workers",
        default=None,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Log level",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload (development)",
    )

    parsed = parser.parse_args(args)

    # Setup logging
    setup_logging(level=parsed.log_level)

    config = load_config(parsed.config)

    # Override config with CLI args
    if parsed.port:
        config.api.port = parsed.port
    if parsed.host:
        config.api.host = parsed.host
    if parsed.workers:
        config.api.workers = parsed.workers

    logger.info(f"Starting API on {config.api.host}:{config.api.port}")

    try:
        uvicorn.run(
            "shipengine.deployment.api:create_fastapi_app",
            factory=True,
            host=config.api.host,
            port=config.api.port,
            workers=config.api.workers,
            reload=parsed.reload,
            log_level=parsed.log_level.lower(),
        )
    except KeyboardInterrupt:
        print("\nShutting down...")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the package."""
    argv = sys.argv[1:] if argv is None else argv

    if argv and argv[0] == "api":
        api_main(argv[1:])
    else:
        sys.exit(cli_main(argv))


if __name__ == "__main__":
    main()

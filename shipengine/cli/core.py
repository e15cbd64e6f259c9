"""
cli/core.py - Core CLI infrastructure
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, TYPE_CHECKING
from dataclasses import dataclass
from enum import Enum
from abc import ABC, abstractmethod
import argparse
import json
import logging

from pydantic import ValidationError

from ..errors import ShipEngineError

if TYPE_CHECKING:
    from ..bootstrap.config import ShipEngineConfig

logger = logging.getLogger("cli")


class OutputFormat(Enum):
    """Output format options."""
    TEXT = "text"
    JSON = "json"


@dataclass
class CLIContext:
    """Context for CLI operations."""

    config: Optional["ShipEngineConfig"] = None

    # Output settings
    output_format: OutputFormat = OutputFormat.TEXT
    verbose: bool = False


@dataclass
class CommandResult:
    """Result of a CLI command execution."""

    success: bool = True
    message: str = ""
    data: Any = None
    error: Optional[str] = None

    # "report" means message is already rendered and data is for JSON only
    format_hint: str = "text"
    exit_code: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message if self.format_hint != "report" else "",
            "data": self.data,
            "error": self.error,
        }

    @classmethod
    def failure(cls, exc: Exception) -> "CommandResult":
        """Result for a rejected request; domain and validation errors exit 1."""
        if isinstance(exc, ShipEngineError):
            data = exc.to_dict()
            error = exc.message
        elif isinstance(exc, ValidationError):
            data = {"errors": exc.errors(
                include_url=False, include_context=False, include_input=False
            )}
            error = "; ".join(
                f"{'.'.join(str(p) for p in e['loc']) or 'input'}: {e['msg']}"
                for e in exc.errors()
            )
        else:
            data = None
            error = str(exc)

        logger.warning(f"Request rejected: {error}")
        return cls(success=False, data=data, error=error, exit_code=1)


class CLICommand(ABC):
    """Base class for CLI commands."""

    name: str = "command"
    description: str = "Base command"
    aliases: List[str] = []

    @abstractmethod
    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        """Execute the command."""
        pass

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        """Configure argument parser for this command."""
        pass


class CommandRegistry:
    """Registry for CLI commands."""

    def __init__(self):
        self._commands: Dict[str, CLICommand] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, command: CLICommand) -> None:
        """Register a command."""
        self._commands[command.name] = command
        for alias in command.aliases:
            self._aliases[alias] = command.name

    def get(self, name: str) -> Optional[CLICommand]:
        """Get command by name or alias."""
        if name in self._commands:
            return self._commands[name]
        if name in self._aliases:
            return self._commands[self._aliases[name]]
        return None

    def get_all(self) -> Dict[str, CLICommand]:
        """Get all commands."""
        return dict(self._commands)


# Global registry
command_registry = CommandRegistry()


def format_output(result: CommandResult, format: OutputFormat) -> str:
    """Format command result for display."""
    if format == OutputFormat.JSON:
        return json.dumps(result.to_dict(), indent=2, default=str)

    else:  # TEXT
        if result.success:
            output = result.message
            if result.data and result.format_hint != "report":
                if isinstance(result.data, dict):
                    for k, v in result.data.items():
                        output += f"\n  {k}: {v}"
                else:
                    output += f"\n{result.data}"
            return output
        return f"Error: {result.error}"

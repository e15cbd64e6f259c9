"""
cli/ - Command Line Interface

Provides command-line access to SHIPENGINE functionality:
- Engine design and configuration comparison
- Configuration listing
- Formula calibration harness
"""

from .core import (
    CLIContext,
    OutputFormat,
    CommandResult,
    CommandRegistry,
    CLICommand,
    command_registry,
    format_output,
)

from .commands import (
    DesignCommand,
    CompareCommand,
    ConfigurationsCommand,
    CalibrateCommand,
)


for _command in (DesignCommand(), CompareCommand(), ConfigurationsCommand(), CalibrateCommand()):
    command_registry.register(_command)


__all__ = [
    # Core
    "CLIContext",
    "OutputFormat",
    "CommandResult",
    "CommandRegistry",
    "CLICommand",
    "command_registry",
    "format_output",
    # Commands
    "DesignCommand",
    "CompareCommand",
    "ConfigurationsCommand",
    "CalibrateCommand",
]

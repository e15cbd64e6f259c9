"""
cli/commands/ - CLI Command Implementations
"""

from .design import (
    DesignCommand,
    CompareCommand,
    ConfigurationsCommand,
)

from .analysis import CalibrateCommand

__all__ = [
    # Design commands
    "DesignCommand",
    "CompareCommand",
    "ConfigurationsCommand",
    # Analysis commands
    "CalibrateCommand",
]

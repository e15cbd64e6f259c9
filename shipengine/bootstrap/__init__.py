"""
bootstrap/ - Bootstrap Layer

Provides configuration loading, logging setup and the process entry points.
"""

from .config import (
    ShipEngineConfig,
    APIConfig,
    AnalysisConfig,
    LoggingConfig,
    load_config,
    get_config,
    reset_config,
)

from .entrypoints import (
    cli_main,
    api_main,
    setup_logging,
    JSONFormatter,
)


__all__ = [
    # Config
    "ShipEngineConfig",
    "APIConfig",
    "AnalysisConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
    "reset_config",
    # Entry points
    "cli_main",
    "api_main",
    "setup_logging",
    "JSONFormatter",
]

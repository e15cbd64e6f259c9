"""
bootstrap/config.py - Application configuration

Provides configuration loading from files, environment variables, and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from pathlib import Path
import os
import json
import logging

from ..core.constants import (
    NORMALIZATION_BASELINE_SPEED_KTS,
    FLEET_AVERAGE_COEFFICIENT,
    OUTLIER_THRESHOLD,
    SHIPENGINE_VERSION,
)

logger = logging.getLogger("bootstrap.config")


@dataclass
class APIConfig:
    """API server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1
    enable_docs: bool = True
    docs_url: str = "/docs"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "APIConfig":
        cors = os.getenv("SHIPENGINE_API_CORS_ORIGINS", "*")
        return cls(
            host=os.getenv("SHIPENGINE_API_HOST", "0.0.0.0"),
            port=int(os.getenv("SHIPENGINE_API_PORT", "8000")),
            workers=int(os.getenv("SHIPENGINE_API_WORKERS", "1")),
            enable_docs=os.getenv("SHIPENGINE_API_ENABLE_DOCS", "true").lower() == "true",
            docs_url=os.getenv("SHIPENGINE_API_DOCS_URL", "/docs"),
            cors_origins=cors.split(",") if cors else ["*"],
        )


@dataclass
class AnalysisConfig:
    """Calibration harness settings."""

    baseline_speed_kts: float = NORMALIZATION_BASELINE_SPEED_KTS
    fleet_average_coefficient: float = FLEET_AVERAGE_COEFFICIENT
    outlier_threshold: float = OUTLIER_THRESHOLD
    include_extended_formulas: bool = False
    vessel_dataset: Optional[str] = None
    """Optional JSON dataset replacing the built-in vessels."""

    @classmethod
    def from_env(cls) -> "AnalysisConfig":
        return cls(
            baseline_speed_kts=float(os.getenv(
                "SHIPENGINE_BASELINE_SPEED", str(NORMALIZATION_BASELINE_SPEED_KTS))),
            fleet_average_coefficient=float(os.getenv(
                "SHIPENGINE_FLEET_AVERAGE", str(FLEET_AVERAGE_COEFFICIENT))),
            outlier_threshold=float(os.getenv(
                "SHIPENGINE_OUTLIER_THRESHOLD", str(OUTLIER_THRESHOLD))),
            include_extended_formulas=os.getenv(
                "SHIPENGINE_EXTENDED_FORMULAS", "false").lower() == "true",
            vessel_dataset=os.getenv("SHIPENGINE_VESSEL_DATASET"),
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("SHIPENGINE_LOG_LEVEL", "INFO"),
            format=os.getenv("SHIPENGINE_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            log_file=os.getenv("SHIPENGINE_LOG_FILE"),
            json_logs=os.getenv("SHIPENGINE_JSON_LOGS", "false").lower() == "true",
        )


@dataclass
class ShipEngineConfig:
    """Root configuration for SHIPENGINE."""

    environment: str = "development"
    debug: bool = False
    version: str = SHIPENGINE_VERSION

    api: APIConfig = field(default_factory=APIConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "ShipEngineConfig":
        """Create configuration from environment variables."""
        return cls(
            environment=os.getenv("SHIPENGINE_ENVIRONMENT", "development"),
            debug=os.getenv("SHIPENGINE_DEBUG", "false").lower() == "true",
            api=APIConfig.from_env(),
            analysis=AnalysisConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "ShipEngineConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "ShipEngineConfig":
        """Environment values overridden by the file's values."""
        config = cls.from_env()

        if "environment" in data:
            config.environment = data["environment"]
        if "debug" in data:
            config.debug = data["debug"]

        for section in ("api", "analysis", "logging"):
            target = getattr(config, section)
            for key, value in data.get(section, {}).items():
                if hasattr(target, key):
                    setattr(target, key, value)
                else:
                    logger.warning(f"Ignoring unknown config key: {section}.{key}")

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "version": self.version,
            "api": {
                "host": self.api.host,
                "port": self.api.port,
                "workers": self.api.workers,
            },
            "analysis": {
                "baseline_speed_kts": self.analysis.baseline_speed_kts,
                "fleet_average_coefficient": self.analysis.fleet_average_coefficient,
                "outlier_threshold": self.analysis.outlier_threshold,
                "include_extended_formulas": self.analysis.include_extended_formulas,
                "vessel_dataset": self.analysis.vessel_dataset,
            },
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
        }


# Global config instance
_config: Optional[ShipEngineConfig] = None


def load_config(filepath: str = None) -> ShipEngineConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        ShipEngineConfig instance
    """
    global _config

    if filepath:
        _config = ShipEngineConfig.from_file(filepath)
    else:
        default_paths = [
            "./shipengine.json",
            "./config/shipengine.json",
            os.path.expanduser("~/.shipengine/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = ShipEngineConfig.from_file(path)
                return _config

        # Fall back to environment
        _config = ShipEngineConfig.from_env()

    logger.info(f"Configuration loaded: environment={_config.environment}")
    return _config


def get_config() -> ShipEngineConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the cached configuration."""
    global _config
    _config = None

"""
deployment/api.py - REST API

Thin JSON surface over the engine calculator and the calibration harness.
"""

from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
import json
import logging

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..analysis import BUILTIN_DATASETS, resolve_vessel_dataset, run_calibration
from ..bootstrap.config import ShipEngineConfig, get_config
from ..core.constants import SHIPENGINE_VERSION
from ..errors import (
    ConfigurationNotFoundError,
    DisplacementOutOfRangeError,
    HullTypeNotFoundError,
    PowerRequirementError,
    ShipEngineError,
)
from ..systems.propulsion import (
    ConfigurationRegistry,
    DEFAULT_REGISTRY,
    EngineDesignInput,
    EngineSystemCalculator,
)

logger = logging.getLogger("deployment.api")


# =============================================================================
# Request Models
# =============================================================================

class CompareRequest(EngineDesignInput):
    """Comparison request; the configuration id is not needed."""
    configuration_id: str = "DIESEL"


# =============================================================================
# Error Translation
# =============================================================================

def status_for(exc: ShipEngineError) -> int:
    """HTTP status for a domain error."""
    if isinstance(exc, (ConfigurationNotFoundError, HullTypeNotFoundError)):
        return 404
    if isinstance(exc, (DisplacementOutOfRangeError, PowerRequirementError)):
        return 422
    return 400


def create_fastapi_app(
    config: Optional[ShipEngineConfig] = None,
    configurations: Optional[ConfigurationRegistry] = None,
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        config: Application configuration (defaults to get_config())
        configurations: Configuration table served and used for calculations

    Returns:
        FastAPI application instance
    """
    config = config if config is not None else get_config()
    registry = configurations if configurations is not None else DEFAULT_REGISTRY
    calculator = EngineSystemCalculator(configurations=registry)

    app = FastAPI(
        title="SHIPENGINE API",
        description="Warship propulsion design and power formula calibration",
        version=SHIPENGINE_VERSION,
        docs_url=config.api.docs_url if config.api.enable_docs else None,
        redoc_url="/redoc" if config.api.enable_docs else None,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ShipEngineError)
    async def shipengine_error_handler(request: Request, exc: ShipEngineError):
        status = status_for(exc)
        logger.warning(f"{request.method} {request.url.path} -> {status}: {exc.message}")
        return JSONResponse(status_code=status, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Rejected inputs may be non-finite floats, which JSON cannot carry
        errors = [
            {k: v for k, v in e.items() if k not in ("input", "ctx")}
            for e in exc.errors()
        ]
        return JSONResponse(status_code=422, content={"detail": errors})

    # =========================================================================
    # Health Endpoints
    # =========================================================================

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": SHIPENGINE_VERSION,
            "configurations": len(registry),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    # =========================================================================
    # Engine Design Endpoints
    # =========================================================================

    @app.get("/api/v1/configurations")
    async def list_configurations(year: Optional[int] = Query(None)) -> List[Dict[str, Any]]:
        """List propulsion configurations, optionally those in service by a year."""
        configs = registry.available_in(year) if year is not None else list(registry)
        return [c.to_dict() for c in configs]

    @app.get("/api/v1/configurations/{configuration_id}")
    async def get_configuration(configuration_id: str) -> Dict[str, Any]:
        return registry.get(configuration_id.upper()).to_dict()

    @app.post("/api/v1/engine/calculate")
    async def calculate_engine(design: EngineDesignInput) -> Dict[str, Any]:
        """Size one configuration for the requested hull and speed."""
        output = calculator.calculate(design)
        logger.info(
            f"Calculated {output.configuration_id}: {output.max_power:.0f} hp, "
            f"{output.total_engine_weight:.1f} t"
        )
        return output.to_dict()

    @app.post("/api/v1/engine/compare")
    async def compare_engines(design: CompareRequest) -> Dict[str, Any]:
        """Size every configuration for the same request."""
        outputs = calculator.compare(design)
        return {
            "count": len(outputs),
            "results": [o.to_dict() for o in outputs],
        }

    # =========================================================================
    # Calibration Endpoint
    # =========================================================================

    @app.get("/api/v1/calibration")
    def calibration(
        extended: bool = Query(False),
        baseline_speed: Optional[float] = Query(None, gt=0),
        dataset: Optional[str] = Query(None),
    ) -> Dict[str, Any]:
        """Run the formula calibration harness on the configured dataset."""
        settings = config.analysis
        if dataset is not None and dataset not in BUILTIN_DATASETS:
            raise HTTPException(
                status_code=422,
                detail=f"Unknown dataset {dataset!r}; expected one of {sorted(BUILTIN_DATASETS)}",
            )

        source = dataset or settings.vessel_dataset
        try:
            vessels = resolve_vessel_dataset(source)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Cannot read dataset {source}: {e}")
            raise HTTPException(status_code=503, detail=f"Vessel dataset not available: {source}")

        report = run_calibration(
            vessels,
            include_extended=extended or settings.include_extended_formulas,
            baseline_speed=baseline_speed or settings.baseline_speed_kts,
            fleet_average=settings.fleet_average_coefficient,
            outlier_threshold=settings.outlier_threshold,
        )
        return report.to_dict()

    return app

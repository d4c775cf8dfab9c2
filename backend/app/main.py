"""FastAPI application - beach conditions engine."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from backend.app.api.routes.beach_conditions import router as beach_conditions_router
from backend.app.api.routes.health import router as health_router
from backend.app.api.routes.metrics import router as metrics_router
from backend.app.api.routes.pulse import router as pulse_router
from backend.app.conditions.aggregator import ConditionsError

logger = logging.getLogger(__name__)

app = FastAPI(title="Tulum Beach Conditions API", version="0.1.0")

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(beach_conditions_router, tags=["conditions"])
app.include_router(pulse_router, tags=["conditions"])


@app.exception_handler(ConditionsError)
async def conditions_error_handler(request: Request, exc: ConditionsError) -> JSONResponse:
    """Hard aggregation failures surface as a single 500."""
    logger.error("%s failed: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Any other uncaught failure also yields 500 with an error message."""
    logger.exception("%s failed", request.url.path)
    return JSONResponse(status_code=500, content={"error": str(exc) or type(exc).__name__})


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Tulum Beach Conditions API", "version": "0.1.0"}

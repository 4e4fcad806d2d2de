"""
B-BBEE Scoring Service - Main Application
=========================================

FastAPI application for business accounts, category submissions and
B-BBEE score calculation.

Version: 0.1.0
"""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

from shared.config import settings
from shared.database import MongoDBClient
from shared.logging import get_logger, setup_logging
from shared.models.common import ErrorResponse, HealthResponse

from services.bbbee_scoring.engine.exceptions import ScoringError
from services.bbbee_scoring.engine.scorecards import audit_scorecards
from services.bbbee_scoring.models.submissions import CATEGORY_DEFINITIONS
from services.bbbee_scoring.routes import auth, categories, profile, scorecards, scores

# Setup logging
setup_logging(
    log_level=settings.log_level.value,
    json_logs=settings.is_production,
    service_name="bbbee-scoring",
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    """Application lifespan manager."""
    logger.info(
        "bbbee_scoring_starting",
        environment=settings.environment.value,
        port=settings.ports.bbbee_scoring,
    )

    # Scorecard totals differ between sectors; surface them on every start
    audit_scorecards()

    # Startup
    try:
        await MongoDBClient.create_indexes(
            definition.collection for definition in CATEGORY_DEFINITIONS
        )
        logger.info("mongodb_connected")

    except Exception as e:
        logger.error("startup_failed", error=str(e))
        raise

    yield

    # Shutdown
    logger.info("bbbee_scoring_shutting_down")
    await MongoDBClient.close()


# Create FastAPI application
app = FastAPI(
    title="Forge B-BBEE Scoring Service",
    description="Business accounts, category submissions and B-BBEE scoring",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins_list,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Health Check Endpoints
# ============================================================================


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """
    Service health check.

    Returns health status of the service and its dependencies.
    """
    components: dict[str, dict[str, Any]] = {
        "mongodb": await MongoDBClient.health_check(),
    }

    all_healthy = all(
        c.get("status") == "healthy" for c in components.values()
    )

    return HealthResponse(
        status="healthy" if all_healthy else "degraded",
        service="bbbee-scoring",
        version="0.1.0",
        components=components,
    )


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "service": "Forge B-BBEE Scoring Service",
        "version": "0.1.0",
        "docs": "/docs",
    }


# ============================================================================
# Include Routers
# ============================================================================

app.include_router(
    auth.router,
    prefix="/auth",
    tags=["Auth"],
)

app.include_router(
    profile.router,
    prefix="/api/v1/profile",
    tags=["Profile"],
)

app.include_router(
    categories.router,
    prefix="/api/v1/categories",
    tags=["Categories"],
)

app.include_router(
    scorecards.router,
    prefix="/api/v1/scorecards",
    tags=["Scorecards"],
)

app.include_router(
    scores.router,
    prefix="/api/v1/scores",
    tags=["Scores"],
)


# ============================================================================
# Error Handlers
# ============================================================================


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Any, exc: HTTPException) -> Any:
    """Handle HTTP exceptions."""
    from fastapi.responses import JSONResponse

    logger.warning(
        "http_exception",
        status_code=exc.status_code,
        detail=exc.detail,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=exc.detail,
            status_code=exc.status_code,
        ).model_dump(mode="json"),
        headers=exc.headers,
    )


@app.exception_handler(ScoringError)
async def scoring_exception_handler(request: Any, exc: ScoringError) -> Any:
    """Handle records the scoring engine cannot aggregate."""
    from fastapi.responses import JSONResponse

    logger.warning(
        "scoring_error",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ErrorResponse(
            error=str(exc),
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        ).model_dump(mode="json"),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Any, exc: Exception) -> Any:
    """Handle unexpected exceptions."""
    from fastapi.responses import JSONResponse

    logger.error(
        "unhandled_exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error="Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        ).model_dump(mode="json"),
    )


# ============================================================================
# Run with Uvicorn
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "services.bbbee_scoring.main:app",
        host="0.0.0.0",
        port=settings.ports.bbbee_scoring,
        reload=settings.debug,
        log_level=settings.log_level.value.lower(),
    )

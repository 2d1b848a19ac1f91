"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, college_directory.api, college_directory.observability, college_directory.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from college_directory import __version__
from college_directory.api import api_router
from college_directory.api.deps.dependencies import get_service_cache
from college_directory.configs import get_settings
from college_directory.core.exceptions import DatasetLoadError
from college_directory.observability.logger import configure_logging
from college_directory.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and loads the dataset once so a broken dataset
    fails startup instead of the first request.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    cache = get_service_cache()
    try:
        repository = cache.repository
    except DatasetLoadError:
        logger.exception("Failed to load directory dataset")
        raise

    logger.info(
        "Application startup complete: dataset loaded",
        extra={"college_count": len(repository.colleges())},
    )

    yield

    cache.clear()
    logger.info("Application shutdown")


async def dataset_unavailable_handler(request: Request, exc: DatasetLoadError) -> JSONResponse:
    """Map dataset failures raised while resolving dependencies to 503."""
    logger.error(
        "Dataset unavailable",
        extra={"path": request.url.path, "error": str(exc)},
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Directory dataset is unavailable"},
    )


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="College Directory API",
        description="Read-only directory of colleges, departments, classes and students",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(DatasetLoadError, dataset_unavailable_handler)

    # Register API routes
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "college_directory.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
    )

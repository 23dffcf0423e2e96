"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from vercel_deployer import __version__
from vercel_deployer.api.middleware import RequestLoggingMiddleware
from vercel_deployer.api.v1.router import router as v1_router
from vercel_deployer.config import settings
from vercel_deployer.core.exceptions import NodeOperationError, VercelDeployerError
from vercel_deployer.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    configure_logging()
    logger.info(
        "application.starting",
        version=__version__,
        environment=settings.app_env,
        team_scoped=bool(settings.vercel_team_id),
    )

    yield

    # Shutdown
    logger.info("application.shutdown")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Vercel Deployer API",
        description="Deploy static HTML pages to Vercel from workflow pipelines",
        version=__version__,
        docs_url="/docs" if settings.app_debug else None,
        redoc_url="/redoc" if settings.app_debug else None,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers
    @app.exception_handler(VercelDeployerError)
    async def deployer_error_handler(
        request: Request, exc: VercelDeployerError
    ) -> JSONResponse:
        """Handle application-specific errors."""
        error = exc.cause if isinstance(exc, NodeOperationError) else exc
        details = dict(exc.details)
        if error is not exc and isinstance(error, VercelDeployerError):
            details.update(error.details)
        return JSONResponse(
            status_code=exc.http_status,
            content={
                "error": {
                    "code": type(error).__name__.upper(),
                    "message": exc.message,
                    "details": details,
                }
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected errors."""
        logger.error(
            "unhandled_exception",
            error=str(exc),
            path=request.url.path,
            exc_info=True,
        )

        if settings.is_development:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": {
                        "code": "INTERNAL_ERROR",
                        "message": str(exc),
                        "type": type(exc).__name__,
                    }
                },
            )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                }
            },
        )

    # Include routers
    app.include_router(v1_router)

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "vercel_deployer.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development,
    )

"""
Paged Resources Service - Main Application

This is the main FastAPI application that serves paged collections with
hypermedia navigation links.
"""

from contextlib import asynccontextmanager
import os

from fastapi import FastAPI, Request, status, Depends
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings, Settings
from app.core.logging import configure_logging, get_logger
from app.api.v1.endpoints.people import router as people_router
from app.models.errors import ErrorsResponse, ErrorDetail, ErrorKind, PagingException

# Configure logging before creating the logger
configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.
    Handles startup and shutdown events.
    """
    settings = get_settings()
    logger.info(
        "Starting Paged Resources Service",
        environment=settings.environment,
        one_indexed_parameters=settings.pagination.one_indexed_parameters,
        base_uri=settings.pagination.base_uri
    )
    yield
    logger.info("Paged Resources Service shut down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="REST API serving paged collections with navigation links",
        version=settings.app_version,
        lifespan=lifespan
    )

    setup_middleware(app, settings)
    setup_exception_handlers(app)
    setup_routers(app)
    setup_health_check(app)

    logger.info("FastAPI application created")
    return app


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Set up application middleware."""

    # CORS middleware
    if settings.cors.enabled:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors.allowed_origins,
            allow_credentials=settings.cors.allow_credentials,
            allow_methods=settings.cors.allowed_methods,
            allow_headers=settings.cors.allowed_headers,
            expose_headers=["Link"],
        )
        logger.info("CORS middleware enabled")

    # GZip compression middleware
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    logger.info("GZip middleware enabled")


def setup_routers(app: FastAPI) -> None:
    """Set up API routers."""
    app.include_router(people_router, prefix="/api/v1")
    logger.info("API routers configured")


def _errors_response(status_code: int, error_detail: ErrorDetail) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorsResponse(errors=[error_detail]).model_dump(exclude_none=True)
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Set up global exception handlers for consistent error responses."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle FastAPI request validation errors - convert to InvalidParameters format."""
        logger.warning(
            "Request validation error",
            method=request.method,
            path=str(request.url.path),
            errors=exc.errors()
        )
        parameters = [str(error["loc"][-1]) for error in exc.errors() if error.get("loc")]
        return _errors_response(
            status.HTTP_400_BAD_REQUEST,
            ErrorDetail(
                kind=ErrorKind.INVALID_PARAMETERS,
                parameters=parameters,
                message="Invalid query parameter(s) provided.",
                reason="The parameter value is invalid or incorrectly formatted."
            )
        )

    @app.exception_handler(PagingException)
    async def paging_exception_handler(request: Request, exc: PagingException):
        """Handle service exceptions raised outside of dependencies."""
        log = logger.error if exc.status_code >= 500 else logger.info
        log(
            "Request failed",
            kind=exc.kind,
            method=request.method,
            path=str(request.url.path),
            error=exc.message
        )
        return _errors_response(exc.status_code, exc.to_error_detail())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions, including 404s for non-existent routes."""
        # If detail is already a structured error response, return it
        if isinstance(exc.detail, dict) and "errors" in exc.detail:
            return JSONResponse(
                status_code=exc.status_code,
                content=exc.detail,
                headers=getattr(exc, "headers", None)
            )

        if exc.status_code == 404:
            logger.warning(
                "Invalid route requested",
                method=request.method,
                route=str(request.url.path)
            )
            return _errors_response(
                status.HTTP_404_NOT_FOUND,
                ErrorDetail(
                    kind=ErrorKind.INVALID_ROUTE,
                    method=request.method,
                    route=str(request.url.path),
                    message="Invalid route requested."
                )
            )

        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        """Handle all unhandled exceptions."""
        logger.error(
            "Unhandled exception",
            path=str(request.url.path),
            method=request.method,
            error=str(exc),
            exc_info=True
        )
        return _errors_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorDetail(
                kind=ErrorKind.INTERNAL_SERVER_ERROR,
                message="An internal server error occurred"
            )
        )

    logger.info("Exception handlers configured")


def setup_health_check(app: FastAPI) -> None:
    """Set up health check endpoints."""

    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "paged-resources-service"}

    @app.get("/ping", tags=["ping"])
    async def ping():
        """Liveness endpoint."""
        return {"status": "pong"}

    @app.get("/version", tags=["version"])
    async def version(settings: Settings = Depends(get_settings)):
        """Version endpoint."""
        # Use API_VERSION environment variable if set, otherwise fall back to settings.app_version
        api_version = os.getenv("API_VERSION", settings.app_version)
        return {"version": api_version}

    logger.info("Health check endpoints configured")


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "app.main:app",
        host=settings.app.host,
        port=settings.app.port,
        reload=settings.app.debug,
        log_config=None,  # We handle logging ourselves
        access_log=False
    )

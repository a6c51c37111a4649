"""
Common FastAPI application factory with standard middleware and configuration.

This module provides a factory function for creating FastAPI applications with
consistent configuration, middleware, and error handling.

Features:
    - Automatic logging setup
    - CORS configuration (wildcard unless origins are configured)
    - Request timing middleware
    - Envelope-shaped exception handling
    - Root and health check endpoints
    - OpenAPI documentation

Endpoints:
    - GET /: Root endpoint returning the running message
    - GET /health: Health check endpoint
    - GET /docs: Swagger UI documentation
    - GET /redoc: ReDoc documentation

Usage:
    ```python
    from common.fastapi import create_fastapi_app
    from fastapi import APIRouter

    api_router = APIRouter()

    @api_router.post("/login")
    async def login():
        ...

    app = create_fastapi_app(
        service_name="auth-service",
        description="Authentication façade",
        api_router=api_router,
    )
    ```
"""

from collections.abc import Callable
import time
from typing import Any

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from loguru import logger

from common.config import get_settings
from common.exceptions import register_exception_handlers
from common.logging import setup_logging


def create_fastapi_app(
    service_name: str,
    description: str,
    api_router: APIRouter | None = None,
    lifespan: Callable[[FastAPI], Any] | None = None,
    root_message: str | None = None,
) -> FastAPI:
    """
    Create a FastAPI application with standardized configuration and middleware.

    Args:
        service_name: Name of the service (e.g., "auth-service"). Used to load
            service-specific settings and configure logging.
        description: Human-readable description used in OpenAPI metadata.
        api_router: Optional APIRouter; included under the API_PREFIX setting.
        lifespan: Optional lifespan context manager factory, used to build and
            release shared resources such as provider clients.
        root_message: Message returned by `GET /`. Defaults to
            "{SERVICE_NAME} is running".

    Returns:
        Fully configured FastAPI application instance ready to run.

    Note:
        - Every error response uses the `{success: false, message}` envelope
        - Unhandled exceptions never leak details; they become a generic 500
    """

    # Setup logging first
    setup_logging(service_name)

    # Get service settings
    settings = get_settings(service_name)

    app = FastAPI(
        title=settings.SERVICE_NAME,
        version=settings.SERVICE_VERSION,
        description=description,
        openapi_url="/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Browsers reject credentials together with a wildcard origin
    allow_all_origins = "*" in settings.CORS_ORIGINS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all_origins else settings.CORS_ORIGINS,
        allow_credentials=not allow_all_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add request timing middleware
    @app.middleware("http")
    async def add_process_time_header(
        request: Request, call_next: Callable[[Request], Any]
    ) -> Response:
        """Add process time header to responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        logger.info(
            f"{request.method} {request.url.path} - {response.status_code} - {process_time:.3f}s"
        )
        return response

    register_exception_handlers(app)

    # Include API router if provided
    if api_router:
        app.include_router(api_router, prefix=settings.API_PREFIX)

    # Standard health check endpoint
    @app.get("/health")
    async def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {
            "service": settings.SERVICE_NAME,
            "version": settings.SERVICE_VERSION,
            "status": "healthy",
            "timestamp": time.time(),
        }

    message = root_message or f"{settings.SERVICE_NAME} is running"

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint."""
        return {"message": message}

    return app

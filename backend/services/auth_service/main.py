"""
Authentication Service - FastAPI Application Entrypoint

This module serves as the main entry point for the Authentication Service, a thin
façade that forwards account requests to Supabase Auth and returns a uniform
JSON envelope. It provides RESTful APIs for:

- Account signup with email verification links
- Email/password login
- Logout
- Email verification and resending the verification email

Architecture:
    - API Layer: FastAPI endpoints handling HTTP requests/responses
    - Service Layer: Input validation and provider result translation
    - Client Layer: The Supabase Auth client, created once at startup

Example:
    To run the service locally (from the backend directory):
        ```bash
        uvicorn services.auth_service:app --port 3000 --reload
        ```

    The service will be available at:
        - API Base: http://localhost:3000/api
        - Swagger UI: http://localhost:3000/docs
        - Health Check: http://localhost:3000/health

Attributes:
    app (FastAPI): The FastAPI application instance
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from common.fastapi import create_fastapi_app
from services.auth_service.api.dependencies import get_auth_settings
from services.auth_service.api.v1.api import api_router
from services.auth_service.clients.supabase_auth import SupabaseAuthProvider

SERVICE_NAME = "auth-service"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the shared provider client before serving requests."""
    provider = await SupabaseAuthProvider.create(get_auth_settings())
    app.state.auth_provider = provider
    try:
        yield
    finally:
        logger.info(f"{SERVICE_NAME} shutting down")
        await provider.aclose()


app = create_fastapi_app(
    service_name=SERVICE_NAME,
    description="Account authentication façade over Supabase Auth",
    api_router=api_router,
    lifespan=lifespan,
    root_message="My Universe API is running",
)


if __name__ == "__main__":
    import uvicorn

    settings = get_auth_settings()
    logger.info(f"Server is running on port {settings.PORT}")
    uvicorn.run(
        "services.auth_service.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )

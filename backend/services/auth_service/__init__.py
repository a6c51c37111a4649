"""
Authentication Service Package

This package exports the FastAPI application instance for use with ASGI servers
like Uvicorn or Gunicorn.

The package structure:
    - main.py: FastAPI application entrypoint
    - api/: API layer with endpoints and models
    - services/: Business logic layer
    - clients/: Identity provider client

Usage:
    ```python
    from services.auth_service import app

    # uvicorn services.auth_service:app --port 3000
    ```
"""

from services.auth_service.main import app

__all__ = ["app"]

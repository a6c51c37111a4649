"""
Common utilities and shared code for the My Universe backend services.

Modules:
    - config: Centralized configuration management with environment-based settings
    - exceptions: Standardized error handling and the JSON error envelope
    - fastapi: FastAPI application factory with common middleware and configuration
    - logging: Centralized logging configuration using loguru

Usage:
    ```python
    from common.config import get_settings
    from common.exceptions import APIError
    from common.logging import setup_logging
    ```
"""

__version__ = "0.1.0"

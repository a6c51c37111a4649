"""
Common logging configuration for backend services.

This module provides centralized logging configuration using loguru. It configures
both console and file-based logging with appropriate formatting, rotation, and
retention policies.

Log Files (written to LOG_DIR, default "logs"):
    - {service_name}.log: All logs at configured level (default: INFO)
    - {service_name}-error.log: Only ERROR level logs

Log Rotation:
    - Error logs: Rotate at 10 MB, retain 30 days, compress with zip
    - General logs: Rotate at 50 MB, retain 7 days, compress with zip

Example:
    ```python
    from common.logging import setup_logging

    setup_logging("auth-service")

    from loguru import logger
    logger.info("Service started successfully")
    ```
"""

from pathlib import Path
import sys

from loguru import logger

from common.config import get_settings

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_logging(service_name: str | None = None) -> None:
    """
    Configure logging for the application using loguru.

    Removes the default loguru handler, adds a colorized console handler and,
    unless LOG_DIR is empty, service-specific rotating file handlers.

    Args:
        service_name: Optional name of the service (e.g., "auth-service"). Used to
            pick the settings class and to name the log files.

    Note:
        - Call this early in application startup; calling it again replaces the handlers
        - The log directory is created relative to the current working directory
    """

    settings = get_settings(service_name)

    # Remove default handler
    logger.remove()

    # Add console handler with custom format
    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>",
        level=settings.LOG_LEVEL,
        colorize=True,
    )

    if not settings.LOG_DIR:
        return

    logs_dir = Path(settings.LOG_DIR)
    logs_dir.mkdir(parents=True, exist_ok=True)

    log_name = service_name or "app"

    logger.add(
        logs_dir / f"{log_name}-error.log",
        format=FILE_FORMAT,
        level="ERROR",
        rotation="10 MB",
        retention="30 days",
        compression="zip",
    )

    logger.add(
        logs_dir / f"{log_name}.log",
        format=FILE_FORMAT,
        level=settings.LOG_LEVEL,
        rotation="50 MB",
        retention="7 days",
        compression="zip",
    )

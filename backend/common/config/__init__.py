"""
Centralized configuration management for backend services.

This module provides a unified interface for accessing service-specific configuration
settings. It selects the appropriate settings class based on the service name.

The configuration system uses Pydantic Settings, which automatically loads values from:
    1. Environment variables (highest priority)
    2. .env file in the working directory
    3. Default values defined in the settings classes

Service-Specific Settings:
    - AuthServiceSettings: Configuration for auth-service
    - BaseServiceSettings: Base configuration shared by all services

Example:
    ```python
    from common.config import get_settings

    settings = get_settings("auth-service")
    print(settings.SERVICE_NAME)  # "auth-service"
    print(settings.PORT)  # 3000
    ```
"""

from common.config.settings import AuthServiceSettings, BaseServiceSettings


def get_settings(service_name: str | None = None) -> BaseServiceSettings:
    """
    Get settings instance for the specified service.

    Args:
        service_name: Name of the service to get settings for. Any name containing
            "auth" (case-insensitive) returns AuthServiceSettings; None or any other
            value returns BaseServiceSettings.

    Returns:
        Instance of the appropriate settings class.

    Note:
        - Settings are loaded from environment variables and .env file
        - Each call returns a new instance (settings are not cached)
    """
    if service_name and "auth" in service_name.lower():
        return AuthServiceSettings()
    # Default to base settings
    return BaseServiceSettings()


__all__ = [
    "AuthServiceSettings",
    "BaseServiceSettings",
    "get_settings",
]

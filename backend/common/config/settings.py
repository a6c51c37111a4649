"""
Centralized configuration management for backend services.

This module defines Pydantic Settings classes for managing configuration of the
authentication façade. It provides a base settings class shared by every
service and a service-specific subclass carrying the identity provider options.

Configuration Loading:
    Settings are loaded in the following priority order (highest to lowest):
    1. Environment variables
    2. .env file in the working directory
    3. Default values defined in the classes

Validation:
    All settings are validated using Pydantic validators to ensure:
    - Type correctness
    - Value constraints (e.g., valid port range, known log levels)
    - Format requirements (e.g., CORS origins parsing, redirect path shape)

Service Settings Hierarchy:
    BaseServiceSettings (base class)
    └── AuthServiceSettings

Example:
    ```python
    from common.config.settings import AuthServiceSettings

    settings = AuthServiceSettings()
    print(settings.SERVICE_NAME)  # "auth-service"
    print(settings.PORT)  # 3000
    ```

Environment Variables:
    All settings can be overridden via environment variables. For example:
    - PORT=3000
    - LOG_LEVEL=DEBUG
    - CORS_ORIGINS=http://localhost:4200,https://example.com
    - SUPABASE_URL=https://xyzcompany.supabase.co
"""

from typing import Any

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Constants
MAX_PORT = 65535
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
LOGOUT_SCOPES = ("global", "local", "others")


class BaseServiceSettings(BaseSettings):
    """
    Base settings class providing common configuration for all services.

    Attributes:
        SERVICE_NAME (str): Name identifier for the service. Default: "base-service"
        SERVICE_VERSION (str): Version string for the service. Default: "0.1.0"
        HOST (str): Interface the uvicorn entrypoint binds to. Default: "0.0.0.0"
        PORT (int): Port number the service listens on. Default: 8000

        ENVIRONMENT (str): Deployment environment. Values: "DEV" or "PROD". Default: "DEV"
        DEBUG (bool): Enable debug mode (uvicorn reload). Default: False
        LOG_LEVEL (str): Logging level. Default: "INFO"
        LOG_DIR (str): Directory for rotating log files. Empty disables file logging.

        API_PREFIX (str): Prefix for API routes. Default: "/api"
        CORS_ORIGINS (list[str]): Allowed CORS origins. Can be set via comma-separated
            string or list. Default: ["*"]

    Note:
        - CORS_ORIGINS can be set as a comma-separated string or a list
        - LOG_LEVEL is upper-cased and checked against the loguru levels
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Service Information (defaults)
    SERVICE_NAME: str = "base-service"
    SERVICE_VERSION: str = "0.1.0"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Global Configuration
    ENVIRONMENT: str = "DEV"  # Can be "DEV" or "PROD"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # API Configuration
    API_PREFIX: str = "/api"

    # CORS Configuration
    CORS_ORIGINS: Any = "*"

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Any) -> list[str]:
        """
        Assemble CORS origins from string or list format.

        Accepts either a comma-separated string ("http://a.com, http://b.com"),
        a list of strings, or "*" for every origin. Whitespace is stripped and
        empty entries are dropped; anything else yields an empty list.
        """
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int, info: ValidationInfo) -> int:
        if v < 1 or v > MAX_PORT:
            msg = f"{info.field_name} must be between 1 and {MAX_PORT}"
            raise ValueError(msg)
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any, info: ValidationInfo) -> str:
        level = str(v).upper()
        if level not in LOG_LEVELS:
            msg = f"{info.field_name} must be one of {', '.join(LOG_LEVELS)}, got: {v}"
            raise ValueError(msg)
        return level


class AuthServiceSettings(BaseServiceSettings):
    """
    Settings configuration for the authentication service.

    This class extends BaseServiceSettings with the options needed to reach the
    external identity provider (Supabase Auth) and to build the verification
    links embedded in provider emails.

    Inherited Attributes:
        All attributes from BaseServiceSettings are available with these overrides:
        - SERVICE_NAME: "auth-service"
        - PORT: 3000

    Additional Attributes:
        SUPABASE_URL (str): Project URL of the Supabase instance.
        SUPABASE_ANON_KEY (str): Public (anon) API key of the Supabase project.
        DEFAULT_REDIRECT_ORIGIN (str): Origin used for verification links when the
            request carries no Origin header. Default: "http://localhost:4200"
        EMAIL_REDIRECT_PATH (str): Path appended to the origin for verification
            links. Default: "/verify-email"
        LOGOUT_SCOPE (str): Scope used when revoking a caller's session on logout.
            One of "global", "local", "others". Default: "global"

    Example:
        ```python
        from common.config.settings import AuthServiceSettings

        settings = AuthServiceSettings()
        print(settings.SUPABASE_URL)
        print(settings.DEFAULT_REDIRECT_ORIGIN)  # "http://localhost:4200"
        ```

    Note:
        - Supabase credentials are checked when the provider client is created,
          so the app can still be imported (e.g., in tests) without them
        - The anon key is safe to ship to browsers, but keep it in env vars anyway
    """

    SERVICE_NAME: str = "auth-service"
    PORT: int = 3000

    # Identity Provider Configuration
    SUPABASE_URL: str = ""
    SUPABASE_ANON_KEY: str = ""

    # Email verification links
    DEFAULT_REDIRECT_ORIGIN: str = "http://localhost:4200"
    EMAIL_REDIRECT_PATH: str = "/verify-email"

    # Session termination
    LOGOUT_SCOPE: str = "global"

    @field_validator("DEFAULT_REDIRECT_ORIGIN")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("EMAIL_REDIRECT_PATH")
    @classmethod
    def normalize_redirect_path(cls, v: str) -> str:
        return v if v.startswith("/") else f"/{v}"

    @field_validator("LOGOUT_SCOPE", mode="before")
    @classmethod
    def validate_logout_scope(cls, v: Any, info: ValidationInfo) -> str:
        scope = str(v).lower()
        if scope not in LOGOUT_SCOPES:
            msg = f"{info.field_name} must be one of {', '.join(LOGOUT_SCOPES)}, got: {v}"
            raise ValueError(msg)
        return scope

"""
Shared API dependencies for the auth service.
"""

from functools import lru_cache

from fastapi import Depends, Request

from common.config.settings import AuthServiceSettings
from services.auth_service.clients.supabase_auth import SupabaseAuthProvider
from services.auth_service.services.auth_service import AuthenticationService


@lru_cache(maxsize=1)
def get_auth_settings() -> AuthServiceSettings:
    """
    Get cached auth service settings.
    Using lru_cache to ensure settings are read once per process.
    """
    return AuthServiceSettings()


def get_auth_provider(request: Request) -> SupabaseAuthProvider:
    """Return the provider client created during application startup."""
    return request.app.state.auth_provider


def get_auth_service(
    provider: SupabaseAuthProvider = Depends(get_auth_provider),
    settings: AuthServiceSettings = Depends(get_auth_settings),
) -> AuthenticationService:
    return AuthenticationService(provider, settings)

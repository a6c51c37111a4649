"""
Tests for service configuration.
"""

import pytest
from pydantic import ValidationError

from common.config import get_settings
from common.config.settings import AuthServiceSettings, BaseServiceSettings


def test_get_settings_selects_auth_settings():
    assert isinstance(get_settings("auth-service"), AuthServiceSettings)
    assert type(get_settings()) is BaseServiceSettings
    assert type(get_settings("other-service")) is BaseServiceSettings


def test_auth_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("CORS_ORIGINS", raising=False)

    settings = AuthServiceSettings()

    assert settings.SERVICE_NAME == "auth-service"
    assert settings.PORT == 3000
    assert settings.API_PREFIX == "/api"
    assert settings.CORS_ORIGINS == ["*"]
    assert settings.DEFAULT_REDIRECT_ORIGIN == "http://localhost:4200"
    assert settings.LOGOUT_SCOPE == "global"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("SUPABASE_URL", "https://xyz.supabase.co")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.com, http://b.com")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = AuthServiceSettings()

    assert settings.PORT == 8080
    assert settings.SUPABASE_URL == "https://xyz.supabase.co"
    assert settings.CORS_ORIGINS == ["http://a.com", "http://b.com"]
    assert settings.LOG_LEVEL == "DEBUG"


def test_redirect_settings_are_normalized():
    settings = AuthServiceSettings(
        DEFAULT_REDIRECT_ORIGIN="https://app.example.com/",
        EMAIL_REDIRECT_PATH="confirm",
    )

    assert settings.DEFAULT_REDIRECT_ORIGIN == "https://app.example.com"
    assert settings.EMAIL_REDIRECT_PATH == "/confirm"


@pytest.mark.parametrize(
    "overrides",
    [{"PORT": 0}, {"PORT": 70000}, {"LOG_LEVEL": "LOUD"}, {"LOGOUT_SCOPE": "everyone"}],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ValidationError):
        AuthServiceSettings(**overrides)

"""
Pytest configuration and fixtures for auth service tests.
"""

import os
from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock
import uuid

import pytest
from supabase import AuthError


# Set test environment variables before importing modules
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("LOG_DIR", "")
os.environ.setdefault("LOG_LEVEL", "WARNING")


class FakeAuthError(AuthError):
    """Provider error carrying a message and an optional error code."""

    def __init__(self, message: str, code: Optional[str] = None):
        Exception.__init__(self, message)
        self.message = message
        self.code = code
        self.status = 400


class FakeAuthProvider:
    """
    In-memory stand-in for SupabaseAuthProvider.

    Behaves like a project with email confirmation enabled: new users start
    unconfirmed and get a verification token hash that verify_otp accepts.
    """

    def __init__(self, require_confirmation: bool = True, reject_unconfirmed: bool = True):
        self.require_confirmation = require_confirmation
        self.reject_unconfirmed = reject_unconfirmed
        self.users: Dict[str, Dict[str, Any]] = {}
        self.token_hashes: Dict[str, str] = {}
        self.calls: List[tuple] = []

    def _user(self, record: Dict[str, Any]) -> SimpleNamespace:
        return SimpleNamespace(
            id=record["id"],
            email=record["email"],
            email_confirmed_at=record["email_confirmed_at"],
        )

    def _session(self) -> SimpleNamespace:
        return SimpleNamespace(access_token=f"access-{uuid.uuid4().hex}")

    async def sign_up(self, email: str, password: str, redirect_to: str):
        self.calls.append(("sign_up", email, redirect_to))
        if email in self.users:
            raise FakeAuthError("User already registered", "user_already_exists")
        if len(password) < 6:
            raise FakeAuthError("Password should be at least 6 characters.", "weak_password")

        confirmed_at = None if self.require_confirmation else datetime.now(timezone.utc)
        record = {
            "id": str(uuid.uuid4()),
            "email": email,
            "password": password,
            "email_confirmed_at": confirmed_at,
        }
        self.users[email] = record
        self.token_hashes[f"hash-{record['id']}"] = email
        session = None if self.require_confirmation else self._session()
        return SimpleNamespace(user=self._user(record), session=session)

    async def sign_in_with_password(self, email: str, password: str):
        self.calls.append(("sign_in_with_password", email))
        record = self.users.get(email)
        if record is None or record["password"] != password:
            raise FakeAuthError("Invalid login credentials", "invalid_credentials")
        if record["email_confirmed_at"] is None and self.reject_unconfirmed:
            raise FakeAuthError("Email not confirmed", "email_not_confirmed")
        return SimpleNamespace(user=self._user(record), session=self._session())

    async def sign_out(self, access_token: Optional[str] = None):
        self.calls.append(("sign_out", access_token))

    async def verify_otp(self, token_hash: str, otp_type: str):
        self.calls.append(("verify_otp", token_hash, otp_type))
        email = self.token_hashes.pop(token_hash, None)
        if email is None or otp_type not in ("signup", "email"):
            raise FakeAuthError("Email link is invalid or has expired", "otp_expired")
        record = self.users[email]
        record["email_confirmed_at"] = datetime.now(timezone.utc)
        return SimpleNamespace(user=self._user(record), session=self._session())

    async def resend_signup_email(self, email: str, redirect_to: str):
        self.calls.append(("resend_signup_email", email, redirect_to))
        return SimpleNamespace(user=None, session=None)


@pytest.fixture
def fake_provider() -> FakeAuthProvider:
    """Return an in-memory provider requiring email confirmation."""
    return FakeAuthProvider()


@pytest.fixture
def auth_settings():
    """Return auth settings with the default redirect origin."""
    from common.config.settings import AuthServiceSettings

    return AuthServiceSettings(
        SUPABASE_URL="http://localhost:54321",
        SUPABASE_ANON_KEY="test-anon-key",
        DEFAULT_REDIRECT_ORIGIN="http://localhost:4200",
    )


@pytest.fixture
def mock_provider():
    """Return a mock provider for service-level tests."""
    mock = MagicMock()
    mock.sign_up = AsyncMock()
    mock.sign_in_with_password = AsyncMock()
    mock.sign_out = AsyncMock(return_value=None)
    mock.verify_otp = AsyncMock()
    mock.resend_signup_email = AsyncMock()
    return mock


@pytest.fixture
def make_auth_response():
    """Build provider-shaped responses."""
    def _make(
        user_id: str = "123e4567-e89b-12d3-a456-426614174000",
        email: str = "a@b.com",
        confirmed: bool = False,
        access_token: Optional[str] = None,
    ):
        user = SimpleNamespace(
            id=user_id,
            email=email,
            email_confirmed_at="2026-01-01T00:00:00Z" if confirmed else None,
        )
        session = SimpleNamespace(access_token=access_token) if access_token else None
        return SimpleNamespace(user=user, session=session)

    return _make


@pytest.fixture
def client(fake_provider):
    """Return a TestClient whose provider dependency is the in-memory fake."""
    from fastapi.testclient import TestClient

    from services.auth_service.api.dependencies import get_auth_provider
    from services.auth_service.main import app

    app.dependency_overrides[get_auth_provider] = lambda: fake_provider
    # Not entered as a context manager, so the lifespan never builds a real client
    yield TestClient(app)
    app.dependency_overrides.clear()

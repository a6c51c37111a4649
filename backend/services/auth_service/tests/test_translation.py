"""
Tests for provider result/error translation.
"""

from types import SimpleNamespace

from conftest import FakeAuthError
from services.auth_service.services.translation import (
    access_token_of,
    is_email_confirmed,
    is_email_not_confirmed_error,
    provider_error,
    serialize_user,
)


def test_confirmation_follows_timestamp():
    assert is_email_confirmed(SimpleNamespace(email_confirmed_at="2026-01-01T00:00:00Z")) is True
    assert is_email_confirmed(SimpleNamespace(email_confirmed_at=None)) is False
    assert is_email_confirmed(SimpleNamespace()) is False


def test_serialize_user():
    user = SimpleNamespace(id="u-1", email="a@b.com", email_confirmed_at=None)

    assert serialize_user(user) == {"id": "u-1", "email": "a@b.com", "email_confirmed": False}


def test_access_token_absent_without_session():
    assert access_token_of(SimpleNamespace(session=None)) is None
    assert access_token_of(SimpleNamespace(session=SimpleNamespace(access_token="tok"))) == "tok"


def test_email_not_confirmed_detection():
    assert is_email_not_confirmed_error(FakeAuthError("Email not confirmed"))
    assert is_email_not_confirmed_error(FakeAuthError("anything", code="email_not_confirmed"))
    assert not is_email_not_confirmed_error(FakeAuthError("Invalid login credentials", code="invalid_credentials"))
    assert not is_email_not_confirmed_error(ValueError("email not confirmed"))


def test_provider_error_keeps_message():
    error = FakeAuthError("User already registered")

    api_error = provider_error(error, 400)

    assert api_error.status_code == 400
    assert api_error.message == "User already registered"
    assert api_error.internal_error is error

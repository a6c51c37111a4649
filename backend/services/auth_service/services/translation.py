"""
Translation between Supabase Auth results and the service's response shapes.

Everything that depends on how the provider represents users, sessions and
errors lives here, including the "email not confirmed" convention used to
route unverified logins to the needsVerification branch.
"""

from typing import Any

from common.exceptions import APIError

EMAIL_NOT_CONFIRMED_CODE = "email_not_confirmed"
EMAIL_NOT_CONFIRMED_TEXT = "Email not confirmed"


def is_email_confirmed(user: Any) -> bool:
    """A user is confirmed once the provider has stamped `email_confirmed_at`."""
    return bool(getattr(user, "email_confirmed_at", None))


def serialize_user(user: Any) -> dict[str, Any]:
    return {
        "id": user.id,
        "email": user.email,
        "email_confirmed": is_email_confirmed(user),
    }


def access_token_of(response: Any) -> str | None:
    session = getattr(response, "session", None)
    return session.access_token if session else None


def provider_message(error: Exception) -> str:
    return getattr(error, "message", None) or str(error)


def is_email_not_confirmed_error(error: Exception) -> bool:
    """
    Tell whether a provider error means the account's email is unverified.

    Prefers the structured error code newer provider versions send, and falls
    back to matching the provider's current wording.
    """
    if getattr(error, "code", None) == EMAIL_NOT_CONFIRMED_CODE:
        return True
    return EMAIL_NOT_CONFIRMED_TEXT in provider_message(error)


def provider_error(error: Exception, status_code: int) -> APIError:
    """Wrap a provider-reported failure, passing its message through to the client."""
    return APIError(provider_message(error), status_code=status_code, internal_error=error)

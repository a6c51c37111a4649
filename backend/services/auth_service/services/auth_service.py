"""
Authentication Service - Core Business Logic

This module implements the account flows of the authentication service. Every
stateful step (credential storage, token issuance, email delivery) is delegated
to Supabase Auth; this layer only validates input, calls the provider once and
reshapes the result.

Error Tiers:
    1. Missing input: APIError 400 with a fixed message, before any provider call
    2. Provider-reported errors (supabase.AuthError): APIError 400 or 401 carrying
       the provider's message
    3. Anything else: logged with traceback and raised as a generic 500

Example:
    ```python
    service = AuthenticationService(provider, settings)

    result = await service.login("a@b.com", "secret123")
    token = result["token"]
    ```

See Also:
    - services.auth_service.api.v1.endpoints.auth: API endpoints using this service
    - services.auth_service.clients.supabase_auth: Provider client
    - services.auth_service.services.translation: Provider result/error translation
"""

from typing import Any

from loguru import logger
from supabase import AuthError

from common.config.settings import AuthServiceSettings
from common.exceptions import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    APIError,
    internal_server_error,
)
from services.auth_service.clients.supabase_auth import SupabaseAuthProvider
from services.auth_service.services.translation import (
    access_token_of,
    is_email_confirmed,
    is_email_not_confirmed_error,
    provider_error,
    serialize_user,
)

MISSING_CREDENTIALS_MESSAGE = "Email and password are required"
MISSING_VERIFICATION_MESSAGE = "Token hash and type are required"
MISSING_EMAIL_MESSAGE = "Email is required"

NEEDS_VERIFICATION_MESSAGE = "Please check your email to verify your account"
ACCOUNT_CREATED_MESSAGE = "Account created successfully"
VERIFY_BEFORE_LOGIN_MESSAGE = "Please verify your email before logging in"
LOGGED_OUT_MESSAGE = "Logged out successfully"
EMAIL_VERIFIED_MESSAGE = "Email verified successfully"
VERIFICATION_SENT_MESSAGE = "Verification email sent successfully"


def unverified_login_error() -> APIError:
    return APIError(
        VERIFY_BEFORE_LOGIN_MESSAGE,
        status_code=HTTP_401_UNAUTHORIZED,
        payload={"needsVerification": True},
    )


class AuthenticationService:
    """
    Account authentication flows over an external identity provider.

    The service is stateless: it holds only the injected provider client and the
    settings used to build verification links. One instance can serve any number
    of concurrent requests.

    Attributes:
        provider: Process-wide Supabase Auth client.
        settings: Auth service settings (redirect origin and path).
    """

    def __init__(self, provider: SupabaseAuthProvider, settings: AuthServiceSettings) -> None:
        self.provider = provider
        self.settings = settings

    def build_redirect_url(self, origin: str | None) -> str:
        """
        Build the link embedded in verification emails.

        Uses the caller's Origin header when present, otherwise the configured
        default origin, e.g. "http://localhost:4200/verify-email".
        """
        base = (origin or self.settings.DEFAULT_REDIRECT_ORIGIN).rstrip("/")
        return f"{base}{self.settings.EMAIL_REDIRECT_PATH}"

    async def signup(
        self, email: str | None, password: str | None, origin: str | None = None
    ) -> dict[str, Any]:
        """
        Register a new account with the provider.

        Returns:
            dict with keys success, needs_verification, user, token, message.
            needs_verification is exactly the negation of the created user's
            confirmation state; token is None when the provider opened no session.

        Raises:
            APIError: 400 for missing fields or a provider rejection, 500 otherwise.
        """
        if not email or not password:
            raise APIError(MISSING_CREDENTIALS_MESSAGE, status_code=HTTP_400_BAD_REQUEST)

        redirect_to = self.build_redirect_url(origin)
        try:
            response = await self.provider.sign_up(email, password, redirect_to)
            user = serialize_user(response.user)
            token = access_token_of(response)
        except AuthError as e:
            logger.warning(f"Signup rejected by provider: {e}")
            raise provider_error(e, HTTP_400_BAD_REQUEST) from e
        except Exception as e:
            raise internal_server_error("Signup", e) from e

        needs_verification = not user["email_confirmed"]
        logger.info(f"Signup accepted for user {user['id']} (needs verification: {needs_verification})")
        return {
            "success": True,
            "needs_verification": needs_verification,
            "user": user,
            "token": token,
            "message": NEEDS_VERIFICATION_MESSAGE if needs_verification else ACCOUNT_CREATED_MESSAGE,
        }

    async def login(self, email: str | None, password: str | None) -> dict[str, Any]:
        """
        Sign in with email and password.

        An unverified account is refused with 401 and needsVerification, whether
        the provider says so in its error or returns a user without a
        confirmation timestamp. Other provider errors are also 401.
        """
        if not email or not password:
            raise APIError(MISSING_CREDENTIALS_MESSAGE, status_code=HTTP_400_BAD_REQUEST)

        try:
            response = await self.provider.sign_in_with_password(email, password)
            confirmed = is_email_confirmed(response.user)
            user = serialize_user(response.user)
            token = access_token_of(response)
        except AuthError as e:
            if is_email_not_confirmed_error(e):
                logger.info("Login refused: email not confirmed")
                raise unverified_login_error() from e
            logger.warning(f"Login rejected by provider: {e}")
            raise provider_error(e, HTTP_401_UNAUTHORIZED) from e
        except Exception as e:
            raise internal_server_error("Login", e) from e

        if not confirmed:
            logger.info(f"Login refused: user {user['id']} has no confirmed email")
            raise unverified_login_error()

        logger.info(f"Login successful for user {user['id']}")
        return {"success": True, "user": user, "token": token}

    async def logout(self, access_token: str | None = None) -> dict[str, Any]:
        """
        Delegate session termination to the provider.

        The caller's bearer token, when given, is revoked; no local state exists
        to invalidate.
        """
        try:
            await self.provider.sign_out(access_token)
        except AuthError as e:
            logger.warning(f"Logout rejected by provider: {e}")
            raise provider_error(e, HTTP_400_BAD_REQUEST) from e
        except Exception as e:
            raise internal_server_error("Logout", e) from e

        logger.info("Logout successful")
        return {"success": True, "message": LOGGED_OUT_MESSAGE}

    async def verify_email(self, token_hash: str | None, otp_type: str | None) -> dict[str, Any]:
        """Confirm an email address using the token hash from the verification link."""
        if not token_hash or not otp_type:
            raise APIError(MISSING_VERIFICATION_MESSAGE, status_code=HTTP_400_BAD_REQUEST)

        try:
            response = await self.provider.verify_otp(token_hash, otp_type)
            user = serialize_user(response.user)
            token = access_token_of(response)
        except AuthError as e:
            logger.warning(f"Email verification rejected by provider: {e}")
            raise provider_error(e, HTTP_400_BAD_REQUEST) from e
        except Exception as e:
            raise internal_server_error("Email verification", e) from e

        logger.info(f"Email verified for user {user['id']}")
        return {
            "success": True,
            "user": user,
            "token": token,
            "message": EMAIL_VERIFIED_MESSAGE,
        }

    async def resend_verification(self, email: str | None, origin: str | None = None) -> dict[str, Any]:
        """Ask the provider to send the signup verification email again."""
        if not email:
            raise APIError(MISSING_EMAIL_MESSAGE, status_code=HTTP_400_BAD_REQUEST)

        redirect_to = self.build_redirect_url(origin)
        try:
            await self.provider.resend_signup_email(email, redirect_to)
        except AuthError as e:
            logger.warning(f"Resend verification rejected by provider: {e}")
            raise provider_error(e, HTTP_400_BAD_REQUEST) from e
        except Exception as e:
            raise internal_server_error("Resend verification", e) from e

        logger.info("Verification email resent")
        return {"success": True, "message": VERIFICATION_SENT_MESSAGE}

"""
Supabase Auth client for the authentication service.

`SupabaseAuthProvider` is the only place that talks to the Supabase SDK. It is
created once at application startup and injected into request handlers, so
tests can swap it for an in-memory fake.

Errors reported by the provider surface as `supabase.AuthError` (and
subclasses such as `AuthApiError`); anything else is a transport or SDK
failure. Translating either into HTTP responses is the service layer's job.
"""
from typing import Any

from loguru import logger
from supabase import AsyncClient, acreate_client
from supabase.lib.client_options import AsyncClientOptions

from common.config.settings import AuthServiceSettings


class SupabaseAuthProvider:
    """Thin async wrapper around `AsyncClient.auth`."""

    def __init__(self, client: AsyncClient, logout_scope: str = "global"):
        self.client = client
        self.logout_scope = logout_scope

    @classmethod
    async def create(cls, settings: AuthServiceSettings) -> "SupabaseAuthProvider":
        """Create the process-wide provider from service settings."""
        if not settings.SUPABASE_URL or not settings.SUPABASE_ANON_KEY:
            raise EnvironmentError("SUPABASE_URL and SUPABASE_ANON_KEY must be set")

        # Shared across requests; the in-memory session it still keeps is never read
        options = AsyncClientOptions(auto_refresh_token=False, persist_session=False)
        client = await acreate_client(
            settings.SUPABASE_URL,
            settings.SUPABASE_ANON_KEY,
            options=options,
        )

        logger.info(f"Initialized Supabase auth client for {settings.SUPABASE_URL}")
        return cls(client, logout_scope=settings.LOGOUT_SCOPE)

    async def sign_up(self, email: str, password: str, redirect_to: str) -> Any:
        logger.debug(f"Provider sign_up for {email}")
        return await self.client.auth.sign_up(
            {
                "email": email,
                "password": password,
                "options": {"email_redirect_to": redirect_to},
            }
        )

    async def sign_in_with_password(self, email: str, password: str) -> Any:
        logger.debug(f"Provider sign_in_with_password for {email}")
        return await self.client.auth.sign_in_with_password(
            {"email": email, "password": password}
        )

    async def sign_out(self, access_token: str | None = None) -> None:
        """
        End a session with the provider.

        With an access token, that user's session is revoked using the configured
        scope. Without one there is nothing to revoke.

        `client.auth.sign_out()` is never used: the SDK keeps the last session it
        received in memory even with persistence off, and would revoke that
        session instead of the caller's.
        """
        if not access_token:
            logger.debug("Provider sign_out skipped: no caller token")
            return
        logger.debug(f"Provider sign_out with caller token (scope={self.logout_scope})")
        await self.client.auth.admin.sign_out(access_token, self.logout_scope)

    async def aclose(self) -> None:
        """Release the auth HTTP client."""
        await self.client.auth.close()
        logger.info("Closed Supabase auth client")

    async def verify_otp(self, token_hash: str, otp_type: str) -> Any:
        logger.debug(f"Provider verify_otp (type={otp_type})")
        return await self.client.auth.verify_otp(
            {"token_hash": token_hash, "type": otp_type}
        )

    async def resend_signup_email(self, email: str, redirect_to: str) -> Any:
        logger.debug(f"Provider resend signup email for {email}")
        return await self.client.auth.resend(
            {
                "type": "signup",
                "email": email,
                "options": {"email_redirect_to": redirect_to},
            }
        )

"""
Authentication API Endpoints

This module defines the REST API endpoints of the authentication façade. Each
endpoint validates presence of its inputs, makes one call to the identity
provider through AuthenticationService and returns the uniform JSON envelope.

Endpoints:
    POST /signup
        Create an account. The provider emails a verification link pointing at
        "{Origin or default origin}/verify-email".

    POST /login
        Sign in with email and password. Unverified accounts get 401 with
        needsVerification=true.

    POST /logout
        End the session with the provider. An optional bearer token selects the
        session to revoke.

    POST /verify-email
        Confirm an email address with the token hash from the verification link.

    POST /resend-verification
        Send the signup verification email again.

Error Handling:
    Errors are raised as common.exceptions.APIError by the service layer and
    rendered by the app's exception handlers:
    - An absent or null body counts as every field missing
    - 400 Bad Request: Missing fields, malformed body, provider rejection
    - 401 Unauthorized: Login refused (bad credentials or unverified email)
    - 500 Internal Server Error: Anything unexpected, with a generic message

Example Usage:
    ```python
    response = await client.post(
        "/api/login",
        json={"email": "a@b.com", "password": "secret123"},
    )
    token = response.json()["token"]
    ```
"""

from fastapi import APIRouter, Depends, Request

from common.security import get_optional_bearer_token
from services.auth_service.api.dependencies import get_auth_service
from services.auth_service.api.v1.models import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    ResendVerificationRequest,
    ResendVerificationResponse,
    SignupRequest,
    SignupResponse,
    VerifyEmailRequest,
    VerifyEmailResponse,
)
from services.auth_service.services.auth_service import AuthenticationService

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing fields or provider rejection"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}


@router.post(
    "/signup",
    response_model=SignupResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def signup(
    http_request: Request,
    request: SignupRequest | None = None,
    auth_service: AuthenticationService = Depends(get_auth_service),
) -> SignupResponse:
    """
    Create an account with the identity provider.

    Returns needsVerification=true (and no token) when the provider requires
    email confirmation before the account can be used.
    """
    request = request or SignupRequest()
    result = await auth_service.signup(
        request.email, request.password, origin=http_request.headers.get("origin")
    )
    return SignupResponse(**result)


@router.post(
    "/login",
    response_model=LoginResponse,
    response_model_exclude_none=True,
    responses={**ERROR_RESPONSES, 401: {"model": ErrorResponse, "description": "Login refused"}},
)
async def login(
    request: LoginRequest | None = None,
    auth_service: AuthenticationService = Depends(get_auth_service),
) -> LoginResponse:
    """Sign in with email and password."""
    request = request or LoginRequest()
    result = await auth_service.login(request.email, request.password)
    return LoginResponse(**result)


@router.post("/logout", response_model=LogoutResponse, responses=ERROR_RESPONSES)
async def logout(
    access_token: str | None = Depends(get_optional_bearer_token),
    auth_service: AuthenticationService = Depends(get_auth_service),
) -> LogoutResponse:
    """
    End the session with the identity provider.

    The bearer token, when given, is the session revoked. Without one there
    is nothing to revoke and the call succeeds.
    """
    result = await auth_service.logout(access_token)
    return LogoutResponse(**result)


@router.post(
    "/verify-email",
    response_model=VerifyEmailResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def verify_email(
    request: VerifyEmailRequest | None = None,
    auth_service: AuthenticationService = Depends(get_auth_service),
) -> VerifyEmailResponse:
    """Confirm an email address with the token hash and type from the email link."""
    request = request or VerifyEmailRequest()
    result = await auth_service.verify_email(request.token_hash, request.type)
    return VerifyEmailResponse(**result)


@router.post(
    "/resend-verification",
    response_model=ResendVerificationResponse,
    responses=ERROR_RESPONSES,
)
async def resend_verification(
    http_request: Request,
    request: ResendVerificationRequest | None = None,
    auth_service: AuthenticationService = Depends(get_auth_service),
) -> ResendVerificationResponse:
    """Send the signup verification email again."""
    request = request or ResendVerificationRequest()
    result = await auth_service.resend_verification(
        request.email, origin=http_request.headers.get("origin")
    )
    return ResendVerificationResponse(**result)

"""
Authentication API Request/Response Models

This module defines Pydantic models for request and response validation in the
authentication service API. Field names are snake_case in Python and camelCase
on the wire (``needsVerification``, ``emailConfirmed``, ``tokenHash``).

Models follow a consistent naming pattern:
    - Request models: {Action}Request (e.g., SignupRequest, VerifyEmailRequest)
    - Response models: {Action}Response (e.g., SignupResponse, LogoutResponse)

Request fields are optional at the schema level: a missing or empty field is
answered with the endpoint's own 400 message rather than a schema error.

Example:
    ```python
    from services.auth_service.api.v1.models import SignupResponse

    response = SignupResponse(
        success=True,
        needs_verification=True,
        user={"id": "uuid-here", "email": "a@b.com", "email_confirmed": False},
        message="Please check your email to verify your account",
    )
    response.model_dump(by_alias=True, exclude_none=True)
    ```
"""

from pydantic import BaseModel, ConfigDict, Field


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CredentialsRequest(CamelModel):
    """
    Email and password pair sent to signup and login.

    Example:
        ```json
        {"email": "a@b.com", "password": "secret123"}
        ```
    """

    email: str | None = Field(None, description="Account email address")
    password: str | None = Field(None, description="Account password")


class SignupRequest(CredentialsRequest):
    """Request body for the /signup endpoint."""


class LoginRequest(CredentialsRequest):
    """Request body for the /login endpoint."""


class VerifyEmailRequest(CamelModel):
    """
    Request body for the /verify-email endpoint.

    Both values come from the link in the verification email and are passed to
    the provider unchanged.

    Example:
        ```json
        {"tokenHash": "pkce_3f9...", "type": "signup"}
        ```
    """

    token_hash: str | None = Field(None, alias="tokenHash", description="Token hash from the verification link")
    type: str | None = Field(None, description="Verification type, e.g. 'signup' or 'email'")


class ResendVerificationRequest(CamelModel):
    """Request body for the /resend-verification endpoint."""

    email: str | None = Field(None, description="Email address to send the verification link to")


class UserResponse(CamelModel):
    """Public view of a provider user."""

    id: str = Field(..., description="Provider user id (UUID)")
    email: str | None = Field(None, description="User's email address")
    email_confirmed: bool = Field(..., alias="emailConfirmed", description="Whether the email has been verified")


class SignupResponse(CamelModel):
    """
    Response model for the /signup endpoint.

    Example:
        ```json
        {
            "success": true,
            "needsVerification": true,
            "user": {"id": "550e8400-...", "email": "a@b.com", "emailConfirmed": false},
            "message": "Please check your email to verify your account"
        }
        ```
    """

    success: bool = Field(..., description="Whether the account was created")
    needs_verification: bool = Field(..., alias="needsVerification", description="Whether the email still has to be verified")
    user: UserResponse
    token: str | None = Field(None, description="Access token, present only when the provider opened a session")
    message: str = Field(..., description="Human-readable status message")


class LoginResponse(CamelModel):
    """Response model for the /login endpoint."""

    success: bool = Field(..., description="Whether login succeeded")
    user: UserResponse
    token: str | None = Field(None, description="Access token for the new session")


class LogoutResponse(CamelModel):
    """Response model for the /logout endpoint."""

    success: bool = Field(..., description="Whether logout completed")
    message: str = Field(..., description="Human-readable status message")


class VerifyEmailResponse(CamelModel):
    """Response model for the /verify-email endpoint."""

    success: bool = Field(..., description="Whether verification succeeded")
    user: UserResponse
    token: str | None = Field(None, description="Access token, when the provider opened a session")
    message: str = Field(..., description="Human-readable status message")


class ResendVerificationResponse(CamelModel):
    """Response model for the /resend-verification endpoint."""

    success: bool = Field(..., description="Whether the email was sent")
    message: str = Field(..., description="Human-readable status message")


class ErrorResponse(CamelModel):
    """
    Failure envelope shared by every endpoint.

    Example:
        ```json
        {
            "success": false,
            "needsVerification": true,
            "message": "Please verify your email before logging in"
        }
        ```
    """

    success: bool = Field(False, description="Always false")
    needs_verification: bool | None = Field(None, alias="needsVerification", description="Set on unverified logins")
    message: str = Field(..., description="Safe error message")

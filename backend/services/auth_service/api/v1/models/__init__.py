"""
Authentication Service API v1 Models Package

Models:
    - SignupRequest / SignupResponse
    - LoginRequest / LoginResponse
    - LogoutResponse
    - VerifyEmailRequest / VerifyEmailResponse
    - ResendVerificationRequest / ResendVerificationResponse
    - UserResponse: Public view of a provider user
    - ErrorResponse: Failure envelope
"""

from .auth import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    ResendVerificationRequest,
    ResendVerificationResponse,
    SignupRequest,
    SignupResponse,
    UserResponse,
    VerifyEmailRequest,
    VerifyEmailResponse,
)

__all__ = [
    "ErrorResponse",
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "ResendVerificationRequest",
    "ResendVerificationResponse",
    "SignupRequest",
    "SignupResponse",
    "UserResponse",
    "VerifyEmailRequest",
    "VerifyEmailResponse",
]

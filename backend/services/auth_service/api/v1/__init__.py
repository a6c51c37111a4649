"""
Authentication Service API v1 Package

Version 1 provides signup, login, logout, email verification and
resend-verification. All endpoints return the `{success, message, ...}`
envelope and are mounted under the API_PREFIX setting.
"""

"""
Authentication Service API v1 Endpoints Package

Endpoints:
    - auth.py: Account endpoints (signup, login, logout, verify-email, resend-verification)
"""

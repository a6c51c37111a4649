"""
Authentication Service Business Logic Package

Modules:
    - auth_service.py: AuthenticationService with one method per account flow
    - translation.py: Provider user/session/error translation

The service layer is independent of the API layer; it raises
common.exceptions.APIError and lets the app's exception handlers render it.
"""

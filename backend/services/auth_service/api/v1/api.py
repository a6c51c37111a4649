"""
API Router Aggregation for Authentication Service v1

The v1 API provides the account endpoints:
    - POST /signup
    - POST /login
    - POST /logout
    - POST /verify-email
    - POST /resend-verification

The app factory mounts this router under the API_PREFIX setting (default "/api").

Attributes:
    api_router (APIRouter): FastAPI router containing all v1 authentication endpoints
"""

from fastapi import APIRouter

from services.auth_service.api.v1.endpoints import auth

api_router = APIRouter()

# Tags are used for organizing endpoints in Swagger/OpenAPI documentation
api_router.include_router(auth.router, tags=["authentication"])

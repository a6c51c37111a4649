"""
Tests for the shared application factory and its error envelope.
"""

from fastapi import APIRouter
from fastapi.testclient import TestClient
import pytest

from common.exceptions import APIError
from common.fastapi import create_fastapi_app


@pytest.fixture
def app():
    router = APIRouter()

    @router.get("/boom")
    async def boom():
        raise RuntimeError("database password is hunter2")

    @router.get("/refused")
    async def refused():
        raise APIError("Nope", status_code=401, payload={"needsVerification": True})

    return create_fastapi_app(
        service_name="auth-service",
        description="test app",
        api_router=router,
    )


def test_root_defaults_to_service_name(app):
    response = TestClient(app).get("/")

    assert response.json() == {"message": "auth-service is running"}


def test_api_error_rendered_as_envelope(app):
    response = TestClient(app).get("/api/refused")

    assert response.status_code == 401
    assert response.json() == {"success": False, "needsVerification": True, "message": "Nope"}


def test_unhandled_exception_is_generic_500(app):
    response = TestClient(app, raise_server_exceptions=False).get("/api/boom")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Internal server error"}
    assert "hunter2" not in response.text

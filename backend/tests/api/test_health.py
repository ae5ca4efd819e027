"""
Tests for health check endpoints.
"""

from fastapi.testclient import TestClient
from unittest.mock import patch

from api import app

client = TestClient(app)


def test_health_check():
    """Health endpoint should return 200 with status and version."""
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "0.1.0"


def test_health_needs_no_token():
    """Health endpoints are public."""
    response = client.get("/api/ready")
    assert response.status_code == 200


@patch("api.routes.health.get_settings")
def test_readiness_check_configured(mock_settings):
    """Ready when database and token signing are configured."""
    mock_settings.return_value.supabase_url = "https://test.supabase.co"
    mock_settings.return_value.supabase_service_role_key = "service-key"
    mock_settings.return_value.jwt_secret = "secret"

    response = client.get("/api/ready")

    assert response.json() == {
        "status": "ready",
        "database": "configured",
        "tokens": "configured",
    }


@patch("api.routes.health.get_settings")
def test_readiness_check_missing_secret(mock_settings):
    """Not ready when the JWT secret is missing."""
    mock_settings.return_value.supabase_url = "https://test.supabase.co"
    mock_settings.return_value.supabase_service_role_key = "service-key"
    mock_settings.return_value.jwt_secret = ""

    data = client.get("/api/ready").json()

    assert data["status"] == "not_ready"
    assert data["tokens"] == "missing"

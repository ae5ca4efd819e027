"""
Fixtures for API tests.

Requests go through the real middleware stack; services are replaced
through FastAPI dependency overrides.
"""

import pytest
from unittest.mock import patch

from api import app


@pytest.fixture(autouse=True)
def patch_token_issuer(token_issuer):
    """Verify tokens with the test secret."""
    with patch("api.middleware.auth.get_token_issuer", return_value=token_issuer):
        yield


@pytest.fixture
def override_dependency():
    """Register a dependency override, cleared after the test."""

    def _override(dependency, service):
        app.dependency_overrides[dependency] = lambda: service
        return service

    yield _override
    app.dependency_overrides.clear()

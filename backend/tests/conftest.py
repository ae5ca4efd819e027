"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest

from api.dependencies import reset_container
from shared.models import UserRole
from shared.security import JwtTokenIssuer


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: int = 1,
    email: str = "test@test.com",
    role: UserRole = UserRole.USER,
    expired: bool = False,
) -> str:
    """
    Create a test bearer token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        role: Role to include in the token
        expired: If True, creates an expired token

    Returns:
        Token string including the ``Bearer `` prefix
    """
    issuer = JwtTokenIssuer(
        secret=TEST_JWT_SECRET,
        expiration_minutes=-1 if expired else 60,
    )
    return issuer.create_token(user_id, email, role)


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def token_issuer() -> JwtTokenIssuer:
    """Token issuer sharing the test secret."""
    return JwtTokenIssuer(secret=TEST_JWT_SECRET)


@pytest.fixture
def user_headers() -> dict[str, str]:
    """Authorization headers for an ordinary member."""
    return {"Authorization": create_test_token(user_id=1, email="test@test.com")}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Authorization headers for an administrator."""
    return {
        "Authorization": create_test_token(
            user_id=99, email="admin@test.com", role=UserRole.ADMIN
        )
    }

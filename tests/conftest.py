# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides form data, token and fake-provider fixtures
# =============================================================================

import os
import time
from types import SimpleNamespace

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-with-enough-length")
os.environ.setdefault("PINECONE_API_KEY", "test-pinecone-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from jose import jwt
from supabase import AuthError

TEST_USER_ID = "550e8400-e29b-41d4-a716-446655440000"


class FakeAuthError(AuthError):
    """AuthError with a stable constructor across supabase versions."""

    def __init__(self, message: str):
        Exception.__init__(self, message)
        self.message = message


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def user_id():
    return TEST_USER_ID


@pytest.fixture
def login_fields():
    """Valid login form data."""
    return {"email": "ada@example.com", "password": "hunter22"}


@pytest.fixture
def signup_fields():
    """Valid signup form data."""
    return {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "password": "hunter22",
        "confirm_password": "hunter22",
    }


@pytest.fixture
def make_token():
    """Build a Supabase-style HS256 access token."""

    def _make(
        user_id: str = TEST_USER_ID,
        email: str = "ada@example.com",
        expires_in: int = 3600,
        secret: str | None = None,
    ) -> str:
        payload = {
            "sub": user_id,
            "email": email,
            "aud": "authenticated",
            "role": "authenticated",
            "iat": int(time.time()),
            "exp": int(time.time()) + expires_in,
        }
        return jwt.encode(
            payload,
            secret or os.environ["SUPABASE_JWT_SECRET"],
            algorithm="HS256",
        )

    return _make


@pytest.fixture
def provider_session():
    """A session object shaped like the provider's."""
    return SimpleNamespace(
        access_token="access-token-123",
        refresh_token="refresh-token-456",
        expires_at=1999999999,
        user=SimpleNamespace(id=TEST_USER_ID, email="ada@example.com"),
    )

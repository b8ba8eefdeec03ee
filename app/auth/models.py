# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class AuthUser(BaseModel):
    """
    Authenticated user extracted from a Supabase JWT.

    This is the minimal user info available from the token itself,
    without querying the database. The raw token is kept so the user can
    be signed out.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    email: Optional[str] = None
    access_token: Optional[str] = None


class SessionStatus(BaseModel):
    """Whether a request carries a live session."""

    authenticated: bool
    user_id: Optional[str] = None
    email: Optional[str] = None

# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase operations.
# It implements the singleton pattern for the service-role client (database
# and storage) and hands out fresh anon-key clients for auth calls, since an
# auth client holds the signed-in user's session.
#
# Specialized methods cover the profiles table:
# - Fetch a profile by user ID
# - Insert the profile written at signup
# - Find profiles whose vector index was never provisioned
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   profile = SupabaseClient.fetch_profile(user_id)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from supabase import Client, ClientOptions, create_client

from app.config import settings
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)

PROFILE_COLUMNS = "user_id, first_name, last_name, email, avatar_url, pinecone_index"


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Provides actionable error messages:
    "Errors should tell HOW to fix, not just WHAT failed."
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Typed wrapper for Supabase operations.

    The service-role client is a singleton shared across the application.
    Auth clients are created per request and never shared.

    Example:
        profile = SupabaseClient.fetch_profile("550e8400-...")
        if profile and profile["pinecone_index"]:
            ...
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton service-role Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        This is appropriate for server-side operations.

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def create_auth_client(cls) -> Client:
        """
        Create a fresh anon-key client for one auth interaction.

        Session persistence and token refresh are off: the session lives
        only as long as the request that created it.

        Raises:
            SupabaseClientError: If client creation fails
        """
        try:
            return create_client(
                settings.SUPABASE_URL,
                settings.SUPABASE_ANON_KEY,
                options=ClientOptions(
                    auto_refresh_token=False,
                    persist_session=False,
                ),
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to create Supabase auth client: {e}",
                code="AUTH_CLIENT_INIT_FAILED",
                suggestion="Check SUPABASE_URL and SUPABASE_ANON_KEY in your .env file"
            )

    # -------------------------------------------------------------------------
    # Profiles
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_profile(cls, user_id: str | UUID) -> dict[str, Any] | None:
        """
        Fetch the profile row for a user by exact key.

        Returns:
            Profile dict, or None if the user has no profile

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()
        user_id_str = normalize_uuid(user_id)

        try:
            response = (
                client.table(settings.PROFILES_TABLE)
                .select(PROFILE_COLUMNS)
                .eq("user_id", user_id_str)
                .maybe_single()
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch profile: {e}",
                code="FETCH_PROFILE_FAILED",
                suggestion=f"Check that the {settings.PROFILES_TABLE} table exists and is readable",
                details={"user_id": user_id_str}
            )

        # maybe_single() yields no response at all when the row is missing
        if response is None or not response.data:
            return None
        return response.data

    @classmethod
    def insert_profile(cls, row: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a profile row.

        Returns:
            The inserted row as stored

        Raises:
            SupabaseClientError: If insert fails
        """
        client = cls.get_client()

        try:
            response = client.table(settings.PROFILES_TABLE).insert(row).execute()
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert profile: {e}",
                code="INSERT_PROFILE_FAILED",
                suggestion="Check that no profile exists yet for this user_id",
                details={"user_id": row.get("user_id")}
            )

        if not response.data:
            raise SupabaseClientError(
                message="Profile insert returned no data",
                code="INSERT_PROFILE_FAILED",
                details={"user_id": row.get("user_id")}
            )

        logger.debug(f"Inserted profile for user {row.get('user_id')}")
        return response.data[0]

    @classmethod
    def fetch_profiles_without_index(cls, limit: int = 100) -> list[dict[str, Any]]:
        """
        Fetch profiles whose pinecone_index was never set.

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(settings.PROFILES_TABLE)
                .select(PROFILE_COLUMNS)
                .is_("pinecone_index", "null")
                .limit(limit)
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch profiles without index: {e}",
                code="FETCH_PROFILES_FAILED",
                details={"limit": limit}
            )

        return response.data or []

    @classmethod
    def update_profile_index(cls, user_id: str | UUID, index_name: str) -> None:
        """
        Record a provisioned index on an existing profile.

        Raises:
            SupabaseClientError: If update fails
        """
        client = cls.get_client()
        user_id_str = normalize_uuid(user_id)

        try:
            (
                client.table(settings.PROFILES_TABLE)
                .update({"pinecone_index": index_name})
                .eq("user_id", user_id_str)
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to update profile index: {e}",
                code="UPDATE_PROFILE_FAILED",
                details={"user_id": user_id_str, "index_name": index_name}
            )

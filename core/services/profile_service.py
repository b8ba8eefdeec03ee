# =============================================================================
# core/services/profile_service.py - Profile Business Logic
# =============================================================================
# Writes the profile row at signup and reads it for the dashboard.
#
# Writes are best-effort: an insert failure is logged and reported as None,
# never raised.
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from core.models.profile import ProfileCreate, ProfileResponse
from lib.supabase_client import SupabaseClient, SupabaseClientError

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for profile rows."""

    @staticmethod
    def create_profile(profile: ProfileCreate) -> dict[str, Any] | None:
        """
        Insert the profile row for a new user.

        Returns:
            The stored row, or None if the insert failed
        """
        try:
            row = SupabaseClient.insert_profile(profile.model_dump())
        except SupabaseClientError as e:
            logger.error(f"Profile creation error: {e}")
            return None

        logger.info(f"Created profile for user: {profile.user_id}")
        return row

    @staticmethod
    def get_profile(user_id: UUID | str) -> ProfileResponse | None:
        """
        Fetch a user's profile by exact key.

        Returns:
            ProfileResponse, or None when the row is missing or unreadable
        """
        try:
            row = SupabaseClient.fetch_profile(user_id)
        except SupabaseClientError as e:
            logger.warning(f"Could not fetch profile: {e}")
            return None

        if row is None:
            return None
        return ProfileResponse(**row)

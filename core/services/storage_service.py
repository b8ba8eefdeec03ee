# =============================================================================
# core/services/storage_service.py - Supabase Storage Operations
# =============================================================================
# Handles avatar uploads to Supabase Storage.
#
# Uploads are best-effort: a failure is logged and the caller carries on
# without an avatar URL.
# =============================================================================

import logging

from app.config import settings
from lib.supabase_client import SupabaseClient
from lib.utils import file_extension, normalize_uuid, now_millis

logger = logging.getLogger(__name__)


class AvatarStorage:
    """
    Service for avatar uploads.

    Files land at {user_id}/{timestamp_ms}.{ext} in the avatar bucket.
    """

    @staticmethod
    def avatar_path(user_id: str, filename: str, timestamp_ms: int | None = None) -> str:
        """Build the storage path for a user's avatar."""
        if timestamp_ms is None:
            timestamp_ms = now_millis()
        return f"{normalize_uuid(user_id)}/{timestamp_ms}.{file_extension(filename)}"

    @staticmethod
    def upload_avatar(
        user_id: str,
        filename: str,
        content: bytes,
        content_type: str | None = None,
    ) -> str | None:
        """
        Upload an avatar and return its public URL.

        Args:
            user_id: Owner of the avatar
            filename: Original filename (its extension is kept)
            content: Image bytes
            content_type: MIME type reported by the client

        Returns:
            Public URL, or None if the upload failed
        """
        file_options = {}
        if content_type:
            file_options["content-type"] = content_type

        try:
            path = AvatarStorage.avatar_path(user_id, filename)
            client = SupabaseClient.get_client()
            client.storage.from_(settings.AVATAR_BUCKET).upload(
                path=path,
                file=content,
                file_options=file_options,
            )
        except Exception as e:
            logger.error(f"Avatar upload failed for user {user_id}: {e}")
            return None

        logger.info(f"Uploaded avatar to storage: {path}")

        try:
            return AvatarStorage.get_public_url(path)
        except Exception as e:
            logger.error(f"Failed to get public URL for {path}: {e}")
            return None

    @staticmethod
    def get_public_url(storage_path: str) -> str:
        """
        Get a public URL for a storage file.

        Args:
            storage_path: Path in the avatar bucket

        Returns:
            Public URL string
        """
        client = SupabaseClient.get_client()
        return client.storage.from_(settings.AVATAR_BUCKET).get_public_url(storage_path)

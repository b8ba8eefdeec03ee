# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import time
from uuid import UUID


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format.

    Handles both string and UUID objects, ensuring consistent string output.

    Example:
        user_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        user_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


# =============================================================================
# File Name Utilities
# =============================================================================

def file_extension(filename: str) -> str:
    """
    Return the text after the last dot of a filename.

    A name without a dot is returned whole, so "avatar" -> "avatar".
    """
    return filename.rsplit(".", 1)[-1]


def now_millis() -> int:
    """Current Unix time in milliseconds."""
    return int(time.time() * 1000)

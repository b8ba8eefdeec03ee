# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable clients and utilities:
# - supabase_client.py: Typed Supabase wrapper (auth clients, profiles table)
# - pinecone_client.py: Pinecone control-plane client (index creation)
# - utils.py: Shared utilities (UUID normalization, file names, timestamps)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.pinecone_client import (
    IndexCreateStatus,
    IndexSpec,
    PineconeControlClient,
    PineconeError,
)
from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import file_extension, normalize_uuid, now_millis

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Pinecone
    "IndexCreateStatus",
    "IndexSpec",
    "PineconeControlClient",
    "PineconeError",
    # Utils
    "file_extension",
    "normalize_uuid",
    "now_millis",
]

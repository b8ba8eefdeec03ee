# =============================================================================
# core/services/provisioning_service.py - Per-User Vector Index Provisioning
# =============================================================================
# Two sides of the create-pinecone-index remote function:
#
# - IndexProvisioner: the function body. Creates a serverless Pinecone index
#   for a user, treating "already exists" (HTTP 409) as success.
# - ProvisioningClient: what the signup flow calls. Invokes the function and
#   degrades any failure to "no index" (None). Never retries.
# =============================================================================

import json
import logging
from typing import Any

from supabase import Client

from app.config import settings
from app.exceptions import ProvisioningError
from lib.pinecone_client import IndexSpec, PineconeControlClient, PineconeError
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

INDEX_NAME_PREFIX = "user-"
INDEX_NAME_ID_CHARS = 20


def index_name_for(user_id: str) -> str:
    """
    Derive a user's index name.

    Dashes are dropped and the ID is cut to 20 characters, so
    "550e8400-e29b-41d4-a716-446655440000" -> "user-550e8400e29b41d4a716".
    """
    return f"{INDEX_NAME_PREFIX}{user_id.replace('-', '')[:INDEX_NAME_ID_CHARS]}"


class IndexProvisioner:
    """
    Creates per-user indexes through the Pinecone control plane.

    Example:
        index_name = IndexProvisioner().provision(user_id, email)
    """

    def __init__(self, control_client: PineconeControlClient | None = None):
        self._control_client = control_client

    def _get_control_client(self) -> PineconeControlClient:
        if self._control_client is not None:
            return self._control_client

        if not settings.PINECONE_API_KEY:
            raise ProvisioningError("Pinecone API key not configured")

        self._control_client = PineconeControlClient(
            api_key=settings.PINECONE_API_KEY,
            base_url=settings.PINECONE_CONTROL_URL,
            timeout=settings.PINECONE_TIMEOUT_SECONDS,
        )
        return self._control_client

    def provision(self, user_id: str | None, email: str | None) -> str:
        """
        Create the index for a user.

        Returns:
            The index name (whether just created or already present)

        Raises:
            ProvisioningError: On missing input, missing API key, or any
                control-plane failure other than 409
        """
        if not user_id or not email:
            raise ProvisioningError("Missing userId or email")

        control_client = self._get_control_client()
        index_name = index_name_for(user_id)
        spec = IndexSpec(
            name=index_name,
            dimension=settings.PINECONE_DIMENSION,
            metric=settings.PINECONE_METRIC,
            cloud=settings.PINECONE_CLOUD,
            region=settings.PINECONE_REGION,
        )

        try:
            control_client.create_index(spec)
        except PineconeError as e:
            logger.error(f"Pinecone error: {e.message}")
            if e.status_code is None:
                # Transport failure: surface the error text as is
                raise ProvisioningError(e.message)
            raise ProvisioningError(f"Failed to create Pinecone index: {e.message}")

        return index_name


class ProvisioningClient:
    """
    Invokes the provisioning function on behalf of the signup flow.

    Example:
        index_name = ProvisioningClient().invoke(user_id, email)  # None on failure
    """

    def __init__(self, client: Client | None = None):
        self._client = client

    def _get_client(self) -> Client:
        if self._client is None:
            self._client = SupabaseClient.get_client()
        return self._client

    @staticmethod
    def _parse(data: Any) -> dict[str, Any]:
        if isinstance(data, (bytes, bytearray)):
            data = data.decode("utf-8")
        if isinstance(data, str):
            data = json.loads(data) if data else {}
        return data if isinstance(data, dict) else {}

    def invoke(self, user_id: str, email: str) -> str | None:
        """
        Ask the remote function to provision the user's index.

        Returns:
            The index name, or None if the call failed for any reason
        """
        try:
            data = self._get_client().functions.invoke(
                settings.PROVISIONING_FUNCTION_NAME,
                invoke_options={"body": {"userId": user_id, "email": email}},
            )
            payload = self._parse(data)
        except Exception as e:
            logger.warning(f"Index provisioning failed for user {user_id}: {e}")
            return None

        if payload.get("error"):
            logger.warning(f"Index provisioning failed for user {user_id}: {payload['error']}")
            return None

        index_name = payload.get("indexName")
        if index_name:
            logger.info(f"Provisioned index {index_name} for user {user_id}")
        return index_name

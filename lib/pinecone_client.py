# =============================================================================
# lib/pinecone_client.py - Pinecone Control-Plane Client
# =============================================================================
# Minimal httpx wrapper around the Pinecone control-plane REST API.
# Only index creation is needed: each user gets one serverless index.
#
# Usage:
#   from lib.pinecone_client import PineconeControlClient, IndexSpec
#
#   client = PineconeControlClient(api_key="...")
#   status = client.create_index(IndexSpec(name="user-abc"))
#   if status is IndexCreateStatus.ALREADY_EXISTS:
#       ...
# =============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_CONTROL_URL = "https://api.pinecone.io"


class PineconeError(Exception):
    """
    Error returned by the Pinecone control plane (or the transport to it).

    Attributes:
        status_code: HTTP status, or None for transport failures
        body: Raw response text, if any
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class IndexCreateStatus(str, Enum):
    """Outcome of a create-index call that did not fail."""
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"


@dataclass(frozen=True)
class IndexSpec:
    """Parameters for a serverless index."""
    name: str
    dimension: int = 1536
    metric: str = "cosine"
    cloud: str = "aws"
    region: str = "us-east-1"

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "dimension": self.dimension,
            "metric": self.metric,
            "spec": {
                "serverless": {
                    "cloud": self.cloud,
                    "region": self.region,
                },
            },
        }


class PineconeControlClient:
    """
    Thin client for the Pinecone control plane.

    Pass `transport` to route requests somewhere other than the network
    (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_CONTROL_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Api-Key": self.api_key,
            "Content-Type": "application/json",
        }

    def create_index(self, spec: IndexSpec) -> IndexCreateStatus:
        """
        Create a serverless index.

        A 409 response means the index already exists and is reported as
        IndexCreateStatus.ALREADY_EXISTS rather than an error.

        Raises:
            PineconeError: On any other non-2xx response or transport failure
        """
        url = f"{self.base_url}/indexes"

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.post(url, headers=self._headers(), json=spec.to_payload())
        except httpx.HTTPError as e:
            raise PineconeError(str(e) or e.__class__.__name__)

        if response.status_code == 409:
            logger.info(f"Index {spec.name} already exists")
            return IndexCreateStatus.ALREADY_EXISTS

        if not response.is_success:
            raise PineconeError(
                response.text,
                status_code=response.status_code,
                body=response.text,
            )

        logger.info(f"Created Pinecone index {spec.name}")
        return IndexCreateStatus.CREATED

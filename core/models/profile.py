# =============================================================================
# core/models/profile.py - Profile Schemas
# =============================================================================
# A profile row links a user to display and indexing metadata:
# - ProfileCreate: The row written once when a signup completes
# - ProfileResponse: The row as returned to the dashboard
#
# avatar_url and pinecone_index are nullable: both depend on best-effort
# steps of the signup flow.
# =============================================================================

from pydantic import BaseModel, Field


class ProfileCreate(BaseModel):
    """
    Schema for the profile row inserted at signup.

    Example:
        {
            "user_id": "550e8400-e29b-41d4-a716-446655440000",
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email": "ada@example.com",
            "avatar_url": null,
            "pinecone_index": "user-550e8400e29b41d4a716"
        }
    """

    user_id: str = Field(..., description="Identity provider user ID")
    first_name: str
    last_name: str
    email: str
    avatar_url: str | None = Field(
        default=None,
        description="Public URL of the avatar, if the upload succeeded"
    )
    pinecone_index: str | None = Field(
        default=None,
        description="Provisioned index name, if provisioning succeeded"
    )


class ProfileResponse(BaseModel):
    """Profile fields shown on the dashboard."""

    user_id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    avatar_url: str | None = None
    pinecone_index: str | None = None

    @property
    def display_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    @property
    def index_active(self) -> bool:
        return bool(self.pinecone_index)

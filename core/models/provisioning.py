# =============================================================================
# core/models/provisioning.py - Index Provisioning Schemas
# =============================================================================
# Wire contract of the create-pinecone-index function:
#   request:  {"userId": "...", "email": "..."}
#   response: {"success": true, "indexName": "...", "message": "..."}
#   error:    {"error": "..."}
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class ProvisionIndexRequest(BaseModel):
    """
    Body sent to the provisioning function.

    Both fields are optional at the schema level so the function itself can
    answer a missing value with its own error message.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: str | None = Field(default=None, alias="userId")
    email: str | None = None


class ProvisionIndexResponse(BaseModel):
    """Successful provisioning result."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    index_name: str = Field(..., alias="indexName")
    message: str = "Pinecone index created successfully"


class ProvisionErrorResponse(BaseModel):
    """Failed provisioning result."""

    error: str

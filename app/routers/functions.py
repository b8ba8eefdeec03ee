# =============================================================================
# app/routers/functions.py - Remote Function Endpoints
# =============================================================================
# Serves the create-pinecone-index function:
#
#   POST /functions/create-pinecone-index
#   body:    {"userId": "...", "email": "..."}
#   200:     {"success": true, "indexName": "...", "message": "..."}
#   500:     {"error": "..."}
#
# An index that already exists counts as success.
# =============================================================================

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.auth import verify_function_caller
from app.dependencies import IndexProvisionerDep
from app.exceptions import ProvisioningError
from core.models.provisioning import (
    ProvisionErrorResponse,
    ProvisionIndexRequest,
    ProvisionIndexResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/create-pinecone-index",
    response_model=ProvisionIndexResponse,
    responses={500: {"model": ProvisionErrorResponse}},
)
async def create_pinecone_index(
    body: ProvisionIndexRequest,
    provisioner: IndexProvisionerDep,
    caller: str = Depends(verify_function_caller),
):
    """
    Provision the vector index for a user.

    Returns the index name whether the index was just created or already
    existed.
    """
    logger.info(f"Provisioning index for user {body.user_id} (caller: {caller})")

    try:
        index_name = provisioner.provision(body.user_id, body.email)
    except ProvisioningError as e:
        logger.error(f"Error: {e.message}")
        return JSONResponse(
            status_code=500,
            content=ProvisionErrorResponse(error=e.message).model_dump(),
        )

    return JSONResponse(
        status_code=200,
        content=ProvisionIndexResponse(index_name=index_name).model_dump(by_alias=True),
    )

# =============================================================================
# workers/tasks.py - Celery Task Definitions
# =============================================================================
# Tasks:
# - reconcile_missing_indexes: Provision indexes for profiles saved without
#   one (the signup flow never retries a failed provisioning call)
# =============================================================================

import logging
from typing import Any

from celery import shared_task

from app.config import settings
from app.exceptions import ProvisioningError
from core.services.provisioning_service import IndexProvisioner
from lib.supabase_client import SupabaseClient, SupabaseClientError

logger = logging.getLogger(__name__)


@shared_task(name="workers.tasks.reconcile_missing_indexes")
def reconcile_missing_indexes(limit: int | None = None) -> dict[str, Any]:
    """
    Provision indexes for profiles whose pinecone_index is null.

    A profile is only updated after the provisioner reports success (or
    that the index already exists). Failures are left for the next run.

    Args:
        limit: Max profiles to handle (defaults to RECONCILE_BATCH_SIZE)

    Returns:
        Dict with:
        - checked: number of profiles looked at
        - provisioned: {user_id: index_name} for updated profiles
        - failed: {user_id: error} for profiles left as they were
    """
    if not settings.PINECONE_API_KEY:
        logger.warning("Skipping index reconciliation: PINECONE_API_KEY is not set")
        return {"checked": 0, "provisioned": {}, "failed": {}, "skipped": True}

    profiles = SupabaseClient.fetch_profiles_without_index(limit or settings.RECONCILE_BATCH_SIZE)
    logger.info(f"Reconciling {len(profiles)} profiles without an index")

    provisioner = IndexProvisioner()
    provisioned: dict[str, str] = {}
    failed: dict[str, str] = {}

    for row in profiles:
        user_id = row.get("user_id")

        try:
            index_name = provisioner.provision(user_id, row.get("email"))
            SupabaseClient.update_profile_index(user_id, index_name)
        except (ProvisioningError, SupabaseClientError) as e:
            logger.warning(f"Could not reconcile index for user {user_id}: {e}")
            failed[str(user_id)] = str(e)
            continue

        provisioned[str(user_id)] = index_name

    logger.info(f"Reconciliation done: {len(provisioned)} provisioned, {len(failed)} failed")
    return {
        "checked": len(profiles),
        "provisioned": provisioned,
        "failed": failed,
        "skipped": False,
    }

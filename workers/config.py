# =============================================================================
# workers/config.py - Celery Worker Configuration
# =============================================================================
# Settings specific to Celery workers.
# =============================================================================

from app.config import settings


def _beat_schedule() -> dict:
    """Periodic reconciliation, if enabled."""
    if settings.RECONCILE_INTERVAL_MINUTES <= 0:
        return {}
    return {
        "reconcile-missing-indexes": {
            "task": "workers.tasks.reconcile_missing_indexes",
            "schedule": settings.RECONCILE_INTERVAL_MINUTES * 60.0,
        },
    }


class CeleryConfig:
    """
    Celery configuration settings.

    These are applied to the Celery app via app.config_from_object().
    """

    # -------------------------------------------------------------------------
    # Broker Settings (Redis)
    # -------------------------------------------------------------------------

    broker_url = settings.REDIS_URL
    result_backend = settings.REDIS_URL

    # -------------------------------------------------------------------------
    # Task Settings
    # -------------------------------------------------------------------------

    # Acknowledge tasks after they complete (not before)
    task_acks_late = True

    worker_prefetch_multiplier = 1

    # Task results expire after 1 hour
    result_expires = 3600

    # Each provisioning call is bounded by PINECONE_TIMEOUT_SECONDS;
    # a full batch gets 10 minutes
    task_time_limit = 600
    task_soft_time_limit = 540

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    task_serializer = "json"
    result_serializer = "json"
    accept_content = ["json"]

    # -------------------------------------------------------------------------
    # Task Routing
    # -------------------------------------------------------------------------

    task_default_queue = "default"

    # -------------------------------------------------------------------------
    # Scheduling
    # -------------------------------------------------------------------------

    beat_schedule = _beat_schedule()

    # -------------------------------------------------------------------------
    # Monitoring
    # -------------------------------------------------------------------------

    worker_send_task_events = True
    task_send_sent_event = True

    # -------------------------------------------------------------------------
    # Timezone
    # -------------------------------------------------------------------------

    timezone = "UTC"
    enable_utc = True

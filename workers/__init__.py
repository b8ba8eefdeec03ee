# =============================================================================
# workers/ - Celery Background Task Workers
# =============================================================================
# This package contains the Celery configuration and task definitions for
# background maintenance.
#
# Components:
# - celery_app.py: Celery application configuration
# - tasks.py: Task definitions (index reconciliation)
# - config.py: Worker-specific settings
#
# Usage:
#   # Start worker
#   celery -A workers.celery_app worker --loglevel=info
#
#   # Submit task (from a shell or the API)
#   from workers.tasks import reconcile_missing_indexes
#   result = reconcile_missing_indexes.delay()
# =============================================================================

from .celery_app import celery_app
from . import tasks

__all__ = [
    "celery_app",
    "tasks",
]

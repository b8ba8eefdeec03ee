#!/usr/bin/env python3
# =============================================================================
# scripts/start_worker.py - Celery Worker Entry Point
# =============================================================================
# Starts a Celery worker to process background tasks.
#
# Usage:
#   python scripts/start_worker.py
#   python scripts/start_worker.py --beat   # also run scheduled reconciliation
#
#   # Or use Celery CLI directly
#   celery -A workers.celery_app worker --loglevel=info
#
# Prerequisites:
#   - Redis must be running
#   - Environment variables must be set (.env file)
# =============================================================================

import sys

from workers.celery_app import celery_app


def main():
    """Start the Celery worker."""
    print("=" * 60)
    print("FileAI Celery Worker")
    print("=" * 60)
    print()
    print("Starting worker...")
    print("Press Ctrl+C to stop")
    print()

    argv = [
        "worker",
        "--loglevel=info",
        "--concurrency=2",
    ]
    # Embedded beat; fine for a single worker
    if "--beat" in sys.argv[1:]:
        argv.append("--beat")

    celery_app.worker_main(argv)


if __name__ == "__main__":
    main()

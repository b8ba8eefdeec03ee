# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - pages.py: Client-visible routes (/, /auth, /dashboard)
# - functions.py: Remote function endpoints (create-pinecone-index)
# - health.py: Health check endpoints
#
# Auth endpoints live in app/auth/routes.py.
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import functions
from . import health
from . import pages

__all__ = [
    "functions",
    "health",
    "pages",
]

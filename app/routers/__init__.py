# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints (no auth)
# - users.py: User CRUD endpoints (bearer token required)
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import users

__all__ = [
    "health",
    "users",
]

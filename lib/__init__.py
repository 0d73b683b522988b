# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable building blocks:
# - user_store.py: UserStore interface and the in-memory implementation
# - sql_store.py: SQLModel-backed UserStore
# - observability.py: @observed operation logging decorator
# =============================================================================

from lib.observability import observed
from lib.user_store import InMemoryUserStore, UserStore

__all__ = [
    "observed",
    "InMemoryUserStore",
    "UserStore",
]

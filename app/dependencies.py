# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The user store is created once in the application lifespan and kept on
# app.state; handlers receive it (and a UserService wrapping it) from here.
# =============================================================================

import logging
from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from core.services.user_service import UserService
from lib.user_store import InMemoryUserStore, UserStore

logger = logging.getLogger(__name__)


def build_user_store(settings: Settings) -> UserStore:
    """
    Create the user store selected by STORE_BACKEND.

    The SQL backend is imported lazily so the in-memory mode does not
    need a database driver.
    """
    if settings.STORE_BACKEND == "sql":
        from lib.sql_store import SqlUserStore

        logger.info("Using SQL user store")
        return SqlUserStore.from_url(settings.DATABASE_URL, echo=settings.SQL_ECHO)

    logger.info("Using in-memory user store")
    return InMemoryUserStore()


def get_user_store(request: Request) -> UserStore:
    """Return the store created at startup."""
    return request.app.state.user_store


def get_user_service(
    store: UserStore = Depends(get_user_store),
) -> UserService:
    """Build a UserService bound to the application's store."""
    return UserService(store)


# Type aliases for dependency injection
UserStoreDep = Annotated[UserStore, Depends(get_user_store)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]

# =============================================================================
# lib/user_store.py - User Store Interface and In-Memory Implementation
# =============================================================================
# The store owns user identity and storage:
# - assigns ids (strictly increasing, never reused after deletion)
# - performs lookup / insert / update / remove / list
#
# Stores hand out copies. Mutating a returned User never changes stored state.
#
# Usage:
#   store = InMemoryUserStore()
#   user = await store.insert(UserInput(name="Alice", email="a@x.com"))
#   await store.find_by_id(user.id)
# =============================================================================

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod

from app.exceptions import NotFoundError
from core.models.user import User, UserInput

logger = logging.getLogger(__name__)


class UserStore(ABC):
    """
    Abstract user store.

    Implementations must make id assignment and each single mutation atomic
    with respect to concurrent callers.
    """

    backend: str = "abstract"

    @abstractmethod
    async def insert(self, candidate: UserInput) -> User:
        """Assign the next id, store the user and return a copy."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> User | None:
        """Return the user with this id, or None."""

    @abstractmethod
    async def update(self, user_id: int, patch: UserInput) -> User:
        """
        Overwrite name and email of an existing user.

        Raises:
            NotFoundError: If no user has this id
        """

    @abstractmethod
    async def remove(self, user_id: int) -> User:
        """
        Delete a user and return what was removed.

        Raises:
            NotFoundError: If no user has this id
        """

    @abstractmethod
    async def list(self) -> list[User]:
        """Return every user in insertion order."""

    async def ping(self) -> bool:
        """Check the backing storage is reachable."""
        return True

    async def close(self) -> None:
        """Release any resources held by the store."""


class InMemoryUserStore(UserStore):
    """
    Process-local store.

    Mutations and id assignment run under one asyncio.Lock. Reads do not
    await while copying, so they always see a consistent snapshot.
    """

    backend = "memory"

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._last_id = 0
        self._lock = asyncio.Lock()

    async def insert(self, candidate: UserInput) -> User:
        async with self._lock:
            self._last_id += 1
            user = User(id=self._last_id, name=candidate.name, email=candidate.email)
            self._users[user.id] = user
            logger.debug(f"Inserted user {user.id}")
            return user.model_copy()

    async def find_by_id(self, user_id: int) -> User | None:
        user = self._users.get(user_id)
        return user.model_copy() if user else None

    async def update(self, user_id: int, patch: UserInput) -> User:
        async with self._lock:
            current = self._users.get(user_id)
            if current is None:
                raise NotFoundError(user_id)
            updated = current.model_copy(update={"name": patch.name, "email": patch.email})
            self._users[user_id] = updated
            logger.debug(f"Updated user {user_id}")
            return updated.model_copy()

    async def remove(self, user_id: int) -> User:
        async with self._lock:
            removed = self._users.pop(user_id, None)
            if removed is None:
                raise NotFoundError(user_id)
            logger.debug(f"Removed user {user_id}")
            return removed

    async def list(self) -> list[User]:
        # dicts keep insertion order, and ids are assigned in that order
        return [user.model_copy() for user in self._users.values()]

# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Handles user CRUD operations: input validation, store orchestration and
# result shaping. Separates HTTP concerns from storage.
#
# Expected failures come back as Err values:
# - INVALID_ARGUMENT: id <= 0, or empty name / email
# - NOT_FOUND: no user with the given id
# Anything else (store outage, bugs) is raised and left to the global handler.
#
# Checks always run in the same order: id, then existence, then payload.
# =============================================================================

import logging

from app.exceptions import ErrorKind, NotFoundError
from core.models.result import Err, Ok, Result
from core.models.user import User, UserInput
from lib.observability import observed
from lib.user_store import UserStore

logger = logging.getLogger(__name__)

INVALID_ID_MESSAGE = "Id must be greater than zero."
INVALID_USER_MESSAGE = "Invalid user data. Name and Email are required."
USER_NOT_FOUND_MESSAGE = "User not found."


def _invalid(message: str) -> Err:
    return Err(ErrorKind.INVALID_ARGUMENT, message)


def _not_found() -> Err:
    return Err(ErrorKind.NOT_FOUND, USER_NOT_FOUND_MESSAGE)


class UserService:
    """
    Service for user management operations.

    The store is passed in by the caller; the service keeps no state of
    its own.
    """

    def __init__(self, store: UserStore):
        self.store = store

    @observed("list_users")
    async def list_users(self) -> Result[list[User]]:
        """Return every user in insertion order."""
        return Ok(await self.store.list())

    @observed("get_user")
    async def get_user(self, user_id: int) -> Result[User]:
        """
        Get a user by ID.

        Args:
            user_id: The user id (must be positive)

        Returns:
            Ok(User), or Err INVALID_ARGUMENT / NOT_FOUND
        """
        if user_id <= 0:
            return _invalid(INVALID_ID_MESSAGE)

        user = await self.store.find_by_id(user_id)
        if user is None:
            return _not_found()

        return Ok(user)

    @observed("create_user")
    async def create_user(self, data: UserInput) -> Result[User]:
        """
        Create a new user.

        The store assigns the id; any id sent by the client was already
        dropped when the payload was parsed.

        Returns:
            Ok(User) with the assigned id, or Err INVALID_ARGUMENT
        """
        if not data.is_complete():
            return _invalid(INVALID_USER_MESSAGE)

        user = await self.store.insert(data)
        logger.info(f"Created user: {user.id}")
        return Ok(user)

    @observed("update_user")
    async def update_user(self, user_id: int, data: UserInput) -> Result[User]:
        """
        Replace a user's name and email. The id never changes.

        Returns:
            Ok(User), or Err INVALID_ARGUMENT / NOT_FOUND
        """
        if user_id <= 0:
            return _invalid(INVALID_ID_MESSAGE)

        if await self.store.find_by_id(user_id) is None:
            return _not_found()

        if not data.is_complete():
            return _invalid(INVALID_USER_MESSAGE)

        try:
            user = await self.store.update(user_id, data)
        except NotFoundError:
            # Deleted between the existence check and the write
            return _not_found()

        logger.info(f"Updated user: {user_id}")
        return Ok(user)

    @observed("delete_user")
    async def delete_user(self, user_id: int) -> Result[User]:
        """
        Delete a user.

        Returns:
            Ok(User) holding the removed user, or Err INVALID_ARGUMENT / NOT_FOUND
        """
        if user_id <= 0:
            return _invalid(INVALID_ID_MESSAGE)

        if await self.store.find_by_id(user_id) is None:
            return _not_found()

        try:
            user = await self.store.remove(user_id)
        except NotFoundError:
            return _not_found()

        logger.info(f"Deleted user: {user_id}")
        return Ok(user)

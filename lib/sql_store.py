# =============================================================================
# lib/sql_store.py - Relational User Store (SQLModel)
# =============================================================================
# Persists users in a SQL database through SQLModel/SQLAlchemy.
#
# Each operation opens its own session and commits before returning, so the
# database provides atomicity and id assignment. The blocking work runs on a
# worker thread; no in-process lock is held while waiting on the database.
#
# Usage:
#   store = SqlUserStore("sqlite:///./users.db")
#   user = await store.insert(UserInput(name="Alice", email="a@x.com"))
#   await store.close()
# =============================================================================

import asyncio
import logging
from pathlib import Path
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlmodel import Field, Session, SQLModel, create_engine, select

from app.exceptions import NotFoundError
from core.models.user import User, UserInput
from lib.user_store import UserStore

logger = logging.getLogger(__name__)

# Largest value an INTEGER primary key can hold (signed 64-bit)
MAX_ROW_ID = 2**63 - 1


class UserRecord(SQLModel, table=True):
    """Row in the users table."""

    __tablename__ = "users"
    # Without AUTOINCREMENT SQLite may hand out the id of a deleted last row
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: str


def create_store_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for the given URL, preparing SQLite files as needed."""
    is_sqlite = database_url.startswith("sqlite")
    connect_args = {"check_same_thread": False} if is_sqlite else {}

    if is_sqlite and database_url.startswith("sqlite:///") and ":memory:" not in database_url:
        db_path = database_url.replace("sqlite:///", "", 1)
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return create_engine(database_url, echo=echo, connect_args=connect_args)


class SqlUserStore(UserStore):
    """User store backed by a relational database."""

    backend = "sql"

    def __init__(self, engine: Engine):
        self._engine = engine
        UserRecord.metadata.create_all(self._engine, tables=[UserRecord.__table__])

    @classmethod
    def from_url(cls, database_url: str, echo: bool = False) -> "SqlUserStore":
        return cls(create_store_engine(database_url, echo=echo))

    # -------------------------------------------------------------------------
    # Blocking implementations (run on a worker thread)
    # -------------------------------------------------------------------------

    def _insert(self, candidate: UserInput) -> User:
        with Session(self._engine) as session:
            record = UserRecord(name=candidate.name, email=candidate.email)
            session.add(record)
            session.commit()
            session.refresh(record)
            logger.debug(f"Inserted user {record.id}")
            return User.model_validate(record)

    def _find_by_id(self, user_id: int) -> User | None:
        if user_id > MAX_ROW_ID:
            return None
        with Session(self._engine) as session:
            record = session.get(UserRecord, user_id)
            return User.model_validate(record) if record else None

    def _update(self, user_id: int, patch: UserInput) -> User:
        if user_id > MAX_ROW_ID:
            raise NotFoundError(user_id)
        with Session(self._engine) as session:
            record = session.get(UserRecord, user_id, with_for_update=True)
            if record is None:
                raise NotFoundError(user_id)
            record.name = patch.name
            record.email = patch.email
            session.add(record)
            session.commit()
            session.refresh(record)
            logger.debug(f"Updated user {user_id}")
            return User.model_validate(record)

    def _remove(self, user_id: int) -> User:
        if user_id > MAX_ROW_ID:
            raise NotFoundError(user_id)
        with Session(self._engine) as session:
            record = session.get(UserRecord, user_id, with_for_update=True)
            if record is None:
                raise NotFoundError(user_id)
            removed = User.model_validate(record)
            session.delete(record)
            session.commit()
            logger.debug(f"Removed user {user_id}")
            return removed

    def _list(self) -> list[User]:
        with Session(self._engine) as session:
            records = session.exec(select(UserRecord).order_by(UserRecord.id)).all()
            return [User.model_validate(record) for record in records]

    def _ping(self) -> bool:
        with self._engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True

    # -------------------------------------------------------------------------
    # UserStore interface
    # -------------------------------------------------------------------------

    async def insert(self, candidate: UserInput) -> User:
        return await asyncio.to_thread(self._insert, candidate)

    async def find_by_id(self, user_id: int) -> User | None:
        return await asyncio.to_thread(self._find_by_id, user_id)

    async def update(self, user_id: int, patch: UserInput) -> User:
        return await asyncio.to_thread(self._update, user_id, patch)

    async def remove(self, user_id: int) -> User:
        return await asyncio.to_thread(self._remove, user_id)

    async def ping(self) -> bool:
        return await asyncio.to_thread(self._ping)

    async def close(self) -> None:
        self._engine.dispose()
        logger.info("Closed SQL user store")

    async def list(self) -> list[User]:
        return await asyncio.to_thread(self._list)

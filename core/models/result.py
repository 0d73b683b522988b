# =============================================================================
# core/models/result.py - Operation Results
# =============================================================================
# Service operations return Ok(value) or Err(kind, message) instead of
# raising for expected failures. Routers hand Err values to
# app.exceptions.translate().
# =============================================================================

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from app.exceptions import ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying the operation's value."""
    value: T


@dataclass(frozen=True)
class Err:
    """Expected failure (bad input, missing entity)."""
    kind: ErrorKind
    message: str


Result = Union[Ok[T], Err]

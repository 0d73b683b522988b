# =============================================================================
# lib/observability.py - Operation Logging
# =============================================================================
# The @observed decorator wraps an async operation and logs:
# - receipt, with its inputs (emails are masked)
# - duration and outcome on success
# - duration and error detail on failure (the exception is re-raised)
#
# It never changes what the wrapped operation returns or raises.
#
# Usage:
#   @observed("get_user")
#   async def get_user(self, user_id: int) -> Result[User]:
#       ...
# =============================================================================

import functools
import inspect
import logging
import time
from typing import Any, Awaitable, Callable, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])

MASKED_FIELDS = {"email"}


def mask_email(value: str | None) -> str | None:
    """
    Hide most of an email address for logging.

    Example: "alice@example.com" -> "a***@example.com"
    """
    if not value:
        return value
    local, sep, domain = value.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"


def describe(value: Any) -> Any:
    """Render a value for the log, masking sensitive fields of models."""
    if isinstance(value, BaseModel):
        data = value.model_dump()
        for field in MASKED_FIELDS & data.keys():
            data[field] = mask_email(data[field])
        return data
    return value


def _outcome(result: Any) -> str:
    # Err results carry a kind; anything else is a plain success
    kind = getattr(result, "kind", None)
    if kind is not None:
        return f"error {getattr(kind, 'value', kind)}: {getattr(result, 'message', '')}"
    return "ok"


def observed(operation: str) -> Callable[[F], F]:
    """Decorator that records start, outcome and duration of an async operation."""

    def decorator(func: F) -> F:
        signature = inspect.signature(func)

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound = signature.bind(*args, **kwargs)
            inputs = {
                name: describe(value)
                for name, value in bound.arguments.items()
                if name != "self"
            }
            logger.info(f"{operation} received {inputs}")

            start_time = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.error(
                    f"{operation} failed after {duration_ms:.1f}ms: {type(e).__name__}: {e}",
                    exc_info=True,
                )
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000
            outcome = _outcome(result)
            if outcome == "ok":
                logger.info(f"{operation} succeeded in {duration_ms:.1f}ms")
            else:
                logger.warning(f"{operation} finished in {duration_ms:.1f}ms with {outcome}")
            return result

        return wrapper  # type: ignore[return-value]

    return decorator

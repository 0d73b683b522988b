# =============================================================================
# app/exceptions.py - Error Kinds, Status Mapping and Exception Handlers
# =============================================================================
# Centralized error handling for the API.
#
# One table (ERROR_STATUS) maps every error kind to an HTTP status. It is read
# by both call sites:
# - translate(): used by routers for failures returned by the user service
# - the global handlers registered in main.py for anything that escaped
# =============================================================================

import logging
from enum import Enum
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Category of failure, independent of how it is sent over HTTP."""
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    UNHANDLED = "UNHANDLED"


ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UNHANDLED: 500,
}

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


def status_for(kind: ErrorKind) -> int:
    """Look up the HTTP status for an error kind."""
    return ERROR_STATUS[kind]


def kind_for_status(status_code: int) -> ErrorKind:
    """
    Reverse lookup used for framework-raised HTTP errors.

    Statuses outside the table fall back to INVALID_ARGUMENT for 4xx and
    UNHANDLED for everything else.
    """
    for kind, mapped in ERROR_STATUS.items():
        if mapped == status_code:
            return kind
    if 400 <= status_code < 500:
        return ErrorKind.INVALID_ARGUMENT
    return ErrorKind.UNHANDLED


def error_body(
    kind: ErrorKind,
    message: str,
    detail: str | None = None,
    include_status: bool = False,
) -> dict[str, Any]:
    """
    Build the JSON error body.

    Local responses are {message, detail?}; the global fallback variant
    also carries statusCode.
    """
    body: dict[str, Any] = {}
    if include_status:
        body["statusCode"] = status_for(kind)
    body["message"] = message
    if detail:
        body["detail"] = detail
    return body


def translate(
    kind: ErrorKind,
    message: str,
    detail: str | None = None,
) -> JSONResponse:
    """Convert an expected failure into a response at the route level."""
    return JSONResponse(
        status_code=status_for(kind),
        content=error_body(kind, message, detail),
    )


# =============================================================================
# Exception Classes
# =============================================================================

class UsersServiceError(Exception):
    """
    Base exception for the Users API.

    Carries an ErrorKind so the global handler can map it with the same
    table the routers use.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.UNHANDLED,
        detail: str | None = None,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.detail = detail
        self.headers = headers

    @property
    def status_code(self) -> int:
        return status_for(self.kind)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return error_body(self.kind, self.message, self.detail, include_status=True)


class InvalidArgumentError(UsersServiceError):
    """Raised for malformed client input."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message, kind=ErrorKind.INVALID_ARGUMENT, detail=detail)


class UnauthorizedError(UsersServiceError):
    """Raised when the bearer credential is missing or fails verification."""

    def __init__(self, message: str = "Authentication required.", detail: str | None = None):
        super().__init__(
            message,
            kind=ErrorKind.UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class NotFoundError(UsersServiceError):
    """Raised when no user exists for the given id."""

    def __init__(self, user_id: int, message: str = "User not found."):
        super().__init__(message, kind=ErrorKind.NOT_FOUND)
        self.user_id = user_id


# =============================================================================
# Global Exception Handlers
# =============================================================================

def _expose_detail(request: Request) -> bool:
    app_settings = getattr(request.app.state, "settings", None)
    return app_settings is None or not app_settings.is_production


async def users_service_exception_handler(
    request: Request,
    exc: UsersServiceError
) -> JSONResponse:
    """Convert a UsersServiceError that escaped a route into a JSON response."""
    if exc.kind == ErrorKind.UNHANDLED:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.kind.value}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers=exc.headers,
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Reshape framework HTTP errors (unknown route, bad method) into the error body.

    The original status is kept even when the table maps its kind elsewhere
    (405 is reported as 405, not 400).
    """
    kind = kind_for_status(exc.status_code)
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code} ({kind.value})")
    content = error_body(kind, str(exc.detail), include_status=True)
    content["statusCode"] = exc.status_code
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request parsing errors (non-integer id, malformed JSON body).

    These are client input errors, so they map to INVALID_ARGUMENT.
    """
    detail = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in exc.errors()
    )
    logger.info(f"{request.method} {request.url.path} rejected: {detail}")
    return JSONResponse(
        status_code=status_for(ErrorKind.INVALID_ARGUMENT),
        content=error_body(
            ErrorKind.INVALID_ARGUMENT,
            "Invalid request.",
            detail,
            include_status=True,
        ),
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Last line of defence: log everything, answer with a structured 500."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    detail = f"{type(exc).__name__}: {exc}" if _expose_detail(request) else None
    return JSONResponse(
        status_code=status_for(ErrorKind.UNHANDLED),
        content=error_body(
            ErrorKind.UNHANDLED,
            UNEXPECTED_ERROR_MESSAGE,
            detail,
            include_status=True,
        ),
    )

# =============================================================================
# tests/test_exceptions.py - Error Mapping Tests
# =============================================================================
# Route-level translation and the global handlers share ERROR_STATUS, so
# every kind must map to the same status at both sites.
# =============================================================================

import json

import pytest

from app.exceptions import (
    ERROR_STATUS,
    ErrorKind,
    InvalidArgumentError,
    NotFoundError,
    UnauthorizedError,
    UsersServiceError,
    error_body,
    kind_for_status,
    status_for,
    translate,
)


class TestStatusTable:
    """Tests for the kind -> status table."""

    def test_every_kind_has_a_status(self):
        assert set(ERROR_STATUS) == set(ErrorKind)

    @pytest.mark.parametrize(
        "kind, expected",
        [
            (ErrorKind.INVALID_ARGUMENT, 400),
            (ErrorKind.UNAUTHORIZED, 401),
            (ErrorKind.NOT_FOUND, 404),
            (ErrorKind.UNHANDLED, 500),
        ],
    )
    def test_status_for(self, kind, expected):
        assert status_for(kind) == expected

    def test_kind_for_status_reverses_table(self):
        for kind, status_code in ERROR_STATUS.items():
            assert kind_for_status(status_code) == kind

    def test_kind_for_unknown_status(self):
        assert kind_for_status(405) == ErrorKind.INVALID_ARGUMENT
        assert kind_for_status(503) == ErrorKind.UNHANDLED


class TestErrorBodies:
    """Tests for the local and global body shapes."""

    def test_local_body(self):
        assert error_body(ErrorKind.NOT_FOUND, "User not found.") == {"message": "User not found."}

    def test_body_with_detail(self):
        body = error_body(ErrorKind.INVALID_ARGUMENT, "Bad", detail="name: empty")

        assert body == {"message": "Bad", "detail": "name: empty"}

    def test_global_body_has_status_code(self):
        body = error_body(ErrorKind.UNHANDLED, "Boom", include_status=True)

        assert body == {"statusCode": 500, "message": "Boom"}

    def test_translate_response(self):
        response = translate(ErrorKind.INVALID_ARGUMENT, "Id must be greater than zero.")

        assert response.status_code == 400
        assert json.loads(response.body) == {"message": "Id must be greater than zero."}


class TestExceptionClasses:
    """Exception classes agree with the table."""

    @pytest.mark.parametrize(
        "exc, kind",
        [
            (InvalidArgumentError("bad"), ErrorKind.INVALID_ARGUMENT),
            (UnauthorizedError(), ErrorKind.UNAUTHORIZED),
            (NotFoundError(3), ErrorKind.NOT_FOUND),
            (UsersServiceError("boom"), ErrorKind.UNHANDLED),
        ],
    )
    def test_status_matches_table(self, exc, kind):
        assert exc.kind == kind
        assert exc.status_code == ERROR_STATUS[kind]

    def test_to_dict(self):
        exc = InvalidArgumentError("Invalid request.", detail="body: missing")

        assert exc.to_dict() == {
            "statusCode": 400,
            "message": "Invalid request.",
            "detail": "body: missing",
        }

    def test_unauthorized_sets_challenge_header(self):
        assert UnauthorizedError().headers == {"WWW-Authenticate": "Bearer"}

# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - User: The stored entity returned to clients
# - UserInput: Payload for creating or updating a user
# - ErrorResponse / GlobalErrorResponse: Error bodies (for OpenAPI docs)
#
# The id is always assigned by the store. Clients may send one, but it is
# ignored on create and update.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    Schema for returning user data to clients.

    Example:
        {
            "id": 1,
            "name": "Alice",
            "email": "a@x.com"
        }
    """

    # Assigned by the store, never reused
    id: int = Field(
        ...,
        gt=0,
        description="Unique user identifier"
    )

    name: str = Field(
        ...,
        description="Display name"
    )

    email: str = Field(
        ...,
        description="Contact email (not required to be unique)"
    )

    # Allow building from SQL records
    model_config = ConfigDict(from_attributes=True)


class UserInput(BaseModel):
    """
    Schema for creating or updating a user.

    Both fields are required to be non-empty, but that rule is checked by
    UserService rather than here, so violations produce the same error body
    as every other invalid argument.

    Example:
        {
            "name": "Alice",
            "email": "a@x.com"
        }
    """

    name: str | None = Field(
        default=None,
        description="Display name (required, non-empty)"
    )

    email: str | None = Field(
        default=None,
        description="Contact email (required, non-empty)"
    )

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "examples": [
                {"name": "Alice", "email": "a@x.com"},
            ]
        },
    )

    def is_complete(self) -> bool:
        """True when both name and email contain non-whitespace text."""
        return bool(self.name and self.name.strip()) and bool(self.email and self.email.strip())


class ErrorResponse(BaseModel):
    """Error body returned by route-level error translation."""
    message: str
    detail: str | None = None


class GlobalErrorResponse(ErrorResponse):
    """Error body returned by the application-wide exception handlers."""
    statusCode: int

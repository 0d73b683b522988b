# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class AuthPrincipal(BaseModel):
    """
    Caller identity extracted from a verified bearer token.

    This is the minimal info available from the token itself.
    """
    subject: str
    email: Optional[str] = None
    claims: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class TokenPayload(BaseModel):
    """
    Claims the API expects in a bearer token.

    Used by scripts/issue_token.py to mint development tokens.
    """
    sub: str  # Caller ID
    email: Optional[str] = None
    iss: str  # Issuer
    aud: str  # Audience
    exp: int  # Expiration timestamp
    iat: int  # Issued at timestamp

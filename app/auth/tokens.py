# =============================================================================
# app/auth/tokens.py - Development Token Issuing
# =============================================================================
# The API never issues tokens to clients; this helper exists for local
# development (scripts/issue_token.py) and the test suite.
# =============================================================================

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt

from app.auth.models import TokenPayload
from app.config import Settings


def issue_token(
    settings: Settings,
    subject: str,
    email: Optional[str] = None,
    expires_minutes: Optional[int] = None,
) -> str:
    """
    Sign a JWT that the bearer gate will accept.

    Args:
        settings: Provides the signing key, algorithm, issuer and audience
        subject: Value of the 'sub' claim
        email: Optional 'email' claim
        expires_minutes: Lifetime; defaults to settings.JWT_EXPIRES_MINUTES

    Returns:
        Encoded JWT string
    """
    now = datetime.now(timezone.utc)
    lifetime = timedelta(minutes=expires_minutes or settings.JWT_EXPIRES_MINUTES)
    payload = TokenPayload(
        sub=subject,
        email=email,
        iss=settings.JWT_ISSUER,
        aud=settings.JWT_AUDIENCE,
        iat=int(now.timestamp()),
        exp=int((now + lifetime).timestamp()),
    )
    return jwt.encode(
        payload.model_dump(exclude_none=True),
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )

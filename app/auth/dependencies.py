# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides the bearer-token gate for protected routes.
#
# A request is admitted only if it carries "Authorization: Bearer <jwt>" and
# the token passes signature, issuer, audience and expiry checks. Every other
# case raises UnauthorizedError (401) before any route logic runs.
#
# Usage:
#   from app.auth import get_current_user, AuthPrincipal
#
#   @router.get("/protected")
#   async def protected(principal: AuthPrincipal = Depends(get_current_user)):
#       return {"subject": principal.subject}
# =============================================================================

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt
from jose.exceptions import JWTClaimsError

from app.auth.models import AuthPrincipal
from app.config import Settings
from app.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

# HTTP Bearer token extractor. auto_error is off so a missing header
# reaches get_current_user and gets the same 401 body as a bad token.
security = HTTPBearer(auto_error=False)


def verify_token(token: str, settings: Settings) -> AuthPrincipal:
    """
    Decode and verify a JWT.

    Args:
        token: Raw JWT string
        settings: Provides the signing key, algorithm, issuer and audience

    Returns:
        AuthPrincipal: The verified caller

    Raises:
        UnauthorizedError: If the token is invalid, expired or has wrong claims
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
            options={"require_exp": True},
        )

    except ExpiredSignatureError:
        logger.warning("JWT token has expired")
        raise UnauthorizedError("Token has expired.")

    except JWTClaimsError as e:
        logger.warning(f"JWT claims rejected: {e}")
        raise UnauthorizedError("Invalid token claims.", detail=str(e))

    except JWTError as e:
        logger.warning(f"JWT validation failed: {e}")
        raise UnauthorizedError("Invalid token.", detail=str(e))

    subject = payload.get("sub")
    if not subject:
        logger.warning("JWT token missing 'sub' claim")
        raise UnauthorizedError("Invalid token: missing subject.")

    logger.debug(f"Authenticated caller: {subject}")
    return AuthPrincipal(subject=str(subject), email=payload.get("email"), claims=payload)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthPrincipal:
    """
    Extract and validate the caller from the bearer token.

    Token settings come from the application the request was routed to.

    Raises:
        UnauthorizedError: 401 if the token is missing, invalid or expired
    """
    if credentials is None or not credentials.credentials:
        logger.info("Request rejected: missing bearer token")
        raise UnauthorizedError("Missing bearer token.")

    return verify_token(credentials.credentials, request.app.state.settings)

# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides JWT bearer authentication.
#
# Usage:
#   from app.auth import get_current_user, AuthPrincipal
#
#   @router.get("/protected")
#   async def protected(principal: AuthPrincipal = Depends(get_current_user)):
#       return {"subject": principal.subject}
# =============================================================================

from app.auth.dependencies import get_current_user, verify_token
from app.auth.models import AuthPrincipal, TokenPayload
from app.auth.tokens import issue_token

__all__ = [
    "get_current_user",
    "verify_token",
    "AuthPrincipal",
    "TokenPayload",
    "issue_token",
]

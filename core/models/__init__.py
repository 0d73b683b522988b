# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains the data contracts of the service:
# - user.py: User entity, input payload and error body schemas
# - result.py: Ok/Err result values returned by the service layer
# =============================================================================

from .user import (
    ErrorResponse,
    GlobalErrorResponse,
    User,
    UserInput,
)
from .result import Err, Ok, Result

__all__ = [
    "ErrorResponse",
    "GlobalErrorResponse",
    "User",
    "UserInput",
    "Err",
    "Ok",
    "Result",
]

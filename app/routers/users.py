# =============================================================================
# app/routers/users.py - User CRUD Endpoints
# =============================================================================
# Handles listing, reading, creating, updating and deleting users.
# All endpoints require a valid bearer token (router-level dependency).
#
# Failures returned by UserService are translated right here with
# app.exceptions.translate(); anything raised goes to the global handlers.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response, status

from app.auth import get_current_user
from app.dependencies import UserServiceDep
from app.exceptions import translate
from core.models.result import Err
from core.models.user import ErrorResponse, GlobalErrorResponse, User, UserInput

router = APIRouter(
    dependencies=[Depends(get_current_user)],
    responses={
        401: {"model": GlobalErrorResponse, "description": "Missing or invalid bearer token"},
        500: {"model": GlobalErrorResponse, "description": "Unexpected server error"},
    },
)

UserId = Annotated[int, Path(description="User id (positive integer)")]

BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid id or payload"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=list[User])
async def list_users(service: UserServiceDep):
    """
    List all users.

    Returns users in the order they were created.
    """
    result = await service.list_users()
    if isinstance(result, Err):
        return translate(result.kind, result.message)
    return result.value


@router.get("/{user_id}", response_model=User, responses={**BAD_REQUEST, **NOT_FOUND})
async def get_user(user_id: UserId, service: UserServiceDep):
    """
    Get a single user by id.
    """
    result = await service.get_user(user_id)
    if isinstance(result, Err):
        return translate(result.kind, result.message)
    return result.value


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
async def create_user(
    payload: UserInput,
    request: Request,
    response: Response,
    service: UserServiceDep,
):
    """
    Create a user.

    The id is assigned by the server. The Location header points to
    GET /api/users/{id} for the new user.
    """
    result = await service.create_user(payload)
    if isinstance(result, Err):
        return translate(result.kind, result.message)

    user = result.value
    response.headers["Location"] = str(request.url_for("get_user", user_id=user.id))
    return user


@router.put("/{user_id}", response_model=User, responses={**BAD_REQUEST, **NOT_FOUND})
async def update_user(
    user_id: UserId,
    payload: UserInput,
    service: UserServiceDep,
):
    """
    Replace a user's name and email.

    The id in the path is authoritative; an id in the body is ignored.
    """
    result = await service.update_user(user_id, payload)
    if isinstance(result, Err):
        return translate(result.kind, result.message)
    return result.value


@router.delete("/{user_id}", response_model=User, responses={**BAD_REQUEST, **NOT_FOUND})
async def delete_user(user_id: UserId, service: UserServiceDep):
    """
    Delete a user.

    Returns the user that was removed.
    """
    result = await service.delete_user(user_id)
    if isinstance(result, Err):
        return translate(result.kind, result.message)
    return result.value

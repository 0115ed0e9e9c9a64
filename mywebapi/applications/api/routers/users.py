"""Users API router."""

from fastapi import APIRouter, Depends
from loguru import logger

from mywebapi.applications.api.auth import get_current_user, require_admin
from mywebapi.applications.api.dependencies import get_user_service
from mywebapi.applications.api.schemas import (
    MessageResponse,
    UserCreateRequest,
    UserResponse,
)
from mywebapi.models.user import AuthUser
from mywebapi.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


def _to_response(user: AuthUser) -> UserResponse:
    return UserResponse(username=user.username, role=user.role)


@router.get("/me", response_model=UserResponse)
def get_me(user: AuthUser = Depends(get_current_user)) -> UserResponse:
    logger.info(f"[{user}] Getting own user")
    return _to_response(user)


@router.get("/", response_model=list[UserResponse])
def list_users(
    _admin: AuthUser = Depends(require_admin),
    svc: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    logger.info(f"[{_admin}] Listing users")
    return [_to_response(u) for u in svc.get_users()]


@router.get("/{username}", response_model=UserResponse)
def get_user(
    username: str,
    _admin: AuthUser = Depends(require_admin),
    svc: UserService = Depends(get_user_service),
) -> UserResponse:
    logger.info(f"[{_admin}] Getting user {username}")
    return _to_response(svc.get_user(username))


@router.post("/", response_model=UserResponse, status_code=201)
def create_user(
    req: UserCreateRequest,
    _admin: AuthUser = Depends(require_admin),
    svc: UserService = Depends(get_user_service),
) -> UserResponse:
    logger.info(f"[{_admin}] Creating user {req.username} with role {req.role}")
    return _to_response(svc.add_user(req.username, req.password, req.role))


@router.delete("/{username}", response_model=MessageResponse)
def delete_user(
    username: str,
    _admin: AuthUser = Depends(require_admin),
    svc: UserService = Depends(get_user_service),
) -> MessageResponse:
    logger.info(f"[{_admin}] Deleting user {username}")
    svc.remove_user(username)
    return MessageResponse(message=f"User {username} deleted")

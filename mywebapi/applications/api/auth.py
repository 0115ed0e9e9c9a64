"""Authentication and authorization for the API."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from loguru import logger

from mywebapi.applications.api.dependencies import get_user_service
from mywebapi.models.user import AuthUser, UserRole
from mywebapi.services.user_service import UserService

security = HTTPBasic()


def get_current_user(
    credentials: HTTPBasicCredentials = Depends(security),
    svc: UserService = Depends(get_user_service),
) -> AuthUser:
    """Authenticate via HTTP Basic and return the matching user."""
    user = svc.authenticate(credentials.username, credentials.password)
    if user is None:
        logger.warning(f"Rejected credentials for '{credentials.username}'")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    return user


def require_admin(user: AuthUser = Depends(get_current_user)) -> AuthUser:
    """Dependency that rejects non-admin users with 403."""
    if user.role != UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user

from enum import StrEnum

from pydantic import BaseModel

from mywebapi.utils.passwords import HASH_ITERATIONS


class UserRole(StrEnum):
    """API user roles."""

    ADMIN = "admin"
    VIEWER = "viewer"


class AuthUser(BaseModel):
    """Stored API user with hashed credentials."""

    username: str
    password_hash: str
    salt: str
    role: UserRole
    iterations: int = HASH_ITERATIONS

    def __str__(self) -> str:
        return f"AuthUser(username={self.username}, role={self.role.value})"

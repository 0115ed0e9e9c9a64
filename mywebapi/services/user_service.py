from loguru import logger

from mywebapi.exceptions import (
    DuplicateUserException,
    MalformedUserException,
    UserNotFoundException,
)
from mywebapi.models.user import AuthUser, UserRole
from mywebapi.repos.users import UsersRepo
from mywebapi.utils.passwords import HASH_ITERATIONS, hash_password, verify_password


class UserService:
    """Business logic for API users."""

    def __init__(
        self, users_repo: UsersRepo, hash_iterations: int = HASH_ITERATIONS
    ) -> None:
        self._users_repo = users_repo
        self._hash_iterations = hash_iterations

    def get_users(self) -> list[AuthUser]:
        return sorted(self._users_repo.get_all(), key=lambda u: u.username)

    def get_user(self, username: str) -> AuthUser:
        """Return the user with the given username.

        Raises UserNotFoundException if there is none.
        """
        user = self._users_repo.get(username)
        if user is None:
            raise UserNotFoundException(f"User '{username}' not found")
        return user

    def check_new_username(self, username: str) -> str:
        """Return the stripped username if it can be added.

        Raises MalformedUserException if it is empty and
        DuplicateUserException if it is taken.
        """
        username = username.strip()
        if not username:
            raise MalformedUserException("Username must not be empty")
        if self._users_repo.get(username) is not None:
            raise DuplicateUserException(f"User '{username}' already exists")
        return username

    def add_user(
        self, username: str, password: str, role: UserRole = UserRole.VIEWER
    ) -> AuthUser:
        """Hash the password and store a new user.

        Raises MalformedUserException on empty username/password and
        DuplicateUserException if the username is taken.
        """
        username = self.check_new_username(username)
        if not password:
            raise MalformedUserException("Password must not be empty")
        pw_hash, salt = hash_password(password, iterations=self._hash_iterations)
        user = AuthUser(
            username=username,
            password_hash=pw_hash,
            salt=salt,
            role=role,
            iterations=self._hash_iterations,
        )
        logger.info(f"Adding {user}")
        return self._users_repo.add(user)

    def remove_user(self, username: str) -> None:
        if not self._users_repo.delete(username):
            raise UserNotFoundException(f"User '{username}' not found")
        logger.info(f"Removed user {username}")

    def authenticate(self, username: str, password: str) -> AuthUser | None:
        """Return the user if the credentials match, else None."""
        user = self._users_repo.get(username)
        if user is None or not verify_password(
            password, user.password_hash, user.salt, user.iterations
        ):
            return None
        return user

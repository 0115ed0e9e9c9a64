import json
import os
import tempfile
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from mywebapi.exceptions import UserStoreException
from mywebapi.models.user import AuthUser


class UsersRepo:
    """API users persisted in a JSON file.

    The file is read on every access so that edits made by the
    ``mywebapi-users`` CLI are picked up by a running server. Writes go
    to a temporary file that replaces the store in one step.
    """

    def __init__(self, filepath: Path) -> None:
        self._filepath = Path(filepath)

    @property
    def filepath(self) -> Path:
        return self._filepath

    def _load(self) -> dict[str, AuthUser]:
        if not self._filepath.exists():
            return {}
        text = self._filepath.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
            return {u["username"]: AuthUser(**u) for u in data.get("users", [])}
        except (
            json.JSONDecodeError, ValidationError, KeyError, TypeError, AttributeError
        ) as e:
            logger.error(f"Unreadable users file {self._filepath}: {e}")
            raise UserStoreException(
                f"Users file {self._filepath} is corrupt"
            ) from e

    def _save(self, users: dict[str, AuthUser]) -> None:
        self._filepath.parent.mkdir(parents=True, exist_ok=True)
        data = {"users": [u.model_dump(mode="json") for u in users.values()]}
        fd, tmp_name = tempfile.mkstemp(
            dir=self._filepath.parent,
            prefix=f".{self._filepath.name}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_name, self._filepath)
        except BaseException:
            os.unlink(tmp_name)
            raise

    def get_all(self) -> list[AuthUser]:
        return list(self._load().values())

    def get(self, username: str) -> AuthUser | None:
        return self._load().get(username)

    def add(self, user: AuthUser) -> AuthUser:
        users = self._load()
        users[user.username] = user
        self._save(users)
        return user

    def delete(self, username: str) -> bool:
        users = self._load()
        if users.pop(username, None) is None:
            return False
        self._save(users)
        return True

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from loguru import logger

from mywebapi.applications.api.app import create_app
from mywebapi.dependencies import Container
from mywebapi.models.user import UserRole

ADMIN = ("alice", "alice-secret")
VIEWER = ("bob", "bob-secret")


@pytest.fixture
def users_file(tmp_path: Path) -> Path:
    return tmp_path / "api_users.json"


@pytest.fixture
def container(users_file: Path) -> Container:
    """Container pointed at a temporary user store with cheap hashing."""
    container = Container()
    container.config.from_dict(
        {
            "api_users_file": users_file,
            "password_hash_iterations": 1_000,
            "https_redirect": True,
        }
    )
    svc = container.user_service()
    svc.add_user(*ADMIN, role=UserRole.ADMIN)
    svc.add_user(*VIEWER, role=UserRole.VIEWER)
    return container


@pytest.fixture
def app(container: Container) -> FastAPI:
    return create_app(container)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Client talking to the app over https, without following redirects."""
    with TestClient(
        app, base_url="https://testserver", follow_redirects=False
    ) as client:
        yield client


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru output as ``"LEVEL message"`` lines."""
    messages: list[str] = []
    handler_id = logger.add(
        messages.append, format="{level} {message}", level="DEBUG"
    )
    yield messages
    logger.remove(handler_id)

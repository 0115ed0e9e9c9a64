from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from mywebapi.applications.api.manage_users import cli
from mywebapi.repos.users import UsersRepo


def _passwords(monkeypatch: pytest.MonkeyPatch, *answers: str) -> None:
    it: Iterator[str] = iter(answers)
    monkeypatch.setattr("getpass.getpass", lambda prompt="": next(it))


def _recorded_prompts(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    prompts: list[str] = []

    def fake_getpass(prompt: str = "") -> str:
        prompts.append(prompt)
        return "pw"

    monkeypatch.setattr("getpass.getpass", fake_getpass)
    return prompts


def _run(users_file: Path, *args: str):
    return CliRunner().invoke(cli, ["--users-file", str(users_file), *args])


def test_add_and_list(users_file: Path, monkeypatch: pytest.MonkeyPatch):
    _passwords(monkeypatch, "pw", "pw")
    result = _run(users_file, "add", "carol", "--role", "admin")
    assert result.exit_code == 0, result.output
    assert "User 'carol' added with role 'admin'." in result.output

    result = _run(users_file, "list")
    assert result.exit_code == 0
    assert "carol  role=admin" in result.output
    assert UsersRepo(users_file).get("carol") is not None


def test_list_empty(users_file: Path):
    result = _run(users_file, "list")
    assert result.exit_code == 0
    assert "No users configured." in result.output


def test_add_password_mismatch(users_file: Path, monkeypatch: pytest.MonkeyPatch):
    _passwords(monkeypatch, "pw", "other")
    result = _run(users_file, "add", "carol")
    assert result.exit_code == 1
    assert "Passwords do not match." in result.output
    assert not users_file.exists()


def test_add_duplicate_does_not_prompt(
    users_file: Path, monkeypatch: pytest.MonkeyPatch
):
    _passwords(monkeypatch, "pw", "pw")
    assert _run(users_file, "add", "carol").exit_code == 0
    prompts = _recorded_prompts(monkeypatch)
    result = _run(users_file, "add", "carol")
    assert result.exit_code == 1
    assert "already exists" in result.output
    assert prompts == []


def test_add_empty_username_does_not_prompt(
    users_file: Path, monkeypatch: pytest.MonkeyPatch
):
    prompts = _recorded_prompts(monkeypatch)
    result = _run(users_file, "add", "  ")
    assert result.exit_code == 1
    assert "Username must not be empty" in result.output
    assert prompts == []


def test_add_echoes_stored_username(
    users_file: Path, monkeypatch: pytest.MonkeyPatch
):
    _passwords(monkeypatch, "pw", "pw")
    result = _run(users_file, "add", " carol ")
    assert result.exit_code == 0
    assert "User 'carol' added with role 'viewer'." in result.output
    assert UsersRepo(users_file).get("carol") is not None


def test_remove(users_file: Path, monkeypatch: pytest.MonkeyPatch):
    _passwords(monkeypatch, "pw", "pw")
    _run(users_file, "add", "carol")
    result = _run(users_file, "remove", "carol")
    assert result.exit_code == 0
    assert "User 'carol' removed." in result.output
    assert UsersRepo(users_file).get_all() == []


def test_remove_unknown(users_file: Path):
    result = _run(users_file, "remove", "nobody")
    assert result.exit_code == 1
    assert "not found" in result.output

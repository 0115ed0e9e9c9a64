"""CLI tool for managing API users."""

import getpass
from pathlib import Path

import click

from mywebapi.dependencies import Container
from mywebapi.exceptions import (
    DuplicateUserException,
    MalformedUserException,
    UserNotFoundException,
)
from mywebapi.models.user import UserRole
from mywebapi.services.user_service import UserService


def _service(ctx: click.Context) -> UserService:
    container: Container = ctx.obj
    return container.user_service()


@click.group()
@click.option(
    "--users-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="MYWEBAPI_API_USERS_FILE",
    default=None,
    help="Path to the users JSON file (default: from settings).",
)
@click.pass_context
def cli(ctx: click.Context, users_file: Path | None) -> None:
    """Manage MyWebAPI users."""
    container = Container()
    if users_file is not None:
        container.config.api_users_file.from_value(users_file)
    ctx.obj = container


@cli.command()
@click.argument("username")
@click.option(
    "--role",
    type=click.Choice([r.value for r in UserRole]),
    default=UserRole.VIEWER.value,
    help="User role (default: viewer).",
)
@click.pass_context
def add(ctx: click.Context, username: str, role: str) -> None:
    """Add a new API user."""
    svc = _service(ctx)
    try:
        username = svc.check_new_username(username)
    except (DuplicateUserException, MalformedUserException) as e:
        click.echo(str(e))
        raise SystemExit(1)
    password = getpass.getpass("Password: ")
    confirm = getpass.getpass("Confirm password: ")
    if password != confirm:
        click.echo("Passwords do not match.")
        raise SystemExit(1)
    try:
        user = svc.add_user(username, password, UserRole(role))
    except (DuplicateUserException, MalformedUserException) as e:
        click.echo(str(e))
        raise SystemExit(1)
    click.echo(f"User '{user.username}' added with role '{user.role}'.")


@cli.command("list")
@click.pass_context
def list_users(ctx: click.Context) -> None:
    """List all API users."""
    users = _service(ctx).get_users()
    if not users:
        click.echo("No users configured.")
        return
    for user in users:
        click.echo(f"  {user.username}  role={user.role}")


@cli.command()
@click.argument("username")
@click.pass_context
def remove(ctx: click.Context, username: str) -> None:
    """Remove an API user."""
    try:
        _service(ctx).remove_user(username)
    except UserNotFoundException as e:
        click.echo(str(e))
        raise SystemExit(1)
    click.echo(f"User '{username}' removed.")


if __name__ == "__main__":
    cli()

"""Account Admin CLI — operator commands run directly against the database.

Invariants:
    - The only path that can grant the "admin" role (registration never does)
    - Every command opens and disposes its own engine (db/session.py)
    - Runs against a migrated schema only; tables are never created here
    - Exit code 1 on any domain or database error, with the message on stderr
"""

import asyncio
from typing import Awaitable, Callable, TypeVar

import typer
from sqlalchemy.exc import SQLAlchemyError

from todo_app.config import normalize_database_url
from todo_app.core.domain_types import Role
from todo_app.core.errors import ResourceNotFoundError, TodoAppError
from todo_app.db.session import standalone_session
from todo_app.services.credential_store import CredentialStore

cli = typer.Typer(help="To-Do account management")

T = TypeVar("T")


@cli.callback()
def main(
    ctx: typer.Context,
    database_url: str = typer.Option(..., envvar="DATABASE_URL", help="SQLAlchemy async URL"),
    password_min_length: int = typer.Option(6, envvar="PASSWORD_MIN_LENGTH"),
):
    ctx.obj = {
        "database_url": normalize_database_url(database_url),
        "password_min_length": password_min_length,
    }


def _run(ctx: typer.Context, action: Callable[[CredentialStore], Awaitable[T]]) -> T:
    async def _go() -> T:
        async with standalone_session(ctx.obj["database_url"]) as db:
            return await action(CredentialStore(db, ctx.obj["password_min_length"]))

    try:
        return asyncio.run(_go())
    except TodoAppError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(1)
    except SQLAlchemyError as e:
        typer.echo(
            f"Error: database error ({e.__class__.__name__}); "
            "is the schema migrated? (alembic upgrade head)",
            err=True,
        )
        raise typer.Exit(1)


@cli.command()
def add(
    ctx: typer.Context,
    email: str = typer.Argument(...),
    role: Role = typer.Option(Role.USER, help="Account role"),
    password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True),
):
    """Create an account."""
    user = _run(ctx, lambda store: store.register(email, password, role))
    typer.echo(f"Created {user.email} ({user.role})")


@cli.command()
def passwd(
    ctx: typer.Context,
    email: str = typer.Argument(...),
    password: str = typer.Option(..., prompt="New password", hide_input=True, confirmation_prompt=True),
):
    """Change an account's password."""

    async def change(store: CredentialStore) -> bool:
        user = await store.get_by_email(email)
        if user is None:
            raise ResourceNotFoundError("User")
        return await store.set_password(user, password)

    changed = _run(ctx, change)
    typer.echo("Password changed" if changed else "Password unchanged")


@cli.command()
def promote(
    ctx: typer.Context,
    email: str = typer.Argument(...),
    role: Role = typer.Option(Role.ADMIN, help="Role to assign"),
):
    """Set an account's role (admin by default)."""
    user = _run(ctx, lambda store: store.set_role(email, role))
    typer.echo(f"{user.email} is now {user.role}")


@cli.command("list")
def list_accounts(ctx: typer.Context):
    """List all accounts (id, email, role)."""
    users = _run(ctx, lambda store: store.list_accounts())
    for user in users:
        typer.echo(f"{user.id}\t{user.email}\t{user.role}")


if __name__ == "__main__":
    cli()

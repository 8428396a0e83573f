"""User account commands."""

import click

from ..db.repositories import UserRepository
from ..errors import FitJourneyError
from ..services.accounts import AccountService
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized, format_table


@click.group()
def users():
    """Manage user accounts."""
    pass


@users.command("add")
@click.argument("name")
@click.argument("email")
@click.password_option()
@click.option("--img", default=None, help="Avatar image URL")
@click.pass_context
@async_command
async def add(ctx: click.Context, name: str, email: str, password: str, img: str | None):
    """Register a new user."""
    settings = ensure_initialized(ctx)
    accounts = AccountService(settings, UserRepository(settings.db_path))

    try:
        user = await accounts.create_account(name, email, password, img)
    except FitJourneyError as e:
        echo_error(e.message)
        ctx.exit(1)

    echo_success(f"Created user {user.id} ({user.email})")


@users.command("list")
@click.pass_context
@async_command
async def list_users(ctx: click.Context):
    """List registered users."""
    settings = ensure_initialized(ctx)
    all_users = await UserRepository(settings.db_path).list_all()

    if not all_users:
        echo_info("No users yet. Run 'fitjourney users add NAME EMAIL'.")
        return

    rows = [[str(u.id), u.name, u.email] for u in all_users]
    click.echo(format_table(["ID", "Name", "Email"], rows))

"""Shared CLI utilities."""

import asyncio
from datetime import date
from functools import wraps

import click

from ..config import Settings
from ..db.repositories import UserRepository
from ..errors import NotFoundError
from ..models.user import User


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def get_settings(ctx: click.Context) -> Settings:
    """Get the settings built by the root command."""
    return ctx.find_root().obj


def ensure_initialized(ctx: click.Context) -> Settings:
    """Ensure the database is initialized and return the settings."""
    settings = get_settings(ctx)
    if not settings.db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Database not initialized. Run 'fitjourney init' first."
        )
        ctx.exit(1)
    return settings


async def resolve_user(settings: Settings, email: str) -> User:
    """Look up a user by e-mail."""
    user = await UserRepository(settings.db_path).get_by_email(email)
    if user is None:
        raise NotFoundError(f"User {email} not found")
    return user


def parse_day(value: str | None) -> date:
    """Parse a --date option, defaulting to today."""
    if not value:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"Expected YYYY-MM-DD, got {value!r}", param_hint="--date")


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = [
        "".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)),
        "".join("-" * w + " " * padding for w in widths),
    ]
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row))
        )

    return "\n".join(line.rstrip() for line in lines)


def format_number(value: float) -> str:
    """Format a calorie or weight figure without a trailing .0."""
    return f"{value:.0f}" if value == int(value) else f"{value:.1f}"

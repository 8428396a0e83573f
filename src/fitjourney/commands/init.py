"""Initialize database command."""

import click

from ..db import init_db
from .base import async_command, echo_info, echo_success, get_settings


@click.command()
@click.pass_context
@async_command
async def init(ctx: click.Context):
    """Initialize the fitjourney database.

    Creates the data directory and the SQLite schema. Safe to run again.
    """
    settings = get_settings(ctx)

    echo_info(f"Initializing fitjourney in {settings.data_dir}")
    settings.ensure_data_dir()

    await init_db(settings.db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("Next steps:")
    click.echo("  fitjourney users add NAME EMAIL")
    click.echo('  fitjourney log EMAIL "#Legs')
    click.echo("  @Squats")
    click.echo("  -4 setsX12 reps")
    click.echo("  -60 kg")
    click.echo('  -30 min"')
    click.echo("  fitjourney dashboard EMAIL")

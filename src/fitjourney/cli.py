"""CLI entry point for fitjourney."""

from dataclasses import replace
from pathlib import Path

import click

from . import __version__
from .commands import dashboard, init, log, serve, users, workouts
from .config import Settings
from .logging_setup import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="fitjourney")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the database (overrides FITJOURNEY_DATA_DIR)",
)
@click.option("--verbose", "-v", is_flag=True, help="Print log messages")
@click.pass_context
def main(ctx: click.Context, data_dir: Path | None, verbose: bool):
    """fitjourney: log workouts in shorthand and track calories burnt.

    Example usage:

        # Initialize the database
        fitjourney init

        # Create an account
        fitjourney users add "Jane" jane@example.com

        # Log workouts
        fitjourney log jane@example.com --file today.txt

        # View today's dashboard
        fitjourney dashboard jane@example.com
    """
    settings = Settings.from_env()
    if data_dir is not None:
        settings = replace(settings, data_dir=data_dir)
    if verbose:
        configure_logging(settings.log_level)
    ctx.obj = settings


# Register commands
main.add_command(init)
main.add_command(serve)
main.add_command(users)
main.add_command(log)
main.add_command(workouts)
main.add_command(dashboard)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()

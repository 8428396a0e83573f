"""Workout logging command."""

import click

from ..db.repositories import UserRepository, WorkoutRepository
from ..errors import FitJourneyError
from ..services.workout_log import WorkoutLogService
from .base import (
    async_command,
    echo_error,
    echo_success,
    ensure_initialized,
    format_number,
    format_table,
    resolve_user,
)


@click.command()
@click.argument("email")
@click.argument("text", required=False)
@click.option(
    "--file",
    "-f",
    "log_file",
    type=click.File("r"),
    help="Read the workout log from a file ('-' for stdin)",
)
@click.pass_context
@async_command
async def log(ctx: click.Context, email: str, text: str | None, log_file):
    """Log workouts for a user from shorthand text.

    Blocks are separated by ';' and each block lists, one per line, the
    category, name, sets/reps, weight and duration:

        fitjourney log me@example.com "#Legs
        @Squats
        -4 setsX12 reps
        -60 kg
        -30 min"
    """
    settings = ensure_initialized(ctx)

    if log_file is not None:
        text = log_file.read()

    service = WorkoutLogService(
        WorkoutRepository(settings.db_path), UserRepository(settings.db_path)
    )

    try:
        user = await resolve_user(settings, email)
        records = await service.add_workouts(user.id, text)
    except FitJourneyError as e:
        echo_error(e.message)
        ctx.exit(1)

    rows = [
        [
            r.category,
            r.workout_name,
            f"{r.sets}x{r.reps}",
            format_number(r.weight),
            format_number(r.duration),
            format_number(r.calories_burned),
        ]
        for r in records
    ]
    click.echo(format_table(["Category", "Workout", "Sets", "Kg", "Min", "Calories"], rows))
    echo_success(f"Logged {len(records)} workout(s)")

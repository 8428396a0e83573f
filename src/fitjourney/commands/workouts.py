"""Workouts-by-date command."""

import click

from ..db.repositories import UserRepository, WorkoutRepository
from ..errors import FitJourneyError
from ..services.dashboard import DashboardService
from .base import (
    async_command,
    echo_error,
    echo_info,
    ensure_initialized,
    format_number,
    format_table,
    parse_day,
    resolve_user,
)


@click.command()
@click.argument("email")
@click.option("--date", "date_str", default=None, help="Day to show (YYYY-MM-DD, default today)")
@click.pass_context
@async_command
async def workouts(ctx: click.Context, email: str, date_str: str | None):
    """Show a user's workouts for one day."""
    settings = ensure_initialized(ctx)
    day = parse_day(date_str)

    service = DashboardService(
        WorkoutRepository(settings.db_path), UserRepository(settings.db_path)
    )

    try:
        user = await resolve_user(settings, email)
        day_workouts = await service.workouts_by_date(user.id, day)
    except FitJourneyError as e:
        echo_error(e.message)
        ctx.exit(1)

    click.echo(click.style(f"Workouts on {day.isoformat()}", bold=True))

    if not day_workouts.workouts:
        echo_info("No workouts logged.")
        return

    rows = [
        [
            w.date.strftime("%H:%M"),
            w.category,
            w.workout_name,
            f"{w.sets}x{w.reps}",
            format_number(w.weight),
            format_number(w.duration),
            format_number(w.calories_burned),
        ]
        for w in day_workouts.workouts
    ]
    click.echo(
        format_table(["Time", "Category", "Workout", "Sets", "Kg", "Min", "Calories"], rows)
    )
    click.echo()
    click.echo(f"Total calories: {format_number(day_workouts.total_calories_burnt)}")

"""Dashboard command."""

import click

from ..db.repositories import UserRepository, WorkoutRepository
from ..errors import FitJourneyError
from ..services.dashboard import DashboardService
from .base import (
    async_command,
    echo_error,
    ensure_initialized,
    format_number,
    format_table,
    parse_day,
    resolve_user,
)

BAR_WIDTH = 30


@click.command()
@click.argument("email")
@click.option("--date", "date_str", default=None, help="Day to summarize (YYYY-MM-DD, default today)")
@click.pass_context
@async_command
async def dashboard(ctx: click.Context, email: str, date_str: str | None):
    """Show the daily summary and 7-day calorie trend."""
    settings = ensure_initialized(ctx)
    day = parse_day(date_str)

    service = DashboardService(
        WorkoutRepository(settings.db_path), UserRepository(settings.db_path)
    )

    try:
        user = await resolve_user(settings, email)
        summary = await service.daily_summary(user.id, day)
        trend = await service.weekly_trend(user.id, day)
    except FitJourneyError as e:
        echo_error(e.message)
        ctx.exit(1)

    click.echo()
    click.echo(click.style(f"Dashboard for {user.name}: {day.isoformat()}", bold=True))
    click.echo("=" * 50)
    click.echo(f"Calories burnt:        {format_number(summary.total_calories_burnt)}")
    click.echo(f"Workouts:              {summary.total_workouts}")
    click.echo(
        f"Average per workout:   {format_number(summary.avg_calories_burnt_per_workout)}"
    )

    if summary.category_breakdown:
        click.echo()
        click.echo(click.style("By category:", bold=True))
        rows = [[c.label, format_number(c.value)] for c in summary.category_breakdown]
        click.echo(format_table(["Category", "Calories"], rows))

    click.echo()
    click.echo(click.style("Last 7 days:", bold=True))
    peak = max(trend.totals) or 1
    for point in trend.points:
        bar = "#" * round(point.total_calories / peak * BAR_WIDTH)
        click.echo(f"  {point.label:>5} {bar} {format_number(point.total_calories)}")

"""Dashboard aggregation over stored workouts."""

from datetime import date, datetime, time, timedelta

from ..db.repositories import UserRepository, WorkoutRepository
from ..errors import NotFoundError
from ..models.summary import (
    CategoryTotal,
    DailySummary,
    DayWorkouts,
    TrendPoint,
    WeeklyTrend,
)

TREND_DAYS = 7


def day_window(day: date) -> tuple[datetime, datetime]:
    """Get the half-open `[start, end)` window covering one calendar day."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def day_label(day: date) -> str:
    """Label used on the weekly chart axis."""
    return f"{day.day}th"


def build_category_breakdown(totals: list[tuple[str, float]]) -> list[CategoryTotal]:
    """Number category totals for charting.

    Ids follow the order of `totals`, which the repository sorts by label.
    """
    return [
        CategoryTotal(id=index, value=value, label=label)
        for index, (label, value) in enumerate(totals)
    ]


class DashboardService:
    """Read-side statistics for one user's workouts.

    Every figure is recomputed from stored records on each call.
    """

    def __init__(self, workout_repo: WorkoutRepository, user_repo: UserRepository):
        self.workout_repo = workout_repo
        self.user_repo = user_repo

    async def _require_user(self, user_id: int) -> None:
        if await self.user_repo.get(user_id) is None:
            raise NotFoundError("User not found")

    async def daily_summary(self, user_id: int, day: date) -> DailySummary:
        """Totals, workout count and category breakdown for one day."""
        start, end = day_window(day)

        total = await self.workout_repo.total_calories(user_id, start, end)
        count = await self.workout_repo.count(user_id, start, end)
        categories = await self.workout_repo.category_totals(user_id, start, end)

        return DailySummary(
            day=day,
            total_calories_burnt=total,
            total_workouts=count,
            category_breakdown=build_category_breakdown(categories),
        )

    async def weekly_trend(self, user_id: int, end_day: date) -> WeeklyTrend:
        """Calorie totals for the seven days ending on `end_day`.

        Each day is queried on its own window.
        """
        points = []
        for offset in range(TREND_DAYS - 1, -1, -1):
            day = end_day - timedelta(days=offset)
            start, end = day_window(day)
            total = await self.workout_repo.total_calories(user_id, start, end)
            points.append(TrendPoint(day=day, label=day_label(day), total_calories=total))
        return WeeklyTrend(points=points)

    async def dashboard(self, user_id: int, day: date | None = None) -> dict:
        """Build the dashboard payload for one day."""
        await self._require_user(user_id)
        day = day or date.today()

        summary = await self.daily_summary(user_id, day)
        trend = await self.weekly_trend(user_id, day)

        data = summary.to_dict()
        data["totalWeeksCaloriesBurnt"] = trend.to_dict()
        return data

    async def workouts_by_date(self, user_id: int, day: date | None = None) -> DayWorkouts:
        """Get one day's workouts and their calorie total."""
        await self._require_user(user_id)
        day = day or date.today()

        start, end = day_window(day)
        workouts = await self.workout_repo.list_in_window(user_id, start, end)
        return DayWorkouts(day=day, workouts=workouts)

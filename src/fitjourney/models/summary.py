"""Computed dashboard summaries. None of these are persisted."""

from dataclasses import dataclass, field
from datetime import date

from .workout import WorkoutRecord


@dataclass
class CategoryTotal:
    """Calories for one category, shaped for a pie chart."""

    id: int
    value: float
    label: str

    def to_dict(self) -> dict:
        return {"id": self.id, "value": self.value, "label": self.label}


@dataclass
class DailySummary:
    """Totals for one user over one calendar day."""

    day: date
    total_calories_burnt: float = 0
    total_workouts: int = 0
    category_breakdown: list[CategoryTotal] = field(default_factory=list)

    @property
    def avg_calories_burnt_per_workout(self) -> float:
        """Average calories per workout, 0 when the day is empty."""
        if self.total_workouts > 0:
            return self.total_calories_burnt / self.total_workouts
        return 0

    def to_dict(self) -> dict:
        """Convert to the dashboard JSON shape."""
        return {
            "totalCaloriesBurnt": self.total_calories_burnt,
            "totalWorkouts": self.total_workouts,
            "avgCaloriesBurntPerWorkout": self.avg_calories_burnt_per_workout,
            "pieChartData": [c.to_dict() for c in self.category_breakdown],
        }


@dataclass
class TrendPoint:
    """One day of the weekly trend."""

    day: date
    label: str
    total_calories: float


@dataclass
class WeeklyTrend:
    """Seven consecutive days of calorie totals, oldest first."""

    points: list[TrendPoint]

    @property
    def labels(self) -> list[str]:
        return [p.label for p in self.points]

    @property
    def totals(self) -> list[float]:
        return [p.total_calories for p in self.points]

    def to_dict(self) -> dict:
        return {"weeks": self.labels, "caloriesBurned": self.totals}


@dataclass
class DayWorkouts:
    """Raw records for one day and their summed calories."""

    day: date
    workouts: list[WorkoutRecord]

    @property
    def total_calories_burnt(self) -> float:
        return sum(w.calories_burned for w in self.workouts)

    def to_dict(self) -> dict:
        return {
            "todaysWorkouts": [w.to_dict() for w in self.workouts],
            "totalCaloriesBurnt": self.total_calories_burnt,
        }

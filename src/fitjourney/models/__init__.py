"""Data models for fitjourney."""

from .summary import CategoryTotal, DailySummary, DayWorkouts, TrendPoint, WeeklyTrend
from .user import User
from .workout import WorkoutDraft, WorkoutRecord

__all__ = [
    "CategoryTotal",
    "DailySummary",
    "DayWorkouts",
    "TrendPoint",
    "User",
    "WeeklyTrend",
    "WorkoutDraft",
    "WorkoutRecord",
]

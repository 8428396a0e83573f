"""Services for fitjourney."""

from .accounts import AccountService
from .calories import estimate_calories
from .dashboard import DashboardService
from .workout_log import WorkoutLogService

__all__ = [
    "AccountService",
    "DashboardService",
    "estimate_calories",
    "WorkoutLogService",
]

"""Database layer for fitjourney."""

from .engine import init_db
from .repositories import UserRepository, WorkoutRepository

__all__ = [
    "init_db",
    "UserRepository",
    "WorkoutRepository",
]

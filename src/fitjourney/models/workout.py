"""Workout data models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class WorkoutDraft:
    """A parsed workout before ownership and calories are attached."""

    category: str
    workout_name: str
    sets: int
    reps: int
    weight: float  # in kg
    duration: float  # in minutes

    def to_dict(self) -> dict:
        """Convert to the JSON shape used by the API."""
        return {
            "category": self.category,
            "workoutName": self.workout_name,
            "sets": self.sets,
            "reps": self.reps,
            "weight": self.weight,
            "duration": self.duration,
        }


@dataclass
class WorkoutRecord:
    """A stored workout owned by one user.

    `calories_burned` is always computed server-side from weight and
    duration; records are never updated after they are stored.
    """

    user_id: int
    category: str
    workout_name: str
    sets: int
    reps: int
    weight: float
    duration: float
    calories_burned: float
    date: datetime
    id: int | None = None

    @classmethod
    def from_draft(
        cls,
        draft: WorkoutDraft,
        user_id: int,
        calories_burned: float,
        date: datetime,
    ) -> "WorkoutRecord":
        """Create a record from a parsed draft."""
        return cls(
            user_id=user_id,
            category=draft.category,
            workout_name=draft.workout_name,
            sets=draft.sets,
            reps=draft.reps,
            weight=draft.weight,
            duration=draft.duration,
            calories_burned=calories_burned,
            date=date,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON responses."""
        return {
            "id": self.id,
            "user": self.user_id,
            "category": self.category,
            "workoutName": self.workout_name,
            "sets": self.sets,
            "reps": self.reps,
            "weight": self.weight,
            "duration": self.duration,
            "caloriesBurned": self.calories_burned,
            "date": self.date.isoformat(),
        }

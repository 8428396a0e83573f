"""Calorie estimation for logged workouts."""

import math

from ..models.workout import WorkoutDraft

# Calories burnt per minute per kilogram lifted
CALORIES_PER_MINUTE_PER_KG = 5


def estimate_calories(weight: float, duration: float) -> float:
    """Estimate calories burnt for a workout.

    Weight and duration are truncated to whole numbers before multiplying,
    so 30.9 minutes at 60.5 kg counts as 30 minutes at 60 kg.

    Args:
        weight: Load in kg
        duration: Duration in minutes

    Returns:
        Estimated calories burnt
    """
    for name, value in (("weight", weight), ("duration", duration)):
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"{name} must be a finite non-negative number, got {value!r}")

    return float(math.floor(duration) * CALORIES_PER_MINUTE_PER_KG * math.floor(weight))


def calories_for(draft: WorkoutDraft) -> float:
    """Estimate calories for a parsed workout."""
    return estimate_calories(draft.weight, draft.duration)

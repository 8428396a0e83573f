"""Tests for calorie estimation."""

import math

import pytest

from fitjourney.models.workout import WorkoutDraft
from fitjourney.services.calories import (
    CALORIES_PER_MINUTE_PER_KG,
    calories_for,
    estimate_calories,
)


class TestEstimateCalories:
    """Tests for estimate_calories."""

    def test_squats_example(self):
        """Test 30 minutes at 60 kg."""
        assert estimate_calories(weight=60, duration=30) == 9000

    def test_fractions_truncated(self):
        """Test weight and duration are truncated before multiplying."""
        assert estimate_calories(weight=60.9, duration=30.9) == 30 * 5 * 60

    def test_zero_weight(self):
        """Test bodyweight work with no load burns nothing."""
        assert estimate_calories(weight=0, duration=45) == 0

    def test_constant(self):
        """Test the per-minute, per-kilogram rate."""
        assert CALORIES_PER_MINUTE_PER_KG == 5
        assert estimate_calories(weight=1, duration=1) == 5

    @pytest.mark.parametrize("weight, duration", [(math.nan, 30), (60, math.inf), (-1, 30)])
    def test_invalid_inputs(self, weight, duration):
        """Test invalid numbers raise instead of propagating."""
        with pytest.raises(ValueError):
            estimate_calories(weight=weight, duration=duration)

    def test_calories_for_draft(self):
        """Test estimating from a parsed draft."""
        draft = WorkoutDraft(
            category="Arms",
            workout_name="Curls",
            sets=3,
            reps=10,
            weight=12.5,
            duration=15,
        )
        assert calories_for(draft) == 15 * 5 * 12

"""Workout log submission service."""

import logging
from datetime import datetime

from ..db.repositories import UserRepository, WorkoutRepository
from ..errors import MalformedLogError, NotFoundError, ValidationError
from ..models.workout import WorkoutRecord
from ..parsing.shorthand import parse_workout_log
from .calories import calories_for

logger = logging.getLogger(__name__)


class WorkoutLogService:
    """Turns shorthand submissions into stored workout records."""

    def __init__(self, workout_repo: WorkoutRepository, user_repo: UserRepository):
        self.workout_repo = workout_repo
        self.user_repo = user_repo

    async def add_workouts(
        self,
        user_id: int,
        workout_string: str | None,
        now: datetime | None = None,
    ) -> list[WorkoutRecord]:
        """Parse a submission and store every workout in it.

        All workouts are parsed and priced before anything is written, and
        the records are inserted in one transaction.

        Args:
            user_id: Owner of the new records
            workout_string: Raw shorthand text
            now: Timestamp for the records (defaults to the current time)

        Returns:
            The stored records, in submission order
        """
        if not workout_string or not workout_string.strip():
            raise ValidationError("Workout string is missing")

        user = await self.user_repo.get(user_id)
        if user is None:
            raise NotFoundError("User not found")

        try:
            drafts = parse_workout_log(workout_string)
        except MalformedLogError as e:
            logger.info("Rejected workout log from user %s: %s", user_id, e.message)
            raise

        date = now or datetime.now()
        records = [
            WorkoutRecord.from_draft(
                draft,
                user_id=user_id,
                calories_burned=calories_for(draft),
                date=date,
            )
            for draft in drafts
        ]

        await self.workout_repo.create_many(records)
        logger.info("Stored %d workouts for user %s", len(records), user_id)
        return records

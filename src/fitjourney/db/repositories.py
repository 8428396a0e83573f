"""Data access layer for fitjourney."""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path

import aiosqlite

from ..errors import PersistenceError
from ..models.user import User
from ..models.workout import WorkoutRecord


def _format_timestamp(value: datetime) -> str:
    """Format a timestamp so stored values sort chronologically as text."""
    return value.isoformat(timespec="microseconds")


@contextmanager
def _storage_errors(action: str) -> Iterator[None]:
    """Translate sqlite errors raised while writing."""
    try:
        yield
    except aiosqlite.IntegrityError as e:
        raise PersistenceError(f"Could not {action}: {e}", constraint=True) from e
    except aiosqlite.Error as e:
        raise PersistenceError(f"Could not {action}: {e}") from e


class UserRepository:
    """Repository for user accounts."""

    def __init__(self, db_path: Path):
        self.db_path = db_path

    async def create(self, user: User) -> int:
        """Create a new user."""
        with _storage_errors("create user"):
            async with aiosqlite.connect(self.db_path) as db:
                cursor = await db.execute(
                    """
                    INSERT INTO users (name, email, password_hash, img)
                    VALUES (?, ?, ?, ?)
                    """,
                    (user.name, user.email, user.password_hash, user.img),
                )
                await db.commit()
                user.id = cursor.lastrowid
                return cursor.lastrowid

    async def get(self, user_id: int) -> User | None:
        """Get a user by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM users WHERE id = ?", (user_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_user(row)

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by e-mail address."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM users WHERE email = ?", (email,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_user(row)

    async def list_all(self) -> list[User]:
        """List all users."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM users ORDER BY id")
            rows = await cursor.fetchall()
            return [self._row_to_user(row) for row in rows]

    def _row_to_user(self, row: aiosqlite.Row) -> User:
        """Convert a database row to a User."""
        return User(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            password_hash=row["password_hash"],
            img=row["img"],
            created_at=datetime.fromisoformat(row["created_at"]) if row["created_at"] else None,
        )


class WorkoutRepository:
    """Repository for logged workouts.

    Window queries take a half-open range `[start, end)`.
    """

    def __init__(self, db_path: Path):
        self.db_path = db_path

    async def create_many(self, records: list[WorkoutRecord]) -> list[int]:
        """Store several workouts in one transaction.

        Either every record is stored or none is.
        """
        ids = []
        with _storage_errors("save workouts"):
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute("PRAGMA foreign_keys = ON")
                try:
                    for record in records:
                        cursor = await db.execute(
                            """
                            INSERT INTO workouts
                            (user_id, category, workout_name, sets, reps, weight,
                             duration, calories_burned, date)
                            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                            """,
                            (
                                record.user_id,
                                record.category,
                                record.workout_name,
                                record.sets,
                                record.reps,
                                record.weight,
                                record.duration,
                                record.calories_burned,
                                _format_timestamp(record.date),
                            ),
                        )
                        ids.append(cursor.lastrowid)
                    await db.commit()
                except Exception:
                    await db.rollback()
                    raise

        for record, record_id in zip(records, ids):
            record.id = record_id
        return ids

    async def list_in_window(
        self, user_id: int, start: datetime, end: datetime
    ) -> list[WorkoutRecord]:
        """Get a user's workouts in a time window, oldest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM workouts
                WHERE user_id = ? AND date >= ? AND date < ?
                ORDER BY date, id
                """,
                (user_id, _format_timestamp(start), _format_timestamp(end)),
            )
            rows = await cursor.fetchall()
            return [self._row_to_workout(row) for row in rows]

    async def total_calories(self, user_id: int, start: datetime, end: datetime) -> float:
        """Sum calories burnt in a time window (0 when empty)."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                SELECT COALESCE(SUM(calories_burned), 0) FROM workouts
                WHERE user_id = ? AND date >= ? AND date < ?
                """,
                (user_id, _format_timestamp(start), _format_timestamp(end)),
            )
            row = await cursor.fetchone()
            return float(row[0])

    async def count(self, user_id: int, start: datetime, end: datetime) -> int:
        """Count workouts in a time window."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                SELECT COUNT(*) FROM workouts
                WHERE user_id = ? AND date >= ? AND date < ?
                """,
                (user_id, _format_timestamp(start), _format_timestamp(end)),
            )
            row = await cursor.fetchone()
            return row[0]

    async def category_totals(
        self, user_id: int, start: datetime, end: datetime
    ) -> list[tuple[str, float]]:
        """Sum calories per category in a time window, ordered by category."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                SELECT category, SUM(calories_burned) FROM workouts
                WHERE user_id = ? AND date >= ? AND date < ?
                GROUP BY category
                ORDER BY category
                """,
                (user_id, _format_timestamp(start), _format_timestamp(end)),
            )
            rows = await cursor.fetchall()
            return [(row[0], float(row[1])) for row in rows]

    def _row_to_workout(self, row: aiosqlite.Row) -> WorkoutRecord:
        """Convert a database row to a WorkoutRecord."""
        return WorkoutRecord(
            id=row["id"],
            user_id=row["user_id"],
            category=row["category"],
            workout_name=row["workout_name"],
            sets=row["sets"],
            reps=row["reps"],
            weight=row["weight"],
            duration=row["duration"],
            calories_burned=row["calories_burned"],
            date=datetime.fromisoformat(row["date"]),
        )

"""Database engine setup and initialization."""

import logging
from pathlib import Path

import aiosqlite

logger = logging.getLogger(__name__)


async def init_db(db_path: Path) -> None:
    """Initialize the database schema."""
    db_path.parent.mkdir(parents=True, exist_ok=True)

    async with aiosqlite.connect(db_path) as db:
        # Registered users
        await db.execute("""
            CREATE TABLE IF NOT EXISTS users (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                email TEXT UNIQUE NOT NULL,
                password_hash TEXT NOT NULL,
                img TEXT,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # Logged workouts (append-only)
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workouts (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                category TEXT NOT NULL,
                workout_name TEXT NOT NULL,
                sets INTEGER NOT NULL CHECK (sets > 0),
                reps INTEGER NOT NULL CHECK (reps > 0),
                weight REAL NOT NULL CHECK (weight >= 0),
                duration REAL NOT NULL CHECK (duration >= 0),
                calories_burned REAL NOT NULL CHECK (calories_burned >= 0),
                date TIMESTAMP NOT NULL,
                FOREIGN KEY (user_id) REFERENCES users(id)
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workouts_user_date
            ON workouts(user_id, date)
        """)

        await db.commit()

    logger.info("Database initialized at %s", db_path)

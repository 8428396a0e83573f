"""Pytest configuration and fixtures."""

import asyncio
import tempfile
from datetime import datetime
from pathlib import Path

import pytest

from fitjourney.config import Settings
from fitjourney.db.engine import init_db
from fitjourney.db.repositories import UserRepository, WorkoutRepository
from fitjourney.models.user import User
from fitjourney.models.workout import WorkoutRecord


@pytest.fixture
def temp_data_dir():
    """Create a temporary data directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def settings(temp_data_dir):
    """Settings pointing at the temporary data directory."""
    return Settings(data_dir=temp_data_dir, jwt_secret="test-secret")


@pytest.fixture
def db_path(settings):
    """An initialized database."""
    asyncio.run(init_db(settings.db_path))
    return settings.db_path


@pytest.fixture
def user_repo(db_path):
    return UserRepository(db_path)


@pytest.fixture
def workout_repo(db_path):
    return WorkoutRepository(db_path)


@pytest.fixture
def user(user_repo):
    """A stored user (the hash is a placeholder, not a real bcrypt hash)."""
    user = User(name="Test User", email="test@example.com", password_hash="x")
    asyncio.run(user_repo.create(user))
    return user


def _make_record(
    user_id: int,
    date: datetime,
    category: str = "Legs",
    calories: float = 9000,
    name: str = "Squats",
) -> WorkoutRecord:
    """Build a record with the given calories."""
    return WorkoutRecord(
        user_id=user_id,
        category=category,
        workout_name=name,
        sets=4,
        reps=12,
        weight=60,
        duration=30,
        calories_burned=calories,
        date=date,
    )


@pytest.fixture
def make_record():
    """Factory for workout records."""
    return _make_record

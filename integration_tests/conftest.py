"""Pytest configuration for integration tests."""

import tempfile
from pathlib import Path

import pytest

from fitjourney.config import Settings


# Mark all tests in this directory as integration tests
def pytest_collection_modifyitems(items):
    """Add integration marker to all tests in this directory."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def settings():
    """Settings backed by a throwaway data directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Settings(data_dir=Path(tmpdir), jwt_secret="integration-secret")

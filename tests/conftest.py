"""Pytest fixtures for the Task Service tests."""

import pytest
from fastapi.testclient import TestClient

from task_service.main import create_app
from task_service.store import TaskStore


@pytest.fixture
def store() -> TaskStore:
    """Create an empty task store."""
    return TaskStore()


@pytest.fixture
def client(store: TaskStore) -> TestClient:
    """Create a test client for an app backed by ``store``."""
    return TestClient(create_app(store))

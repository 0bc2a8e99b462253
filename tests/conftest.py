"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from face_api.app.main import create_app
from face_api.app.services.face_store import FaceStore


@pytest.fixture
def store():
    """An empty store."""
    return FaceStore()


@pytest.fixture
def app(store):
    """An application bound to the ``store`` fixture."""
    return create_app(store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def sample_body():
    return {
        "text": "buy milk",
        "tags": ["errand", "home"],
        "due": "2024-05-01T00:00:00Z",
    }

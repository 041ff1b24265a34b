"""
Shared pytest fixtures for all test modules.

IMPORTANT: TESTING must be set before the app is imported so the lifespan
skips Firebase initialization.
"""

import os

os.environ["TESTING"] = "true"

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from tests.mocks.firebase_mock import MockFirestore

# App import happens AFTER os.environ["TESTING"] is set above.
from app.main import app  # noqa: E402


@pytest.fixture
def mock_firebase(monkeypatch):
    """Replace firebase.db with an in-memory MockFirestore."""
    from app.integrations import firebase as fb

    mock_db = MockFirestore()
    monkeypatch.setattr(fb, "db", mock_db)
    return mock_db


@pytest.fixture
def no_app_url(monkeypatch):
    """Make sure neither base-URL variable leaks in from the host environment."""
    monkeypatch.delenv("NEXT_PUBLIC_APP_URL", raising=False)
    monkeypatch.delenv("APP_URL", raising=False)


@pytest.fixture
def client(mock_firebase):
    """
    FastAPI TestClient backed by MockFirestore.

    initialize() is patched to a no-op so it can't overwrite the mock
    even if TESTING is unset in the environment.
    """
    with patch("app.integrations.firebase.initialize"):
        with TestClient(app, raise_server_exceptions=False) as c:
            yield c

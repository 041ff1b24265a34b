"""
Pure unit tests for app/services/analytics_service.py.
"""

import re
from datetime import datetime

import pytest
from fastapi import HTTPException

from app.schemas.analytics import AnalyticsEvent
from app.services.analytics_service import (
    AnalyticsStoreError,
    generate_session_id,
    log_event,
)


def test_generate_session_id_format():
    assert re.fullmatch(r"session-\d{13}-[0-9a-z]{9}", generate_session_id())


def test_generate_session_id_unique():
    assert len({generate_session_id() for _ in range(50)}) == 50


def test_log_event_replaces_client_timestamp(mock_firebase):
    event = AnalyticsEvent(
        event="download_clicked",
        properties={"timestamp": "2001-01-01T00:00:00Z", "background": "cs"},
    )
    log_event(event, "session-1")

    doc = mock_firebase.collection("analytics_events").docs()[0]
    stored = datetime.fromisoformat(doc["properties"]["timestamp"])
    assert stored.year > 2001
    assert doc["properties"]["background"] == "cs"


def test_log_event_keeps_extra_properties(mock_firebase):
    event = AnalyticsEvent(event="step", properties={"step": 3})
    log_event(event, "session-2")

    doc = mock_firebase.collection("analytics_events").docs()[0]
    assert doc["properties"]["step"] == 3
    assert "section" not in doc["properties"]


def test_log_event_returns_session_id(mock_firebase):
    assert log_event(AnalyticsEvent(event="x"), "session-given") == "session-given"
    assert log_event(AnalyticsEvent(event="x")).startswith("session-")


def test_log_event_write_failure(mock_firebase):
    mock_firebase.fail_writes()
    with pytest.raises(AnalyticsStoreError):
        log_event(AnalyticsEvent(event="x"))


def test_log_event_db_none_raises_503(monkeypatch):
    from app.integrations import firebase as fb
    monkeypatch.setattr(fb, "db", None)

    with pytest.raises(HTTPException) as exc:
        log_event(AnalyticsEvent(event="x"))
    assert exc.value.status_code == 503

"""
Analytics event logging to Firestore.

The Firebase `db` client is accessed at call-time via the integration module
so it picks up the instance initialized during the FastAPI lifespan.
"""

import logging
import secrets
import string
import time
from datetime import datetime, timezone
from typing import Optional

from firebase_admin import firestore

from app.config import settings
from app.integrations import firebase as firebase_module
from app.schemas.analytics import AnalyticsEvent

logger = logging.getLogger(__name__)

_BASE36 = string.digits + string.ascii_lowercase


class AnalyticsStoreError(RuntimeError):
    """Raised when an analytics event could not be written."""


def generate_session_id() -> str:
    """Anonymous session id: `session-<epoch ms>-<9 base36 chars>`."""
    suffix = "".join(secrets.choice(_BASE36) for _ in range(9))
    return f"session-{int(time.time() * 1000)}-{suffix}"


def log_event(event: AnalyticsEvent, session_id: Optional[str] = None) -> str:
    """
    Persist one analytics event and return the session id it was filed under.

    The client's `timestamp` property is replaced with the server time.
    Raises HTTPException(503) if Firestore is not initialized and
    AnalyticsStoreError if the write fails.
    """
    db = firebase_module.get_db()
    session_id = session_id or generate_session_id()

    properties = event.properties.model_dump(mode="json", exclude_unset=True)
    properties["timestamp"] = datetime.now(timezone.utc).isoformat()

    document = {
        "event_name": event.event,
        "properties": properties,
        "session_id": session_id,
        "created_at": firestore.SERVER_TIMESTAMP,
    }
    try:
        db.collection(settings.analytics_collection).add(document)
    except Exception as e:
        logger.error(f"[ANALYTICS] Failed to store '{event.event}' for {session_id}: {e}")
        raise AnalyticsStoreError(str(e)) from e

    logger.info(f"[ANALYTICS] {event.event} | session: {session_id}")
    return session_id

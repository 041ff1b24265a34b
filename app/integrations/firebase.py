"""
Firebase integration.

`db` starts as None. Call `initialize()` inside the FastAPI lifespan
context manager before handling any requests. Services read `db` at call
time through `get_db()`, which answers 503 while it is still unset.
"""

import json
import logging
import os

import firebase_admin
from fastapi import HTTPException
from firebase_admin import credentials, firestore

logger = logging.getLogger(__name__)

# Module-level reference. Set by initialize(); all consuming modules reference
# this at call time via `from app.integrations import firebase; firebase.db`.
db = None  # firestore.Client | None


def initialize() -> None:
    """Initialize Firebase Admin SDK and set the module-level `db` client."""
    global db

    if not firebase_admin._apps:
        service_account_json = os.getenv("FIREBASE_SERVICE_ACCOUNT")
        if service_account_json:
            try:
                cred = credentials.Certificate(json.loads(service_account_json))
            except ValueError as e:
                logger.error(f"[STARTUP] Invalid FIREBASE_SERVICE_ACCOUNT, using default credentials: {e}")
                firebase_admin.initialize_app()
            else:
                firebase_admin.initialize_app(cred)
        else:
            firebase_admin.initialize_app()

    db = firestore.client()
    logger.info("[STARTUP] Firebase initialized")


def get_db():
    """Return the Firestore client or raise 503 if startup has not set it."""
    if not db:
        raise HTTPException(status_code=503, detail="Database service unavailable.")
    return db

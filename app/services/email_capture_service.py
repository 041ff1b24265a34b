"""
Email capture for PDF downloads and AI-service interest.

One document per (email, capture type) in the `email_captures` collection.
The document id is derived from both, so a repeat capture is detected with
a single lookup and `create()` refuses to overwrite a concurrent winner.
"""

import base64
import hashlib
import logging
import re
import time
from typing import Optional

from firebase_admin import firestore
from google.api_core.exceptions import AlreadyExists

from app.config import settings
from app.integrations import firebase as firebase_module
from app.schemas.email_capture import CaptureType, ResumeMetadata

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class InvalidEmailError(ValueError):
    pass


class DuplicateCaptureError(Exception):
    pass


class CaptureStoreError(RuntimeError):
    pass


def is_valid_email(email: str) -> bool:
    return bool(email) and EMAIL_PATTERN.match(email.strip()) is not None


def capture_document_id(email: str, capture_type: str) -> str:
    key = f"{capture_type}:{email.strip().lower()}"
    return hashlib.sha256(key.encode("utf-8")).hexdigest()


def make_download_token(email: str) -> str:
    return base64.b64encode(f"{email}-{int(time.time() * 1000)}".encode("utf-8")).decode("ascii")


def capture_email(
    email: str,
    capture_type: CaptureType,
    resume_metadata: Optional[ResumeMetadata] = None,
) -> Optional[str]:
    """
    Record an email capture.

    Returns a download token for `download` captures, None otherwise.
    Raises InvalidEmailError, DuplicateCaptureError, CaptureStoreError, or
    HTTPException(503) when Firestore is not initialized.
    """
    if not is_valid_email(email):
        raise InvalidEmailError(email)
    email = email.strip()

    db = firebase_module.get_db()
    doc_ref = db.collection(settings.email_capture_collection).document(
        capture_document_id(email, capture_type)
    )

    try:
        if doc_ref.get().exists:
            raise DuplicateCaptureError(email)
        doc_ref.create({
            "email": email,
            "capture_type": capture_type,
            "resume_metadata": resume_metadata.model_dump() if resume_metadata else None,
            "source": settings.email_capture_source,
            "created_at": firestore.SERVER_TIMESTAMP,
        })
    except AlreadyExists as e:
        raise DuplicateCaptureError(email) from e
    except DuplicateCaptureError:
        raise
    except Exception as e:
        logger.error(f"[EMAIL] Failed to save {capture_type} capture: {e}")
        raise CaptureStoreError(str(e)) from e

    logger.info(f"[EMAIL] Captured {capture_type} lead")
    if capture_type == "download":
        return make_download_token(email)
    return None

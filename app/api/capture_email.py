"""
Email capture route: gate PDF downloads and collect AI-service interest.
"""

import logging

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.schemas.email_capture import EmailCaptureRequest, EmailCaptureResponse
from app.services.email_capture_service import (
    CaptureStoreError,
    DuplicateCaptureError,
    InvalidEmailError,
    capture_email,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Leads"])

DOWNLOAD_MESSAGE = "Email captured successfully. Generating PDF..."
INTEREST_MESSAGE = "Thank you for your interest! We'll notify you when the AI service is ready."


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


@router.post("/api/capture-email", response_model=EmailCaptureResponse, response_model_by_alias=True)
async def capture_email_route(payload: EmailCaptureRequest):
    try:
        token = await run_in_threadpool(
            capture_email, payload.email, payload.type, payload.resume_metadata
        )
    except InvalidEmailError:
        return _failure(400, "Invalid email format")
    except DuplicateCaptureError:
        logger.info(f"[EMAIL] Duplicate {payload.type} capture rejected")
        return _failure(409, "Email already registered for this service")
    except CaptureStoreError:
        return _failure(500, "Failed to save email")

    return EmailCaptureResponse(
        success=True,
        message=DOWNLOAD_MESSAGE if payload.type == "download" else INTEREST_MESSAGE,
        download_token=token,
    )

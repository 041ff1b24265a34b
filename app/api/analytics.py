"""
Analytics route: anonymous funnel events from the resume builder.
"""

from typing import Optional

from fastapi import APIRouter, Header
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.schemas.analytics import AnalyticsEvent, ApiMessage
from app.services.analytics_service import AnalyticsStoreError, log_event

router = APIRouter(tags=["Analytics"])


@router.post("/api/analytics", response_model=ApiMessage)
async def track_event(
    payload: AnalyticsEvent,
    session_id: Optional[str] = Header(None, alias="X-Session-ID"),
):
    try:
        await run_in_threadpool(log_event, payload, session_id)
    except AnalyticsStoreError:
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Failed to log event"},
        )
    return {"success": True, "message": "Event logged successfully"}

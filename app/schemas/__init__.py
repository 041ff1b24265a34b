from app.schemas.analytics import AnalyticsEvent, AnalyticsProperties, ApiMessage
from app.schemas.email_capture import (
    CaptureType,
    EmailCaptureRequest,
    EmailCaptureResponse,
    ResumeMetadata,
)

__all__ = [
    "AnalyticsEvent",
    "AnalyticsProperties",
    "ApiMessage",
    "CaptureType",
    "EmailCaptureRequest",
    "EmailCaptureResponse",
    "ResumeMetadata",
]

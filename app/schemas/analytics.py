from typing import Optional

from pydantic import BaseModel, ConfigDict


class AnalyticsProperties(BaseModel):
    # Unknown keys from the client (including its `timestamp`, which the
    # server replaces) are carried through unvalidated.
    model_config = ConfigDict(extra="allow")

    section: Optional[str] = None
    background: Optional[str] = None
    experience: Optional[str] = None


class AnalyticsEvent(BaseModel):
    event: str
    properties: AnalyticsProperties = AnalyticsProperties()


class ApiMessage(BaseModel):
    success: bool
    message: str

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

CaptureType = Literal["download", "ai_interest"]


class ResumeMetadata(BaseModel):
    sections: list[str] = []
    background: str = ""
    experience: str = ""


class EmailCaptureRequest(BaseModel):
    email: str
    type: CaptureType
    resume_metadata: Optional[ResumeMetadata] = Field(None, alias="resumeMetadata")


class EmailCaptureResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str
    download_token: Optional[str] = Field(None, alias="downloadToken")

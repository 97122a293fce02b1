# meeting_summarizer/schemas.py
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

MAX_TRANSCRIPT_LENGTH = 50000


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2024-05-01T12:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class SummarizeRequest(BaseModel):
    transcript: str
    custom_prompt: Optional[str] = Field(default=None, alias="customPrompt")


class SummarizeResponse(BaseModel):
    success: bool = True
    summary: str
    model: str
    timestamp: str = Field(default_factory=utc_timestamp)


class SummarizeErrorResponse(BaseModel):
    success: bool = False
    error: str
    details: str
    timestamp: str = Field(default_factory=utc_timestamp)


class ValidationErrorResponse(BaseModel):
    error: str
    details: str


class HealthResponse(BaseModel):
    status: str = "healthy"
    timestamp: str = Field(default_factory=utc_timestamp)


class AvailableEndpoints(BaseModel):
    healthCheck: str = "GET /health"
    summarize: str = "POST /api/summarize"


class NotFoundResponse(BaseModel):
    error: str = "Endpoint not found"
    availableEndpoints: AvailableEndpoints = Field(default_factory=AvailableEndpoints)

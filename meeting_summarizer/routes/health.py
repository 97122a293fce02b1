# meeting_summarizer/routes/health.py
from fastapi import APIRouter

from meeting_summarizer.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse()

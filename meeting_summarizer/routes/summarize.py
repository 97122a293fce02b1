# meeting_summarizer/routes/summarize.py
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from meeting_summarizer.core.errors import InvalidRequest
from meeting_summarizer.core.groq_client import GroqSummarizer, classify_error
from meeting_summarizer.core.summary_service import create_summary
from meeting_summarizer.schemas import (
    MAX_TRANSCRIPT_LENGTH,
    SummarizeErrorResponse,
    SummarizeRequest,
    SummarizeResponse,
    ValidationErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_summarizer(request: Request) -> GroqSummarizer:
    return request.app.state.summarizer


def transcript_length(transcript: str) -> int:
    """Length in UTF-16 code units, the way browser clients count characters."""
    return len(transcript.encode("utf-16-le", "surrogatepass")) // 2


def parse_summarize_request(body: Any) -> SummarizeRequest:
    """Check the raw JSON body, raising InvalidRequest on the first problem found."""
    if not isinstance(body, (dict, list)):
        raise InvalidRequest("Invalid request format", "Request body must be a JSON object")

    # An array is a structured body too, it just has no fields
    fields = body if isinstance(body, dict) else {}

    transcript = fields.get("transcript")
    if not transcript or not isinstance(transcript, str):
        raise InvalidRequest("Transcript is required", "Please provide a valid transcript string")

    if transcript_length(transcript) > MAX_TRANSCRIPT_LENGTH:
        raise InvalidRequest(
            "Transcript too long",
            f"Maximum transcript length is {MAX_TRANSCRIPT_LENGTH:,} characters",
        )

    custom_prompt = fields.get("customPrompt")
    if custom_prompt is not None and not isinstance(custom_prompt, str):
        raise InvalidRequest("Invalid custom prompt", "customPrompt must be a string when provided")

    return SummarizeRequest(transcript=transcript, customPrompt=custom_prompt)


@router.post(
    "/summarize",
    response_model=SummarizeResponse,
    responses={
        400: {"model": ValidationErrorResponse},
        401: {"model": SummarizeErrorResponse},
        429: {"model": SummarizeErrorResponse},
        500: {"model": SummarizeErrorResponse},
    },
)
async def summarize_endpoint(request: Request, summarizer: GroqSummarizer = Depends(get_summarizer)):
    """
    Summarize a meeting transcript.
    Body: {"transcript": str, "customPrompt": str (optional)}
    """
    try:
        body = await request.json()
    except ValueError:
        body = None

    req = parse_summarize_request(body)

    try:
        summary = await create_summary(summarizer, req.transcript, req.custom_prompt)
    except Exception as e:
        logger.exception("Summarization Error")
        raise classify_error(e) from e

    return SummarizeResponse(summary=summary, model=summarizer.model)

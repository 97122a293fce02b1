# meeting_summarizer/core/errors.py
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from meeting_summarizer.schemas import (
    NotFoundResponse,
    SummarizeErrorResponse,
    ValidationErrorResponse,
)
from .body_limit import PayloadTooLarge, payload_too_large_response
from .groq_client import ErrorKind, GenerationError

logger = logging.getLogger(__name__)

# kind -> (HTTP status, error label)
GENERATION_ERROR_STATUS = {
    ErrorKind.AUTH: (401, "Authentication failed"),
    ErrorKind.CONFIG: (400, "Model configuration error"),
    ErrorKind.RATE_LIMIT: (429, "Rate limit exceeded"),
    ErrorKind.TRANSPORT: (500, "Failed to generate summary"),
    ErrorKind.UNKNOWN: (500, "Failed to generate summary"),
}


class InvalidRequest(Exception):
    """Request rejected before any call to the model."""

    def __init__(self, error: str, details: str):
        super().__init__(f"{error}: {details}")
        self.error = error
        self.details = details


def not_found_response() -> JSONResponse:
    return JSONResponse(status_code=404, content=NotFoundResponse().model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(InvalidRequest)
    async def invalid_request_handler(request: Request, exc: InvalidRequest):
        payload = ValidationErrorResponse(error=exc.error, details=exc.details)
        return JSONResponse(status_code=400, content=payload.model_dump())

    @app.exception_handler(PayloadTooLarge)
    async def payload_too_large_handler(request: Request, exc: PayloadTooLarge):
        return payload_too_large_response(exc.max_body_bytes)

    @app.exception_handler(GenerationError)
    async def generation_error_handler(request: Request, exc: GenerationError):
        status_code, label = GENERATION_ERROR_STATUS[exc.kind]
        payload = SummarizeErrorResponse(error=label, details=exc.message)
        return JSONResponse(status_code=status_code, content=payload.model_dump())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Unknown paths and unsupported methods on known paths look the same to callers
        if exc.status_code in (404, 405):
            return not_found_response()
        payload = {"error": "HTTP error", "details": str(exc.detail) if exc.detail else ""}
        return JSONResponse(status_code=exc.status_code, content=payload, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        payload = SummarizeErrorResponse(error="Internal server error", details=str(exc))
        return JSONResponse(status_code=500, content=payload.model_dump())

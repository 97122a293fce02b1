# meeting_summarizer/main.py
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from meeting_summarizer.core.body_limit import BodySizeLimitMiddleware
from meeting_summarizer.core.config import Settings, get_settings
from meeting_summarizer.core.errors import register_exception_handlers
from meeting_summarizer.core.groq_client import GroqSummarizer, load_encoding
from meeting_summarizer.routes import health, summarize

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, summarizer: Optional[GroqSummarizer] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # tiktoken may fetch its BPE file over the network
        await asyncio.to_thread(load_encoding)
        logger.info("Server running on port %s", settings.port)
        logger.info("Groq model: %s", settings.groq_model)
        yield

    app = FastAPI(title="Meeting Transcript Summarizer", lifespan=lifespan)
    app.state.settings = settings
    app.state.summarizer = summarizer or GroqSummarizer(settings)

    register_exception_handlers(app)

    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)

    # Only the listed frontends may call the API from a browser
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Register routes
    app.include_router(health.router)
    app.include_router(summarize.router, prefix="/api")

    return app

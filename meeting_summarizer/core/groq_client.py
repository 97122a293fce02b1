# meeting_summarizer/core/groq_client.py
import asyncio
import enum
import logging
from typing import Optional

import openai
from openai import OpenAI  # Groq exposes an OpenAI-compatible API
from tiktoken import get_encoding

from .config import Settings

logger = logging.getLogger(__name__)

TOKEN_ENCODING = "cl100k_base"  # Approx tokenizer for LLaMA-like models


class ErrorKind(str, enum.Enum):
    AUTH = "auth"
    CONFIG = "config"
    RATE_LIMIT = "rate_limit"
    TRANSPORT = "transport"
    UNKNOWN = "unknown"


class GenerationError(Exception):
    """A failed generation call, tagged with what went wrong."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


def _message_of(exc: BaseException) -> str:
    return getattr(exc, "message", None) or str(exc)


def classify_error(exc: BaseException) -> GenerationError:
    """
    Map any exception raised while generating to a GenerationError.

    Provider SDK exception types are trusted first. Errors that carry no type
    information fall back to looking at the message text.
    """
    if isinstance(exc, GenerationError):
        return exc

    message = _message_of(exc)

    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return GenerationError(ErrorKind.AUTH, message)
    if isinstance(exc, openai.RateLimitError):
        return GenerationError(ErrorKind.RATE_LIMIT, message)
    if isinstance(exc, openai.NotFoundError):
        return GenerationError(ErrorKind.CONFIG, message)
    if isinstance(exc, openai.BadRequestError) and "model" in message:
        return GenerationError(ErrorKind.CONFIG, message)
    if isinstance(exc, openai.APIConnectionError):  # includes APITimeoutError
        return GenerationError(ErrorKind.TRANSPORT, message)

    if "API key" in message:
        return GenerationError(ErrorKind.AUTH, message)
    if "model" in message:
        return GenerationError(ErrorKind.CONFIG, message)
    return GenerationError(ErrorKind.UNKNOWN, message)


_encoding = None


def load_encoding():
    """
    Load the tokenizer used for prompt size estimates.
    tiktoken may need to download its BPE file; when that fails the estimates are skipped.
    """
    global _encoding
    try:
        _encoding = get_encoding(TOKEN_ENCODING)
    except Exception:
        logger.warning("Could not load %s tokenizer, prompt token estimates disabled", TOKEN_ENCODING, exc_info=True)
        _encoding = None
    return _encoding


def count_tokens(text: str) -> Optional[int]:
    if _encoding is None:
        return None
    return len(_encoding.encode(text, disallowed_special=()))


class GroqSummarizer:
    """Text generation against Groq's chat completions endpoint."""

    def __init__(self, settings: Settings, client: Optional[OpenAI] = None):
        self.model = settings.groq_model
        self.client = client or OpenAI(
            api_key=settings.groq_api_key,
            base_url=settings.groq_base_url,
            timeout=settings.groq_timeout_seconds,
            max_retries=0,
        )

    async def generate(
        self,
        system: str,
        prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        """
        Call Groq in a thread to avoid blocking the event loop.
        Raises GenerationError on any failure.
        """
        messages = [
            {"role": "system", "content": system},
            {"role": "user", "content": prompt},
        ]

        def sync_call():
            return self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature,
            )

        try:
            completion = await asyncio.to_thread(sync_call)
        except Exception as e:
            raise classify_error(e) from e

        try:
            text = completion.choices[0].message.content
        except (AttributeError, IndexError) as e:
            logger.error("Unexpected model response: %s", e)
            raise GenerationError(ErrorKind.UNKNOWN, "Model returned unexpected structure") from e

        return text or ""

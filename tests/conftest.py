import httpx
import pytest
import pytest_asyncio

from meeting_summarizer.core.config import Settings
from meeting_summarizer.main import create_app

MODEL = "llama-3.3-70b-versatile"


class StubSummarizer:
    """Deterministic stand-in for GroqSummarizer that records every call."""

    def __init__(self, result="Summary: ship v2 by Friday.", error=None):
        self.model = MODEL
        self.result = result
        self.error = error
        self.calls = []

    async def generate(self, system, prompt, max_tokens, temperature):
        self.calls.append(
            {"system": system, "prompt": prompt, "max_tokens": max_tokens, "temperature": temperature}
        )
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def settings():
    return Settings(groq_api_key="test-key")


@pytest.fixture
def stub():
    return StubSummarizer()


@pytest.fixture
def app(settings, stub):
    return create_app(settings, summarizer=stub)


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

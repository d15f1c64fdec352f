"""Shared fixtures for modelruntime tests."""

import pytest

from modelruntime.config import ProviderSettings
from modelruntime.providers import CrewHubProvider
from modelruntime.types import ChatRequest, Message


BASE_URL = "https://api.crewhub.ai/v1"


@pytest.fixture
def settings():
    """Provider settings with pacing disabled."""
    return ProviderSettings(api_key="ch-test-key", base_url=BASE_URL, chunk_delay=0)


@pytest.fixture
def provider(settings):
    """Create a CrewHub provider instance."""
    return CrewHubProvider(settings)


@pytest.fixture
def chat_request():
    """A minimal canonical chat request."""
    return ChatRequest(
        model="emailcrew",
        messages=[
            Message(role="system", content="You sort email."),
            Message(role="user", content="Classify this message."),
        ],
        temperature=0.7,
        max_tokens=256,
    )


@pytest.fixture
def success_body():
    """Factory for successful CrewHub completion bodies."""
    return _success_body


def _success_body(text="Hello world", tokens_used=100, finish_reason="stop", model="emailcrew"):
    """Build a successful CrewHub completion body."""
    return {
        "success": True,
        "data": {
            "finish_reason": finish_reason,
            "model": model,
            "response": text,
            "tokens_used": tokens_used,
        },
    }

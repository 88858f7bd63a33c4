"""
Shared OpenAI client for the explanation agent.
"""
from typing import Optional

from openai import AsyncOpenAI
from app.config import settings

# Global client instance
_client: Optional[AsyncOpenAI] = None


class OpenAINotConfiguredError(RuntimeError):
    """OPENAI_API_KEY is empty, so no client can be created"""


def get_openai_client() -> AsyncOpenAI:
    """
    Get or create the OpenAI client singleton.

    The client is created on first use so the keyword detection endpoints
    run without an API key.

    Returns:
        AsyncOpenAI: Shared OpenAI client instance

    Raises:
        OpenAINotConfiguredError: OPENAI_API_KEY is not set
    """
    global _client

    if _client is None:
        if not settings.OPENAI_API_KEY:
            raise OpenAINotConfiguredError("OPENAI_API_KEY is not configured")
        _client = AsyncOpenAI(api_key=settings.OPENAI_API_KEY)

    return _client

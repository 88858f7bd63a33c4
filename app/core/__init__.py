"""
Core utilities for the backend.
Provides shared resources like the OpenAI client.
"""
from .openai_client import OpenAINotConfiguredError, get_openai_client

__all__ = [
    # OpenAI
    "get_openai_client",
    "OpenAINotConfiguredError",
]

"""
Base class for all Agents.
Provides the shared OpenAI client and defines the process() interface.
"""
from abc import ABC, abstractmethod
from typing import Optional

from openai import AsyncOpenAI
from app.core.openai_client import get_openai_client


class BaseAgent(ABC):
    """
    Abstract base class for all Agents.

    Every Agent must:
    1. Inherit from BaseAgent
    2. Implement process()
    3. Use self.client for OpenAI API calls

    The OpenAI client is shared between all Agents through the singleton in
    app.core.openai_client. It is fetched on first use of ``self.client``, so
    Agents that only do local processing (keyword detection) never create it.

    Example:
        >>> class MyAgent(BaseAgent):
        ...     async def process(self, text: str) -> str:
        ...         response = await self.client.chat.completions.create(
        ...             model="gpt-4o-mini",
        ...             messages=[{"role": "user", "content": text}]
        ...         )
        ...         return response.choices[0].message.content
        ...
        >>> agent = MyAgent()
        >>> result = await agent.process("What is a homotopy?")
    """

    def __init__(self, client: Optional[AsyncOpenAI] = None):
        """
        Args:
            client: OpenAI client to use instead of the shared singleton
        """
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = get_openai_client()
        return self._client

    @abstractmethod
    async def process(self, *args, **kwargs):
        """
        Core processing method every Agent must implement.

        Each Agent defines its own input/output signature.

        Raises:
            Exception: when processing fails
        """
        pass

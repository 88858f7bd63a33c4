"""
Explanation Service

Thin wrapper around ExplanationAgent for the API layer.
"""
import logging
from typing import Any, Dict, Optional

from agent.explanation import ExplanationAgent
from app.config import settings

logger = logging.getLogger(__name__)


class ExplanationService:
    """Math/STEM explanation service"""

    def __init__(self, agent: Optional[ExplanationAgent] = None):
        self.agent = agent or ExplanationAgent()

    async def explain(self, content: str, model: Optional[str] = None) -> Dict[str, Any]:
        """
        Args:
            content: LaTeX/Markdown content
            model: Optional chat model override

        Returns:
            {"explanation": str, "model": str}
        """
        model_name = model or settings.EXPLANATION_MODEL
        explanation = await self.agent.process(content, model=model_name)
        return {"explanation": explanation, "model": model_name}

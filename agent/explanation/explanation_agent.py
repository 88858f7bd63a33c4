"""
Explanation Agent

Explains LaTeX/Markdown math and STEM content in accessible language.
Single responsibility: content -> plain-text tutor explanation

Usage scenarios:
- Side panel: explain a formula the reader selected on a page
- Keyword tooltips: short explanation of a detected term
"""

import logging
from typing import Optional

from agent.base_agent import BaseAgent
from app.config import settings

logger = logging.getLogger(__name__)


class ExplanationError(Exception):
    """The language model call failed or returned no text"""


class ExplanationAgent(BaseAgent):
    """
    Math/STEM explanation Agent.

    Responsibility: math content -> explanation text

    Example:
        >>> agent = ExplanationAgent()
        >>> text = await agent.process(r"\\int_0^1 x^2 \\, dx = \\frac{1}{3}")
        >>> print(text)
        "## What the integral measures ..."
    """

    def _create_system_prompt(self) -> str:
        """
        Build the system prompt.

        Returns:
            System prompt string
        """
        return """You are a patient math and science tutor who explains technical content so that a motivated student can follow it.

**What to do**:
1. Read the LaTeX/Markdown content and identify what it states
2. Break complex ideas into smaller steps
3. Explain the meaning and intuition behind each formula or equation
4. Use a real-world analogy when it genuinely helps
5. Stay mathematically accurate while keeping the language conversational
6. Point out key insights and common pitfalls

**Output format**:
- Short section headers
- Step-by-step breakdowns where appropriate
- A worked example when it clarifies the idea
- A brief summary of the key takeaways
"""

    async def process(
        self,
        content: str,
        model: Optional[str] = None
    ) -> str:
        """
        Explain math/STEM content.

        Args:
            content: LaTeX or Markdown content to explain
            model: Chat model name (default: settings.EXPLANATION_MODEL)

        Returns:
            Explanation text

        Raises:
            ValueError: content is empty
            ExplanationError: the model call failed or returned nothing
            OpenAINotConfiguredError: no OpenAI API key is configured
        """
        if not content or not content.strip():
            raise ValueError("mathContent is required")

        model_name = model or settings.EXPLANATION_MODEL
        logger.info(f"Explanation started: {len(content)} chars, model={model_name}")

        user_prompt = f"""Here is the content to explain:

{content.strip()}

Please provide a clear, accessible explanation of this content."""

        client = self.client

        try:
            response = await client.chat.completions.create(
                model=model_name,
                messages=[
                    {"role": "system", "content": self._create_system_prompt()},
                    {"role": "user", "content": user_prompt}
                ],
                temperature=0.4,
                max_tokens=settings.EXPLANATION_MAX_TOKENS
            )
        except Exception as e:
            logger.error(f"Explanation failed: {str(e)}")
            raise ExplanationError(f"Failed to generate explanation: {str(e)}") from e

        explanation = response.choices[0].message.content if response.choices else None
        if not explanation or not explanation.strip():
            raise ExplanationError("Unexpected empty response from the language model")

        logger.info(f"Explanation completed: {len(explanation)} chars")
        return explanation.strip()

"""
Explanation Agent module

Micro Agent that explains math/STEM content in plain language.
"""

from .explanation_agent import ExplanationAgent, ExplanationError

__all__ = [
    "ExplanationAgent",
    "ExplanationError",
]

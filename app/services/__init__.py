"""
Services package for business logic.

Service classes orchestrate Agent calls and implement the request-level
logic that doesn't belong in API endpoints.
"""
from .keyword_service import KeywordService
from .explanation_service import ExplanationService

__all__ = [
    "KeywordService",
    "ExplanationService",
]

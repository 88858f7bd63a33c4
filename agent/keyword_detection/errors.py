"""
Exceptions raised by the keyword detection engine.
"""

from typing import Iterable, List, Optional


class KeywordDetectionError(Exception):
    """Base class for keyword detection errors"""


class InvalidTokensError(KeywordDetectionError, ValueError):
    """Token input is missing, not a list, or holds a malformed token"""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index


class UnknownFieldError(KeywordDetectionError, ValueError):
    """One or more requested fields are not in the keyword dictionary"""

    def __init__(self, fields: Iterable[str]):
        self.fields: List[str] = list(fields)
        super().__init__(
            f"Invalid fields: {', '.join(self.fields)}. "
            "Use GET /api/ai/keywords/fields to see available fields."
        )

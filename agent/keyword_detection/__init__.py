"""
Keyword detection Agent module

Micro Agents and building blocks for detecting STEM keywords in OCR tokens.

- KeywordDictionary: read-only field -> keywords table
- KeywordIndex: normalized phrase -> dictionary entries
- PhraseMatcher: greedy longest-phrase-first matching with bounding boxes
- KeywordDetectorAgent: index + matcher + statistics behind one object
"""

from .errors import InvalidTokensError, KeywordDetectionError, UnknownFieldError
from .field_keywords import FIELD_CATEGORIES, FIELD_KEYWORDS
from .index_cache import IndexCache
from .keyword_detector_agent import KeywordDetectorAgent, create_detector
from .keyword_dictionary import (
    KeywordDictionary,
    get_all_fields,
    get_default_dictionary,
    get_field_keywords,
    has_field,
)
from .keyword_index import KeywordIndex
from .models import (
    DEFAULT_TOKEN_CONFIDENCE,
    MAX_PHRASE_LENGTH,
    DetectedKeyword,
    DetectorConfig,
    KeywordEntry,
    KeywordStatistics,
    Position,
    Token,
)
from .phrase_matcher import PhraseMatcher
from .statistics import compute_statistics

__all__ = [
    # Agent
    "KeywordDetectorAgent",
    "create_detector",
    # Engine
    "KeywordDictionary",
    "KeywordIndex",
    "IndexCache",
    "PhraseMatcher",
    "compute_statistics",
    # Dictionary data
    "FIELD_KEYWORDS",
    "FIELD_CATEGORIES",
    "get_default_dictionary",
    "get_all_fields",
    "get_field_keywords",
    "has_field",
    # Models
    "Token",
    "Position",
    "KeywordEntry",
    "DetectedKeyword",
    "KeywordStatistics",
    "DetectorConfig",
    "DEFAULT_TOKEN_CONFIDENCE",
    "MAX_PHRASE_LENGTH",
    # Errors
    "KeywordDetectionError",
    "InvalidTokensError",
    "UnknownFieldError",
]

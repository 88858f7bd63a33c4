"""
Keyword detection data models

Data classes for OCR tokens, dictionary entries, detected keywords and
detection statistics.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

# Confidence assumed for a token when the OCR step did not report one
DEFAULT_TOKEN_CONFIDENCE = 0.9

# Longest phrase (in words) the matcher tries by default
MAX_PHRASE_LENGTH = 4


@dataclass(frozen=True)
class Position:
    """
    Axis-aligned bounding box in the source image's pixel space.

    Attributes:
        x: Left edge
        y: Top edge
        width: Box width (>= 0)
        height: Box height (>= 0)
    """
    x: float
    y: float
    width: float
    height: float

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class Token:
    """
    One OCR-recognized word with its bounding box.

    Attributes:
        text: Recognized word text
        x, y, width, height: Bounding box of the word
        confidence: OCR confidence in [0, 1] (None if the OCR step gave none)
    """
    text: str
    x: float
    y: float
    width: float
    height: float
    confidence: Optional[float] = None

    @property
    def effective_confidence(self) -> float:
        """Confidence used for scoring (missing -> DEFAULT_TOKEN_CONFIDENCE)"""
        if self.confidence is None:
            return DEFAULT_TOKEN_CONFIDENCE
        return self.confidence

    @property
    def position(self) -> Position:
        return Position(x=self.x, y=self.y, width=self.width, height=self.height)


@dataclass(frozen=True)
class KeywordEntry:
    """
    Dictionary keyword registered under a normalized phrase.

    Attributes:
        field: Field the keyword belongs to
        keyword: Keyword as written in the dictionary
        word_count: Number of whitespace-delimited words in ``keyword``
    """
    field: str
    keyword: str
    word_count: int


@dataclass(frozen=True)
class DetectedKeyword:
    """
    A keyword occurrence found in a token stream.

    Attributes:
        text: Keyword in its dictionary casing
        normalized_text: Matched phrase after normalization
        field: Field the keyword was registered under
        confidence: Mean OCR confidence of the matched tokens
        position: Bounding box enclosing the matched tokens
        word_indices: Contiguous indices of the consumed tokens
    """
    text: str
    normalized_text: str
    field: str
    confidence: float
    position: Position
    word_indices: Tuple[int, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase wire shape used by the API"""
        return {
            "text": self.text,
            "normalizedText": self.normalized_text,
            "field": self.field,
            "confidence": self.confidence,
            "position": self.position.to_dict(),
            "wordIndices": list(self.word_indices),
        }


@dataclass
class KeywordStatistics:
    """Summary of a detection result"""
    total: int = 0
    by_field: Dict[str, int] = field(default_factory=dict)
    average_confidence: float = 0.0
    unique_terms: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "byField": dict(self.by_field),
            "averageConfidence": self.average_confidence,
            "uniqueTerms": self.unique_terms,
        }


@dataclass
class DetectorConfig:
    """
    Keyword detector configuration.

    Attributes:
        target_fields: Fields to index (None = every dictionary field)
        min_confidence: Matches below this confidence are dropped
        case_sensitive: Match keyword casing exactly
        multi_word_matching: Try phrases longer than one word
        max_phrase_length: Longest phrase (in words) the matcher tries
    """
    target_fields: Optional[List[str]] = None
    min_confidence: float = 0.7
    case_sensitive: bool = False
    multi_word_matching: bool = True
    max_phrase_length: int = MAX_PHRASE_LENGTH

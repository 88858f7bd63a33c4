"""
Keyword Detection Service

Validates detection requests, builds a per-request detector from the shared
index cache, and assembles the response payload.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from agent.keyword_detection import (
    DetectorConfig,
    IndexCache,
    KeywordDetectorAgent,
    KeywordDictionary,
    Token,
    UnknownFieldError,
    get_default_dictionary,
)
from app.config import settings
from app.schemas.keywords import DetectRequest

logger = logging.getLogger(__name__)

# Shared across requests; cached indexes are immutable
_index_cache: Optional[IndexCache] = None


def get_index_cache() -> IndexCache:
    """Process-wide keyword index cache"""
    global _index_cache
    if _index_cache is None:
        _index_cache = IndexCache(max_size=settings.KEYWORD_INDEX_CACHE_SIZE)
    return _index_cache


class KeywordService:
    """
    Keyword detection service

    Business logic:
    1. Reject unknown target fields (the detector itself ignores them)
    2. Build a detector for the request configuration
    3. Detect keywords and compute statistics
    """

    def __init__(
        self,
        dictionary: Optional[KeywordDictionary] = None,
        index_cache: Optional[IndexCache] = None
    ):
        self.dictionary = dictionary if dictionary is not None else get_default_dictionary()
        self.index_cache = index_cache if index_cache is not None else get_index_cache()

    def validate_fields(self, fields: Optional[Iterable[str]]) -> None:
        """
        Raises:
            UnknownFieldError: one or more fields are not in the dictionary
        """
        if fields is None:
            return
        invalid = [f for f in fields if not self.dictionary.has_field(f)]
        if invalid:
            raise UnknownFieldError(invalid)

    def create_detector(self, request: DetectRequest) -> KeywordDetectorAgent:
        self.validate_fields(request.targetFields)

        min_confidence = request.minConfidence
        if min_confidence is None:
            min_confidence = settings.KEYWORD_DEFAULT_MIN_CONFIDENCE

        config = DetectorConfig(
            target_fields=request.targetFields,
            min_confidence=min_confidence,
            case_sensitive=request.caseSensitive,
            multi_word_matching=request.multiWordMatching,
            max_phrase_length=settings.KEYWORD_MAX_PHRASE_LENGTH,
        )
        return KeywordDetectorAgent(config, dictionary=self.dictionary, index_cache=self.index_cache)

    def detect(self, request: DetectRequest) -> Dict[str, Any]:
        """
        Detect keywords for a request

        Args:
            request: Validated detection request

        Returns:
            Payload with keywords, statistics and effective config

        Raises:
            UnknownFieldError: a target field is not in the dictionary
            InvalidTokensError: a word failed engine-side validation
        """
        detector = self.create_detector(request)

        words = [
            Token(
                text=w.text,
                x=w.x,
                y=w.y,
                width=w.width,
                height=w.height,
                confidence=w.confidence,
            )
            for w in request.words
        ]

        logger.info(f"🔍 Keyword detection started: {len(words)} words")
        keywords = detector.detect(words)
        statistics = detector.get_statistics(keywords)
        config = detector.get_config()
        logger.info(
            f"✅ Keyword detection finished: {statistics.total} keywords, "
            f"{statistics.unique_terms} unique terms"
        )

        return {
            "keywords": [kw.to_dict() for kw in keywords],
            "statistics": statistics.to_dict(),
            "config": {
                "targetFields": config["target_fields"],
                "minConfidence": config["min_confidence"],
                "caseSensitive": config["case_sensitive"],
                "multiWordMatching": config["multi_word_matching"],
                "maxPhraseLength": config["max_phrase_length"],
                "indexedKeywords": config["indexed_keywords"],
            },
        }

    def list_fields(self) -> Dict[str, Any]:
        fields: List[str] = self.dictionary.fields()
        return {
            "fields": fields,
            "count": len(fields),
            "categories": self.dictionary.categories(),
        }

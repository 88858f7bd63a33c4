"""
Keyword Detector Agent

Detects STEM keywords in OCR token streams.
Single responsibility: tokens (words with bounding boxes) -> detected keywords
with field, confidence and highlight box.

Usage scenarios:
- Highlighting: draw boxes around STEM terms on a rendered page
- Field tagging: which disciplines a page talks about
- Link enrichment: feed detected terms to reference lookups

The detector is cheap to construct when an IndexCache is supplied, so the
intended pattern is one detector per request. When a detector is shared,
``set_target_fields`` builds a new index and swaps it in with a single
assignment; an in-flight ``detect`` keeps using the snapshot it started with.
"""

from dataclasses import replace
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Sequence
import logging

from agent.base_agent import BaseAgent
from .index_cache import IndexCache
from .keyword_dictionary import KeywordDictionary, get_default_dictionary
from .keyword_index import KeywordIndex
from .models import DetectedKeyword, DetectorConfig, KeywordStatistics
from .phrase_matcher import PhraseMatcher, TokenLike
from .statistics import compute_statistics

logger = logging.getLogger(__name__)


class _DetectorState(NamedTuple):
    config: DetectorConfig
    index: KeywordIndex
    matcher: PhraseMatcher


class KeywordDetectorAgent(BaseAgent):
    """
    STEM keyword detection Agent

    Responsibility: tokens -> detected keywords (position, field, confidence)

    Example:
        >>> agent = KeywordDetectorAgent(DetectorConfig(target_fields=["machine learning"]))
        >>> words = [
        ...     {"text": "neural", "x": 50, "y": 100, "width": 60, "height": 20},
        ...     {"text": "network", "x": 120, "y": 100, "width": 70, "height": 20},
        ... ]
        >>> [kw.text for kw in agent.detect(words)]
        ['neural network']

    Note:
        This Agent does pure lexical matching and never calls the OpenAI API.
    """

    def __init__(
        self,
        config: Optional[DetectorConfig] = None,
        dictionary: Optional[KeywordDictionary] = None,
        index_cache: Optional[IndexCache] = None
    ):
        """
        Args:
            config: Detector configuration (defaults: all fields, 0.7 threshold,
                case-insensitive, multi-word matching)
            dictionary: Keyword dictionary (defaults to the bundled STEM table)
            index_cache: Optional shared cache of built indexes
        """
        super().__init__()
        self._dictionary = dictionary if dictionary is not None else get_default_dictionary()
        self._index_cache = index_cache
        self._state = self._build_state(config or DetectorConfig())

    def _build_index(self, target_fields: Optional[Iterable[str]], case_sensitive: bool) -> KeywordIndex:
        if self._index_cache is not None:
            return self._index_cache.get_or_build(self._dictionary, target_fields, case_sensitive)
        return KeywordIndex.build(self._dictionary, target_fields, case_sensitive)

    def _build_state(self, config: DetectorConfig) -> _DetectorState:
        index = self._build_index(config.target_fields, config.case_sensitive)

        if index.max_word_count > config.max_phrase_length:
            logger.warning(
                f"Indexed keywords have up to {index.max_word_count} words but "
                f"max_phrase_length is {config.max_phrase_length}; longer keywords never match"
            )

        matcher = PhraseMatcher(
            min_confidence=config.min_confidence,
            multi_word_matching=config.multi_word_matching,
            max_phrase_length=config.max_phrase_length,
        )
        return _DetectorState(config=config, index=index, matcher=matcher)

    @property
    def index(self) -> KeywordIndex:
        return self._state.index

    @property
    def dictionary(self) -> KeywordDictionary:
        return self._dictionary

    def detect(self, words: Sequence[TokenLike]) -> List[DetectedKeyword]:
        """
        Detect keywords in a word list

        Args:
            words: Words in reading order; Token objects or mappings with
                text, x, y, width, height and optional confidence

        Returns:
            Detected keywords at or above min_confidence, sorted top-to-bottom,
            then left-to-right

        Raises:
            InvalidTokensError: ``words`` is not a list or holds a malformed word
        """
        state = self._state
        detected = state.matcher.match(words, state.index)
        logger.debug(f"Keyword detection completed: {len(detected)} keywords in {len(words)} words")
        return detected

    async def process(self, words: Sequence[TokenLike]) -> List[DetectedKeyword]:
        """Agent interface for ``detect``"""
        return self.detect(words)

    def get_statistics(self, keywords: Iterable[DetectedKeyword]) -> KeywordStatistics:
        return compute_statistics(keywords)

    def set_target_fields(self, fields: Optional[Iterable[str]]) -> None:
        """
        Replace the target fields and rebuild the index

        The new index is built completely before it replaces the old one.

        Args:
            fields: New target fields (None = all dictionary fields)
        """
        state = self._state
        new_fields = None if fields is None else list(fields)
        self._state = self._build_state(replace(state.config, target_fields=new_fields))
        logger.info(f"Target fields updated: {len(self._state.index.fields)} fields")

    def get_config(self) -> Dict[str, Any]:
        """Current configuration plus the number of indexed phrases"""
        state = self._state
        return {
            "target_fields": list(state.index.fields),
            "min_confidence": state.config.min_confidence,
            "case_sensitive": state.config.case_sensitive,
            "multi_word_matching": state.config.multi_word_matching,
            "max_phrase_length": state.config.max_phrase_length,
            "indexed_keywords": len(state.index),
        }


def create_detector(
    dictionary: Optional[KeywordDictionary] = None,
    index_cache: Optional[IndexCache] = None,
    **config: Any
) -> KeywordDetectorAgent:
    """
    Factory for KeywordDetectorAgent

    Example:
        >>> detector = create_detector(target_fields=["topology"], min_confidence=0.5)
    """
    return KeywordDetectorAgent(DetectorConfig(**config), dictionary=dictionary, index_cache=index_cache)

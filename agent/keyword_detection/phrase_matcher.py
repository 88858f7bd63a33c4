"""
Phrase matcher

Reconciles an OCR token stream against a keyword index.

Overlap policy is greedy: phrase lengths are tried longest first and, within
one length, by ascending start index. A matched window consumes its tokens,
so a registered two-word phrase wins over two single-word hits on the same
tokens. The greedy choice is not globally optimal (a long match can preempt
a better combination of shorter ones).
"""

import math
from numbers import Real
from typing import Any, List, Mapping, Optional, Sequence, Union
import logging

from .errors import InvalidTokensError
from .keyword_index import KeywordIndex
from .models import (
    DEFAULT_TOKEN_CONFIDENCE,
    MAX_PHRASE_LENGTH,
    DetectedKeyword,
    Position,
    Token,
)

logger = logging.getLogger(__name__)

TokenLike = Union[Token, Mapping[str, Any]]

_POSITION_FIELDS = ("x", "y", "width", "height")


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def coerce_token(raw: TokenLike, index: int) -> Token:
    """
    Convert a Token or token mapping into a Token

    Raises:
        InvalidTokensError: text is missing/empty or a position field is not a finite number
    """
    if isinstance(raw, Token):
        token = raw
    elif isinstance(raw, Mapping):
        try:
            token = Token(
                text=raw["text"],
                x=raw["x"],
                y=raw["y"],
                width=raw["width"],
                height=raw["height"],
                confidence=raw.get("confidence"),
            )
        except KeyError as e:
            raise InvalidTokensError(
                f"Invalid word at index {index}: missing {e.args[0]!r} field", index
            ) from e
    else:
        raise InvalidTokensError(
            f"Invalid word at index {index}: expected an object, got {type(raw).__name__}", index
        )

    if not isinstance(token.text, str) or not token.text:
        raise InvalidTokensError(f"Invalid word at index {index}: missing or invalid 'text' field", index)
    for name in _POSITION_FIELDS:
        if not _is_number(getattr(token, name)):
            raise InvalidTokensError(f"Invalid word at index {index}: {name!r} must be a finite number", index)
    if token.confidence is not None and not _is_number(token.confidence):
        raise InvalidTokensError(f"Invalid word at index {index}: 'confidence' must be a finite number", index)

    return token


def coerce_tokens(tokens: Optional[Sequence[TokenLike]]) -> List[Token]:
    """
    Validate a whole token list up front

    Raises:
        InvalidTokensError: ``tokens`` is None, not a list/tuple, or holds a bad token
    """
    if tokens is None or not isinstance(tokens, (list, tuple)):
        raise InvalidTokensError("words must be a list of word objects")
    return [coerce_token(raw, i) for i, raw in enumerate(tokens)]


def bounding_box(tokens: Sequence[Token]) -> Position:
    """Smallest axis-aligned box enclosing every token's box"""
    if not tokens:
        return Position(x=0, y=0, width=0, height=0)

    if len(tokens) == 1:
        return tokens[0].position

    min_x = min(t.x for t in tokens)
    min_y = min(t.y for t in tokens)
    max_x = max(t.x + t.width for t in tokens)
    max_y = max(t.y + t.height for t in tokens)

    return Position(x=min_x, y=min_y, width=max_x - min_x, height=max_y - min_y)


def average_confidence(tokens: Sequence[Token]) -> float:
    """Arithmetic mean of token confidences (missing -> DEFAULT_TOKEN_CONFIDENCE)"""
    if not tokens:
        return 0.0
    return sum(t.effective_confidence for t in tokens) / len(tokens)


class PhraseMatcher:
    """
    Finds keyword phrases in a token stream

    Example:
        >>> matcher = PhraseMatcher(min_confidence=0.7)
        >>> matches = matcher.match(tokens, index)
        >>> [m.text for m in matches]
        ['deep learning']
    """

    def __init__(
        self,
        min_confidence: float = 0.7,
        multi_word_matching: bool = True,
        max_phrase_length: int = MAX_PHRASE_LENGTH
    ):
        if max_phrase_length < 1:
            raise ValueError("max_phrase_length must be at least 1")
        self.min_confidence = min_confidence
        self.multi_word_matching = multi_word_matching
        self.max_phrase_length = max_phrase_length

    def match(
        self,
        tokens: Optional[Sequence[TokenLike]],
        index: KeywordIndex
    ) -> List[DetectedKeyword]:
        """
        Match ``tokens`` against ``index``

        Args:
            tokens: Tokens in reading order (Token objects or mappings)
            index: Keyword index to match against

        Returns:
            Matches at or above ``min_confidence``, sorted by (y, x)

        Raises:
            InvalidTokensError: Token input is not a list or holds a malformed token
        """
        words = coerce_tokens(tokens)
        if not words:
            return []

        longest = self.max_phrase_length if self.multi_word_matching else 1
        # Phrases longer than any indexed keyword can never match
        longest = min(longest, max(index.max_word_count, 1), len(words))

        consumed = [False] * len(words)
        detected: List[DetectedKeyword] = []

        for length in range(longest, 0, -1):
            for start in range(len(words) - length + 1):
                end = start + length
                if any(consumed[start:end]):
                    continue

                window = words[start:end]
                normalized = index.normalize(" ".join(t.text for t in window))
                entries = index.lookup(normalized)
                if not entries:
                    continue

                position = bounding_box(window)
                confidence = average_confidence(window)
                word_indices = tuple(range(start, end))

                for entry in entries:
                    detected.append(DetectedKeyword(
                        text=entry.keyword,
                        normalized_text=normalized,
                        field=entry.field,
                        confidence=confidence,
                        position=position,
                        word_indices=word_indices,
                    ))

                for i in range(start, end):
                    consumed[i] = True

        results = [kw for kw in detected if kw.confidence >= self.min_confidence]
        results.sort(key=lambda kw: (kw.position.y, kw.position.x))

        logger.debug(
            f"Phrase matching: {len(words)} words, {len(detected)} candidates, "
            f"{len(results)} above {self.min_confidence}"
        )
        return results

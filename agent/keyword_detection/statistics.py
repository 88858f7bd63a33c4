"""
Detection statistics
"""

from typing import Dict, Iterable

from .models import DetectedKeyword, KeywordStatistics


def compute_statistics(keywords: Iterable[DetectedKeyword]) -> KeywordStatistics:
    """
    Summarize a list of detected keywords

    Args:
        keywords: Detected keywords (already filtered by confidence)

    Returns:
        KeywordStatistics with the total count, per-field counts, mean
        confidence (0 when empty) and the number of distinct normalized terms
    """
    by_field: Dict[str, int] = {}
    total_confidence = 0.0
    unique_terms = set()
    total = 0

    for kw in keywords:
        total += 1
        by_field[kw.field] = by_field.get(kw.field, 0) + 1
        total_confidence += kw.confidence
        unique_terms.add(kw.normalized_text)

    return KeywordStatistics(
        total=total,
        by_field=by_field,
        average_confidence=total_confidence / total if total else 0.0,
        unique_terms=len(unique_terms),
    )

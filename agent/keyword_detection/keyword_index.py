"""
Keyword index

Lookup structure from normalized phrase text to the dictionary entries that
normalize to it. An index is built once for a (fields, case mode) pair and
never mutated afterwards; reconfiguring a detector builds a new index.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple
import logging

from .keyword_dictionary import KeywordDictionary
from .models import KeywordEntry

logger = logging.getLogger(__name__)


class KeywordIndex:
    """
    Immutable phrase index

    Buckets keep dictionary order: entries are appended in target-field
    order, then keyword order within each field. Several entries may share
    one normalized phrase (multi-field keywords, or two keywords that only
    differ in case when matching is case-insensitive).

    Example:
        >>> index = KeywordIndex.build(dictionary, ["machine learning"])
        >>> index.lookup("neural network")
        (KeywordEntry(field='machine learning', keyword='neural network', word_count=2),)
    """

    def __init__(
        self,
        entries: Mapping[str, Tuple[KeywordEntry, ...]],
        fields: Tuple[str, ...],
        case_sensitive: bool
    ):
        self._entries = MappingProxyType(dict(entries))
        self._fields = fields
        self._case_sensitive = case_sensitive
        self._entry_count = sum(len(bucket) for bucket in self._entries.values())
        self._max_word_count = max(
            (entry.word_count for bucket in self._entries.values() for entry in bucket),
            default=0
        )

    @classmethod
    def build(
        cls,
        dictionary: KeywordDictionary,
        target_fields: Optional[Iterable[str]] = None,
        case_sensitive: bool = False
    ) -> "KeywordIndex":
        """
        Build an index over ``target_fields`` of ``dictionary``

        Args:
            dictionary: Keyword dictionary to read from (never modified)
            target_fields: Fields to include (None = all dictionary fields).
                Unknown field names are ignored.
                Names are matched case-insensitively.
            case_sensitive: Keep keyword casing instead of lowercasing

        Returns:
            New KeywordIndex
        """
        if target_fields is None:
            fields = tuple(dictionary.fields())
        else:
            # Field keys are lowercase; a repeated field is indexed once
            fields = tuple(dict.fromkeys(f.strip().lower() for f in target_fields))
        buckets: Dict[str, List[KeywordEntry]] = {}

        for field_name in fields:
            for keyword in dictionary.keywords(field_name):
                normalized = keyword if case_sensitive else keyword.lower()
                buckets.setdefault(normalized, []).append(KeywordEntry(
                    field=field_name,
                    keyword=keyword,
                    word_count=len(keyword.split())
                ))

        index = cls(
            {phrase: tuple(bucket) for phrase, bucket in buckets.items()},
            fields,
            case_sensitive
        )
        logger.debug(
            f"Keyword index built: {len(fields)} fields, "
            f"{index.entry_count} entries, {len(index)} phrases"
        )
        return index

    def normalize(self, text: str) -> str:
        """Apply this index's case mode to ``text``"""
        return text if self._case_sensitive else text.lower()

    def lookup(self, normalized_phrase: str) -> Tuple[KeywordEntry, ...]:
        """Entries registered under an already-normalized phrase (empty if none)"""
        return self._entries.get(normalized_phrase, ())

    @property
    def fields(self) -> Tuple[str, ...]:
        return self._fields

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    @property
    def entry_count(self) -> int:
        """Total number of (field, keyword) entries"""
        return self._entry_count

    @property
    def max_word_count(self) -> int:
        return self._max_word_count

    def __len__(self) -> int:
        """Number of distinct normalized phrases"""
        return len(self._entries)

    def __contains__(self, normalized_phrase: object) -> bool:
        return normalized_phrase in self._entries

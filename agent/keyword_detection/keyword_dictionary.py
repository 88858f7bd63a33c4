"""
Read-only keyword dictionary

Wraps a ``field -> keywords`` table in an immutable object that is passed
explicitly to the index builder. The process-wide default instance is built
once from ``FIELD_KEYWORDS``; tests can build small synthetic dictionaries.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .field_keywords import FIELD_CATEGORIES, FIELD_KEYWORDS


class KeywordDictionary:
    """
    Immutable mapping of field name -> keyword tuple.

    Field names are stored lowercase and trimmed. Keywords keep the casing
    they were authored with.

    Example:
        >>> dictionary = KeywordDictionary({"machine learning": ["neural network"]})
        >>> dictionary.keywords("Machine Learning")
        ('neural network',)
    """

    def __init__(
        self,
        table: Mapping[str, Iterable[str]],
        categories: Optional[Mapping[str, Iterable[str]]] = None
    ):
        fields: Dict[str, Tuple[str, ...]] = {}
        for field_name, keywords in table.items():
            key = self._normalize_field(field_name)
            fields[key] = fields.get(key, ()) + tuple(keywords)
        self._fields = MappingProxyType(fields)
        self._categories = MappingProxyType({
            name: tuple(self._normalize_field(f) for f in members)
            for name, members in (categories or {}).items()
        })

    @staticmethod
    def _normalize_field(field_name: str) -> str:
        return field_name.strip().lower()

    def fields(self) -> List[str]:
        """Field names in table order"""
        return list(self._fields.keys())

    def keywords(self, field_name: str) -> Tuple[str, ...]:
        """Keywords of ``field_name`` (empty tuple if the field is unknown)"""
        return self._fields.get(self._normalize_field(field_name), ())

    def has_field(self, field_name: str) -> bool:
        return self._normalize_field(field_name) in self._fields

    def categories(self) -> Dict[str, List[str]]:
        """Discipline -> fields, restricted to fields present in this dictionary"""
        return {
            name: [f for f in members if f in self._fields]
            for name, members in self._categories.items()
        }

    def max_word_count(self) -> int:
        """Word count of the longest keyword phrase"""
        return max(
            (len(keyword.split()) for keywords in self._fields.values() for keyword in keywords),
            default=0
        )

    def __len__(self) -> int:
        return sum(len(keywords) for keywords in self._fields.values())

    def __contains__(self, field_name: object) -> bool:
        return isinstance(field_name, str) and self.has_field(field_name)

    def __repr__(self) -> str:
        return f"KeywordDictionary(fields={len(self._fields)}, keywords={len(self)})"


# Process-wide default dictionary (built on first use)
_default_dictionary: Optional[KeywordDictionary] = None


def get_default_dictionary() -> KeywordDictionary:
    """Shared dictionary built from the bundled STEM field table"""
    global _default_dictionary

    if _default_dictionary is None:
        _default_dictionary = KeywordDictionary(FIELD_KEYWORDS, FIELD_CATEGORIES)

    return _default_dictionary


def get_all_fields() -> List[str]:
    return get_default_dictionary().fields()


def get_field_keywords(field_name: str) -> List[str]:
    return list(get_default_dictionary().keywords(field_name))


def has_field(field_name: str) -> bool:
    return get_default_dictionary().has_field(field_name)

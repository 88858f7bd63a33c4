"""
Keyword index cache

Keeps recently built keyword indexes so that per-request detectors with the
same field selection and case mode do not rebuild the index every time.
Indexes are immutable, so one cached value can serve concurrent requests.
"""

from collections import OrderedDict
from typing import Any, Dict, Iterable, Optional, Tuple
import logging
import threading

from .keyword_dictionary import KeywordDictionary
from .keyword_index import KeywordIndex

logger = logging.getLogger(__name__)

CacheKey = Tuple[int, Tuple[str, ...], bool]


class IndexCache:
    """
    LRU cache of KeywordIndex values

    The cache key is (dictionary identity, ordered target fields, case mode).
    The dictionary object is stored next to its index so a recycled ``id()``
    never returns an index built from a different dictionary.
    """

    def __init__(self, max_size: int = 32):
        """
        Args:
            max_size: Maximum number of cached indexes (least recently used is evicted)
        """
        self._cache: "OrderedDict[CacheKey, Tuple[KeywordDictionary, KeywordIndex]]" = OrderedDict()
        self._max_size = max_size
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def _generate_cache_key(
        self,
        dictionary: KeywordDictionary,
        target_fields: Optional[Iterable[str]],
        case_sensitive: bool
    ) -> CacheKey:
        if target_fields is None:
            fields = tuple(dictionary.fields())
        else:
            fields = tuple(dict.fromkeys(f.strip().lower() for f in target_fields))
        return id(dictionary), fields, case_sensitive

    def get_or_build(
        self,
        dictionary: KeywordDictionary,
        target_fields: Optional[Iterable[str]] = None,
        case_sensitive: bool = False
    ) -> KeywordIndex:
        """
        Return the cached index for this configuration, building it on a miss

        Args:
            dictionary: Keyword dictionary
            target_fields: Fields to index (None = all)
            case_sensitive: Case mode of the index

        Returns:
            KeywordIndex for the configuration
        """
        key = self._generate_cache_key(dictionary, target_fields, case_sensitive)

        with self._lock:
            cached = self._cache.get(key)
            if cached is not None and cached[0] is dictionary:
                self._cache.move_to_end(key)
                self._hits += 1
                logger.debug(f"Index cache hit: {len(key[1])} fields, case_sensitive={case_sensitive}")
                return cached[1]
            self._misses += 1

        # Build outside the lock; two concurrent misses build equal indexes
        index = KeywordIndex.build(dictionary, key[1], case_sensitive)
        if self._max_size <= 0:
            return index

        with self._lock:
            if len(self._cache) >= self._max_size and key not in self._cache:
                evicted_key, _ = self._cache.popitem(last=False)
                logger.debug(f"Index cache evicted (LRU): {len(evicted_key[1])} fields")
            self._cache[key] = (dictionary, index)
            self._cache.move_to_end(key)

        return index

    def clear(self) -> None:
        """Drop every cached index"""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0
        logger.info("Index cache cleared")

    def get_stats(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "size": len(self._cache),
                "max_size": self._max_size,
                "hits": self._hits,
                "misses": self._misses,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)


"""Parse cache - memoization store shared by the note and interval parsers.

Parsed values are immutable, so a cache entry can be handed out to any
number of callers. Two policies are supported:

- ``maxsize=None``: entries are kept forever. Memory grows with the number
  of distinct input strings, which is only safe for short-lived processes
  or bounded vocabularies.
- ``maxsize=N``: least recently used entries are evicted once ``N`` is
  exceeded.
"""

import logging
import threading
from collections import OrderedDict
from typing import Any, Callable, Hashable, Optional

logger = logging.getLogger(__name__)


class ParseCache:
    """Mapping from input string to parsed value with optional LRU eviction."""

    def __init__(self, maxsize: Optional[int] = None):
        """
        Initialize ParseCache.

        Args:
            maxsize: Maximum number of entries, or None for an unbounded cache
        """
        if maxsize is not None and maxsize <= 0:
            raise ValueError(f"maxsize must be positive or None, got {maxsize}")
        self.maxsize = maxsize
        self._data: "OrderedDict[Hashable, Any]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._data

    def get(self, key: Hashable, default: Any = None) -> Any:
        with self._lock:
            if key not in self._data:
                return default
            if self.maxsize is not None:
                self._data.move_to_end(key)
            return self._data[key]

    def put(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._data[key] = value
            if self.maxsize is None:
                return
            self._data.move_to_end(key)
            while len(self._data) > self.maxsize:
                evicted, _ = self._data.popitem(last=False)
                logger.debug("Evicted %r from parse cache", evicted)

    def get_or_compute(self, key: Hashable, compute: Callable[[Hashable], Any]) -> Any:
        """
        Return the cached value for key, computing and storing it if missing.

        Two threads missing the same key may both compute it; the values are
        equal, so whichever is stored last wins without harm.
        """
        missing = object()
        value = self.get(key, missing)
        if value is missing:
            value = compute(key)
            self.put(key, value)
        return value

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

from __future__ import annotations

import threading
from typing import Callable, Dict, Optional, Tuple

from .logger import get_logger
from .transform import transform_content
from .value_sources import NullValueSource, ValueSource

log = get_logger(__name__)

__all__ = [
    "TransformCache",
    "memoized_transform_content",
    "default_cache",
]

TransformFn = Callable[[str, ValueSource], Optional[str]]


class TransformCache:
    """
    Memoises block transforms for as long as the cache instance lives.

    Entries are keyed on the exact content string together with the value
    source's ``version``, so a changed root scope forces recomputation instead
    of serving a stale result. The map is guarded by a lock; the transform
    itself runs unlocked and the first stored result wins.
    """

    def __init__(
        self,
        source: Optional[ValueSource] = None,
        transform: TransformFn = transform_content,
    ) -> None:
        self.source = source or NullValueSource()
        self._transform = transform
        self._entries: Dict[Tuple[str, int], Optional[str]] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, content: str) -> Optional[str]:
        key = (content, self.source.version)
        with self._lock:
            if key in self._entries:
                self.hits += 1
                return self._entries[key]
            self.misses += 1

        log.debug("Transform cache miss (%d entries)", len(self._entries))
        result = self._transform(content, self.source)
        with self._lock:
            return self._entries.setdefault(key, result)

    __call__ = get

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, content: object) -> bool:
        key = (content, self.source.version)
        with self._lock:
            return key in self._entries


default_cache = TransformCache()


def memoized_transform_content(content: str) -> Optional[str]:
    """:func:`transform_content` memoised against the headless root scope."""

    return default_cache.get(content)

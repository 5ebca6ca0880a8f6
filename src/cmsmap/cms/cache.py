"""Cache store contract and an in-process implementation."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

DEFAULT_CACHE_LIFETIME = 3600


@runtime_checkable
class CacheStore(Protocol):
    """Minimal key-value cache used by content repositories.

    Keys are the strings built by :func:`cmsmap.cms.cache_key.build_cache_key`.
    Values are opaque to the store.
    """

    def get(self, key: str, default: Any = None) -> Any:
        """Return the cached value, or ``default`` when missing or expired."""
        ...

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store a value; ``ttl`` is in seconds, None means no expiry."""
        ...

    def has(self, key: str) -> bool:
        """Whether a non-expired value exists for the key."""
        ...


class MemoryCacheStore:
    """Dict-backed cache with per-entry expiry.

    Not shared across processes. A ttl of zero or less stores nothing.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[Any, float | None]] = {}

    def _live(self, key: str) -> bool:
        entry = self._entries.get(key)
        if entry is None:
            return False
        expires_at = entry[1]
        if expires_at is not None and self._clock() >= expires_at:
            del self._entries[key]
            return False
        return True

    def get(self, key: str, default: Any = None) -> Any:
        if not self._live(key):
            return default
        return self._entries[key][0]

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        if ttl is not None and ttl <= 0:
            logger.debug("Skipping cache write for %s (ttl=%s)", key, ttl)
            self._entries.pop(key, None)
            return
        expires_at = None if ttl is None else self._clock() + ttl
        self._entries[key] = (value, expires_at)

    def has(self, key: str) -> bool:
        return self._live(key)

    def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return sum(1 for key in list(self._entries) if self._live(key))

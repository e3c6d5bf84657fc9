# salary_estimator/cache.py
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from salary_estimator.models import RemoteSalary

DEFAULT_TTL_SECONDS = 10 * 60


@dataclass(frozen=True)
class CacheEntry:
    value: Optional[RemoteSalary]   # None is a cached "no data"
    stored_at: float


class EstimateCache:
    """
    In-memory TTL cache of remote lookup results, keyed by company+title.

    Staleness is resolved lazily on read; nothing refreshes in the
    background. Writes overwrite (last write wins).
    """

    def __init__(self, ttl_seconds: float = DEFAULT_TTL_SECONDS, clock: Callable[[], float] = time.monotonic):
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive (got {ttl_seconds})")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def put(self, key: str, value: Optional[RemoteSalary]) -> CacheEntry:
        entry = CacheEntry(value=value, stored_at=self._clock())
        self._entries[key] = entry
        return entry

    def peek(self, key: str) -> Optional[CacheEntry]:
        """Entry regardless of age."""
        return self._entries.get(key)

    def get_fresh(self, key: str) -> Optional[CacheEntry]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.stored_at >= self.ttl_seconds:
            return None
        return entry

    def clear(self) -> None:
        self._entries.clear()

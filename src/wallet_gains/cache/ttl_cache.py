"""
Generic TTL cache used for prices, token metadata and transaction data.

Each entry carries its own expiry so a write can pick a TTL other than the
instance default. Storage is a cachetools TLRUCache, which also bounds the
number of entries.
"""

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Optional, TypeVar

from cachetools import TLRUCache

from wallet_gains.config.settings import Settings
from wallet_gains.domain.views import PriceQuote

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

DEFAULT_MAX_ENTRIES = 10_000


@dataclass(frozen=True)
class CacheEntry(Generic[K, V]):
    """A cached value and the timer reading after which it is a miss."""

    key: K
    value: V
    expires_at: float


def _entry_expiry(_key: Any, entry: CacheEntry, _now: float) -> float:
    return entry.expires_at


class TtlCache(Generic[K, V]):
    """
    Thread-safe key/value cache with per-entry expiry.

    `get` returns None on a miss, so None itself cannot be cached.
    """

    def __init__(
        self,
        name: str,
        default_ttl_seconds: float,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        timer: Callable[[], float] = time.monotonic,
    ):
        self.name = name
        self.default_ttl_seconds = default_ttl_seconds
        self._timer = timer
        self._entries: TLRUCache = TLRUCache(maxsize=max_entries, ttu=_entry_expiry, timer=timer)
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: K) -> Optional[V]:
        """Return the live value for key, or None if absent or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None
            self._hits += 1
            return entry.value

    def set(self, key: K, value: V, ttl_seconds: Optional[float] = None) -> None:
        """Store value, restarting its TTL window."""
        ttl = self.default_ttl_seconds if ttl_seconds is None else ttl_seconds
        with self._lock:
            # TLRUCache silently drops already-expired entries, so a
            # non-positive TTL leaves the key absent.
            self._entries.pop(key, None)
            self._entries[key] = CacheEntry(key=key, value=value, expires_at=self._timer() + ttl)

    def delete(self, key: K) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            self._entries.expire()
            return len(self._entries)

    def stats(self) -> dict[str, Any]:
        """Hit/miss counters and current size."""
        with self._lock:
            self._entries.expire()
            return {
                "name": self.name,
                "ttl_seconds": self.default_ttl_seconds,
                "size": len(self._entries),
                "max_entries": int(self._entries.maxsize),
                "hits": self._hits,
                "misses": self._misses,
            }


@dataclass
class CacheSet:
    """The three per-category caches shared by one process."""

    prices: TtlCache[str, PriceQuote]
    metadata: TtlCache[str, bool]
    transactions: TtlCache[str, Any]

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        timer: Callable[[], float] = time.monotonic,
    ) -> "CacheSet":
        max_entries = settings.cache_max_entries
        return cls(
            prices=TtlCache("price", settings.price_cache_ttl_seconds, max_entries, timer),
            metadata=TtlCache("metadata", settings.metadata_cache_ttl_seconds, max_entries, timer),
            transactions=TtlCache("transaction", settings.transaction_cache_ttl_seconds, max_entries, timer),
        )

    def stats(self) -> list[dict[str, Any]]:
        return [self.prices.stats(), self.metadata.stats(), self.transactions.stats()]

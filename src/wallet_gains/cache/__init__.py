"""In-process TTL caches."""

from wallet_gains.cache.ttl_cache import CacheEntry, CacheSet, TtlCache

__all__ = [
    "CacheEntry",
    "CacheSet",
    "TtlCache",
]

"""Pydantic schemas for diagnostics endpoints."""

from pydantic import BaseModel


class CacheStatsResponse(BaseModel):
    """Counters for a single cache category."""

    name: str
    ttl_seconds: float
    size: int
    max_entries: int
    hits: int
    misses: int


class CacheStatsListResponse(BaseModel):
    caches: list[CacheStatsResponse]

"""Diagnostics API: cache statistics."""

from fastapi import APIRouter, Depends

from wallet_gains.api.deps import get_caches
from wallet_gains.api.schemas.system import CacheStatsListResponse, CacheStatsResponse
from wallet_gains.cache import CacheSet

router = APIRouter(prefix="/api/cache", tags=["system"])


@router.get("/stats", response_model=CacheStatsListResponse)
def get_cache_stats(caches: CacheSet = Depends(get_caches)):
    """Hit/miss counters and sizes for the price, metadata and transaction caches."""
    return CacheStatsListResponse(caches=[CacheStatsResponse(**s) for s in caches.stats()])

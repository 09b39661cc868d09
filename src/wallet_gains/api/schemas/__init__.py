"""Pydantic schemas for API request/response."""

from wallet_gains.api.schemas.wallet import (
    GainResultResponse,
    WalletGainsResponse,
    ErrorResponse,
)
from wallet_gains.api.schemas.system import (
    CacheStatsResponse,
    CacheStatsListResponse,
)

__all__ = [
    "GainResultResponse",
    "WalletGainsResponse",
    "ErrorResponse",
    "CacheStatsResponse",
    "CacheStatsListResponse",
]

"""Domain layer - models and views."""

from wallet_gains.domain.models import TokenHolding, PriceSourceName
from wallet_gains.domain.views import GainResult, PriceQuote

__all__ = [
    "TokenHolding",
    "PriceSourceName",
    "GainResult",
    "PriceQuote",
]

"""Domain models."""

from wallet_gains.domain.models.enums import PriceSourceName
from wallet_gains.domain.models.holding import TokenHolding

__all__ = [
    "PriceSourceName",
    "TokenHolding",
]

"""View models for gains outputs."""

from wallet_gains.domain.views.gains import GainResult, PriceQuote

__all__ = [
    "GainResult",
    "PriceQuote",
]

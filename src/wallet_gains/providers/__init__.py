"""External data providers: price feeds, chain holdings, eligibility signals."""

from wallet_gains.providers.price_source import PriceSource, HttpPriceSource
from wallet_gains.providers.coingecko import CoinGeckoPriceSource
from wallet_gains.providers.dexscreener import DexScreenerPriceSource
from wallet_gains.providers.raydium import RaydiumPriceSource
from wallet_gains.providers.holdings_provider import HoldingsSource
from wallet_gains.providers.solana_rpc import SolanaHoldingsSource, TOKEN_PROGRAM_ID
from wallet_gains.providers.eligibility_signals import (
    EligibilitySignal,
    StaticSignal,
    default_signals,
)

__all__ = [
    "PriceSource",
    "HttpPriceSource",
    "CoinGeckoPriceSource",
    "DexScreenerPriceSource",
    "RaydiumPriceSource",
    "HoldingsSource",
    "SolanaHoldingsSource",
    "TOKEN_PROGRAM_ID",
    "EligibilitySignal",
    "StaticSignal",
    "default_signals",
]

"""Enumerations for domain models."""

from enum import Enum


class PriceSourceName(str, Enum):
    """External price feeds, listed in fallback priority order."""

    COINGECKO = "CoinGecko"
    DEXSCREENER = "DexScreener"
    RAYDIUM = "Raydium"

"""Multi-source token price resolution with caching."""

import asyncio
import logging
import math
from typing import Optional, Sequence

from wallet_gains.cache import TtlCache
from wallet_gains.domain.views import PriceQuote
from wallet_gains.providers.price_source import PriceSource

module_logger = logging.getLogger(__name__)


class PriceOracle:
    """
    Resolves a token's USD price from an ordered list of sources.

    Sources are tried in the order given; the first positive price wins and is
    cached. Source failures never propagate: if nothing answers, the price is 0.
    """

    def __init__(
        self,
        sources: Sequence[PriceSource],
        cache: TtlCache[str, PriceQuote],
        source_timeout_seconds: float = 5.0,
        logger: Optional[logging.Logger] = None,
    ):
        self._sources = list(sources)
        self._cache = cache
        self._timeout = source_timeout_seconds
        self._logger = logger or module_logger

    async def get_price(self, mint: str) -> float:
        """Return the USD unit price for mint, or 0.0 if no source knows it."""
        quote = await self.get_quote(mint)
        return quote.unit_price_usd if quote else 0.0

    async def get_quote(self, mint: str) -> Optional[PriceQuote]:
        """Return the cached or freshly fetched quote, or None."""
        cached = self._cache.get(mint)
        if cached is not None:
            return cached

        self._logger.debug("Price cache miss for %s", mint)
        for source in self._sources:
            price = await self._fetch_from(source, mint)
            if price > 0:
                quote = PriceQuote(source=source.name, unit_price_usd=price)
                self._cache.set(mint, quote)
                return quote

        self._logger.info("No price found for %s from any source", mint)
        return None

    async def _fetch_from(self, source: PriceSource, mint: str) -> float:
        """One source attempt; every failure mode collapses to 0.0."""
        try:
            price = float(await asyncio.wait_for(source.fetch_price(mint), timeout=self._timeout))
        except asyncio.TimeoutError:
            self._logger.warning("Price fetch error: %s timed out after %ss for %s", source.name.value, self._timeout, mint)
            return 0.0
        except Exception as e:
            self._logger.warning("Price fetch error: %s failed for %s: %s", source.name.value, mint, e)
            return 0.0

        if not math.isfinite(price) or price <= 0:
            self._logger.warning("Price fetch error: %s returned no usable price for %s (%r)", source.name.value, mint, price)
            return 0.0
        return price

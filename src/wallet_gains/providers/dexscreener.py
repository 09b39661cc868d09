"""DexScreener token price source."""

from wallet_gains.domain.models import PriceSourceName
from wallet_gains.providers.price_source import HttpPriceSource, to_price


class DexScreenerPriceSource(HttpPriceSource):
    """Uses the first listed trading pair's USD price."""

    name = PriceSourceName.DEXSCREENER

    async def fetch_price(self, mint: str) -> float:
        data = await self._get_json(f"tokens/{mint}")
        if not isinstance(data, dict):
            return 0.0
        pairs = data.get("pairs") or []
        if not pairs:
            return 0.0
        return to_price(pairs[0].get("priceUsd"))

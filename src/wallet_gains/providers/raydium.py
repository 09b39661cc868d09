"""Raydium price API source."""

from wallet_gains.domain.models import PriceSourceName
from wallet_gains.providers.price_source import HttpPriceSource, to_price


class RaydiumPriceSource(HttpPriceSource):
    """Public Raydium price endpoint; it takes no API key."""

    name = PriceSourceName.RAYDIUM

    async def fetch_price(self, mint: str) -> float:
        data = await self._get_json("price", params={"ids": mint})
        if not isinstance(data, dict):
            return 0.0
        entry = data.get(mint)
        if isinstance(entry, dict):
            return to_price(entry.get("price"))
        return to_price(entry)

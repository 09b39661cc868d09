"""CoinGecko token price source."""

from wallet_gains.domain.models import PriceSourceName
from wallet_gains.providers.price_source import HttpPriceSource, to_price


class CoinGeckoPriceSource(HttpPriceSource):
    """Looks up Solana SPL token prices by contract address."""

    name = PriceSourceName.COINGECKO

    async def fetch_price(self, mint: str) -> float:
        data = await self._get_json(
            "simple/token_price/solana",
            params={"contract_addresses": mint, "vs_currencies": "usd"},
        )
        if not isinstance(data, dict):
            return 0.0
        # CoinGecko lowercases contract addresses in its response keys.
        entry = data.get(mint) or data.get(mint.lower()) or {}
        return to_price(entry.get("usd"))

"""Holdings source protocol."""

from typing import Protocol

from wallet_gains.core.address import WalletAddress
from wallet_gains.domain.models import TokenHolding


class HoldingsSource(Protocol):
    """
    Protocol for reading a wallet's token balances from chain.

    Implementations raise HoldingsFetchError on transport or parse failure.
    An empty wallet yields an empty list.
    """

    async def get_holdings(self, wallet: WalletAddress) -> list[TokenHolding]:
        ...

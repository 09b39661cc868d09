"""Holdings source backed by a Solana JSON-RPC node."""

import asyncio
import logging
from typing import Any, Iterable

from solana.rpc.async_api import AsyncClient
from solana.rpc.models import TokenAccountOpts
from solders.pubkey import Pubkey

from wallet_gains.core.address import WalletAddress
from wallet_gains.core.exceptions import HoldingsFetchError
from wallet_gains.domain.models import TokenHolding

logger = logging.getLogger(__name__)

TOKEN_PROGRAM_ID = Pubkey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")


def _ui_amount(token_amount: dict[str, Any]) -> float:
    amount = token_amount.get("uiAmount")
    if amount is None:
        amount = token_amount.get("uiAmountString") or 0
    return float(amount)


def parse_token_accounts(accounts: Iterable[Any]) -> list[TokenHolding]:
    """
    Convert jsonParsed token accounts into TokenHolding records.

    Each account is expected to look like
    `account.data.parsed == {"info": {"mint": ..., "tokenAmount": {...}}}`.
    """
    holdings = []
    for keyed in accounts:
        info = keyed.account.data.parsed["info"]
        holdings.append(
            TokenHolding(
                mint=str(info["mint"]),
                ui_amount=_ui_amount(info["tokenAmount"]),
            )
        )
    return holdings


class SolanaHoldingsSource:
    """Lists SPL token accounts owned by a wallet."""

    def __init__(self, client: AsyncClient, timeout_seconds: float = 10.0):
        self._client = client
        self._timeout = timeout_seconds

    @classmethod
    def from_url(cls, rpc_url: str, timeout_seconds: float = 10.0) -> "SolanaHoldingsSource":
        return cls(AsyncClient(rpc_url, timeout=timeout_seconds), timeout_seconds)

    async def get_holdings(self, wallet: WalletAddress) -> list[TokenHolding]:
        try:
            response = await asyncio.wait_for(
                self._client.get_token_accounts_by_owner_json_parsed(
                    wallet.to_pubkey(),
                    TokenAccountOpts(program_id=TOKEN_PROGRAM_ID),
                ),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise HoldingsFetchError(str(wallet), f"RPC timed out after {self._timeout}s") from e
        except Exception as e:
            raise HoldingsFetchError(str(wallet), f"{type(e).__name__}: {e}") from e

        try:
            holdings = parse_token_accounts(response.value)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise HoldingsFetchError(str(wallet), f"unexpected account layout: {e}") from e

        logger.debug("Wallet %s has %d token accounts", wallet, len(holdings))
        return holdings

    async def close(self) -> None:
        await self._client.close()

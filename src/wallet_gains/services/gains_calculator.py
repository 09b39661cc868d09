"""Wallet gains orchestration."""

import asyncio
import logging
from typing import Optional

from wallet_gains.core.address import WalletAddress, validate_wallet_address
from wallet_gains.core.exceptions import InvalidAddressError, WalletGainsError
from wallet_gains.domain.models import TokenHolding
from wallet_gains.domain.views import GainResult
from wallet_gains.providers.holdings_provider import HoldingsSource
from wallet_gains.services.cost_basis_store import CostBasisStore
from wallet_gains.services.eligibility_filter import TokenEligibilityFilter
from wallet_gains.services.price_oracle import PriceOracle

module_logger = logging.getLogger(__name__)


class GainsCalculator:
    """
    Computes unrealized gains for every eligible token a wallet holds.

    Only an invalid address or a failed holdings lookup fails the request.
    Anything that goes wrong for a single holding degrades that holding alone.
    """

    def __init__(
        self,
        holdings_source: HoldingsSource,
        eligibility_filter: TokenEligibilityFilter,
        price_oracle: PriceOracle,
        cost_basis_store: CostBasisStore,
        logger: Optional[logging.Logger] = None,
    ):
        self._holdings = holdings_source
        self._eligibility = eligibility_filter
        self._oracle = price_oracle
        self._cost_basis = cost_basis_store
        self._logger = logger or module_logger

    async def calculate_gains(self, raw_address: str) -> list[GainResult]:
        """
        Return one GainResult per eligible holding with a positive value.

        Raises InvalidAddressError for a malformed address and
        WalletGainsError when holdings cannot be read. Result order is
        not meaningful.
        """
        try:
            wallet = validate_wallet_address(raw_address)
        except InvalidAddressError:
            self._logger.warning("Invalid wallet address: %r", raw_address)
            raise

        try:
            holdings = await self._holdings.get_holdings(wallet)
        except Exception as e:
            self._logger.error("Gains calculation error for %s: %s", wallet, e)
            raise WalletGainsError(reason=f"Wallet gains calculation failed: {e}") from e

        eligible = await self._eligibility.filter_eligible(holdings, key=lambda h: h.mint)
        evaluated = await asyncio.gather(*(self._evaluate(wallet, holding) for holding in eligible))
        results = [r for r in evaluated if r is not None and r.total_value > 0]

        self._logger.info(
            "Calculated gains for wallet %s: %d reported, %d eligible, %d held",
            wallet,
            len(results),
            len(eligible),
            len(holdings),
        )
        return results

    async def _evaluate(self, wallet: WalletAddress, holding: TokenHolding) -> Optional[GainResult]:
        try:
            price, cost_basis = await asyncio.gather(
                self._oracle.get_price(holding.mint),
                self._cost_basis.get_cost_basis(str(wallet), holding.mint),
            )
            return GainResult(
                mint=holding.mint,
                current_price=price,
                amount=holding.ui_amount,
                cost_basis=cost_basis,
            )
        except Exception as e:
            self._logger.warning("Skipping %s for wallet %s: %s", holding.mint, wallet, e)
            return None

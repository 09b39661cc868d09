"""Cost basis lookup over a persisted key/value store."""

import asyncio
import logging
import math
from typing import Optional

from wallet_gains.core.exceptions import CostBasisStoreError
from wallet_gains.repositories.protocols import KeyValueStore

module_logger = logging.getLogger(__name__)


def cost_basis_key(wallet: str, mint: str) -> str:
    return f"{wallet}|{mint}"


class CostBasisStore:
    """
    Recorded acquisition value (USD) per wallet and mint.

    Absent records are worth 0. Storage failures are logged and also read as 0
    so one bad lookup never fails a gains report.
    """

    def __init__(self, store: KeyValueStore, logger: Optional[logging.Logger] = None):
        self._store = store
        self._logger = logger or module_logger

    async def get_cost_basis(self, wallet: str, mint: str) -> float:
        key = cost_basis_key(str(wallet), mint)
        try:
            value = await asyncio.to_thread(self._store.get, key)
        except CostBasisStoreError as e:
            self._logger.error("Cost basis tracking error: %s", e.message)
            return 0.0
        return self._as_amount(key, value)

    def _as_amount(self, key: str, value: object) -> float:
        if value is None:
            return 0.0
        try:
            amount = float(value)
        except (TypeError, ValueError, OverflowError):
            self._logger.error("Cost basis tracking error: non-numeric value stored for %s", key)
            return 0.0
        if not math.isfinite(amount) or amount < 0:
            self._logger.error("Cost basis tracking error: invalid value %r stored for %s", value, key)
            return 0.0
        return amount

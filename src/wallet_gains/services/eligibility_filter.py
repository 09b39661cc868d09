"""Token eligibility evaluation."""

import asyncio
import logging
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from wallet_gains.cache import TtlCache
from wallet_gains.providers.eligibility_signals import EligibilitySignal

module_logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MIN_TRUE_SIGNALS = 2


class TokenEligibilityFilter:
    """
    Decides whether a token is a tradable asset worth reporting.

    A token is eligible when at least `min_true_signals` of its signals are
    true. Verdicts are cached per mint in the metadata cache.
    """

    def __init__(
        self,
        signals: Sequence[EligibilitySignal],
        cache: TtlCache[str, bool],
        min_true_signals: int = DEFAULT_MIN_TRUE_SIGNALS,
        logger: Optional[logging.Logger] = None,
    ):
        self._signals = list(signals)
        self._cache = cache
        self._min_true = min_true_signals
        self._logger = logger or module_logger

    async def is_eligible(self, mint: str) -> bool:
        """Return the cached or freshly computed verdict. Never raises."""
        try:
            cached = self._cache.get(mint)
            if cached is not None:
                return cached

            results = await asyncio.gather(*(self._evaluate(signal, mint) for signal in self._signals))
            eligible = sum(results) >= self._min_true
            self._cache.set(mint, eligible)
            return eligible
        except Exception as e:
            self._logger.warning("Token detection error for %s: %s", mint, e)
            return False

    async def filter_eligible(self, items: Iterable[T], key: Callable[[T], str]) -> list[T]:
        """
        Keep items whose mint is eligible.

        All verdicts are awaited first, then the items are filtered on the
        resolved booleans.
        """
        items = list(items)
        verdicts = await asyncio.gather(*(self.is_eligible(key(item)) for item in items))
        return [item for item, eligible in zip(items, verdicts) if eligible]

    async def _evaluate(self, signal: EligibilitySignal, mint: str) -> bool:
        try:
            return bool(await signal.evaluate(mint))
        except Exception as e:
            self._logger.warning("Eligibility signal %s failed for %s: %s", signal.name, mint, e)
            return False

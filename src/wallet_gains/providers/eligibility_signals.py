"""Pluggable token eligibility signals."""

from typing import Protocol


class EligibilitySignal(Protocol):
    """
    A single yes/no heuristic about a token (volume, social traction, age).

    Implementations may raise EligibilitySignalError; the filter treats a
    failed signal as False.
    """

    name: str

    async def evaluate(self, mint: str) -> bool:
        ...


class StaticSignal:
    """Signal that answers the same value for every mint."""

    def __init__(self, name: str, result: bool = False):
        self.name = name
        self._result = result

    async def evaluate(self, mint: str) -> bool:
        return self._result


def default_signals(result: bool = False) -> list[StaticSignal]:
    """Placeholder volume, social and age/liquidity signals."""
    return [
        StaticSignal("volume", result),
        StaticSignal("social_traction", result),
        StaticSignal("age_liquidity", result),
    ]

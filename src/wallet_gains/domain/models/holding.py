"""Token holding model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenHolding:
    """
    One SPL token account balance read from chain.

    Produced by a HoldingsSource; never edited afterwards.
    """

    mint: str
    ui_amount: float

"""View models for price resolution and gains calculation outputs."""

from dataclasses import dataclass, field

from wallet_gains.domain.models.enums import PriceSourceName


@dataclass(frozen=True)
class PriceQuote:
    """Unit price reported by one source."""

    source: PriceSourceName
    unit_price_usd: float


@dataclass
class GainResult:
    """Unrealized gain for a single holding. Derived per request."""

    mint: str
    current_price: float
    amount: float
    cost_basis: float
    total_value: float = field(init=False)
    unrealized_gain: float = field(init=False)

    def __post_init__(self) -> None:
        self.total_value = self.current_price * self.amount
        self.unrealized_gain = self.total_value - self.cost_basis

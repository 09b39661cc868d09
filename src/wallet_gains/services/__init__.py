"""Service layer - business logic orchestration."""

from wallet_gains.services.price_oracle import PriceOracle
from wallet_gains.services.eligibility_filter import TokenEligibilityFilter
from wallet_gains.services.cost_basis_store import CostBasisStore, cost_basis_key
from wallet_gains.services.gains_calculator import GainsCalculator

__all__ = [
    "PriceOracle",
    "TokenEligibilityFilter",
    "CostBasisStore",
    "cost_basis_key",
    "GainsCalculator",
]

"""Pydantic schemas for wallet gains endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from wallet_gains.domain.views import GainResult


class GainResultResponse(BaseModel):
    """Unrealized gain for one token, serialized in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    mint: str = Field(..., alias="token", description="Token mint address")
    current_price: float
    amount: float
    cost_basis: float
    total_value: float
    unrealized_gain: float

    @classmethod
    def from_domain(cls, result: GainResult) -> "GainResultResponse":
        return cls(
            mint=result.mint,
            current_price=result.current_price,
            amount=result.amount,
            cost_basis=result.cost_basis,
            total_value=result.total_value,
            unrealized_gain=result.unrealized_gain,
        )


class WalletGainsResponse(BaseModel):
    """Response schema for GET /api/wallet/{address}."""

    success: bool = True
    data: list[GainResultResponse]


class ErrorResponse(BaseModel):
    """Error envelope shared by all failure responses."""

    success: bool = False
    message: str

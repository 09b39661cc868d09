"""Wallet gains API: GET /api/wallet/{address}."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from wallet_gains.api.deps import get_gains_calculator
from wallet_gains.api.schemas.wallet import ErrorResponse, GainResultResponse, WalletGainsResponse
from wallet_gains.core.address import is_plausible_address
from wallet_gains.core.exceptions import InvalidAddressError
from wallet_gains.services import GainsCalculator

router = APIRouter(prefix="/api/wallet", tags=["wallet"])


def _invalid_address() -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(message=InvalidAddressError.USER_MESSAGE).model_dump(),
    )


@router.get("", include_in_schema=False)
@router.get("/", include_in_schema=False)
async def get_wallet_gains_without_address():
    """A missing address is an invalid address."""
    return _invalid_address()


@router.get(
    "/{address}",
    response_model=WalletGainsResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_wallet_gains(
    address: str,
    calculator: GainsCalculator = Depends(get_gains_calculator),
):
    """
    Return unrealized gains for every reportable token in the wallet.

    Addresses shorter than 32 characters are rejected before any lookup.
    Deeper validation failures and upstream errors are mapped by the
    application exception handlers.
    """
    if not is_plausible_address(address):
        return _invalid_address()

    results = await calculator.calculate_gains(address)
    return WalletGainsResponse(data=[GainResultResponse.from_domain(r) for r in results])

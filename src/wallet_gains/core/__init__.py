"""Core utilities and shared functionality."""

from wallet_gains.core.address import (
    MIN_ADDRESS_LENGTH,
    WalletAddress,
    is_plausible_address,
    validate_wallet_address,
)
from wallet_gains.core.exceptions import (
    AppError,
    InvalidAddressError,
    SourceUnavailableError,
    EligibilitySignalError,
    CostBasisStoreError,
    HoldingsFetchError,
    WalletGainsError,
)

__all__ = [
    "MIN_ADDRESS_LENGTH",
    "WalletAddress",
    "is_plausible_address",
    "validate_wallet_address",
    "AppError",
    "InvalidAddressError",
    "SourceUnavailableError",
    "EligibilitySignalError",
    "CostBasisStoreError",
    "HoldingsFetchError",
    "WalletGainsError",
]

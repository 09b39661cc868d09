"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class WalletGainsError(AppError):
    """
    Raised when a whole gains calculation fails.

    `message` is safe to show to users; `reason` is the internal diagnostic
    and is only logged.
    """

    USER_MESSAGE = "An unexpected error occurred. Please try again later."

    def __init__(self, reason: str, message: str = USER_MESSAGE, code: str = "WALLET_GAINS_FAILED"):
        self.reason = reason
        super().__init__(message, code=code)


class InvalidAddressError(WalletGainsError):
    """Raised when a wallet address fails structural validation."""

    USER_MESSAGE = "Invalid wallet address"

    def __init__(self, raw: str = ""):
        self.raw = raw
        super().__init__(
            reason=f"Invalid wallet address: {raw!r}",
            message=self.USER_MESSAGE,
            code="INVALID_ADDRESS",
        )


class SourceUnavailableError(AppError):
    """Raised when a single price source cannot produce a price."""

    def __init__(self, source: str, reason: str):
        self.source = source
        super().__init__(f"{source} unavailable: {reason}", code="SOURCE_UNAVAILABLE")


class EligibilitySignalError(AppError):
    """Raised by an eligibility signal that could not be evaluated."""

    def __init__(self, signal: str, reason: str):
        self.signal = signal
        super().__init__(f"Signal {signal} failed: {reason}", code="SIGNAL_ERROR")


class CostBasisStoreError(AppError):
    """Raised when the persisted cost-basis store cannot be read or written."""

    def __init__(self, message: str):
        super().__init__(message, code="COST_BASIS_STORE_ERROR")


class HoldingsFetchError(AppError):
    """Raised when the chain holdings lookup fails."""

    def __init__(self, wallet: str, reason: str):
        self.wallet = wallet
        super().__init__(f"Holdings fetch failed for {wallet}: {reason}", code="HOLDINGS_FETCH_ERROR")

"""Solana wallet address validation."""

from dataclasses import dataclass

from solders.pubkey import Pubkey

from wallet_gains.core.exceptions import InvalidAddressError

# Shortest base58 rendering of a 32-byte public key.
MIN_ADDRESS_LENGTH = 32


@dataclass(frozen=True)
class WalletAddress:
    """A wallet address that has passed validation."""

    value: str

    def to_pubkey(self) -> Pubkey:
        return Pubkey.from_string(self.value)

    def __str__(self) -> str:
        return self.value


def is_plausible_address(raw: str | None) -> bool:
    """Cheap length check used before any lookup work."""
    return bool(raw) and len(raw.strip()) >= MIN_ADDRESS_LENGTH


def validate_wallet_address(raw: str | None) -> WalletAddress:
    """
    Validate a raw wallet identifier.

    Rejects empty input, input shorter than MIN_ADDRESS_LENGTH and anything
    solders cannot decode as a base58 public key.
    """
    if not is_plausible_address(raw):
        raise InvalidAddressError(raw or "")

    value = raw.strip()
    try:
        Pubkey.from_string(value)
    except ValueError as e:
        raise InvalidAddressError(value) from e

    return WalletAddress(value=value)

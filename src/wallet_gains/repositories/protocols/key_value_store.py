"""Key/value store protocol."""

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """
    Interface for a persisted string -> number mapping.

    Failures of the backing storage raise CostBasisStoreError.
    """

    def ensure_initialized(self) -> None:
        """Create the empty backing storage if it does not exist yet."""
        ...

    def get(self, key: str) -> Optional[float]:
        """Return the stored value, or None if the key is absent."""
        ...

    def put(self, key: str, value: float) -> None:
        """Insert or replace a value."""
        ...

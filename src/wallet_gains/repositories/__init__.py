"""Repository layer - data access abstractions and implementations."""

from wallet_gains.repositories.protocols import KeyValueStore

__all__ = [
    "KeyValueStore",
]

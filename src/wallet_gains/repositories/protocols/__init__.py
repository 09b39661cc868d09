"""Repository protocol definitions (interfaces)."""

from wallet_gains.repositories.protocols.key_value_store import KeyValueStore

__all__ = [
    "KeyValueStore",
]

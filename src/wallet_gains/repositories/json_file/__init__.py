"""Flat JSON file repository implementations."""

from wallet_gains.repositories.json_file.key_value_store import JsonFileKeyValueStore

__all__ = [
    "JsonFileKeyValueStore",
]

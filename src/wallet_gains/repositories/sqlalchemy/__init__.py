"""SQLAlchemy repository implementations."""

from wallet_gains.repositories.sqlalchemy.database import (
    create_engine_for_url,
    init_db,
    Base,
)
from wallet_gains.repositories.sqlalchemy.key_value_store import SqlAlchemyKeyValueStore

__all__ = [
    "create_engine_for_url",
    "init_db",
    "Base",
    "SqlAlchemyKeyValueStore",
]

"""SQLAlchemy implementation of KeyValueStore."""

import threading
from typing import Optional

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from wallet_gains.core.exceptions import CostBasisStoreError
from wallet_gains.repositories.sqlalchemy.database import init_db
from wallet_gains.repositories.sqlalchemy.orm_models import CostBasisORM


class SqlAlchemyKeyValueStore:
    """SQLAlchemy-backed key/value store; creates its table on first use."""

    def __init__(self, engine: Engine):
        self._engine = engine
        self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
        self._initialized = False
        self._init_lock = threading.Lock()

    def ensure_initialized(self) -> None:
        if self._initialized:
            return
        with self._init_lock:
            if self._initialized:
                return
            try:
                init_db(self._engine)
            except SQLAlchemyError as e:
                raise CostBasisStoreError(f"Cannot initialize cost basis table: {e}") from e
            self._initialized = True

    def get(self, key: str) -> Optional[float]:
        self.ensure_initialized()
        try:
            with self._session_factory() as db:
                orm_entry = db.get(CostBasisORM, key)
                return orm_entry.value if orm_entry else None
        except SQLAlchemyError as e:
            raise CostBasisStoreError(f"Cost basis lookup failed: {e}") from e

    def put(self, key: str, value: float) -> None:
        self.ensure_initialized()
        try:
            with self._session_factory() as db:
                orm_entry = db.get(CostBasisORM, key)
                if orm_entry:
                    orm_entry.value = value
                else:
                    db.add(CostBasisORM(key=key, value=value))
                db.commit()
        except SQLAlchemyError as e:
            raise CostBasisStoreError(f"Cost basis write failed: {e}") from e

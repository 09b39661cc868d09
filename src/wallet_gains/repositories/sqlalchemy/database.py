"""Database engine and schema management."""

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def create_engine_for_url(database_url: str) -> Engine:
    """Create an engine, applying SQLite-specific connect args."""
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_engine(database_url, connect_args=connect_args, echo=False)


def init_db(engine: Engine) -> None:
    """Initialize database tables."""
    from wallet_gains.repositories.sqlalchemy import orm_models  # noqa: F401

    Base.metadata.create_all(bind=engine)

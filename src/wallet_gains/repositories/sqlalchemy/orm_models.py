"""SQLAlchemy ORM model definitions."""

from sqlalchemy import Column, Float, String

from wallet_gains.repositories.sqlalchemy.database import Base


class CostBasisORM(Base):
    """SQLAlchemy model for a `wallet|mint` cost basis entry."""

    __tablename__ = "cost_basis"

    key = Column(String(128), primary_key=True)
    value = Column(Float, nullable=False, default=0.0)

"""SQLAlchemy models for profitshare database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Numeric,
    Boolean,
    Index,
    create_engine,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Transaction(Base):
    """Company transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    type = Column(String, nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)
    date = Column(DateTime, nullable=False)
    description = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        Index("ix_transactions_type", "type"),
        Index("ix_transactions_date", "date"),
    )


class Stakeholder(Base):
    """Stakeholder model."""

    __tablename__ = "stakeholders"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    payments = relationship("Payment", back_populates="stakeholder")


class Payment(Base):
    """Payment model."""

    __tablename__ = "payments"

    id = Column(Integer, primary_key=True)
    stakeholder_id = Column(Integer, ForeignKey("stakeholders.id"), nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)
    date = Column(DateTime, nullable=False)
    notes = Column(String, default="", nullable=False)
    month = Column(String, nullable=True)
    is_global_payment = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        Index("ix_payments_stakeholder_id", "stakeholder_id"),
        Index("ix_payments_month", "month"),
        Index("ix_payments_date", "date"),
    )

    # Relationships
    stakeholder = relationship("Stakeholder", back_populates="payments")


def create_db_engine(database_url: str) -> Engine:
    """Create a SQLAlchemy engine for a database URL."""
    return create_engine(database_url, echo=False)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory bound to an engine."""
    return sessionmaker(bind=engine)


def create_schema(engine: Engine) -> None:
    """Create any missing tables and indexes."""
    Base.metadata.create_all(engine)

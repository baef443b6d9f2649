"""SQLAlchemy models for givingcircle database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Date,
    Numeric,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Donation(Base):
    """Donation model."""

    __tablename__ = "donations"

    # Surrogate key keeps insertion order; `id` is the public identifier
    row_id = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(32), unique=True, nullable=False)
    user_id = Column(String, nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    organization_name = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    frequency = Column(String(16), nullable=False)
    category = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    # Entities are mapped to domain objects after commit, so keep their loaded state
    return sessionmaker(bind=engine, expire_on_commit=False)

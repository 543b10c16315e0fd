"""SQLAlchemy models for leaguebook storage."""

from datetime import datetime, UTC
from sqlalchemy import Column, String, Text, DateTime, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class StateBlob(Base):
    """Serialized application state stored under a key."""

    __tablename__ = "state_blobs"

    key = Column(String, primary_key=True)
    payload = Column(Text, nullable=False)
    saved_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)

"""SQLAlchemy models mirroring the JSON contact book."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, JSON, func

from .session import Base


class PersonRow(Base):
    """One serialized person; ``payload`` holds the record exactly as in the JSON file."""

    __tablename__ = "persons"

    position = Column(Integer, primary_key=True, autoincrement=False)
    type = Column(String(32), nullable=False)
    name = Column(String(255), nullable=True, index=True)
    payload = Column(JSON, nullable=False, default=dict)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

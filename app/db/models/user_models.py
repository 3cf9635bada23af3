# /app/db/models/user_models.py

"""
SQLAlchemy model for the `User` entity.

Users are created by a registration path outside this service. The backend
only reads them, to check that a generation's owner exists and to show the
owner alongside each history entry.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=True)
    name = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)

    # Deleting a user removes all of their generations.
    generations = relationship(
        "Generation",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

# /app/db/models/generation_models.py

from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Generation(Base):
    __tablename__ = "generations"

    id = Column(String, primary_key=True, index=True)
    prompt = Column(Text, nullable=False)
    language = Column(String, index=True, nullable=False)
    code = Column(Text, nullable=False)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=True)
    # Python-side default keeps sub-second precision for newest-first ordering.
    created_at = Column(DateTime(timezone=True), default=_utcnow, server_default=func.now(), index=True, nullable=False)

    user = relationship("User", back_populates="generations")

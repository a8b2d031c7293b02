import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    Integer,
    Text,
    DateTime,
    Uuid,
)
from .database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Feedback(Base):
    """SQLAlchemy ORM model for feedback records"""

    __tablename__ = 'feedbacks'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    text = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    def __repr__(self):
        return f"<Feedback(id={self.id}, rating={self.rating})>"

import uuid
from datetime import datetime

from sqlalchemy import Column, String, Text, Boolean, DateTime

from .base import Base


class Course(Base):
    __tablename__ = "courses"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    description = Column(Text)
    level = Column(String(32), nullable=False, default="Beginner")
    # Weak reference to another course id (no FK, may dangle)
    prerequisite_id = Column(String(36), nullable=True, index=True)
    is_published = Column(Boolean, default=False, nullable=False, index=True)
    is_remedial = Column(Boolean, default=False, nullable=False)
    skill = Column(String(128), nullable=True)
    created_at = Column(DateTime(timezone=False), default=datetime.utcnow, nullable=False)

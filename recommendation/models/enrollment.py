import uuid
from datetime import datetime

from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from .base import Base


class Enrollment(Base):
    __tablename__ = "enrollments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    student_id = Column(String(36), nullable=False, index=True)
    course_id = Column(String(36), ForeignKey("courses.id"), nullable=False)
    completed = Column(Boolean, default=False, nullable=False)
    enrolled_at = Column(DateTime(timezone=False), default=datetime.utcnow, nullable=False)

    course = relationship("Course", lazy="joined")

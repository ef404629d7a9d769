import uuid
from datetime import datetime

from sqlalchemy import Column, String, Float, DateTime

from .base import Base


class ChallengeResult(Base):
    __tablename__ = "challenge_results"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), nullable=False, index=True)
    score = Column(Float, nullable=False)  # 0-100
    skill = Column(String(128), nullable=False)
    taken_at = Column(DateTime(timezone=False), default=datetime.utcnow, nullable=False)

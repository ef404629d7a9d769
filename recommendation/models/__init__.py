# Export all recommendation models for easy imports
from .base import Base
from .course import Course
from .enrollment import Enrollment
from .challenge_result import ChallengeResult

__all__ = [
    "Base",
    "Course",
    "Enrollment",
    "ChallengeResult",
]

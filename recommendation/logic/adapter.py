"""
Data Adapter for Recommendation Engine

Reads from the production tables (enrollments, courses, challenge_results)
and transforms rows into the snapshot contracts the engine consumes.

This is a pure READ + TRANSFORM layer:
- NO rule logic
- NO deduplication
- NO DB writes
"""

from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import Course, Enrollment, ChallengeResult
from .contracts import CourseSnapshot, ChallengeResultSnapshot
from .constants import CourseLevel


def normalize_level(raw_level: Optional[str]) -> str:
    """
    Normalize stored level labels ("Beginner", " INTERMEDIATE ") to the
    lower-case values rules compare against.

    Unknown labels are lower-cased and passed through.
    """
    if not raw_level:
        return CourseLevel.BEGINNER.value
    return raw_level.strip().lower()


def transform_course(course: Course) -> CourseSnapshot:
    """Convert a Course row into a CourseSnapshot."""
    return CourseSnapshot(
        id=str(course.id),
        title=course.title,
        level=normalize_level(course.level),
        prerequisite=str(course.prerequisite_id) if course.prerequisite_id else None,
        is_published=bool(course.is_published),
        is_remedial=bool(course.is_remedial),
        skill=course.skill,
    )


def transform_challenge_result(result: ChallengeResult) -> ChallengeResultSnapshot:
    """Convert a ChallengeResult row into a ChallengeResultSnapshot."""
    return ChallengeResultSnapshot(
        user_id=str(result.user_id),
        score=float(result.score),
        skill=result.skill,
    )


def fetch_completed_courses(db: Session, learner_id: str) -> List[CourseSnapshot]:
    """
    Courses behind the learner's completed enrollments.

    Enrollments whose course row no longer exists are skipped.
    """
    stmt = (
        select(Enrollment)
        .where(Enrollment.student_id == str(learner_id), Enrollment.completed.is_(True))
        .order_by(Enrollment.enrolled_at, Enrollment.id)
    )
    enrollments = db.execute(stmt).scalars().all()
    return [transform_course(e.course) for e in enrollments if e.course is not None]


def fetch_published_courses(db: Session) -> List[CourseSnapshot]:
    """Full published catalog."""
    stmt = (
        select(Course)
        .where(Course.is_published.is_(True))
        .order_by(Course.created_at, Course.id)
    )
    return [transform_course(c) for c in db.execute(stmt).scalars().all()]


def fetch_challenge_results(db: Session, learner_id: str) -> List[ChallengeResultSnapshot]:
    """Every assessment result recorded for the learner."""
    stmt = (
        select(ChallengeResult)
        .where(ChallengeResult.user_id == str(learner_id))
        .order_by(ChallengeResult.taken_at, ChallengeResult.id)
    )
    return [transform_challenge_result(r) for r in db.execute(stmt).scalars().all()]


class SqlLearnerHistory:
    """
    LearnerHistorySource backed by a SQLAlchemy session.

    The session is owned by the caller; this class never commits.
    """

    def __init__(self, db: Session):
        self.db = db

    def fetch_completed_courses(self, learner_id: str) -> List[CourseSnapshot]:
        return fetch_completed_courses(self.db, learner_id)

    def fetch_published_courses(self) -> List[CourseSnapshot]:
        return fetch_published_courses(self.db)

    def fetch_challenge_results(self, learner_id: str) -> List[ChallengeResultSnapshot]:
        return fetch_challenge_results(self.db, learner_id)

"""
Data Contracts for the Course Recommendation Engine

Defines Pydantic models for the read-only snapshots the engine consumes
(courses, assessment results), the per-call RecommendationContext and the
recommendation records it produces.
These contracts are the API boundary for the engine.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, constr


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class CourseSnapshot(BaseModel):
    """
    Read-only view of a catalog course.

    `prerequisite` is a weak reference to another course id and may point
    at a course that is no longer in the catalog.
    """
    id: str
    title: str
    level: str = "beginner"
    prerequisite: Optional[str] = None
    is_published: bool = True
    is_remedial: bool = False
    skill: Optional[str] = None


class ChallengeResultSnapshot(BaseModel):
    """A single assessment result for a learner."""
    user_id: Optional[str] = None
    score: float = Field(ge=0.0, le=100.0)
    skill: str


class RecommendationContext(BaseModel):
    """
    Shared snapshot handed to every rule.
    Built fresh for each recommendation call and never persisted.
    """
    completed_courses: List[CourseSnapshot] = Field(default_factory=list)
    all_courses: List[CourseSnapshot] = Field(default_factory=list)
    quiz_results: List[ChallengeResultSnapshot] = Field(default_factory=list)
    remedial_courses: List[CourseSnapshot] = Field(default_factory=list)

    @property
    def has_history(self) -> bool:
        return bool(self.completed_courses)


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class Recommendation(BaseModel):
    """
    Single next-course suggestion.
    `course_id` is the identity key used for deduplication.
    """
    course_id: str = Field(alias="courseId")
    title: str
    reason: str

    class Config:
        populate_by_name = True


# Rules produce candidates with the same shape as the final records
RecommendationCandidate = Recommendation


# =============================================================================
# RESPONSE SHAPE
# =============================================================================

class RecommendationItemSchema(BaseModel):
    """Strict wire shape of one recommendation (non-empty strings, no coercion)."""
    courseId: constr(strict=True, min_length=1)
    title: constr(strict=True, min_length=1)
    reason: constr(strict=True, min_length=1)


class RecommendationPayload(BaseModel):
    """Shape every outgoing recommendation payload must satisfy."""
    recommendations: List[RecommendationItemSchema]


class RecommendationResponse(BaseModel):
    """Body returned by the next-courses endpoint."""
    status: str = "success"
    recommendations: List[RecommendationItemSchema] = Field(default_factory=list)

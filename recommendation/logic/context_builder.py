"""
Context Builder

Assembles the RecommendationContext from a learner history source.
Pure composition - the source does the reading, this module only shapes it.
"""

from typing import List, Optional, Protocol

from .contracts import (
    CourseSnapshot,
    ChallengeResultSnapshot,
    RecommendationContext,
)


class LearnerHistorySource(Protocol):
    """
    Read-only collaborator supplying a learner's history and the catalog.

    Implementations must not write. Any exception they raise propagates to
    the caller of the engine unchanged.
    """

    def fetch_completed_courses(self, learner_id: str) -> List[CourseSnapshot]:
        ...

    def fetch_published_courses(self) -> List[CourseSnapshot]:
        ...

    def fetch_challenge_results(self, learner_id: str) -> List[ChallengeResultSnapshot]:
        ...


def select_remedial_courses(catalog: List[CourseSnapshot]) -> List[CourseSnapshot]:
    """Catalog subset flagged as remediation material."""
    return [c for c in catalog if c.is_remedial]


def build_context(
    source: LearnerHistorySource,
    learner_id: str,
    completed_courses: Optional[List[CourseSnapshot]] = None
) -> RecommendationContext:
    """
    Build the shared context for one recommendation call.

    Args:
        source: Collaborator providing enrollments, catalog and assessments
        learner_id: Opaque learner identifier
        completed_courses: Already fetched completed courses, if the caller
            read them first (skips the second enrollment read)

    Returns:
        A fresh RecommendationContext
    """
    if completed_courses is None:
        completed_courses = source.fetch_completed_courses(learner_id)

    all_courses = source.fetch_published_courses()
    quiz_results = source.fetch_challenge_results(learner_id)

    return RecommendationContext(
        completed_courses=list(completed_courses),
        all_courses=list(all_courses),
        quiz_results=list(quiz_results),
        remedial_courses=select_remedial_courses(all_courses),
    )

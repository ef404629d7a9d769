"""
Recommendation Rules

Independent, pure decision functions. Each rule maps the shared
RecommendationContext to zero or more RecommendationCandidate objects.
Rules never reorder, deduplicate or filter each other's output; merging is
done by the engine.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from .contracts import RecommendationContext, RecommendationCandidate
from .constants import (
    RuleName,
    CourseLevel,
    WEAK_SCORE_THRESHOLD,
    BEGINNER_RATIO_THRESHOLD,
    SEQUENCE_REASON,
    REMEDIAL_REASON,
    INTERMEDIATE_PATH_REASON,
)


class Rule(ABC):
    """Base capability for a recommendation rule."""

    name: str = ""

    @abstractmethod
    def apply(self, context: RecommendationContext) -> List[RecommendationCandidate]:
        """Return candidates for the given context. Must not mutate it."""

    def __repr__(self) -> str:
        return f"<Rule {self.name}>"


class NextCourseSequenceRule(Rule):
    """
    Suggest courses unlocked by something the learner already finished.

    Every catalog course whose prerequisite is a completed course yields one
    candidate. A course unlocked by two completed courses appears twice;
    the engine keeps the later one.
    """

    name = RuleName.NEXT_COURSE_SEQUENCE.value

    def apply(self, context: RecommendationContext) -> List[RecommendationCandidate]:
        candidates: List[RecommendationCandidate] = []

        for completed in context.completed_courses:
            for course in context.all_courses:
                # Dangling prerequisites never equal a completed id
                if course.prerequisite != completed.id:
                    continue
                candidates.append(RecommendationCandidate(
                    course_id=course.id,
                    title=course.title,
                    reason=SEQUENCE_REASON.format(title=completed.title),
                ))

        return candidates


class LowQuizScoreRemedialRule(Rule):
    """Point weak assessment areas at the matching remedial course."""

    name = RuleName.LOW_QUIZ_SCORE_REMEDIAL.value

    def apply(self, context: RecommendationContext) -> List[RecommendationCandidate]:
        weak_areas = [q for q in context.quiz_results if q.score < WEAK_SCORE_THRESHOLD]

        candidates: List[RecommendationCandidate] = []
        for result in weak_areas:
            remedial = next(
                (c for c in context.remedial_courses if c.skill == result.skill),
                None,
            )
            if remedial is None:
                continue
            candidates.append(RecommendationCandidate(
                course_id=remedial.id,
                title=remedial.title,
                reason=REMEDIAL_REASON.format(skill=result.skill),
            ))

        return candidates


class BeginnerToIntermediateRule(Rule):
    """
    Move mostly-beginner learners onto the intermediate path.

    Fires when at least BEGINNER_RATIO_THRESHOLD of the completed courses are
    beginner level. An empty history yields nothing.
    """

    name = RuleName.BEGINNER_TO_INTERMEDIATE.value

    def apply(self, context: RecommendationContext) -> List[RecommendationCandidate]:
        completed = context.completed_courses
        if not completed:
            return []

        beginner_count = sum(1 for c in completed if c.level == CourseLevel.BEGINNER.value)
        if beginner_count / len(completed) < BEGINNER_RATIO_THRESHOLD:
            return []

        return [
            RecommendationCandidate(
                course_id=course.id,
                title=course.title,
                reason=INTERMEDIATE_PATH_REASON,
            )
            for course in context.all_courses
            if course.level == CourseLevel.INTERMEDIATE.value
        ]


# Fixed evaluation order; later rules win on duplicate course ids
DEFAULT_RULES: Sequence[Rule] = (
    NextCourseSequenceRule(),
    LowQuizScoreRemedialRule(),
    BeginnerToIntermediateRule(),
)

"""
Recommendation Engine

Main orchestrator that runs the rule set against a learner's context.
This is the primary entry point for generating course recommendations.
"""

from typing import Dict, Iterable, List, Optional, Sequence

from .contracts import Recommendation, RecommendationCandidate, RecommendationContext
from .context_builder import LearnerHistorySource, build_context
from .rules import Rule, DEFAULT_RULES
from .constants import ENGINE_VERSION


def merge_candidates(candidates: Iterable[RecommendationCandidate]) -> List[Recommendation]:
    """
    Collapse candidates by course id.

    A later candidate replaces an earlier one entirely, but the course keeps
    the position of its first occurrence.
    """
    unique: Dict[str, RecommendationCandidate] = {}
    for candidate in candidates:
        unique[candidate.course_id] = candidate
    return list(unique.values())


class RecommendationEngine:
    """
    Runs an ordered rule set over a learner's history.

    Pipeline flow:
    1. Completed courses - Short-circuit to [] when there are none
    2. Context - Catalog, assessment results, remedial subset
    3. Rules - Evaluated in order, outputs concatenated
    4. Merge - Deduplicate by course id (last write wins)

    The engine keeps no state between calls.
    """

    def __init__(
        self,
        source: LearnerHistorySource,
        rules: Optional[Sequence[Rule]] = None
    ):
        """
        Args:
            source: Read-only collaborator for enrollments, catalog, assessments
            rules: Ordered rule set. Defaults to DEFAULT_RULES.
        """
        self.source = source
        self.rules: Sequence[Rule] = tuple(DEFAULT_RULES if rules is None else rules)
        self.version = ENGINE_VERSION

    def recommend(self, learner_id: str) -> List[Recommendation]:
        """
        Generate next-course recommendations for a learner.

        Args:
            learner_id: Opaque learner identifier

        Returns:
            Deduplicated recommendations in first-occurrence order
        """
        completed = self.source.fetch_completed_courses(learner_id)
        if not completed:
            return []

        context = build_context(self.source, learner_id, completed_courses=completed)
        return self.apply_rules(context)

    def apply_rules(self, context: RecommendationContext) -> List[Recommendation]:
        """Evaluate every rule against an already built context and merge."""
        if not context.has_history:
            return []

        candidates: List[RecommendationCandidate] = []
        for rule in self.rules:
            candidates.extend(rule.apply(context))

        return merge_candidates(candidates)


# Convenience function for simple usage
def get_recommendations(
    source: LearnerHistorySource,
    learner_id: str
) -> List[Recommendation]:
    """
    Convenience function to get recommendations with the default rule set.
    """
    engine = RecommendationEngine(source)
    return engine.recommend(learner_id)

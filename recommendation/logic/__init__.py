"""
Recommendation Logic Module

Provides the deterministic rule engine for next-course recommendations.
"""

from .contracts import (
    CourseSnapshot,
    ChallengeResultSnapshot,
    RecommendationContext,
    Recommendation,
    RecommendationCandidate,
    RecommendationPayload,
    RecommendationResponse,
)
from .context_builder import LearnerHistorySource, build_context
from .engine import RecommendationEngine, get_recommendations, merge_candidates
from .rules import (
    Rule,
    NextCourseSequenceRule,
    LowQuizScoreRemedialRule,
    BeginnerToIntermediateRule,
    DEFAULT_RULES,
)
from .output_assembler import assemble_output, validate_response, ResponseShapeError
from .constants import CourseLevel, RuleName

__all__ = [
    # Main engine
    "RecommendationEngine",
    "get_recommendations",
    "merge_candidates",
    "build_context",
    "LearnerHistorySource",

    # Rules
    "Rule",
    "NextCourseSequenceRule",
    "LowQuizScoreRemedialRule",
    "BeginnerToIntermediateRule",
    "DEFAULT_RULES",

    # Contracts
    "CourseSnapshot",
    "ChallengeResultSnapshot",
    "RecommendationContext",
    "Recommendation",
    "RecommendationCandidate",
    "RecommendationPayload",
    "RecommendationResponse",

    # Validation
    "assemble_output",
    "validate_response",
    "ResponseShapeError",

    # Enums
    "CourseLevel",
    "RuleName",
]

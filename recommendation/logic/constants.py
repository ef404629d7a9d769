"""
Recommendation Engine Constants

Defines rule names, course levels, thresholds and reason templates used by the
course recommendation rules.
All values are deterministic with no AI/ML components.
"""

from enum import Enum

ENGINE_VERSION = "1.0.0"


# =============================================================================
# COURSE LEVELS
# =============================================================================

class CourseLevel(str, Enum):
    """Catalog difficulty levels (stored lower-case in snapshots)."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


# =============================================================================
# RULE NAMES
# =============================================================================

class RuleName(str, Enum):
    """Identifiers of the shipped rules, in evaluation order."""
    NEXT_COURSE_SEQUENCE = "NEXT_COURSE_SEQUENCE"
    LOW_QUIZ_SCORE_REMEDIAL = "LOW_QUIZ_SCORE_REMEDIAL"
    BEGINNER_TO_INTERMEDIATE = "BEGINNER_TO_INTERMEDIATE"


# =============================================================================
# THRESHOLDS
# =============================================================================

# Assessment scores strictly below this are treated as weak areas
WEAK_SCORE_THRESHOLD = 50

# Share of beginner courses (over all completed) that unlocks the intermediate path
BEGINNER_RATIO_THRESHOLD = 0.8


# =============================================================================
# REASON TEMPLATES
# =============================================================================

SEQUENCE_REASON = "Based on your completion of {title}"
REMEDIAL_REASON = "Recommended to strengthen your understanding of {skill}"
INTERMEDIATE_PATH_REASON = "You are ready to move to an intermediate learning path"

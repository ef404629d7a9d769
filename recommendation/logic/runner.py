"""
Engine Runner

Orchestrates the recommendation pipeline for one request:
1. Accepts a learner id and a DB session
2. Wraps the session in the SQL adapter
3. Runs the recommendation engine
4. Assembles and validates the response

This is a pure orchestration layer - NO rule logic, NO raw DB queries.
Logging lives here; the engine itself stays silent.
"""

import logging
import time
from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from .adapter import SqlLearnerHistory
from .contracts import Recommendation, RecommendationResponse
from .engine import RecommendationEngine
from .output_assembler import assemble_output
from .rules import Rule

logger = logging.getLogger(__name__)


def run_recommendations(
    db: Session,
    learner_id: str,
    rules: Optional[Sequence[Rule]] = None
) -> List[Recommendation]:
    """
    Main entry point: run the full recommendation pipeline.

    Args:
        db: Database session (read-only use)
        learner_id: Learner identity taken from the verified token
        rules: Optional rule set override

    Returns:
        Deduplicated recommendations in first-occurrence order

    Collaborator errors (e.g. SQLAlchemyError) are not caught here.
    """
    logger.info(f"🚀 Starting recommendation pipeline for learner: {learner_id}")
    start_time = time.perf_counter()

    engine = RecommendationEngine(SqlLearnerHistory(db), rules=rules)
    recommendations = engine.recommend(learner_id)

    processing_time = (time.perf_counter() - start_time) * 1000

    if not recommendations:
        logger.info(f"📭 No recommendations for learner {learner_id} ({processing_time:.2f}ms)")
    else:
        logger.info(
            f"✨ Recommendation pipeline complete: {len(recommendations)} courses "
            f"({processing_time:.2f}ms)"
        )

    return recommendations


def run_recommendation_response(
    db: Session,
    learner_id: str,
    rules: Optional[Sequence[Rule]] = None
) -> RecommendationResponse:
    """
    Run the pipeline and wrap the result in the validated response contract.

    Raises:
        ResponseShapeError: if the assembled output fails validation
    """
    recommendations = run_recommendations(db, learner_id, rules=rules)
    return assemble_output(recommendations)

"""
Recommendation API Routes

Exposes the course recommendation engine via REST API.
Single endpoint: GET /api/recommendation/next-courses
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from db import get_db
from utils.auth_utils import auth_learner
from .logic.constants import ENGINE_VERSION
from .logic.output_assembler import ResponseShapeError
from .logic.runner import run_recommendation_response


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/recommendation", tags=["recommendation"])


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.get(
    "/next-courses",
    summary="Get recommended next courses",
    responses={
        401: {"description": "Unauthorized"},
        500: {"description": "Server error"},
    },
)
def get_next_courses(
    learner_id: str = Depends(auth_learner),
    db: Session = Depends(get_db)
) -> Dict[str, Any]:
    """
    Recommend the next courses for the authenticated learner.

    **Response:**
    - `status`: always "success" on 200
    - `recommendations`: list of `{courseId, title, reason}`, deduplicated,
      in the order the rules first suggested each course
    """
    try:
        response = run_recommendation_response(db, learner_id)
    except HTTPException:
        raise
    except ResponseShapeError as e:
        logger.error(f"Recommendation output failed validation: {e}")
        return JSONResponse(status_code=500, content={"message": str(e)})
    except Exception:
        logger.exception(f"Recommendation pipeline failed for learner {learner_id}")
        return JSONResponse(
            status_code=500,
            content={"message": "Failed to load recommendations"}
        )

    return response.model_dump()


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Recommendation engine health check")
def health_check():
    """Check if recommendation engine is operational."""
    return {"status": "ok", "engine": "recommendation", "version": ENGINE_VERSION}

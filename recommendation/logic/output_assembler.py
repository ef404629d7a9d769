"""
Output Assembler

Transforms engine output into the RecommendationResponse contract and
validates payloads against the declared wire shape before they leave the
service.
"""

from typing import Any, Dict, List, Mapping

from pydantic import ValidationError

from .contracts import (
    Recommendation,
    RecommendationPayload,
    RecommendationResponse,
)


class ResponseShapeError(ValueError):
    """Outgoing payload does not match the declared recommendation shape."""


def serialize_recommendations(recommendations: List[Recommendation]) -> List[Dict[str, Any]]:
    """Convert recommendations to JSON-ready dicts using wire field names."""
    return [rec.model_dump(by_alias=True) for rec in recommendations]


def validate_response(payload: Mapping[str, Any]) -> RecommendationPayload:
    """
    Validate a raw payload of the form {"recommendations": [...]}.

    Raises:
        ResponseShapeError: on any missing key, wrong type or empty string
    """
    try:
        return RecommendationPayload.model_validate(payload)
    except ValidationError as e:
        raise ResponseShapeError(str(e)) from e


def assemble_output(recommendations: List[Recommendation]) -> RecommendationResponse:
    """
    Build the success response body for a list of recommendations.

    Args:
        recommendations: Engine output, already deduplicated

    Returns:
        RecommendationResponse with status "success"

    Raises:
        ResponseShapeError: if the engine produced a malformed record
    """
    payload = validate_response({"recommendations": serialize_recommendations(recommendations)})
    return RecommendationResponse(status="success", recommendations=payload.recommendations)

"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from compounding.core.formatting import summary_labels
from compounding.core.projection import ProjectionInputs, project_compound_growth
from compounding.schemas.projection import PingResponse, ProjectionResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected projection inputs: %d error(s)", exc.error_count())
    detail = exc.errors(include_url=False, include_context=False, include_input=False)
    return jsonify({"detail": detail}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong")
    return jsonify(response.model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Year-by-year compounding projection for the chart and summary cards."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False) or {}
    inputs = ProjectionInputs.model_validate(raw_payload)
    logger.info(
        "projection: %d years, %s%%, frequency %d",
        inputs.years,
        inputs.annualRatePercent,
        inputs.compoundingFrequency.value,
    )

    result = project_compound_growth(inputs)
    response = ProjectionResponse.model_validate(
        {
            **result.model_dump(mode="json"),
            "display": summary_labels(result.summary),
        }
    )
    return jsonify(response.model_dump())

"""Required-field checks run by the web layer before any prompt is built."""

from typing import Dict

from scholarship_journey.errors import ValidationError
from scholarship_journey.models import (
    DEGREE_LEVELS,
    LIMIT_MAXIMUMS,
    CVAnalysisRequest,
    DocumentRequest,
    ScholarshipSearchRequest,
)

DOCUMENT_REQUIRED_FIELDS = (
    "name",
    "degree",
    "field",
    "country",
    "previous_education",
    "motivation",
    "reason_for_choice",
    "career_goals",
    "strengths",
    "experience",
)


def _missing(request, fields) -> Dict[str, str]:
    return {
        name: "Required"
        for name in fields
        if not str(getattr(request, name) or "").strip()
    }


def validate_document_request(request: DocumentRequest) -> None:
    errors = _missing(request, DOCUMENT_REQUIRED_FIELDS)

    maximum = LIMIT_MAXIMUMS[request.limit_type]
    if not 1 <= request.min_limit <= maximum:
        errors["min_limit"] = f"Must be between 1 and {maximum} {request.limit_type}"
    if not 1 <= request.max_limit <= maximum:
        errors["max_limit"] = f"Must be between 1 and {maximum} {request.limit_type}"
    elif request.max_limit < request.min_limit:
        errors["max_limit"] = "Must not be less than the minimum"

    if errors:
        raise ValidationError(errors)


def validate_cv_request(request: CVAnalysisRequest) -> None:
    if not request.content.strip():
        raise ValidationError({"content": "Please enter your CV content first"})


def validate_scholarship_request(request: ScholarshipSearchRequest) -> None:
    errors = _missing(request, ("degree_level", "country"))
    if "degree_level" not in errors and request.degree_level not in DEGREE_LEVELS:
        errors["degree_level"] = f"Must be one of: {', '.join(DEGREE_LEVELS)}"
    if errors:
        raise ValidationError(errors)

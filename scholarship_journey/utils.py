import json
import logging
from typing import Any, List

from scholarship_journey.errors import ExtractionFailure
from scholarship_journey.models import (
    CVAnalysisResult,
    CVFeedback,
    ExtractionStatus,
    ScholarshipEntry,
    ScholarshipSearchResult,
)

logger = logging.getLogger(__name__)

CV_FALLBACK = CVFeedback(
    issues=["The CV content could not be properly analyzed. Please check the formatting."],
    suggestions=["Ensure your CV has clear sections for Work Experience, Education, and Skills."],
)

NO_SCHOLARSHIPS_MESSAGE = "No valid scholarships found. Please try different criteria."

SCHOLARSHIP_FIELDS = ("title", "degree", "country", "description", "link", "financialCoverage", "deadline")


def extract_json_from_llm_response(response_text: str) -> dict:
    """
    Parse the JSON object embedded in a model response.

    Takes everything from the first '{' to the last '}' inclusive, so prose
    and code fences around the object are tolerated. Nested objects that are
    followed by a second object in the same reply are not separated.
    """
    if not isinstance(response_text, str):
        raise ExtractionFailure("Response is not text")

    start = response_text.find("{")
    end = response_text.rfind("}")
    if start == -1 or end == -1 or end < start:
        raise ExtractionFailure("Could not extract JSON from response")

    try:
        data = json.loads(response_text[start:end + 1])
    except json.JSONDecodeError as e:
        raise ExtractionFailure(f"JSON parsing error at position {e.pos}: {e.msg}") from e
    except RecursionError as e:
        raise ExtractionFailure("JSON nesting is too deep to parse") from e

    if not isinstance(data, dict):
        raise ExtractionFailure(f"Expected a JSON object, got {type(data).__name__}")
    return data


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    items = []
    for item in value:
        if isinstance(item, bool) or item is None:
            continue
        if isinstance(item, (int, float)):
            item = str(item)
        if isinstance(item, str) and item.strip():
            items.append(item)
    return items


def _text(value: Any) -> str:
    # false, 0 and nested values count as empty
    if not value or isinstance(value, (bool, dict, list)):
        return ""
    return str(value).strip()


def extract_cv_feedback(response_text: str) -> CVAnalysisResult:
    """Never raises: unreadable responses degrade to the fixed CV fallback"""
    try:
        data = extract_json_from_llm_response(response_text)
    except ExtractionFailure as e:
        logger.warning("CV analysis fell back to placeholder feedback: %s", e)
        return CVAnalysisResult(
            status=ExtractionStatus.FALLBACK,
            feedback=CV_FALLBACK.model_copy(deep=True),
            reason=str(e),
        )

    feedback = CVFeedback(
        issues=_string_list(data.get("issues")),
        suggestions=_string_list(data.get("suggestions")),
    )
    return CVAnalysisResult(status=ExtractionStatus.OK, feedback=feedback)


def extract_scholarships(response_text: str) -> ScholarshipSearchResult:
    """
    Parse and filter the scholarship list.

    Entries without a title or description are dropped. A parse failure is
    reported as FALLBACK, an empty list after filtering as NO_RESULTS.
    """
    try:
        data = extract_json_from_llm_response(response_text)
    except ExtractionFailure as e:
        logger.warning("Scholarship response could not be parsed: %s", e)
        return ScholarshipSearchResult(status=ExtractionStatus.FALLBACK, reason=str(e))

    raw_entries = data.get("scholarships")
    if not isinstance(raw_entries, list):
        logger.warning("Scholarship response has no 'scholarships' list")
        return ScholarshipSearchResult(
            status=ExtractionStatus.FALLBACK,
            reason="Invalid scholarship data format",
        )

    scholarships = []
    for raw in raw_entries:
        if not isinstance(raw, dict):
            continue
        if not isinstance(raw.get("title"), str) or not isinstance(raw.get("description"), str):
            continue
        fields = {key: _text(raw.get(key)) for key in SCHOLARSHIP_FIELDS}
        if not fields["title"] or not fields["description"]:
            continue
        scholarships.append(
            ScholarshipEntry(**{key: value or None for key, value in fields.items()})
        )

    logger.info("Kept %d of %d scholarship entries", len(scholarships), len(raw_entries))

    if not scholarships:
        return ScholarshipSearchResult(
            status=ExtractionStatus.NO_RESULTS,
            reason=NO_SCHOLARSHIPS_MESSAGE,
        )
    return ScholarshipSearchResult(status=ExtractionStatus.OK, scholarships=scholarships)

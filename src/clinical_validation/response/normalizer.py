# ============================================================================
# src/clinical_validation/response/normalizer.py
# ============================================================================
"""
Response Field Normalization and Validation

Field names are looked up in a fixed alias table after lowercasing and
dropping "_", "-" and spaces, so `compliance_score`, `Compliance Score` and
`score` all land on complianceScore. Unknown keys pass through unchanged.
When a response carries both an alias and the canonical key, the canonical
key wins.
"""

import re
import logging
from typing import Any, Dict, List, Optional

from ..models import CodeSuggestion, ValidationStatus
from ..utils.exceptions import InvalidStatusError, MissingFieldsError, ResponseValidationError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "validationStatus",
    "complianceScore",
    "feedback",
    "suggestedICD10Codes",
    "suggestedCPTCodes",
)

MIN_COMPLIANCE_SCORE = 0
MAX_COMPLIANCE_SCORE = 9

# Compacted key -> canonical field
FIELD_ALIASES = {
    # validationStatus
    "validationstatus": "validationStatus",
    "status": "validationStatus",
    "validationresult": "validationStatus",
    "validation": "validationStatus",

    # complianceScore
    "compliancescore": "complianceScore",
    "score": "complianceScore",
    "compliance": "complianceScore",
    "appropriatenessscore": "complianceScore",

    # feedback
    "feedback": "feedback",
    "feedbacktext": "feedback",
    "feedbackmessage": "feedback",
    "physicianfeedback": "feedback",

    # suggestedICD10Codes
    "suggestedicd10codes": "suggestedICD10Codes",
    "suggestedicd10": "suggestedICD10Codes",
    "suggestedicdcodes": "suggestedICD10Codes",
    "icd10codes": "suggestedICD10Codes",
    "icdcodes": "suggestedICD10Codes",
    "icd10": "suggestedICD10Codes",
    "diagnosiscodes": "suggestedICD10Codes",
    "suggesteddiagnosiscodes": "suggestedICD10Codes",

    # suggestedCPTCodes
    "suggestedcptcodes": "suggestedCPTCodes",
    "suggestedcpt": "suggestedCPTCodes",
    "cptcodes": "suggestedCPTCodes",
    "cpt": "suggestedCPTCodes",
    "procedurecodes": "suggestedCPTCodes",
    "suggestedprocedurecodes": "suggestedCPTCodes",

    # internalReasoning
    "internalreasoning": "internalReasoning",
    "reasoning": "internalReasoning",
    "rationale": "internalReasoning",
}

_STATUS_VALUES = {status.value: status for status in ValidationStatus}

_CODE_KEYS = ("code", "icd10_code", "cpt_code", "icd10", "cpt", "value")
_DESCRIPTION_KEYS = ("description", "desc", "name", "display")
_CODE_WITH_DESCRIPTION = re.compile(r'^\s*([A-Za-z0-9.]+)\s*(?:-|:|–)\s*(.+?)\s*$')


def _compact(key: str) -> str:
    return re.sub(r'[\s_\-]', '', key).lower()


def normalize_response_fields(response: Dict[str, Any]) -> Dict[str, Any]:
    """Map known field-name variants onto canonical names."""
    normalized: Dict[str, Any] = {}
    for key, value in response.items():
        canonical = FIELD_ALIASES.get(_compact(key)) if isinstance(key, str) else None
        if canonical is None:
            normalized[key] = value
        elif key == canonical or canonical not in normalized:
            normalized[canonical] = value
    return normalized


def _is_present(field_name: str, value: Any) -> bool:
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if field_name == "complianceScore":
        # 0 is a legitimate score
        return True
    if isinstance(value, (int, float)):
        return value != 0
    # Lists and objects count as present even when empty
    return True


def validate_required_fields(response: Dict[str, Any]) -> None:
    """
    Raises:
        MissingFieldsError: listing every required field that is absent or empty
    """
    missing = [name for name in REQUIRED_FIELDS if not _is_present(name, response.get(name))]
    if missing:
        raise MissingFieldsError(missing)


def validate_validation_status(status: Any) -> ValidationStatus:
    """
    Case-insensitive status lookup. "Needs Clarification" and
    "needs-clarification" are accepted.

    Raises:
        InvalidStatusError: anything that is not one of the four statuses
    """
    if isinstance(status, ValidationStatus):
        return status
    if not isinstance(status, str):
        raise InvalidStatusError(status)

    key = re.sub(r'[\s\-]+', '_', status.strip().lower())
    if key not in _STATUS_VALUES:
        raise InvalidStatusError(status)
    return _STATUS_VALUES[key]


def coerce_compliance_score(score: Any) -> int:
    """
    Integer score clamped to 0-9.

    Raises:
        ResponseValidationError: score is not numeric
    """
    if isinstance(score, bool):
        raise ResponseValidationError(f"Invalid complianceScore: {score!r}")

    try:
        value = int(round(float(str(score).strip()))) if not isinstance(score, int) else score
    except (TypeError, ValueError) as e:
        raise ResponseValidationError(f"Invalid complianceScore: {score!r}") from e

    return max(MIN_COMPLIANCE_SCORE, min(MAX_COMPLIANCE_SCORE, value))


def _first_value(item: Dict[str, Any], keys) -> Optional[str]:
    lowered = {str(k).lower(): v for k, v in item.items()}
    for key in keys:
        value = lowered.get(key)
        if value is not None and not isinstance(value, (dict, list)):
            return str(value).strip()
    return None


def _from_string(text: str) -> CodeSuggestion:
    match = _CODE_WITH_DESCRIPTION.match(text)
    if match:
        return CodeSuggestion(code=match.group(1), description=match.group(2))
    return CodeSuggestion(code=text.strip())


def _suggestion(item: Any) -> Optional[CodeSuggestion]:
    if isinstance(item, dict):
        code = _first_value(item, _CODE_KEYS)
        if not code:
            return None
        return CodeSuggestion(code=code, description=_first_value(item, _DESCRIPTION_KEYS) or "")
    if isinstance(item, str):
        if not item.strip():
            return None
        return _from_string(item)
    if isinstance(item, int) and not isinstance(item, bool):
        return CodeSuggestion(code=str(item))
    return None


def normalize_code_array(codes: Any) -> List[CodeSuggestion]:
    """
    Coerce a model-supplied code list to CodeSuggestion objects.

    Accepts a list of objects, a list of strings, or a comma-separated
    string. Anything else yields []. Blank codes are dropped, and repeated
    codes keep their first occurrence.
    """
    if isinstance(codes, str):
        items: List[Any] = codes.split(",")
    elif isinstance(codes, (list, tuple)):
        items = list(codes)
    else:
        if codes is not None:
            logger.debug(f"Ignoring code list of type {type(codes).__name__}")
        return []

    result: List[CodeSuggestion] = []
    seen = set()
    for item in items:
        suggestion = _suggestion(item)
        if suggestion is None or not suggestion.code:
            continue
        key = suggestion.code.upper()
        if key in seen:
            continue
        seen.add(key)
        result.append(suggestion)
    return result

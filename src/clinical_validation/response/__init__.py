# ============================================================================
# src/clinical_validation/response/__init__.py
# ============================================================================
"""
Model output processing: JSON extraction, field normalization,
validation and partial-information fallback.
"""

from .json_extraction import extract_json_candidate, find_json_object_span, parse_json_object
from .normalizer import (
    FIELD_ALIASES,
    REQUIRED_FIELDS,
    normalize_response_fields,
    validate_required_fields,
    validate_validation_status,
    coerce_compliance_score,
    normalize_code_array,
)
from .partial_extractor import PartialInformation, extract_partial_information
from .processor import process_llm_response, build_fallback_result, DEFAULT_FALLBACK_FEEDBACK

__all__ = [
    "extract_json_candidate",
    "find_json_object_span",
    "parse_json_object",
    "FIELD_ALIASES",
    "REQUIRED_FIELDS",
    "normalize_response_fields",
    "validate_required_fields",
    "validate_validation_status",
    "coerce_compliance_score",
    "normalize_code_array",
    "PartialInformation",
    "extract_partial_information",
    "process_llm_response",
    "build_fallback_result",
    "DEFAULT_FALLBACK_FEEDBACK",
]

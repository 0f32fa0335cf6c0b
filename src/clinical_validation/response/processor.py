# ============================================================================
# src/clinical_validation/response/processor.py
# ============================================================================
"""
LLM Response Processor

Turns raw model output into a ValidationResult. Never raises: any parse or
validation failure is answered with a needs_clarification result built
from whatever partial information can be scraped from the text.

Model output can contain PHI, so only error types and sizes are logged.
"""

import logging
from typing import Any, Optional, Sequence

from ..models import ValidationResult, ValidationStatus
from ..utils.exceptions import ResponseParseError
from .json_extraction import parse_json_object
from .normalizer import (
    coerce_compliance_score,
    normalize_code_array,
    normalize_response_fields,
    validate_required_fields,
    validate_validation_status,
)
from .partial_extractor import extract_partial_information

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_FEEDBACK = (
    "Unable to process the validation request. "
    "Please try again or contact support if the issue persists."
)
NO_INTERNAL_REASONING = "No internal reasoning provided"
EXCERPT_CHARS = 200


def _parse(content: Any) -> ValidationResult:
    if not isinstance(content, str):
        raise ResponseParseError(f"LLM response content is {type(content).__name__}, not text")

    response = normalize_response_fields(parse_json_object(content))
    validate_required_fields(response)

    status = validate_validation_status(response["validationStatus"])
    score = coerce_compliance_score(response["complianceScore"])

    reasoning = response.get("internalReasoning")
    if not isinstance(reasoning, str) or not reasoning.strip():
        reasoning = NO_INTERNAL_REASONING

    return ValidationResult(
        status=status,
        compliance_score=score,
        feedback=str(response["feedback"]).strip(),
        suggested_diagnosis_codes=normalize_code_array(response["suggestedICD10Codes"]),
        suggested_procedure_codes=normalize_code_array(response["suggestedCPTCodes"]),
        internal_reasoning=reasoning,
    )


def build_fallback_result(
    content: Any,
    error: BaseException,
    procedure_prefixes: Optional[Sequence[str]] = None
) -> ValidationResult:
    """needs_clarification result from partially extracted information."""
    text = content if isinstance(content, str) else ""
    info = extract_partial_information(text, procedure_prefixes)

    return ValidationResult(
        status=ValidationStatus.NEEDS_CLARIFICATION,
        compliance_score=info.compliance_score or 0,
        feedback=info.feedback or DEFAULT_FALLBACK_FEEDBACK,
        suggested_diagnosis_codes=info.diagnosis_codes,
        suggested_procedure_codes=info.procedure_codes,
        internal_reasoning=(
            f"Error processing LLM response: {error}. "
            f"Content excerpt: {text[:EXCERPT_CHARS]}"
        ),
    )


def process_llm_response(
    content: Any,
    procedure_prefixes: Optional[Sequence[str]] = None
) -> ValidationResult:
    """
    Parse, normalize and validate model output.

    Args:
        content: Raw model output
        procedure_prefixes: Leading digits used when scraping CPT codes on
            the fallback path (default from FALLBACK_PROCEDURE_CODE_PREFIXES)

    Returns:
        ValidationResult (needs_clarification when the output is unusable)
    """
    try:
        result = _parse(content)
    except Exception as e:
        size = len(content) if isinstance(content, str) else 0
        logger.warning(
            f"LLM response could not be processed ({type(e).__name__}, {size} chars); "
            "falling back to partial extraction"
        )
        return build_fallback_result(content, e, procedure_prefixes)

    logger.debug(
        f"Processed LLM response: status={result.status.value}, score={result.compliance_score}, "
        f"{len(result.suggested_diagnosis_codes)} ICD-10, {len(result.suggested_procedure_codes)} CPT"
    )
    return result

# ============================================================================
# src/clinical_validation/emr/parser.py
# ============================================================================
"""
EMR Summary Parser

Entry point for pasted EMR/insurance text:
1. Decode HTML entities, normalize whitespace, split into lines
2. Split lines into sections (patient, insurance, provider, ...)
3. Patient fields from the patient and default sections
4. Insurance fields from the insurance section, or the whole text
   when there is no insurance header

Never raises. Anything that cannot be extracted is left unset.
"""

import logging

from ..models import EmrExtractionResult
from .section_parser import normalize_text, split_sections
from .patient_extractor import extract_patient_info
from .insurance_extractor import extract_insurance_info

logger = logging.getLogger(__name__)


def extract_emr_info(pasted_text: str) -> EmrExtractionResult:
    """
    Extract patient contact and insurance details from pasted EMR text.

    Args:
        pasted_text: Free text copied from an EMR or insurance card summary

    Returns:
        EmrExtractionResult with possibly sparse patient/insurance info
    """
    result = EmrExtractionResult()
    if not isinstance(pasted_text, str) or not pasted_text.strip():
        return result

    try:
        lines = normalize_text(pasted_text)
        sections = split_sections(lines)
        result.sections = sections

        patient_lines = sections.lines("patient", "default")
        if not patient_lines:
            patient_lines = lines
        result.patient_info = extract_patient_info(patient_lines)

        insurance_lines = sections.lines("insurance") if sections.has("insurance") else lines
        result.insurance_info = extract_insurance_info(insurance_lines)
    except Exception as e:
        logger.warning(f"EMR extraction stopped early: {type(e).__name__}: {e}")
        return result

    logger.info(
        f"EMR extraction: sections={list(sections.sections)}, "
        f"patient fields={len(result.patient_info.to_dict())}, "
        f"insurance fields={len(result.insurance_info.to_dict())}"
    )
    return result

# ============================================================================
# src/clinical_validation/emr/__init__.py
# ============================================================================
"""
EMR/insurance text extraction. Independent of the LLM pipeline.
"""

from .parser import extract_emr_info
from .section_parser import decode_html_entities, normalize_text, split_sections, match_section_header
from .patient_extractor import extract_patient_info
from .insurance_extractor import extract_insurance_info

__all__ = [
    "extract_emr_info",
    "decode_html_entities",
    "normalize_text",
    "split_sections",
    "match_section_header",
    "extract_patient_info",
    "extract_insurance_info",
]

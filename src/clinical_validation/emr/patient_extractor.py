# ============================================================================
# src/clinical_validation/emr/patient_extractor.py
# ============================================================================
"""
Patient contact extraction (address, city, state, zip, phone, email).
"""

from typing import Iterable

from ..models import ParsedPatientInfo
from .patterns import PATIENT_RULES, PATIENT_NORMALIZERS, apply_rules


def extract_patient_info(lines: Iterable[str]) -> ParsedPatientInfo:
    """Extract patient contact fields from EMR lines."""
    info = ParsedPatientInfo()
    apply_rules(info, "\n".join(lines), PATIENT_RULES, PATIENT_NORMALIZERS)
    return info

# ============================================================================
# src/clinical_validation/emr/insurance_extractor.py
# ============================================================================
"""
Insurance extraction (insurer, policy/group/authorization numbers,
policy holder, relationship to subscriber).
"""

from typing import Iterable

from ..models import ParsedInsuranceInfo
from .patterns import INSURANCE_RULES, INSURANCE_NORMALIZERS, apply_rules


def extract_insurance_info(lines: Iterable[str]) -> ParsedInsuranceInfo:
    """Extract insurance fields from EMR lines."""
    info = ParsedInsuranceInfo()
    apply_rules(info, "\n".join(lines), INSURANCE_RULES, INSURANCE_NORMALIZERS)
    return info

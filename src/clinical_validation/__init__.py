# ============================================================================
# src/clinical_validation/__init__.py
# ============================================================================
"""
Clinical order validation core.

Turns physician dictation into a grounded, validated appropriateness decision
and pulls patient/insurance details out of pasted EMR text.
"""

from .emr.parser import extract_emr_info
from .models.validation import ValidationResult, ValidationStatus, CodeSuggestion
from .models.emr import ParsedPatientInfo, ParsedInsuranceInfo, EmrExtractionResult
from .pipeline import ValidationPipeline, validate

__all__ = [
    "extract_emr_info",
    "validate",
    "ValidationPipeline",
    "ValidationResult",
    "ValidationStatus",
    "CodeSuggestion",
    "ParsedPatientInfo",
    "ParsedInsuranceInfo",
    "EmrExtractionResult",
]

__version__ = "0.1.0"

# ============================================================================
# src/clinical_validation/text_processing/__init__.py
# ============================================================================
"""
Dictation text processing: PHI stripping and keyword extraction.
"""

from .phi_sanitizer import PHISanitizerOptions, strip_phi
from .keyword_extractor import extract_medical_keywords
from .keyword_categorizer import categorize_keywords

__all__ = [
    "PHISanitizerOptions",
    "strip_phi",
    "extract_medical_keywords",
    "categorize_keywords",
]

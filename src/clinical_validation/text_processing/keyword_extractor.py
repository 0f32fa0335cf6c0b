# ============================================================================
# src/clinical_validation/text_processing/keyword_extractor.py
# ============================================================================
"""
Medical Keyword Extraction

Pulls candidate lookup terms out of raw dictation:
- Anatomy, modality, symptom and abbreviation vocabulary hits
- ICD-10 shaped tokens (R51, M54.5)
- 5-digit CPT tokens with a radiology leading digit

Best-effort. False positives only widen the database lookup; they never
reach the model directly.
"""

import re
import logging
from functools import lru_cache
from typing import Iterable, List, Optional, Pattern, Sequence

from ..config import base_settings
from ..constants import ANATOMY_TERMS, MODALITY_TERMS, SYMPTOM_TERMS, ABBREVIATION_TERMS

logger = logging.getLogger(__name__)

ICD10_TOKEN_PATTERN = re.compile(r'\b[A-Z]\d{2}(?:\.\d{1,2})?\b', re.IGNORECASE)
CPT_TOKEN_PATTERN = re.compile(r'\b\d{5}\b')


@lru_cache(maxsize=None)
def _term_pattern(term: str) -> Pattern:
    # Alphanumeric boundaries instead of \b so terms like "w/" and "x-ray" match
    return re.compile(r'(?<![a-z0-9])' + re.escape(term) + r'(?![a-z0-9])')


def _vocabulary() -> Iterable[str]:
    yield from ANATOMY_TERMS
    yield from MODALITY_TERMS
    yield from SYMPTOM_TERMS
    yield from ABBREVIATION_TERMS


def extract_medical_keywords(
    text: str,
    procedure_prefixes: Optional[Sequence[str]] = None
) -> List[str]:
    """
    Extract lowercase medical keywords from dictation.

    Args:
        text: Raw dictation
        procedure_prefixes: Leading digits accepted for 5-digit CPT tokens
            (default from KEYWORD_PROCEDURE_CODE_PREFIXES)

    Returns:
        Deduplicated keywords in first-seen order
    """
    if not isinstance(text, str) or not text.strip():
        return []

    if procedure_prefixes is None:
        procedure_prefixes = base_settings.keyword_procedure_prefixes
    prefixes = tuple(procedure_prefixes)

    lowered = text.lower()
    keywords: List[str] = []
    seen = set()

    def add(term: str) -> None:
        if term not in seen:
            seen.add(term)
            keywords.append(term)

    for term in _vocabulary():
        if _term_pattern(term).search(lowered):
            add(term)

    for match in ICD10_TOKEN_PATTERN.finditer(text):
        add(match.group(0).lower())

    for match in CPT_TOKEN_PATTERN.finditer(text):
        token = match.group(0)
        if prefixes and token.startswith(prefixes):
            add(token)

    logger.debug(f"Extracted {len(keywords)} keywords from dictation")
    return keywords

# ============================================================================
# src/clinical_validation/text_processing/keyword_categorizer.py
# ============================================================================
"""
Keyword Categorization

Buckets extracted keywords so each database lookup can be targeted.
Priority is fixed: code shape, then anatomy, then modality; everything
else is treated as a symptom.
"""

import re
from typing import Iterable

from ..constants import ANATOMY_TERMS, MODALITY_TERMS
from ..models import CategorizedKeywords

DIAGNOSIS_CODE_SHAPE = re.compile(r'^[A-Z]\d{2}(?:\.\d{1,2})?$', re.IGNORECASE)
PROCEDURE_CODE_SHAPE = re.compile(r'^\d{5}$')

_ANATOMY = frozenset(ANATOMY_TERMS)
_MODALITIES = frozenset(MODALITY_TERMS)


def is_code(keyword: str) -> bool:
    return bool(DIAGNOSIS_CODE_SHAPE.match(keyword) or PROCEDURE_CODE_SHAPE.match(keyword))


def categorize_keywords(keywords: Iterable[str]) -> CategorizedKeywords:
    """
    Split keywords into anatomy, modality, symptom and code buckets.

    Every distinct input keyword lands in exactly one bucket.
    """
    result = CategorizedKeywords()
    seen = set()

    for keyword in keywords:
        if keyword in seen:
            continue
        seen.add(keyword)

        lowered = keyword.lower()
        if is_code(keyword):
            result.codes.append(keyword)
        elif lowered in _ANATOMY:
            result.anatomy_terms.append(keyword)
        elif lowered in _MODALITIES:
            result.modalities.append(keyword)
        else:
            result.symptoms.append(keyword)

    return result

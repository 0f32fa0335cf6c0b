# ============================================================================
# src/clinical_validation/constants/__init__.py
# ============================================================================
"""
Fixed vocabularies and reference tables.
"""

from .medical_terms import (
    ANATOMY_TERMS,
    MODALITY_TERMS,
    SYMPTOM_TERMS,
    ABBREVIATION_TERMS,
)
from .reference_data import (
    VALID_STATES,
    INSURANCE_COMPANIES,
    RELATIONSHIP_MAP,
    RELATIONSHIP_VALUES,
)

# ============================================================================
# src/clinical_validation/models/__init__.py
# ============================================================================
"""
Value objects passed between pipeline stages.
"""

from .validation import ValidationStatus, CodeSuggestion, ValidationResult
from .keywords import CategorizedKeywords
from .context_rows import (
    DiagnosisCodeRow,
    ProcedureCodeRow,
    CodeMappingRow,
    NarrativeDocRow,
)
from .emr import ParsedPatientInfo, ParsedInsuranceInfo, EmrSections, EmrExtractionResult
from .prompt import PromptTemplate
from .llm import TokenUsage, LLMResponse

__all__ = [
    "ValidationStatus",
    "CodeSuggestion",
    "ValidationResult",
    "CategorizedKeywords",
    "DiagnosisCodeRow",
    "ProcedureCodeRow",
    "CodeMappingRow",
    "NarrativeDocRow",
    "ParsedPatientInfo",
    "ParsedInsuranceInfo",
    "EmrSections",
    "EmrExtractionResult",
    "PromptTemplate",
    "TokenUsage",
    "LLMResponse",
]

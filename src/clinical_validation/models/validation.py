# ============================================================================
# src/clinical_validation/models/validation.py
# ============================================================================
"""
Validation Result Classes

The terminal output of the dictation pipeline. Field names in to_dict()
match the JSON the model is asked to produce, so a serialized result can be
fed back through the response processor unchanged.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class ValidationStatus(str, Enum):
    APPROPRIATE = "appropriate"
    INAPPROPRIATE = "inappropriate"
    NEEDS_CLARIFICATION = "needs_clarification"
    OVERRIDE = "override"


@dataclass(frozen=True)
class CodeSuggestion:
    """A suggested ICD-10 or CPT code."""
    code: str
    description: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"code": self.code, "description": self.description}


@dataclass
class ValidationResult:
    status: ValidationStatus
    compliance_score: int
    feedback: str
    suggested_diagnosis_codes: List[CodeSuggestion] = field(default_factory=list)
    suggested_procedure_codes: List[CodeSuggestion] = field(default_factory=list)
    internal_reasoning: str = ""  # never shown to the requester

    def to_dict(self) -> Dict[str, Any]:
        return {
            "validationStatus": self.status.value,
            "complianceScore": self.compliance_score,
            "feedback": self.feedback,
            "suggestedICD10Codes": [c.to_dict() for c in self.suggested_diagnosis_codes],
            "suggestedCPTCodes": [c.to_dict() for c in self.suggested_procedure_codes],
            "internalReasoning": self.internal_reasoning,
        }

    def to_public_dict(self) -> Dict[str, Any]:
        """Result as shown to the requesting physician (no internal reasoning)."""
        data = self.to_dict()
        data.pop("internalReasoning")
        return data

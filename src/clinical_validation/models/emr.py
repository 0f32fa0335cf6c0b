# ============================================================================
# src/clinical_validation/models/emr.py
# ============================================================================
"""
EMR Extraction Classes

Sparse patient and insurance structs filled in by independent pattern
passes. set_once() keeps the first value a field receives, so an earlier,
higher-priority pattern always wins over later matches.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class _SparseInfo:
    """Shared behaviour for the optional-field structs below."""

    def set_once(self, name: str, value: Optional[str]) -> bool:
        """Set a field only if it is still empty. Returns True when set."""
        if not value or getattr(self, name) is not None:
            return False
        setattr(self, name, value)
        return True

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def to_dict(self) -> Dict[str, str]:
        """Only populated fields, camelCase keys."""
        return {
            _camel(f.name): getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass
class ParsedPatientInfo(_SparseInfo):
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None


@dataclass
class ParsedInsuranceInfo(_SparseInfo):
    insurer_name: Optional[str] = None
    policy_number: Optional[str] = None
    group_number: Optional[str] = None
    authorization_number: Optional[str] = None
    policy_holder_name: Optional[str] = None
    relationship: Optional[str] = None  # Self / Spouse / Child / Parent / Other


# Section names in header-table priority order; "default" holds lines seen
# before the first recognized header.
SECTION_NAMES = ("default", "patient", "insurance", "provider", "encounter", "emergency")


@dataclass
class EmrSections:
    sections: Dict[str, List[str]] = field(default_factory=dict)

    def lines(self, *names: str) -> List[str]:
        result: List[str] = []
        for name in names:
            result.extend(self.sections.get(name, []))
        return result

    def has(self, name: str) -> bool:
        return bool(self.sections.get(name))


@dataclass
class EmrExtractionResult:
    patient_info: ParsedPatientInfo = field(default_factory=ParsedPatientInfo)
    insurance_info: ParsedInsuranceInfo = field(default_factory=ParsedInsuranceInfo)
    sections: EmrSections = field(default_factory=EmrSections)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "patientInfo": self.patient_info.to_dict(),
            "insuranceInfo": self.insurance_info.to_dict(),
        }

# ============================================================================
# src/clinical_validation/models/keywords.py
# ============================================================================

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class CategorizedKeywords:
    """Keywords bucketed by kind. A keyword lives in exactly one bucket."""
    anatomy_terms: List[str] = field(default_factory=list)
    modalities: List[str] = field(default_factory=list)
    symptoms: List[str] = field(default_factory=list)
    codes: List[str] = field(default_factory=list)

    def all_keywords(self) -> List[str]:
        return self.anatomy_terms + self.modalities + self.symptoms + self.codes

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "anatomyTerms": list(self.anatomy_terms),
            "modalities": list(self.modalities),
            "symptoms": list(self.symptoms),
            "codes": list(self.codes),
        }

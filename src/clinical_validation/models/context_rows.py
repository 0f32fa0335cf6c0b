# ============================================================================
# src/clinical_validation/models/context_rows.py
# ============================================================================
"""
Database Context Rows

One class per lookup in the context builder. Each carries only the columns
the formatter needs; optional columns stay None and are skipped on output.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


def _text(row: Mapping[str, Any], key: str) -> Optional[str]:
    """Column value as stripped text, or None when absent/blank."""
    value = row.get(key)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass
class DiagnosisCodeRow:
    icd10_code: str
    description: Optional[str] = None
    clinical_notes: Optional[str] = None
    imaging_modalities: Optional[str] = None
    primary_imaging: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> 'DiagnosisCodeRow':
        return cls(
            icd10_code=_text(row, "icd10_code") or "",
            description=_text(row, "description"),
            clinical_notes=_text(row, "clinical_notes"),
            imaging_modalities=_text(row, "imaging_modalities"),
            primary_imaging=_text(row, "primary_imaging"),
        )


@dataclass
class ProcedureCodeRow:
    cpt_code: str
    description: Optional[str] = None
    modality: Optional[str] = None
    body_part: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> 'ProcedureCodeRow':
        return cls(
            cpt_code=_text(row, "cpt_code") or "",
            description=_text(row, "description"),
            modality=_text(row, "modality"),
            body_part=_text(row, "body_part"),
        )


@dataclass
class CodeMappingRow:
    icd10_code: str
    cpt_code: str
    icd10_description: Optional[str] = None
    cpt_description: Optional[str] = None
    appropriateness: Optional[int] = None  # 1-9
    evidence_source: Optional[str] = None
    refined_justification: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> 'CodeMappingRow':
        appropriateness = row.get("appropriateness")
        try:
            appropriateness = int(appropriateness) if appropriateness is not None else None
        except (TypeError, ValueError):
            appropriateness = None

        return cls(
            icd10_code=_text(row, "icd10_code") or "",
            cpt_code=_text(row, "cpt_code") or "",
            icd10_description=_text(row, "icd10_description"),
            cpt_description=_text(row, "cpt_description"),
            appropriateness=appropriateness,
            evidence_source=_text(row, "evidence_source"),
            refined_justification=_text(row, "refined_justification"),
        )


@dataclass
class NarrativeDocRow:
    icd10_code: str
    content_preview: Optional[str] = None
    icd10_description: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> 'NarrativeDocRow':
        return cls(
            icd10_code=_text(row, "icd10_code") or "",
            content_preview=_text(row, "content_preview"),
            icd10_description=_text(row, "icd10_description"),
        )

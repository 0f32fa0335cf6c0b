# ============================================================================
# src/clinical_validation/database/context_formatter.py
# ============================================================================
"""
Database Context Formatting

Renders lookup rows as the plain-text block placed in the prompt. Section
order is fixed (diagnosis, procedure, mapping, narrative); empty sections
are left out and absent optional fields are skipped.
"""

from typing import List, Sequence

from ..models import DiagnosisCodeRow, ProcedureCodeRow, CodeMappingRow, NarrativeDocRow

NO_CONTEXT_FOUND = "No specific medical context found in the input text."


def _labelled(code: str, description) -> str:
    return f"{code} ({description})" if description else code


def _diagnosis_section(rows: Sequence[DiagnosisCodeRow]) -> List[str]:
    lines = ["-- Relevant ICD-10 Codes --"]
    for row in rows:
        lines.append(f"{row.icd10_code} - {row.description}" if row.description else row.icd10_code)
        if row.clinical_notes:
            lines.append(f"Clinical Notes: {row.clinical_notes}")
        if row.imaging_modalities:
            lines.append(f"Recommended Imaging: {row.imaging_modalities}")
        if row.primary_imaging:
            lines.append(f"Primary Imaging: {row.primary_imaging}")
        lines.append("")
    return lines


def _procedure_section(rows: Sequence[ProcedureCodeRow]) -> List[str]:
    lines = ["-- Relevant CPT Codes --"]
    for row in rows:
        lines.append(f"{row.cpt_code} - {row.description}" if row.description else row.cpt_code)
        if row.modality:
            lines.append(f"Modality: {row.modality}")
        if row.body_part:
            lines.append(f"Body Part: {row.body_part}")
        lines.append("")
    return lines


def _mapping_section(rows: Sequence[CodeMappingRow]) -> List[str]:
    lines = ["-- Relevant ICD-10 to CPT Mappings --"]
    for row in rows:
        lines.append(
            f"ICD-10: {_labelled(row.icd10_code, row.icd10_description)} -> "
            f"CPT: {_labelled(row.cpt_code, row.cpt_description)}"
        )
        if row.appropriateness is not None:
            lines.append(f"Appropriateness Score: {row.appropriateness}/9")
        if row.evidence_source:
            lines.append(f"Evidence Source: {row.evidence_source}")
        if row.refined_justification:
            lines.append(f"Justification: {row.refined_justification}")
        lines.append("")
    return lines


def _narrative_section(rows: Sequence[NarrativeDocRow]) -> List[str]:
    lines = ["-- Additional Clinical Information --"]
    for row in rows:
        lines.append(f"ICD-10: {_labelled(row.icd10_code, row.icd10_description)}")
        if row.content_preview:
            lines.append(f"{row.content_preview}...")
        lines.append("")
    return lines


def format_database_context(
    diagnosis_rows: Sequence[DiagnosisCodeRow],
    procedure_rows: Sequence[ProcedureCodeRow],
    mapping_rows: Sequence[CodeMappingRow],
    narrative_rows: Sequence[NarrativeDocRow],
) -> str:
    """
    Format lookup results into the prompt's database context.

    Returns NO_CONTEXT_FOUND when every sequence is empty.
    """
    lines: List[str] = []
    if diagnosis_rows:
        lines.extend(_diagnosis_section(diagnosis_rows))
    if procedure_rows:
        lines.extend(_procedure_section(procedure_rows))
    if mapping_rows:
        lines.extend(_mapping_section(mapping_rows))
    if narrative_rows:
        lines.extend(_narrative_section(narrative_rows))

    if not lines:
        return NO_CONTEXT_FOUND
    return "\n".join(lines) + "\n"

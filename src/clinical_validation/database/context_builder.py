# ============================================================================
# src/clinical_validation/database/context_builder.py
# ============================================================================
"""
Database Context Builder

Turns extracted keywords into the grounding context for the validation
prompt. Four lookups run concurrently:
1. ICD-10 codes (description, clinical notes, keywords)
2. CPT codes (description, body part, modality)
3. ICD-10 to CPT mappings (joined on both code tables)
4. Narrative documents per ICD-10 code

Each lookup matches any keyword as a case-insensitive substring. A lookup
that fails contributes no rows; only DatabaseUnavailableError is fatal.
"""

import time
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple, Type

from ..config import base_settings, BaseSettingsConfig
from ..models import DiagnosisCodeRow, ProcedureCodeRow, CodeMappingRow, NarrativeDocRow
from ..text_processing import categorize_keywords
from ..utils.exceptions import DatabaseUnavailableError
from .code_store import QueryFunction
from .context_formatter import NO_CONTEXT_FOUND, format_database_context

logger = logging.getLogger(__name__)


@dataclass
class ContextLookup:
    name: str
    sql: str
    params: Tuple[Any, ...]
    row_type: Type


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _keyword_filter(columns: Sequence[str], keywords: Sequence[str]) -> Tuple[str, List[str]]:
    """WHERE clause matching any keyword in any column, with its parameters."""
    clauses = []
    params: List[str] = []
    for keyword in keywords:
        # keywords are literal substrings; % and _ must not act as wildcards
        pattern = f"%{_escape_like(keyword.lower())}%"
        for column in columns:
            clauses.append(f"LOWER({column}) LIKE ? ESCAPE '\\'")
            params.append(pattern)
    return " OR ".join(clauses), params


def build_context_lookups(
    keywords: Sequence[str],
    settings: Optional[BaseSettingsConfig] = None
) -> List[ContextLookup]:
    """Build the four lookup statements in output order."""
    settings = settings or base_settings

    diagnosis_where, diagnosis_params = _keyword_filter(
        ("description", "clinical_notes", "keywords"), keywords
    )
    procedure_where, procedure_params = _keyword_filter(
        ("description", "body_part", "modality"), keywords
    )
    mapping_where, mapping_params = _keyword_filter(
        ("i.description", "c.description", "c.body_part", "c.modality"), keywords
    )
    narrative_where, narrative_params = _keyword_filter(
        ("i.description", "md.content"), keywords
    )

    return [
        ContextLookup(
            name="diagnosis",
            sql=(
                "SELECT icd10_code, description, clinical_notes, imaging_modalities, primary_imaging "
                "FROM medical_icd10_codes "
                f"WHERE {diagnosis_where} "
                "LIMIT ?"
            ),
            params=(*diagnosis_params, settings.DIAGNOSIS_CONTEXT_LIMIT),
            row_type=DiagnosisCodeRow,
        ),
        ContextLookup(
            name="procedure",
            sql=(
                "SELECT cpt_code, description, modality, body_part "
                "FROM medical_cpt_codes "
                f"WHERE {procedure_where} "
                "LIMIT ?"
            ),
            params=(*procedure_params, settings.PROCEDURE_CONTEXT_LIMIT),
            row_type=ProcedureCodeRow,
        ),
        ContextLookup(
            name="mapping",
            sql=(
                "SELECT m.icd10_code, i.description AS icd10_description, "
                "m.cpt_code, c.description AS cpt_description, "
                "m.appropriateness, m.evidence_source, m.refined_justification "
                "FROM medical_cpt_icd10_mappings m "
                "JOIN medical_icd10_codes i ON m.icd10_code = i.icd10_code "
                "JOIN medical_cpt_codes c ON m.cpt_code = c.cpt_code "
                f"WHERE {mapping_where} "
                "LIMIT ?"
            ),
            params=(*mapping_params, settings.MAPPING_CONTEXT_LIMIT),
            row_type=CodeMappingRow,
        ),
        ContextLookup(
            name="narrative",
            sql=(
                "SELECT md.icd10_code, i.description AS icd10_description, "
                "SUBSTR(md.content, 1, ?) AS content_preview "
                "FROM medical_icd10_markdown_docs md "
                "JOIN medical_icd10_codes i ON md.icd10_code = i.icd10_code "
                f"WHERE {narrative_where} "
                "LIMIT ?"
            ),
            params=(
                settings.NARRATIVE_PREVIEW_CHARS,
                *narrative_params,
                settings.NARRATIVE_CONTEXT_LIMIT,
            ),
            row_type=NarrativeDocRow,
        ),
    ]


async def _run_lookup(lookup: ContextLookup, query_fn: QueryFunction) -> List[Any]:
    try:
        rows = await asyncio.to_thread(query_fn, lookup.sql, lookup.params)
        return [lookup.row_type.from_row(row) for row in rows or []]
    except DatabaseUnavailableError:
        raise
    except Exception as e:
        logger.warning(f"{lookup.name} lookup failed, continuing without it: {e}")
        return []


async def generate_database_context(
    keywords: Sequence[str],
    query_fn: QueryFunction,
    settings: Optional[BaseSettingsConfig] = None
) -> str:
    """
    Build the formatted database context for a set of keywords.

    Args:
        keywords: Extracted keywords (see extract_medical_keywords)
        query_fn: query(sql, params) -> rows as dicts
        settings: Row limits (default: base_settings)

    Returns:
        Formatted context, or NO_CONTEXT_FOUND when there are no keywords
        or no lookup returned rows

    Raises:
        DatabaseUnavailableError: the database cannot be reached
    """
    if not keywords:
        return NO_CONTEXT_FOUND

    start_time = time.time()
    categorized = categorize_keywords(keywords)
    logger.info(
        f"Generating database context for {len(keywords)} keywords "
        f"(anatomy={len(categorized.anatomy_terms)}, modalities={len(categorized.modalities)}, "
        f"symptoms={len(categorized.symptoms)}, codes={len(categorized.codes)})"
    )

    lookups = build_context_lookups(keywords, settings)
    diagnosis, procedure, mapping, narrative = await asyncio.gather(
        *(_run_lookup(lookup, query_fn) for lookup in lookups)
    )

    elapsed_ms = (time.time() - start_time) * 1000
    logger.info(
        f"Context lookups done in {elapsed_ms:.0f}ms: {len(diagnosis)} ICD-10, {len(procedure)} CPT, "
        f"{len(mapping)} mappings, {len(narrative)} narrative docs"
    )

    return format_database_context(diagnosis, procedure, mapping, narrative)

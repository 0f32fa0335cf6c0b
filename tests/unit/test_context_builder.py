# ============================================================================
# FILE: tests/unit/test_context_builder.py
# ============================================================================
"""
Unit tests for database context building and formatting
"""

import sqlite3

import pytest

from clinical_validation.config import BaseSettingsConfig
from clinical_validation.database import (
    NO_CONTEXT_FOUND,
    MedicalCodeStore,
    build_context_lookups,
    format_database_context,
    generate_database_context,
)
from clinical_validation.models import DiagnosisCodeRow, ProcedureCodeRow, CodeMappingRow, NarrativeDocRow
from clinical_validation.utils.exceptions import DatabaseUnavailableError


@pytest.mark.asyncio
async def test_no_keywords_returns_sentinel():
    """Test that an empty keyword list skips the database"""
    def query_fn(sql, params):
        raise AssertionError("database should not be queried")

    assert await generate_database_context([], query_fn) == NO_CONTEXT_FOUND


@pytest.mark.asyncio
async def test_no_matching_rows_returns_sentinel(code_store, test_settings):
    """Test that zero rows across all lookups yields the sentinel"""
    context = await generate_database_context(["zzzz"], code_store.query, test_settings)

    assert context == NO_CONTEXT_FOUND


@pytest.mark.asyncio
async def test_headache_context(code_store, test_settings):
    """Test diagnosis, mapping and narrative sections for a symptom keyword"""
    context = await generate_database_context(["headache"], code_store.query, test_settings)

    assert "-- Relevant ICD-10 Codes --" in context
    assert "R51 - Headache" in context
    assert "Clinical Notes: Evaluate for red flag symptoms" in context
    assert "Recommended Imaging: MRI brain, CT head" in context
    assert "Primary Imaging: MRI brain without contrast" in context

    assert "-- Relevant CPT Codes --" not in context

    assert "ICD-10: R51 (Headache) -> CPT: 70551 (MRI brain without contrast)" in context
    assert "Appropriateness Score: 7/9" in context
    assert "Evidence Source: ACR Appropriateness Criteria" in context
    assert "Justification: New headache with red flags" in context
    assert "ICD-10: R51 (Headache) -> CPT: 70450 (CT head without contrast)" in context
    assert "None" not in context

    assert "-- Additional Clinical Information --" in context
    assert "New onset headache in adults" in context

    assert context.index("-- Relevant ICD-10 Codes --") < context.index("-- Relevant ICD-10 to CPT Mappings --")
    assert context.index("-- Relevant ICD-10 to CPT Mappings --") < context.index("-- Additional Clinical Information --")
    assert context.endswith("\n")


@pytest.mark.asyncio
async def test_lumbar_context(code_store, test_settings):
    """Test matching through the keywords and body part columns"""
    context = await generate_database_context(["lumbar"], code_store.query, test_settings)

    assert "M54.5 - Low back pain" in context
    assert "72148 - MRI lumbar spine without contrast" in context
    assert "Modality: MRI" in context
    assert "Body Part: lumbar spine" in context
    assert "ICD-10: M54.5 (Low back pain) -> CPT: 72148 (MRI lumbar spine without contrast)" in context
    assert "Clinical Notes" not in context


@pytest.mark.asyncio
async def test_keyword_match_is_case_insensitive(code_store, test_settings):
    """Test upper-case keywords still match"""
    context = await generate_database_context(["HEADACHE"], code_store.query, test_settings)

    assert "R51 - Headache" in context


@pytest.mark.asyncio
async def test_row_limits(code_store, code_db_path):
    """Test per-lookup row limits"""
    settings = BaseSettingsConfig(_env_file=None, CODE_DB_PATH=code_db_path, DIAGNOSIS_CONTEXT_LIMIT=1)
    context = await generate_database_context(["headache", "lumbar"], code_store.query, settings)

    found = [line for line in ("R51 - Headache", "M54.5 - Low back pain") if line in context]
    assert len(found) == 1


@pytest.mark.asyncio
async def test_narrative_preview_truncated(code_store, code_db_path):
    """Test narrative documents are cut to the preview length"""
    settings = BaseSettingsConfig(_env_file=None, CODE_DB_PATH=code_db_path, NARRATIVE_PREVIEW_CHARS=20)
    context = await generate_database_context(["headache"], code_store.query, settings)

    assert "# Headache\n\nNew onse..." in context
    assert "New onset headache in adults" not in context


@pytest.mark.asyncio
async def test_failed_lookup_is_skipped(code_store, test_settings):
    """Test that one failing lookup does not block the others"""
    def flaky_query(sql, params):
        if "FROM medical_cpt_codes " in sql:
            raise sqlite3.OperationalError("disk I/O error")
        return code_store.query(sql, params)

    context = await generate_database_context(["mri", "headache"], flaky_query, test_settings)

    assert "R51 - Headache" in context
    assert "-- Relevant CPT Codes --" not in context
    assert "-- Relevant ICD-10 to CPT Mappings --" in context


@pytest.mark.asyncio
async def test_unreadable_rows_are_skipped(code_store, test_settings):
    """Test that rows of the wrong shape only drop their own lookup"""
    def tuple_query(sql, params):
        if "FROM medical_cpt_codes " in sql:
            return [("70551", "MRI brain without contrast", "MRI", "Brain")]
        return code_store.query(sql, params)

    context = await generate_database_context(["mri", "headache"], tuple_query, test_settings)

    assert "R51 - Headache" in context
    assert "-- Relevant CPT Codes --" not in context
    assert "-- Relevant ICD-10 to CPT Mappings --" in context


@pytest.mark.asyncio
@pytest.mark.parametrize("keyword", ["head%ache", "he_dache"])
async def test_like_wildcards_are_literal(code_store, test_settings, keyword):
    """Test % and _ inside a keyword match only themselves"""
    context = await generate_database_context([keyword], code_store.query, test_settings)

    assert context == NO_CONTEXT_FOUND


def test_like_pattern_escaping(test_settings):
    """Test escaped parameters and the ESCAPE clause"""
    diagnosis = build_context_lookups(["50%_off\\"], test_settings)[0]

    assert diagnosis.params[0] == "%50\\%\\_off\\\\%"
    assert "LIKE ? ESCAPE '\\'" in diagnosis.sql


@pytest.mark.asyncio
async def test_unavailable_database_propagates(tmp_path, test_settings):
    """Test that an unreachable database is fatal"""
    store = MedicalCodeStore(tmp_path / "missing.db")

    with pytest.raises(DatabaseUnavailableError):
        await generate_database_context(["headache"], store.query, test_settings)


def test_build_context_lookups(test_settings):
    """Test lookup order and parameter layout"""
    lookups = build_context_lookups(["Brain", "mri"], test_settings)

    assert [lookup.name for lookup in lookups] == ["diagnosis", "procedure", "mapping", "narrative"]

    diagnosis = lookups[0]
    assert diagnosis.params == ("%brain%",) * 3 + ("%mri%",) * 3 + (10,)
    assert diagnosis.sql.count("LIKE ?") == 6

    mapping = lookups[2]
    assert len(mapping.params) == 2 * 4 + 1

    narrative = lookups[3]
    assert narrative.params[0] == 1000
    assert narrative.params[-1] == 5
    assert narrative.row_type is NarrativeDocRow


def test_format_skips_absent_fields():
    """Test rows without optional fields"""
    context = format_database_context(
        [DiagnosisCodeRow(icd10_code="R51")],
        [ProcedureCodeRow(cpt_code="70551")],
        [CodeMappingRow(icd10_code="R51", cpt_code="70551")],
        [],
    )

    lines = context.splitlines()
    assert lines[0] == "-- Relevant ICD-10 Codes --"
    assert lines[1] == "R51"
    assert "70551" in lines
    assert "ICD-10: R51 -> CPT: 70551" in lines
    assert "Appropriateness Score" not in context
    assert "-- Additional Clinical Information --" not in context


def test_format_all_empty():
    """Test the sentinel for four empty sequences"""
    assert format_database_context([], [], [], []) == NO_CONTEXT_FOUND


def test_format_narrative_section():
    """Test narrative previews end with an ellipsis"""
    context = format_database_context(
        [], [], [],
        [NarrativeDocRow(icd10_code="R51", content_preview="Imaging guidance", icd10_description="Headache")],
    )

    assert context == (
        "-- Additional Clinical Information --\n"
        "ICD-10: R51 (Headache)\n"
        "Imaging guidance...\n"
        "\n"
    )

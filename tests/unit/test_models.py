# ============================================================================
# FILE: tests/unit/test_models.py
# ============================================================================
"""
Unit tests for value objects
"""

import pytest

from clinical_validation.models import (
    CodeMappingRow,
    CodeSuggestion,
    DiagnosisCodeRow,
    EmrExtractionResult,
    LLMResponse,
    ParsedInsuranceInfo,
    ParsedPatientInfo,
    PromptTemplate,
    TokenUsage,
    ValidationResult,
    ValidationStatus,
)
from clinical_validation.utils.exceptions import AllProvidersFailedError, ProviderError


def test_validation_result_to_dict():
    """Test wire field names"""
    result = ValidationResult(
        status=ValidationStatus.NEEDS_CLARIFICATION,
        compliance_score=4,
        feedback="Please document symptom duration.",
        suggested_diagnosis_codes=[CodeSuggestion("R51", "Headache")],
        internal_reasoning="Duration missing.",
    )

    assert result.to_dict() == {
        "validationStatus": "needs_clarification",
        "complianceScore": 4,
        "feedback": "Please document symptom duration.",
        "suggestedICD10Codes": [{"code": "R51", "description": "Headache"}],
        "suggestedCPTCodes": [],
        "internalReasoning": "Duration missing.",
    }


def test_code_suggestion_is_immutable():
    """Test suggestions are frozen"""
    suggestion = CodeSuggestion("R51")

    with pytest.raises(AttributeError):
        suggestion.code = "R52"


def test_llm_response_usage():
    """Test token totals with and without usage"""
    with_usage = LLMResponse("anthropic", "claude", "{}", TokenUsage(10, 20, 30), 120.46)
    without_usage = LLMResponse("grok", "grok-3", "{}")

    assert with_usage.total_tokens == 30
    assert with_usage.to_dict()["usage"] == {"promptTokens": 10, "completionTokens": 20, "totalTokens": 30}
    assert with_usage.to_dict()["latencyMs"] == 120.5
    assert without_usage.total_tokens is None
    assert without_usage.to_dict()["usage"] is None


def test_prompt_template_from_row():
    """Test template rows"""
    template = PromptTemplate.from_row(
        {"id": 3, "name": "Default", "version": 2, "content_template": "{{DICTATION_TEXT}}", "word_limit": "300"}
    )

    assert template.version == "2"
    assert template.word_limit == 300

    bare = PromptTemplate.from_row({"content_template": "x"})
    assert bare.name == "default"
    assert bare.word_limit is None


def test_context_rows_from_row():
    """Test blank columns and bad appropriateness values"""
    diagnosis = DiagnosisCodeRow.from_row({"icd10_code": "R51", "description": "  ", "clinical_notes": None})
    mapping = CodeMappingRow.from_row({"icd10_code": "R51", "cpt_code": "70551", "appropriateness": "high"})

    assert diagnosis.description is None
    assert diagnosis.clinical_notes is None
    assert mapping.appropriateness is None
    assert CodeMappingRow.from_row({"icd10_code": "R51", "cpt_code": "70551", "appropriateness": "8"}).appropriateness == 8


def test_sparse_info_set_once():
    """Test first value wins and empty values are ignored"""
    info = ParsedPatientInfo()

    assert info.is_empty()
    assert not info.set_once("city", "")
    assert info.set_once("city", "Austin")
    assert not info.set_once("city", "Dallas")
    assert info.city == "Austin"
    assert info.to_dict() == {"city": "Austin"}


def test_emr_result_to_dict():
    """Test camelCase keys and sparse output"""
    result = EmrExtractionResult(
        patient_info=ParsedPatientInfo(zip_code="78701"),
        insurance_info=ParsedInsuranceInfo(insurer_name="Aetna", policy_holder_name="Jane Doe"),
    )

    assert result.to_dict() == {
        "patientInfo": {"zipCode": "78701"},
        "insuranceInfo": {"insurerName": "Aetna", "policyHolderName": "Jane Doe"},
    }


def test_all_providers_failed_error():
    """Test failure summary"""
    error = AllProvidersFailedError([
        ("anthropic", ProviderError("HTTP 500", "anthropic")),
        ("openai", ProviderError("timed out", "openai")),
    ])

    assert error.providers == ["anthropic", "openai"]
    assert "anthropic: HTTP 500" in str(error)
    assert "openai: timed out" in str(error)

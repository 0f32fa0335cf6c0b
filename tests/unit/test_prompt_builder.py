# ============================================================================
# FILE: tests/unit/test_prompt_builder.py
# ============================================================================
"""
Unit tests for prompt construction
"""

from clinical_validation.config import base_settings
from clinical_validation.models import PromptTemplate
from clinical_validation.prompts import construct_prompt, OVERRIDE_INSTRUCTIONS


TEMPLATE = "Context:\n{{DATABASE_CONTEXT}}\n\nDictation:\n{{DICTATION_TEXT}}\n\nLimit feedback to {{WORD_LIMIT}} words."


def test_placeholders_filled():
    """Test all three placeholders are substituted"""
    template = PromptTemplate(content_template=TEMPLATE, word_limit=250)
    prompt = construct_prompt(template, "MRI brain for headache", "R51 - Headache")

    assert prompt == (
        "Context:\nR51 - Headache\n\nDictation:\nMRI brain for headache\n\n"
        "Limit feedback to 250 words."
    )


def test_explicit_word_limit_wins():
    """Test the word_limit argument overrides the template"""
    template = PromptTemplate(content_template=TEMPLATE, word_limit=250)
    prompt = construct_prompt(template, "text", "context", word_limit=100)

    assert "Limit feedback to 100 words." in prompt


def test_default_word_limit():
    """Test fallback to DEFAULT_WORD_LIMIT when no limit is set"""
    prompt = construct_prompt(TEMPLATE, "text", "context")

    assert f"Limit feedback to {base_settings.DEFAULT_WORD_LIMIT} words." in prompt


def test_override_instructions_appended():
    """Test override requests get the extra instructions at the end"""
    prompt = construct_prompt(TEMPLATE, "text", "context", word_limit=50, is_override=True)

    assert prompt.endswith(OVERRIDE_INSTRUCTIONS)
    assert "OVERRIDE validation request" in prompt
    assert OVERRIDE_INSTRUCTIONS not in construct_prompt(TEMPLATE, "text", "context", word_limit=50)


def test_first_occurrence_only():
    """Test that only the first occurrence of a placeholder is replaced"""
    prompt = construct_prompt("{{DICTATION_TEXT}} / {{DICTATION_TEXT}}", "text", "context")

    assert prompt == "text / {{DICTATION_TEXT}}"


def test_template_without_placeholders():
    """Test a template missing placeholders is used as-is"""
    assert construct_prompt("Validate the order.", "text", "context") == "Validate the order."

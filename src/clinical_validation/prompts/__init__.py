# ============================================================================
# src/clinical_validation/prompts/__init__.py
# ============================================================================

from .prompt_builder import (
    construct_prompt,
    OVERRIDE_INSTRUCTIONS,
    DATABASE_CONTEXT_PLACEHOLDER,
    DICTATION_TEXT_PLACEHOLDER,
    WORD_LIMIT_PLACEHOLDER,
)

__all__ = [
    "construct_prompt",
    "OVERRIDE_INSTRUCTIONS",
    "DATABASE_CONTEXT_PLACEHOLDER",
    "DICTATION_TEXT_PLACEHOLDER",
    "WORD_LIMIT_PLACEHOLDER",
]

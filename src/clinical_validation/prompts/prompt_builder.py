# ============================================================================
# src/clinical_validation/prompts/prompt_builder.py
# ============================================================================
"""
Validation Prompt Construction

Fills the active template's placeholders:
- {{DATABASE_CONTEXT}}  grounding context from the code database
- {{DICTATION_TEXT}}    (sanitized) physician dictation
- {{WORD_LIMIT}}        feedback word limit

Substitution is literal and replaces the first occurrence only. A template
without a given placeholder is used as-is.
"""

from typing import Optional, Union

from ..config import base_settings
from ..models import PromptTemplate

DATABASE_CONTEXT_PLACEHOLDER = "{{DATABASE_CONTEXT}}"
DICTATION_TEXT_PLACEHOLDER = "{{DICTATION_TEXT}}"
WORD_LIMIT_PLACEHOLDER = "{{WORD_LIMIT}}"

OVERRIDE_INSTRUCTIONS = (
    "\n\n"
    "IMPORTANT: This is an OVERRIDE validation request. The physician has provided "
    "justification for why they believe this study is appropriate despite potential "
    "guidelines to the contrary. Please consider this justification carefully in your "
    "assessment."
)


def construct_prompt(
    template: Union[PromptTemplate, str],
    dictation_text: str,
    database_context: str,
    word_limit: Optional[int] = None,
    is_override: bool = False
) -> str:
    """
    Build the final prompt sent to the model.

    Args:
        template: Active template, or its raw content
        dictation_text: Dictation to validate
        database_context: Output of generate_database_context
        word_limit: Overrides the template's word limit
        is_override: Append OVERRIDE_INSTRUCTIONS

    Returns:
        Prompt text
    """
    if isinstance(template, PromptTemplate):
        content = template.content_template
        if word_limit is None:
            word_limit = template.word_limit
    else:
        content = template or ""

    if word_limit is None:
        word_limit = base_settings.DEFAULT_WORD_LIMIT

    prompt = content.replace(DATABASE_CONTEXT_PLACEHOLDER, database_context or "", 1)
    prompt = prompt.replace(DICTATION_TEXT_PLACEHOLDER, dictation_text or "", 1)
    prompt = prompt.replace(WORD_LIMIT_PLACEHOLDER, str(word_limit), 1)

    if is_override:
        prompt += OVERRIDE_INSTRUCTIONS

    return prompt

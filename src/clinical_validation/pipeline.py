# ============================================================================
# src/clinical_validation/pipeline.py
# ============================================================================
"""
Order Validation Pipeline

dictation
  -> PHI sanitizer (text sent to the model)
  -> keyword extraction (raw text, stays local) -> keyword categorization
  -> database context
  -> prompt construction (active template)
  -> LLM fallback chain
  -> response processing
  -> ValidationResult

Only AllProvidersFailedError (every provider failed) and configuration or
database errors escape. Malformed model output always yields a result.

Usage:
    from clinical_validation import ValidationPipeline

    pipeline = ValidationPipeline()
    result = await pipeline.validate("MRI brain, new onset headache, R51")
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .config import base_settings, BaseSettingsConfig
from .database import MedicalCodeStore, QueryFunction, TemplateProvider, generate_database_context
from .llm import LLMFallbackClient, create_provider_chain
from .models import LLMResponse, ValidationResult
from .prompts import construct_prompt
from .response import process_llm_response
from .text_processing import extract_medical_keywords, strip_phi
from .utils.logging import log_performance

logger = logging.getLogger(__name__)


@dataclass
class ValidationOutcome:
    """Result plus what the caller needs to record the attempt."""
    result: ValidationResult
    llm_response: LLMResponse
    keywords: List[str] = field(default_factory=list)


class ValidationPipeline:
    """
    Wires the validation stages together.

    Collaborators default to the SQLite code store and the configured
    provider chain; pass your own to use another database or in tests.
    """

    def __init__(
        self,
        query_fn: Optional[QueryFunction] = None,
        template_provider: Optional[TemplateProvider] = None,
        llm_client: Optional[LLMFallbackClient] = None,
        settings: Optional[BaseSettingsConfig] = None
    ):
        self.settings = settings or base_settings

        if query_fn is None or template_provider is None:
            store = MedicalCodeStore(self.settings.CODE_DB_PATH)
            query_fn = query_fn or store.query
            template_provider = template_provider or store.get_active_prompt_template

        self.query_fn = query_fn
        self.template_provider = template_provider
        self._llm_client = llm_client

    @property
    def llm_client(self) -> LLMFallbackClient:
        # Built on first use so a pipeline can be created without credentials
        if self._llm_client is None:
            self._llm_client = create_provider_chain()
        return self._llm_client

    async def build_prompt(self, dictation_text: str, is_override: bool = False) -> str:
        """Prompt for a dictation, without calling a provider."""
        prompt, _ = await self._build_prompt(dictation_text, is_override)
        return prompt

    async def _build_prompt(self, dictation_text: str, is_override: bool):
        text = dictation_text or ""
        sanitized = strip_phi(text) if self.settings.SANITIZE_PHI else text

        keywords = extract_medical_keywords(text, self.settings.keyword_procedure_prefixes)
        template = await asyncio.to_thread(self.template_provider)
        context = await generate_database_context(keywords, self.query_fn, self.settings)

        prompt = construct_prompt(template, sanitized, context, is_override=is_override)
        return prompt, keywords

    @log_performance(logger, "Order validation")
    async def validate_detailed(self, dictation_text: str, is_override: bool = False) -> ValidationOutcome:
        """
        Validate a dictation and return the LLM call details with the result.

        Raises:
            AllProvidersFailedError: every provider failed (map to 503)
            ConfigurationError: missing credentials or prompt template
            DatabaseUnavailableError: code database unreachable
        """
        prompt, keywords = await self._build_prompt(dictation_text, is_override)

        response = await self.llm_client.call(prompt)
        result = process_llm_response(response.content, self.settings.fallback_procedure_prefixes)

        logger.info(
            f"Validation complete: status={result.status.value}, score={result.compliance_score}, "
            f"provider={response.provider}, tokens={response.total_tokens}, "
            f"latency={response.latency_ms:.0f}ms, override={is_override}",
            extra={"provider": response.provider}
        )
        return ValidationOutcome(result=result, llm_response=response, keywords=keywords)

    async def validate(self, dictation_text: str, is_override: bool = False) -> ValidationResult:
        """Validate a dictation. See validate_detailed for errors raised."""
        outcome = await self.validate_detailed(dictation_text, is_override)
        return outcome.result


async def validate(
    dictation_text: str,
    is_override: bool = False,
    pipeline: Optional[ValidationPipeline] = None
) -> ValidationResult:
    """Validate a dictation with a default (or given) pipeline."""
    pipeline = pipeline or ValidationPipeline()
    return await pipeline.validate(dictation_text, is_override)

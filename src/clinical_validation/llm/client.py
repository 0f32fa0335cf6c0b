# ============================================================================
# src/clinical_validation/llm/client.py
# ============================================================================
"""
LLM Client Factory

Builds provider clients from LLMSettings and assembles the fallback chain
in LLM_PROVIDER_ORDER. Providers without an API key are skipped.

Usage:
    from clinical_validation.llm import create_provider_chain

    chain = create_provider_chain()
    response = await chain.call(prompt)
"""

import logging
from typing import List, Optional

from ..config import llm_settings, LLMSettings
from ..utils.exceptions import ConfigurationError
from .base import BaseLLMClient
from .anthropic_client import AnthropicClient
from .openai_compatible import OpenAICompatibleClient
from .fallback import LLMFallbackClient

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("anthropic", "grok", "openai")


def create_provider_client(name: str, settings: Optional[LLMSettings] = None) -> BaseLLMClient:
    """
    Create a single provider client.

    Args:
        name: "anthropic" | "grok" | "openai"
        settings: LLM settings (default: llm_settings)

    Raises:
        ConfigurationError: unknown provider name
    """
    settings = settings or llm_settings
    name = name.strip().lower()

    if name == "anthropic":
        return AnthropicClient(
            api_key=settings.ANTHROPIC_API_KEY,
            model_name=settings.ANTHROPIC_MODEL_NAME,
            api_url=settings.ANTHROPIC_API_URL,
            timeout=settings.ANTHROPIC_TIMEOUT,
            max_tokens=settings.LLM_MAX_TOKENS,
        )
    if name == "grok":
        return OpenAICompatibleClient(
            provider_name="grok",
            api_key=settings.GROK_API_KEY,
            model_name=settings.GROK_MODEL_NAME,
            api_url=settings.GROK_API_URL,
            timeout=settings.GROK_TIMEOUT,
            max_tokens=settings.LLM_MAX_TOKENS,
        )
    if name == "openai":
        return OpenAICompatibleClient(
            provider_name="openai",
            api_key=settings.OPENAI_API_KEY,
            model_name=settings.OPENAI_MODEL_NAME,
            api_url=settings.OPENAI_API_URL,
            timeout=settings.OPENAI_TIMEOUT,
            max_tokens=settings.LLM_MAX_TOKENS,
        )

    raise ConfigurationError(
        f"Unknown LLM provider '{name}'. Supported: {', '.join(SUPPORTED_PROVIDERS)}"
    )


def create_provider_chain(settings: Optional[LLMSettings] = None) -> LLMFallbackClient:
    """
    Build the fallback chain from configuration.

    Raises:
        ConfigurationError: no provider has an API key
    """
    settings = settings or llm_settings
    providers: List[BaseLLMClient] = []

    for name in settings.provider_order:
        client = create_provider_client(name, settings)
        if not client.api_key:
            logger.warning(f"Skipping LLM provider {name}: no API key configured")
            continue
        providers.append(client)

    if not providers:
        raise ConfigurationError(
            "No LLM providers configured. Set at least one of "
            "ANTHROPIC_API_KEY, GROK_API_KEY or OPENAI_API_KEY."
        )

    logger.info(f"LLM provider chain: {' -> '.join(p.provider_name for p in providers)}")
    return LLMFallbackClient(providers)

# ============================================================================
# src/clinical_validation/llm/__init__.py
# ============================================================================
"""
LLM provider clients and the ordered fallback chain.
"""

from .base import BaseLLMClient
from .anthropic_client import AnthropicClient
from .openai_compatible import OpenAICompatibleClient
from .fallback import LLMFallbackClient
from .client import create_provider_client, create_provider_chain, SUPPORTED_PROVIDERS

__all__ = [
    "BaseLLMClient",
    "AnthropicClient",
    "OpenAICompatibleClient",
    "LLMFallbackClient",
    "create_provider_client",
    "create_provider_chain",
    "SUPPORTED_PROVIDERS",
]

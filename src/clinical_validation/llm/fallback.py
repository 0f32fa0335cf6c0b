# ============================================================================
# src/clinical_validation/llm/fallback.py
# ============================================================================
"""
LLM Fallback Chain

Tries providers strictly in order, one at a time, with no retries. The
first successful response wins. A ConfigurationError is fatal and stops
the chain; any other provider failure moves on to the next provider.
"""

import logging
from typing import List, Sequence, Tuple

from ..models import LLMResponse
from ..utils.exceptions import AllProvidersFailedError, ConfigurationError
from .base import BaseLLMClient

logger = logging.getLogger(__name__)


class LLMFallbackClient:
    """
    Ordered provider chain.

    Usage:
        chain = LLMFallbackClient([anthropic, grok, openai])
        response = await chain.call(prompt)
    """

    def __init__(self, providers: Sequence[BaseLLMClient]):
        if not providers:
            raise ConfigurationError("No LLM providers configured")
        self.providers = list(providers)

    @property
    def provider_names(self) -> List[str]:
        return [provider.provider_name for provider in self.providers]

    async def call(self, prompt: str) -> LLMResponse:
        """
        Get a completion from the first provider that succeeds.

        Raises:
            AllProvidersFailedError: every provider failed
            ConfigurationError: a provider is misconfigured
        """
        failures: List[Tuple[str, BaseException]] = []

        for provider in self.providers:
            name = provider.provider_name
            try:
                response = await provider.generate(prompt)
            except ConfigurationError:
                raise
            except Exception as e:
                logger.warning(
                    f"LLM provider {name} failed, trying next provider: {e}",
                    extra={"provider": name}
                )
                failures.append((name, e))
                continue

            usage = response.usage
            logger.info(
                f"LLM call succeeded via {name} ({response.model}) in {response.latency_ms:.0f}ms"
                + (f", {usage.total_tokens} tokens" if usage else ""),
                extra={"provider": name}
            )
            return response

        logger.error(f"All LLM providers failed: {', '.join(name for name, _ in failures)}")
        raise AllProvidersFailedError(failures)

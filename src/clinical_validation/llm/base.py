# ============================================================================
# src/clinical_validation/llm/base.py
# ============================================================================
"""
Base LLM Provider Client

Every provider is a single HTTP POST that returns a JSON envelope. A
subclass supplies the request shape and knows where the content and usage
live in the envelope; generate() owns transport, timeout and error mapping.

Each call opens its own aiohttp session inside `async with`, so a failed
attempt has released its connection before the fallback chain moves on.
"""

import time
import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

import aiohttp

from ..models import LLMResponse, TokenUsage
from ..utils.exceptions import ConfigurationError, ProviderError


class BaseLLMClient(ABC):
    """
    Abstract base class for LLM provider clients.

    Subclasses implement:
    - provider_name: short name used in logs and failure reports
    - build_request(): headers and JSON body for a prompt
    - parse_response(): content and usage from the decoded envelope
    """

    def __init__(
        self,
        api_key: Optional[str],
        model_name: str,
        api_url: str,
        timeout: float = 30.0,
        max_tokens: int = 4000
    ):
        self.api_key = api_key
        self.model_name = model_name
        self.api_url = api_url
        self.timeout = timeout
        self.max_tokens = max_tokens
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    @abstractmethod
    def provider_name(self) -> str:
        pass

    @abstractmethod
    def build_request(self, prompt: str) -> Tuple[Dict[str, str], Dict[str, Any]]:
        """Return (headers, json_body) for a single-turn user prompt."""
        pass

    @abstractmethod
    def parse_response(self, data: Dict[str, Any]) -> Tuple[str, Optional[TokenUsage]]:
        """
        Pull content and usage out of the provider envelope.

        Raises KeyError / IndexError / TypeError on an unexpected shape.
        """
        pass

    async def _post(self, headers: Dict[str, str], payload: Dict[str, Any]) -> Dict[str, Any]:
        async with aiohttp.ClientSession() as session:
            async with session.post(self.api_url, headers=headers, json=payload) as response:
                if response.status < 200 or response.status >= 300:
                    error_text = await response.text()
                    raise ProviderError(
                        f"{self.provider_name} API error: {response.status} {response.reason} - {error_text[:200]}",
                        self.provider_name
                    )
                return await response.json(content_type=None)

    async def generate(self, prompt: str) -> LLMResponse:
        """
        Send prompt to the provider.

        Returns:
            LLMResponse with content, usage (when reported) and latency

        Raises:
            ConfigurationError: no API key configured
            ProviderError: network, HTTP, timeout or envelope failure
        """
        if not self.api_key:
            raise ConfigurationError(f"{self.provider_name} API key not set")

        headers, payload = self.build_request(prompt)
        start_time = time.time()

        try:
            data = await asyncio.wait_for(self._post(headers, payload), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise ProviderError(
                f"{self.provider_name} request timed out after {self.timeout}s", self.provider_name
            ) from e
        except aiohttp.ClientError as e:
            raise ProviderError(f"{self.provider_name} request failed: {e}", self.provider_name) from e
        except ValueError as e:
            # Body was not JSON
            raise ProviderError(f"{self.provider_name} returned invalid JSON: {e}", self.provider_name) from e

        try:
            content, usage = self.parse_response(data)
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise ProviderError(
                f"{self.provider_name} returned an unexpected response shape: {e!r}", self.provider_name
            ) from e

        if not isinstance(content, str):
            raise ProviderError(f"{self.provider_name} returned non-text content", self.provider_name)

        latency_ms = (time.time() - start_time) * 1000
        return LLMResponse(
            provider=self.provider_name,
            model=self.model_name,
            content=content,
            usage=usage,
            latency_ms=latency_ms,
        )

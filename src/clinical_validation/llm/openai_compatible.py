# ============================================================================
# src/clinical_validation/llm/openai_compatible.py
# ============================================================================
"""
OpenAI-compatible chat completions client.

Serves both OpenAI and Grok (x.ai exposes the same envelope); the two
differ only in name, endpoint, model and key.
"""

from typing import Any, Dict, Optional, Tuple

from ..models import TokenUsage
from .base import BaseLLMClient


class OpenAICompatibleClient(BaseLLMClient):

    def __init__(self, provider_name: str, **kwargs):
        super().__init__(**kwargs)
        self._provider_name = provider_name

    @property
    def provider_name(self) -> str:
        return self._provider_name

    def build_request(self, prompt: str) -> Tuple[Dict[str, str], Dict[str, Any]]:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key or ''}",
        }
        payload = {
            "model": self.model_name,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.max_tokens,
        }
        return headers, payload

    def parse_response(self, data: Dict[str, Any]) -> Tuple[str, Optional[TokenUsage]]:
        content = data["choices"][0]["message"]["content"]

        usage = None
        raw_usage = data.get("usage")
        if isinstance(raw_usage, dict):
            try:
                prompt_tokens = int(raw_usage.get("prompt_tokens") or 0)
                completion_tokens = int(raw_usage.get("completion_tokens") or 0)
                total_tokens = raw_usage.get("total_tokens")
                usage = TokenUsage(
                    prompt_tokens=prompt_tokens,
                    completion_tokens=completion_tokens,
                    total_tokens=int(total_tokens) if total_tokens is not None else prompt_tokens + completion_tokens,
                )
            except (TypeError, ValueError) as e:
                self.logger.warning(f"Ignoring unreadable usage block: {e}")

        return content, usage

# ============================================================================
# src/clinical_validation/llm/anthropic_client.py
# ============================================================================
"""
Anthropic Messages API client.
"""

from typing import Any, Dict, Optional, Tuple

from ..models import TokenUsage
from .base import BaseLLMClient

ANTHROPIC_VERSION = "2023-06-01"


class AnthropicClient(BaseLLMClient):

    @property
    def provider_name(self) -> str:
        return "anthropic"

    def build_request(self, prompt: str) -> Tuple[Dict[str, str], Dict[str, Any]]:
        headers = {
            "Content-Type": "application/json",
            "x-api-key": self.api_key or "",
            "anthropic-version": ANTHROPIC_VERSION,
        }
        payload = {
            "model": self.model_name,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        return headers, payload

    def parse_response(self, data: Dict[str, Any]) -> Tuple[str, Optional[TokenUsage]]:
        content = data["content"][0]["text"]

        usage = None
        raw_usage = data.get("usage")
        if isinstance(raw_usage, dict):
            try:
                prompt_tokens = int(raw_usage.get("input_tokens") or 0)
                completion_tokens = int(raw_usage.get("output_tokens") or 0)
                usage = TokenUsage(
                    prompt_tokens=prompt_tokens,
                    completion_tokens=completion_tokens,
                    total_tokens=prompt_tokens + completion_tokens,
                )
            except (TypeError, ValueError) as e:
                self.logger.warning(f"Ignoring unreadable usage block: {e}")

        return content, usage

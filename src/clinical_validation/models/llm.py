# ============================================================================
# src/clinical_validation/models/llm.py
# ============================================================================
"""
LLM Call Results

One LLMResponse per successful provider call. Usage is optional because
not every provider reports it.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class TokenUsage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "promptTokens": self.prompt_tokens,
            "completionTokens": self.completion_tokens,
            "totalTokens": self.total_tokens,
        }


@dataclass
class LLMResponse:
    provider: str
    model: str
    content: str
    usage: Optional[TokenUsage] = None
    latency_ms: float = 0.0

    @property
    def total_tokens(self) -> Optional[int]:
        return self.usage.total_tokens if self.usage else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "provider": self.provider,
            "model": self.model,
            "content": self.content,
            "usage": self.usage.to_dict() if self.usage else None,
            "latencyMs": round(self.latency_ms, 1),
        }

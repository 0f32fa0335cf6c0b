# ============================================================================
# src/clinical_validation/config/llm_config.py
# ============================================================================
"""
LLM Provider Configuration
- Fallback order
- Credentials, model names and endpoints per provider
- Per-provider request timeout
- Generation limits
"""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    LLM_PROVIDER_ORDER: str = Field(
        default="anthropic,grok,openai",
        description="Comma-separated provider names, tried strictly in this order"
    )
    LLM_MAX_TOKENS: int = Field(
        default=4000,
        description="Maximum tokens the model may generate per validation"
    )

    # Anthropic
    ANTHROPIC_API_KEY: Optional[str] = Field(default=None, description="Anthropic API key")
    ANTHROPIC_MODEL_NAME: str = Field(
        default="claude-3-7-sonnet-20250219",
        description="Anthropic model identifier"
    )
    ANTHROPIC_API_URL: str = Field(default="https://api.anthropic.com/v1/messages")
    ANTHROPIC_TIMEOUT: float = Field(default=30.0, description="Seconds per Anthropic call")

    # Grok (x.ai, OpenAI-compatible envelope)
    GROK_API_KEY: Optional[str] = Field(default=None, description="x.ai API key")
    GROK_MODEL_NAME: str = Field(default="grok-3", description="Grok model identifier")
    GROK_API_URL: str = Field(default="https://api.x.ai/v1/chat/completions")
    GROK_TIMEOUT: float = Field(default=30.0, description="Seconds per Grok call")

    # OpenAI
    OPENAI_API_KEY: Optional[str] = Field(default=None, description="OpenAI API key")
    OPENAI_MODEL_NAME: str = Field(default="gpt-4o", description="OpenAI model identifier")
    OPENAI_API_URL: str = Field(default="https://api.openai.com/v1/chat/completions")
    OPENAI_TIMEOUT: float = Field(default=30.0, description="Seconds per OpenAI call")

    @property
    def provider_order(self) -> List[str]:
        return [name.strip().lower() for name in self.LLM_PROVIDER_ORDER.split(",") if name.strip()]


llm_settings = LLMSettings()

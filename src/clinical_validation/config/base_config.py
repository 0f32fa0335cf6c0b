# ============================================================================
# src/clinical_validation/config/base_config.py
# ============================================================================
"""
Base Configuration
- Medical code database location
- Context row limits (bounds prompt size)
- Prompt defaults
- PHI sanitization toggle
- Procedure code heuristics
"""

from pathlib import Path
from typing import Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseSettingsConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Medical code database (ICD-10, CPT, mappings, narrative docs, prompt templates)
    CODE_DB_PATH: Path = Field(
        default=Path("data/medical_codes.db"),
        description="SQLite database holding the medical code tables"
    )

    # Context row limits
    DIAGNOSIS_CONTEXT_LIMIT: int = Field(
        default=10,
        description="Max ICD-10 rows placed in the database context"
    )
    PROCEDURE_CONTEXT_LIMIT: int = Field(
        default=10,
        description="Max CPT rows placed in the database context"
    )
    MAPPING_CONTEXT_LIMIT: int = Field(
        default=10,
        description="Max ICD-10 to CPT mapping rows placed in the database context"
    )
    NARRATIVE_CONTEXT_LIMIT: int = Field(
        default=5,
        description="Max narrative documents placed in the database context"
    )
    NARRATIVE_PREVIEW_CHARS: int = Field(
        default=1000,
        description="Characters of each narrative document included in the context"
    )

    # Prompt
    DEFAULT_WORD_LIMIT: int = Field(
        default=500,
        description="Word limit used when the active template does not define one"
    )

    # PHI
    SANITIZE_PHI: bool = Field(
        default=True,
        description="Strip identifiers from dictation before it is sent to a provider"
    )

    # Leading digits of 5-digit tokens treated as procedure (CPT) codes.
    # Radiology CPT codes sit in the 7xxxx range; flagged for domain review.
    KEYWORD_PROCEDURE_CODE_PREFIXES: str = Field(
        default="79",
        description="Leading digits accepted when pulling CPT codes out of dictation"
    )
    FALLBACK_PROCEDURE_CODE_PREFIXES: str = Field(
        default="7",
        description="Leading digits accepted when scraping CPT codes from malformed model output"
    )

    @staticmethod
    def _prefixes(value: str) -> Tuple[str, ...]:
        return tuple(ch for ch in value if ch.isdigit())

    @property
    def keyword_procedure_prefixes(self) -> Tuple[str, ...]:
        return self._prefixes(self.KEYWORD_PROCEDURE_CODE_PREFIXES)

    @property
    def fallback_procedure_prefixes(self) -> Tuple[str, ...]:
        return self._prefixes(self.FALLBACK_PROCEDURE_CODE_PREFIXES)


# Global instance
base_settings = BaseSettingsConfig()

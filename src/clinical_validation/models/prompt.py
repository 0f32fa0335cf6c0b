# ============================================================================
# src/clinical_validation/models/prompt.py
# ============================================================================

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass
class PromptTemplate:
    """Active validation prompt as stored in the prompt_templates table."""
    content_template: str
    id: Optional[int] = None
    name: str = "default"
    version: Optional[str] = None
    word_limit: Optional[int] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> 'PromptTemplate':
        word_limit = row.get("word_limit")
        return cls(
            content_template=row.get("content_template") or "",
            id=row.get("id"),
            name=row.get("name") or "default",
            version=str(row["version"]) if row.get("version") is not None else None,
            word_limit=int(word_limit) if word_limit is not None else None,
        )

# ============================================================================
# src/clinical_validation/database/code_store.py
# ============================================================================
"""
Medical Code Store

Read-only SQLite access to the medical code tables:
- medical_icd10_codes
- medical_cpt_codes
- medical_cpt_icd10_mappings
- medical_icd10_markdown_docs
- prompt_templates

Opens one connection per query, so a store instance can be shared across
threads (the context builder runs its lookups via asyncio.to_thread).
"""

import sqlite3
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from ..config import base_settings
from ..models import PromptTemplate
from ..utils.exceptions import DatabaseUnavailableError, PromptTemplateNotFoundError

logger = logging.getLogger(__name__)

# query(sql, params) -> rows as dicts
QueryFunction = Callable[[str, Sequence[Any]], List[Dict[str, Any]]]
TemplateProvider = Callable[[], PromptTemplate]

ACTIVE_TEMPLATE_QUERY = """
    SELECT id, name, type, version, content_template, word_limit
    FROM prompt_templates
    WHERE type = 'default' AND active = 1
    ORDER BY created_at DESC
    LIMIT 1
"""


class MedicalCodeStore:
    """
    SQLite-backed implementation of the query and template interfaces
    consumed by the validation pipeline.
    """

    def __init__(self, db_path: Optional[Union[str, Path]] = None):
        self.db_path = Path(db_path) if db_path is not None else base_settings.CODE_DB_PATH

    def _connect(self) -> sqlite3.Connection:
        if not self.db_path.exists():
            raise DatabaseUnavailableError(f"Medical code database not found at {self.db_path}")

        try:
            conn = sqlite3.connect(f"file:{self.db_path}?mode=ro", uri=True)
        except sqlite3.Error as e:
            raise DatabaseUnavailableError(f"Cannot open medical code database: {e}") from e

        conn.row_factory = sqlite3.Row
        return conn

    def query(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """
        Run a read query and return rows as dicts.

        Raises:
            DatabaseUnavailableError: database file missing or unopenable
            sqlite3.Error: the statement itself failed
        """
        conn = self._connect()
        try:
            cursor = conn.execute(sql, tuple(params))
            return [dict(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def get_active_prompt_template(self) -> PromptTemplate:
        """
        Most recently created active default template.

        Raises:
            PromptTemplateNotFoundError: no active default template exists
        """
        rows = self.query(ACTIVE_TEMPLATE_QUERY)
        if not rows:
            raise PromptTemplateNotFoundError("No active default prompt template found")

        template = PromptTemplate.from_row(rows[0])
        logger.debug(f"Using prompt template {template.name} (version {template.version})")
        return template

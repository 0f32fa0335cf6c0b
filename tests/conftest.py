# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import sqlite3
from pathlib import Path
from typing import List, Optional

import pytest

from clinical_validation.config import BaseSettingsConfig
from clinical_validation.database import MedicalCodeStore
from clinical_validation.llm import BaseLLMClient
from clinical_validation.models import LLMResponse, TokenUsage


SCHEMA = """
CREATE TABLE medical_icd10_codes (
    icd10_code TEXT PRIMARY KEY,
    description TEXT,
    clinical_notes TEXT,
    keywords TEXT,
    imaging_modalities TEXT,
    primary_imaging TEXT
);
CREATE TABLE medical_cpt_codes (
    cpt_code TEXT PRIMARY KEY,
    description TEXT,
    modality TEXT,
    body_part TEXT
);
CREATE TABLE medical_cpt_icd10_mappings (
    id INTEGER PRIMARY KEY,
    icd10_code TEXT,
    cpt_code TEXT,
    appropriateness INTEGER,
    evidence_source TEXT,
    refined_justification TEXT
);
CREATE TABLE medical_icd10_markdown_docs (
    id INTEGER PRIMARY KEY,
    icd10_code TEXT,
    content TEXT
);
CREATE TABLE prompt_templates (
    id INTEGER PRIMARY KEY,
    name TEXT,
    type TEXT,
    version TEXT,
    content_template TEXT,
    word_limit INTEGER,
    active INTEGER,
    created_at TEXT
);
"""

TEMPLATE_CONTENT = (
    "You are validating an imaging order.\n\n"
    "Reference data:\n{{DATABASE_CONTEXT}}\n\n"
    "Dictation:\n{{DICTATION_TEXT}}\n\n"
    "Keep feedback under {{WORD_LIMIT}} words and answer in JSON."
)

HEADACHE_DOC = (
    "# Headache\n\nNew onset headache in adults warrants neuroimaging when red flags are present. "
    "MRI brain is preferred over CT head in the non-emergent setting."
)


@pytest.fixture
def code_db_path(tmp_path) -> Path:
    """Temporary medical code database with a small, known data set."""
    db_path = tmp_path / "medical_codes.db"
    conn = sqlite3.connect(str(db_path))
    conn.executescript(SCHEMA)

    conn.executemany(
        "INSERT INTO medical_icd10_codes VALUES (?, ?, ?, ?, ?, ?)",
        [
            ("R51", "Headache", "Evaluate for red flag symptoms", "headache, cephalgia",
             "MRI brain, CT head", "MRI brain without contrast"),
            ("M54.5", "Low back pain", None, "lumbar, back pain", None, None),
        ],
    )
    conn.executemany(
        "INSERT INTO medical_cpt_codes VALUES (?, ?, ?, ?)",
        [
            ("70551", "MRI brain without contrast", "MRI", "brain"),
            ("70450", "CT head without contrast", "CT", "head"),
            ("72148", "MRI lumbar spine without contrast", "MRI", "lumbar spine"),
        ],
    )
    conn.executemany(
        "INSERT INTO medical_cpt_icd10_mappings VALUES (?, ?, ?, ?, ?, ?)",
        [
            (1, "R51", "70551", 7, "ACR Appropriateness Criteria", "New headache with red flags"),
            (2, "R51", "70450", None, None, None),
            (3, "M54.5", "72148", 4, None, None),
        ],
    )
    conn.execute(
        "INSERT INTO medical_icd10_markdown_docs VALUES (?, ?, ?)",
        (1, "R51", HEADACHE_DOC),
    )
    conn.executemany(
        "INSERT INTO prompt_templates VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
        [
            (1, "Old default", "default", "1", "OLD {{DICTATION_TEXT}}", 100, 1, "2024-01-01 00:00:00"),
            (2, "Current default", "default", "2", TEMPLATE_CONTENT, 250, 1, "2024-06-01 00:00:00"),
            (3, "Draft", "default", "3", "DRAFT {{DICTATION_TEXT}}", 50, 0, "2024-09-01 00:00:00"),
            (4, "Override", "override", "1", "OVERRIDE {{DICTATION_TEXT}}", 50, 1, "2024-09-01 00:00:00"),
        ],
    )
    conn.commit()
    conn.close()
    return db_path


@pytest.fixture
def code_store(code_db_path) -> MedicalCodeStore:
    return MedicalCodeStore(code_db_path)


@pytest.fixture
def test_settings(code_db_path) -> BaseSettingsConfig:
    """Settings isolated from any local .env file."""
    return BaseSettingsConfig(_env_file=None, CODE_DB_PATH=code_db_path)


class StubProvider(BaseLLMClient):
    """Provider that returns canned content or raises, and records its calls."""

    def __init__(
        self,
        name: str,
        content: Optional[str] = None,
        error: Optional[Exception] = None,
        call_log: Optional[List[str]] = None,
        usage: Optional[TokenUsage] = None
    ):
        super().__init__(api_key="test-key", model_name=f"{name}-model", api_url="http://localhost/unused")
        self._name = name
        self.content = content
        self.error = error
        self.usage = usage
        self.call_log = call_log if call_log is not None else []
        self.prompts: List[str] = []

    @property
    def provider_name(self) -> str:
        return self._name

    def build_request(self, prompt):
        return {}, {"prompt": prompt}

    def parse_response(self, data):
        return data.get("content", ""), None

    async def generate(self, prompt: str) -> LLMResponse:
        self.call_log.append(self._name)
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return LLMResponse(
            provider=self._name,
            model=self.model_name,
            content=self.content or "",
            usage=self.usage,
            latency_ms=1.0,
        )


@pytest.fixture
def stub_provider_factory():
    """Build StubProviders sharing one call log."""
    call_log: List[str] = []

    def factory(name: str, content: Optional[str] = None, error: Optional[Exception] = None, usage=None):
        return StubProvider(name, content=content, error=error, call_log=call_log, usage=usage)

    factory.call_log = call_log
    return factory


@pytest.fixture
def canonical_response_json() -> str:
    return """{
  "validationStatus": "appropriate",
  "complianceScore": 8,
  "feedback": "MRI brain is appropriate for new onset headache with red flags.",
  "suggestedICD10Codes": [{"code": "R51", "description": "Headache"}],
  "suggestedCPTCodes": [{"code": "70551", "description": "MRI brain without contrast"}],
  "internalReasoning": "Red flag symptoms documented."
}"""


@pytest.fixture
def sample_dictation() -> str:
    return (
        "Patient John Smith, 45 y/o with new onset headache and visual changes. "
        "Rule out mass. Request MRI brain without contrast. Dx R51."
    )


@pytest.fixture
def sample_emr_text() -> str:
    return """
    Patient Information
    ------------------
    Name: John Doe
    DOB: 01/01/1980
    Address: 123 Main St, Springfield, IL, 62701
    Phone: (555) 123-4567
    Email: john.doe@example.com

    Insurance Information
    -------------------
    Insurance Provider: Blue Cross Blue Shield
    Policy Number: ABC123456789
    Group Number: GRP987654
    Policy Holder: Jane Doe
    Relationship: Spouse
    """

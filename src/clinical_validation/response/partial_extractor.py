# ============================================================================
# src/clinical_validation/response/partial_extractor.py
# ============================================================================
"""
Partial Information Extraction

Last-resort scrape of model output that could not be parsed or validated.
Pulls whatever looks usable straight from the raw text:
- complianceScore value
- feedback string
- ICD-10 shaped tokens
- 5-digit tokens with a configured procedure-code leading digit
"""

import re
import json
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..config import base_settings
from ..models import CodeSuggestion
from .normalizer import MAX_COMPLIANCE_SCORE, MIN_COMPLIANCE_SCORE

_SCORE = re.compile(
    r'"?\b(?:compliance[\s_]?score|compliance|score)"?[\s:=]+"?(\d+)', re.IGNORECASE
)
# Quoted JSON value first, then the unquoted rest of a "Feedback: ..." line
_FEEDBACK = re.compile(
    r'"?\bfeedback"?\s*[:=](?:\s*"((?:[^"\\]|\\.)*)"|[ \t]*([^\s"][^\n]*))', re.IGNORECASE
)
_ICD10 = re.compile(r'\b[A-Z]\d{2}(?:\.\d{1,2})?\b')
_FIVE_DIGITS = re.compile(r'\b\d{5}\b')


@dataclass
class PartialInformation:
    compliance_score: Optional[int] = None
    feedback: Optional[str] = None
    diagnosis_codes: List[CodeSuggestion] = field(default_factory=list)
    procedure_codes: List[CodeSuggestion] = field(default_factory=list)


def _unique_codes(tokens) -> List[CodeSuggestion]:
    result: List[CodeSuggestion] = []
    seen = set()
    for token in tokens:
        if token not in seen:
            seen.add(token)
            result.append(CodeSuggestion(code=token))
    return result


def _unescape(value: str) -> str:
    try:
        return json.loads(f'"{value}"')
    except ValueError:
        return value


def extract_partial_information(
    content: str,
    procedure_prefixes: Optional[Sequence[str]] = None
) -> PartialInformation:
    """
    Scrape score, feedback and codes from unparseable model output.

    Args:
        content: Raw model output
        procedure_prefixes: Leading digits of 5-digit tokens kept as CPT codes
            (default from FALLBACK_PROCEDURE_CODE_PREFIXES)
    """
    info = PartialInformation()
    if not isinstance(content, str) or not content:
        return info

    if procedure_prefixes is None:
        procedure_prefixes = base_settings.fallback_procedure_prefixes
    prefixes = tuple(procedure_prefixes)

    score_match = _SCORE.search(content)
    if score_match:
        score = int(score_match.group(1))
        info.compliance_score = max(MIN_COMPLIANCE_SCORE, min(MAX_COMPLIANCE_SCORE, score))

    feedback_match = _FEEDBACK.search(content)
    if feedback_match:
        quoted, bare = feedback_match.groups()
        feedback = _unescape(quoted) if quoted is not None else bare
        feedback = feedback.strip()
        info.feedback = feedback or None

    info.diagnosis_codes = _unique_codes(m.group(0) for m in _ICD10.finditer(content))
    info.procedure_codes = _unique_codes(
        m.group(0) for m in _FIVE_DIGITS.finditer(content)
        if prefixes and m.group(0).startswith(prefixes)
    )

    return info

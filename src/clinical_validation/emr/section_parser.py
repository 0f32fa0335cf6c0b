# ============================================================================
# src/clinical_validation/emr/section_parser.py
# ============================================================================
"""
EMR Section Splitting

Pasted EMR summaries are loosely structured: a header line ("Patient
Information", "=== PRIMARY INSURANCE ===") followed by label/value lines.
Every line after a header belongs to that section until the next header.
Lines before the first header go to "default".
"""

import re
import html
from typing import Dict, List, Optional, Pattern, Tuple

from ..models import EmrSections

# Checked in order; first match wins
SECTION_HEADER_PATTERNS: Tuple[Tuple[str, Pattern], ...] = (
    ("emergency", re.compile(
        r'^emergency\s+contacts?(?:\s+(?:information|info|details))?$', re.IGNORECASE)),
    ("patient", re.compile(
        r'^(?:patient(?:\s+(?:information|info|demographics|details))?|demographics)$', re.IGNORECASE)),
    ("insurance", re.compile(
        r'^(?:(?:primary|secondary)\s+)?(?:insurance|coverage|payer)'
        r'(?:\s+(?:information|info|details|coverage))?$', re.IGNORECASE)),
    ("provider", re.compile(
        r'^(?:(?:ordering|referring|primary\s+care|attending)\s+)?(?:provider|physician)'
        r'(?:\s+(?:information|info|details))?$', re.IGNORECASE)),
    ("encounter", re.compile(
        r'^(?:encounter|visit|appointment)(?:\s+(?:information|info|details))?$', re.IGNORECASE)),
)

_DECORATION_ONLY = re.compile(r'^[\s\-=_*#~.:|]*$')
_DECORATION_EDGES = re.compile(r'^[\s\-=_*#~|]+|[\s\-=_*#~|:]+$')


def decode_html_entities(text: str) -> str:
    """Decode &amp;, &nbsp;, &#39; etc. Non-breaking spaces become spaces."""
    return html.unescape(text).replace('\xa0', ' ')


def normalize_text(text: str) -> List[str]:
    """Decode entities, normalize line endings and whitespace, drop empty lines."""
    text = decode_html_entities(text)
    text = text.replace('\r\n', '\n').replace('\r', '\n')

    lines: List[str] = []
    for raw in text.split('\n'):
        line = re.sub(r'[ \t\f\v]+', ' ', raw).strip()
        if line and not _DECORATION_ONLY.match(line):
            lines.append(line)
    return lines


def match_section_header(line: str) -> Optional[str]:
    """Section name when the line is a header, else None."""
    candidate = _DECORATION_EDGES.sub('', line).strip()
    if not candidate:
        return None
    for name, pattern in SECTION_HEADER_PATTERNS:
        if pattern.match(candidate):
            return name
    return None


def split_sections(lines: List[str]) -> EmrSections:
    """Assign lines to sections. Header lines themselves are not kept."""
    sections: Dict[str, List[str]] = {}
    current = "default"

    for line in lines:
        header = match_section_header(line)
        if header is not None:
            current = header
            sections.setdefault(current, [])
            continue
        sections.setdefault(current, []).append(line)

    return EmrSections(sections=sections)

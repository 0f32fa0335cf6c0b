# ============================================================================
# src/clinical_validation/response/json_extraction.py
# ============================================================================
"""
JSON Extraction from Model Output

Models wrap their JSON in code fences or surround it with prose. The
candidate is picked in this order:
1. Content of the first fenced code block
2. First balanced top-level {...} span (string-aware brace matching)
3. The whole text

Parsing is strict json.loads. No repair is attempted; malformed output
goes to the partial-extraction fallback instead.
"""

import re
import json
from typing import Any, Dict, Optional

from ..utils.exceptions import ResponseParseError

_FENCED_BLOCK = re.compile(r'```(?:json|JSON)?\s*([\s\S]*?)\s*```')


def find_json_object_span(text: str) -> Optional[str]:
    """First balanced {...} in text, ignoring braces inside JSON strings."""
    start = text.find('{')
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        char = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif char == '\\':
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == '{':
            depth += 1
        elif char == '}':
            depth -= 1
            if depth == 0:
                return text[start:i + 1]

    return None


def extract_json_candidate(text: str) -> str:
    """Best guess at the JSON document inside model output."""
    if not text:
        return ""

    fenced = _FENCED_BLOCK.search(text)
    if fenced:
        return fenced.group(1).strip()

    span = find_json_object_span(text)
    if span is not None:
        return span.strip()

    return text.strip()


def parse_json_object(text: str) -> Dict[str, Any]:
    """
    Extract and strictly parse a JSON object from model output.

    Raises:
        ResponseParseError: no candidate parses, or it is not an object
    """
    candidate = extract_json_candidate(text)
    try:
        parsed = json.loads(candidate)
    except (json.JSONDecodeError, TypeError) as e:
        raise ResponseParseError(f"Failed to parse JSON from LLM response: {e}") from e

    if not isinstance(parsed, dict):
        raise ResponseParseError(
            f"Failed to parse JSON from LLM response: expected an object, got {type(parsed).__name__}"
        )
    return parsed

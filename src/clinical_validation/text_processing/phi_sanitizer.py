# ============================================================================
# src/clinical_validation/text_processing/phi_sanitizer.py
# ============================================================================
"""
PHI Sanitizer

Removes obvious identifiers from dictation before it leaves the process:
- MRNs, SSNs, phone numbers
- Dates (numeric and month-name)
- Capitalized full names
- Emails, URLs
- Street addresses, zip codes

This is a pattern-based pass, not a de-identification guarantee. Each
replacement runs over the output of the previous one, so the order below
matters (MRN before SSN/phone, address before zip).
"""

import re
from dataclasses import dataclass
from typing import Optional


@dataclass
class PHISanitizerOptions:
    """Switches for each replacement. All on by default."""
    sanitize_mrn: bool = True
    sanitize_ssn: bool = True
    sanitize_phone_numbers: bool = True
    sanitize_dates: bool = True
    sanitize_names: bool = True
    sanitize_emails: bool = True
    sanitize_urls: bool = True
    sanitize_addresses: bool = True
    sanitize_zip_codes: bool = True


_MRN = re.compile(r'\b[A-Z]{0,3}\d{5,10}\b')
_SSN = re.compile(r'\b\d{3}[-\s]?\d{2}[-\s]?\d{4}\b')

_PHONES = (
    re.compile(r'\b\d{3}[-\s]?\d{3}[-\s]?\d{4}\b'),
    re.compile(r'\(\d{3}\)\s*\d{3}[-\s]?\d{4}\b'),
    re.compile(r'\b1[-\s]?\d{3}[-\s]?\d{3}[-\s]?\d{4}\b'),
)

_DATES = (
    # 03/14/2024, 3-14-2024
    re.compile(r'\b(?:0?[1-9]|1[0-2])[/-](?:0?[1-9]|[12]\d|3[01])[/-](?:19|20)\d{2}\b'),
    # 2024-03-14
    re.compile(r'\b(?:19|20)\d{2}[/-](?:0?[1-9]|1[0-2])[/-](?:0?[1-9]|[12]\d|3[01])\b'),
    # March 14th, 2024
    re.compile(
        r'\b(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]* '
        r'(?:0?[1-9]|[12]\d|3[01])(?:st|nd|rd|th)?,? (?:19|20)\d{2}\b',
        re.IGNORECASE,
    ),
)

_NAMES = (
    # John Smith, John A. Smith
    re.compile(r'\b[A-Z][a-z]+(?:\s+[A-Z]\.?)?(?:\s+[A-Z][a-z]+)+\b'),
    # Smith, John
    re.compile(r'\b[A-Z][a-z]+,\s+[A-Z][a-z]+(?:\s+[A-Z]\.?)?\b'),
)

_EMAIL = re.compile(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b')
_URL = re.compile(r'https?://\S+')
_ADDRESS = re.compile(
    r'\b\d+\s+[A-Za-z\s]+(?:Avenue|Ave|Street|St|Road|Rd|Boulevard|Blvd|Drive|Dr'
    r'|Lane|Ln|Court|Ct|Way|Place|Pl|Terrace|Ter)\b',
    re.IGNORECASE,
)
_ZIP = re.compile(r'\b\d{5}(?:-\d{4})?\b')


def strip_phi(text: str, options: Optional[PHISanitizerOptions] = None) -> str:
    """
    Replace likely identifiers in text with bracketed placeholders.

    Args:
        text: Free text (dictation)
        options: Which replacements to apply (all by default)

    Returns:
        Text with identifiers replaced by [MRN], [SSN], [PHONE], [DATE],
        [NAME], [EMAIL], [URL], [ADDRESS] or [ZIP]
    """
    if not text:
        return text

    opts = options or PHISanitizerOptions()
    result = text

    if opts.sanitize_mrn:
        result = _MRN.sub('[MRN]', result)

    if opts.sanitize_ssn:
        result = _SSN.sub('[SSN]', result)

    if opts.sanitize_phone_numbers:
        for pattern in _PHONES:
            result = pattern.sub('[PHONE]', result)

    if opts.sanitize_dates:
        for pattern in _DATES:
            result = pattern.sub('[DATE]', result)

    if opts.sanitize_names:
        for pattern in _NAMES:
            result = pattern.sub('[NAME]', result)

    if opts.sanitize_emails:
        result = _EMAIL.sub('[EMAIL]', result)

    if opts.sanitize_urls:
        result = _URL.sub('[URL]', result)

    if opts.sanitize_addresses:
        result = _ADDRESS.sub('[ADDRESS]', result)

    if opts.sanitize_zip_codes:
        result = _ZIP.sub('[ZIP]', result)

    return result

# ============================================================================
# src/clinical_validation/emr/patterns.py
# ============================================================================
"""
EMR Field Patterns

Declarative rule tables for patient and insurance fields. Each rule is a
regex whose named groups are field names. Rules run in table order and
a field keeps the first value it receives. Within a rule, the first match
whose groups all survive normalization is used; a match with any invalid
group (bad state code, malformed zip) is skipped as a whole.

Normalizers return None to reject a captured value.
"""

import re
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Pattern, Sequence

from ..constants import VALID_STATES, INSURANCE_COMPANIES, RELATIONSHIP_MAP

logger = logging.getLogger(__name__)

Normalizer = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class FieldRule:
    name: str
    pattern: Pattern

    @property
    def fields(self) -> Sequence[str]:
        return tuple(self.pattern.groupindex)


def _rule(name: str, pattern: str, flags: int = re.IGNORECASE | re.MULTILINE) -> FieldRule:
    return FieldRule(name=name, pattern=re.compile(pattern, flags))


# Label followed by ":", "=", ">", "#" or "#:"
_SEP = r'\s*(?:#\s*[:=>]?|[:=>])\s*'

_STATE = r'(?P<state>[A-Z]{2})'
_ZIP = r'(?P<zip_code>\d{5}(?:-\d{4})?)\b'
_CITY = r"(?P<city>[A-Za-z][A-Za-z .'-]*?)"
_PHONE_BODY = r'\+?[(\d][\d \t().-]{8,}\d'

# =========================================================================
# PATIENT
# =========================================================================

PATIENT_RULES = (
    # Address: 123 Main St, Springfield, IL, 62701
    _rule(
        "labeled_full_address",
        r'\b(?:Street\s+Address|Address|Addr)' + _SEP
        + r'(?P<address>[^,|\n]+?)\s*,\s*' + _CITY + r'\s*,\s*'
        + r'(?P<state>[A-Za-z]{2})\s*,?\s*' + _ZIP,
    ),
    # Address: 123 Main St
    _rule(
        "labeled_address",
        r'\b(?:Street\s+Address|Address|Addr)' + _SEP
        + r'(?P<address>[^,|\n]{5,100}?)(?=\s*(?:,|\||\bCity\b|\bState\b|\bZip\b|\bPhone\b|\bEmail\b|$))',
    ),
    # Contact: 123 Main St | ...
    _rule(
        "contact_line_address",
        r'\bContact:\s*(?P<address>\d[^|\n]+?)\s*(?:\||$)',
    ),
    # Springfield, IL 62701
    _rule(
        "city_state_zip",
        _CITY + r'\s*,\s*' + _STATE + r'\s*,?\s*' + _ZIP,
        re.MULTILINE,
    ),
    # City: Springfield
    _rule(
        "labeled_city",
        r'\b(?:City|Town)' + _SEP + _CITY + r'(?=\s*(?:,|\||\bState\b|\bST\b|\bZip\b|$))',
    ),
    # State: IL
    _rule(
        "labeled_state",
        r'\b(?:State|ST|Province)\s*[:=>]\s*(?P<state>[A-Za-z]{2})\b',
    ),
    # IL 62701
    _rule(
        "state_zip",
        r'\b' + _STATE + r'\s+' + _ZIP,
        re.MULTILINE,
    ),
    # Zip: 62701
    _rule(
        "labeled_zip",
        r'\b(?:ZIP\s+Code|Zip|Postal\s+Code)' + _SEP + _ZIP,
    ),
    # Phone: (555) 123-4567, Cell #: 555.123.4567
    _rule(
        "labeled_phone",
        r'\b(?:Telephone|Phone|Tel|Ph|Home|Work|Cell|Mobile|Office|Primary|Main)'
        r'(?:\s*Phone)?(?:\s*(?:No\.?|Number))?' + _SEP + r'(?P<phone>' + _PHONE_BODY + r')',
    ),
    # | 555-123-4567 |
    _rule(
        "piped_phone",
        r'\|\s*(?P<phone>' + _PHONE_BODY + r')\s*(?=\||$)',
        re.MULTILINE,
    ),
    # (555) 123-4567 anywhere
    _rule(
        "parenthesized_phone",
        r'(?P<phone>\(\d{3}\)\s*\d{3}[-.\s]?\d{4})\b',
        re.MULTILINE,
    ),
    # 555-123-4567 / 555.123.4567 anywhere
    _rule(
        "separated_phone",
        r'\b(?P<phone>\d{3}[-.]\d{3}[-.]\d{4})\b',
        re.MULTILINE,
    ),
    _rule(
        "email",
        r'(?P<email>[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,})',
    ),
)

# =========================================================================
# INSURANCE
# =========================================================================

_INSURER_STOP = (
    r'(?=\s*(?:\||\bPolicy\b|\bPol\b|\bMember\b|\bID\b|\bGroup\b|\bGrp\b'
    r'|\bSubscriber\b|\bAuth\w*\b|$))'
)
_IDENTIFIER = r'[A-Za-z0-9][A-Za-z0-9-]*'

INSURANCE_RULES = (
    # Insurance Provider: Blue Cross Blue Shield
    _rule(
        "labeled_insurer",
        r'\b(?:Primary\s+Insurance|Secondary\s+Insurance|Insurance\s+Provider|Insurance\s+Company'
        r'|Insurance\s+Carrier|Insurance\s+Plan|Insurance\s+Name|Plan\s+Name|Carrier|Insurer|Payer)'
        + _SEP + r"(?P<insurer_name>[A-Za-z][A-Za-z &().'-]*?)" + _INSURER_STOP,
    ),
    # Ins: BCBS / Insurance: Aetna
    _rule(
        "short_insurer",
        r'\b(?:Insurance|Ins)' + _SEP + r"(?P<insurer_name>[A-Za-z][A-Za-z &().'-]*?)" + _INSURER_STOP,
    ),
    # Aetna PPO - W123456 (Group: 789)
    _rule(
        "epic_insurer",
        r"^(?P<insurer_name>[A-Za-z][A-Za-z &().'-]+?)\s*[-–—]\s*[A-Z0-9]+\s*\(Group:",
    ),
    _rule(
        "policy_number",
        r'(?<!group )(?<!grp )\b(?:Policy\s+Number|Policy\s+No\.?|Policy|Member\s+ID|Member\s+Number|Member'
        r'|Subscriber\s+ID|Insurance\s+ID|ID\s+Number|ID|Pol)'
        + _SEP + r'(?P<policy_number>' + _IDENTIFIER + r')',
    ),
    _rule(
        "group_number",
        r'\b(?:Group\s+Number|Group\s+No\.?|Group\s+ID|Group|Grp)'
        + _SEP + r'(?P<group_number>' + _IDENTIFIER + r')',
    ),
    _rule(
        "authorization_number",
        r'\b(?:Authorization\s+Number|Authorization\s+No\.?|Authorization|Auth\s+Number|Auth\s+No\.?'
        r'|Prior\s+Auth|Pre-?Auth|Auth)'
        + _SEP + r'(?P<authorization_number>' + _IDENTIFIER + r')',
    ),
    _rule(
        "policy_holder",
        r'(?<!to )\b(?:Policy\s*Holder\s+Name|Policy\s*Holder|Subscriber\s+Name|Subscriber|Insured\s+Name'
        r'|Insured|Guarantor|Responsible\s+Party)'
        + _SEP + r"(?P<policy_holder_name>[A-Za-z][A-Za-z ,.'-]*?)"
        + r'(?=\s*(?:\||\bRel\b|\bRelationship\b|\bDOB\b|\bID\b|$))',
    ),
    _rule(
        "relationship",
        r'\b(?:Relationship\s+to\s+(?:Subscriber|Patient|Insured)|Rel(?:ationship)?\s+to\s+Subscriber'
        r'|Subscriber\s+Relationship|Patient\s+Relationship|Relationship|Rel)'
        + _SEP + r'(?P<relationship>[A-Za-z]+)',
    ),
)

# =========================================================================
# NORMALIZERS
# =========================================================================

_ZIP_FORMAT = re.compile(r'^\d{5}(?:-\d{4})?$')


def normalize_phone(value: str) -> Optional[str]:
    """(NNN) NNN-NNNN for 10 digits or 11 with a leading 1; other values trimmed.

    Captures shorter than 10 characters are not phone numbers.
    """
    value = value.strip()
    if len(value) < 10:
        return None

    digits = re.sub(r'\D', '', value)
    if len(digits) == 11 and digits.startswith('1'):
        digits = digits[1:]

    if len(digits) == 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
    return value


def normalize_state(value: str) -> Optional[str]:
    state = value.strip().upper()
    return state if state in VALID_STATES else None


def normalize_zip(value: str) -> Optional[str]:
    value = value.strip()
    return value if _ZIP_FORMAT.match(value) else None


def normalize_address(value: str) -> Optional[str]:
    address = re.sub(r'\s+', ' ', value).strip(' ,')
    address = re.sub(r'^(?:Street Address|Address|Addr)\s*:\s*', '', address, flags=re.IGNORECASE)
    if len(address) <= 5:
        return None
    if len(address) > 100:
        address = ' '.join(address.split(' ')[:10])
    return address


def normalize_city(value: str) -> Optional[str]:
    city = re.sub(r'\s+', ' ', value).strip(' ,')
    if city.lower().startswith('lives in '):
        city = city[9:].strip()
    return city if len(city) >= 2 else None


def normalize_email(value: str) -> Optional[str]:
    return value.strip() or None


def title_case(value: str) -> str:
    return ' '.join(word[:1].upper() + word[1:].lower() for word in value.split(' ') if word)


def normalize_insurer_name(value: str) -> Optional[str]:
    """Known insurer variants map to one display name; others are title-cased."""
    name = re.sub(r'\s+', ' ', value).strip()
    if len(name) <= 2 or len(name) >= 100:
        return None

    lowered = name.lower()
    for standard, variants in INSURANCE_COMPANIES.items():
        if any(variant in lowered for variant in variants):
            return standard

    cleaned = re.sub(r'\s*[-–—]\s*', ' - ', name)
    cleaned = re.sub(r'^\W+|\W+$', '', cleaned).strip()
    if not cleaned:
        return None
    return title_case(cleaned)[:50].strip()


def _identifier(min_length: int, join: str) -> Normalizer:
    def normalize(value: str) -> Optional[str]:
        cleaned = re.sub(r'\s+', join, value.strip())
        cleaned = re.sub(r'[^\w-]', '', cleaned).upper()
        if not (min_length <= len(cleaned) <= 50):
            return None
        return cleaned
    return normalize


normalize_policy_number = _identifier(3, '')
normalize_group_number = _identifier(2, '-')
normalize_authorization_number = _identifier(3, '-')


def normalize_holder_name(value: str) -> Optional[str]:
    name = value.replace(',', ' ', 1)
    name = re.sub(r"[^\w\s.'-]", '', name)
    name = re.sub(r'\s+', ' ', name).strip()
    if not (3 <= len(name) <= 100):
        return None
    return title_case(name)


def normalize_relationship(value: str) -> Optional[str]:
    word = value.strip().lower()
    if not word:
        return None
    return RELATIONSHIP_MAP.get(word, 'Other')


PATIENT_NORMALIZERS: Dict[str, Normalizer] = {
    "address": normalize_address,
    "city": normalize_city,
    "state": normalize_state,
    "zip_code": normalize_zip,
    "phone": normalize_phone,
    "email": normalize_email,
}

INSURANCE_NORMALIZERS: Dict[str, Normalizer] = {
    "insurer_name": normalize_insurer_name,
    "policy_number": normalize_policy_number,
    "group_number": normalize_group_number,
    "authorization_number": normalize_authorization_number,
    "policy_holder_name": normalize_holder_name,
    "relationship": normalize_relationship,
}

# =========================================================================
# RULE APPLICATION
# =========================================================================


def apply_rules(
    info,
    text: str,
    rules: Sequence[FieldRule],
    normalizers: Mapping[str, Normalizer]
) -> None:
    """
    Run rules in order against text, filling still-empty fields of info.

    info must provide set_once(name, value); see models.emr.
    """
    for rule in rules:
        if all(getattr(info, name) is not None for name in rule.fields):
            continue

        for match in rule.pattern.finditer(text):
            values: Optional[Dict[str, str]] = {}
            for name, raw in match.groupdict().items():
                if raw is None:
                    continue
                value = normalizers[name](raw)
                if value is None:
                    values = None
                    break
                values[name] = value

            if not values:
                continue

            for name, value in values.items():
                if info.set_once(name, value):
                    logger.debug(f"EMR field {name} set by rule {rule.name}")
            break

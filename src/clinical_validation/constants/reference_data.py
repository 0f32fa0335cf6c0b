# ============================================================================
# src/clinical_validation/constants/reference_data.py
# ============================================================================
"""
Reference tables for EMR/insurance normalization
- US state codes (50 states + DC)
- Insurer name variants
- Relationship-to-subscriber vocabulary
"""

VALID_STATES = frozenset({
    'AL', 'AK', 'AZ', 'AR', 'CA', 'CO', 'CT', 'DE', 'FL', 'GA',
    'HI', 'ID', 'IL', 'IN', 'IA', 'KS', 'KY', 'LA', 'ME', 'MD',
    'MA', 'MI', 'MN', 'MS', 'MO', 'MT', 'NE', 'NV', 'NH', 'NJ',
    'NM', 'NY', 'NC', 'ND', 'OH', 'OK', 'OR', 'PA', 'RI', 'SC',
    'SD', 'TN', 'TX', 'UT', 'VT', 'VA', 'WA', 'WV', 'WI', 'WY', 'DC',
})

# Standard display name -> lowercase variants. Checked in order, first
# variant contained in the extracted name wins.
INSURANCE_COMPANIES = {
    'Aetna': ('aetna', 'aetna ppo', 'aetna hmo'),
    'Blue Cross Blue Shield': ('blue cross', 'bcbs', 'blue shield', 'anthem', 'empire bcbs'),
    'Cigna': ('cigna', 'cigna hmo', 'cigna ppo'),
    'United Healthcare': ('united healthcare', 'unitedhealthcare', 'uhc', 'united health'),
    'Humana': ('humana', 'humana ppo', 'humana hmo'),
    'Kaiser': ('kaiser', 'kaiser permanente'),
    'Medicare': ('medicare', 'medicare part a', 'medicare part b', 'medicare advantage'),
    'Medicaid': ('medicaid', 'medi-cal'),
    'Premera': ('premera', 'premera blue cross'),
    'Anthem': ('anthem', 'anthem bcbs'),
    'Horizon': ('horizon', 'horizon bcbs'),
    'Oxford': ('oxford', 'oxford health'),
    'Emblem': ('emblem', 'emblem health'),
    'MetroPlus': ('metroplus', 'metro plus'),
    'Healthfirst': ('healthfirst', 'health first'),
    'Oscar': ('oscar', 'oscar health'),
    'Molina': ('molina', 'molina healthcare'),
}

RELATIONSHIP_VALUES = ('Self', 'Spouse', 'Child', 'Parent', 'Other')

RELATIONSHIP_MAP = {
    'self': 'Self',
    'patient': 'Self',
    'same': 'Self',
    'spouse': 'Spouse',
    'husband': 'Spouse',
    'wife': 'Spouse',
    'partner': 'Spouse',
    'child': 'Child',
    'son': 'Child',
    'daughter': 'Child',
    'dependent': 'Child',
    'parent': 'Parent',
    'mother': 'Parent',
    'father': 'Parent',
    'guardian': 'Parent',
    'other': 'Other',
}

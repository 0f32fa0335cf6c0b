# ============================================================================
# FILE: tests/unit/test_keyword_extractor.py
# ============================================================================
"""
Unit tests for keyword extraction and categorization
"""

from clinical_validation.text_processing import extract_medical_keywords, categorize_keywords
from clinical_validation.text_processing.keyword_categorizer import is_code


def test_extracts_vocabulary_and_codes():
    """Test modality, symptom and diagnosis code extraction"""
    keywords = extract_medical_keywords("mild headache, rule out CT vs MRI, R51")

    assert "headache" in keywords
    assert "ct" in keywords
    assert "mri" in keywords
    assert "r51" in keywords


def test_terms_match_on_word_boundaries():
    """Test that short terms are not found inside longer words"""
    keywords = extract_medical_keywords("Headache detected on review")

    assert "headache" in keywords
    assert "head" not in keywords
    assert "ache" not in keywords
    assert "ct" not in keywords


def test_abbreviations_with_slashes():
    """Test abbreviations containing slashes"""
    keywords = extract_medical_keywords("CT head w/o contrast, r/o bleed, s/p fall")

    assert "w/o" in keywords
    assert "r/o" in keywords
    assert "s/p" in keywords
    assert "fall" in keywords
    assert "head" in keywords


def test_keywords_are_lowercase_and_unique():
    """Test that repeated terms appear once, lowercased"""
    keywords = extract_medical_keywords("MRI Brain. Repeat MRI brain. M54.5 and m54.5")

    assert keywords.count("mri") == 1
    assert keywords.count("brain") == 1
    assert keywords.count("m54.5") == 1
    assert all(k == k.lower() for k in keywords)


def test_procedure_code_prefixes():
    """Test 5-digit tokens filtered by leading digit"""
    text = "Order 70551, previously billed 99213 and 12345"

    default = extract_medical_keywords(text)
    assert "70551" in default
    assert "99213" in default
    assert "12345" not in default

    radiology_only = extract_medical_keywords(text, procedure_prefixes=("7",))
    assert "70551" in radiology_only
    assert "99213" not in radiology_only


def test_empty_and_non_string_input():
    """Test that unusable input yields no keywords"""
    assert extract_medical_keywords("") == []
    assert extract_medical_keywords("   ") == []
    assert extract_medical_keywords(None) == []
    assert extract_medical_keywords(42) == []


def test_categorize_example_dictation():
    """Test categorization of an extracted keyword list"""
    categorized = categorize_keywords(extract_medical_keywords("mild headache, rule out CT vs MRI, R51"))

    assert categorized.codes == ["r51"]
    assert set(categorized.modalities) == {"ct", "mri"}
    assert "headache" in categorized.symptoms
    assert categorized.anatomy_terms == []


def test_categorize_priority_order():
    """Test code shape wins, then anatomy, then modality, then symptom"""
    categorized = categorize_keywords(["R51", "70551", "knee", "mri", "swelling", "M54.5"])

    assert categorized.codes == ["R51", "70551", "M54.5"]
    assert categorized.anatomy_terms == ["knee"]
    assert categorized.modalities == ["mri"]
    assert categorized.symptoms == ["swelling"]


def test_categorized_buckets_are_disjoint():
    """Test that every keyword lands in exactly one bucket"""
    keywords = ["head", "ct", "pain", "r51", "72148", "dx", "lumbar", "pet", "mass", "w/o"]
    categorized = categorize_keywords(keywords)

    buckets = [
        set(categorized.anatomy_terms),
        set(categorized.modalities),
        set(categorized.symptoms),
        set(categorized.codes),
    ]
    for i, bucket in enumerate(buckets):
        for other in buckets[i + 1:]:
            assert bucket.isdisjoint(other)

    assert sorted(categorized.all_keywords()) == sorted(keywords)


def test_categorize_ignores_duplicates():
    """Test duplicate input keywords are categorized once"""
    categorized = categorize_keywords(["mri", "mri", "knee"])

    assert categorized.modalities == ["mri"]
    assert categorized.all_keywords() == ["knee", "mri"]


def test_is_code():
    """Test code shape detection"""
    assert is_code("R51")
    assert is_code("s72.01")
    assert is_code("70551")
    assert not is_code("7055")
    assert not is_code("R5")
    assert not is_code("R51.123")
    assert not is_code("mri")


def test_categorized_to_dict():
    """Test serialized bucket names"""
    data = categorize_keywords(["brain", "mri"]).to_dict()

    assert data == {"anatomyTerms": ["brain"], "modalities": ["mri"], "symptoms": [], "codes": []}

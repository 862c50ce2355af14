from ranttrack.services.severity import (
    assign_default_severity,
    detect_comparative,
    extract_numeric_severity,
    find_severity,
    find_severity_from_tokens,
    severity_for_ratio,
)
from ranttrack.services.tokenizer import tokenize


def test_ratio_rating_attributed_to_pain():
    [rating] = extract_numeric_severity("pain is 7/10")
    assert rating["score"] == 7
    assert rating["max_score"] == 10
    assert rating["severity"] == "severe"
    assert rating["category"] == "pain"
    assert rating["matched_text"] == "7/10"


def test_out_of_rating_attributed_to_fatigue():
    [rating] = extract_numeric_severity("Fatigue is 3 out of 10")
    assert rating["category"] == "fatigue"
    assert rating["severity"] == "mild"


def test_brain_fog_rating():
    [rating] = extract_numeric_severity("brain fog 8/10")
    assert rating["category"] == "brain_fog"
    assert rating["severity"] == "severe"


def test_unattributed_ratio_is_kept_without_category():
    [rating] = extract_numeric_severity("today was a 4/10")
    assert rating["category"] is None
    assert rating["severity"] == "moderate"


def test_percentages_need_energy_context():
    [rating] = extract_numeric_severity("energy at 30%")
    assert rating["category"] == "fatigue"
    assert rating["severity"] == "mild"
    assert extract_numeric_severity("30% chance of rain") == []


def test_zero_denominator_is_ignored():
    assert extract_numeric_severity("pain 5/0") == []


def test_ratio_thresholds():
    assert severity_for_ratio(0.3) == "mild"
    assert severity_for_ratio(0.6) == "moderate"
    assert severity_for_ratio(0.61) == "severe"


def test_keyword_severity_near_token():
    tokens = tokenize("my head is really bad")
    assert find_severity_from_tokens(tokens, tokens.index("head")) == "severe"
    text = "I have a slight headache"
    assert find_severity(text, text.index("headache")) == "mild"
    tokens = tokenize("it was kind of a headache")
    assert find_severity_from_tokens(tokens, tokens.index("headache")) == "mild"


def test_comparative_direction():
    assert detect_comparative("getting worse by the hour") == "worse"
    assert detect_comparative("a bit better today") == "better"
    assert detect_comparative("still the same") == "same"
    assert detect_comparative("headache") is None
    # whole words only
    assert detect_comparative("a lesson learned") is None


def test_default_severity_precedence():
    assert assign_default_severity("pem", "", "mild") == "mild"
    assert assign_default_severity("pem", "", None) == "severe"
    assert assign_default_severity("tinnitus", "getting worse", None) == "severe"
    assert assign_default_severity("tinnitus", "much better", None) == "mild"
    assert assign_default_severity("tinnitus", "", None) == "moderate"

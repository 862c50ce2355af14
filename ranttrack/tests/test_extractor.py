import pytest

from ranttrack.services.extractor import clean_custom_lemmas, detect_repeat_previous, extract_symptoms

SAMPLES = [
    "I am tired",
    "Crashed hard after walking today. Brain fog all morning, pain 7/10.",
    "sharp pain in my lower back and a slight headache, nauseous since tuesday",
    "Only 2 spoons left. Same as yesterday really.",
    "Can't sleep again, but then I overslept and felt drowsy all day",
]


def _categories(result):
    return [s.category for s in result.symptoms]


@pytest.mark.parametrize("text", SAMPLES)
def test_extraction_is_deterministic(text):
    assert extract_symptoms(text).model_dump() == extract_symptoms(text).model_dump()


@pytest.mark.parametrize("text", SAMPLES)
def test_categories_are_unique(text):
    categories = _categories(extract_symptoms(text))
    assert len(categories) == len(set(categories))


@pytest.mark.parametrize("text", SAMPLES)
def test_confidence_in_range_and_rounded(text):
    for symptom in extract_symptoms(text).symptoms:
        assert symptom.confidence is not None
        assert 0.0 <= symptom.confidence <= 1.0
        assert round(symptom.confidence, 2) == symptom.confidence


def test_first_person_am_is_not_a_time_of_day():
    [tired] = extract_symptoms("I am tired").symptoms
    assert tired.time_of_day is None


def test_negated_lemma_is_suppressed():
    assert "fatigue" not in _categories(extract_symptoms("I am not tired"))
    assert "fatigue" in _categories(extract_symptoms("I am tired"))


def test_negation_does_not_cross_sentences():
    result = extract_symptoms("Not great today! I am exhausted.")
    assert "fatigue" in _categories(result)
    assert "nausea" in _categories(extract_symptoms("Not feeling good! Nauseous today."))


def test_non_medical_crash_is_filtered():
    result = extract_symptoms("The server crashed this morning")
    pem = [s for s in result.symptoms if s.category == "pem"]
    assert all(s.confidence < 0.4 for s in pem)


def test_exertion_crash_is_kept():
    assert "pem" in _categories(extract_symptoms("I crashed hard after walking today"))


def test_context_is_judged_at_the_matched_occurrence():
    result = extract_symptoms("The server never crashed. I crashed badly after walking")
    [pem] = [s for s in result.symptoms if s.category == "pem"]
    assert pem.matched_text == "crashed"
    assert pem.confidence > 0.35


def test_trigger_linked_with_delay():
    result = extract_symptoms("Walked to store, then immediately dizzy")
    dizzy = next(s for s in result.symptoms if s.category == "dizziness")
    assert dizzy.trigger is not None
    assert dizzy.trigger.activity == "walking"
    assert dizzy.trigger.delay_pattern == "immediate"
    assert dizzy.trigger.confidence > 0.6


def test_numeric_rating_creates_symptom():
    result = extract_symptoms("pain 7/10 today")
    pain = next(s for s in result.symptoms if s.category == "pain")
    assert pain.severity == "severe"
    assert pain.matched_text == "7/10"
    assert pain.method == "phrase"


def test_pain_location_maps_to_specific_category():
    result = extract_symptoms("sharp pain in my lower back")
    back = next(s for s in result.symptoms if s.category == "back_pain")
    assert back.pain_details.location == "lower_back"
    assert back.pain_details.qualifiers == ["sharp"]


def test_empty_input():
    result = extract_symptoms("")
    assert result.text == ""
    assert result.symptoms == []
    assert extract_symptoms("   ").symptoms == []
    assert extract_symptoms(None).text == ""


def test_custom_lemmas_extend_and_override():
    assert "fatigue" in _categories(extract_symptoms("feeling meh today", {"meh": "fatigue"}))
    assert _categories(extract_symptoms("I am tired", {"tired": "sleepiness"})) == ["sleepiness"]


def test_custom_phrase_matches_before_single_tokens():
    result = extract_symptoms("so much brain static today", {"brain static": "brain_fog"})
    fog = next(s for s in result.symptoms if s.category == "brain_fog")
    assert fog.matched_text == "brain static"
    assert fog.method == "phrase"


def test_malformed_custom_entries_are_skipped():
    assert clean_custom_lemmas({"  MeH ": " fatigue ", "": "x", "y": "", 5: "pain", "z": None}) == {"meh": "fatigue"}
    assert clean_custom_lemmas(None) == {}
    assert extract_symptoms("I am tired", {5: "pain", "tired": None}).symptoms[0].category == "fatigue"


def test_document_level_fields():
    result = extract_symptoms("Only 2 spoons left. Same as yesterday.")
    assert result.spoon_count.current == 2
    assert result.repeat_previous is True
    assert extract_symptoms("I am tired").repeat_previous is None


def test_repeat_previous_patterns():
    assert detect_repeat_previous("same as yesterday")
    assert detect_repeat_previous("Repeat of Monday")
    assert detect_repeat_previous("still the same honestly")
    assert not detect_repeat_previous("a new symptom")


def test_huge_spoon_count_does_not_raise():
    result = extract_symptoms("I have " + "9" * 400 + " spoons left")
    assert result.spoon_count.current == 100
    assert result.spoon_count.energy_level == 10.0

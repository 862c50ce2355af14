from ranttrack.services.body_locations import LOCATION_CATEGORIES
from ranttrack.services.lexicon import (
    COMMON_SYMPTOM_LABELS,
    COMMON_SYMPTOMS,
    SYMPTOM_DISPLAY_NAMES,
    SYMPTOM_LEMMAS,
    SYMPTOM_PHRASES,
    display_name,
    is_known_category,
    longest_first,
    merged_lemmas,
    phrases_longest_first,
)


def test_every_phrase_category_has_display_name():
    missing = {c for c in SYMPTOM_PHRASES.values() if c not in SYMPTOM_DISPLAY_NAMES}
    assert missing == set()


def test_every_lemma_and_location_category_has_display_name():
    categories = set(SYMPTOM_LEMMAS.values()) | set(LOCATION_CATEGORIES.values()) | {"pain", "fatigue", "brain_fog"}
    assert {c for c in categories if c not in SYMPTOM_DISPLAY_NAMES} == set()


def test_lemmas_are_single_tokens():
    assert all(" " not in word for word in SYMPTOM_LEMMAS)


def test_common_symptoms():
    assert len(COMMON_SYMPTOMS) == 12
    assert COMMON_SYMPTOMS[:2] == ("fatigue", "pem")
    assert all(is_known_category(c) for c in COMMON_SYMPTOMS)
    assert set(COMMON_SYMPTOM_LABELS) == set(COMMON_SYMPTOMS)


def test_display_name_fallback():
    assert display_name("fatigue") == "Fatigue"
    assert display_name("made_up_thing") == "Made Up Thing"
    assert not is_known_category("made_up_thing")


def test_longest_first_is_stable():
    table = {"a b": "x", "a b c": "y", "c d": "z"}
    assert longest_first(table) == [("a b c", "y"), ("a b", "x"), ("c d", "z")]
    lengths = [len(p) for p, _ in phrases_longest_first()]
    assert lengths == sorted(lengths, reverse=True)


def test_merged_lemmas_only_takes_single_tokens():
    merged = merged_lemmas({"meh": "fatigue", "brain static": "brain_fog", "tired": "sleepiness"})
    assert merged["meh"] == "fatigue"
    assert merged["tired"] == "sleepiness"
    assert "brain static" not in merged
    assert SYMPTOM_LEMMAS["tired"] == "fatigue"

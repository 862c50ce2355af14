from ranttrack.schemas.symptoms import ExtractedSymptom
from ranttrack.services.context_filter import (
    apply_context_filter,
    conflicting_pairs,
    is_context_sensitive,
    min_confidence_without_context,
    resolve_symptom_conflicts,
    validate_lemma_context,
)
from ranttrack.services.tokenizer import tokenize


def _verdict(word, text):
    tokens = tokenize(text)
    return validate_lemma_context(word, tokens, tokens.index(word))


def test_rules_loaded_from_yaml():
    assert is_context_sensitive("Crashed")
    assert is_context_sensitive("joints")
    assert not is_context_sensitive("tired")
    assert min_confidence_without_context("crash") == 0.35
    assert min_confidence_without_context("tired") == 0.5
    assert conflicting_pairs() == (("insomnia", "hypersomnia"),)


def test_context_verdicts():
    assert _verdict("crashed", "the server crashed again") == "invalid"
    assert _verdict("crashed", "i crashed after the walk") == "valid"
    assert _verdict("crashed", "the server crashed and i am exhausted") == "valid"
    assert _verdict("crashed", "i crashed") == "uncertain"
    assert _verdict("tired", "so tired") == "valid"


def test_context_window_stays_in_sentence():
    assert _verdict("crashed", "The app froze. I crashed") == "uncertain"


def test_filter_drops_caps_and_passes_through():
    lemma = ExtractedSymptom(category="pem", matched_text="crashed", method="lemma", confidence=0.7)
    assert apply_context_filter([lemma], "the server crashed") == []

    [capped] = apply_context_filter([lemma], "I crashed")
    assert capped.confidence == 0.35

    phrase = ExtractedSymptom(category="pem", matched_text="crashed", method="phrase", confidence=0.9)
    [kept] = apply_context_filter([phrase], "the server crashed")
    assert kept.confidence == 0.9


def test_filter_skips_negated_earlier_occurrence():
    lemma = ExtractedSymptom(category="pem", matched_text="crashed", method="lemma", confidence=0.7)
    [kept] = apply_context_filter([lemma], "The server never crashed. I crashed badly")
    assert kept.confidence == 0.7


def test_conflict_resolution():
    insomnia = ExtractedSymptom(category="insomnia", matched_text="insomnia", method="lemma", confidence=0.6)
    hypersomnia = ExtractedSymptom(category="hypersomnia", matched_text="overslept", method="lemma", confidence=0.6)
    assert [s.category for s in resolve_symptom_conflicts([hypersomnia, insomnia])] == ["insomnia"]

    stronger = hypersomnia.model_copy(update={"confidence": 0.8})
    assert [s.category for s in resolve_symptom_conflicts([insomnia, stronger])] == ["hypersomnia"]

    unscored = [insomnia.model_copy(update={"confidence": None}), hypersomnia.model_copy(update={"confidence": None})]
    assert [s.category for s in resolve_symptom_conflicts(unscored)] == ["insomnia"]

    fatigue = ExtractedSymptom(category="fatigue", matched_text="tired", method="lemma")
    assert resolve_symptom_conflicts([fatigue]) == [fatigue]

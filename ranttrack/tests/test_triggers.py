from ranttrack.services.triggers import (
    detect_delay_pattern,
    extract_activity_triggers,
    proximity_ceiling,
    trigger_confidence,
)


def test_activity_with_timeframe():
    [cand] = extract_activity_triggers("After walking I was dizzy")
    assert cand.trigger.activity == "walking"
    assert cand.trigger.timeframe == "after"
    assert cand.position == 6
    assert cand.token_index == 1


def test_activity_without_cue_or_symptom_is_ignored():
    assert extract_activity_triggers("I like reading novels") == []


def test_two_word_activity():
    [cand] = extract_activity_triggers("working out made me dizzy")
    assert cand.trigger.activity == "exercise"


def test_custom_lemma_counts_as_nearby_symptom():
    assert extract_activity_triggers("reading made me meh") == []
    [cand] = extract_activity_triggers("reading made me meh", {"meh": "fatigue"})
    assert cand.trigger.activity == "reading"


def test_delay_patterns():
    text = "walked to the shop and crashed the next day"
    assert detect_delay_pattern(text, 0) == "next_day"
    assert detect_delay_pattern("cleaned, then hours later my back went", 0) == "hours_later"
    assert detect_delay_pattern("cleaned the kitchen", 0) is None
    assert detect_delay_pattern("anything", -1) is None


def test_trigger_confidence_formula():
    assert trigger_confidence(0, 0, None, "walking") == 1.0
    assert trigger_confidence(400, 2, None, "sitting") == 0.64
    assert trigger_confidence(500, 5, None, "reading") == 0.4
    assert trigger_confidence(100, 1, "next_day", "reading") == 1.0


def test_proximity_ceiling():
    assert proximity_ceiling("next_day", 3) == 500
    assert proximity_ceiling("hours_later", 0) == 300
    assert proximity_ceiling("days_later", 4) == 300
    assert proximity_ceiling(None, 1) == 200
    assert proximity_ceiling("immediate", 2) == 40

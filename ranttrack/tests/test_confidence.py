from ranttrack.schemas.symptoms import ActivityTrigger, ExtractedSymptom, PainDetails
from ranttrack.services.confidence import add_confidence_scores, build_quick_checkin, calculate_confidence


def test_plain_lemma_score():
    tired = ExtractedSymptom(category="fatigue", matched_text="tired", method="lemma", severity="moderate")
    assert calculate_confidence(tired, "i am tired", 5) == 0.62


def test_detailed_phrase_is_clamped():
    back = ExtractedSymptom(
        category="back_pain",
        matched_text="sharp pain in my lower back",
        method="phrase",
        severity="severe",
        pain_details=PainDetails(qualifiers=["sharp"], location="lower_back"),
    )
    assert calculate_confidence(back, "sharp pain in my lower back", 0) == 1.0


def test_trigger_and_context_bonuses():
    base = ExtractedSymptom(category="dizziness", matched_text="dizzy", method="lemma")
    triggered = base.model_copy(update={"trigger": ActivityTrigger(activity="standing")})
    text = "dizzy"
    assert calculate_confidence(triggered, text, 0) - calculate_confidence(base, text, 0) > 0.04
    busy = "sudden severe dizzy spell, worse when standing"
    assert calculate_confidence(base, busy, busy.index("dizzy")) > calculate_confidence(base, text, 0)


def test_rare_bonus_requires_phrase_or_checkin():
    lemma = ExtractedSymptom(category="pem", matched_text="pem", method="lemma")
    phrase = lemma.model_copy(update={"method": "phrase"})
    assert calculate_confidence(phrase, "", -1) - calculate_confidence(lemma, "", -1) > 0.2


def test_add_confidence_scores_sets_every_entry():
    symptoms = [
        ExtractedSymptom(category="fatigue", matched_text="tired", method="lemma"),
        ExtractedSymptom(category="nausea", matched_text="nauseous", method="lemma"),
    ]
    scored = add_confidence_scores(symptoms, "tired and nauseous")
    assert all(s.confidence is not None for s in scored)


def test_quick_checkin():
    picked = build_quick_checkin(["fatigue", "fatigue", "pem"], {"pem": "severe"})
    assert [s.category for s in picked] == ["fatigue", "pem"]
    fatigue, pem = picked
    assert fatigue.method == "quick_checkin"
    assert fatigue.matched_text == "Fatigue"
    assert fatigue.confidence == 0.65
    assert pem.severity == "severe"
    assert pem.confidence > fatigue.confidence

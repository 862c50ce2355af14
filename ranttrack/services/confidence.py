"""Heuristic 0-1 confidence scores for extracted symptoms."""
from typing import Dict, Iterable, List, Optional

from ranttrack.schemas.symptoms import ExtractedSymptom
from ranttrack.services.lexicon import display_name
from ranttrack.services.tokenizer import normalize_text

CONTEXT_KEYWORDS = (
    "severe", "mild", "moderate", "sharp", "dull", "constant",
    "intermittent", "sudden", "gradual", "worse", "better",
    "affects", "triggered", "caused", "related",
)

RARE_SYMPTOMS = {
    "paresthesia", "dysgeusia", "parosmia", "brain_zaps", "postprandial",
    "orthostatic", "pem", "air_hunger", "internal_vibrations",
}

CONTEXT_RADIUS = 50

_METHOD_BONUS = {"phrase": 0.2, "quick_checkin": 0.15, "lemma": 0.08}
_SEVERITY_BONUS = {"severe": 0.08, "moderate": 0.04, "mild": 0.02}


def _specificity_bonus(symptom: ExtractedSymptom) -> float:
    words = len(symptom.matched_text.split(" "))
    if words >= 4:
        return 0.15
    if words == 3:
        return 0.12
    if words == 2:
        return 0.08
    if symptom.method == "phrase":
        return 0.03
    return 0.0


def _detail_bonus(symptom: ExtractedSymptom) -> float:
    bonus = 0.0
    if symptom.pain_details:
        if symptom.pain_details.location:
            bonus += 0.15
        count = len(symptom.pain_details.qualifiers)
        if count >= 2:
            bonus += 0.1
        elif count == 1:
            bonus += 0.06
    if symptom.trigger:
        bonus += 0.05
    if symptom.duration:
        if symptom.duration.value and symptom.duration.unit:
            bonus += 0.08
        elif symptom.duration.qualifier:
            bonus += 0.05
        if symptom.duration.ongoing:
            bonus += 0.03
    if symptom.time_of_day:
        bonus += 0.05
    return bonus


def _context_bonus(text: str, match_index: int) -> float:
    low = normalize_text(text)
    around = low[max(0, match_index - CONTEXT_RADIUS): max(0, match_index + CONTEXT_RADIUS)]
    hits = sum(1 for keyword in CONTEXT_KEYWORDS if keyword in around)
    if hits >= 3:
        return 0.05
    if hits >= 1:
        return 0.02
    return 0.0


def calculate_confidence(symptom: ExtractedSymptom, text: str, match_index: int) -> float:
    """Score one symptom.

    Roughly: >=0.9 explicit and detailed, 0.7-0.9 clear with context,
    0.5-0.7 plausible, below 0.5 worth a second look.
    """
    confidence = 0.5
    confidence += _METHOD_BONUS.get(symptom.method, 0.0)
    confidence += _specificity_bonus(symptom)
    confidence += _SEVERITY_BONUS.get(symptom.severity, 0.0)
    confidence += _detail_bonus(symptom)
    confidence += _context_bonus(text, match_index)
    if symptom.category in RARE_SYMPTOMS and symptom.method in ("phrase", "quick_checkin"):
        confidence += 0.1
    return round(min(1.0, max(0.0, confidence)), 2)


def add_confidence_scores(symptoms: List[ExtractedSymptom], text: str) -> List[ExtractedSymptom]:
    low = normalize_text(text)
    scored = []
    for symptom in symptoms:
        match_index = low.find(symptom.matched_text.lower())
        scored.append(symptom.model_copy(update={"confidence": calculate_confidence(symptom, text, match_index)}))
    return scored


def build_quick_checkin(
    categories: Iterable[str], severities: Optional[Dict[str, str]] = None
) -> List[ExtractedSymptom]:
    """Symptoms picked from the quick check-in list, one per distinct category."""
    severities = severities or {}
    picked: List[ExtractedSymptom] = []
    seen = set()
    for category in categories:
        if category in seen:
            continue
        seen.add(category)
        symptom = ExtractedSymptom(
            category=category,
            matched_text=display_name(category),
            method="quick_checkin",
            severity=severities.get(category),
        )
        picked.append(symptom.model_copy(update={"confidence": calculate_confidence(symptom, "", -1)}))
    return picked


__all__ = [
    "CONTEXT_KEYWORDS",
    "RARE_SYMPTOMS",
    "calculate_confidence",
    "add_confidence_scores",
    "build_quick_checkin",
]

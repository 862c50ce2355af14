"""Activity trigger detection and trigger-to-symptom linking."""
import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from ranttrack.schemas.symptoms import ActivityTrigger, ExtractedSymptom
from ranttrack.services.lexicon import SYMPTOM_LEMMAS
from ranttrack.services.tokenizer import normalize_text, sentence_distance, token_offsets, tokenize

logger = logging.getLogger("ranttrack")

TRIGGER_ACTIVITIES: Dict[str, str] = {
    # physical
    "walking": "walking", "walked": "walking", "walk": "walking",
    "standing": "standing", "stood": "standing", "stand": "standing",
    "sitting": "sitting", "sat": "sitting",
    "showering": "showering", "shower": "showering", "showered": "showering",
    "bathing": "bathing", "bath": "bathing",
    "cooking": "cooking", "cooked": "cooking",
    "cleaning": "cleaning", "cleaned": "cleaning",
    "exercising": "exercise", "exercise": "exercise", "exercised": "exercise",
    "workout": "exercise", "working out": "exercise",
    "running": "running", "ran": "running", "jogging": "jogging",
    "climbing": "climbing", "stairs": "climbing_stairs",
    "lifting": "lifting", "carrying": "carrying", "bending": "bending",
    "reaching": "reaching", "stretching": "stretching",
    # errands & work
    "shopping": "shopping", "groceries": "shopping",
    "driving": "driving", "drove": "driving",
    "commuting": "commuting", "commute": "commuting",
    "working": "working", "work": "working", "worked": "working",
    # social
    "socializing": "socializing", "social": "socializing",
    "talking": "talking", "conversation": "talking",
    "meeting": "meeting", "appointment": "appointment", "doctor": "medical_appointment",
    "visiting": "visiting", "visit": "visiting",
    # screens & cognitive load
    "reading": "reading", "screen": "screen_time", "screens": "screen_time",
    "computer": "screen_time", "phone": "screen_time", "typing": "typing",
    "concentrating": "concentrating", "thinking": "thinking",
    # food & drink
    "eating": "eating", "ate": "eating", "meal": "eating", "drinking": "drinking",
    "caffeine": "caffeine", "coffee": "caffeine", "alcohol": "alcohol",
    # environment
    "heat": "heat_exposure", "sun": "sun_exposure", "cold": "cold_exposure",
    "noise": "noise_exposure", "lights": "light_exposure", "bright": "light_exposure",
}

TRIGGER_TIMEFRAMES: Dict[str, str] = {
    "after": "after",
    "from": "from",
    "following": "after",
    "since": "since",
    "during": "during",
    "while": "during",
    "when": "when",
    "because of": "from",
    "due to": "from",
    "caused by": "from",
    "triggered by": "from",
    "thanks to": "from",
    "every time": "every_time",
    "whenever": "every_time",
}

TRIGGER_LINKED_SYMPTOMS = {
    "pem", "crash", "fatigue", "exhaustion", "flare",
    "dizziness", "orthostatic", "presyncope", "fainting",
    "pain", "muscle_pain", "headache",
    "brain_fog", "nausea", "palpitations",
    "shortness_of_breath", "weakness",
}

# Checked in order; first phrase found after the activity wins.
DELAY_PATTERNS = (
    ("next day", "next_day"),
    ("day after", "next_day"),
    ("following day", "next_day"),
    ("crashed the next", "next_day"),
    ("hours later", "hours_later"),
    ("hours after", "hours_later"),
    ("couple hours", "hours_later"),
    ("few hours", "hours_later"),
    ("days later", "days_later"),
    ("week later", "week_later"),
    ("immediately", "immediate"),
    ("right away", "immediate"),
    ("right then", "immediate"),
    ("instantly", "immediate"),
)

RELIABLE_ACTIVITIES = {"exercise", "running", "walking", "standing", "working", "cleaning"}

TIMEFRAME_LOOKBACK = 4
SYMPTOM_LOOKAHEAD = 8
SYMPTOM_LOOKBACK = 6
DELAY_SCAN_CHARS = 200
MIN_LINK_CONFIDENCE = 0.5

_DELAY_BONUS = {
    "immediate": 0.15,
    "next_day": 0.25,
    "hours_later": 0.15,
    "days_later": 0.1,
    "week_later": 0.1,
}


@dataclass
class TriggerCandidate:
    token_index: int
    position: int
    trigger: ActivityTrigger


def detect_delay_pattern(text: str, position: int) -> Optional[str]:
    """Delay phrase within DELAY_SCAN_CHARS after an activity mention."""
    if position < 0:
        return None
    following = normalize_text(text)[position: position + DELAY_SCAN_CHARS]
    for phrase, pattern in DELAY_PATTERNS:
        if phrase in following:
            return pattern
    return None


def _find_timeframe(tokens: List[str], i: int) -> Optional[str]:
    for j in range(max(0, i - TIMEFRAME_LOOKBACK), i):
        single = TRIGGER_TIMEFRAMES.get(tokens[j])
        if single:
            return single
        if j < i - 1:
            pair = TRIGGER_TIMEFRAMES.get(f"{tokens[j]} {tokens[j + 1]}")
            if pair:
                return pair
    return None


def _has_symptom_nearby(tokens: List[str], i: int, lemmas: Mapping[str, str]) -> bool:
    def is_symptom(tok: str) -> bool:
        return tok in lemmas or tok in TRIGGER_LINKED_SYMPTOMS

    ahead = tokens[i + 1: min(len(tokens), i + SYMPTOM_LOOKAHEAD)]
    if any(is_symptom(t) for t in ahead):
        return True
    return any(is_symptom(t) for t in tokens[max(0, i - SYMPTOM_LOOKBACK): i])


def extract_activity_triggers(text: str, lemmas: Optional[Mapping[str, str]] = None) -> List[TriggerCandidate]:
    """Activity mentions that sit next to a timeframe cue or a symptom word.

    "After walking I crashed" -> walking, timeframe "after".
    """
    lemmas = SYMPTOM_LEMMAS if lemmas is None else lemmas
    tokens = tokenize(text)
    offsets = token_offsets(text, tokens)
    candidates: List[TriggerCandidate] = []
    i = 0
    while i < len(tokens):
        activity = None
        width = 1
        if i + 1 < len(tokens):
            activity = TRIGGER_ACTIVITIES.get(f"{tokens[i]} {tokens[i + 1]}")
            width = 2 if activity else 1
        activity = activity or TRIGGER_ACTIVITIES.get(tokens[i])
        if activity is None:
            i += 1
            continue

        timeframe = _find_timeframe(tokens, i)
        if timeframe or _has_symptom_nearby(tokens, i + width - 1, lemmas):
            position = offsets[i]
            trigger = ActivityTrigger(
                activity=activity,
                timeframe=timeframe,
                delay_pattern=detect_delay_pattern(text, position),
            )
            candidates.append(TriggerCandidate(token_index=i, position=position, trigger=trigger))
        i += width
    return candidates


def trigger_confidence(distance: int, sentences_apart: int, delay_pattern: Optional[str], activity: str) -> float:
    confidence = 0.5
    confidence += (500 - min(distance, 500)) / 500 * 0.2
    if sentences_apart == 0:
        confidence += 0.3
    elif sentences_apart == 1:
        confidence += 0.2
    elif sentences_apart <= 3:
        confidence += 0.1
    else:
        confidence = max(confidence - 0.15, 0.4)
    confidence += _DELAY_BONUS.get(delay_pattern, 0.0)
    if activity in RELIABLE_ACTIVITIES:
        confidence += 0.05
    return round(min(1.0, max(0.0, confidence)), 2)


def proximity_ceiling(delay_pattern: Optional[str], sentences_apart: int) -> int:
    if delay_pattern == "next_day":
        return 500
    if delay_pattern in ("hours_later", "days_later"):
        return 300
    if sentences_apart <= 1:
        return 200
    return 40


def link_triggers_to_symptoms(
    symptoms: List[ExtractedSymptom], candidates: List[TriggerCandidate], text: str
) -> List[ExtractedSymptom]:
    """Attach the single best trigger to each trigger-eligible symptom."""
    located = [c for c in candidates if c.position >= 0]
    if not located:
        return symptoms
    low = normalize_text(text)

    linked: List[ExtractedSymptom] = []
    for symptom in symptoms:
        symptom_pos = low.find(symptom.matched_text.lower())
        if symptom.category not in TRIGGER_LINKED_SYMPTOMS or symptom_pos == -1:
            linked.append(symptom)
            continue

        best = None
        best_confidence = 0.0
        for cand in located:
            distance = abs(symptom_pos - cand.position)
            apart = sentence_distance(low, cand.position, symptom_pos)
            if distance > proximity_ceiling(cand.trigger.delay_pattern, apart):
                continue
            confidence = trigger_confidence(distance, apart, cand.trigger.delay_pattern, cand.trigger.activity)
            if confidence > best_confidence:
                best_confidence = confidence
                best = cand.trigger.model_copy(update={"confidence": confidence, "sentence_distance": apart})

        if best is not None and best_confidence >= MIN_LINK_CONFIDENCE:
            logger.debug(
                {"function": "link_triggers_to_symptoms", "status": "linked", "category": symptom.category, "activity": best.activity, "confidence": best_confidence}
            )
            symptom = symptom.model_copy(update={"trigger": best})
        linked.append(symptom)
    return linked


__all__ = [
    "TRIGGER_ACTIVITIES",
    "TRIGGER_TIMEFRAMES",
    "TRIGGER_LINKED_SYMPTOMS",
    "DELAY_PATTERNS",
    "TriggerCandidate",
    "detect_delay_pattern",
    "extract_activity_triggers",
    "trigger_confidence",
    "proximity_ceiling",
    "link_triggers_to_symptoms",
]

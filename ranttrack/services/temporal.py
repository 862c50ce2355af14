"""Duration, progression and time-of-day extraction, plus proximity attachment to symptoms.

Duration rules are tried in a fixed order and the first that matches supplies
the value/unit/qualifier/since fields. Progression and ongoing-ness are
detected independently and overlaid on whatever rule fired.
"""
import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from ranttrack.schemas.symptoms import ExtractedSymptom, SymptomDuration
from ranttrack.services.tokenizer import normalize_text, tokenize

logger = logging.getLogger("ranttrack")

ATTACH_DISTANCE = 50

DURATION_UNITS: Dict[str, str] = {
    "minute": "minutes", "minutes": "minutes", "min": "minutes", "mins": "minutes",
    "hour": "hours", "hours": "hours", "hr": "hours", "hrs": "hours",
    "day": "days", "days": "days",
    "week": "weeks", "weeks": "weeks",
}

NUMBER_WORDS: Dict[str, float] = {
    "a": 1, "an": 1, "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
}

PROGRESSION_PATTERNS: Dict[str, str] = {
    "getting worse": "progressive_worsening",
    "gradually worse": "progressive_worsening",
    "got progressively worse": "progressive_worsening",
    "worse as the day goes on": "progressive_worsening",
    "worse as time goes on": "progressive_worsening",
    "continues to worsen": "progressive_worsening",
    "getting better": "progressive_improving",
    "gradually improved": "progressive_improving",
    "improving each day": "progressive_improving",
    "better each day": "progressive_improving",
    "continues to improve": "progressive_improving",
    "healing": "progressive_improving",
    "on and off": "recurring",
    "comes and goes": "recurring",
    "intermittently": "recurring",
    "in waves": "recurring",
    "flares up": "recurring",
    "no change": "stable",
    "same as before": "stable",
    "unchanged": "stable",
    "still the same": "stable",
    "up and down": "fluctuating",
    "varies throughout the day": "fluctuating",
    "inconsistent": "fluctuating",
    "unpredictable": "fluctuating",
}

DURATION_QUALIFIERS: Dict[str, str] = {
    "all day": "all",
    "all night": "all",
    "all morning": "all",
    "all afternoon": "all",
    "all evening": "all",
    "the whole day": "all",
    "the whole night": "all",
    "entire day": "all",
    "entire night": "all",
    "half the day": "half",
    "half the night": "half",
    "half day": "half",
    "most of the day": "most_of",
    "most of the night": "most_of",
    "most of today": "most_of",
}

ONGOING_INDICATORS = {
    "still", "ongoing", "continuous", "constantly", "nonstop", "non-stop",
    "persistent", "persistently", "unrelenting", "relentless",
}

# phrase -> duration fields, checked in order
RECOVERY_PATTERNS: Tuple[Tuple[str, dict], ...] = (
    ("takes hours to recover", {"unit": "hours"}),
    ("takes a few hours", {"unit": "hours"}),
    ("takes days to recover", {"unit": "days"}),
    ("takes weeks to recover", {"value": 1, "unit": "weeks"}),
    ("recovers overnight", {"value": 8, "unit": "hours"}),
    ("recovers quickly", {"value": 4, "unit": "hours"}),
    ("slow recovery", {"unit": "days"}),
    ("not recovering", {"ongoing": True}),
    ("still not recovered", {"ongoing": True}),
    ("takes time to recover", {"ongoing": True}),
)

TIME_OF_DAY_PATTERNS: Dict[str, str] = {
    "morning": "morning",
    "this morning": "morning",
    "in the morning": "morning",
    "when i woke up": "morning",
    "woke up with": "morning",
    "waking up": "morning",
    "first thing": "morning",
    "afternoon": "afternoon",
    "this afternoon": "afternoon",
    "in the afternoon": "afternoon",
    "midday": "afternoon",
    "lunch": "afternoon",
    "after lunch": "afternoon",
    "evening": "evening",
    "this evening": "evening",
    "in the evening": "evening",
    "dinner": "evening",
    "after dinner": "evening",
    "end of day": "evening",
    "night": "night",
    "tonight": "night",
    "at night": "night",
    "during the night": "night",
    "last night": "night",
    "overnight": "night",
    "nighttime": "night",
    "middle of the night": "night",
    "before bed": "night",
    "bedtime": "night",
    "while sleeping": "night",
    "all day": "all_day",
    "the whole day": "all_day",
    "entire day": "all_day",
    "constantly": "all_day",
    "nonstop": "all_day",
    "24/7": "all_day",
}

_NUM = r"(\d+(?:\.\d+)?|an?|one|two|three|four|five|six|seven|eight|nine|ten)"
_UNIT = r"(minutes?|mins?|hours?|hrs?|days?|weeks?)"

_DAYS_OF_RE = re.compile(r"\b" + _NUM + r"\s+(days?|weeks?)\s+of\s+(\w+)")
_CRASHED_FOR_RE = re.compile(r"\bcrashed\s+for\s+" + _NUM + r"\s+(days?|weeks?|hours?)\b")
_OUT_FOR_RE = re.compile(r"\bout\s+for\s+" + _NUM + r"\s+(days?|weeks?)\b")
_TAKES_RE = re.compile(r"\btakes\s+" + _NUM + r"\s+(hours?|days?|weeks?)\s+to\s+recover")
_FOR_RE = re.compile(r"\bfor\s+" + _NUM + r"\s+" + _UNIT + r"\b")
_OF_RE = re.compile(r"\b" + _NUM + r"\s+" + _UNIT + r"\s+of\b")
_SINCE_RE = re.compile(
    r"\bsince\s+(yesterday|monday|tuesday|wednesday|thursday|friday|saturday|sunday"
    r"|this morning|last night|the morning|tonight)\b"
)
_LASTED_RE = re.compile(r"\blasted\s+" + _NUM + r"\s+" + _UNIT + r"\b")


def _phrase_re(phrase: str) -> "re.Pattern":
    return re.compile(r"(?<!\w)" + re.escape(phrase) + r"(?!\w)")


def _longest_first(table: Dict[str, str]) -> List[Tuple["re.Pattern", str, str]]:
    ordered = sorted(table.items(), key=lambda kv: len(kv[0]), reverse=True)
    return [(_phrase_re(phrase), phrase, value) for phrase, value in ordered]


_PROGRESSION_RES = _longest_first(PROGRESSION_PATTERNS)
# Clock times only; a bare "am" is usually "I am".
_CLOCK_RES = [
    (re.compile(r"\b\d{1,2}(?::\d{2})?\s*(?:am|a\.m\.)(?!\w)"), "am", "morning"),
    (re.compile(r"\b\d{1,2}(?::\d{2})?\s*(?:pm|p\.m\.)(?!\w)"), "pm", "night"),
]
_TIME_OF_DAY_RES = _longest_first(TIME_OF_DAY_PATTERNS) + _CLOCK_RES
_QUALIFIER_RES = [(_phrase_re(p), p, q) for p, q in DURATION_QUALIFIERS.items()]
_RECOVERY_RES = [(_phrase_re(p), fields) for p, fields in RECOVERY_PATTERNS]


def _number(raw: str) -> float:
    if raw in NUMBER_WORDS:
        return NUMBER_WORDS[raw]
    value = float(raw)
    return int(value) if value.is_integer() else value


def _unit(raw: str) -> str:
    return DURATION_UNITS.get(raw, DURATION_UNITS.get(raw.rstrip("s"), "hours"))


def _qualifier_unit(phrase: str) -> str:
    return "hours" if ("night" in phrase or "evening" in phrase) else "days"


# ---------- Duration rules (each yields (position, fields) per match) ----------

Match = Tuple[int, dict]


def _multi_day(low: str) -> Iterator[Match]:
    for m in _DAYS_OF_RE.finditer(low):
        yield m.start(), {"value": _number(m.group(1)), "unit": _unit(m.group(2)), "qualifier": "all"}
    for m in _CRASHED_FOR_RE.finditer(low):
        yield m.start(), {
            "value": _number(m.group(1)),
            "unit": _unit(m.group(2)),
            "progression": "progressive_worsening",
        }
    for m in _OUT_FOR_RE.finditer(low):
        yield m.start(), {"value": _number(m.group(1)), "unit": _unit(m.group(2)), "ongoing": True}


def _recovery(low: str) -> Iterator[Match]:
    for pattern, fields in _RECOVERY_RES:
        for m in pattern.finditer(low):
            yield m.start(), dict(fields)
    for m in _TAKES_RE.finditer(low):
        yield m.start(), {"value": _number(m.group(1)), "unit": _unit(m.group(2))}


def _qualifier(low: str) -> Iterator[Match]:
    for pattern, phrase, qualifier in _QUALIFIER_RES:
        for m in pattern.finditer(low):
            yield m.start(), {"qualifier": qualifier, "unit": _qualifier_unit(phrase)}


def _for_units(low: str) -> Iterator[Match]:
    for m in _FOR_RE.finditer(low):
        yield m.start(), {"value": _number(m.group(1)), "unit": _unit(m.group(2))}


def _units_of(low: str) -> Iterator[Match]:
    for m in _OF_RE.finditer(low):
        yield m.start(), {"value": _number(m.group(1)), "unit": _unit(m.group(2))}


def _since(low: str) -> Iterator[Match]:
    for m in _SINCE_RE.finditer(low):
        yield m.start(), {"since": m.group(1), "ongoing": True}


def _lasted(low: str) -> Iterator[Match]:
    for m in _LASTED_RE.finditer(low):
        yield m.start(), {"value": _number(m.group(1)), "unit": _unit(m.group(2))}


def _progression_only(low: str) -> Iterator[Match]:
    for pattern, _, progression in _PROGRESSION_RES:
        for m in pattern.finditer(low):
            yield m.start(), {"progression": progression}


def _ongoing_only(low: str) -> Iterator[Match]:
    for word in sorted(ONGOING_INDICATORS):
        for m in _phrase_re(word).finditer(low):
            yield m.start(), {"ongoing": True}


DURATION_RULES: Tuple[Callable[[str], Iterator[Match]], ...] = (
    _multi_day,
    _recovery,
    _qualifier,
    _for_units,
    _units_of,
    _since,
    _lasted,
    _progression_only,
    _ongoing_only,
)


def detect_progression(text: str) -> Optional[str]:
    low = normalize_text(text)
    for pattern, _, progression in _PROGRESSION_RES:
        if pattern.search(low):
            return progression
    return None


def has_ongoing_indicator(text: str) -> bool:
    return any(tok in ONGOING_INDICATORS for tok in tokenize(text))


def extract_duration(text: str) -> Optional[SymptomDuration]:
    """Duration described anywhere in text, or None.

    "3 days of fatigue" -> value=3, unit="days", qualifier="all"
    "nausea since tuesday" -> since="tuesday", ongoing=True
    """
    low = normalize_text(text)
    if not low.strip():
        return None
    progression = detect_progression(low)
    ongoing = has_ongoing_indicator(low)

    for rule in DURATION_RULES:
        first = next(rule(low), None)
        if first is None:
            continue
        fields = dict(first[1])
        if progression and not fields.get("progression"):
            fields["progression"] = progression
        if ongoing and not fields.get("ongoing"):
            fields["ongoing"] = True
        return SymptomDuration(**fields)
    return None


def extract_time_of_day(text: str) -> Optional[str]:
    low = normalize_text(text)
    for pattern, _, time_of_day in _TIME_OF_DAY_RES:
        if pattern.search(low):
            return time_of_day
    return None


@dataclass
class TemporalMarker:
    position: int
    phrase: str
    time_of_day: Optional[str] = None
    duration: Optional[SymptomDuration] = None


def find_temporal_markers(text: str) -> List[TemporalMarker]:
    """Every time-of-day and duration cue in text with its character position.

    Duration markers are listed in rule precedence order so that, at equal
    distance, the higher-priority rule wins attachment.
    """
    low = normalize_text(text)
    markers: List[TemporalMarker] = []
    for pattern, phrase, time_of_day in _TIME_OF_DAY_RES:
        for m in pattern.finditer(low):
            markers.append(TemporalMarker(position=m.start(), phrase=phrase, time_of_day=time_of_day))
    for rule in DURATION_RULES:
        for position, fields in rule(low):
            markers.append(
                TemporalMarker(position=position, phrase=rule.__name__.lstrip("_"), duration=SymptomDuration(**fields))
            )
    return markers


def attach_temporal_info(symptoms: List[ExtractedSymptom], text: str) -> List[ExtractedSymptom]:
    """Give each symptom the nearest time-of-day and nearest duration within ATTACH_DISTANCE chars."""
    markers = find_temporal_markers(text)
    if not markers:
        return symptoms
    low = normalize_text(text)

    enriched: List[ExtractedSymptom] = []
    for symptom in symptoms:
        pos = low.find(symptom.matched_text.lower())
        if pos == -1:
            enriched.append(symptom)
            continue
        best_time, best_time_dist = None, ATTACH_DISTANCE
        best_duration, best_duration_dist = None, ATTACH_DISTANCE
        for marker in markers:
            distance = abs(marker.position - pos)
            if marker.time_of_day and distance < best_time_dist:
                best_time, best_time_dist = marker.time_of_day, distance
            if marker.duration is not None and distance < best_duration_dist:
                best_duration, best_duration_dist = marker.duration, distance
        update = {}
        if best_time:
            update["time_of_day"] = best_time
        if best_duration is not None:
            update["duration"] = best_duration
        enriched.append(symptom.model_copy(update=update) if update else symptom)
    return enriched


__all__ = [
    "DURATION_UNITS",
    "NUMBER_WORDS",
    "PROGRESSION_PATTERNS",
    "DURATION_QUALIFIERS",
    "ONGOING_INDICATORS",
    "RECOVERY_PATTERNS",
    "TIME_OF_DAY_PATTERNS",
    "TemporalMarker",
    "detect_progression",
    "has_ongoing_indicator",
    "extract_duration",
    "extract_time_of_day",
    "find_temporal_markers",
    "attach_temporal_info",
]

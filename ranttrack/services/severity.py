"""Severity inference: numeric ratings, keyword severity and comparative language."""
import logging
import re
from typing import Dict, List, Optional, Tuple, TypedDict

from ranttrack.services.tokenizer import normalize_text, token_index_at, tokenize

logger = logging.getLogger("ranttrack")

SEVERITY_INDICATORS: Dict[str, str] = {
    "little": "mild", "slight": "mild", "slightly": "mild", "mild": "mild", "mildly": "mild",
    "minor": "mild", "bit": "mild", "a bit": "mild", "touch": "mild", "a touch": "mild",
    "somewhat": "mild", "kind of": "mild", "kinda": "mild", "sort of": "mild", "sorta": "mild",
    "manageable": "mild", "tolerable": "mild", "not too bad": "mild", "low level": "mild",
    "low-level": "mild", "background": "mild", "barely": "mild", "hardly": "mild",
    "lightly": "mild",

    "moderate": "moderate", "moderately": "moderate", "pretty": "moderate", "fairly": "moderate",
    "quite": "moderate", "noticeable": "moderate", "noticeably": "moderate",
    "definitely": "moderate", "significant": "moderate", "considerably": "moderate",
    "reasonably": "moderate",

    "severe": "severe", "severely": "severe", "extreme": "severe", "extremely": "severe",
    "very": "severe", "really": "severe", "super": "severe", "intense": "severe",
    "intensely": "severe", "awful": "severe", "terrible": "severe", "horrible": "severe",
    "unbearable": "severe", "excruciating": "severe", "crippling": "severe",
    "debilitating": "severe", "worst": "severe", "massive": "severe", "major": "severe",
    "brutal": "severe", "crushing": "severe", "killer": "severe", "insane": "severe",
    "crazy": "severe", "wild": "severe", "absolutely": "severe", "totally": "severe",
    "completely": "severe", "entirely": "severe", "incredibly": "severe",
    "unbelievably": "severe", "ridiculously": "severe", "impossibly": "severe",
}

# Checked in order; the first phrase present decides the direction.
COMPARATIVE_PATTERNS: Tuple[Tuple[str, str], ...] = (
    ("worse", "worse"),
    ("worse than", "worse"),
    ("getting worse", "worse"),
    ("much worse", "worse"),
    ("way worse", "worse"),
    ("more", "worse"),
    ("increased", "worse"),
    ("worsening", "worse"),
    ("deteriorating", "worse"),
    ("declining", "worse"),
    ("better", "better"),
    ("better than", "better"),
    ("getting better", "better"),
    ("improving", "better"),
    ("improved", "better"),
    ("less", "better"),
    ("decreased", "better"),
    ("reduced", "better"),
    ("same", "same"),
    ("same as", "same"),
    ("no change", "same"),
    ("unchanged", "same"),
    ("still", "same"),
)

DEFAULT_SEVERITY_BY_SYMPTOM: Dict[str, str] = {
    "pem": "severe",
    "flare": "severe",
    "crash": "severe",
    "syncope": "severe",
    "fainting": "severe",
    "suicidal_ideation": "severe",
    "panic": "severe",
    "excruciating_pain": "severe",
    "unbearable_pain": "severe",
    "fatigue": "moderate",
    "brain_fog": "moderate",
    "pain": "moderate",
    "dizziness": "moderate",
    "nausea": "moderate",
    "headache": "moderate",
    "anxiety": "moderate",
    "low_mood": "moderate",
}

SEVERITY_WINDOW = 5

_RATIO_PATTERNS = [
    re.compile(r"(\d+(?:\.\d+)?)\s*out\s*of\s*(\d+)"),
    re.compile(r"(\d+(?:\.\d+)?)/(\d+)"),
]
_PERCENT_PATTERN = re.compile(r"(\d+)%")

_FATIGUE_KEYWORDS = ("energy", "fatigue", "tired", "exhaust")
_PAIN_KEYWORDS = ("pain", "hurt", "ache")

# Severity phrases spanning more than one token, matched on the joined window.
_MULTIWORD_SEVERITY = [
    (re.compile(r"(?<!\w)" + re.escape(phrase) + r"(?!\w)"), level)
    for phrase, level in SEVERITY_INDICATORS.items()
    if " " in phrase
]
_COMPARATIVE_RES = [
    (re.compile(r"(?<!\w)" + re.escape(phrase) + r"(?!\w)"), direction)
    for phrase, direction in COMPARATIVE_PATTERNS
]


class NumericSeverity(TypedDict):
    score: float
    max_score: float
    severity: str
    category: Optional[str]
    matched_text: str


def severity_for_ratio(ratio: float) -> str:
    if ratio <= 0.3:
        return "mild"
    if ratio <= 0.6:
        return "moderate"
    return "severe"


def _attribute_rating(context: str) -> Optional[str]:
    """Category whose keyword sits closest (rightmost) before a rating."""
    category = None
    closest = -1
    for keyword in _FATIGUE_KEYWORDS:
        pos = context.rfind(keyword)
        if pos > closest:
            closest, category = pos, "fatigue"
    for keyword in _PAIN_KEYWORDS:
        pos = context.rfind(keyword)
        if pos > closest:
            closest, category = pos, "pain"
    fog = context.rfind("fog")
    brain = context.rfind("brain")
    if fog > closest and brain >= 0 and abs(fog - brain) < 10:
        category = "brain_fog"
    return category


def extract_numeric_severity(text: str) -> List[NumericSeverity]:
    """Find '7/10', '3 out of 10' and 'energy at 30%' style ratings.

    Ratio ratings are kept even when no symptom keyword precedes them
    (category None); percentages are only kept when attributed to energy.
    """
    low = normalize_text(text)
    results: List[NumericSeverity] = []

    for pattern in _RATIO_PATTERNS:
        for match in pattern.finditer(low):
            score = float(match.group(1))
            max_score = float(match.group(2))
            if max_score == 0:
                continue
            context = low[max(0, match.start() - 50): match.start()]
            results.append(
                {
                    "score": score,
                    "max_score": max_score,
                    "severity": severity_for_ratio(score / max_score),
                    "category": _attribute_rating(context),
                    "matched_text": match.group(0),
                }
            )

    for match in _PERCENT_PATTERN.finditer(low):
        percentage = float(match.group(1))
        context = low[max(0, match.start() - 30): match.start()]
        if not any(k in context for k in ("energy", "fatigue")):
            continue
        results.append(
            {
                "score": percentage,
                "max_score": 100.0,
                "severity": severity_for_ratio(percentage / 100),
                "category": "fatigue",
                "matched_text": match.group(0),
            }
        )

    if results:
        logger.debug({"function": "extract_numeric_severity", "count": len(results)})
    return results


def detect_comparative(text: str) -> Optional[str]:
    low = normalize_text(text)
    for pattern, direction in _COMPARATIVE_RES:
        if pattern.search(low):
            return direction
    return None


def find_severity_from_tokens(tokens: List[str], index: int, window: int = SEVERITY_WINDOW) -> Optional[str]:
    """Severity keyword within `window` tokens of tokens[index]."""
    start = max(0, index - window)
    end = min(len(tokens), index + window)
    for tok in tokens[start:end]:
        level = SEVERITY_INDICATORS.get(tok)
        if level:
            return level
    joined = " ".join(tokens[start:end])
    for pattern, level in _MULTIWORD_SEVERITY:
        if pattern.search(joined):
            return level
    return None


def find_severity(text: str, char_index: int) -> Optional[str]:
    """Severity keyword near the token starting at character offset char_index."""
    tokens = tokenize(text)
    return find_severity_from_tokens(tokens, token_index_at(text, char_index))


def assign_default_severity(category: str, text: str, detected: Optional[str]) -> str:
    if detected:
        return detected
    default = DEFAULT_SEVERITY_BY_SYMPTOM.get(category)
    if default:
        return default
    comparative = detect_comparative(text)
    if comparative == "worse":
        return "severe"
    if comparative == "better":
        return "mild"
    return "moderate"


__all__ = [
    "SEVERITY_INDICATORS",
    "COMPARATIVE_PATTERNS",
    "DEFAULT_SEVERITY_BY_SYMPTOM",
    "NumericSeverity",
    "extract_numeric_severity",
    "detect_comparative",
    "find_severity_from_tokens",
    "find_severity",
    "assign_default_severity",
    "severity_for_ratio",
]

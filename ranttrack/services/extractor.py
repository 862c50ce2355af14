"""Rule-based symptom extraction from free-form illness narratives.

extract_symptoms runs one deterministic pass:

    numeric severity -> pain details -> built-in phrases -> custom phrases
    -> single-token lemmas -> trigger linking -> confidence -> context filter
    -> conflict resolution -> temporal attachment -> spoons -> repeat flag

Each category appears at most once; later stages only enrich or drop entries.
"""
import logging
import re
from functools import lru_cache
from typing import Dict, List, Mapping, Optional

from ranttrack.schemas.symptoms import ExtractedSymptom, ExtractionResult, PainDetails
from ranttrack.services.body_locations import category_for_location
from ranttrack.services.confidence import add_confidence_scores
from ranttrack.services.context_filter import apply_context_filter, resolve_symptom_conflicts
from ranttrack.services.lexicon import longest_first, merged_lemmas, phrases_longest_first
from ranttrack.services.pain_details import extract_pain_details_from_tokens
from ranttrack.services.severity import (
    assign_default_severity,
    extract_numeric_severity,
    find_severity,
    find_severity_from_tokens,
)
from ranttrack.services.spoons import extract_spoon_count
from ranttrack.services.temporal import attach_temporal_info
from ranttrack.services.tokenizer import is_negated, normalize_text, tokenize
from ranttrack.services.triggers import extract_activity_triggers, link_triggers_to_symptoms

logger = logging.getLogger("ranttrack")

REPEAT_PATTERNS = (
    re.compile(r"\bsame\s+(?:as|like)\s+(?:yesterday|last\s+time|before|the\s+day\s+before)\b"),
    re.compile(r"\brepeat(?:ed)?\b"),
    re.compile(r"\b(?:no\s+change|still\s+the\s+same)\b"),
)


@lru_cache(maxsize=4096)
def _phrase_pattern(phrase: str) -> "re.Pattern":
    return re.compile(r"(?<!\w)" + re.escape(phrase) + r"(?!\w)")


def clean_custom_lemmas(custom_lemmas: Optional[Mapping]) -> Dict[str, str]:
    """Normalize a word -> symptom map, silently skipping unusable entries."""
    cleaned: Dict[str, str] = {}
    if not isinstance(custom_lemmas, Mapping):
        return cleaned
    for word, symptom in custom_lemmas.items():
        if not isinstance(word, str) or not isinstance(symptom, str):
            continue
        word = " ".join(normalize_text(word).split())
        symptom = symptom.strip()
        if word and symptom:
            cleaned[word] = symptom
    return cleaned


def detect_repeat_previous(text: str) -> bool:
    low = normalize_text(text)
    return any(p.search(low) for p in REPEAT_PATTERNS)


class _Collector:
    """Ordered, first-writer-wins symptom list keyed by category."""

    def __init__(self):
        self.items: Dict[str, ExtractedSymptom] = {}

    def __contains__(self, category: str) -> bool:
        return category in self.items

    def add(self, symptom: ExtractedSymptom) -> None:
        if symptom.category not in self.items:
            self.items[symptom.category] = symptom

    def as_list(self) -> List[ExtractedSymptom]:
        return list(self.items.values())


def match_lexical(text: str, custom_lemmas: Optional[Mapping[str, str]] = None) -> List[ExtractedSymptom]:
    """Candidate symptoms from numeric ratings, pain mentions, phrases and lemmas."""
    custom = clean_custom_lemmas(custom_lemmas)
    low = normalize_text(text)
    tokens = tokenize(text)
    found = _Collector()
    severity_map: Dict[str, str] = {}

    for rating in extract_numeric_severity(low):
        category = rating["category"]
        if not category:
            continue
        severity_map[category] = rating["severity"]
        found.add(
            ExtractedSymptom(
                category=category,
                matched_text=rating["matched_text"],
                method="phrase",
                severity=rating["severity"],
            )
        )

    for mention in extract_pain_details_from_tokens(tokens):
        category = category_for_location(mention["location"])
        if category in found:
            continue
        found.add(
            ExtractedSymptom(
                category=category,
                matched_text=mention["matched_text"],
                method="phrase",
                severity=mention["severity"] or assign_default_severity(category, low, None),
                pain_details=PainDetails(qualifiers=mention["qualifiers"], location=mention["location"]),
            )
        )

    custom_phrases = longest_first({w: s for w, s in custom.items() if " " in w})
    for phrase, category in list(phrases_longest_first()) + custom_phrases:
        if category in found:
            continue
        match = _phrase_pattern(phrase).search(low)
        if not match:
            continue
        detected = find_severity(low, match.start())
        found.add(
            ExtractedSymptom(
                category=category,
                matched_text=phrase,
                method="phrase",
                severity=severity_map.get(category) or assign_default_severity(category, low, detected),
            )
        )

    lemmas = merged_lemmas(custom)
    for i, token in enumerate(tokens):
        category = lemmas.get(token)
        if not category or category in found or is_negated(tokens, i):
            continue
        detected = find_severity_from_tokens(tokens, i)
        found.add(
            ExtractedSymptom(
                category=category,
                matched_text=token,
                method="lemma",
                severity=severity_map.get(category) or assign_default_severity(category, low, detected),
            )
        )

    return found.as_list()


def extract_symptoms(text: str, custom_lemmas: Optional[Mapping[str, str]] = None) -> ExtractionResult:
    """Structured symptom observations for one narrative.

    Pure and total: any string (None is treated as "") yields a result.
    """
    text = text if isinstance(text, str) else ""
    if not text.strip():
        return ExtractionResult(text=text, symptoms=[])

    custom = clean_custom_lemmas(custom_lemmas)
    symptoms = match_lexical(text, custom)
    candidates = extract_activity_triggers(text, merged_lemmas(custom))
    symptoms = link_triggers_to_symptoms(symptoms, candidates, text)
    symptoms = add_confidence_scores(symptoms, text)
    symptoms = apply_context_filter(symptoms, text)
    symptoms = resolve_symptom_conflicts(symptoms)
    symptoms = attach_temporal_info(symptoms, text)

    result = ExtractionResult(
        text=text,
        symptoms=symptoms,
        spoon_count=extract_spoon_count(text),
        repeat_previous=True if detect_repeat_previous(text) else None,
    )
    logger.debug(
        {
            "function": "extract_symptoms",
            "symptoms": len(result.symptoms),
            "triggers": len(candidates),
            "custom_lemmas": len(custom),
        }
    )
    return result


__all__ = [
    "REPEAT_PATTERNS",
    "clean_custom_lemmas",
    "detect_repeat_previous",
    "match_lexical",
    "extract_symptoms",
]

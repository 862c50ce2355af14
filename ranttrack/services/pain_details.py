"""Pain qualifiers and body locations around pain mentions."""
from typing import List, Optional, TypedDict

from ranttrack.services.body_locations import PAIN_QUALIFIERS, PAIN_WORDS, find_location
from ranttrack.services.severity import SEVERITY_INDICATORS
from ranttrack.services.tokenizer import is_boundary, tokenize

LOOKBACK = 6
LOOKAHEAD = 8


class PainMention(TypedDict):
    qualifiers: List[str]
    location: Optional[str]
    severity: Optional[str]
    matched_text: str


def _find_location_forward(tokens: List[str], i: int):
    """First location at or after tokens[i]; longer windows win at each position."""
    end = min(len(tokens), i + LOOKAHEAD)
    for j in range(i, end):
        if is_boundary(tokens[j]):
            break
        for size in (3, 2, 1):
            if j + size > len(tokens):
                continue
            span = tokens[j: j + size]
            if any(is_boundary(t) for t in span):
                continue
            location = find_location(" ".join(span))
            if location:
                return location, j + size - 1
    return None, i


def extract_pain_details_from_tokens(tokens: List[str]) -> List[PainMention]:
    """One entry per pain word or qualifier token that has qualifiers or a location.

    Words that are severity keywords ("severe", "intense") set severity and
    are not listed as qualifiers.

    "severe sharp stabbing pain in my neck" ->
    {qualifiers: ["sharp", "stabbing"], location: "neck", severity: "severe"}
    """
    mentions: List[PainMention] = []
    for i, token in enumerate(tokens):
        is_pain_word = token in PAIN_WORDS
        own_qualifier = PAIN_QUALIFIERS.get(token)
        if not (is_pain_word or own_qualifier):
            continue
        # "sharp stabbing pain" is reported once, at its last word
        if not is_pain_word and i + 1 < len(tokens) and (tokens[i + 1] in PAIN_WORDS or tokens[i + 1] in PAIN_QUALIFIERS):
            continue

        qualifiers: List[str] = []
        severity = None
        if own_qualifier and token in SEVERITY_INDICATORS:
            severity = SEVERITY_INDICATORS[token]
            own_qualifier = None
        start = i
        for j in range(i - 1, max(0, i - LOOKBACK) - 1, -1):
            prev = tokens[j]
            if is_boundary(prev):
                break
            # intensity words such as "severe" count as severity only
            if prev in SEVERITY_INDICATORS:
                severity = SEVERITY_INDICATORS[prev]
                start = j
            elif prev in PAIN_QUALIFIERS:
                qualifiers.insert(0, PAIN_QUALIFIERS[prev])
                start = j
        if own_qualifier:
            qualifiers.append(own_qualifier)

        location, end = _find_location_forward(tokens, i)

        if not qualifiers and location is None:
            continue
        mentions.append(
            {
                "qualifiers": list(dict.fromkeys(qualifiers)),
                "location": location,
                "severity": severity,
                "matched_text": " ".join(tokens[start: end + 1]),
            }
        )
    return mentions


def extract_pain_details(text: str) -> List[PainMention]:
    return extract_pain_details_from_tokens(tokenize(text))


__all__ = ["PainMention", "extract_pain_details", "extract_pain_details_from_tokens"]

"""Context-aware filtering of ambiguous lemma matches and conflicting symptom pairs."""
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, FrozenSet, List, Tuple

import yaml

from ranttrack.schemas.symptoms import ExtractedSymptom
from ranttrack.services.tokenizer import is_negated, tokenize, window

logger = logging.getLogger("ranttrack")

CONFIG_PATH = Path(__file__).parent.parent / "config" / "context_rules.yaml"

VALID = "valid"
INVALID = "invalid"
UNCERTAIN = "uncertain"

DEFAULT_MIN_CONFIDENCE = 0.5


@dataclass(frozen=True)
class ContextRule:
    supporting: FrozenSet[str]
    invalidating: FrozenSet[str]
    window: int
    min_confidence: float


def _build_rule(raw: dict, groups: Dict[str, List[str]]) -> ContextRule:
    supporting = set(raw.get("supporting") or [])
    for group in raw.get("supporting_groups") or []:
        supporting.update(groups[group])
    return ContextRule(
        supporting=frozenset(str(w) for w in supporting),
        invalidating=frozenset(str(w) for w in raw.get("invalidating") or []),
        window=int(raw.get("window", 4)),
        min_confidence=float(raw.get("min_confidence", DEFAULT_MIN_CONFIDENCE)),
    )


@lru_cache(maxsize=1)
def load_context_config(path: Path = CONFIG_PATH) -> Tuple[Dict[str, ContextRule], Tuple[Tuple[str, str], ...]]:
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}
    groups = raw.get("word_groups") or {}
    rules = {word: _build_rule(spec, groups) for word, spec in (raw.get("rules") or {}).items()}
    pairs = tuple((a, b) for a, b in raw.get("conflicting_pairs") or [])
    return rules, pairs


def context_rules() -> Dict[str, ContextRule]:
    return load_context_config()[0]


def conflicting_pairs() -> Tuple[Tuple[str, str], ...]:
    return load_context_config()[1]


def is_context_sensitive(token: str) -> bool:
    return token.lower() in context_rules()


def min_confidence_without_context(token: str) -> float:
    rule = context_rules().get(token.lower())
    return rule.min_confidence if rule else DEFAULT_MIN_CONFIDENCE


def validate_lemma_context(token: str, tokens: List[str], index: int) -> str:
    """Classify a lemma occurrence as valid, invalid or uncertain from its neighbours."""
    rule = context_rules().get(token.lower())
    if rule is None:
        return VALID
    neighbours = {tokens[i] for i in window(tokens, index, rule.window, rule.window, stop_at_boundary=True)}
    supported = bool(neighbours & rule.supporting)
    invalidated = bool(neighbours & rule.invalidating)
    if invalidated and not supported:
        return INVALID
    if supported:
        return VALID
    return UNCERTAIN


def _match_index(word: str, tokens: List[str]) -> int:
    """Index the lemma pass matched: the first occurrence that is not negated."""
    for i, token in enumerate(tokens):
        if token == word and not is_negated(tokens, i):
            return i
    return tokens.index(word)


def apply_context_filter(symptoms: List[ExtractedSymptom], text: str) -> List[ExtractedSymptom]:
    """Drop or down-weight lemma matches on ambiguous words; phrases pass through."""
    tokens = tokenize(text)
    rules = context_rules()
    kept: List[ExtractedSymptom] = []
    for symptom in symptoms:
        word = symptom.matched_text.lower()
        rule = rules.get(word)
        if symptom.method != "lemma" or rule is None or word not in tokens:
            kept.append(symptom)
            continue
        verdict = validate_lemma_context(word, tokens, _match_index(word, tokens))
        if verdict == INVALID:
            logger.debug({"function": "apply_context_filter", "status": "dropped", "category": symptom.category, "word": word})
            continue
        if verdict == UNCERTAIN:
            current = symptom.confidence if symptom.confidence is not None else DEFAULT_MIN_CONFIDENCE
            symptom = symptom.model_copy(update={"confidence": min(current, rule.min_confidence)})
        kept.append(symptom)
    return kept


def resolve_symptom_conflicts(symptoms: List[ExtractedSymptom]) -> List[ExtractedSymptom]:
    """Keep the higher-confidence member of each mutually exclusive pair (first on ties)."""
    drop = set()
    for first, second in conflicting_pairs():
        idx_a = next((i for i, s in enumerate(symptoms) if s.category == first), None)
        idx_b = next((i for i, s in enumerate(symptoms) if s.category == second), None)
        if idx_a is None or idx_b is None:
            continue
        conf_a = symptoms[idx_a].confidence if symptoms[idx_a].confidence is not None else 0.5
        conf_b = symptoms[idx_b].confidence if symptoms[idx_b].confidence is not None else 0.5
        drop.add(idx_b if conf_a >= conf_b else idx_a)
    return [s for i, s in enumerate(symptoms) if i not in drop]


__all__ = [
    "ContextRule",
    "load_context_config",
    "context_rules",
    "conflicting_pairs",
    "is_context_sensitive",
    "min_confidence_without_context",
    "validate_lemma_context",
    "apply_context_filter",
    "resolve_symptom_conflicts",
]

import re
from typing import List

# Sentence boundaries survive tokenization as standalone tokens.
SENTENCE_BOUNDARIES = {".", "!", "?"}

NEGATION_WORDS = {
    "not", "no", "n't", "never", "without",
    "dont", "don't", "doesnt", "doesn't", "didnt", "didn't",
    "havent", "haven't", "hasnt", "hasn't", "isnt", "isn't",
    "arent", "aren't", "wont", "won't", "cant", "can't",
    "none", "neither", "nothing", "nowhere",
    "hardly", "barely", "scarcely",
}

NEGATION_LOOKBACK = 10

_BOUNDARY_RE = re.compile(r"(?<!\d)[.!?]+|[.!?]+(?!\d)")
_SEPARATOR_RE = re.compile(r"[,;:\"()\[\]{}]")
_QUOTE_RE = re.compile(r"(?<![a-z0-9])'|'(?![a-z0-9])")

_PHRASE_NEGATION_PATTERNS = [
    re.compile(r"\b(no|not|never|none|without|lack of|hardly|barely|scarcely)\b"),
    re.compile(r"n't\b"),
    re.compile(r"\b(no|without|lack of|lacking)\s+\w+\s+of\b"),
    re.compile(r"\b(not|never|none)\s+(any|a|some|all|much)\b"),
    re.compile(r"\b(hardly|barely|scarcely)\s+(any|a|some|all)\b"),
    re.compile(r"\b(don't|doesn't|didn't|won't|wouldn't|can't|couldn't|shouldn't)\s+(have|get|feel|experience)"),
    re.compile(r"\b(haven't|hasn't|hadn't)\s+(had|got)"),
]


def normalize_text(text: str) -> str:
    """Lowercase and fold typographic apostrophes to ASCII."""
    return (text or "").lower().replace("’", "'").replace("‘", "'")


def tokenize(text: str) -> List[str]:
    """Split text into lowercase word tokens.

    Separator punctuation becomes whitespace. Runs of '.', '!' or '?' become a
    single '.'/'!'/'?' token so windows can stop at sentence ends. Decimal
    points ("7.5/10") are not boundaries. In-word apostrophes are kept
    ("don't"), quote marks are not.
    """
    low = normalize_text(text)
    low = _SEPARATOR_RE.sub(" ", low)
    low = _QUOTE_RE.sub(" ", low)
    low = _BOUNDARY_RE.sub(lambda m: f" {m.group(0)[0]} ", low)
    return [t for t in low.split() if t]


def is_boundary(token: str) -> bool:
    return token in SENTENCE_BOUNDARIES


def is_negated(tokens: List[str], index: int) -> bool:
    """True if a negation word precedes tokens[index] within the same sentence."""
    start = max(0, index - NEGATION_LOOKBACK)
    for i in range(index - 1, start - 1, -1):
        tok = tokens[i]
        if is_boundary(tok):
            return False
        if tok in NEGATION_WORDS or "n't" in tok:
            return True
    return False


def is_phrase_negated(text: str, char_index: int, lookback: int = 50) -> bool:
    """Character-window negation check for phrase matches.

    Only the text between the nearest preceding sentence end and char_index
    is examined.
    """
    low = normalize_text(text)
    char_index = max(0, min(char_index, len(low)))
    start = max(0, char_index - lookback)
    for i in range(char_index - 1, start - 1, -1):
        if low[i] in SENTENCE_BOUNDARIES:
            start = i + 1
            break
    window = low[start:char_index]
    return any(p.search(window) for p in _PHRASE_NEGATION_PATTERNS)


def token_index_at(text: str, char_index: int) -> int:
    """Index of the token that starts at or after char_index."""
    return len(tokenize((text or "")[: max(0, char_index)]))


def token_offsets(text: str, tokens: List[str]) -> List[int]:
    """Character offset of each token in normalize_text(text), found left to right.

    -1 marks a token that cannot be located.
    """
    low = normalize_text(text)
    offsets = []
    cursor = 0
    for tok in tokens:
        pos = low.find(tok, cursor)
        offsets.append(pos)
        if pos != -1:
            cursor = pos + len(tok)
    return offsets


def sentence_distance(text: str, pos_a: int, pos_b: int) -> int:
    """Number of sentence-ending marks between two character offsets."""
    lo, hi = sorted((pos_a, pos_b))
    return sum(1 for ch in (text or "")[lo:hi] if ch in SENTENCE_BOUNDARIES)


def window(tokens: List[str], idx: int, before: int, after: int, stop_at_boundary: bool = False) -> List[int]:
    """Indices of tokens around idx (excluding idx), optionally clipped to its sentence."""
    lo = max(0, idx - before)
    hi = min(len(tokens), idx + after + 1)
    left = []
    for i in range(idx - 1, lo - 1, -1):
        if stop_at_boundary and is_boundary(tokens[i]):
            break
        left.append(i)
    right = []
    for i in range(idx + 1, hi):
        if stop_at_boundary and is_boundary(tokens[i]):
            break
        right.append(i)
    return list(reversed(left)) + right


__all__ = [
    "NEGATION_WORDS",
    "SENTENCE_BOUNDARIES",
    "normalize_text",
    "tokenize",
    "is_boundary",
    "is_negated",
    "is_phrase_negated",
    "token_index_at",
    "token_offsets",
    "sentence_distance",
    "window",
]

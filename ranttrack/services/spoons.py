"""Spoon-theory energy budgets ("I only have 2 spoons left")."""
import re
from typing import List, Optional, Tuple

from ranttrack.schemas.symptoms import SpoonCount
from ranttrack.services.tokenizer import normalize_text

ZERO_SPOON_PHRASES = (
    "completely out of spoons",
    "ran out of spoons",
    "no spoons left",
    "out of spoons",
    "no spoons",
    "zero spoons",
    "negative spoons",
    "spoon deficit",
)

# Typical good day is 10-12 spoons; energy is scaled to 0-10 from 12.
SPOONS_PER_DAY = 12
DEFAULT_SPOONS = 5
# Larger counts are clamped here.
MAX_SPOONS = 100

# (role, pattern); group 1 is the count. Earlier patterns claim a number first.
SPOON_PATTERNS: Tuple[Tuple[str, "re.Pattern"], ...] = (
    ("started", re.compile(r"\b(?:started|began|woke(?:\s+up)?)\s+(?:with\s+)?(\d+)\s+spoons?\b")),
    ("used", re.compile(r"\b(?:used|spent|cost|took)\s+(?:up\s+)?(\d+)(?:\s+spoons?\b|(?=\s*(?:[,.!?;]|$)))")),
    ("current", re.compile(r"\b(\d+)\s+spoons?\s+(?:left|remaining|today)\b")),
    ("current", re.compile(r"\b(?:have|got|only|just)\s+(\d+)\s+spoons?\b")),
    ("current", re.compile(r"\b(\d+)\s+spoons?\b")),
)

_ZERO_RES = [re.compile(r"(?<!\w)" + re.escape(p) + r"(?!\w)") for p in ZERO_SPOON_PHRASES]


def _round_tenth(value: float) -> float:
    return int(value * 10 + 0.5) / 10


def _spoon_number(raw: str) -> int:
    if len(raw) > len(str(MAX_SPOONS)):
        return MAX_SPOONS
    return min(int(raw), MAX_SPOONS)


def energy_level(spoons: float) -> float:
    spoons = min(max(0.0, spoons), SPOONS_PER_DAY)
    return min(10.0, max(0.0, _round_tenth(spoons * (10 / SPOONS_PER_DAY))))


def extract_spoon_count(text: str) -> Optional[SpoonCount]:
    """Document-level spoon budget, or None when spoons are not mentioned.

    "Started with 5 spoons, used 3" -> started=5, used=3, current=2
    "Completely out of spoons" -> current=0
    """
    low = normalize_text(text)
    if "spoon" not in low:
        return None
    if any(p.search(low) for p in _ZERO_RES):
        return SpoonCount(current=0, energy_level=0)

    found = {}
    claimed: List[int] = []
    for role, pattern in SPOON_PATTERNS:
        for match in pattern.finditer(low):
            if match.start(1) in claimed:
                continue
            claimed.append(match.start(1))
            found.setdefault(role, _spoon_number(match.group(1)))

    if not found:
        return None
    started = found.get("started")
    used = found.get("used")
    current = found.get("current")
    if current is None:
        if started is not None and used is not None:
            current = max(0, started - used)
        elif started is not None:
            current = started
        else:
            current = DEFAULT_SPOONS
    return SpoonCount(current=current, used=used, started=started, energy_level=energy_level(current))


__all__ = ["ZERO_SPOON_PHRASES", "SPOON_PATTERNS", "energy_level", "extract_spoon_count"]

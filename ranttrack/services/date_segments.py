"""Split multi-day "catch-up" narratives into per-day segments.

"Monday I crashed. Yesterday my head hurt." becomes two segments, each dated.
Every date is taken to be in the past relative to the reference date.
"""
import logging
import math
import re
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional, Tuple

from dateutil import parser as date_parser
from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta

from ranttrack.services.temporal import NUMBER_WORDS

logger = logging.getLogger("ranttrack")

WEEKDAYS = {
    "monday": MO,
    "tuesday": TU,
    "wednesday": WE,
    "thursday": TH,
    "friday": FR,
    "saturday": SA,
    "sunday": SU,
}

_MONTH = (
    r"(?:january|february|march|april|may|june|july|august|september|october|november|december"
    r"|jan|feb|mar|apr|jun|jul|aug|sept|sep|oct|nov|dec)"
)
_ORDINAL = r"(?:st|nd|rd|th)?"
_YEAR = r"(?:,?\s+(?P<year>\d{4}))?"
_COUNT = r"(?P<count>\d+|" + "|".join(sorted(NUMBER_WORDS, key=len, reverse=True)) + r"|a\s+couple\s+of|a\s+few)"


@dataclass
class DateMarker:
    date: datetime
    matched_text: str
    start: int
    end: int
    confidence: float
    date_label: str


@dataclass
class DateSegment:
    date: datetime
    date_label: str
    text: str
    start: int
    end: int
    explicit: bool


def _start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def _count(raw: str) -> int:
    raw = " ".join(raw.lower().split())
    if raw == "a couple of":
        return 2
    if raw == "a few":
        return 3
    if raw in NUMBER_WORDS:
        return int(NUMBER_WORDS[raw])
    return int(raw)


def _relative_days(offset: int) -> Callable:
    def resolve(match: "re.Match", reference: datetime) -> datetime:
        return _start_of_day(reference) - timedelta(days=offset)

    return resolve


def _days_ago(match: "re.Match", reference: datetime) -> datetime:
    days = _count(match.group("count"))
    if match.group("unit").lower().startswith("week"):
        days *= 7
    return _start_of_day(reference) - timedelta(days=days)


def _weekday(match: "re.Match", reference: datetime) -> datetime:
    weekday = WEEKDAYS[match.group("day").lower()]
    base = _start_of_day(reference)
    if match.group("prefix") and match.group("prefix").lower().startswith("last"):
        # "last friday" said on a friday means a week ago
        return base + relativedelta(days=-1, weekday=weekday(-1))
    return base + relativedelta(weekday=weekday(-1))


def _absolute(match: "re.Match", reference: datetime) -> Optional[datetime]:
    try:
        return date_parser.parse(match.group(0), default=_start_of_day(reference), fuzzy=True)
    except (ValueError, OverflowError):
        logger.debug({"function": "extract_dates", "status": "unparsed", "matched": match.group(0)})
        return None


# (pattern, resolver, day known, month known)
DATE_PATTERNS: List[Tuple["re.Pattern", Callable, bool, bool]] = [
    (re.compile(r"\bthe\s+day\s+before\s+yesterday\b", re.I), _relative_days(2), True, False),
    (re.compile(r"\b(?:yesterday|last\s+night)\b", re.I), _relative_days(1), True, False),
    (re.compile(r"\b(?:today|tonight|this\s+(?:morning|afternoon|evening))\b", re.I), _relative_days(0), True, False),
    (re.compile(r"\b" + _COUNT + r"\s+(?P<unit>days?|weeks?)\s+(?:ago|back)\b", re.I), _days_ago, True, False),
    (
        re.compile(r"\b(?:(?P<prefix>last|on|this\s+past)\s+)?(?P<day>" + "|".join(WEEKDAYS) + r")\b", re.I),
        _weekday,
        True,
        False,
    ),
    (re.compile(r"\b" + _MONTH + r"\.?\s+\d{1,2}" + _ORDINAL + r"\b" + _YEAR, re.I), _absolute, True, True),
    (re.compile(r"\b\d{1,2}" + _ORDINAL + r"\s+(?:of\s+)?" + _MONTH + r"\b" + _YEAR, re.I), _absolute, True, True),
    # bare "3/15" is only a date after "on"; "7/10" is usually a rating
    (re.compile(r"\b\d{1,2}/\d{1,2}/(?P<year>\d{2,4})\b"), _absolute, True, True),
    (re.compile(r"(?<=\bon\s)\d{1,2}/\d{1,2}\b(?!/)", re.I), _absolute, True, True),
]


def format_date(value: datetime, reference: Optional[datetime] = None) -> str:
    """'Today', 'Yesterday', or 'Monday, March 15'."""
    today = _start_of_day(reference or datetime.now(value.tzinfo)).date()
    day = value.date()
    if day == today:
        return "Today"
    if day == today - timedelta(days=1):
        return "Yesterday"
    return f"{value:%A}, {value:%B} {value.day}"


def _confidence(matched_text: str, day_known: bool, month_known: bool, year_known: bool) -> float:
    confidence = 0.5
    if day_known:
        confidence += 0.2
    if month_known:
        confidence += 0.15
    if year_known:
        confidence += 0.15
    low = matched_text.lower()
    if "yesterday" in low or "today" in low:
        confidence = max(confidence, 0.9)
    if any(day in low for day in WEEKDAYS):
        confidence = max(confidence, 0.8)
    return round(min(confidence, 1.0), 2)


def _into_past(value: datetime, reference: datetime) -> datetime:
    while value > reference:
        value -= timedelta(weeks=1)
    return value


def extract_dates(text: str, reference: Optional[datetime] = None) -> List[DateMarker]:
    """Date expressions in text, sorted by position; overlapping matches keep the earliest, longest."""
    text = text or ""
    reference = reference or datetime.now()
    candidates = []
    for pattern, resolve, day_known, month_known in DATE_PATTERNS:
        for match in pattern.finditer(text):
            year_known = "year" in pattern.groupindex and match.group("year") is not None
            candidates.append((match.start(), match.end(), match, resolve, day_known, month_known, year_known))
    candidates.sort(key=lambda c: (c[0], -(c[1] - c[0])))

    markers: List[DateMarker] = []
    last_end = -1
    for start, end, match, resolve, day_known, month_known, year_known in candidates:
        if start < last_end:
            continue
        try:
            value = resolve(match, reference)
            if value is None:
                continue
            value = _into_past(value, reference)
        except (ValueError, OverflowError):
            logger.debug({"function": "extract_dates", "status": "out_of_range", "matched": match.group(0)})
            continue
        markers.append(
            DateMarker(
                date=value,
                matched_text=match.group(0),
                start=start,
                end=end,
                confidence=_confidence(match.group(0), day_known, month_known, year_known),
                date_label=format_date(value, reference),
            )
        )
        last_end = end
    return markers


def segment_by_date(text: str, reference: Optional[datetime] = None) -> List[DateSegment]:
    text = text or ""
    reference = reference or datetime.now()
    markers = extract_dates(text, reference)
    if not markers:
        return [
            DateSegment(
                date=reference,
                date_label=format_date(reference, reference),
                text=text.strip(),
                start=0,
                end=len(text),
                explicit=False,
            )
        ]

    segments: List[DateSegment] = []
    preface = text[: markers[0].start].strip()
    if preface:
        segments.append(
            DateSegment(
                date=reference,
                date_label=format_date(reference, reference),
                text=preface,
                start=0,
                end=markers[0].start,
                explicit=False,
            )
        )
    for marker, following in zip(markers, markers[1:] + [None]):
        end = following.start if following else len(text)
        body = text[marker.end:end].strip()
        if not body:
            continue
        segments.append(
            DateSegment(
                date=marker.date,
                date_label=marker.date_label,
                text=body,
                start=marker.end,
                end=end,
                explicit=True,
            )
        )
    logger.debug({"function": "segment_by_date", "markers": len(markers), "segments": len(segments)})
    return segments


def group_segments_by_date(segments: List[DateSegment]) -> List[DateSegment]:
    """Merge segments on the same calendar day, oldest first."""
    grouped: Dict[object, DateSegment] = {}
    for segment in segments:
        key = segment.date.date()
        existing = grouped.get(key)
        if existing is None:
            grouped[key] = replace(segment, date=_start_of_day(segment.date))
            continue
        existing.text = f"{existing.text} {segment.text}"
        existing.end = segment.end
        existing.explicit = existing.explicit or segment.explicit
    return sorted(grouped.values(), key=lambda s: s.date)


def days_since_last_entry(last_entry: datetime, now: Optional[datetime] = None) -> int:
    now = now or datetime.now(last_entry.tzinfo)
    return math.floor((now - last_entry).total_seconds() / 86400)


def has_missed_days(last_entry: datetime, threshold: int = 3, now: Optional[datetime] = None) -> bool:
    now = now or datetime.now(last_entry.tzinfo)
    return (now - last_entry).total_seconds() / 86400 >= threshold


__all__ = [
    "DateMarker",
    "DateSegment",
    "DATE_PATTERNS",
    "format_date",
    "extract_dates",
    "segment_by_date",
    "group_segments_by_date",
    "days_since_last_entry",
    "has_missed_days",
]

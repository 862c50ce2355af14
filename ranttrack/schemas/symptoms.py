# ranttrack/schemas/symptoms.py
import os
from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

MAX_RANT_CHARS = int(os.getenv("MAX_RANT_CHARS", "5000") or "5000")

Severity = Literal["mild", "moderate", "severe"]
ExtractionMethod = Literal["phrase", "lemma", "quick_checkin"]
TimeOfDay = Literal["morning", "afternoon", "evening", "night", "all_day"]
DelayPattern = Literal["immediate", "next_day", "hours_later", "days_later", "week_later"]
DurationUnit = Literal["minutes", "hours", "days", "weeks"]
DurationQualifier = Literal["all", "half", "most_of"]
Progression = Literal[
    "progressive_worsening",
    "progressive_improving",
    "recurring",
    "stable",
    "fluctuating",
]


class PainDetails(BaseModel):
    """Qualifiers and body location found around a single pain mention."""

    qualifiers: List[str] = Field(default_factory=list, description="Pain qualifiers in surface order, deduplicated.")
    location: Optional[str] = Field(None, description="Canonical body-location tag.")


class ActivityTrigger(BaseModel):
    """An activity that plausibly caused a symptom."""

    activity: str = Field(..., description="Canonical activity, e.g. 'walking'.")
    timeframe: Optional[str] = Field(None, description="Cue such as 'after' or 'during'.")
    delay_pattern: Optional[DelayPattern] = None
    confidence: Optional[float] = Field(None, ge=0.0, le=1.0)
    sentence_distance: Optional[int] = Field(None, ge=0)


class SymptomDuration(BaseModel):
    value: Optional[float] = None
    unit: Optional[DurationUnit] = None
    qualifier: Optional[DurationQualifier] = None
    since: Optional[str] = None
    ongoing: Optional[bool] = None
    progression: Optional[Progression] = None


class ExtractedSymptom(BaseModel):
    """A single symptom observation pulled out of a narrative."""

    category: str = Field(..., description="Canonical symptom category id.")
    matched_text: str = Field(..., description="Surface text that produced the match.")
    method: ExtractionMethod
    severity: Optional[Severity] = None
    pain_details: Optional[PainDetails] = None
    trigger: Optional[ActivityTrigger] = None
    duration: Optional[SymptomDuration] = None
    time_of_day: Optional[TimeOfDay] = None
    confidence: Optional[float] = Field(None, ge=0.0, le=1.0)


class SpoonCount(BaseModel):
    """Document-level energy budget ("I have 2 spoons left")."""

    current: float = Field(..., ge=0)
    used: Optional[float] = None
    started: Optional[float] = None
    energy_level: float = Field(..., ge=0.0, le=10.0)


class ExtractionResult(BaseModel):
    text: str
    symptoms: List[ExtractedSymptom] = Field(default_factory=list)
    spoon_count: Optional[SpoonCount] = None
    repeat_previous: Optional[bool] = None


class SymptomExtractionRequest(BaseModel):
    """Request model for the extraction endpoint."""

    text: str = Field(..., max_length=MAX_RANT_CHARS, description="Free-form narrative to analyze.")
    use_custom_lemmas: bool = Field(True, description="Merge the stored custom vocabulary.")
    custom_lemmas: Optional[Dict[str, str]] = Field(
        None, description="Per-request vocabulary; overrides stored entries for this call."
    )


class QuickCheckinRequest(BaseModel):
    symptoms: List[str] = Field(..., min_length=1)
    severity: Optional[Dict[str, Severity]] = None


class SymptomCategoryOut(BaseModel):
    category: str
    display_name: str


class DateSegmentRequest(BaseModel):
    text: str = Field(..., max_length=MAX_RANT_CHARS)
    reference_date: Optional[datetime] = None
    group_by_day: bool = True


class DateSegmentOut(BaseModel):
    date: datetime
    date_label: str
    text: str
    start: int
    end: int
    explicit: bool
    extraction: ExtractionResult

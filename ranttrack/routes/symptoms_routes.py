# ranttrack/routes/symptoms_routes.py
import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ranttrack.db.session import get_db
from ranttrack.schemas.symptoms import (
    DateSegmentOut,
    DateSegmentRequest,
    ExtractedSymptom,
    ExtractionResult,
    QuickCheckinRequest,
    SymptomCategoryOut,
    SymptomExtractionRequest,
)
from ranttrack.services import date_segments
from ranttrack.services.confidence import build_quick_checkin
from ranttrack.services.custom_lemmas import get_custom_lemma_map
from ranttrack.services.extractor import extract_symptoms
from ranttrack.services.lexicon import COMMON_SYMPTOM_LABELS, COMMON_SYMPTOMS, SYMPTOM_DISPLAY_NAMES, is_known_category

router = APIRouter(prefix="/api/symptoms", tags=["symptoms"])
logger = logging.getLogger("ranttrack")


def _vocabulary(db: Session, use_stored: bool, overrides: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    vocabulary = get_custom_lemma_map(db) if use_stored else {}
    vocabulary.update(overrides or {})
    return vocabulary


@router.post("/extract", response_model=ExtractionResult, status_code=status.HTTP_200_OK)
def extract(payload: SymptomExtractionRequest, db: Session = Depends(get_db)):
    """Structured symptoms for one rant. Nothing is persisted."""
    result = extract_symptoms(payload.text, _vocabulary(db, payload.use_custom_lemmas, payload.custom_lemmas))
    logger.info({"function": "extract", "symptoms": len(result.symptoms), "chars": len(payload.text)})
    return result


@router.post("/quick-checkin", response_model=List[ExtractedSymptom], status_code=status.HTTP_200_OK)
def quick_checkin(payload: QuickCheckinRequest):
    unknown = [c for c in payload.symptoms if not is_known_category(c)]
    if unknown:
        raise HTTPException(status_code=400, detail=f"Unknown symptom categories: {', '.join(unknown)}")
    return build_quick_checkin(payload.symptoms, payload.severity)


@router.get("/common", response_model=List[SymptomCategoryOut])
def common_symptoms():
    return [SymptomCategoryOut(category=c, display_name=COMMON_SYMPTOM_LABELS[c]) for c in COMMON_SYMPTOMS]


@router.get("/categories", response_model=List[SymptomCategoryOut])
def categories():
    return [SymptomCategoryOut(category=c, display_name=name) for c, name in SYMPTOM_DISPLAY_NAMES.items()]


@router.post("/segment", response_model=List[DateSegmentOut], status_code=status.HTTP_200_OK)
def segment(payload: DateSegmentRequest, db: Session = Depends(get_db)):
    """Split a catch-up rant by day and extract each part."""
    segments = date_segments.segment_by_date(payload.text, payload.reference_date)
    if payload.group_by_day:
        segments = date_segments.group_segments_by_date(segments)
    vocabulary = _vocabulary(db, True)
    out = [
        DateSegmentOut(
            date=s.date,
            date_label=s.date_label,
            text=s.text,
            start=s.start,
            end=s.end,
            explicit=s.explicit,
            extraction=extract_symptoms(s.text, vocabulary),
        )
        for s in segments
    ]
    logger.info({"function": "segment", "segments": len(out)})
    return out

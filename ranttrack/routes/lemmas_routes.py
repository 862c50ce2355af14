# ranttrack/routes/lemmas_routes.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from ranttrack.db.session import get_db
from ranttrack.schemas.lemmas import CustomLemmaCreate, CustomLemmaOut, CustomLemmaUpdate
from ranttrack.services import custom_lemmas as lemma_store

router = APIRouter(prefix="/api/lemmas", tags=["lemmas"])
logger = logging.getLogger("ranttrack")


def _raise_for(exc: Exception) -> None:
    if isinstance(exc, lemma_store.DuplicateCustomLemmaError):
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    if isinstance(exc, lemma_store.CustomLemmaNotFoundError):
        raise HTTPException(status_code=404, detail="Custom word not found") from exc
    raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("", response_model=List[CustomLemmaOut])
def list_lemmas(db: Session = Depends(get_db)):
    """All custom words, newest first."""
    return [CustomLemmaOut.model_validate(row, from_attributes=True) for row in lemma_store.list_custom_lemmas(db)]


@router.post("", response_model=CustomLemmaOut, status_code=status.HTTP_201_CREATED)
def create_lemma(payload: CustomLemmaCreate, db: Session = Depends(get_db)):
    try:
        row = lemma_store.add_custom_lemma(db, payload.word, payload.symptom)
    except (lemma_store.CustomLemmaError, lemma_store.CustomLemmaNotFoundError) as exc:
        _raise_for(exc)
    return CustomLemmaOut.model_validate(row, from_attributes=True)


@router.get("/{lemma_id}", response_model=CustomLemmaOut)
def get_lemma(lemma_id: str, db: Session = Depends(get_db)):
    try:
        row = lemma_store.get_custom_lemma(db, lemma_id)
    except lemma_store.CustomLemmaNotFoundError as exc:
        _raise_for(exc)
    return CustomLemmaOut.model_validate(row, from_attributes=True)


@router.patch("/{lemma_id}", response_model=CustomLemmaOut)
def update_lemma(lemma_id: str, payload: CustomLemmaUpdate, db: Session = Depends(get_db)):
    try:
        row = lemma_store.update_custom_lemma(db, lemma_id, word=payload.word, symptom=payload.symptom)
    except (lemma_store.CustomLemmaError, lemma_store.CustomLemmaNotFoundError) as exc:
        _raise_for(exc)
    return CustomLemmaOut.model_validate(row, from_attributes=True)


@router.delete("/{lemma_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_lemma(lemma_id: str, db: Session = Depends(get_db)):
    try:
        lemma_store.delete_custom_lemma(db, lemma_id)
    except lemma_store.CustomLemmaNotFoundError as exc:
        _raise_for(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Persistent user vocabulary (word or phrase -> symptom category)."""
import logging
from typing import Dict, List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ranttrack.models.custom_lemma import CustomLemma

logger = logging.getLogger("ranttrack")


class CustomLemmaError(ValueError):
    """Invalid custom vocabulary entry."""


class DuplicateCustomLemmaError(CustomLemmaError):
    pass


class CustomLemmaNotFoundError(LookupError):
    pass


def normalize_word(word: Optional[str]) -> str:
    return " ".join((word or "").lower().replace("’", "'").split())


def _validated(word: Optional[str], symptom: Optional[str]):
    clean_word = normalize_word(word)
    clean_symptom = (symptom or "").strip()
    if not clean_word:
        raise CustomLemmaError("word must not be empty")
    if not clean_symptom:
        raise CustomLemmaError("symptom must not be empty")
    return clean_word, clean_symptom


def custom_lemma_exists(db: Session, word: str) -> bool:
    return db.query(CustomLemma.id).filter(CustomLemma.word == normalize_word(word)).first() is not None


def add_custom_lemma(db: Session, word: str, symptom: str) -> CustomLemma:
    clean_word, clean_symptom = _validated(word, symptom)
    if custom_lemma_exists(db, clean_word):
        raise DuplicateCustomLemmaError(f"'{clean_word}' is already in your dictionary")
    row = CustomLemma(word=clean_word, symptom=clean_symptom)
    db.add(row)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateCustomLemmaError(f"'{clean_word}' is already in your dictionary") from exc
    db.refresh(row)
    logger.info({"function": "add_custom_lemma", "status": "inserted", "id": row.id, "symptom": row.symptom})
    return row


def list_custom_lemmas(db: Session) -> List[CustomLemma]:
    return db.query(CustomLemma).order_by(desc(CustomLemma.created_at), desc(CustomLemma.word)).all()


def get_custom_lemma(db: Session, lemma_id: str) -> CustomLemma:
    row = db.get(CustomLemma, lemma_id)
    if row is None:
        raise CustomLemmaNotFoundError(lemma_id)
    return row


def update_custom_lemma(
    db: Session, lemma_id: str, word: Optional[str] = None, symptom: Optional[str] = None
) -> CustomLemma:
    row = get_custom_lemma(db, lemma_id)
    new_word, new_symptom = _validated(
        row.word if word is None else word,
        row.symptom if symptom is None else symptom,
    )
    if new_word != row.word and custom_lemma_exists(db, new_word):
        raise DuplicateCustomLemmaError(f"'{new_word}' is already in your dictionary")
    row.word = new_word
    row.symptom = new_symptom
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateCustomLemmaError(f"'{new_word}' is already in your dictionary") from exc
    db.refresh(row)
    logger.info({"function": "update_custom_lemma", "status": "updated", "id": row.id})
    return row


def delete_custom_lemma(db: Session, lemma_id: str) -> None:
    row = get_custom_lemma(db, lemma_id)
    db.delete(row)
    db.commit()
    logger.info({"function": "delete_custom_lemma", "status": "deleted", "id": lemma_id})


def get_custom_lemma_map(db: Session) -> Dict[str, str]:
    """Flat word -> symptom map for the extractor; storage failures yield {}."""
    try:
        rows = db.query(CustomLemma.word, CustomLemma.symptom).all()
    except SQLAlchemyError:
        logger.warning({"function": "get_custom_lemma_map", "status": "failed"}, exc_info=True)
        db.rollback()
        return {}
    return {word: symptom for word, symptom in rows}


__all__ = [
    "CustomLemmaError",
    "DuplicateCustomLemmaError",
    "CustomLemmaNotFoundError",
    "normalize_word",
    "custom_lemma_exists",
    "add_custom_lemma",
    "list_custom_lemmas",
    "get_custom_lemma",
    "update_custom_lemma",
    "delete_custom_lemma",
    "get_custom_lemma_map",
]

"""User-defined vocabulary: a word or phrase mapped to a symptom category."""

import uuid

from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func

from ranttrack.db.session import Base


class CustomLemma(Base):
    __tablename__ = "custom_lemmas"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    word = Column(String(200), nullable=False, unique=True, index=True)
    symptom = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

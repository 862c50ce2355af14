# ranttrack/schemas/lemmas.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CustomLemmaCreate(BaseModel):
    word: str = Field(..., max_length=200, description="Word or phrase as the user says it, e.g. 'meh'.")
    symptom: str = Field(..., max_length=100, description="Symptom category it stands for, e.g. 'fatigue'.")


class CustomLemmaUpdate(BaseModel):
    word: Optional[str] = Field(default=None, max_length=200)
    symptom: Optional[str] = Field(default=None, max_length=100)


class CustomLemmaOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    word: str
    symptom: str
    created_at: Optional[datetime] = None

# gradebook/schemas/score.py
from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import List, Optional

from gradebook.core.enums import ResultKind


class ScoreBase(BaseModel):
    student_id: str
    subject_key: str
    kind: ResultKind
    score: Optional[float] = None
    term: Optional[int] = None

    @field_validator("term", mode="before")
    @classmethod
    def empty_term(cls, value):
        # storage keeps 0 for "no term"
        if value in (0, "0", ""):
            return None
        return value


class ScoreCreate(ScoreBase):
    class_id: Optional[str] = None  # taken from the URL when omitted
    score: float
    max_score: float
    created_at: Optional[datetime] = None


class ScoreRecord(ScoreBase):
    id: Optional[str] = None
    class_id: Optional[str] = None
    max_score: Optional[float] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ScoreDeleteCriteria(BaseModel):
    student_id: str
    subject_key: str
    kind: ResultKind
    term: Optional[int] = None


class ScoreBatch(BaseModel):
    save: List[ScoreCreate] = []
    delete: List[ScoreDeleteCriteria] = []

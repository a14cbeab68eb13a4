# gradebook/schemas/curriculum.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional

from gradebook.core.enums import ClassLevel, ProgressStatus


class CurriculumTopicCreate(BaseModel):
    level: ClassLevel
    subject: str
    term: int
    week: int
    topic: str
    competency: Optional[str] = None


class CurriculumTopicOut(CurriculumTopicCreate):
    id: str

    class Config:
        from_attributes = True


class ClassProgressOut(BaseModel):
    id: Optional[str] = None
    class_id: str
    topic_id: str
    completed_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ClassProgressToggle(BaseModel):
    completed: bool


class StudentProgressOut(BaseModel):
    id: Optional[str] = None
    student_id: str
    topic_id: str
    status: ProgressStatus
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class StudentProgressUpdate(BaseModel):
    status: Optional[ProgressStatus] = None  # None clears the mark


class SubjectProgressStatus(BaseModel):
    subject: Optional[str] = None
    percentage: int
    completed_count: int
    total_topics: int
    expected_topics_count: int
    current_week: int
    last_completed_week: int
    is_delayed: bool
    delay_weeks: int


class StudentSubjectStats(BaseModel):
    subject: Optional[str] = None
    completed: int
    skipped: int
    percentage: int

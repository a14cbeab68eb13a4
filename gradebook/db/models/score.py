# gradebook/db/models/score.py
from sqlalchemy import Column, Integer, Float, String, DateTime, Enum, ForeignKey, UniqueConstraint
from datetime import datetime

from gradebook.core.enums import ResultKind
from gradebook.db.base import Base
from gradebook.db.models.ids import new_id


class Score(Base):
    __tablename__ = "scores"
    __table_args__ = (
        # natural key of the upsert
        UniqueConstraint("student_id", "subject_key", "kind", "term", name="uq_score_natural_key"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    student_id = Column(String(36), ForeignKey("students.id"), nullable=False, index=True)
    class_id = Column(String(36), ForeignKey("classes.id"), nullable=False, index=True)
    subject_key = Column(String, nullable=False)
    kind = Column(Enum(ResultKind, name="result_kind"), nullable=False, index=True)
    score = Column(Float, nullable=False)
    max_score = Column(Float, nullable=False)
    term = Column(Integer, nullable=False, default=0)  # 1, 2, 3; 0 when the record has no term
    created_at = Column(DateTime, default=datetime.utcnow)

# gradebook/db/models/curriculum.py
from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, ForeignKey, UniqueConstraint
from datetime import datetime

from gradebook.core.enums import ClassLevel, ProgressStatus
from gradebook.db.base import Base
from gradebook.db.models.ids import new_id


class CurriculumTopic(Base):
    __tablename__ = "curriculum_topics"

    id = Column(String, primary_key=True, default=new_id)
    level = Column(Enum(ClassLevel, name="class_level"), nullable=False, index=True)
    subject = Column(String, nullable=False, index=True)
    term = Column(Integer, nullable=False)
    week = Column(Integer, nullable=False)  # 1..30
    topic = Column(Text, nullable=False)
    competency = Column(Text, nullable=True)


class ClassProgress(Base):
    """Row present = topic completed by the whole class."""
    __tablename__ = "class_progress"
    __table_args__ = (
        UniqueConstraint("class_id", "topic_id", name="uq_class_progress"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    class_id = Column(String(36), ForeignKey("classes.id"), nullable=False, index=True)
    topic_id = Column(String, ForeignKey("curriculum_topics.id"), nullable=False, index=True)
    completed_at = Column(DateTime, default=datetime.utcnow)


class StudentProgress(Base):
    __tablename__ = "student_progress"
    __table_args__ = (
        UniqueConstraint("student_id", "topic_id", name="uq_student_progress"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    student_id = Column(String(36), ForeignKey("students.id"), nullable=False, index=True)
    topic_id = Column(String, ForeignKey("curriculum_topics.id"), nullable=False, index=True)
    status = Column(Enum(ProgressStatus, name="progress_status"), nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

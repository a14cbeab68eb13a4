# gradebook/db/__init__.py
# Importing gradebook.db registers every model on Base.metadata

from gradebook.db.base import Base
from gradebook.db.models import (
    SchoolClass,
    Student,
    StudentNote,
    Score,
    Attendance,
    CurriculumTopic,
    ClassProgress,
    StudentProgress,
)

__all__ = [
    "Base", "SchoolClass", "Student", "StudentNote", "Score", "Attendance",
    "CurriculumTopic", "ClassProgress", "StudentProgress",
]

from gradebook.db.base import Base
from gradebook.db.models.school_class import SchoolClass
from gradebook.db.models.student import Student, StudentNote
from gradebook.db.models.score import Score
from gradebook.db.models.attendance import Attendance
from gradebook.db.models.curriculum import CurriculumTopic, ClassProgress, StudentProgress

__all__ = [
    "Base", "SchoolClass", "Student", "StudentNote", "Score", "Attendance",
    "CurriculumTopic", "ClassProgress", "StudentProgress",
]

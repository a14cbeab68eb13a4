# gradebook/schemas/school_class.py
from pydantic import BaseModel

from gradebook.core.enums import ClassLevel


class ClassCreate(BaseModel):
    name: str
    level: ClassLevel
    academic_year: str  # "2024-2025"


class ClassOut(ClassCreate):
    id: str

    class Config:
        from_attributes = True

# gradebook/schemas/student.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class StudentCreate(BaseModel):
    full_name: str
    parent_name: str
    rim_number: Optional[str] = None  # national student number
    parent_phone: Optional[str] = None


class StudentOut(StudentCreate):
    id: str
    class_id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class StudentNoteIn(BaseModel):
    content: str


class StudentNoteOut(StudentNoteIn):
    student_id: str

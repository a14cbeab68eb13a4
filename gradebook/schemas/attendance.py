from pydantic import BaseModel
from datetime import date
from typing import Optional

from gradebook.core.enums import AttendanceStatus


class AttendanceBase(BaseModel):
    date: date
    status: AttendanceStatus
    justification: Optional[str] = None


class AttendanceCreate(AttendanceBase):
    student_id: str
    class_id: Optional[str] = None  # taken from the URL when omitted


class AttendanceRecord(AttendanceBase):
    id: Optional[str] = None
    student_id: str
    class_id: Optional[str] = None

    class Config:
        from_attributes = True


class AttendanceCounts(BaseModel):
    present: int = 0
    absent: int = 0
    late: int = 0


class AttendanceStats(BaseModel):
    counts: AttendanceCounts
    present_rate: int
    absent_rate: int
    late_rate: int


class AttendanceRegisterRow(BaseModel):
    student_id: str
    full_name: str
    present: int
    absent: int
    late: int
    rate: Optional[int] = None  # None when nothing was recorded that month

# gradebook/db/models/attendance.py
from sqlalchemy import Column, String, Date, Enum, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from gradebook.core.enums import AttendanceStatus
from gradebook.db.base import Base
from gradebook.db.models.ids import new_id


class Attendance(Base):
    __tablename__ = "attendance"
    __table_args__ = (
        UniqueConstraint("student_id", "date", name="uq_attendance_student_date"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    student_id = Column(String(36), ForeignKey("students.id"), nullable=False)
    class_id = Column(String(36), ForeignKey("classes.id"), nullable=False, index=True)
    date = Column(Date, nullable=False)  # e.g. 2025-09-15
    status = Column(Enum(AttendanceStatus, name="attendance_status"), nullable=False)
    justification = Column(String, nullable=True)

    student = relationship("Student", back_populates="attendance_records")

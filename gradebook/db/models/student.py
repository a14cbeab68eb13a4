# gradebook/db/models/student.py
from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime

from gradebook.db.base import Base
from gradebook.db.models.ids import new_id


class Student(Base):
    __tablename__ = "students"

    id = Column(String(36), primary_key=True, default=new_id)
    full_name = Column(String, nullable=False)
    rim_number = Column(String, nullable=True)  # national student number
    parent_name = Column(String, nullable=False)
    parent_phone = Column(String, nullable=True)
    class_id = Column(String(36), ForeignKey("classes.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    school_class = relationship("SchoolClass", back_populates="students")
    attendance_records = relationship("Attendance", back_populates="student", cascade="all, delete-orphan")


class StudentNote(Base):
    __tablename__ = "student_notes"

    student_id = Column(String(36), ForeignKey("students.id"), primary_key=True)
    content = Column(Text, nullable=False, default="")
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

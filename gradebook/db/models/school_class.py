# gradebook/db/models/school_class.py
from sqlalchemy import Column, String, Enum
from sqlalchemy.orm import relationship

from gradebook.core.enums import ClassLevel
from gradebook.db.base import Base
from gradebook.db.models.ids import new_id


class SchoolClass(Base):
    __tablename__ = "classes"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    level = Column(Enum(ClassLevel, name="class_level"), nullable=False, index=True)
    academic_year = Column(String, nullable=False)  # "2024-2025"

    students = relationship("Student", back_populates="school_class", cascade="all, delete-orphan")

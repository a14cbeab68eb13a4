# gradebook/crud/classes.py
import logging
from sqlalchemy.orm import Session

from gradebook.core.enums import ClassLevel
from gradebook.core.exceptions import DataIntegrityError, NotFoundError
from gradebook.db.models.school_class import SchoolClass
from gradebook.db.models.student import Student, StudentNote

logger = logging.getLogger(__name__)


def validate_class(data) -> None:
    if not data.name or not data.name.strip():
        raise DataIntegrityError("Class name is required")
    try:
        ClassLevel(data.level)
    except ValueError:
        raise DataIntegrityError(f"Invalid class level: {data.level}")
    if not data.academic_year:
        raise DataIntegrityError("Academic year is required")


def create_class(db: Session, class_data):
    validate_class(class_data)
    db_class = SchoolClass(
        name=class_data.name.strip(),
        level=ClassLevel(class_data.level),
        academic_year=class_data.academic_year,
    )
    db.add(db_class)
    db.commit()
    db.refresh(db_class)
    logger.info(f"Created class {db_class.name} ({db_class.level.value}) id={db_class.id}")
    return db_class


def get_classes(db: Session):
    return db.query(SchoolClass).order_by(SchoolClass.name).all()


def get_class(db: Session, class_id: str):
    return db.query(SchoolClass).filter(SchoolClass.id == class_id).first()


def get_class_or_404(db: Session, class_id: str) -> SchoolClass:
    school_class = get_class(db, class_id)
    if not school_class:
        raise NotFoundError("Class", class_id)
    return school_class


def validate_student(db: Session, data, class_id: str) -> None:
    if not data.full_name or not data.full_name.strip():
        raise DataIntegrityError("Student name is required")
    if not data.parent_name or not data.parent_name.strip():
        raise DataIntegrityError("Parent name is required")
    if not class_id:
        raise DataIntegrityError("Student must belong to a class")
    if not get_class(db, class_id):
        raise DataIntegrityError(f"Class does not exist: {class_id}")


def create_student(db: Session, student_data, class_id: str):
    validate_student(db, student_data, class_id)
    student = Student(
        full_name=student_data.full_name.strip(),
        parent_name=student_data.parent_name.strip(),
        rim_number=student_data.rim_number,
        parent_phone=student_data.parent_phone,
        class_id=class_id,
    )
    db.add(student)
    db.commit()
    db.refresh(student)
    return student


def get_students(db: Session, class_id: str = None):
    query = db.query(Student)
    if class_id:
        query = query.filter(Student.class_id == class_id)
    return query.order_by(Student.full_name).all()


def get_student(db: Session, student_id: str):
    return db.query(Student).filter(Student.id == student_id).first()


def get_student_or_404(db: Session, student_id: str) -> Student:
    student = get_student(db, student_id)
    if not student:
        raise NotFoundError("Student", student_id)
    return student


def get_student_note(db: Session, student_id: str) -> str:
    note = db.query(StudentNote).filter(StudentNote.student_id == student_id).first()
    return note.content if note else ""


def save_student_note(db: Session, student_id: str, content: str) -> StudentNote:
    note = db.query(StudentNote).filter(StudentNote.student_id == student_id).first()
    if note:
        note.content = content
    else:
        note = StudentNote(student_id=student_id, content=content)
        db.add(note)
    db.commit()
    db.refresh(note)
    return note

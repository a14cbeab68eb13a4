# gradebook/crud/attendance.py
import logging
from datetime import date
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from gradebook.core.enums import AttendanceStatus
from gradebook.core.exceptions import DataIntegrityError
from gradebook.crud.locking import class_locks
from gradebook.db.models.attendance import Attendance

logger = logging.getLogger(__name__)


def get_attendance(db: Session, class_id: str, on_date: Optional[date] = None) -> List[Attendance]:
    query = db.query(Attendance).filter(Attendance.class_id == class_id)
    if on_date:
        query = query.filter(Attendance.date == on_date)
    return query.all()


def validate_attendance(record) -> None:
    if not record.student_id or not record.class_id:
        raise DataIntegrityError("Attendance record is missing identifiers")
    if not record.date:
        raise DataIntegrityError("Attendance record must have a date")
    try:
        AttendanceStatus(record.status)
    except ValueError:
        raise DataIntegrityError(f"Invalid attendance status: {record.status}")


def save_attendance(db: Session, records: Iterable) -> None:
    """Each (student, date) keeps only the record saved last."""
    records = list(records)
    if not records:
        return
    for record in records:
        validate_attendance(record)

    with class_locks({r.class_id for r in records}):
        try:
            for record in records:
                db.query(Attendance).filter(
                    Attendance.student_id == record.student_id,
                    Attendance.date == record.date,
                ).delete()
                db.add(Attendance(
                    student_id=record.student_id,
                    class_id=record.class_id,
                    date=record.date,
                    status=AttendanceStatus(record.status),
                    justification=record.justification,
                ))
                db.flush()
            db.commit()
        except Exception:
            logger.exception("Attendance save failed, rolling back")
            db.rollback()
            raise

    logger.info(f"Saved {len(records)} attendance records")

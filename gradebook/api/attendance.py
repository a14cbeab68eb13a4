from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from datetime import date
from typing import List, Optional

from gradebook.api.deps import get_db, http_error
from gradebook.core.attendance_stats import (
    build_attendance_register,
    calculate_attendance_stats,
    filter_attendance_by_period,
)
from gradebook.core.enums import AttendancePeriod
from gradebook.core.exceptions import DataIntegrityError
from gradebook.crud import attendance as crud_attendance
from gradebook.crud import classes as crud_classes
from gradebook.schemas.attendance import (
    AttendanceCreate,
    AttendanceRecord,
    AttendanceRegisterRow,
    AttendanceStats,
)

router = APIRouter()


def _class_or_404(db: Session, class_id: str):
    school_class = crud_classes.get_class(db, class_id)
    if not school_class:
        raise HTTPException(status_code=404, detail="Class not found")
    return school_class


# Records of a class, optionally for one day
@router.get("/{class_id}", response_model=List[AttendanceRecord])
def get_attendance(class_id: str, on_date: Optional[date] = Query(None, alias="date"),
                   db: Session = Depends(get_db)):
    _class_or_404(db, class_id)
    return crud_attendance.get_attendance(db, class_id, on_date)


# Overwrites any record of the same student and day
@router.post("/{class_id}")
def save_attendance(class_id: str, records: List[AttendanceCreate], db: Session = Depends(get_db)):
    _class_or_404(db, class_id)
    class_student_ids = {s.id for s in crud_classes.get_students(db, class_id)}

    for record in records:
        if record.student_id not in class_student_ids:
            raise HTTPException(status_code=400, detail=f"Student not in class: {record.student_id}")
        record.class_id = record.class_id or class_id

    try:
        crud_attendance.save_attendance(db, records)
    except DataIntegrityError as e:
        raise http_error(e)
    return {"saved": len(records)}


@router.get("/{class_id}/stats", response_model=AttendanceStats)
def get_attendance_stats(class_id: str, period: AttendancePeriod = AttendancePeriod.TERM,
                         db: Session = Depends(get_db)):
    _class_or_404(db, class_id)
    records = crud_attendance.get_attendance(db, class_id)
    return calculate_attendance_stats(filter_attendance_by_period(records, period))


@router.get("/{class_id}/register", response_model=List[AttendanceRegisterRow])
def get_attendance_register(class_id: str, month: str = Query(..., pattern=r"^\d{4}-\d{2}$"),
                            db: Session = Depends(get_db)):
    _class_or_404(db, class_id)
    students = crud_classes.get_students(db, class_id)
    records = crud_attendance.get_attendance(db, class_id)
    return build_attendance_register(students, records, month)

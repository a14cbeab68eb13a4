# gradebook/api/analysis.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from gradebook.api.deps import get_db
from gradebook.core.analysis import generate_class_analysis, generate_comprehensive_analysis
from gradebook.core.enums import ResultKind
from gradebook.crud import attendance as crud_attendance
from gradebook.crud import classes as crud_classes
from gradebook.crud import scores as crud_scores
from gradebook.schemas.analysis import ClassAnalysis, StudentAnalysis

router = APIRouter()


@router.get("/classes/{class_id}", response_model=ClassAnalysis)
def analyze_class(class_id: str, db: Session = Depends(get_db)):
    school_class = crud_classes.get_class(db, class_id)
    if not school_class:
        raise HTTPException(status_code=404, detail="Class not found")

    students = crud_classes.get_students(db, class_id)
    scores = crud_scores.get_scores(db, class_id, ResultKind.EXAM)
    attendance = crud_attendance.get_attendance(db, class_id)
    return generate_class_analysis(students, scores, attendance, school_class.level)


@router.get("/students/{student_id}", response_model=StudentAnalysis)
def analyze_student(student_id: str, db: Session = Depends(get_db)):
    student = crud_classes.get_student(db, student_id)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")

    scores = crud_scores.get_scores(db, student.class_id, ResultKind.EXAM)
    attendance = crud_attendance.get_attendance(db, student.class_id)
    return generate_comprehensive_analysis(student.id, scores, attendance, student.school_class.level)

# gradebook/api/grades.py
import logging
from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.orm import Session
from typing import Dict, List, Optional

from gradebook.api.deps import get_db, http_error
from gradebook.core.enums import ResultKind
from gradebook.core.exceptions import DataIntegrityError
from gradebook.core.grading import (
    calculate_exam_term_stats,
    generate_annual_report,
    rank_students,
    scores_for_student,
)
from gradebook.core.reports import build_student_term_sheets, build_term_summary
from gradebook.crud import classes as crud_classes
from gradebook.crud import scores as crud_scores
from gradebook.schemas.analysis import AnnualReportItem, StudentTermSheet, TermStats, TermSummaryRow
from gradebook.schemas.score import ScoreBatch, ScoreRecord

router = APIRouter()
logger = logging.getLogger(__name__)


def load_exam_context(db: Session, class_id: str):
    school_class = crud_classes.get_class(db, class_id)
    if not school_class:
        raise HTTPException(status_code=404, detail="Class not found")
    students = crud_classes.get_students(db, class_id)
    scores = crud_scores.get_scores(db, class_id, ResultKind.EXAM)
    return school_class, students, scores


@router.get("/{class_id}", response_model=List[ScoreRecord])
def get_scores(class_id: str, kind: Optional[ResultKind] = None, db: Session = Depends(get_db)):
    if not crud_classes.get_class(db, class_id):
        raise HTTPException(status_code=404, detail="Class not found")
    return crud_scores.get_scores(db, class_id, kind)


@router.post("/{class_id}/batch")
def save_batch(class_id: str, batch: ScoreBatch, db: Session = Depends(get_db)):
    if not crud_classes.get_class(db, class_id):
        raise HTTPException(status_code=404, detail="Class not found")

    for record in batch.save:
        if not record.class_id:
            record.class_id = class_id
        elif record.class_id != class_id:
            raise HTTPException(status_code=400, detail=f"Score belongs to another class: {record.class_id}")

    logger.info(f"📥 Score batch for class {class_id}: save={len(batch.save)}, delete={len(batch.delete)}")
    try:
        crud_scores.apply_scores_batch(db, save=batch.save, delete=batch.delete, class_id=class_id)
    except DataIntegrityError as e:
        raise http_error(e)
    return {"saved": len(batch.save), "deleted": len(batch.delete)}


@router.get("/{class_id}/terms/{term}/stats")
def get_term_stats(class_id: str, term: int = Path(..., ge=1, le=3), db: Session = Depends(get_db)):
    school_class, students, scores = load_exam_context(db, class_id)
    ranks = rank_students(students, scores, school_class.level, term)
    result = []
    for student in students:
        stats: TermStats = calculate_exam_term_stats(
            scores_for_student(scores, student.id), school_class.level, term
        )
        result.append({
            "student_id": student.id,
            "full_name": student.full_name,
            **stats.model_dump(),
            "rank": ranks[student.id],
        })
    return result


@router.get("/{class_id}/terms/{term}/ranks", response_model=Dict[str, int])
def get_term_ranks(class_id: str, term: int = Path(..., ge=1, le=3), db: Session = Depends(get_db)):
    school_class, students, scores = load_exam_context(db, class_id)
    return rank_students(students, scores, school_class.level, term)


@router.get("/{class_id}/terms/{term}/summary", response_model=List[TermSummaryRow])
def get_term_summary(class_id: str, term: int = Path(..., ge=1, le=3), db: Session = Depends(get_db)):
    school_class, students, scores = load_exam_context(db, class_id)
    return build_term_summary(students, scores, school_class.level, term)


@router.get("/{class_id}/terms/{term}/sheets", response_model=List[StudentTermSheet])
def get_term_sheets(class_id: str, term: int = Path(..., ge=1, le=3), db: Session = Depends(get_db)):
    school_class, students, scores = load_exam_context(db, class_id)
    return build_student_term_sheets(students, scores, school_class.level, term)


@router.get("/{class_id}/annual", response_model=List[AnnualReportItem])
def get_annual_report(class_id: str, db: Session = Depends(get_db)):
    school_class, students, scores = load_exam_context(db, class_id)
    return generate_annual_report(students, scores, school_class.level)

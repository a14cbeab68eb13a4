# gradebook/api/students.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from gradebook.api.deps import get_db
from gradebook.crud import classes as crud_classes
from gradebook.schemas.student import StudentNoteIn, StudentNoteOut, StudentOut

router = APIRouter()


def _student_or_404(db: Session, student_id: str):
    student = crud_classes.get_student(db, student_id)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    return student


@router.get("/{student_id}", response_model=StudentOut)
def get_student(student_id: str, db: Session = Depends(get_db)):
    return _student_or_404(db, student_id)


@router.get("/{student_id}/note", response_model=StudentNoteOut)
def get_note(student_id: str, db: Session = Depends(get_db)):
    _student_or_404(db, student_id)
    return {"student_id": student_id, "content": crud_classes.get_student_note(db, student_id)}


@router.put("/{student_id}/note", response_model=StudentNoteOut)
def save_note(student_id: str, note: StudentNoteIn, db: Session = Depends(get_db)):
    _student_or_404(db, student_id)
    saved = crud_classes.save_student_note(db, student_id, note.content)
    return {"student_id": student_id, "content": saved.content}

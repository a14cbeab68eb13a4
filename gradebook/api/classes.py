# gradebook/api/classes.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List

from gradebook.api.deps import get_db, http_error
from gradebook.core.exceptions import DataIntegrityError, NotFoundError
from gradebook.crud import classes as crud_classes
from gradebook.schemas.school_class import ClassCreate, ClassOut
from gradebook.schemas.student import StudentCreate, StudentOut

router = APIRouter()


@router.post("/", response_model=ClassOut)
def create_class(class_in: ClassCreate, db: Session = Depends(get_db)):
    try:
        return crud_classes.create_class(db, class_in)
    except DataIntegrityError as e:
        raise http_error(e)


@router.get("/", response_model=List[ClassOut])
def list_classes(db: Session = Depends(get_db)):
    return crud_classes.get_classes(db)


@router.get("/{class_id}", response_model=ClassOut)
def get_class(class_id: str, db: Session = Depends(get_db)):
    school_class = crud_classes.get_class(db, class_id)
    if not school_class:
        raise HTTPException(status_code=404, detail="Class not found")
    return school_class


@router.get("/{class_id}/students", response_model=List[StudentOut])
def list_students(class_id: str, db: Session = Depends(get_db)):
    try:
        crud_classes.get_class_or_404(db, class_id)
    except NotFoundError as e:
        raise http_error(e)
    return crud_classes.get_students(db, class_id)


@router.post("/{class_id}/students", response_model=StudentOut)
def add_student(class_id: str, student_in: StudentCreate, db: Session = Depends(get_db)):
    try:
        return crud_classes.create_student(db, student_in, class_id)
    except DataIntegrityError as e:
        raise http_error(e)

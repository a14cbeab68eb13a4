# gradebook/api/curriculum.py
import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional

from gradebook.api.deps import get_db, http_error
from gradebook.core.config import settings
from gradebook.core.curriculum_progress import (
    get_current_academic_week,
    get_student_subject_stats,
    get_subject_progress_status,
    group_by_subject,
)
from gradebook.core.enums import ClassLevel
from gradebook.core.exceptions import ConfigurationError, DataIntegrityError
from gradebook.crud import classes as crud_classes
from gradebook.crud import curriculum as crud_curriculum
from gradebook.schemas.curriculum import (
    ClassProgressOut,
    ClassProgressToggle,
    CurriculumTopicCreate,
    CurriculumTopicOut,
    StudentProgressOut,
    StudentProgressUpdate,
    StudentSubjectStats,
    SubjectProgressStatus,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def current_week() -> int:
    return get_current_academic_week(settings.ACADEMIC_YEAR_START)


def _topic_or_404(db: Session, topic_id: str):
    topic = crud_curriculum.get_topic(db, topic_id)
    if not topic:
        raise HTTPException(status_code=404, detail="Topic not found")
    return topic


@router.get("/week")
def get_week():
    return {"current_week": current_week()}


@router.get("/levels/{level}/topics", response_model=List[CurriculumTopicOut])
def list_topics(level: ClassLevel, subject: Optional[str] = None, db: Session = Depends(get_db)):
    return crud_curriculum.get_topics_for_level(db, level, subject)


@router.post("/topics", response_model=CurriculumTopicOut)
def add_topic(topic_in: CurriculumTopicCreate, db: Session = Depends(get_db)):
    try:
        return crud_curriculum.add_topic(db, topic_in)
    except DataIntegrityError as e:
        raise http_error(e)


@router.put("/topics/{topic_id}", response_model=CurriculumTopicOut)
def update_topic(topic_id: str, topic_in: CurriculumTopicCreate, db: Session = Depends(get_db)):
    topic = _topic_or_404(db, topic_id)
    try:
        return crud_curriculum.update_topic(db, topic, topic_in)
    except DataIntegrityError as e:
        raise http_error(e)


@router.delete("/topics/{topic_id}")
def delete_topic(topic_id: str, db: Session = Depends(get_db)):
    crud_curriculum.delete_topic(db, _topic_or_404(db, topic_id))
    return {"message": "Topic deleted"}


@router.delete("/levels/{level}/topics")
def clear_level(level: ClassLevel, db: Session = Depends(get_db)):
    return {"deleted": crud_curriculum.clear_level(db, level)}


@router.post("/levels/{level}/template")
def generate_template(level: ClassLevel, db: Session = Depends(get_db)):
    try:
        created = crud_curriculum.generate_yearly_template(db, level)
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info(f"✅ Yearly template for {level.value}: {created} topics")
    return {"created": created}


@router.get("/classes/{class_id}/progress", response_model=List[ClassProgressOut])
def get_class_progress(class_id: str, db: Session = Depends(get_db)):
    return crud_curriculum.get_class_progress(db, class_id)


@router.post("/classes/{class_id}/progress/{topic_id}")
def toggle_class_progress(class_id: str, topic_id: str, body: ClassProgressToggle,
                          db: Session = Depends(get_db)):
    if not crud_classes.get_class(db, class_id):
        raise HTTPException(status_code=404, detail="Class not found")
    _topic_or_404(db, topic_id)
    crud_curriculum.toggle_topic_completion(db, class_id, topic_id, body.completed)
    return {"class_id": class_id, "topic_id": topic_id, "completed": body.completed}


@router.get("/classes/{class_id}/status", response_model=List[SubjectProgressStatus])
def get_class_status(class_id: str, db: Session = Depends(get_db)):
    school_class = crud_classes.get_class(db, class_id)
    if not school_class:
        raise HTTPException(status_code=404, detail="Class not found")

    topics = crud_curriculum.get_topics_for_level(db, school_class.level)
    completed_ids = [p.topic_id for p in crud_curriculum.get_class_progress(db, class_id)]
    week = current_week()

    result = []
    for subject, subject_topics in group_by_subject(topics).items():
        status = get_subject_progress_status(subject_topics, completed_ids, current_week=week)
        status.subject = subject
        result.append(status)
    return result


@router.get("/students/{student_id}/progress", response_model=List[StudentProgressOut])
def get_student_progress(student_id: str, db: Session = Depends(get_db)):
    return crud_curriculum.get_student_progress(db, student_id)


@router.put("/students/{student_id}/progress/{topic_id}")
def set_student_progress(student_id: str, topic_id: str, body: StudentProgressUpdate,
                         db: Session = Depends(get_db)):
    if not crud_classes.get_student(db, student_id):
        raise HTTPException(status_code=404, detail="Student not found")
    _topic_or_404(db, topic_id)
    crud_curriculum.set_student_topic_status(db, student_id, topic_id, body.status)
    return {"student_id": student_id, "topic_id": topic_id, "status": body.status}


@router.get("/students/{student_id}/stats", response_model=List[StudentSubjectStats])
def get_student_stats(student_id: str, db: Session = Depends(get_db)):
    student = crud_classes.get_student(db, student_id)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")

    topics = crud_curriculum.get_topics_for_level(db, student.school_class.level)
    progress = crud_curriculum.get_student_progress(db, student_id)

    result = []
    for subject, subject_topics in group_by_subject(topics).items():
        stats = get_student_subject_stats(subject_topics, progress)
        stats.subject = subject
        result.append(stats)
    return result

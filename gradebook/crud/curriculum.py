# gradebook/crud/curriculum.py
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from gradebook.core.curriculum_progress import build_yearly_template
from gradebook.core.curriculum_seed import CURRICULUM_SEED, seed_levels
from gradebook.core.enums import ClassLevel, ProgressStatus
from gradebook.core.exceptions import DataIntegrityError
from gradebook.db.models.curriculum import ClassProgress, CurriculumTopic, StudentProgress

logger = logging.getLogger(__name__)


def validate_topic(data) -> None:
    if not data.subject:
        raise DataIntegrityError("Topic subject is required")
    if data.term not in (1, 2, 3):
        raise DataIntegrityError(f"Invalid term: {data.term}")
    if data.week < 1:
        raise DataIntegrityError(f"Invalid week: {data.week}")
    if not data.topic or not data.topic.strip():
        raise DataIntegrityError("Topic text is required")


def seed_curriculum(db: Session) -> int:
    """Loads the sample plan when the table is empty."""
    if db.query(CurriculumTopic).count() > 0:
        return 0
    db.add_all(CurriculumTopic(**item) for item in CURRICULUM_SEED)
    db.commit()
    logger.info(f"Seeded {len(CURRICULUM_SEED)} curriculum topics")
    return len(CURRICULUM_SEED)


def get_topics_for_level(db: Session, level: ClassLevel, subject: Optional[str] = None) -> List[CurriculumTopic]:
    level = ClassLevel(level)
    count = db.query(CurriculumTopic).filter(CurriculumTopic.level == level).count()
    if count == 0 and level in seed_levels():
        seed_curriculum(db)

    query = db.query(CurriculumTopic).filter(CurriculumTopic.level == level)
    if subject:
        query = query.filter(CurriculumTopic.subject == subject)
    return query.order_by(CurriculumTopic.week).all()


def get_topic(db: Session, topic_id: str) -> Optional[CurriculumTopic]:
    return db.query(CurriculumTopic).filter(CurriculumTopic.id == topic_id).first()


def add_topic(db: Session, topic_data) -> CurriculumTopic:
    validate_topic(topic_data)
    topic = CurriculumTopic(**topic_data.model_dump())
    db.add(topic)
    db.commit()
    db.refresh(topic)
    return topic


def update_topic(db: Session, topic: CurriculumTopic, topic_data) -> CurriculumTopic:
    validate_topic(topic_data)
    for field, value in topic_data.model_dump().items():
        setattr(topic, field, value)
    db.commit()
    db.refresh(topic)
    return topic


def _delete_progress_for(db: Session, topic_ids: list) -> None:
    db.query(ClassProgress).filter(ClassProgress.topic_id.in_(topic_ids)).delete(synchronize_session=False)
    db.query(StudentProgress).filter(StudentProgress.topic_id.in_(topic_ids)).delete(synchronize_session=False)


def delete_topic(db: Session, topic: CurriculumTopic) -> None:
    # progress rows would be orphans otherwise
    _delete_progress_for(db, [topic.id])
    db.delete(topic)
    db.commit()


def clear_level(db: Session, level: ClassLevel) -> int:
    ids = [t.id for t in db.query(CurriculumTopic.id).filter(CurriculumTopic.level == ClassLevel(level)).all()]
    if not ids:
        return 0
    _delete_progress_for(db, ids)
    db.query(CurriculumTopic).filter(CurriculumTopic.id.in_(ids)).delete(synchronize_session=False)
    db.commit()
    logger.info(f"Cleared {len(ids)} topics of level {ClassLevel(level).value}")
    return len(ids)


def generate_yearly_template(db: Session, level: ClassLevel) -> int:
    topics = build_yearly_template(ClassLevel(level))
    db.add_all(CurriculumTopic(**t.model_dump()) for t in topics)
    db.commit()
    return len(topics)


# --- class progress ---

def get_class_progress(db: Session, class_id: str) -> List[ClassProgress]:
    return db.query(ClassProgress).filter(ClassProgress.class_id == class_id).all()


def toggle_topic_completion(db: Session, class_id: str, topic_id: str, completed: bool) -> None:
    existing = db.query(ClassProgress).filter(
        ClassProgress.class_id == class_id,
        ClassProgress.topic_id == topic_id,
    ).all()

    if completed:
        if not existing:
            db.add(ClassProgress(class_id=class_id, topic_id=topic_id, completed_at=datetime.utcnow()))
    else:
        for row in existing:
            db.delete(row)
    db.commit()


# --- student progress ---

def get_student_progress(db: Session, student_id: str) -> List[StudentProgress]:
    return db.query(StudentProgress).filter(StudentProgress.student_id == student_id).all()


def set_student_topic_status(db: Session, student_id: str, topic_id: str,
                             status: Optional[ProgressStatus]) -> Optional[StudentProgress]:
    existing = db.query(StudentProgress).filter(
        StudentProgress.student_id == student_id,
        StudentProgress.topic_id == topic_id,
    ).first()

    if status is None:
        if existing:
            db.delete(existing)
            db.commit()
        return None

    if existing:
        existing.status = ProgressStatus(status)
        existing.updated_at = datetime.utcnow()
    else:
        existing = StudentProgress(
            student_id=student_id,
            topic_id=topic_id,
            status=ProgressStatus(status),
            updated_at=datetime.utcnow(),
        )
        db.add(existing)
    db.commit()
    db.refresh(existing)
    return existing

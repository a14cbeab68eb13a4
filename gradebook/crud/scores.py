# gradebook/crud/scores.py
import logging
from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from gradebook.core.enums import ResultKind
from gradebook.core.exceptions import DataIntegrityError
from gradebook.core.levels import get_level_subjects
from gradebook.crud.locking import class_locks
from gradebook.db.models.school_class import SchoolClass
from gradebook.db.models.score import Score
from gradebook.db.models.student import Student

logger = logging.getLogger(__name__)

VALID_TERMS = (1, 2, 3)


def get_scores(db: Session, class_id: str, kind: Optional[ResultKind] = None) -> List[Score]:
    query = db.query(Score).filter(Score.class_id == class_id)
    if kind:
        query = query.filter(Score.kind == ResultKind(kind))
    return query.all()


def _term_value(term) -> int:
    # 0 stands for "no term" inside the natural key
    return int(term) if term else 0


def _parse_kind(kind) -> ResultKind:
    try:
        return ResultKind(kind)
    except ValueError:
        raise DataIntegrityError(f"Invalid result kind: {kind}")


def validate_score(record, class_levels: dict, student_classes: dict) -> None:
    if not record.class_id or not record.student_id or not record.subject_key:
        raise DataIntegrityError("Score is missing identifiers")

    kind = _parse_kind(record.kind)
    if kind == ResultKind.EXAM and not record.term:
        raise DataIntegrityError("EXAM score must have a term")
    if record.term and int(record.term) not in VALID_TERMS:
        raise DataIntegrityError(f"Invalid term: {record.term}")

    if record.class_id not in class_levels:
        raise DataIntegrityError(f"Class does not exist: {record.class_id}")
    if record.student_id not in student_classes:
        raise DataIntegrityError(f"Student does not exist: {record.student_id}")
    if student_classes[record.student_id] != record.class_id:
        raise DataIntegrityError(f"Student not in class: {record.student_id}")

    subjects = get_level_subjects(class_levels[record.class_id])
    if record.subject_key not in subjects:
        raise DataIntegrityError(
            f"Subject {record.subject_key} is not configured for level {class_levels[record.class_id].value}"
        )

    if not isinstance(record.score, (int, float)) or isinstance(record.score, bool):
        raise DataIntegrityError("Invalid score")
    if record.max_score != subjects[record.subject_key]:
        raise DataIntegrityError(
            f"Max score {record.max_score} does not match configured {subjects[record.subject_key]} "
            f"for {record.subject_key}"
        )
    if record.score < 0 or record.score > record.max_score:
        raise DataIntegrityError(f"Invalid score {record.score} for {record.subject_key} (max {record.max_score})")


def validate_criteria(criteria, student_classes: dict, class_id: Optional[str] = None) -> None:
    if not criteria.student_id or not criteria.subject_key:
        raise DataIntegrityError("Delete criteria is missing identifiers")
    _parse_kind(criteria.kind)
    if criteria.student_id not in student_classes:
        raise DataIntegrityError(f"Student does not exist: {criteria.student_id}")
    if class_id and student_classes[criteria.student_id] != class_id:
        raise DataIntegrityError(f"Student not in class: {criteria.student_id}")


def _find_by_natural_key(db: Session, student_id, subject_key, kind, term) -> Optional[Score]:
    return db.query(Score).filter(
        Score.student_id == student_id,
        Score.subject_key == subject_key,
        Score.kind == ResultKind(kind),
        Score.term == _term_value(term),
    ).first()


def _upsert(db: Session, records) -> None:
    for record in records:
        existing = _find_by_natural_key(db, record.student_id, record.subject_key, record.kind, record.term)
        created_at = getattr(record, "created_at", None) or datetime.utcnow()
        if existing:
            existing.score = float(record.score)
            existing.max_score = float(record.max_score)
            existing.created_at = created_at
            # the row follows the student into the current class
            existing.class_id = record.class_id
        else:
            db.add(Score(
                student_id=record.student_id,
                class_id=record.class_id,
                subject_key=record.subject_key,
                kind=ResultKind(record.kind),
                score=float(record.score),
                max_score=float(record.max_score),
                term=_term_value(record.term),
                created_at=created_at,
            ))
        # later records of the same batch must see this one
        db.flush()


def _delete(db: Session, criteria_list) -> int:
    deleted = 0
    for criteria in criteria_list:
        existing = _find_by_natural_key(db, criteria.student_id, criteria.subject_key, criteria.kind, criteria.term)
        if existing:
            db.delete(existing)
            db.flush()
            deleted += 1
    return deleted


def apply_scores_batch(db: Session, save: Iterable = (), delete: Iterable = (), class_id: str = None) -> None:
    """
    Upserts ``save`` and deletes ``delete`` as one all-or-nothing unit.

    Every record is validated before the first write. A student's scores
    can only be written or deleted through the class the student belongs to;
    ``class_id`` restricts the deletes to that class.
    """
    save = list(save)
    delete = list(delete)
    if not save and not delete:
        return

    class_ids = {r.class_id for r in save if r.class_id}
    student_ids = {r.student_id for r in save + delete if r.student_id}
    class_levels = {
        c.id: c.level for c in db.query(SchoolClass).filter(SchoolClass.id.in_(class_ids)).all()
    } if class_ids else {}
    student_classes = {
        s.id: s.class_id
        for s in db.query(Student.id, Student.class_id).filter(Student.id.in_(student_ids)).all()
    } if student_ids else {}

    try:
        for record in save:
            validate_score(record, class_levels, student_classes)
        for criteria in delete:
            validate_criteria(criteria, student_classes, class_id)
    except DataIntegrityError as e:
        logger.warning(f"Rejected score batch: {e.reason}")
        raise

    lock_ids = set(class_ids) | set(student_classes.values())
    if class_id:
        lock_ids.add(class_id)

    with class_locks(lock_ids):
        try:
            _upsert(db, save)
            deleted = _delete(db, delete)
            db.commit()
        except Exception:
            logger.exception("Score batch failed, rolling back")
            db.rollback()
            raise

    logger.info(f"Score batch applied: {len(save)} saved, {deleted} deleted")


def save_scores_batch(db: Session, records: Iterable) -> None:
    apply_scores_batch(db, save=records)


def delete_scores_batch(db: Session, criteria_list: Iterable, class_id: str = None) -> None:
    apply_scores_batch(db, delete=criteria_list, class_id=class_id)

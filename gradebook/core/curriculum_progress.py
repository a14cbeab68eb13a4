# gradebook/core/curriculum_progress.py
"""
Curriculum progress against the week-indexed annual plan.

The academic year start is passed in explicitly; the HTTP layer reads it
from ``settings.ACADEMIC_YEAR_START``.
"""
import logging
import math
import uuid
from datetime import date, datetime
from typing import Iterable, List, Optional

from gradebook.core.enums import ProgressStatus
from gradebook.core.exceptions import ConfigurationError
from gradebook.core.grading import round_half_up
from gradebook.core.levels import get_level_subjects
from gradebook.schemas.curriculum import (
    CurriculumTopicOut,
    StudentSubjectStats,
    SubjectProgressStatus,
)

logger = logging.getLogger(__name__)

TOTAL_WEEKS = 30
SECONDS_PER_DAY = 24 * 60 * 60


def default_academic_year_start(now: Optional[datetime] = None) -> date:
    """Oct 1 of the school year that contains ``now``."""
    now = now or datetime.now()
    year = now.year - 1 if now.month < 10 else now.year
    return date(year, 10, 1)


def get_current_academic_week(academic_year_start: Optional[date] = None,
                              now: Optional[datetime] = None) -> int:
    now = now or datetime.now()
    start = academic_year_start or default_academic_year_start(now)
    start_dt = datetime(start.year, start.month, start.day)

    diff_days = math.ceil(abs((now - start_dt).total_seconds()) / SECONDS_PER_DAY)
    return max(1, math.ceil(diff_days / 7))


def get_subject_progress_status(subject_topics: Iterable,
                                completed_topic_ids: Iterable[str],
                                current_week: Optional[int] = None) -> SubjectProgressStatus:
    """Class-level completion and delay for one subject track."""
    if current_week is None:
        current_week = get_current_academic_week()

    topics = list(subject_topics)
    completed_ids = set(completed_topic_ids)
    completed_topics = [t for t in topics if t.id in completed_ids]

    total_topics = len(topics)
    completed_count = len(completed_topics)
    last_completed_week = max((t.week for t in completed_topics), default=0)
    # topics that should already be done by now
    expected_topics_count = sum(1 for t in topics if t.week < current_week)
    delay_weeks = max(0, current_week - last_completed_week - 1)

    percentage = round_half_up(completed_count / total_topics * 100) if total_topics else 0

    return SubjectProgressStatus(
        percentage=percentage,
        completed_count=completed_count,
        total_topics=total_topics,
        expected_topics_count=expected_topics_count,
        current_week=current_week,
        last_completed_week=last_completed_week,
        is_delayed=expected_topics_count > completed_count and delay_weeks > 0,
        delay_weeks=delay_weeks,
    )


def get_student_subject_stats(subject_topics: Iterable, student_progress: Iterable) -> StudentSubjectStats:
    topic_ids = {t.id for t in subject_topics}
    total = len(topic_ids)
    if total == 0:
        return StudentSubjectStats(completed=0, skipped=0, percentage=0)

    relevant = [p for p in student_progress if p.topic_id in topic_ids]
    completed = sum(1 for p in relevant if p.status == ProgressStatus.COMPLETED)
    skipped = sum(1 for p in relevant if p.status == ProgressStatus.SKIPPED)

    # a skipped topic is handled, not pending
    return StudentSubjectStats(
        completed=completed,
        skipped=skipped,
        percentage=round_half_up((completed + skipped) / total * 100),
    )


def term_for_week(week: int) -> int:
    if week > 22:
        return 3
    if week > 11:
        return 2
    return 1


def build_yearly_template(level) -> List[CurriculumTopicOut]:
    """Placeholder topic for every (subject, week) of the level."""
    subjects = get_level_subjects(level)
    if not subjects:
        raise ConfigurationError(f"Configuration not found for level: {level}")

    topics = []
    for week in range(1, TOTAL_WEEKS + 1):
        for subject_key in subjects:
            topics.append(CurriculumTopicOut(
                id=str(uuid.uuid4()),
                level=level,
                subject=subject_key,
                term=term_for_week(week),
                week=week,
                topic=f"موضوع الأسبوع {week}",
                competency="",
            ))
    logger.info(f"Built yearly template for {level}: {len(topics)} topics")
    return topics


def group_by_subject(topics: Iterable) -> dict:
    grouped = {}
    for topic in topics:
        grouped.setdefault(topic.subject, []).append(topic)
    return grouped

from collections import Counter
from datetime import date, datetime

import pytest

from gradebook.core.curriculum_progress import (
    build_yearly_template,
    default_academic_year_start,
    get_current_academic_week,
    get_student_subject_stats,
    get_subject_progress_status,
    term_for_week,
)
from gradebook.core.curriculum_seed import CURRICULUM_SEED
from gradebook.core.enums import ClassLevel, ProgressStatus
from gradebook.core.exceptions import ConfigurationError
from gradebook.core.levels import LEVEL_CONFIG
from tests.factories import mark, topic


def five_weeks():
    return [topic(f"w{week}", week) for week in range(1, 6)]


def test_default_start_is_october_first_of_the_school_year():
    assert default_academic_year_start(datetime(2026, 3, 15)) == date(2025, 10, 1)
    assert default_academic_year_start(datetime(2026, 10, 19)) == date(2026, 10, 1)


def test_academic_week_counts_started_weeks():
    start = date(2026, 10, 1)
    assert get_current_academic_week(start, now=datetime(2026, 10, 1)) == 1
    assert get_current_academic_week(start, now=datetime(2026, 10, 1, 10)) == 1
    assert get_current_academic_week(start, now=datetime(2026, 10, 7, 10)) == 1
    assert get_current_academic_week(start, now=datetime(2026, 10, 8, 10)) == 2


def test_academic_week_uses_inferred_start_when_unset():
    assert get_current_academic_week(now=datetime(2026, 10, 19, 9)) == 3


def test_delay_detected_when_behind_schedule():
    topics = five_weeks()
    status = get_subject_progress_status(topics, ["w1", "w2"], current_week=6)

    assert status.expected_topics_count == 5
    assert status.completed_count == 2
    assert status.last_completed_week == 2
    assert status.delay_weeks == 3
    assert status.is_delayed is True
    assert status.percentage == 40


def test_no_delay_once_expected_topics_are_covered():
    topics = [topic("w1", 1), topic("w2", 2)]
    status = get_subject_progress_status(topics, ["w1", "w2"], current_week=6)

    assert status.delay_weeks == 3
    assert status.is_delayed is False
    assert status.percentage == 100


def test_no_delay_when_a_recent_topic_was_completed():
    status = get_subject_progress_status(five_weeks(), ["w5"], current_week=6)
    assert status.delay_weeks == 0
    assert status.is_delayed is False


def test_empty_subject_track():
    status = get_subject_progress_status([], [], current_week=10)
    assert status.percentage == 0
    assert status.is_delayed is False
    assert status.last_completed_week == 0


def test_completed_ids_from_other_subjects_are_ignored():
    status = get_subject_progress_status(five_weeks(), ["w1", "other-subject-topic"], current_week=2)
    assert status.completed_count == 1
    assert status.percentage == 20


def test_student_stats_count_skipped_as_handled():
    topics = [topic(f"t{i}", i) for i in range(1, 5)]
    progress = [
        mark("s1", "t1", ProgressStatus.COMPLETED),
        mark("s1", "t2", ProgressStatus.COMPLETED),
        mark("s1", "t3", ProgressStatus.SKIPPED),
        mark("s1", "french-topic", ProgressStatus.COMPLETED),
    ]
    stats = get_student_subject_stats(topics, progress)
    assert (stats.completed, stats.skipped, stats.percentage) == (2, 1, 75)


def test_student_stats_of_empty_track():
    stats = get_student_subject_stats([], [mark("s1", "t1", ProgressStatus.COMPLETED)])
    assert (stats.completed, stats.skipped, stats.percentage) == (0, 0, 0)


@pytest.mark.parametrize("week,term", [(1, 1), (11, 1), (12, 2), (22, 2), (23, 3), (30, 3)])
def test_term_banding(week, term):
    assert term_for_week(week) == term


def test_yearly_template_covers_every_subject_and_week():
    topics = build_yearly_template(ClassLevel.AF3)
    subjects = LEVEL_CONFIG[ClassLevel.AF3]

    assert len(topics) == 30 * len(subjects)
    assert Counter(t.subject for t in topics) == {key: 30 for key in subjects}
    assert Counter(t.term for t in topics) == {1: 11 * len(subjects), 2: 11 * len(subjects), 3: 8 * len(subjects)}
    assert len({t.id for t in topics}) == len(topics)


def test_yearly_template_for_unknown_level():
    with pytest.raises(ConfigurationError):
        build_yearly_template("AF9")


def test_seed_terms_follow_week_banding():
    by_id = {item["id"]: item for item in CURRICULUM_SEED}
    assert by_id["AF3-ISL-W14"]["term"] == 2
    assert by_id["AF3-MAT-W27"]["term"] == 3
    assert by_id["GEN-AR-11"]["term"] == 1
    assert by_id["GEN-FR-23"]["term"] == 3

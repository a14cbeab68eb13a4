import logging

import pytest

from gradebook.core import grading
from gradebook.core.enums import ClassLevel, Decision, ResultKind
from gradebook.core.grading import (
    calculate_annual_average,
    calculate_exam_term_stats,
    calculate_max_score_for_level,
    competition_ranks,
    decide,
    extract_term_grades,
    generate_annual_report,
    rank_students,
    round2,
    round_half_up,
)
from gradebook.core.levels import LEVEL_CONFIG
from gradebook.schemas.score import ScoreRecord
from tests.factories import exam, student


def full_marks(student_id, level=ClassLevel.AF3, term=1):
    return [exam(student_id, key, max_score, term) for key, max_score in LEVEL_CONFIG[level].items()]


def scores_with_total(student_id, total, term=1):
    # AF3 subjects filled greedily in config order
    records = []
    for key, max_score in LEVEL_CONFIG[ClassLevel.AF3].items():
        if total <= 0:
            break
        points = min(total, max_score)
        records.append(exam(student_id, key, points, term))
        total -= points
    return records


@pytest.mark.parametrize("level", list(ClassLevel))
def test_max_score_for_every_level_is_the_sum_of_its_subjects(level):
    assert calculate_max_score_for_level(level) == sum(LEVEL_CONFIG[level].values())


def test_max_score_falls_back_for_unknown_level():
    assert calculate_max_score_for_level("AF9") == 200


def test_unknown_level_is_reported_once(monkeypatch, caplog):
    monkeypatch.setattr(grading, "_warned_levels", set())
    students = [student("s1"), student("s2"), student("s3")]

    with caplog.at_level(logging.WARNING, logger="gradebook.core.grading"):
        generate_annual_report(students, [], "AF9")
        calculate_max_score_for_level("AF9")

    warnings = [r for r in caplog.records if "AF9" in r.getMessage()]
    assert len(warnings) == 1


def test_extract_term_grades_only_keeps_exams_of_the_term():
    records = [
        exam("s1", "mathematics", 30, term=1),
        exam("s1", "arabic_language", 40, term=2),
        ScoreRecord(student_id="s1", subject_key="french_language", kind=ResultKind.TEST, score=20, term=1),
    ]
    assert extract_term_grades(records, 1) == {"mathematics": 30.0}


def test_term_stats_clamp_score_to_subject_max():
    # mathematics is worth 40 points in AF3
    stats = calculate_exam_term_stats([exam("s1", "mathematics", 55)], ClassLevel.AF3, 1)
    assert stats.total_score == 40.0
    assert stats.average == 4.0


def test_full_marks_average_twenty_and_zero_marks_average_zero():
    assert calculate_exam_term_stats(full_marks("s1"), ClassLevel.AF3, 1).average == 20.0

    zeros = [exam("s1", key, 0) for key in LEVEL_CONFIG[ClassLevel.AF3]]
    stats = calculate_exam_term_stats(zeros, ClassLevel.AF3, 1)
    assert stats.total_score == 0.0
    assert stats.average == 0.0


def test_term_stats_ignore_other_terms_and_kinds():
    records = [
        exam("s1", "mathematics", 20, term=1),
        exam("s1", "mathematics", 40, term=2),
        ScoreRecord(student_id="s1", subject_key="arabic_language", kind=ResultKind.EXERCISE, score=50, term=1),
    ]
    stats = calculate_exam_term_stats(records, ClassLevel.AF3, 1)
    assert stats.total_score == 20.0
    assert stats.max_possible == 200


def test_term_stats_for_af3_scenario():
    records = [
        exam("s1", "islamic_education", 25),
        exam("s1", "arabic_language", 45),
        exam("s1", "mathematics", 38),
    ] + [exam("s1", key, 0) for key in ("civic_education", "art_education", "physical_education",
                                         "french_language", "social_studies", "natural_sciences")]
    stats = calculate_exam_term_stats(records, ClassLevel.AF3, 1)
    assert stats.total_score == 108.0
    assert stats.max_possible == 200
    assert stats.average == 10.8


def test_rank_students_af3_scenario():
    students = [student("s1"), student("s2")]
    records = [exam("s1", "islamic_education", 25), exam("s1", "arabic_language", 45), exam("s1", "mathematics", 38)]
    records += scores_with_total("s2", 150)

    ranks = rank_students(students, records, ClassLevel.AF3, 1)
    assert ranks == {"s2": 1, "s1": 2}


def test_ties_share_rank_and_leave_a_gap():
    students = [student(sid) for sid in ("a", "b", "c", "d")]
    records = (
        scores_with_total("a", 180)
        + scores_with_total("b", 150)
        + scores_with_total("c", 150)
        + scores_with_total("d", 100)
    )
    ranks = rank_students(students, records, ClassLevel.AF3, 1)
    assert [ranks[sid] for sid in ("a", "b", "c", "d")] == [1, 2, 2, 4]


def test_students_without_exams_rank_last_with_zero():
    students = [student("s1"), student("s2"), student("s3")]
    records = scores_with_total("s1", 120)
    ranks = rank_students(students, records, ClassLevel.AF3, 1)
    assert ranks == {"s1": 1, "s2": 2, "s3": 2}


def test_competition_ranks_on_plain_values():
    ranked = competition_ranks([10, 18, 15, 15], key=lambda v: v)
    assert ranked == [(18, 1), (15, 2), (15, 2), (10, 4)]


def test_annual_average_weights_terms_one_two_three():
    assert calculate_annual_average(10, 12, 14) == round2((10 * 1 + 12 * 2 + 14 * 3) / 6)
    assert calculate_annual_average(10, 12, 14) == 12.67


def test_annual_average_counts_missing_terms_as_zero():
    assert calculate_annual_average(12, 0, 0) == 2.0
    assert calculate_annual_average(12, None, None) == 2.0


def test_decision_threshold():
    assert decide(10.0) == Decision.PROMOTE
    assert decide(9.99) == Decision.REPEAT


def test_annual_report_ranks_and_decisions():
    students = [student("low"), student("top"), student("mid"), student("mid2")]
    records = []
    for term in (1, 2, 3):
        records += scores_with_total("top", 160, term)   # 16.00
        records += scores_with_total("mid", 100, term)   # 10.00
        records += scores_with_total("mid2", 100, term)  # 10.00
        records += scores_with_total("low", 80, term)    # 8.00

    report = generate_annual_report(students, records, ClassLevel.AF3)

    assert [item.student_id for item in report] == ["top", "mid", "mid2", "low"]
    assert [item.rank for item in report] == [1, 2, 2, 4]
    by_id = {item.student_id: item for item in report}
    assert by_id["top"].annual_avg == 16.0
    assert by_id["mid"].decision == Decision.PROMOTE
    assert by_id["low"].decision == Decision.REPEAT
    assert (by_id["mid"].term1_avg, by_id["mid"].term2_avg, by_id["mid"].term3_avg) == (10.0, 10.0, 10.0)


def test_annual_report_student_missing_term_three_is_penalized():
    records = scores_with_total("s1", 120, 1) + scores_with_total("s1", 120, 2)
    [item] = generate_annual_report([student("s1")], records, ClassLevel.AF3)
    # (12 + 24 + 0) / 6
    assert item.annual_avg == 6.0
    assert item.decision == Decision.REPEAT


def test_annual_report_of_empty_roster():
    assert generate_annual_report([], [], ClassLevel.AF3) == []


def test_rounding_is_half_up():
    assert round2(0.125) == 0.13
    assert round2(2.675) == 2.67  # binary value sits below the half
    assert round_half_up(12.5) == 13
    assert round_half_up(33.333) == 33

from datetime import date

import pytest

from gradebook.core.analysis import (
    CONTACT_ADMINISTRATION_NOTE,
    REMEDIATION_PLAN_NOTE,
    classify_level,
    generate_class_analysis,
    generate_comprehensive_analysis,
)
from gradebook.core.enums import AttendanceStatus, ClassLevel, PerformanceLevel, Trend
from gradebook.core.levels import LEVEL_LABELS, SUBJECT_NAMES
from tests.factories import exam, presence, student

AF3 = ClassLevel.AF3


def mixed_term(student_id, term=1):
    return [
        exam(student_id, "arabic_language", 50, term),     # 1.00
        exam(student_id, "islamic_education", 27, term),   # 0.90
        exam(student_id, "mathematics", 34, term),         # 0.85
        exam(student_id, "french_language", 24, term),     # 0.80
        exam(student_id, "physical_education", 7, term),   # 0.70
        exam(student_id, "civic_education", 5, term),      # 0.50
        exam(student_id, "social_studies", 4, term),       # 0.40
        exam(student_id, "art_education", 2, term),        # 0.20
        exam(student_id, "natural_sciences", 1, term),     # 0.10
    ]


@pytest.mark.parametrize("average,level", [
    (20, PerformanceLevel.EXCELLENT),
    (16, PerformanceLevel.EXCELLENT),
    (15.99, PerformanceLevel.GOOD),
    (12, PerformanceLevel.GOOD),
    (11.99, PerformanceLevel.AVERAGE),
    (10, PerformanceLevel.AVERAGE),
    (9.99, PerformanceLevel.WEAK),
    (0, PerformanceLevel.WEAK),
])
def test_classify_level(average, level):
    assert classify_level(average) == level


def test_strengths_and_weaknesses_of_the_active_term():
    analysis = generate_comprehensive_analysis("s1", mixed_term("s1"), [], AF3)

    assert analysis.average_score == 15.4
    assert analysis.general_level == PerformanceLevel.GOOD
    assert analysis.strengths == [
        SUBJECT_NAMES["arabic_language"],
        SUBJECT_NAMES["islamic_education"],
        SUBJECT_NAMES["mathematics"],
    ]
    # worst first
    assert analysis.weaknesses == [
        SUBJECT_NAMES["natural_sciences"],
        SUBJECT_NAMES["art_education"],
        SUBJECT_NAMES["social_studies"],
    ]


def test_term_one_only_is_stable():
    analysis = generate_comprehensive_analysis("s1", [exam("s1", "mathematics", 40)], [], AF3)
    assert analysis.trend == Trend.STABLE
    assert analysis.average_score == 4.0


def test_trend_up_from_term_one_to_two():
    records = [exam("s1", "mathematics", 20, 1), exam("s1", "mathematics", 40, 2)]
    analysis = generate_comprehensive_analysis("s1", records, [], AF3)
    assert analysis.trend == Trend.UP
    assert analysis.average_score == 4.0


def test_trend_down_in_term_three():
    records = [
        exam("s1", "arabic_language", 50, 1),
        exam("s1", "arabic_language", 40, 2),
        exam("s1", "arabic_language", 30, 3),
    ]
    analysis = generate_comprehensive_analysis("s1", records, [], AF3)
    assert analysis.trend == Trend.DOWN
    assert analysis.average_score == 3.0


def test_strengths_come_from_the_active_term_only():
    records = [exam("s1", "mathematics", 40, 1), exam("s1", "arabic_language", 10, 2)]
    analysis = generate_comprehensive_analysis("s1", records, [], AF3)
    assert analysis.strengths == []
    assert analysis.weaknesses == [SUBJECT_NAMES["arabic_language"]]


def test_student_without_data_is_weak_and_gets_remediation_notes():
    analysis = generate_comprehensive_analysis("s1", [exam("s2", "mathematics", 40)], [], AF3)

    assert analysis.average_score == 0
    assert analysis.general_level == PerformanceLevel.WEAK
    assert analysis.trend == Trend.STABLE
    assert analysis.attendance_rate == 0
    assert REMEDIATION_PLAN_NOTE in analysis.teacher_recommendation
    assert CONTACT_ADMINISTRATION_NOTE in analysis.parent_recommendation


def test_good_student_recommendations_name_the_level():
    analysis = generate_comprehensive_analysis("s1", mixed_term("s1"), [], AF3)
    assert LEVEL_LABELS[PerformanceLevel.GOOD] in analysis.teacher_recommendation
    assert LEVEL_LABELS[PerformanceLevel.GOOD] in analysis.parent_recommendation
    assert REMEDIATION_PLAN_NOTE not in analysis.teacher_recommendation


def test_attendance_rate_uses_the_students_own_records():
    attendance = [
        presence("s1", date(2026, 10, 1)),
        presence("s1", date(2026, 10, 2)),
        presence("s1", date(2026, 10, 3), AttendanceStatus.ABSENT),
        presence("s2", date(2026, 10, 1), AttendanceStatus.ABSENT),
    ]
    analysis = generate_comprehensive_analysis("s1", [], attendance, AF3)
    assert analysis.attendance_rate == 67


def test_class_analysis_of_empty_roster():
    analysis = generate_class_analysis([], [], [], AF3)
    assert analysis.total_students == 0
    assert analysis.class_average == 0
    assert analysis.attendance_average == 0
    assert analysis.top_subject == "-"
    assert analysis.weakest_subject == "-"
    assert analysis.distribution.weak == 0


def test_class_analysis_aggregates_students():
    students = [student("s1"), student("s2"), student("s3")]
    scores = mixed_term("s1") + [
        exam("s2", "arabic_language", 50),
        exam("s2", "islamic_education", 30),
        exam("s2", "mathematics", 40),
        exam("s2", "french_language", 30),
        exam("s2", "civic_education", 10),
        exam("s2", "art_education", 10),
        exam("s2", "physical_education", 10),
        exam("s2", "social_studies", 10),
    ]
    attendance = [
        presence("s1", date(2026, 10, 1)),
        presence("s2", date(2026, 10, 1), AttendanceStatus.ABSENT),
        presence("s3", date(2026, 10, 1)),
    ]

    analysis = generate_class_analysis(students, scores, attendance, AF3)

    assert analysis.total_students == 3
    # (15.4 + 19.0 + 0) / 3
    assert analysis.class_average == 11.47
    assert analysis.attendance_average == 67
    assert analysis.distribution.excellent == 1
    assert analysis.distribution.good == 1
    assert analysis.distribution.weak == 1
    assert analysis.distribution.average == 0
    assert analysis.top_subject == SUBJECT_NAMES["arabic_language"]


def test_subject_without_records_becomes_weakest():
    students = [student("s1")]
    scores = [exam("s1", key, 5) for key in ("islamic_education", "arabic_language", "mathematics")]
    analysis = generate_class_analysis(students, scores, [], AF3)
    assert analysis.weakest_subject == SUBJECT_NAMES["natural_sciences"]

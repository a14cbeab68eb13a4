# gradebook/core/analysis.py
"""
Rule-based analysis of a student (level, trend, strengths, weaknesses) and
of a whole class.
"""
from typing import Iterable, Sequence

from gradebook.core.attendance_stats import calculate_attendance_stats
from gradebook.core.enums import PerformanceLevel, ResultKind, Trend
from gradebook.core.grading import (
    TERMS,
    calculate_exam_term_stats,
    is_exam_for_term,
    round2,
    round_half_up,
    scores_for_student,
)
from gradebook.core.levels import (
    DEFAULT_SUBJECT_MAX_SCORE,
    LEVEL_LABELS,
    get_level_subjects,
    subject_display_name,
)
from gradebook.schemas.analysis import ClassAnalysis, LevelDistribution, StudentAnalysis

STRENGTH_THRESHOLD = 0.75
WEAKNESS_THRESHOLD = 0.50
MAX_LISTED_SUBJECTS = 3

TEACHER_LEVEL_NOTE = "مستوى الطالب: {level}."
PARENT_LEVEL_NOTE = "مستوى ابنكم: {level}."
REMEDIATION_PLAN_NOTE = "يحتاج لخطة علاجية مكثفة."
CONTACT_ADMINISTRATION_NOTE = "يرجى التواصل مع الإدارة."


def classify_level(average: float) -> PerformanceLevel:
    if average >= 16:
        return PerformanceLevel.EXCELLENT
    if average >= 12:
        return PerformanceLevel.GOOD
    if average < 10:
        return PerformanceLevel.WEAK
    return PerformanceLevel.AVERAGE


def compare_trend(current: float, previous: float) -> Trend:
    if current > previous:
        return Trend.UP
    if current < previous:
        return Trend.DOWN
    return Trend.STABLE


def build_recommendations(level: PerformanceLevel) -> tuple:
    label = LEVEL_LABELS[level]
    teacher = [TEACHER_LEVEL_NOTE.format(level=label)]
    parent = [PARENT_LEVEL_NOTE.format(level=label)]
    if level == PerformanceLevel.WEAK:
        teacher.append(REMEDIATION_PLAN_NOTE)
        parent.append(CONTACT_ADMINISTRATION_NOTE)
    return " ".join(teacher), " ".join(parent)


def generate_comprehensive_analysis(student_id: str, all_scores: Sequence,
                                    attendance: Iterable, level) -> StudentAnalysis:
    subjects = get_level_subjects(level)
    student_scores = scores_for_student(all_scores, student_id)
    stats = {term: calculate_exam_term_stats(student_scores, level, term) for term in TERMS}

    # latest term with any exam points, term 1 otherwise
    active_term = next((t for t in (3, 2) if stats[t].total_score > 0), 1)
    average_score = stats[active_term].average
    if active_term == 1:
        trend = Trend.STABLE
    else:
        trend = compare_trend(average_score, stats[active_term - 1].average)

    general_level = classify_level(average_score)

    performance = []
    for record in student_scores:
        if not is_exam_for_term(record, active_term):
            continue
        max_score = subjects.get(record.subject_key) or DEFAULT_SUBJECT_MAX_SCORE
        percent = float(record.score or 0) / max_score if max_score > 0 else 0
        performance.append((subject_display_name(record.subject_key), percent))

    strengths = sorted(
        (p for p in performance if p[1] >= STRENGTH_THRESHOLD), key=lambda p: p[1], reverse=True
    )
    weaknesses = sorted(
        (p for p in performance if p[1] <= WEAKNESS_THRESHOLD), key=lambda p: p[1]
    )

    own_attendance = [r for r in attendance if r.student_id == student_id]
    teacher_rec, parent_rec = build_recommendations(general_level)

    return StudentAnalysis(
        student_id=student_id,
        general_level=general_level,
        average_score=average_score,
        attendance_rate=calculate_attendance_stats(own_attendance).present_rate,
        strengths=[name for name, _ in strengths[:MAX_LISTED_SUBJECTS]],
        weaknesses=[name for name, _ in weaknesses[:MAX_LISTED_SUBJECTS]],
        trend=trend,
        teacher_recommendation=teacher_rec,
        parent_recommendation=parent_rec,
    )


def subject_class_averages(scores: Iterable, level) -> list:
    """(subject_key, mean score/max over all EXAM records), best first."""
    subjects = get_level_subjects(level)
    exam_scores = [r for r in scores if r.kind == ResultKind.EXAM]

    averages = []
    for subject_key, max_score in subjects.items():
        subject_scores = [r for r in exam_scores if r.subject_key == subject_key]
        if not subject_scores:
            averages.append((subject_key, 0.0))
            continue
        total_percent = sum(float(r.score or 0) / max_score for r in subject_scores)
        averages.append((subject_key, total_percent / len(subject_scores)))

    averages.sort(key=lambda item: item[1], reverse=True)
    return averages


def generate_class_analysis(students: Sequence, scores: Sequence, attendance: Sequence, level) -> ClassAnalysis:
    if not students:
        return ClassAnalysis(
            total_students=0,
            class_average=0,
            attendance_average=0,
            top_subject="-",
            weakest_subject="-",
            distribution=LevelDistribution(),
        )

    analyses = [
        generate_comprehensive_analysis(s.id, scores, attendance, level) for s in students
    ]

    distribution = LevelDistribution()
    for analysis in analyses:
        field = analysis.general_level.value
        setattr(distribution, field, getattr(distribution, field) + 1)

    subject_avgs = subject_class_averages(scores, level)
    top_subject = subject_display_name(subject_avgs[0][0]) if subject_avgs else "-"
    weakest_subject = subject_display_name(subject_avgs[-1][0]) if subject_avgs else "-"

    count = len(students)
    return ClassAnalysis(
        total_students=count,
        class_average=round2(sum(a.average_score for a in analyses) / count),
        attendance_average=round_half_up(sum(a.attendance_rate for a in analyses) / count),
        top_subject=top_subject,
        weakest_subject=weakest_subject,
        distribution=distribution,
    )

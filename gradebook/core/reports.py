# gradebook/core/reports.py
"""Tabular data behind the printed term reports."""
from typing import List, Sequence

from gradebook.core.grading import (
    calculate_exam_term_stats,
    decide,
    calculate_annual_average,
    extract_term_grades,
    rank_students,
    scores_for_student,
)
from gradebook.core.levels import DECISION_LABELS
from gradebook.schemas.analysis import StudentTermSheet, TermSummaryRow


def build_term_summary(students: Sequence, scores: Sequence, level, term: int) -> List[TermSummaryRow]:
    ranks = rank_students(students, scores, level, term)
    rows = []
    for student in students:
        own = scores_for_student(scores, student.id)
        stats = calculate_exam_term_stats(own, level, term)
        rows.append(TermSummaryRow(
            student_id=student.id,
            full_name=student.full_name,
            scores=extract_term_grades(own, term),
            total=stats.total_score,
            average=stats.average,
            rank=ranks[student.id],
        ))
    rows.sort(key=lambda row: row.average, reverse=True)
    return rows


def build_student_term_sheets(students: Sequence, scores: Sequence, level, term: int) -> List[StudentTermSheet]:
    """Per-student sheet for the selected term, ordered by name."""
    ranks = rank_students(students, scores, level, term)
    sheets = []
    for student in students:
        own = scores_for_student(scores, student.id)
        t1, t2, t3 = (calculate_exam_term_stats(own, level, t) for t in (1, 2, 3))
        decision = decide(calculate_annual_average(t1.average, t2.average, t3.average))
        sheets.append(StudentTermSheet(
            student_id=student.id,
            full_name=student.full_name,
            grades=extract_term_grades(own, term),
            term1=t1,
            term2=t2,
            term3=t3,
            current=calculate_exam_term_stats(own, level, term),
            rank=ranks.get(student.id),
            decision=decision,
            decision_label=DECISION_LABELS[decision],
        ))
    sheets.sort(key=lambda sheet: sheet.full_name)
    return sheets

# gradebook/core/grading.py
"""
Calculation engine for exam grades: term totals, averages out of 20,
competition ranks and the weighted annual average.

Every function is pure. Callers load score records first and pass them in;
records only need the attributes ``student_id``, ``subject_key``, ``kind``,
``score`` and ``term`` (ORM rows and ``ScoreRecord`` schemas both work).
"""
import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Dict, Iterable, List, Sequence, TypeVar

from gradebook.core.enums import Decision, ResultKind
from gradebook.core.levels import (
    DEFAULT_LEVEL_MAX_SCORE,
    DEFAULT_SUBJECT_MAX_SCORE,
    PASSING_AVERAGE,
    get_level_subjects,
)
from gradebook.schemas.analysis import AnnualReportItem, TermStats

logger = logging.getLogger(__name__)

T = TypeVar("T")

TERMS = (1, 2, 3)
TERM_WEIGHTS = {1: 1, 2: 2, 3: 3}

# unconfigured levels already reported, one warning per level per process
_warned_levels = set()


def round2(value: float) -> float:
    """Round half up to 2 decimals on the exact binary value."""
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def is_exam_for_term(record, term: int) -> bool:
    return record.kind == ResultKind.EXAM and record.term == term


def calculate_max_score_for_level(level) -> int:
    subjects = get_level_subjects(level)
    if not subjects:
        if level not in _warned_levels:
            _warned_levels.add(level)
            logger.warning(f"No level configuration for {level!r}, using max score {DEFAULT_LEVEL_MAX_SCORE}")
        return DEFAULT_LEVEL_MAX_SCORE
    return sum(subjects.values())


def extract_term_grades(scores: Iterable, term: int) -> Dict[str, float]:
    """Map subject -> score for the EXAM records of one term."""
    grades = {}
    for record in scores:
        if not is_exam_for_term(record, term) or record.score is None:
            continue
        grades[record.subject_key] = float(record.score)
    return grades


def calculate_exam_term_stats(scores: Iterable, level, term: int) -> TermStats:
    """
    Total and /20 average of a student's EXAM scores for a term.

    ``scores`` should already be restricted to one student. Each score is
    capped at its subject max before summing; only the outputs are rounded.
    """
    subjects = get_level_subjects(level)
    total_score = 0.0

    for record in scores:
        if not is_exam_for_term(record, term):
            continue
        max_for_subject = subjects.get(record.subject_key) or DEFAULT_SUBJECT_MAX_SCORE
        raw_score = float(record.score or 0)
        total_score += min(raw_score, max_for_subject)

    max_possible = calculate_max_score_for_level(level)
    average = (total_score / max_possible) * 20 if max_possible > 0 else 0

    return TermStats(
        total_score=round2(total_score),
        max_possible=max_possible,
        average=round2(average),
    )


def competition_ranks(items: Sequence[T], key: Callable[[T], float]) -> List[tuple]:
    """
    Sort ``items`` by ``key`` descending and pair each with its rank.

    Ties share a rank; the next distinct value gets its 1-based position
    (1, 1, 3, 4).
    """
    ordered = sorted(items, key=key, reverse=True)
    ranked = []
    current_rank = 1
    for index, item in enumerate(ordered):
        if index > 0 and key(item) < key(ordered[index - 1]):
            current_rank = index + 1
        ranked.append((item, current_rank))
    return ranked


def scores_for_student(scores: Iterable, student_id: str) -> list:
    return [r for r in scores if r.student_id == student_id]


def rank_students(students: Iterable, scores: Sequence, level, term: int) -> Dict[str, int]:
    """student_id -> rank for one term. Students without exams rank with 0."""
    averages = [
        (student.id, calculate_exam_term_stats(scores_for_student(scores, student.id), level, term).average)
        for student in students
    ]
    return {
        student_id: rank
        for (student_id, _), rank in competition_ranks(averages, key=lambda pair: pair[1])
    }


def calculate_annual_average(avg1: float, avg2: float, avg3: float) -> float:
    # A missing term counts as 0 and stays in the denominator
    weighted = (
        (avg1 or 0) * TERM_WEIGHTS[1]
        + (avg2 or 0) * TERM_WEIGHTS[2]
        + (avg3 or 0) * TERM_WEIGHTS[3]
    )
    return round2(weighted / sum(TERM_WEIGHTS.values()))


def decide(annual_average: float) -> Decision:
    return Decision.PROMOTE if annual_average >= PASSING_AVERAGE else Decision.REPEAT


def generate_annual_report(students: Iterable, scores: Sequence, level) -> List[AnnualReportItem]:
    """One item per student, sorted by annual average with competition ranks."""
    rows = []
    for student in students:
        student_scores = scores_for_student(scores, student.id)
        t1, t2, t3 = (
            calculate_exam_term_stats(student_scores, level, term).average for term in TERMS
        )
        annual = calculate_annual_average(t1, t2, t3)
        rows.append({
            "student_id": student.id,
            "term1_avg": t1,
            "term2_avg": t2,
            "term3_avg": t3,
            "annual_avg": annual,
            "decision": decide(annual),
        })

    return [
        AnnualReportItem(**row, rank=rank)
        for row, rank in competition_ranks(rows, key=lambda row: row["annual_avg"])
    ]

from gradebook.core.enums import ClassLevel, Decision
from gradebook.core.levels import DECISION_LABELS
from gradebook.core.reports import build_student_term_sheets, build_term_summary
from tests.factories import exam, student

AF3 = ClassLevel.AF3


def roster():
    return [student("s1", "Zeinabou"), student("s2", "Ahmed"), student("s3", "Mariem")]


def scores():
    return [
        exam("s1", "arabic_language", 40, 1),
        exam("s1", "mathematics", 30, 1),
        exam("s2", "arabic_language", 45, 1),
        exam("s2", "mathematics", 35, 1),
        exam("s2", "arabic_language", 50, 2),
        exam("s2", "mathematics", 40, 3),
    ]


def test_term_summary_is_sorted_by_average():
    rows = build_term_summary(roster(), scores(), AF3, 1)

    assert [row.student_id for row in rows] == ["s2", "s1", "s3"]
    first = rows[0]
    assert first.full_name == "Ahmed"
    assert first.scores == {"arabic_language": 45.0, "mathematics": 35.0}
    assert first.total == 80
    assert first.average == 8.0
    assert first.rank == 1
    assert rows[2].scores == {}
    assert rows[2].rank == 3


def test_term_summary_only_reads_the_requested_term():
    rows = build_term_summary(roster(), scores(), AF3, 2)
    by_id = {row.student_id: row for row in rows}
    assert by_id["s2"].scores == {"arabic_language": 50.0}
    assert by_id["s1"].total == 0
    # s1 and s3 are tied at zero
    assert by_id["s1"].rank == by_id["s3"].rank == 2


def test_student_sheets_are_sorted_by_name():
    sheets = build_student_term_sheets(roster(), scores(), AF3, 1)
    assert [sheet.full_name for sheet in sheets] == ["Ahmed", "Mariem", "Zeinabou"]


def test_student_sheet_carries_every_term_and_the_decision():
    sheets = {s.student_id: s for s in build_student_term_sheets(roster(), scores(), AF3, 1)}
    sheet = sheets["s2"]

    assert sheet.grades == {"arabic_language": 45.0, "mathematics": 35.0}
    assert sheet.term1.average == 8.0
    assert sheet.term2.average == 5.0
    assert sheet.term3.average == 4.0
    assert sheet.current == sheet.term1
    assert sheet.rank == 1
    # (8 + 10 + 12) / 6 = 5.0
    assert sheet.decision == Decision.REPEAT
    assert sheet.decision_label == DECISION_LABELS[Decision.REPEAT]


def test_student_sheet_for_empty_student():
    sheets = {s.student_id: s for s in build_student_term_sheets(roster(), scores(), AF3, 3)}
    sheet = sheets["s3"]
    assert sheet.grades == {}
    assert sheet.current.total_score == 0
    assert sheet.current.max_possible == 200
    assert sheet.decision == Decision.REPEAT

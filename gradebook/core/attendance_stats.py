# gradebook/core/attendance_stats.py
import math
from datetime import date, datetime
from typing import Iterable, List, Optional

from gradebook.core.enums import AttendancePeriod, AttendanceStatus
from gradebook.core.grading import round_half_up
from gradebook.schemas.attendance import AttendanceCounts, AttendanceRegisterRow, AttendanceStats

SECONDS_PER_DAY = 24 * 60 * 60


def _as_datetime(value) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def filter_attendance_by_period(records: Iterable, period, now: Optional[datetime] = None) -> list:
    """
    week  -> records dated within 7 days of now (either direction)
    month -> records in now's calendar month
    term and anything else -> every record
    """
    now = now or datetime.now()
    try:
        period = AttendancePeriod(period)
    except ValueError:
        period = AttendancePeriod.TERM

    filtered = []
    for record in records:
        record_dt = _as_datetime(record.date)
        if period == AttendancePeriod.WEEK:
            diff_days = math.ceil(abs((now - record_dt).total_seconds()) / SECONDS_PER_DAY)
            if diff_days <= 7:
                filtered.append(record)
        elif period == AttendancePeriod.MONTH:
            if record_dt.month == now.month and record_dt.year == now.year:
                filtered.append(record)
        else:
            filtered.append(record)
    return filtered


def calculate_attendance_stats(records: Iterable) -> AttendanceStats:
    records = list(records)
    total = len(records)
    if total == 0:
        return AttendanceStats(counts=AttendanceCounts(), present_rate=0, absent_rate=0, late_rate=0)

    present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT)
    absent = sum(1 for r in records if r.status == AttendanceStatus.ABSENT)
    late = sum(1 for r in records if r.status == AttendanceStatus.LATE)

    return AttendanceStats(
        counts=AttendanceCounts(present=present, absent=absent, late=late),
        present_rate=round_half_up(present / total * 100),
        absent_rate=round_half_up(absent / total * 100),
        late_rate=round_half_up(late / total * 100),
    )


def build_attendance_register(students: Iterable, records: Iterable, month: str) -> List[AttendanceRegisterRow]:
    """Monthly register; ``month`` is "YYYY-MM"."""
    monthly = [r for r in records if _iso(r.date).startswith(month)]

    rows = []
    for student in students:
        own = [r for r in monthly if r.student_id == student.id]
        stats = calculate_attendance_stats(own)
        rows.append(AttendanceRegisterRow(
            student_id=student.id,
            full_name=student.full_name,
            present=stats.counts.present,
            absent=stats.counts.absent,
            late=stats.counts.late,
            rate=stats.present_rate if own else None,
        ))
    return rows


def _iso(value) -> str:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)

# gradebook/core/enums.py
import enum


class ClassLevel(str, enum.Enum):
    # Année Fondamentale 1..6
    AF1 = "AF1"
    AF2 = "AF2"
    AF3 = "AF3"
    AF4 = "AF4"
    AF5 = "AF5"
    AF6 = "AF6"


class ResultKind(str, enum.Enum):
    EXERCISE = "EXERCISE"
    TEST = "TEST"
    EXAM = "EXAM"  # only exams feed averages and ranks


class AttendanceStatus(str, enum.Enum):
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"


class ProgressStatus(str, enum.Enum):
    COMPLETED = "COMPLETED"
    SKIPPED = "SKIPPED"


class AttendancePeriod(str, enum.Enum):
    WEEK = "week"
    MONTH = "month"
    TERM = "term"


class Trend(str, enum.Enum):
    UP = "UP"
    DOWN = "DOWN"
    STABLE = "STABLE"


class PerformanceLevel(str, enum.Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    WEAK = "weak"


class Decision(str, enum.Enum):
    PROMOTE = "promote"
    REPEAT = "repeat"

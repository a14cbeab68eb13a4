# gradebook/schemas/analysis.py
from pydantic import BaseModel
from typing import Dict, List, Optional

from gradebook.core.enums import Decision, PerformanceLevel, Trend


class TermStats(BaseModel):
    total_score: float
    max_possible: int
    average: float  # out of 20


class AnnualReportItem(BaseModel):
    student_id: str
    term1_avg: float
    term2_avg: float
    term3_avg: float
    annual_avg: float
    rank: int
    decision: Decision


class StudentAnalysis(BaseModel):
    student_id: str
    general_level: PerformanceLevel
    average_score: float
    attendance_rate: int
    strengths: List[str]
    weaknesses: List[str]
    trend: Trend
    teacher_recommendation: str
    parent_recommendation: str


class LevelDistribution(BaseModel):
    excellent: int = 0
    good: int = 0
    average: int = 0
    weak: int = 0


class ClassAnalysis(BaseModel):
    total_students: int
    class_average: float
    attendance_average: int
    top_subject: str
    weakest_subject: str
    distribution: LevelDistribution


class TermSummaryRow(BaseModel):
    student_id: str
    full_name: str
    scores: Dict[str, float]
    total: float
    average: float
    rank: int


class StudentTermSheet(BaseModel):
    student_id: str
    full_name: str
    grades: Dict[str, float]
    term1: TermStats
    term2: TermStats
    term3: TermStats
    current: TermStats
    rank: Optional[int] = None
    decision: Decision
    decision_label: str

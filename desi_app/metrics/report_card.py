"""Report card grading calculations"""

from typing import Optional

from ..config.defaults import GradeParams
from ..data.models import StudentRecord
from ..models.summaries import ReportCard
from ..utils.numbers import round_places


def calculate_percentage(total: float, subject_count: int, max_mark: float = 100.0,
                         places: int = 2) -> float:
    """
    Calculate the overall percentage.

    percentage = total / (subject_count * max_mark) * 100

    Args:
        total: Sum of all marks
        subject_count: Number of subjects
        max_mark: Maximum mark per subject
        places: Decimal places to keep

    Returns:
        Percentage rounded to the given places
    """
    return round_places(total / (subject_count * max_mark) * 100, places)


def grade_for(percentage: float, params: Optional[GradeParams] = None) -> str:
    """Map a percentage onto a letter grade."""
    params = params or GradeParams()

    for lower_bound, grade in params.thresholds:
        if percentage >= lower_bound:
            return grade
    return params.fail_grade


def build_report_card(student: StudentRecord, params: Optional[GradeParams] = None) -> ReportCard:
    """
    Analyse a validated student's marks.

    Highest and lowest subjects keep the earliest subject on ties; passed and
    failed subjects keep the input order.
    """
    params = params or GradeParams()
    marks = student.marks

    total = sum(mark for _, mark in marks)
    percentage = calculate_percentage(total, student.subject_count,
                                      params.max_mark, params.percentage_places)

    highest, lowest = marks[0], marks[0]
    for entry in marks[1:]:
        if entry[1] > highest[1]:
            highest = entry
        if entry[1] < lowest[1]:
            lowest = entry

    return ReportCard(
        name=student.name,
        total_marks=total,
        percentage=percentage,
        grade=grade_for(percentage, params),
        highest_subject=highest[0],
        lowest_subject=lowest[0],
        passed_subjects=tuple(s for s, mark in marks if mark >= params.pass_mark),
        failed_subjects=tuple(s for s, mark in marks if mark < params.pass_mark),
        subject_count=student.subject_count,
    )

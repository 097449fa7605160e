"""Student grade records and class statistics."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

MAX_STUDENTS = 100
MAX_NAME_LENGTH = 50
GRADE_COUNT = 3
PASSING_AVERAGE = 7.0


@dataclass(frozen=True)
class Student:
    """A student with a name, a registration number and three grades."""

    name: str
    registration: int
    grades: tuple[float, float, float]

    def __post_init__(self) -> None:
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValueError(f"name longer than {MAX_NAME_LENGTH} characters")
        if len(self.grades) != GRADE_COUNT:
            raise ValueError(f"a student has exactly {GRADE_COUNT} grades")
        object.__setattr__(self, "grades", tuple(float(g) for g in self.grades))

    def average(self) -> float:
        """Return the mean of the three grades."""
        return sum(self.grades) / GRADE_COUNT


@dataclass(frozen=True)
class ClassSummary:
    """Statistics of a class: lowest, highest and overall average, and approvals."""

    lowest: float
    highest: float
    class_average: float
    approved: int


def summarize(students: Sequence[Student]) -> ClassSummary:
    """Compute the class statistics for 1 to 100 students."""
    if not 1 <= len(students) <= MAX_STUDENTS:
        raise ValueError(f"a class has between 1 and {MAX_STUDENTS} students")
    averages = [student.average() for student in students]
    return ClassSummary(
        lowest=min(averages),
        highest=max(averages),
        class_average=sum(averages) / len(averages),
        approved=sum(1 for a in averages if a >= PASSING_AVERAGE),
    )


def format_summary(summary: ClassSummary) -> str:
    """Render the summary as the report lines."""
    return (
        f"Menor = {summary.lowest:.1f}\n"
        f"Maior = {summary.highest:.1f}\n"
        f"Média da turma = {summary.class_average:.1f}\n"
        f"Qtde de aprovados = {summary.approved}\n"
    )
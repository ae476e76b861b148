"""In-memory grade book: student averages, letter grades and the class report."""

import math
from dataclasses import dataclass
from numbers import Number
from typing import Iterable, List, Tuple

import config
from utils.logger import get_logger
from utils.error_handler import CapacityExceededError, EmptyStateError, ValidationError

logger = get_logger()


def letter_grade(average: float) -> str:
    """Maps an average score to A/B/C/D/F. Each band includes its lower bound."""
    for lower_bound, letter in config.GRADE_BANDS:
        if average >= lower_bound:
            return letter
    return config.FAILING_GRADE


def validate_grade(value: float) -> float:
    """Returns `value` as a float if it is a grade in [MIN_GRADE, MAX_GRADE].

    Any real number type is accepted (int, float, Decimal, Fraction); bool and
    complex are not.

    Raises:
        ValidationError: For non-numeric, NaN, too large or out-of-range values.
    """
    if isinstance(value, (bool, complex)) or not isinstance(value, Number):
        raise ValidationError(f"Grade must be a number, got {value!r}.", field="grade")
    try:
        grade = float(value)
    except (OverflowError, TypeError, ValueError) as e:
        raise ValidationError(
            f"Grade must be between {config.MIN_GRADE:g} and {config.MAX_GRADE:g}. Please try again.",
            field="grade",
        ) from e
    if math.isnan(grade) or not (config.MIN_GRADE <= grade <= config.MAX_GRADE):
        raise ValidationError(
            f"Grade must be between {config.MIN_GRADE:g} and {config.MAX_GRADE:g}. Please try again.",
            field="grade",
        )
    return grade


def validate_subject_count(count: int) -> int:
    """Returns `count` if it is a usable number of subjects (a positive integer)."""
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValidationError(f"Number of grades must be a whole number, got {count!r}.", field="subject_count")
    if count <= 0:
        raise ValidationError("Number of grades must be positive.", field="subject_count")
    return count


@dataclass(frozen=True)
class StudentRecord:
    name: str
    average: float

    @property
    def letter_grade(self) -> str:
        return letter_grade(self.average)


@dataclass(frozen=True)
class ReportRow:
    index: int
    name: str
    average: float
    letter_grade: str


@dataclass(frozen=True)
class GradeReport:
    """Snapshot of the grade book: one row per student plus the class average."""
    rows: Tuple[ReportRow, ...]
    class_average: float

    @property
    def student_count(self) -> int:
        return len(self.rows)


class GradeBook:
    """Append-only list of student records with a fixed capacity."""

    def __init__(self, capacity: int = config.MAX_STUDENTS):
        """Initializes an empty grade book.

        Args:
            capacity: Maximum number of students. Defaults to the configured MAX_STUDENTS.

        Raises:
            ValueError: If capacity is not a positive integer.
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"Grade book capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._records: List[StudentRecord] = []
        logger.info(f"GradeBook initialized with capacity {capacity}.")

    def __len__(self) -> int:
        return len(self._records)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def records(self) -> Tuple[StudentRecord, ...]:
        return tuple(self._records)

    @property
    def is_full(self) -> bool:
        return len(self._records) >= self._capacity

    def ensure_capacity(self) -> None:
        """Raises CapacityExceededError if no more students can be added."""
        if self.is_full:
            logger.warning(f"Grade book is full ({self._capacity} students).")
            raise CapacityExceededError(self._capacity)

    def add_student(self, name: str, grades: Iterable[float]) -> StudentRecord:
        """Adds a student with the average of `grades`.

        Args:
            name: Student name. Surrounding whitespace is stripped.
            grades: One or more grades, each within [0, 100]. Any iterable works.

        Returns:
            The stored record; its `average` and `letter_grade` describe the student.

        Raises:
            CapacityExceededError: If the grade book is already full.
            ValidationError: If the name is empty, no grades are given, or a grade is invalid.
        """
        self.ensure_capacity()

        clean_name = (name or "").strip()
        if not clean_name:
            raise ValidationError("Student name cannot be empty.", field="name")

        checked = [validate_grade(g) for g in (grades if grades is not None else ())]
        if not checked:
            raise ValidationError("At least one grade is required.", field="grades")

        record = StudentRecord(name=clean_name, average=sum(checked) / len(checked))
        self._records.append(record)
        logger.info(
            f"Added student '{record.name}' with {len(checked)} grades: "
            f"average {record.average:.2f} ({record.letter_grade}). Total students: {len(self._records)}."
        )
        return record

    def report(self) -> GradeReport:
        """Builds the summary report in insertion order.

        Raises:
            EmptyStateError: If no students have been added yet.
        """
        if not self._records:
            raise EmptyStateError("No student data available. Please add students first.")

        rows = tuple(
            ReportRow(index=i, name=r.name, average=r.average, letter_grade=r.letter_grade)
            for i, r in enumerate(self._records, start=1)
        )
        class_average = sum(r.average for r in self._records) / len(self._records)
        logger.debug(f"Report built for {len(rows)} students, class average {class_average:.2f}.")
        return GradeReport(rows=rows, class_average=class_average)

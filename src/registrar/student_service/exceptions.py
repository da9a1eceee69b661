"""Exceptions for the Student Service module."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from registrar.student_service.validation import FieldViolation


class StudentServiceError(Exception):
    """Base exception for student service errors."""

    pass


class StudentValidationError(StudentServiceError):
    """One or more student fields failed validation."""

    def __init__(self, violations: list[FieldViolation]) -> None:
        super().__init__("Invalid input data")
        self.violations = list(violations)

    @property
    def details(self) -> list[str]:
        """Violations rendered as "<field>: <message>"."""
        return [str(v) for v in self.violations]


class InvalidStudentIdError(StudentServiceError):
    """A student ID path parameter is not a positive number."""

    def __init__(self, message: str = "Student ID must be a positive number") -> None:
        super().__init__(message)

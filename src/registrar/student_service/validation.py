"""Field validation for student records.

Every requested field is checked, and every failing field contributes exactly
one violation, so callers can report all problems in a single response.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from email_validator import EmailNotValidError, validate_email
from pydantic.alias_generators import to_camel

from registrar.student_store.models import Student, StudentStatus

PASSPORT_NUMBER_PATTERN = re.compile(r"^[A-Z][0-9]{7}$")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
MIN_AGE = 16
MAX_AGE = 100
MIN_GRADUATION_YEAR = 2020
MAX_GRADUATION_YEAR = 2030

ALL_FIELDS = (
    "name",
    "passport_number",
    "age",
    "email",
    "enrollment_date",
    "graduation_year",
    "status",
)

# Fields the general update path may change
UPDATABLE_FIELDS = ("name", "age", "email", "graduation_year")

# Fields an update body must still carry valid values for, changed or not
UPDATE_CHECKED_FIELDS = (
    "name",
    "passport_number",
    "age",
    "email",
    "enrollment_date",
    "graduation_year",
)


@dataclass(frozen=True)
class FieldViolation:
    """A single failed field constraint."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{to_camel(self.field)}: {self.message}"


def _check_name(value: str | None) -> str | None:
    if value is None or not value.strip():
        return "Name is required"
    if not NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH:
        return f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
    return None


def _check_passport_number(value: str | None) -> str | None:
    if value is None or not value.strip():
        return "Passport number is required"
    if not PASSPORT_NUMBER_PATTERN.fullmatch(value):
        return "Passport number must be in format: one letter followed by 7 digits (e.g., A1234567)"
    return None


def _check_age(value: int | None) -> str | None:
    if value is None:
        return "Age is required"
    if value < MIN_AGE:
        return f"Student must be at least {MIN_AGE} years old"
    if value > MAX_AGE:
        return f"Age cannot exceed {MAX_AGE}"
    return None


def _check_email(value: str | None) -> str | None:
    if not value:
        return None
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return "Please provide a valid email address"
    return None


def _check_enrollment_date(value: Any) -> str | None:
    if value is None:
        return "Enrollment date is required"
    return None


def _check_graduation_year(value: int | None) -> str | None:
    if value is None:
        return None
    if value < MIN_GRADUATION_YEAR:
        return f"Graduation year must be {MIN_GRADUATION_YEAR} or later"
    if value > MAX_GRADUATION_YEAR:
        return f"Graduation year cannot exceed {MAX_GRADUATION_YEAR}"
    return None


def _check_status(value: str | None) -> str | None:
    if value is None:
        return "Status is required"
    if value not in {s.value for s in StudentStatus}:
        allowed = ", ".join(StudentStatus)
        return f"Status must be one of: {allowed}"
    return None


_CHECKS: dict[str, Callable[[Any], str | None]] = {
    "name": _check_name,
    "passport_number": _check_passport_number,
    "age": _check_age,
    "email": _check_email,
    "enrollment_date": _check_enrollment_date,
    "graduation_year": _check_graduation_year,
    "status": _check_status,
}


def validate_student(student: Student, fields: Iterable[str] = ALL_FIELDS) -> list[FieldViolation]:
    """Check a student's fields against the record constraints.

    Args:
        student: The candidate record (transient or detached)
        fields: Names of the fields to check; defaults to all of them

    Returns:
        One FieldViolation per failing field, in field order. Empty if valid.
    """
    violations = []
    for field in fields:
        message = _CHECKS[field](getattr(student, field))
        if message is not None:
            violations.append(FieldViolation(field, message))
    return violations

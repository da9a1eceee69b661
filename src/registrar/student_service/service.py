"""StudentService - business rules for student records."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from registrar.student_service.exceptions import StudentValidationError
from registrar.student_service.validation import (
    UPDATABLE_FIELDS,
    UPDATE_CHECKED_FIELDS,
    validate_student,
)
from registrar.student_store.exceptions import StudentNotFoundError
from registrar.student_store.models import Student, StudentStatus, utcnow

logger = logging.getLogger(__name__)


class StudentGateway(Protocol):
    """Interface for the persistence gateway the service depends on."""

    def save(self, student: Student) -> Student:
        """Insert when the student has no id, else update it in place."""
        ...

    def find_all(self) -> list[Student]: ...

    def find_by_id(self, student_id: int) -> Student | None: ...

    def exists_by_id(self, student_id: int) -> bool: ...

    def delete_by_id(self, student_id: int) -> None: ...

    def find_by_status(self, status: StudentStatus) -> list[Student]: ...

    def find_by_email(self, email: str) -> Student | None: ...

    def find_by_passport_number(self, passport_number: str) -> Student | None: ...

    def find_by_graduation_year(self, graduation_year: int) -> list[Student]: ...

    def exists_by_email(self, email: str) -> bool: ...

    def exists_by_passport_number(self, passport_number: str) -> bool: ...


class StudentService:
    """Student record operations.

    Holds no state of its own; every call is a straight read-modify-save
    against the gateway, and every failure propagates to the caller.
    """

    def __init__(self, gateway: StudentGateway) -> None:
        self._gateway = gateway

    def list_all(self) -> list[Student]:
        return self._gateway.find_all()

    def list_active(self) -> list[Student]:
        return self._gateway.find_by_status(StudentStatus.ACTIVE)

    def get_by_id(self, student_id: int) -> Student | None:
        """Get a student by ID; None when there is no such student."""
        return self._gateway.find_by_id(student_id)

    def create(self, candidate: Student) -> Student:
        """Create a new student.

        The enrollment date defaults to now, the status is always ACTIVE, and
        any id, audit timestamps or version on the candidate are discarded so
        the save is always an insert.

        Args:
            candidate: The student data to persist

        Returns:
            The created Student with id and audit fields populated

        Raises:
            StudentValidationError: If any field fails validation
            StudentConstraintError: If the passport number or email is taken
        """
        if candidate.enrollment_date is None:
            candidate.enrollment_date = utcnow()
        candidate.student_status = StudentStatus.ACTIVE
        candidate.id = None
        candidate.created_at = None
        candidate.updated_at = None
        candidate.version = None

        violations = validate_student(candidate)
        if violations:
            raise StudentValidationError(violations)

        created = self._gateway.save(candidate)
        logger.info("Created student %s", created.id)
        return created

    def update(self, student_id: int, candidate: Student) -> Student:
        """Update a student's name, age, email and graduation year.

        The candidate must be a valid record apart from its status: passport
        number and enrollment date are checked too, but like status and the
        audit fields they keep their stored values.

        Raises:
            StudentValidationError: If a checked field fails validation
            StudentNotFoundError: If the student doesn't exist
            StudentConstraintError: If the email is taken or the record changed concurrently
        """
        violations = validate_student(candidate, UPDATE_CHECKED_FIELDS)
        if violations:
            raise StudentValidationError(violations)

        existing = self._require(student_id)
        for field in UPDATABLE_FIELDS:
            setattr(existing, field, getattr(candidate, field))

        updated = self._gateway.save(existing)
        logger.info("Updated student %s (version %s)", student_id, updated.version)
        return updated

    def delete(self, student_id: int) -> None:
        """Delete a student.

        Raises:
            StudentNotFoundError: If the student doesn't exist
        """
        if not self._gateway.exists_by_id(student_id):
            raise StudentNotFoundError(student_id)
        self._gateway.delete_by_id(student_id)
        logger.info("Deleted student %s", student_id)

    def suspend(self, student_id: int) -> Student:
        return self._transition(student_id, Student.suspend)

    def activate(self, student_id: int) -> Student:
        return self._transition(student_id, Student.activate)

    def graduate(self, student_id: int) -> Student:
        return self._transition(student_id, Student.graduate)

    def _transition(self, student_id: int, change: Callable[[Student], None]) -> Student:
        # Unconditional: any state may move to the target, including itself
        student = self._require(student_id)
        previous = student.status
        change(student)
        saved = self._gateway.save(student)
        logger.info("Student %s transitioned %s -> %s", student_id, previous, saved.status)
        return saved

    def _require(self, student_id: int) -> Student:
        student = self._gateway.find_by_id(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        return student

"""Student Store - Persistent storage for student records."""

from registrar.student_store.exceptions import (
    DuplicateStudentError,
    StaleStudentError,
    StudentConstraintError,
    StudentNotFoundError,
    StudentStoreError,
)
from registrar.student_store.models import Student, StudentStatus
from registrar.student_store.store import StudentStore

__all__ = [
    "DuplicateStudentError",
    "StaleStudentError",
    "Student",
    "StudentConstraintError",
    "StudentNotFoundError",
    "StudentStatus",
    "StudentStore",
    "StudentStoreError",
]

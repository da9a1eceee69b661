"""Student Service - business rules for creating, updating and transitioning students."""

from registrar.student_service.exceptions import (
    InvalidStudentIdError,
    StudentServiceError,
    StudentValidationError,
)
from registrar.student_service.service import StudentGateway, StudentService
from registrar.student_service.validation import FieldViolation, validate_student

__all__ = [
    "FieldViolation",
    "InvalidStudentIdError",
    "StudentGateway",
    "StudentService",
    "StudentServiceError",
    "StudentValidationError",
    "validate_student",
]

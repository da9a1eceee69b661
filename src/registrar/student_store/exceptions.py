"""Custom exceptions for Student Store."""


class StudentStoreError(Exception):
    """Base exception for Student Store errors."""


class StudentNotFoundError(StudentStoreError):
    """Student with given ID does not exist."""

    def __init__(self, student_id: int) -> None:
        super().__init__(f"Student not found with id: {student_id}")
        self.student_id = student_id


class StudentConstraintError(StudentStoreError):
    """A write was rejected by a storage-level constraint."""


class DuplicateStudentError(StudentConstraintError):
    """Another student already holds this passport number or email."""

    def __init__(self, field: str, value: str | None) -> None:
        super().__init__(f"Student with {field} '{value}' already exists")
        self.field = field
        self.value = value


class StaleStudentError(StudentConstraintError):
    """Student was modified concurrently; the caller's version is out of date."""

    def __init__(self, student_id: int, expected: int | None, actual: int | None) -> None:
        super().__init__(
            f"Student with id {student_id} was modified concurrently "
            f"(expected version {expected}, found {actual})"
        )
        self.student_id = student_id
        self.expected = expected
        self.actual = actual

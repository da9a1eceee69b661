"""StudentStore - persistence gateway for student records."""

from __future__ import annotations

from sqlalchemy import ColumnElement, exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError

from registrar.student_store.database import Database
from registrar.student_store.exceptions import (
    DuplicateStudentError,
    StaleStudentError,
    StudentNotFoundError,
)
from registrar.student_store.models import Student, StudentStatus, utcnow

# Columns copied onto the stored row when an existing student is saved
_DATA_COLUMNS = (
    "name",
    "passport_number",
    "age",
    "email",
    "enrollment_date",
    "graduation_year",
    "status",
)


class StudentStore:
    """Main API for Student Store operations.

    Every call runs in its own session and touches a single record. Returned
    students are detached and keep their loaded attributes.
    """

    def __init__(self, db_path: str = "registrar.db") -> None:
        """Initialize Student Store with SQLite database.

        Creates database and tables if they don't exist.

        Args:
            db_path: Path to SQLite database file
        """
        self._db = Database(db_path)
        self._db.create_tables()

    @property
    def database(self) -> Database:
        return self._db

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()

    # --- Writes ---

    def save(self, student: Student) -> Student:
        """Insert a new student or update an existing one.

        A student without an id is inserted; ``created_at`` and ``updated_at``
        are stamped and ``version`` starts at 0. A student with an id replaces
        the stored row's data columns, provided its ``version`` still matches
        the stored one; the version is then incremented.

        Args:
            student: The student to persist

        Returns:
            The persisted Student with id and audit fields populated

        Raises:
            DuplicateStudentError: If passport number or email collides with another student
            StaleStudentError: If the student was modified since it was read
            StudentNotFoundError: If an existing id no longer has a row
        """
        if student.id is None:
            return self._insert(student)
        return self._update(student)

    def _insert(self, student: Student) -> Student:
        session = self._db.get_session()
        try:
            now = utcnow()
            student.created_at = now
            student.updated_at = now
            session.add(student)
            session.commit()
            session.refresh(student)
            return student
        except IntegrityError as e:
            session.rollback()
            _raise_if_duplicate(e, student)
            raise
        finally:
            session.close()

    def _update(self, student: Student) -> Student:
        session = self._db.get_session()
        try:
            current = session.get(Student, student.id)
            if current is None:
                raise StudentNotFoundError(student.id)
            if student.version != current.version:
                raise StaleStudentError(student.id, student.version, current.version)

            for column in _DATA_COLUMNS:
                setattr(current, column, getattr(student, column))
            current.updated_at = utcnow()

            session.commit()
            session.refresh(current)
            return current
        except IntegrityError as e:
            session.rollback()
            _raise_if_duplicate(e, student)
            raise
        except StaleDataError as e:
            # Lost the race against a concurrent writer between read and flush
            session.rollback()
            raise StaleStudentError(student.id, student.version, None) from e
        finally:
            session.close()

    def delete_by_id(self, student_id: int) -> None:
        """Delete a student.

        Args:
            student_id: The student's unique ID

        Raises:
            StudentNotFoundError: If student doesn't exist
        """
        session = self._db.get_session()
        try:
            student = session.get(Student, student_id)
            if student is None:
                raise StudentNotFoundError(student_id)

            session.delete(student)
            session.commit()
        finally:
            session.close()

    # --- Reads ---

    def find_all(self) -> list[Student]:
        """List all students in insertion order."""
        return self._find_where()

    def find_by_id(self, student_id: int) -> Student | None:
        """Get student by ID, or None if there is no such student."""
        session = self._db.get_session()
        try:
            return session.get(Student, student_id)
        finally:
            session.close()

    def exists_by_id(self, student_id: int) -> bool:
        return self._exists_where(Student.id == student_id)

    def find_by_status(self, status: StudentStatus) -> list[Student]:
        """List students with the given status in insertion order."""
        return self._find_where(Student.status == StudentStatus(status).value)

    def find_active(self) -> list[Student]:
        return self.find_by_status(StudentStatus.ACTIVE)

    def find_by_email(self, email: str) -> Student | None:
        return self._find_one_where(Student.email == email)

    def find_by_passport_number(self, passport_number: str) -> Student | None:
        return self._find_one_where(Student.passport_number == passport_number)

    def find_by_graduation_year(self, graduation_year: int) -> list[Student]:
        """List students graduating in the given year in insertion order."""
        return self._find_where(Student.graduation_year == graduation_year)

    def exists_by_email(self, email: str) -> bool:
        return self._exists_where(Student.email == email)

    def exists_by_passport_number(self, passport_number: str) -> bool:
        return self._exists_where(Student.passport_number == passport_number)

    # --- Query helpers ---

    def _find_where(self, *criteria: ColumnElement[bool]) -> list[Student]:
        session = self._db.get_session()
        try:
            stmt = select(Student).where(*criteria).order_by(Student.id)
            result = session.execute(stmt)
            return list(result.scalars().all())
        finally:
            session.close()

    def _find_one_where(self, *criteria: ColumnElement[bool]) -> Student | None:
        session = self._db.get_session()
        try:
            stmt = select(Student).where(*criteria)
            return session.execute(stmt).scalar_one_or_none()
        finally:
            session.close()

    def _exists_where(self, *criteria: ColumnElement[bool]) -> bool:
        session = self._db.get_session()
        try:
            return bool(session.execute(select(exists().where(*criteria))).scalar())
        finally:
            session.close()


def _raise_if_duplicate(error: IntegrityError, student: Student) -> None:
    """Translate a UNIQUE violation into DuplicateStudentError, naming the column."""
    message = str(error.orig)
    if "students.email" in message:
        raise DuplicateStudentError("email", student.email) from error
    if "students.passport_number" in message:
        raise DuplicateStudentError("passport number", student.passport_number) from error

"""SQLAlchemy models for Student Store."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from sqlalchemy import DateTime, Index, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class StudentStatus(StrEnum):
    """Student lifecycle status."""

    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    GRADUATED = "GRADUATED"
    WITHDRAWN = "WITHDRAWN"

    @property
    def display_name(self) -> str:
        """Human-readable status label."""
        return self.value.capitalize()


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (SQLite stores no offset)."""
    return datetime.now(UTC).replace(tzinfo=None)


def _next_version(current: int | None) -> int:
    return 0 if current is None else current + 1


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Student(Base):
    """Student model - one row per student record."""

    __tablename__ = "students"
    __table_args__ = (
        Index("uq_students_passport_number", "passport_number", unique=True),
        Index("uq_students_email", "email", unique=True),
        Index("ix_students_status", "status"),
        Index("ix_students_graduation_year", "graduation_year"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    passport_number: Mapped[str] = mapped_column(String(8), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    enrollment_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    graduation_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    # Every UPDATE is issued as "... WHERE version = :expected" and bumps the counter
    __mapper_args__ = {
        "version_id_col": version,
        "version_id_generator": _next_version,
    }

    def __init__(
        self,
        name: str | None = None,
        passport_number: str | None = None,
        age: int | None = None,
        email: str | None = None,
        enrollment_date: datetime | None = None,
        graduation_year: int | None = None,
        status: StudentStatus | str | None = StudentStatus.ACTIVE,
        id: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.id = id
        self.name = name
        self.passport_number = passport_number
        self.age = age
        self.email = email
        self.enrollment_date = enrollment_date
        self.graduation_year = graduation_year
        self.status = StudentStatus(status).value if status is not None else None

    @property
    def student_status(self) -> StudentStatus:
        """Get status as StudentStatus enum."""
        return StudentStatus(self.status)

    @student_status.setter
    def student_status(self, value: StudentStatus) -> None:
        """Set status from StudentStatus enum."""
        self.status = value.value

    @property
    def is_active(self) -> bool:
        return self.status == StudentStatus.ACTIVE

    @property
    def is_suspended(self) -> bool:
        return self.status == StudentStatus.SUSPENDED

    @property
    def is_graduated(self) -> bool:
        return self.status == StudentStatus.GRADUATED

    @property
    def is_withdrawn(self) -> bool:
        return self.status == StudentStatus.WITHDRAWN

    def suspend(self) -> None:
        self.student_status = StudentStatus.SUSPENDED

    def activate(self) -> None:
        self.student_status = StudentStatus.ACTIVE

    def graduate(self) -> None:
        self.student_status = StudentStatus.GRADUATED

    def __repr__(self) -> str:
        return (
            f"<Student(id={self.id!r}, name={self.name!r}, "
            f"passport_number={self.passport_number!r}, status={self.status!r})>"
        )

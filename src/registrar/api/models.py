"""Pydantic models for REST API."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from registrar.student_store.models import Student, StudentStatus


class CamelModel(BaseModel):
    """Base model with camelCase wire names and snake_case attributes.

    Request bodies are accepted in either form; responses are emitted in
    camelCase (FastAPI serializes response models by alias).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# Student models


class StudentRequest(CamelModel):
    """Request body for creating or updating a student.

    Every field is optional at the wire level so that missing values are
    reported by the record validator alongside all other field problems.
    System-managed fields (id, createdAt, updatedAt, version) are not part of
    the model and are dropped if a client sends them.
    """

    name: str | None = None
    passport_number: str | None = None
    age: int | None = None
    email: str | None = None
    enrollment_date: datetime | None = None
    graduation_year: int | None = None
    status: StudentStatus | None = None

    @field_validator("email")
    @classmethod
    def blank_email_is_absent(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    @field_validator("enrollment_date")
    @classmethod
    def enrollment_date_as_naive_utc(cls, value: datetime | None) -> datetime | None:
        # Stored timestamps are naive UTC; offset-free input is taken as UTC already
        if value is not None and value.tzinfo is not None:
            return value.astimezone(UTC).replace(tzinfo=None)
        return value

    def to_student(self) -> Student:
        """Build a transient Student carrying this request's values."""
        return Student(
            name=self.name,
            passport_number=self.passport_number,
            age=self.age,
            email=self.email,
            enrollment_date=self.enrollment_date,
            graduation_year=self.graduation_year,
            status=self.status,
        )


class StudentResponse(CamelModel):
    """Response model for a student."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    passport_number: str
    age: int
    email: str | None
    enrollment_date: datetime
    graduation_year: int | None
    status: StudentStatus
    created_at: datetime
    updated_at: datetime
    version: int


def student_to_response(student: Any) -> StudentResponse:
    """Convert a Student model to StudentResponse."""
    return StudentResponse.model_validate(student)


# Error model


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    timestamp: datetime
    status: int
    error: str
    message: str
    path: str
    details: list[str] | None = None


# Health/info models


class HealthResponse(BaseModel):
    """Response model for the health check."""

    status: str
    timestamp: datetime
    version: str
    service: str


class InfoResponse(BaseModel):
    """Static service metadata."""

    name: str
    description: str
    version: str
    docs: str
    openapi: str

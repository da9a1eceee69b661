"""Student CRUD and status endpoints."""

from typing import Annotated

from fastapi import APIRouter, Path, Request, Response, status

from registrar.api.dependencies import StudentServiceDep
from registrar.api.models import StudentRequest, StudentResponse, student_to_response
from registrar.student_service import InvalidStudentIdError
from registrar.student_store import StudentNotFoundError

router = APIRouter(prefix="/students", tags=["students"])

# Ids are SQLite INTEGERs; values outside 64 bits are rejected as malformed input
MAX_STUDENT_ID = 2**63 - 1

StudentId = Annotated[int, Path(ge=-MAX_STUDENT_ID - 1, le=MAX_STUDENT_ID)]


def _require_positive_id(student_id: int) -> None:
    if student_id <= 0:
        raise InvalidStudentIdError


@router.get("", response_model=list[StudentResponse])
def list_students(service: StudentServiceDep) -> list[StudentResponse]:
    """List all students."""
    return [student_to_response(s) for s in service.list_all()]


# Declared before /{student_id} so "active" is not parsed as an id
@router.get("/active", response_model=list[StudentResponse])
def list_active_students(service: StudentServiceDep) -> list[StudentResponse]:
    """List students with ACTIVE status."""
    return [student_to_response(s) for s in service.list_active()]


@router.get("/{student_id}", response_model=StudentResponse)
def get_student(student_id: StudentId, service: StudentServiceDep) -> StudentResponse:
    """Get a student by ID."""
    _require_positive_id(student_id)
    student = service.get_by_id(student_id)
    if student is None:
        raise StudentNotFoundError(student_id)
    return student_to_response(student)


@router.post(
    "",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_student(
    payload: StudentRequest,
    request: Request,
    response: Response,
    service: StudentServiceDep,
) -> StudentResponse:
    """Create a new student. Status is always ACTIVE; enrollment date defaults to now."""
    created = service.create(payload.to_student())
    response.headers["Location"] = str(request.url_for("get_student", student_id=created.id))
    return student_to_response(created)


@router.put("/{student_id}", response_model=StudentResponse)
def update_student(
    student_id: StudentId, payload: StudentRequest, service: StudentServiceDep
) -> StudentResponse:
    """Update a student. Passport number and enrollment date cannot change."""
    _require_positive_id(student_id)
    updated = service.update(student_id, payload.to_student())
    return student_to_response(updated)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(student_id: StudentId, service: StudentServiceDep) -> None:
    """Permanently delete a student."""
    _require_positive_id(student_id)
    service.delete(student_id)


@router.put("/{student_id}/suspend", response_model=StudentResponse)
def suspend_student(student_id: StudentId, service: StudentServiceDep) -> StudentResponse:
    """Set a student's status to SUSPENDED."""
    return student_to_response(service.suspend(student_id))


@router.put("/{student_id}/activate", response_model=StudentResponse)
def activate_student(student_id: StudentId, service: StudentServiceDep) -> StudentResponse:
    """Set a student's status to ACTIVE."""
    return student_to_response(service.activate(student_id))


@router.put("/{student_id}/graduate", response_model=StudentResponse)
def graduate_student(student_id: StudentId, service: StudentServiceDep) -> StudentResponse:
    """Set a student's status to GRADUATED."""
    return student_to_response(service.graduate(student_id))

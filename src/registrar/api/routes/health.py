"""Health and info endpoints."""

from fastapi import APIRouter

from registrar.api.models import HealthResponse, InfoResponse
from registrar.student_store.models import utcnow

SERVICE_NAME = "Student Management API"
SERVICE_DESCRIPTION = "CRUD API for managing student records"
SERVICE_VERSION = "1.0.0"

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Report that the API is up."""
    return HealthResponse(
        status="UP",
        timestamp=utcnow(),
        version=SERVICE_VERSION,
        service=SERVICE_NAME,
    )


@router.get("/info", response_model=InfoResponse)
def info() -> InfoResponse:
    """Describe the API and where its documentation lives."""
    return InfoResponse(
        name=SERVICE_NAME,
        description=SERVICE_DESCRIPTION,
        version=SERVICE_VERSION,
        docs="/docs",
        openapi="/openapi.json",
    )

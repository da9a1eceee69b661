"""REST API for Registrar."""

from registrar.api.app import app, create_app
from registrar.api.models import (
    ErrorResponse,
    StudentRequest,
    StudentResponse,
)

__all__ = [
    "ErrorResponse",
    "StudentRequest",
    "StudentResponse",
    "app",
    "create_app",
]

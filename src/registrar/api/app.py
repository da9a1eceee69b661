"""FastAPI application setup."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from registrar.api.dependencies import close_student_store, init_student_store
from registrar.api.models import ErrorResponse
from registrar.api.routes import health, students
from registrar.config import Settings
from registrar.logging import get_logger
from registrar.student_service import InvalidStudentIdError, StudentValidationError
from registrar.student_store import StudentConstraintError, StudentNotFoundError
from registrar.student_store.models import utcnow

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Sequence

logger = get_logger("api")


def error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    details: list[str] | None = None,
) -> JSONResponse:
    """Build the standard error body for a failed request."""
    body = ErrorResponse(
        timestamp=utcnow(),
        status=status_code,
        error=error,
        message=message,
        path=request.url.path,
        details=details,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
    )


def _format_request_errors(errors: Sequence[Any]) -> list[str]:
    """Render FastAPI validation errors as "<field>: <message>"."""
    details = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        # Drop the "body"/"path"/"query" prefix when there is a field after it
        field = ".".join(loc[1:]) if len(loc) > 1 else ".".join(loc)
        details.append(f"{field}: {err.get('msg', 'Invalid value')}")
    return details


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    init_student_store(app.state.db_path)
    logger.info("Student store opened at %s", app.state.db_path)
    yield
    close_student_store()


def create_app(db_path: str | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        db_path: SQLite database path. Defaults to REGISTRAR_DB_PATH.
    """
    app = FastAPI(
        title=health.SERVICE_NAME,
        description=health.SERVICE_DESCRIPTION,
        version=health.SERVICE_VERSION,
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.db_path = db_path if db_path is not None else Settings.from_env().db_path

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(StudentValidationError)
    async def student_validation_handler(
        request: Request, exc: StudentValidationError
    ) -> JSONResponse:
        return error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            "Validation Failed",
            "Invalid input data",
            details=exc.details,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            "Validation Failed",
            "Invalid input data",
            details=_format_request_errors(exc.errors()),
        )

    @app.exception_handler(InvalidStudentIdError)
    async def invalid_id_handler(request: Request, exc: InvalidStudentIdError) -> JSONResponse:
        return error_response(request, status.HTTP_400_BAD_REQUEST, "Bad Request", str(exc))

    @app.exception_handler(StudentNotFoundError)
    async def student_not_found_handler(
        request: Request, exc: StudentNotFoundError
    ) -> JSONResponse:
        return error_response(request, status.HTTP_404_NOT_FOUND, "Not Found", str(exc))

    @app.exception_handler(StudentConstraintError)
    async def student_constraint_handler(
        request: Request, exc: StudentConstraintError
    ) -> JSONResponse:
        logger.warning("Constraint violation on %s: %s", request.url.path, exc)
        return error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            str(exc),
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error on %s %s",
            request.method,
            request.url.path,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            "An unexpected error occurred",
        )

    # Include routers
    app.include_router(students.router, prefix="/api/v1")
    app.include_router(health.router, prefix="/api/v1")

    return app


# Default app instance
app = create_app()

"""Shared pytest fixtures and configuration."""

from datetime import datetime
from typing import Any

import pytest


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def student_data() -> dict[str, Any]:
    """Keyword arguments for a valid Student."""
    return {
        "name": "John Doe",
        "passport_number": "A1234567",
        "age": 25,
        "email": "john.doe@example.com",
        "enrollment_date": datetime(2023, 9, 1, 9, 0, 0),
        "graduation_year": 2025,
    }


@pytest.fixture
def student_payload() -> dict[str, Any]:
    """A valid create/update request body in wire (camelCase) form."""
    return {
        "name": "John Doe",
        "passportNumber": "A1234567",
        "age": 25,
        "email": "john.doe@example.com",
        "enrollmentDate": "2023-09-01T09:00:00",
        "graduationYear": 2025,
    }

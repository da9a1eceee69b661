"""Integration tests for the student API against a file-backed database."""

import tempfile
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from registrar.api.app import create_app


@pytest.fixture
def temp_db_path() -> str:
    """Create a temporary database path."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        return f.name


@pytest.fixture
def client(temp_db_path: str):
    """Create a test client with temporary database."""
    app = create_app(temp_db_path)
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
    # Cleanup
    Path(temp_db_path).unlink(missing_ok=True)
    Path(f"{temp_db_path}-wal").unlink(missing_ok=True)
    Path(f"{temp_db_path}-shm").unlink(missing_ok=True)


@pytest.mark.integration
class TestStudentCrudFullFlow:
    """Integration test for full CRUD flow."""

    def test_student_crud_full_flow(self, client: TestClient) -> None:
        """Create -> Read -> Update -> List -> Delete flow."""
        # 1. Create
        create_response = client.post(
            "/api/v1/students",
            json={
                "name": "Integration Test Student",
                "passportNumber": "I1234567",
                "age": 22,
                "email": "integration@example.com",
                "graduationYear": 2025,
            },
        )
        assert create_response.status_code == 201
        created = create_response.json()
        student_id = created["id"]
        assert created["status"] == "ACTIVE"
        assert create_response.headers["location"].endswith(f"/api/v1/students/{student_id}")

        # 2. Read
        get_response = client.get(f"/api/v1/students/{student_id}")
        assert get_response.status_code == 200
        assert get_response.json()["passportNumber"] == "I1234567"
        assert get_response.json()["email"] == "integration@example.com"

        # 3. Update
        update_response = client.put(
            f"/api/v1/students/{student_id}",
            json={
                "name": "Updated Integration Student",
                "passportNumber": "I1234567",
                "age": 24,
                "email": "updated.integration@example.com",
                "enrollmentDate": created["enrollmentDate"],
                "graduationYear": 2026,
            },
        )
        assert update_response.status_code == 200
        assert update_response.json()["name"] == "Updated Integration Student"
        assert update_response.json()["graduationYear"] == 2026

        # Verify update persisted
        get_response2 = client.get(f"/api/v1/students/{student_id}")
        assert get_response2.json()["name"] == "Updated Integration Student"
        assert get_response2.json()["age"] == 24

        # 4. List
        list_response = client.get("/api/v1/students")
        assert [s["id"] for s in list_response.json()] == [student_id]

        # 5. Delete
        delete_response = client.delete(f"/api/v1/students/{student_id}")
        assert delete_response.status_code == 204

        # Verify deleted
        get_response3 = client.get(f"/api/v1/students/{student_id}")
        assert get_response3.status_code == 404


@pytest.mark.integration
class TestStatusScenario:
    """Create, suspend and re-read a student."""

    def test_suspend_is_persisted(
        self, client: TestClient, student_payload: dict[str, Any]
    ) -> None:
        created = client.post("/api/v1/students", json=student_payload)
        assert created.status_code == 201
        assert created.json()["status"] == "ACTIVE"
        student_id = created.json()["id"]

        suspended = client.put(f"/api/v1/students/{student_id}/suspend")
        assert suspended.status_code == 200
        assert suspended.json()["status"] == "SUSPENDED"

        fetched = client.get(f"/api/v1/students/{student_id}")
        assert fetched.json()["status"] == "SUSPENDED"

        active = client.get("/api/v1/students/active")
        assert active.json() == []

    def test_graduate_then_suspend_then_graduate(
        self, client: TestClient, student_payload: dict[str, Any]
    ) -> None:
        """Status changes are unconditional in every direction."""
        student_id = client.post("/api/v1/students", json=student_payload).json()["id"]

        for action, expected in (
            ("graduate", "GRADUATED"),
            ("suspend", "SUSPENDED"),
            ("graduate", "GRADUATED"),
            ("activate", "ACTIVE"),
        ):
            response = client.put(f"/api/v1/students/{student_id}/{action}")
            assert response.status_code == 200
            assert response.json()["status"] == expected


@pytest.mark.integration
class TestUniqueness:
    """Uniqueness is enforced at the storage boundary."""

    def test_duplicate_passport_fails(
        self, client: TestClient, student_payload: dict[str, Any]
    ) -> None:
        assert client.post("/api/v1/students", json=student_payload).status_code == 201

        response = client.post(
            "/api/v1/students",
            json={**student_payload, "name": "Another", "email": "another@example.com"},
        )

        assert response.status_code == 500
        assert len(client.get("/api/v1/students").json()) == 1

    def test_update_into_existing_email_fails(
        self, client: TestClient, student_payload: dict[str, Any]
    ) -> None:
        client.post("/api/v1/students", json=student_payload)
        second = client.post(
            "/api/v1/students",
            json={**student_payload, "passportNumber": "B7654321", "email": "jane@example.com"},
        ).json()

        response = client.put(
            f"/api/v1/students/{second['id']}",
            json={**student_payload, "email": "john.doe@example.com"},
        )

        assert response.status_code == 500
        assert client.get(f"/api/v1/students/{second['id']}").json()["email"] == (
            "jane@example.com"
        )


@pytest.mark.integration
class TestErrorBodies:
    """Error responses carry the standard body."""

    def test_not_found_message_contains_id(self, client: TestClient) -> None:
        response = client.get("/api/v1/students/424242")

        assert response.status_code == 404
        assert "424242" in response.json()["message"]

    def test_negative_id(self, client: TestClient) -> None:
        response = client.get("/api/v1/students/-5")

        assert response.status_code == 400
        assert response.json()["message"] == "Student ID must be a positive number"

    def test_validation_failure_lists_every_field(self, client: TestClient) -> None:
        response = client.post("/api/v1/students", json={})

        assert response.status_code == 400
        assert response.json()["details"] == [
            "name: Name is required",
            "passportNumber: Passport number is required",
            "age: Age is required",
        ]

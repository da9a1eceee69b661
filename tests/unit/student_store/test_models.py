"""Unit tests for Student Store models."""

import pytest

from registrar.student_store import Student, StudentStatus


@pytest.mark.unit
class TestStudentStatus:
    """Tests for the StudentStatus enum."""

    def test_exactly_four_states(self) -> None:
        """Only ACTIVE, SUSPENDED, GRADUATED and WITHDRAWN exist."""
        assert [s.value for s in StudentStatus] == [
            "ACTIVE",
            "SUSPENDED",
            "GRADUATED",
            "WITHDRAWN",
        ]

    def test_display_name(self) -> None:
        """Display names are capitalized labels."""
        assert StudentStatus.ACTIVE.display_name == "Active"
        assert StudentStatus.WITHDRAWN.display_name == "Withdrawn"

    def test_unknown_token_rejected(self) -> None:
        """Any other value is not representable."""
        with pytest.raises(ValueError):
            StudentStatus("EXPELLED")


@pytest.mark.unit
class TestStudentModel:
    """Tests for the Student model."""

    def test_defaults(self) -> None:
        """New students are ACTIVE and have no id or audit fields."""
        student = Student(name="Jane", passport_number="B7654321", age=20)

        assert student.id is None
        assert student.status == "ACTIVE"
        assert student.student_status is StudentStatus.ACTIVE
        assert student.email is None
        assert student.created_at is None
        assert student.version is None

    def test_status_accepts_enum_or_string(self) -> None:
        """Status may be given as enum or string value."""
        assert Student(status=StudentStatus.GRADUATED).status == "GRADUATED"
        assert Student(status="SUSPENDED").status == "SUSPENDED"

    def test_invalid_status_rejected(self) -> None:
        """Constructing with an unknown status fails."""
        with pytest.raises(ValueError):
            Student(status="ON_LEAVE")

    def test_status_mutators(self) -> None:
        """suspend/activate/graduate overwrite status unconditionally."""
        student = Student(status=StudentStatus.WITHDRAWN)

        student.graduate()
        assert student.is_graduated
        student.suspend()
        assert student.is_suspended
        student.activate()
        assert student.is_active
        assert not student.is_withdrawn

    def test_repr(self) -> None:
        """repr includes id, name and passport number."""
        student = Student(name="Jane", passport_number="B7654321", age=20)
        assert "B7654321" in repr(student)
        assert "Jane" in repr(student)

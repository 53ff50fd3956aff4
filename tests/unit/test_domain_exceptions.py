"""Tests for domain and storage exceptions (error_code, message, details)."""

from app.domain.exceptions import (
    AuthenticationException,
    ResourceNotFoundException,
    TaskTrackerException,
    ValidationException,
)
from app.infrastructure.exceptions import StorageException


def test_base_exception_default_error_code() -> None:
    """Base exception uses class name as error_code when not provided."""
    exc = TaskTrackerException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "TaskTrackerException"
    assert exc.details == {}


def test_base_exception_to_dict() -> None:
    exc = TaskTrackerException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception_single_field() -> None:
    exc = ValidationException("Invalid format", field="notes")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"errors": [{"field": "notes", "message": "Invalid format"}]}
    assert exc.fields == ["notes"]


def test_validation_exception_keeps_every_error() -> None:
    errors = [
        {"field": "items", "message": "required"},
        {"field": "priority", "message": "bad"},
    ]
    exc = ValidationException("Invalid task fields", errors=errors)
    assert exc.fields == ["items", "priority"]


def test_validation_exception_without_field() -> None:
    exc = ValidationException("Invalid")
    assert exc.details == {}
    assert exc.fields == []


def test_authentication_exception() -> None:
    exc = AuthenticationException()
    assert exc.message == "Authentication failed"
    assert exc.error_code == "AUTHENTICATION_ERROR"


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("task", "t-123")
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "task", "resource_id": "t-123"}
    assert "t-123" in exc.message


def test_storage_exception() -> None:
    exc = StorageException("find_tasks", "TimeoutError")
    assert isinstance(exc, TaskTrackerException)
    assert exc.error_code == "STORAGE_ERROR"
    assert exc.details == {"operation": "find_tasks", "reason": "TimeoutError"}

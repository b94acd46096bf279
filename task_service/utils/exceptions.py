"""
Standardized Exception Hierarchy for the Task Service

This module provides the exception hierarchy shared by the task store, the
configuration layer, and the HTTP API.

Exception Categories:
- Configuration Errors: Invalid server settings or environment
- Validation Errors: Mistyped or malformed task fields
- Lookup Errors: Unknown task identifiers

Usage:
    from task_service.utils.exceptions import (
        TaskServiceError,
        InvalidInputError,
        TaskNotFoundError
    )

    if not isinstance(title, str):
        raise InvalidInputError("'title' must be a string", fields=["title"])

    task = store.get(task_id)   # raises TaskNotFoundError

Anything raised that is NOT a TaskServiceError is treated as an internal
error by the API layer and reported as HTTP 500.
"""

from typing import Optional, Any, Dict, List


# ============================================================================
# Base Exception
# ============================================================================

class TaskServiceError(Exception):
    """
    Base exception for all task service errors.

    All custom exceptions inherit from this class so the API layer can map
    them to structured JSON responses in one place.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize base exception.

        Args:
            message: Human-readable error message
            error_code: Optional error code for categorization
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ============================================================================
# Configuration Errors
# ============================================================================

class ConfigurationError(TaskServiceError):
    """Raised when a server setting is missing or out of range."""

    def __init__(
        self,
        setting_name: str,
        message: str,
        expected_value: Optional[Any] = None,
        actual_value: Optional[Any] = None
    ):
        details = {"setting_name": setting_name}
        if expected_value is not None:
            details["expected_value"] = str(expected_value)
        if actual_value is not None:
            details["actual_value"] = str(actual_value)

        super().__init__(
            message=f"Configuration error for '{setting_name}': {message}",
            error_code="CONFIG_ERROR",
            details=details
        )
        self.setting_name = setting_name


# ============================================================================
# Validation Errors
# ============================================================================

class ValidationError(TaskServiceError):
    """Base class for validation errors."""
    pass


class InvalidInputError(ValidationError):
    """Raised when task fields have the wrong type or the body has the wrong shape."""

    def __init__(
        self,
        message: str,
        fields: Optional[List[str]] = None
    ):
        super().__init__(
            message=message,
            error_code="INVALID_INPUT",
            details={"fields": fields} if fields else None
        )
        self.fields = fields or []


# ============================================================================
# Lookup Errors
# ============================================================================

class TaskNotFoundError(TaskServiceError):
    """Raised when no task with the given id exists in the store."""

    def __init__(self, task_id: str):
        super().__init__(
            message="Task not found",
            error_code="TASK_NOT_FOUND",
            details={"task_id": task_id}
        )
        self.task_id = task_id


__all__ = [
    "TaskServiceError",
    "ConfigurationError",
    "ValidationError",
    "InvalidInputError",
    "TaskNotFoundError",
]

"""
Utilities module - Logging, validation and the exception hierarchy
"""

from .logger import get_logger, ServiceLogger
from .validation import (
    TaskFields,
    INVALID_TASK_MESSAGE,
    validate_task_fields,
    extract_task_fields,
)

# Exception hierarchy
from .exceptions import (
    TaskServiceError,
    ConfigurationError,
    ValidationError,
    InvalidInputError,
    TaskNotFoundError,
)

__all__ = [
    'get_logger',
    'ServiceLogger',
    'TaskFields',
    'INVALID_TASK_MESSAGE',
    'validate_task_fields',
    'extract_task_fields',
    'TaskServiceError',
    'ConfigurationError',
    'ValidationError',
    'InvalidInputError',
    'TaskNotFoundError',
]

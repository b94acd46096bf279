"""
Validation Utilities for Task Fields

Strict type checks for the fields a client may set on a task. The checks are
type-only: an empty title is accepted, but ``1`` is not a boolean and ``None``
is not a string.
"""

from typing import Any, List, Tuple

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError

from task_service.utils.exceptions import InvalidInputError


INVALID_TASK_MESSAGE = "Invalid input. 'title' must be a string and 'completed' be a boolean."


class TaskFields(BaseModel):
    """Client-settable task fields."""

    model_config = ConfigDict(extra="ignore")

    title: StrictStr
    completed: StrictBool

    @field_validator("title")
    @classmethod
    def title_must_encode_as_utf8(cls, title: str) -> str:
        # lone surrogates decode from JSON escapes but cannot be written back out
        try:
            title.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValueError("title is not valid UTF-8 text") from e
        return title


def validate_task_fields(title: Any, completed: Any) -> TaskFields:
    """
    Validate raw ``title`` / ``completed`` values.

    Args:
        title: Candidate title, must be a str
        completed: Candidate completion flag, must be a bool

    Returns:
        TaskFields with the validated values

    Raises:
        InvalidInputError: if either value has the wrong type
    """
    try:
        return TaskFields(title=title, completed=completed)
    except PydanticValidationError as e:
        fields: List[str] = []
        for error in e.errors():
            loc = error.get("loc") or ()
            if loc and str(loc[0]) not in fields:
                fields.append(str(loc[0]))
        raise InvalidInputError(INVALID_TASK_MESSAGE, fields=fields) from e


def extract_task_fields(body: Any) -> Tuple[Any, Any]:
    """
    Pull ``title`` and ``completed`` out of a decoded JSON body.

    Anything that is not a JSON object yields ``(None, None)`` so the
    subsequent type check rejects it.
    """
    if not isinstance(body, dict):
        return None, None
    return body.get("title"), body.get("completed")

"""
Domain error taxonomy for the write pipeline.

Every failure aborts the whole write. Errors only classify what went wrong
(code, field, offending value type); rendering a message for end users is
the HTTP layer's job.

Three families:
  - ValidationError: deterministic, caused by the input record
  - DuplicateKeyError: surfaced by the storage unique constraint
  - DependencyUnavailableError: the storage gateway could not answer
"""

from enum import Enum
from typing import Any, Optional


class ErrorCode(Enum):
    """Domain error codes."""

    MISSING_FIELD = "MISSING_FIELD"
    INVALID_ARRAY_FIELD = "INVALID_ARRAY_FIELD"
    INVALID_DATE = "INVALID_DATE"
    INVALID_TIME = "INVALID_TIME"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_SLUG = "INVALID_SLUG"
    DANGLING_REFERENCE = "DANGLING_REFERENCE"
    DUPLICATE_KEY = "DUPLICATE_KEY"
    DEPENDENCY_UNAVAILABLE = "DEPENDENCY_UNAVAILABLE"
    NOT_FOUND = "NOT_FOUND"


_UNSET: Any = object()


class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        field: Optional[str] = None,
        value: Any = _UNSET,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.field = field
        self.value_type = None if value is _UNSET else type(value).__name__

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict:
        return {
            "code": self.code.value,
            "field": self.field,
            "message": self.message,
        }


class ValidationError(DomainError):
    """A record failed a field-level or cross-record invariant."""


class MissingFieldError(ValidationError):
    def __init__(
        self,
        field: str,
        value: Any = _UNSET,
        requirement: str = "is required and must be a non-empty string",
    ) -> None:
        super().__init__(
            code=ErrorCode.MISSING_FIELD,
            message=f'Field "{field}" {requirement}.',
            field=field,
            value=value,
        )


class InvalidArrayFieldError(ValidationError):
    def __init__(self, field: str, value: Any = _UNSET) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ARRAY_FIELD,
            message=f'Field "{field}" is required and must be a non-empty list of strings.',
            field=field,
            value=value,
        )


class InvalidDateError(ValidationError):
    def __init__(self, value: Any = _UNSET) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE,
            message='Invalid "date" value. Expected a parsable date string.',
            field="date",
            value=value,
        )


class InvalidTimeError(ValidationError):
    def __init__(self, value: Any = _UNSET, reason: str = "Expected format HH:MM in 24-hour time.") -> None:
        super().__init__(
            code=ErrorCode.INVALID_TIME,
            message=f'Invalid "time" value. {reason}',
            field="time",
            value=value,
        )


class InvalidEmailError(ValidationError):
    def __init__(self, value: Any = _UNSET) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EMAIL,
            message='Field "email" must be a valid email address.',
            field="email",
            value=value,
        )


class InvalidSlugError(ValidationError):
    """Raised when a title has no alphanumeric content to build a slug from."""

    def __init__(self, value: Any = _UNSET) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SLUG,
            message='Field "title" must contain at least one letter or digit.',
            field="title",
            value=value,
        )


class DanglingReferenceError(ValidationError):
    def __init__(self, field: str, value: Any = _UNSET) -> None:
        super().__init__(
            code=ErrorCode.DANGLING_REFERENCE,
            message="Booking references an event that does not exist.",
            field=field,
            value=value,
        )


class DuplicateKeyError(DomainError):
    """Raised when a commit would duplicate a value in a unique field."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_KEY,
            message=f'A record with this "{field}" already exists.',
            field=field,
        )


class DependencyUnavailableError(DomainError):
    """Raised when the storage gateway cannot complete a call."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.DEPENDENCY_UNAVAILABLE,
            message="Storage is temporarily unavailable. Please try again.",
        )
        self.operation = operation


class RecordNotFoundError(DomainError):
    def __init__(self, record: str, record_id: Any) -> None:
        super().__init__(
            code=ErrorCode.NOT_FOUND,
            message=f"{record} not found",
        )
        self.record_id = record_id

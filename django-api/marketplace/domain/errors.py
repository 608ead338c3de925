"""Domain error codes for the marketplace module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    MISSING_DATE = "MISSING_DATE"
    DATE_CONFLICT = "DATE_CONFLICT"
    INVALID_TRANSITION = "INVALID_TRANSITION"
    UNSUPPORTED_ACTION = "UNSUPPORTED_ACTION"
    ALREADY_DECIDED = "ALREADY_DECIDED"
    INVALID_FIELD = "INVALID_FIELD"
    RECORD_NOT_FOUND = "RECORD_NOT_FOUND"
    COLLABORATOR_ERROR = "COLLABORATOR_ERROR"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class MissingDateError(DomainError):
    """Raised when a booking is submitted without a date."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_DATE,
            message="Please select a booking date",
        )


class DateConflictError(DomainError):
    """Raised when the venue already holds a live booking on the date."""

    def __init__(self, date: str) -> None:
        super().__init__(
            code=ErrorCode.DATE_CONFLICT,
            message="This date is already booked",
        )
        self.date = date


class InvalidTransitionError(DomainError):
    """Raised when an action is known for the kind but not from this status."""

    def __init__(self, current: str, action: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TRANSITION,
            message=f"Cannot {action} a record that is {current}",
        )


class UnsupportedActionError(DomainError):
    """Raised when an action does not apply to the entity kind at all."""

    def __init__(self, kind: str, action: str) -> None:
        super().__init__(
            code=ErrorCode.UNSUPPORTED_ACTION,
            message=f"Action {action} is not supported for {kind}",
        )


class AlreadyDecidedError(DomainError):
    """Raised in strict mode when an approved/rejected record is decided again."""

    def __init__(self, current: str) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_DECIDED,
            message=f"Record has already been {current}",
        )


class InvalidFieldError(DomainError):
    """Raised when a submitted field value breaks a domain invariant."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_FIELD,
            message=f"Invalid {field}: {reason}",
        )
        self.field = field


class RecordNotFoundError(DomainError):
    """Raised when a record is not found in its collection."""

    def __init__(self, collection: str, record_id: str) -> None:
        super().__init__(
            code=ErrorCode.RECORD_NOT_FOUND,
            message="Record not found",
        )
        self.collection = collection
        self.record_id = record_id


class CollaboratorError(DomainError):
    """Raised when the repository or blob store fails.

    The underlying exception is kept as ``__cause__``.
    """

    def __init__(self, collaborator: str, operation: str) -> None:
        super().__init__(
            code=ErrorCode.COLLABORATOR_ERROR,
            message=f"{collaborator} failed during {operation}",
        )
        self.collaborator = collaborator
        self.operation = operation

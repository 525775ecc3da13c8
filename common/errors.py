"""Error codes shared by every LUME app.

Clients branch on `ErrorCode` values returned in the `code` field of error
responses, never on message text.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Error codes returned to API clients."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    SERVER_ERROR = "SERVER_ERROR"

    INVALID_ID = "INVALID_ID"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    NO_VALID_FIELDS = "NO_VALID_FIELDS"
    INVALID_CATEGORY = "INVALID_CATEGORY"
    CAPACITY_BELOW_SOLD = "CAPACITY_BELOW_SOLD"

    RSVP_NOT_FOUND = "RSVP_NOT_FOUND"
    ALREADY_RSVPED = "ALREADY_RSVPED"
    RSVP_REQUIRES_FREE_EVENT = "RSVP_REQUIRES_FREE_EVENT"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    INVALID_CHECK_IN_COUNT = "INVALID_CHECK_IN_COUNT"

    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    TICKET_REQUIRES_PAID_EVENT = "TICKET_REQUIRES_PAID_EVENT"
    TICKET_ALREADY_USED = "TICKET_ALREADY_USED"
    TICKET_CANCELLED = "TICKET_CANCELLED"
    TICKET_NOT_CANCELLABLE = "TICKET_NOT_CANCELLABLE"
    EVENT_ENDED = "EVENT_ENDED"
    EVENT_NOT_STARTED = "EVENT_NOT_STARTED"

    CONTACT_NOT_FOUND = "CONTACT_NOT_FOUND"
    INVALID_STATUS = "INVALID_STATUS"

    USER_NOT_FOUND = "USER_NOT_FOUND"
    EMAIL_TAKEN = "EMAIL_TAKEN"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    CANNOT_DELETE_SELF = "CANNOT_DELETE_SELF"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str
    data: dict[str, Any] | None = field(default=None, kw_only=True)

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidIdError(DomainError):
    """Raised when a path identifier is not a valid UUID."""

    def __init__(self, entity: str = "resource") -> None:
        super().__init__(
            code=ErrorCode.INVALID_ID,
            message=f"Invalid {entity} ID format",
        )


class PermissionDeniedError(DomainError):
    """Raised when the acting user may not perform an operation."""

    def __init__(self, message: str = "Not authorized to perform this action") -> None:
        super().__init__(code=ErrorCode.PERMISSION_DENIED, message=message)


class ValidationFailedError(DomainError):
    """Raised by services for malformed input that passed the serializers."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_ERROR, message=message)

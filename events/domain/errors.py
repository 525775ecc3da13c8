"""Domain errors for the events module."""

from common.errors import DomainError, ErrorCode


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class NoValidFieldsError(DomainError):
    """Raised when a flag update carries none of the patchable fields."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_VALID_FIELDS,
            message="No valid fields to update",
        )


class InvalidCategoryError(DomainError):
    def __init__(self, category: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CATEGORY,
            message=f"'{category}' is not a valid category",
        )


class CapacityBelowSoldError(DomainError):
    """Raised when an edit would set capacity below the places already taken."""

    def __init__(self, capacity: int, sold: int) -> None:
        super().__init__(
            code=ErrorCode.CAPACITY_BELOW_SOLD,
            message=f"Capacity cannot be lower than the {sold} places already taken",
            data={"capacity": capacity, "ticketsSold": sold},
        )

"""Domain errors for RSVPs and tickets."""

from common.errors import DomainError, ErrorCode


class RsvpNotFoundError(DomainError):
    """Raised when an RSVP is not found."""

    def __init__(self, rsvp_id: str) -> None:
        super().__init__(code=ErrorCode.RSVP_NOT_FOUND, message="RSVP not found")
        self.rsvp_id = rsvp_id


class AlreadyRsvpedError(DomainError):
    """Raised when the email already holds an RSVP for the event."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_RSVPED,
            message="You have already RSVPed for this event",
        )


class RsvpRequiresFreeEventError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.RSVP_REQUIRES_FREE_EVENT,
            message="RSVP is only available for free events",
        )


class CapacityExceededError(DomainError):
    """Raised when a reservation asks for more places than remain."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            code=ErrorCode.CAPACITY_EXCEEDED,
            message="Not enough tickets available",
            data={"requested": requested, "available": available},
        )


class InvalidCheckInCountError(DomainError):
    def __init__(self, quantity: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CHECK_IN_COUNT,
            message=f"Checked-in guests must be between 0 and {quantity}",
            data={"quantity": quantity},
        )


class TicketNotFoundError(DomainError):
    """Raised when a ticket id or code matches nothing."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.TICKET_NOT_FOUND, message="Ticket not found")


class TicketRequiresPaidEventError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TICKET_REQUIRES_PAID_EVENT,
            message="Free events take RSVPs, not tickets",
        )


class TicketAlreadyUsedError(DomainError):
    """Raised when checking in a ticket that was already checked in."""

    def __init__(self, ticket: dict) -> None:
        super().__init__(
            code=ErrorCode.TICKET_ALREADY_USED,
            message="This ticket has already been used",
            data={"ticket": ticket, "valid": False},
        )


class TicketCancelledError(DomainError):
    def __init__(self, ticket: dict) -> None:
        super().__init__(
            code=ErrorCode.TICKET_CANCELLED,
            message="This ticket has been cancelled",
            data={"ticket": ticket, "valid": False},
        )


class TicketNotCancellableError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_CANCELLABLE,
            message="This ticket cannot be cancelled",
        )


class EventEndedError(DomainError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.EVENT_ENDED, message="The event has already ended")


class EventNotStartedError(DomainError):
    def __init__(self, window_hours: float) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_STARTED,
            message=f"The event has not started yet (entry allowed {window_hours:g} hours before start)",
        )

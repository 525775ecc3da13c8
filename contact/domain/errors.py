"""Domain errors for contact messages."""

from common.errors import DomainError, ErrorCode
from contact.domain.models import CONTACT_STATUSES


class ContactNotFoundError(DomainError):
    def __init__(self, contact_id: str) -> None:
        super().__init__(code=ErrorCode.CONTACT_NOT_FOUND, message="Contact message not found")
        self.contact_id = contact_id


class InvalidStatusError(DomainError):
    """Raised when a status is not one of CONTACT_STATUSES."""

    def __init__(self, status: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_STATUS,
            message=f"Status must be one of: {', '.join(CONTACT_STATUSES)}",
            data={"status": status},
        )

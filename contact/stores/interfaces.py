"""Store interface for contact messages."""

from abc import ABC, abstractmethod

from common.pagination import Page, PageRequest
from contact.domain import ContactId, ContactMessage, ContactUpdate


class ContactStore(ABC):
    """Interface for contact message persistence."""

    @abstractmethod
    def create_message(self, name: str, email: str, subject: str, message: str) -> ContactMessage:
        ...

    @abstractmethod
    def list_messages(self, status: str | None, page: PageRequest) -> Page[ContactMessage]:
        """Newest first, optionally limited to one status."""
        ...

    @abstractmethod
    def update_message(self, contact_id: ContactId, update: ContactUpdate) -> ContactMessage | None:
        """Apply `update`; None if the message does not exist."""
        ...

"""Contact service - public submissions and admin triage."""

import logging

from common.errors import InvalidIdError
from common.notifications import notify
from common.pagination import Page, PageRequest
from contact.domain import CONTACT_STATUSES, ContactId, ContactMessage, ContactUpdate
from contact.domain.errors import ContactNotFoundError, InvalidStatusError
from contact.stores.interfaces import ContactStore

logger = logging.getLogger(__name__)


class ContactService:
    """Service for contact messages.

    `admin_email` receives a copy of every submission. Sending is best
    effort: a failed email never fails the submission.
    """

    def __init__(self, store: ContactStore, admin_email: str = "") -> None:
        self._store = store
        self._admin_email = admin_email

    def submit(self, name: str, email: str, subject: str, message: str) -> ContactMessage:
        contact = self._store.create_message(
            name=name.strip(), email=email.strip().lower(), subject=subject.strip(), message=message.strip()
        )
        logger.info("Contact message %s received from %s", contact.id, contact.email)
        notify(
            self._admin_email,
            f"New contact message: {contact.subject}",
            f"From: {contact.name} <{contact.email}>\n\n{contact.message}",
        )
        return contact

    def list_messages(self, status: str | None, page: PageRequest) -> Page[ContactMessage]:
        """Raises InvalidStatusError for an unknown status filter."""
        if status and status not in CONTACT_STATUSES:
            raise InvalidStatusError(status)
        return self._store.list_messages(status or None, page)

    def update_status(self, contact_id: str, update: ContactUpdate) -> ContactMessage:
        """Move a message to a new status, optionally adding notes or a response.

        Raises:
            InvalidStatusError: If the status is not one of CONTACT_STATUSES.
            InvalidIdError: If contact_id is not a valid UUID.
            ContactNotFoundError: If the message does not exist.
        """
        if update.status not in CONTACT_STATUSES:
            raise InvalidStatusError(update.status)
        try:
            parsed = ContactId.from_string(contact_id)
        except ValueError:
            raise InvalidIdError(ContactId.entity) from None
        contact = self._store.update_message(parsed, update)
        if contact is None:
            raise ContactNotFoundError(contact_id)
        logger.info("Contact message %s set to %s", contact.id, contact.status)
        return contact

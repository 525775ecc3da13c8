"""Domain models for contact messages."""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from common.value_objects import EntityId

CONTACT_STATUSES = ("new", "in-progress", "resolved")


@dataclass(frozen=True)
class ContactId(EntityId):
    """Unique identifier for a contact message."""

    entity: ClassVar[str] = "contact"


@dataclass(frozen=True)
class ContactMessage:
    id: ContactId
    name: str
    email: str
    subject: str
    message: str
    status: str
    notes: str
    admin_response: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ContactUpdate:
    """Admin changes to a message. None leaves a field as it is."""

    status: str
    notes: str | None = None
    admin_response: str | None = None

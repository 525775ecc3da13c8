"""Domain models for users."""

from dataclasses import dataclass
from datetime import datetime

from common.value_objects import UserId


@dataclass(frozen=True)
class User:
    """Domain representation of a User."""

    id: UserId
    name: str
    email: str
    role: str
    created_at: datetime


@dataclass(frozen=True)
class OrganizerSummary:
    """An organizer together with the number of events they own."""

    user: User
    event_count: int

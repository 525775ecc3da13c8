"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from typing import Any

from accounts.domain import OrganizerSummary, User
from common.pagination import Page, PageRequest
from common.value_objects import UserId


class UserStore(ABC):
    """Interface for user persistence operations."""

    @abstractmethod
    def list_users(self, page: PageRequest) -> Page[User]:
        """Return users ordered by created_at descending."""
        ...

    @abstractmethod
    def list_organizers(self, page: PageRequest) -> Page[OrganizerSummary]:
        """Return organizers with their event counts, newest first."""
        ...

    @abstractmethod
    def get_user(self, user_id: UserId) -> User | None:
        ...

    @abstractmethod
    def email_exists(self, email: str) -> bool:
        ...

    @abstractmethod
    def create_user(self, name: str, email: str, password: str, role: str) -> User:
        """Create a user.

        Raises:
            EmailTakenError: If the email already has an account.
        """
        ...

    @abstractmethod
    def update_profile(self, user_id: UserId, changes: dict[str, Any]) -> User | None:
        """Write the changed profile fields; return None if the user is gone.

        Raises:
            EmailTakenError: If the new email belongs to another account.
        """
        ...

    @abstractmethod
    def delete_user(self, user_id: UserId) -> bool:
        """Delete a user and everything they own. Returns False if missing."""
        ...

    @abstractmethod
    def authenticate(self, email: str, password: str) -> User | None:
        """Return the user when the credentials match an active account."""
        ...

    @abstractmethod
    def issue_token(self, user_id: UserId) -> str:
        """Return the API token for a user, creating it on first login."""
        ...

    @abstractmethod
    def revoke_token(self, user_id: UserId) -> None:
        """Delete the user's API token so it stops authenticating."""
        ...

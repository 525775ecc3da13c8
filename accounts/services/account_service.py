"""Account service: registration, login, profiles and admin user management."""

import logging

from accounts.domain import OrganizerSummary, User
from accounts.domain.errors import (
    CannotDeleteSelfError,
    EmailTakenError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from accounts.stores.interfaces import UserStore
from common.errors import InvalidIdError, ValidationFailedError
from common.pagination import Page, PageRequest
from common.value_objects import Actor, UserId

logger = logging.getLogger(__name__)

SELF_SERVICE_ROLES = ("user", "organizer")


class AccountService:
    """Service for user accounts."""

    def __init__(self, store: UserStore) -> None:
        self._store = store

    def register(self, name: str, email: str, password: str, role: str = "user") -> tuple[User, str]:
        """Create an account and return it with an API token.

        Raises:
            ValidationFailedError: If the requested role cannot be self-assigned.
            EmailTakenError: If the email already has an account.
        """
        if role not in SELF_SERVICE_ROLES:
            raise ValidationFailedError(f"Role '{role}' cannot be self-assigned")
        if self._store.email_exists(email):
            raise EmailTakenError()
        user = self._store.create_user(name=name, email=email, password=password, role=role)
        logger.info("User %s registered with role %s", user.email, user.role)
        return user, self._store.issue_token(user.id)

    def login(self, email: str, password: str) -> tuple[User, str]:
        user = self._store.authenticate(email, password)
        if user is None:
            raise InvalidCredentialsError()
        logger.info("User %s logged in", user.email)
        return user, self._store.issue_token(user.id)

    def logout(self, actor: Actor) -> None:
        """Revoke the actor's token; the next login issues a new one."""
        self._store.revoke_token(actor.id)
        logger.info("User %s logged out", actor.id)

    def get_user(self, user_id: str) -> User:
        user = self._store.get_user(_parse_user_id(user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def update_profile(self, actor: Actor, name: str | None = None, email: str | None = None) -> User:
        """Change the actor's own name or email.

        Raises:
            EmailTakenError: If the new email belongs to another account.
            UserNotFoundError: If the actor's account no longer exists.
        """
        current = self._store.get_user(actor.id)
        if current is None:
            raise UserNotFoundError(str(actor.id))
        changes = {}
        if name and name.strip() != current.name:
            changes["name"] = name.strip()
        if email:
            email = email.strip().lower()
            if email != current.email:
                if self._store.email_exists(email):
                    raise EmailTakenError()
                changes["email"] = email
        if not changes:
            return current
        updated = self._store.update_profile(actor.id, changes)
        if updated is None:
            raise UserNotFoundError(str(actor.id))
        logger.info("User %s updated %s", actor.id, sorted(changes))
        return updated

    def list_users(self, page: PageRequest) -> Page[User]:
        return self._store.list_users(page)

    def list_organizers(self, page: PageRequest) -> Page[OrganizerSummary]:
        return self._store.list_organizers(page)

    def delete_user(self, actor: Actor, user_id: str) -> None:
        """Delete a user; an organizer's events go with them.

        Raises:
            InvalidIdError: If user_id is not a valid UUID.
            CannotDeleteSelfError: If an admin targets their own account.
            UserNotFoundError: If the user does not exist.
        """
        target = _parse_user_id(user_id)
        if target == actor.id:
            raise CannotDeleteSelfError()
        if not self._store.delete_user(target):
            raise UserNotFoundError(user_id)
        logger.info("User %s deleted by admin %s", target, actor.id)


def _parse_user_id(user_id: str) -> UserId:
    try:
        return UserId.from_string(user_id)
    except ValueError:
        raise InvalidIdError("user") from None

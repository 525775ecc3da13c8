"""Django ORM implementation of the UserStore."""

from typing import Any

from django.contrib.auth import authenticate
from django.db import IntegrityError, transaction
from django.db.models import Count
from rest_framework.authtoken.models import Token

from accounts import models
from accounts.domain import OrganizerSummary, User
from accounts.domain.errors import EmailTakenError
from accounts.stores.interfaces import UserStore
from common.pagination import Page, PageRequest
from common.value_objects import UserId


def to_domain(user: models.User) -> User:
    return User(
        id=UserId(value=user.id),
        name=user.name,
        email=user.email,
        role=user.role,
        created_at=user.date_joined,
    )


class DjangoUserStore(UserStore):
    """User store backed by the Django ORM."""

    def list_users(self, page: PageRequest) -> Page[User]:
        queryset = models.User.objects.order_by("-date_joined")
        rows = queryset[page.offset : page.offset + page.limit]
        return Page(items=[to_domain(u) for u in rows], total=queryset.count(), request=page)

    def list_organizers(self, page: PageRequest) -> Page[OrganizerSummary]:
        queryset = models.User.objects.filter(role=models.Role.ORGANIZER)
        total = queryset.count()
        rows = queryset.annotate(event_count=Count("events")).order_by("-date_joined")[
            page.offset : page.offset + page.limit
        ]
        items = [OrganizerSummary(user=to_domain(u), event_count=u.event_count) for u in rows]
        return Page(items=items, total=total, request=page)

    def get_user(self, user_id: UserId) -> User | None:
        user = models.User.objects.filter(pk=user_id.value).first()
        return to_domain(user) if user else None

    def email_exists(self, email: str) -> bool:
        return models.User.objects.filter(email__iexact=email).exists()

    def create_user(self, name: str, email: str, password: str, role: str) -> User:
        try:
            with transaction.atomic():
                user = models.User.objects.create_user(email=email, password=password, name=name, role=role)
        except IntegrityError:
            raise EmailTakenError() from None
        return to_domain(user)

    def update_profile(self, user_id: UserId, changes: dict[str, Any]) -> User | None:
        user = models.User.objects.filter(pk=user_id.value).first()
        if user is None:
            return None
        for name, value in changes.items():
            setattr(user, name, value)
        try:
            with transaction.atomic():
                user.save(update_fields=sorted(changes))
        except IntegrityError:
            raise EmailTakenError() from None
        return to_domain(user)

    def delete_user(self, user_id: UserId) -> bool:
        deleted, _ = models.User.objects.filter(pk=user_id.value).delete()
        return deleted > 0

    def authenticate(self, email: str, password: str) -> User | None:
        user = authenticate(username=email.lower(), password=password)
        return to_domain(user) if user else None

    def issue_token(self, user_id: UserId) -> str:
        token, _ = Token.objects.get_or_create(user_id=user_id.value)
        return token.key

    def revoke_token(self, user_id: UserId) -> None:
        Token.objects.filter(user_id=user_id.value).delete()

"""Role-based DRF permissions."""

from rest_framework.permissions import BasePermission
from rest_framework.request import Request

from common.value_objects import Actor, UserId


class HasRole(BasePermission):
    """Allows authenticated users whose role is in `roles`."""

    roles: tuple[str, ...] = ()
    message = "User role is not authorized to access this route"

    def has_permission(self, request: Request, view) -> bool:
        user = request.user
        return bool(user and user.is_authenticated and user.role in self.roles)


class IsAdmin(HasRole):
    roles = ("admin",)


class IsOrganizerOrAdmin(HasRole):
    roles = ("organizer", "admin")


def actor_from_request(request: Request) -> Actor:
    return Actor(id=UserId(value=request.user.id), role=request.user.role)

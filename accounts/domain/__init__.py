from accounts.domain.models import OrganizerSummary, User

__all__ = [
    "User",
    "OrganizerSummary",
]

from contact.domain.models import CONTACT_STATUSES, ContactId, ContactMessage, ContactUpdate

__all__ = ["ContactMessage", "ContactUpdate", "ContactId", "CONTACT_STATUSES"]

"""Django ORM implementation of the ContactStore."""

from common.pagination import Page, PageRequest
from contact import models
from contact.domain import ContactId, ContactMessage, ContactUpdate
from contact.stores.interfaces import ContactStore


def to_domain(message: models.ContactMessage) -> ContactMessage:
    return ContactMessage(
        id=ContactId(value=message.id),
        name=message.name,
        email=message.email,
        subject=message.subject,
        message=message.message,
        status=message.status,
        notes=message.notes,
        admin_response=message.admin_response,
        created_at=message.created_at,
        updated_at=message.updated_at,
    )


class DjangoContactStore(ContactStore):
    """Contact store backed by the Django ORM."""

    def create_message(self, name: str, email: str, subject: str, message: str) -> ContactMessage:
        row = models.ContactMessage.objects.create(name=name, email=email, subject=subject, message=message)
        return to_domain(row)

    def list_messages(self, status: str | None, page: PageRequest) -> Page[ContactMessage]:
        queryset = models.ContactMessage.objects.order_by("-created_at")
        if status:
            queryset = queryset.filter(status=status)
        rows = queryset[page.offset : page.offset + page.limit]
        return Page(items=[to_domain(m) for m in rows], total=queryset.count(), request=page)

    def update_message(self, contact_id: ContactId, update: ContactUpdate) -> ContactMessage | None:
        row = models.ContactMessage.objects.filter(pk=contact_id.value).first()
        if row is None:
            return None
        row.status = update.status
        fields = ["status", "updated_at"]
        if update.notes is not None:
            row.notes = update.notes
            fields.append("notes")
        if update.admin_response is not None:
            row.admin_response = update.admin_response
            fields.append("admin_response")
        row.save(update_fields=fields)
        return to_domain(row)

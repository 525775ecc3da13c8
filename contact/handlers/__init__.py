from contact.handlers.views import ContactDetailView, ContactListView

__all__ = ["ContactListView", "ContactDetailView"]

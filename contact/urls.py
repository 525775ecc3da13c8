from django.urls import path

from contact.handlers import ContactDetailView, ContactListView

urlpatterns = [
    path("contact", ContactListView.as_view(), name="contact-list"),
    path("contact/<str:contact_id>", ContactDetailView.as_view(), name="contact-detail"),
]

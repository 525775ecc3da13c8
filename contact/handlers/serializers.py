"""Serializers for contact messages."""

from rest_framework import serializers


class ContactMessageSerializer(serializers.Serializer):
    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    email = serializers.EmailField()
    subject = serializers.CharField()
    message = serializers.CharField()
    status = serializers.CharField()
    notes = serializers.CharField()
    adminResponse = serializers.CharField(source="admin_response")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class ContactSubmitSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    email = serializers.EmailField()
    subject = serializers.CharField(max_length=200)
    message = serializers.CharField(max_length=5000)


class ContactUpdateSerializer(serializers.Serializer):
    """Status is checked by the service so bad values get INVALID_STATUS."""

    status = serializers.CharField(max_length=20)
    notes = serializers.CharField(required=False, allow_blank=True)
    adminResponse = serializers.CharField(source="admin_response", required=False, allow_blank=True)

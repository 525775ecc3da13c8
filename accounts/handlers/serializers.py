"""Serializers for account requests and responses."""

from rest_framework import serializers


class UserSerializer(serializers.Serializer):
    """Serializer for User domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    email = serializers.EmailField()
    role = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")


class OrganizerSerializer(serializers.Serializer):
    """Serializer for OrganizerSummary, flattened onto the user fields."""

    def to_representation(self, instance):
        data = UserSerializer(instance.user).data
        data["eventCount"] = instance.event_count
        return data


class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, write_only=True)
    role = serializers.CharField(max_length=20, default="user")


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class ProfileUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100, required=False)
    email = serializers.EmailField(required=False)

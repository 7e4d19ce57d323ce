"""
Accounts app serializers.

Contains the request and response serializers for the auth API.
Field names on the wire are camelCase (``firstName``) to match the
rest of the API; the model attributes stay snake_case.  **No business
logic** lives here — all domain rules are delegated to ``services.py``.
"""

from __future__ import annotations

from django.contrib.auth import get_user_model
from rest_framework import serializers

from .models import UserRole

User = get_user_model()


class RegisterRequestSerializer(serializers.Serializer):
    """
    Validates new-user registration data.

    Required fields: username, password.  ``role`` defaults to
    ``public``.  The password is hashed by the service layer.
    """

    username = serializers.CharField(max_length=150)
    password = serializers.CharField(
        write_only=True,
        min_length=8,
        style={"input_type": "password"},
        help_text="Minimum 8 characters.",
    )
    firstName = serializers.CharField(
        source="first_name", required=False, allow_blank=True, max_length=150,
    )
    lastName = serializers.CharField(
        source="last_name", required=False, allow_blank=True, max_length=150,
    )
    email = serializers.EmailField(required=False, allow_blank=True)
    role = serializers.ChoiceField(
        choices=UserRole.choices,
        required=False,
        default=UserRole.PUBLIC,
    )
    badgeNumber = serializers.CharField(
        source="badge_number", required=False, allow_blank=True, max_length=50,
    )


class LoginRequestSerializer(serializers.Serializer):
    """Username + password credentials."""

    username = serializers.CharField()
    password = serializers.CharField(
        write_only=True,
        style={"input_type": "password"},
    )


class UserSummarySerializer(serializers.ModelSerializer):
    """
    Minimal user representation returned alongside auth tokens and
    stored by the frontend.
    """

    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "firstName", "lastName", "role"]
        read_only_fields = fields


class AuthResponseSerializer(serializers.Serializer):
    """Token pair plus the user summary."""

    token = serializers.CharField(read_only=True, help_text="JWT access token.")
    refresh = serializers.CharField(read_only=True, help_text="JWT refresh token.")
    user = UserSummarySerializer(read_only=True)

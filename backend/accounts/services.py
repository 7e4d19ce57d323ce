"""
Accounts Service Layer.

This module is the **single source of truth** for all business logic
within the ``accounts`` app.  Views must remain *thin*: they validate
input through serializers, call a service method, and return the
result wrapped in a DRF ``Response``.

Architecture
------------
- ``UserRegistrationService``  — handles new-user creation.
- ``AuthenticationService``    — credential check + JWT issuance.
"""

from __future__ import annotations

import logging
from typing import Any

from django.contrib.auth import authenticate as django_authenticate
from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from rest_framework_simplejwt.tokens import RefreshToken

from core.domain.exceptions import DomainError

from .models import UserRole

User = get_user_model()

logger = logging.getLogger(__name__)


class UserRegistrationService:
    """Encapsulates the user registration flow."""

    @staticmethod
    def register_user(validated_data: dict[str, Any]) -> User:
        """
        Create a new user with a hashed password.

        Parameters
        ----------
        validated_data : dict
            Cleaned data from ``RegisterRequestSerializer`` containing
            ``username`` and ``password`` plus optional ``first_name``,
            ``last_name``, ``email``, ``role`` and ``badge_number``.

        Returns
        -------
        User
            The newly created (and saved) ``User`` instance.

        Raises
        ------
        core.domain.exceptions.DomainError
            If the username is already taken.
        """
        data = dict(validated_data)
        password = data.pop("password")
        data.setdefault("role", UserRole.PUBLIC)

        if User.objects.filter(username=data.get("username")).exists():
            raise DomainError("Username already exists")

        try:
            with transaction.atomic():
                user = User.objects.create_user(password=password, **data)
        except IntegrityError:
            raise DomainError("Username already exists")

        logger.info("Registered user %s with role %s", user.username, user.role)
        return user


class AuthenticationService:
    """Handles credential verification and JWT token generation."""

    @staticmethod
    def authenticate(username: str, password: str, request=None) -> User | None:
        """
        Validate credentials and return the user if successful.

        Returns ``None`` for an unknown username, a wrong password or an
        inactive account; callers report all three the same way.
        """
        return django_authenticate(request=request, username=username, password=password)

    @staticmethod
    def generate_tokens(user: User) -> dict[str, str]:
        """
        Issue a JWT access/refresh token pair for the given user.

        The ``username`` and ``role`` claims are added to the refresh
        token before the access token is derived, so both carry them
        and the frontend can decode the role without another request.

        Returns
        -------
        dict
            ``{"token": "<access>", "refresh": "<refresh>"}``.
        """
        refresh = RefreshToken.for_user(user)
        refresh["username"] = user.username
        refresh["role"] = user.role
        return {
            "token": str(refresh.access_token),
            "refresh": str(refresh),
        }

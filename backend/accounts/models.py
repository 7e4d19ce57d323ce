"""
Accounts app models.

Defines the custom User model that extends Django's ``AbstractUser``
with a single role (officer or public member) and an optional badge
number for officers.
"""

from django.contrib.auth.models import AbstractUser
from django.db import models


class UserRole(models.TextChoices):
    """Roles a user can register with."""

    OFFICER = "officer", "Officer"
    PUBLIC = "public", "Public"


class User(AbstractUser):
    """
    Custom user model for the records system.

    Registration requires a username and password; names, email and
    role are optional.  Officers may modify records and register
    arrests, public users may only read.
    """

    role = models.CharField(
        max_length=20,
        choices=UserRole.choices,
        default=UserRole.PUBLIC,
        verbose_name="Role",
        db_index=True,
    )
    badge_number = models.CharField(
        max_length=50,
        blank=True,
        default="",
        verbose_name="Badge Number",
    )

    class Meta:
        verbose_name = "User"
        verbose_name_plural = "Users"

    def __str__(self):
        return f"{self.username} ({self.get_role_display()})"

    @property
    def is_officer(self) -> bool:
        """Superusers count as officers so the admin account can do everything."""
        return self.role == UserRole.OFFICER or self.is_superuser

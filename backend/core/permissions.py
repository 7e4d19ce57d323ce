"""
Role-based DRF permission classes.

Users carry a single ``role`` (``officer`` or ``public``, see
``accounts.models.UserRole``).  Officers may change records; everyone
who is signed in may read them.
"""

from __future__ import annotations

from rest_framework.permissions import SAFE_METHODS, BasePermission


def is_officer(user) -> bool:
    """Return ``True`` for an authenticated user holding the officer role."""
    return bool(
        user
        and user.is_authenticated
        and getattr(user, "is_officer", False)
    )


class IsOfficer(BasePermission):
    """Allow access only to officers."""

    message = "Only officers can perform this action."

    def has_permission(self, request, view) -> bool:
        return is_officer(request.user)


class IsOfficerOrReadOnly(BasePermission):
    """
    Authenticated users may read; only officers may create, update
    or delete.
    """

    message = "Only officers can modify records."

    def has_permission(self, request, view) -> bool:
        if not (request.user and request.user.is_authenticated):
            return False
        if request.method in SAFE_METHODS:
            return True
        return is_officer(request.user)

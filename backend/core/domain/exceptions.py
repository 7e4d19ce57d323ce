"""
core.domain.exceptions — Domain-specific exception hierarchy.

These exceptions represent business-rule violations inside service layers.
They are deliberately **not** DRF exceptions so that the domain layer stays
framework-agnostic.  The global DRF exception handler
(``core.domain.exception_handler``) maps them to HTTP responses; views
that need a different envelope (e.g. arrest registration) catch them
at their own boundary.

Mapping cheatsheet
------------------
┌─────────────────────┬──────────────────────────────┬──────┐
│ Domain Exception    │ DRF / HTTP equivalent        │ Code │
├─────────────────────┼──────────────────────────────┼──────┤
│ DomainError         │ ValidationError / 400        │ 400  │
│ MissingFields       │ ValidationError / 400        │ 400  │
│ NotFound            │ NotFound / 404               │ 404  │
│ TransactionFailed   │ APIException / 500           │ 500  │
└─────────────────────┴──────────────────────────────┴──────┘

Recommended usage inside a service::

    from core.domain.exceptions import NotFound

    person = Person.objects.filter(person_id=person_id).first()
    if person is None:
        raise NotFound("Person not found", code="person")
"""

from __future__ import annotations

from typing import Iterable


class DomainError(Exception):
    """
    Base class for all domain / business-rule errors.

    Catch this at the view boundary and convert to a 400 Bad Request.
    """

    def __init__(self, message: str = "A business rule was violated.") -> None:
        self.message = message
        super().__init__(self.message)


class MissingFields(DomainError):
    """
    One or more required input fields were absent or empty.

    Raised before any database access.  ``fields`` keeps the wire names
    of the missing fields in the order they were checked.

    Maps to HTTP 400.
    """

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields = list(fields)
        super().__init__(
            f"Missing required fields: {', '.join(self.fields)}"
        )


class NotFound(DomainError):
    """
    The requested resource does not exist, or exists but does not satisfy
    a required predicate (e.g. a case that is not open).

    ``code`` is a short machine-readable discriminator such as
    ``"person"``, ``"case_not_open"`` or ``"location"``.

    Maps to HTTP 404.
    """

    def __init__(
        self,
        message: str = "The requested resource was not found.",
        *,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code


class TransactionFailed(Exception):
    """
    A multi-step unit of work could not be committed and was rolled back.

    Not a ``DomainError``: the caller did nothing wrong.  ``details``
    carries the underlying database message for diagnostics.

    Maps to HTTP 500.
    """

    default_message = "Transaction failed, no data saved"

    def __init__(
        self,
        message: str = default_message,
        *,
        details: str = "",
    ) -> None:
        self.message = message
        self.details = details
        super().__init__(self.message)

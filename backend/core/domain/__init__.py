"""
core.domain — Shared domain utilities for cross-app service layers.

Modules
-------
exceptions         Domain-specific exceptions that map cleanly to HTTP responses.
exception_handler  DRF handler that renders those exceptions.
transactions       Helpers for ``transaction.atomic`` + ``select_for_update``
                   with retry and timeout.

Usage from any app::

    from core.domain.exceptions import DomainError, NotFound
    from core.domain.transactions import run_with_retry, lock_first
"""

"""
core.domain.transactions — Helpers for multi-step units of work.

Wraps ``transaction.atomic`` and ``select_for_update`` into reusable
patterns so every service sequences its writes the same way.

Design goals
------------
* Eliminate boilerplate around ``with transaction.atomic(): ...``
  inside service methods.
* Give multi-document workflows a bounded lifetime (a statement/lock
  timeout) and a bounded number of attempts when the database reports
  a write conflict.
* Keep the helpers **generic** — they accept any callable and any
  queryset.

Usage::

    from core.domain.transactions import run_with_retry

    result = run_with_retry(
        lambda: _register(...),
        attempts=3,
        timeout_ms=5000,
        label="arrest registration",
    )
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from django.db import (
    DEFAULT_DB_ALIAS,
    IntegrityError,
    OperationalError,
    connections,
    models,
    transaction,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=models.Model)

#: Database errors that signal a conflicting concurrent writer rather than
#: a bad request: unique-constraint races, serialization failures,
#: deadlocks and lock timeouts.
RETRYABLE_ERRORS: tuple[type[Exception], ...] = (IntegrityError, OperationalError)


def apply_transaction_timeout(timeout_ms: int | None, using: str = DEFAULT_DB_ALIAS) -> None:
    """
    Bound the current transaction's statements and lock waits.

    Must be called inside an ``atomic()`` block.  ``SET LOCAL`` scopes
    the setting to the enclosing transaction, so nothing leaks to the
    next request on a pooled connection.  Backends other than
    PostgreSQL have no equivalent and are left untouched.
    """
    if not timeout_ms:
        return
    connection = connections[using]
    if connection.vendor != "postgresql":
        return
    timeout = int(timeout_ms)
    with connection.cursor() as cursor:
        cursor.execute(f"SET LOCAL statement_timeout = {timeout}")
        cursor.execute(f"SET LOCAL lock_timeout = {timeout}")


def run_with_retry(
    fn: Callable[[], T],
    *,
    attempts: int = 1,
    timeout_ms: int | None = None,
    retry_on: tuple[type[Exception], ...] = RETRYABLE_ERRORS,
    label: str = "unit of work",
    using: str = DEFAULT_DB_ALIAS,
) -> T:
    """
    Run ``fn()`` in its own transaction, retrying on write conflicts.

    Each attempt opens a fresh ``atomic()`` block, applies the timeout,
    and calls ``fn``.  If ``fn`` raises one of ``retry_on`` the block is
    rolled back and ``fn`` runs again from scratch, so it must re-read
    everything it depends on.  Any other exception is propagated
    immediately after rollback.

    Args:
        fn:         Zero-argument callable performing the reads and writes.
        attempts:   Total number of tries (``1`` disables retrying).
        timeout_ms: Statement/lock timeout for each attempt.
        retry_on:   Exception types that trigger another attempt.
        label:      Name used in log messages.
        using:      Database alias.

    Returns:
        Whatever ``fn`` returns on the first successful attempt.

    Raises:
        The last ``retry_on`` exception once ``attempts`` are exhausted.
    """
    attempts = max(int(attempts), 1)
    for attempt in range(1, attempts + 1):
        try:
            with transaction.atomic(using=using):
                apply_transaction_timeout(timeout_ms, using=using)
                return fn()
        except retry_on as exc:
            if attempt == attempts:
                raise
            logger.warning(
                "%s conflicted on attempt %d/%d, retrying: %s",
                label, attempt, attempts, exc,
            )
    raise AssertionError("unreachable")  # pragma: no cover


def lock_first(queryset: models.QuerySet[M]) -> M | None:
    """
    Return the first row of ``queryset`` with a row-level lock held.

    Must be called inside an ``atomic()`` block.  Returns ``None`` when
    nothing matches, so callers can raise their own ``NotFound``.
    """
    return queryset.select_for_update().first()

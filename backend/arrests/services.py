"""
Arrests app Service Layer.

This module is the **single source of truth** for the arrest
registration workflow.  The view only passes the request body in and
renders the outcome.

Architecture
------------
- ``ArrestRegistrationService`` — validates references, creates the
  Arrest + Charge pair, normalises the Case status and tags the Person
  as a suspect, all in one transaction.
- ``generate_id``               — lowest-free ``PREFIX-NNN`` identifier.
- ``normalize_arrest_date``     — ``YYYY-MM-DD`` from a string, date,
                                  datetime or epoch-millisecond number.
- ``ensure_lookup_indexes``     — builds the secondary lookup indexes on
                                  ``arrests`` and ``charges`` after the
                                  first successful registration.

Registration pipeline
---------------------
Every step either succeeds or raises; the first failure rolls back the
whole unit of work::

    required fields ─▶ lock person ─▶ lock open case ─▶ location exists
        ─▶ snapshot IDs ─▶ normalise date ─▶ insert arrest ─▶ insert charge
        ─▶ case.status = "open" ─▶ person.roles += "suspect" ─▶ commit

ID uniqueness
-------------
IDs come from a linear scan over the IDs stored at the time of the
read.  Two concurrent registrations can compute the same candidate; the
unique ``arrest_id`` / ``charge_id`` columns reject the second insert
with ``IntegrityError`` and the whole pipeline is retried with a fresh
snapshot (``ARREST_REGISTRATION['MAX_ATTEMPTS']``).  The ID format and
the reuse of freed low numbers are unchanged by the retry.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import date, datetime, timezone as dt_timezone
from typing import Any, Container, Mapping

from django.conf import settings
from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections, models, transaction

from core.domain.exceptions import DomainError, MissingFields, NotFound, TransactionFailed
from core.domain.transactions import lock_first, run_with_retry
from records.models import Arrest, Case, Charge, Location, Person

logger = logging.getLogger(__name__)

#: Wire names of the fields a registration must carry, in reporting order.
REQUIRED_FIELDS: tuple[str, ...] = (
    "personID",
    "caseID",
    "arrestDate",
    "locationID",
    "chargeDescription",
    "statuteCode",
)

ARREST_ID_PREFIX = "ARR"
CHARGE_ID_PREFIX = "CHG"
SUSPECT_ROLE = "suspect"
OPEN_STATUS = "open"

#: (model, field) pairs that get a single-column lookup index.
LOOKUP_INDEXES: tuple[tuple[type[models.Model], str], ...] = (
    (Arrest, "person_id"),
    (Arrest, "case_id"),
    (Arrest, "location_id"),
    (Charge, "arrest_id"),
)

_FALSE_STRINGS = frozenset({"", "0", "false", "no", "off"})


# ═══════════════════════════════════════════════════════════════════
#  Pure helpers
# ═══════════════════════════════════════════════════════════════════


def generate_id(prefix: str, existing_ids: Container[str]) -> str:
    """
    Return the first ``"{prefix}-{n:03d}"`` (n = 1, 2, …) not in
    ``existing_ids``.

    Numbers are zero-padded to at least three digits and never
    truncated: ``ARR-001``, ``ARR-042``, ``ARR-1000``.  A freed low
    number is handed out again before anything above the current max.
    """
    counter = 1
    while True:
        candidate = f"{prefix}-{counter:03d}"
        if candidate not in existing_ids:
            return candidate
        counter += 1


def normalize_arrest_date(value: Any) -> str:
    """
    Reduce an arrest date to a ``YYYY-MM-DD`` string.

    * ``str`` — the part before any ``T`` or whitespace, so the time of day
      is dropped (``"2024-03-10T00:00:00.000Z"`` and ``"2024-03-10 14:00"``
      → ``"2024-03-10"``).  Strings are otherwise stored as given.
    * ``datetime`` — aware values are converted to UTC first.
    * ``date`` — formatted as is.
    * ``int`` / ``float`` — epoch milliseconds, UTC.

    Raises:
        DomainError: the value is not a string, date, datetime or number.
    """
    if isinstance(value, str):
        head = value.strip().split("T")[0]
        return head.split(maxsplit=1)[0] if head.strip() else head
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(dt_timezone.utc)
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=dt_timezone.utc).date().isoformat()
    raise DomainError(f"Invalid arrestDate: {value!r}")


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


# ═══════════════════════════════════════════════════════════════════
#  Registration
# ═══════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ArrestRequest:
    """Registration input after the required-field check."""

    person_id: str
    case_id: str
    arrest_date: Any
    location_id: str
    charge_description: str
    statute_code: str
    is_convicted: bool = False
    officer_id: str | None = None

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "ArrestRequest":
        return cls(
            person_id=str(data["personID"]),
            case_id=str(data["caseID"]),
            arrest_date=data["arrestDate"],
            location_id=str(data["locationID"]),
            charge_description=str(data["chargeDescription"]),
            statute_code=str(data["statuteCode"]),
            is_convicted=_as_bool(data.get("isConvicted", False)),
            officer_id=str(data["officerID"]) if data.get("officerID") else None,
        )


@dataclass(frozen=True)
class RegistrationResult:
    arrest: Arrest
    charge: Charge


class ArrestRegistrationService:
    """
    Registers an arrest together with its charge.

    Referenced Person, Case and Location must exist; the Case must be
    open (any casing).  ``officerID`` is stored as given without being
    looked up.

    Side effects on success
    -----------------------
    * ``Case.status`` is rewritten to the literal ``"open"``, so a case
      matched as ``"OPEN"`` is normalised.
    * ``"suspect"`` is appended to ``Person.roles`` unless already there.
    * After commit, lookup indexes are ensured in a background thread.
    """

    @classmethod
    def register_arrest(cls, data: Mapping[str, Any]) -> RegistrationResult:
        """
        Validate and persist one arrest registration.

        Parameters
        ----------
        data : Mapping
            Request body with ``personID``, ``caseID``, ``arrestDate``,
            ``locationID``, ``chargeDescription``, ``statuteCode`` and
            optional ``isConvicted`` / ``officerID``.

        Returns
        -------
        RegistrationResult
            The committed Arrest and Charge.

        Raises
        ------
        MissingFields
            A required field is absent or empty.  Raised before any
            database access.
        NotFound
            ``code`` is ``"person"``, ``"case_not_open"`` or
            ``"location"``.  Nothing was written.
        DomainError
            ``arrestDate`` is not a string, date, datetime or number.
        TransactionFailed
            The database rejected the unit of work (after retries).
            Nothing was written.
        """
        if not isinstance(data, Mapping):
            data = {}
        missing = [name for name in REQUIRED_FIELDS if not data.get(name)]
        if missing:
            raise MissingFields(missing)

        request = ArrestRequest.from_payload(data)
        config = settings.ARREST_REGISTRATION

        try:
            result = run_with_retry(
                lambda: cls._register(request),
                attempts=config.get("MAX_ATTEMPTS", 3),
                timeout_ms=config.get("TIMEOUT_MS"),
                label="Arrest registration",
            )
        except DatabaseError as exc:
            logger.error(
                "Arrest registration for person %s / case %s rolled back: %s",
                request.person_id, request.case_id, exc,
            )
            raise TransactionFailed(details=str(exc)) from exc

        logger.info(
            "Registered arrest %s (charge %s) for person %s on case %s",
            result.arrest.arrest_id, result.charge.charge_id,
            request.person_id, request.case_id,
        )
        return result

    @classmethod
    def _register(cls, request: ArrestRequest) -> RegistrationResult:
        """One attempt of the pipeline; must run inside ``atomic()``."""
        person = cls._lock_person(request.person_id)
        case = cls._lock_open_case(request.case_id)
        cls._require_location(request.location_id)

        arrest_id = generate_id(
            ARREST_ID_PREFIX,
            set(Arrest.objects.values_list("arrest_id", flat=True)),
        )
        charge_id = generate_id(
            CHARGE_ID_PREFIX,
            set(Charge.objects.values_list("charge_id", flat=True)),
        )
        arrest_date = normalize_arrest_date(request.arrest_date)

        arrest = Arrest.objects.create(
            arrest_id=arrest_id,
            person_id=request.person_id,
            case_id=request.case_id,
            date=arrest_date,
            location_id=request.location_id,
            officer_id=request.officer_id,
        )
        charge = Charge.objects.create(
            charge_id=charge_id,
            arrest_id=arrest_id,
            description=request.charge_description,
            statute_code=request.statute_code,
            is_convicted=request.is_convicted,
        )

        case.status = OPEN_STATUS
        case.save(update_fields=["status", "updated_at"])

        roles = list(person.roles or [])
        if SUSPECT_ROLE not in roles:
            person.roles = roles + [SUSPECT_ROLE]
            person.save(update_fields=["roles", "updated_at"])

        transaction.on_commit(schedule_lookup_index_build)
        return RegistrationResult(arrest=arrest, charge=charge)

    @staticmethod
    def _lock_person(person_id: str) -> Person:
        person = lock_first(Person.objects.filter(person_id=person_id))
        if person is None:
            raise NotFound("Person not found", code="person")
        return person

    @staticmethod
    def _lock_open_case(case_id: str) -> Case:
        case = lock_first(
            Case.objects.filter(case_id=case_id, status__iexact=OPEN_STATUS)
        )
        if case is None:
            raise NotFound("Case not found or not open", code="case_not_open")
        return case

    @staticmethod
    def _require_location(location_id: str) -> None:
        if not Location.objects.filter(location_id=location_id).exists():
            raise NotFound("Location not found", code="location")


# ═══════════════════════════════════════════════════════════════════
#  Lookup indexes (fire-and-forget)
# ═══════════════════════════════════════════════════════════════════

_indexes_ready = threading.Event()


def lookup_index_name(model: type[models.Model], field_name: str) -> str:
    return f"{model._meta.db_table}_{field_name}_lkp"


def ensure_lookup_indexes(using: str = DEFAULT_DB_ALIAS) -> list[str]:
    """
    Create any missing single-column lookup index from ``LOOKUP_INDEXES``.

    An index already covering exactly that column (whatever its name)
    counts as present.  Returns the names of the indexes created.
    """
    connection = connections[using]
    with connection.cursor() as cursor:
        constraints = {
            table: connection.introspection.get_constraints(cursor, table)
            for table in {model._meta.db_table for model, _ in LOOKUP_INDEXES}
        }

    created = []
    for model, field_name in LOOKUP_INDEXES:
        column = model._meta.get_field(field_name).column
        already_indexed = any(
            info["index"] and info["columns"] == [column]
            for info in constraints[model._meta.db_table].values()
        )
        if already_indexed:
            continue
        index = models.Index(fields=[field_name], name=lookup_index_name(model, field_name))
        with connection.schema_editor() as editor:
            editor.add_index(model, index)
        created.append(index.name)
    return created


def _build_lookup_indexes() -> None:
    try:
        created = ensure_lookup_indexes()
    except Exception:
        logger.warning("Background lookup index build failed", exc_info=True)
    else:
        _indexes_ready.set()
        if created:
            logger.info("Created lookup indexes: %s", ", ".join(created))
    finally:
        connections.close_all()


def schedule_lookup_index_build() -> threading.Thread | None:
    """
    Start ``ensure_lookup_indexes`` in a daemon thread.

    Never blocks and never raises into the caller.  Skipped when
    ``ARREST_REGISTRATION['BUILD_LOOKUP_INDEXES']`` is off or a previous
    build already succeeded in this process.
    """
    if not settings.ARREST_REGISTRATION.get("BUILD_LOOKUP_INDEXES", True):
        return None
    if _indexes_ready.is_set():
        return None
    thread = threading.Thread(
        target=_build_lookup_indexes,
        name="arrest-lookup-indexes",
        daemon=True,
    )
    thread.start()
    return thread

"""
Records app Service Layer.

Generic create/read/update/delete, schema description and group-by
counting over any registered collection.  Views resolve the collection
name from the URL, call one method here and wrap the result in a
``Response``.

Architecture
------------
- ``RecordCollectionService`` — one instance per request, bound to a
  single collection.
"""

from __future__ import annotations

import logging
from typing import Any

from django.conf import settings
from django.db import models
from django.db.models import Count

from core.domain.exceptions import DomainError, NotFound

from .registry import Collection, get_collection
from .serializers import api_field_map, serializer_for, to_api_name

logger = logging.getLogger(__name__)

#: Fields managed by the system, hidden from form schemas.
SYSTEM_FIELDS = frozenset({"id", "created_at", "updated_at"})

_TYPE_NAMES: tuple[tuple[type[models.Field], str], ...] = (
    (models.BooleanField, "Boolean"),
    (models.DateTimeField, "Date"),
    (models.DateField, "Date"),
    (models.IntegerField, "Number"),
    (models.FloatField, "Number"),
    (models.DecimalField, "Number"),
    (models.JSONField, "Array"),
)


def field_type_name(field: models.Field) -> str:
    """Name of the value type the client should render for ``field``."""
    for field_class, name in _TYPE_NAMES:
        if isinstance(field, field_class):
            return name
    return "String"


def list_limit() -> int:
    return settings.RECORDS.get("LIST_LIMIT", 200)


class RecordCollectionService:
    """
    CRUD and aggregation over one record collection.

    Instantiate through ``RecordCollectionService.for_name(name)`` which
    raises ``NotFound`` for unknown collections.
    """

    def __init__(self, collection: Collection) -> None:
        self.collection = collection
        self.model = collection.model
        self.serializer_class = serializer_for(collection.model)

    @classmethod
    def for_name(cls, name: str) -> "RecordCollectionService":
        collection = get_collection(name)
        if collection is None:
            raise NotFound(f"Collection '{name}' not found.", code="collection")
        return cls(collection)

    # ── Reads ────────────────────────────────────────────────────────

    def list_documents(self) -> list[dict[str, Any]]:
        """Newest documents first, capped at ``RECORDS['LIST_LIMIT']``."""
        queryset = self.model.objects.order_by("-created_at", "-id")[: list_limit()]
        return self.serializer_class(queryset, many=True).data

    def get_document(self, pk: Any) -> models.Model:
        try:
            return self.model.objects.get(pk=pk)
        except (self.model.DoesNotExist, ValueError, TypeError):
            raise NotFound("Document not found.", code="document")

    # ── Writes ───────────────────────────────────────────────────────

    def create_document(self, data: dict[str, Any]) -> dict[str, Any]:
        serializer = self.serializer_class(data=data)
        serializer.is_valid(raise_exception=True)
        instance = serializer.save()
        logger.info("Created %s pk=%s", self.collection.name, instance.pk)
        return serializer.data

    def update_document(self, pk: Any, data: dict[str, Any]) -> dict[str, Any]:
        """
        Apply the supplied fields to an existing document.

        Only fields present in ``data`` change; field validators still run.
        """
        instance = self.get_document(pk)
        serializer = self.serializer_class(instance, data=data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info("Updated %s pk=%s", self.collection.name, pk)
        return serializer.data

    def delete_document(self, pk: Any) -> dict[str, Any]:
        """Delete a document and return its last representation."""
        instance = self.get_document(pk)
        data = self.serializer_class(instance).data
        instance.delete()
        logger.info("Deleted %s pk=%s", self.collection.name, pk)
        return data

    # ── Introspection / aggregation ──────────────────────────────────

    def describe_schema(self) -> list[dict[str, Any]]:
        """
        Describe the editable fields for building forms.

        Returns ``[{"name": "personID", "type": "String", "required": True}, ...]``
        in model declaration order, without system-managed fields.
        """
        return [
            {
                "name": to_api_name(field.name),
                "type": field_type_name(field),
                "required": not field.blank,
            }
            for field in self.model._meta.concrete_fields
            if field.name not in SYSTEM_FIELDS
        ]

    def group_by(self, api_field: str | None) -> list[dict[str, Any]]:
        """
        Count documents grouped by one field, largest group first.

        Raises:
            DomainError: ``api_field`` is missing or not a field of this
                         collection.
        """
        if not api_field:
            raise DomainError("Missing 'groupByField'.")
        field_name = api_field_map(self.model).get(api_field)
        if field_name is None:
            raise DomainError(
                f"Unknown field '{api_field}' for collection "
                f"'{self.collection.name}'."
            )
        rows = (
            self.model.objects
            .order_by()
            .values(field_name)
            .annotate(count=Count("id"))
            .order_by("-count", field_name)
        )
        return [{"_id": row[field_name], "count": row["count"]} for row in rows]

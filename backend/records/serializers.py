"""
Records app serializers.

Every collection shares one serializer shape: all model fields, with
names converted to the camelCase used on the wire (``person_id`` →
``personID``, ``date_of_birth`` → ``dateOfBirth``).  Serializer classes
are built on demand from the model, so adding a field to a model is
enough to expose it.
"""

from __future__ import annotations

import functools

from django.db import models
from rest_framework import serializers

from .models import Person


def to_api_name(field_name: str) -> str:
    """
    Convert a snake_case model field name to its camelCase API name.

    The ``id`` part is upper-cased (``collected_by_officer_id`` →
    ``collectedByOfficerID``); a bare ``id`` stays ``id``.
    """
    head, *rest = field_name.split("_")
    return head + "".join("ID" if part == "id" else part.capitalize() for part in rest)


def api_field_map(model: type[models.Model]) -> dict[str, str]:
    """``{api_name: model_field_name}`` for every concrete field."""
    return {to_api_name(f.name): f.name for f in model._meta.concrete_fields}


class RecordSerializer(serializers.ModelSerializer):
    """
    ModelSerializer that exposes fields under their camelCase names.

    Fields are built by DRF as usual and then re-keyed; ``source``
    keeps pointing at the model attribute, so validators such as
    ``UniqueValidator`` still query the right column.
    """

    def get_fields(self):
        fields = super().get_fields()
        renamed = {}
        for name, field in fields.items():
            api_name = to_api_name(name)
            if api_name != name and field.source is None:
                field.source = name
            renamed[api_name] = field
        return renamed


class PersonSerializer(RecordSerializer):
    roles = serializers.ListField(
        child=serializers.CharField(max_length=50),
        required=False,
        help_text="Role labels such as 'suspect' or 'witness'.",
    )

    class Meta:
        model = Person
        fields = "__all__"


_CUSTOM_SERIALIZERS: dict[type[models.Model], type[RecordSerializer]] = {
    Person: PersonSerializer,
}


@functools.lru_cache(maxsize=None)
def serializer_for(model: type[models.Model]) -> type[RecordSerializer]:
    """Return (building once) the serializer class for ``model``."""
    if model in _CUSTOM_SERIALIZERS:
        return _CUSTOM_SERIALIZERS[model]
    meta = type("Meta", (), {"model": model, "fields": "__all__"})
    return type(f"{model.__name__}Serializer", (RecordSerializer,), {"Meta": meta})


# ── Request / response helpers for the generic endpoints ────────────

class GroupByRequestSerializer(serializers.Serializer):
    groupByField = serializers.CharField(
        required=False,
        allow_blank=True,
        help_text="API name of the field to group by, e.g. 'crimeType'.",
    )


class GroupByBucketSerializer(serializers.Serializer):
    _id = serializers.JSONField(help_text="Grouped value (null when unset).")
    count = serializers.IntegerField()


class SchemaFieldSerializer(serializers.Serializer):
    name = serializers.CharField()
    type = serializers.ChoiceField(choices=["String", "Number", "Date", "Boolean", "Array"])
    required = serializers.BooleanField()


class DocumentEnvelopeSerializer(serializers.Serializer):
    message = serializers.CharField()
    result = serializers.DictField()

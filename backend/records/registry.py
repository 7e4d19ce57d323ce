"""
Registry of the record collections exposed through the generic API.

Maps the lowercase, plural collection name used in URLs to its model
and the field holding the human-readable ID.  User accounts are not a
record collection and never appear here.
"""

from __future__ import annotations

from dataclasses import dataclass

from django.db import models

from .models import (
    Arrest,
    Case,
    Charge,
    Department,
    Evidence,
    Forensic,
    Incident,
    Location,
    Officer,
    Person,
    Prison,
    Report,
    Sentence,
    Vehicle,
    Weapon,
)


@dataclass(frozen=True)
class Collection:
    name: str
    model: type[models.Model]
    id_field: str


COLLECTIONS: dict[str, Collection] = {
    c.name: c
    for c in (
        Collection("incidents", Incident, "incident_id"),
        Collection("people", Person, "person_id"),
        Collection("arrests", Arrest, "arrest_id"),
        Collection("charges", Charge, "charge_id"),
        Collection("cases", Case, "case_id"),
        Collection("departments", Department, "department_id"),
        Collection("officers", Officer, "officer_id"),
        Collection("locations", Location, "location_id"),
        Collection("evidence", Evidence, "evidence_id"),
        Collection("forensics", Forensic, "forensic_id"),
        Collection("reports", Report, "report_id"),
        Collection("prisons", Prison, "prison_id"),
        Collection("sentences", Sentence, "sentence_id"),
        Collection("vehicles", Vehicle, "vehicle_id"),
        Collection("weapons", Weapon, "weapon_id"),
    )
}


def get_collection(name: str) -> Collection | None:
    """Case-insensitive lookup; ``None`` for unknown names."""
    return COLLECTIONS.get((name or "").lower())

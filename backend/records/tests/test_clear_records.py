"""
Tests for the ``clear_records`` management command.
"""

from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO

from django.core.management import CommandError, call_command
from django.test import TestCase

from records.models import Arrest, Case, Charge, Incident, Location, Officer, Person


class TestClearRecordsCommand(TestCase):

    def setUp(self):
        Incident.objects.create(
            incident_id="INC-001", title="Break-in", crime_type="Burglary",
            date=datetime(2024, 1, 5, tzinfo=timezone.utc),
        )
        Person.objects.create(person_id="PER-001", first_name="A", last_name="B")
        Case.objects.create(case_id="CASE-001", status="open")
        Arrest.objects.create(arrest_id="ARR-001", person_id="PER-001", date="2024-01-06")
        Officer.objects.create(officer_id="OFF-001", person_id="PER-002", badge_number="77")
        Charge.objects.create(charge_id="CHG-001", arrest_id="ARR-001")
        Location.objects.create(location_id="LOC-001")

    def _call(self, *args) -> str:
        out = StringIO()
        call_command("clear_records", *args, stdout=out)
        return out.getvalue()

    def test_default_clears_sample_collections_only(self):
        output = self._call()

        for model in (Incident, Person, Case, Arrest, Officer):
            self.assertFalse(model.objects.exists(), model.__name__)
        self.assertTrue(Charge.objects.exists())
        self.assertTrue(Location.objects.exists())
        self.assertIn("Sample data removed successfully.", output)
        self.assertIn("arrests", output)

    def test_named_collections(self):
        self._call("--collections", "charges", "Locations")

        self.assertFalse(Charge.objects.exists())
        self.assertFalse(Location.objects.exists())
        self.assertTrue(Person.objects.exists())

    def test_all_collections(self):
        self._call("--all")

        for model in (Incident, Person, Case, Arrest, Officer, Charge, Location):
            self.assertFalse(model.objects.exists(), model.__name__)

    def test_unknown_collection_deletes_nothing(self):
        with self.assertRaises(CommandError):
            self._call("--collections", "people", "unicorns")
        self.assertTrue(Person.objects.exists())

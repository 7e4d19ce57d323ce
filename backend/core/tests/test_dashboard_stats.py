"""
Integration tests for GET /api/stats/dashboard/ (core:dashboard-stats).
"""

from __future__ import annotations

from datetime import datetime, timezone

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from records.models import Arrest, Case, Incident, Person


class TestDashboardStats(TestCase):

    @classmethod
    def setUpTestData(cls):
        for n, case_status in enumerate(
            ["open", "OPEN", "Under Investigation", "pending review", "closed", "Closed", "archived"],
            start=1,
        ):
            Case.objects.create(case_id=f"CASE-{n:03d}", status=case_status)

        for n in range(1, 4):
            Person.objects.create(person_id=f"PER-{n:03d}", first_name="P", last_name=str(n))

        arrest_locations = ["LOC-001"] * 3 + ["LOC-002"] * 2 + [""] * 2 + [
            "LOC-003", "LOC-004", "LOC-005", "LOC-006",
        ]
        for n, location_id in enumerate(arrest_locations, start=1):
            Arrest.objects.create(
                arrest_id=f"ARR-{n:03d}", person_id="PER-001",
                date="2024-01-01", location_id=location_id,
            )

        when = datetime(2024, 1, 1, tzinfo=timezone.utc)
        crimes = ["Theft"] * 4 + ["Assault"] * 3 + ["Fraud"] * 2 + ["Arson", "Vandalism", "Smuggling"]
        for n, crime in enumerate(crimes, start=1):
            Incident.objects.create(
                incident_id=f"INC-{n:03d}", title="t", crime_type=crime, date=when,
            )

    def setUp(self):
        self.client = APIClient()
        self.url = reverse("core:dashboard-stats")

    def test_public_endpoint(self):
        resp = self.client.get(self.url)
        self.assertEqual(resp.status_code, status.HTTP_200_OK)

    def test_invalid_token_is_ignored(self):
        self.client.credentials(HTTP_AUTHORIZATION="Bearer not-a-token")
        resp = self.client.get(self.url)
        self.assertEqual(resp.status_code, status.HTTP_200_OK)

    def test_counters(self):
        data = self.client.get(self.url).data

        self.assertEqual(data["activeCases"], 4)
        self.assertEqual(data["convictedCount"], 2)
        self.assertEqual(data["totalArrests"], 11)
        self.assertEqual(data["totalPeople"], 3)

    def test_arrests_by_location_top_five(self):
        data = self.client.get(self.url).data["arrestsByLocation"]

        self.assertEqual(len(data), 5)
        self.assertEqual(data[0], {"location": "LOC-001", "count": 3})
        self.assertEqual(
            sorted(data[1:3], key=lambda row: row["location"]),
            [{"location": "LOC-002", "count": 2}, {"location": "Unknown", "count": 2}],
        )
        self.assertTrue(all(row["count"] == 1 for row in data[3:]))

    def test_crime_type_distribution_top_five(self):
        data = self.client.get(self.url).data["crimeTypeDistribution"]

        self.assertEqual(len(data), 5)
        self.assertEqual(
            data[:3],
            [
                {"type": "Theft", "count": 4},
                {"type": "Assault", "count": 3},
                {"type": "Fraud", "count": 2},
            ],
        )

    def test_blank_crime_types_are_grouped_as_unknown(self):
        when = datetime(2024, 2, 1, tzinfo=timezone.utc)
        for n in range(13, 18):
            Incident.objects.create(incident_id=f"INC-{n:03d}", title="t", crime_type="", date=when)

        data = self.client.get(self.url).data["crimeTypeDistribution"]

        self.assertEqual(
            data,
            [
                {"type": "Unknown", "count": 5},
                {"type": "Theft", "count": 4},
                {"type": "Assault", "count": 3},
                {"type": "Fraud", "count": 2},
                {"type": "Arson", "count": 1},
            ],
        )

    def test_empty_database(self):
        Arrest.objects.all().delete()
        Incident.objects.all().delete()
        Case.objects.all().delete()
        Person.objects.all().delete()

        data = self.client.get(self.url).data

        self.assertEqual(
            dict(data),
            {
                "activeCases": 0,
                "totalArrests": 0,
                "convictedCount": 0,
                "totalPeople": 0,
                "arrestsByLocation": [],
                "crimeTypeDistribution": [],
            },
        )

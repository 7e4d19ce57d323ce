"""
Core app serializers.

**Response-only** serializers for the dashboard endpoint.  They work
exclusively with the plain dicts produced by
``DashboardAggregationService`` and never touch models.
"""

from __future__ import annotations

from rest_framework import serializers


# ════════════════════════════════════════════════════════════════════
#  Dashboard Statistics
# ════════════════════════════════════════════════════════════════════

class LocationCountSerializer(serializers.Serializer):
    """
    Arrest count for one location.

    Example::

        {"location": "LOC-001", "count": 7}
    """

    location = serializers.CharField(
        help_text="Location ID, or 'Unknown' for arrests without one.",
    )
    count = serializers.IntegerField()


class CrimeTypeCountSerializer(serializers.Serializer):
    """
    Incident count for one crime type.

    Example::

        {"type": "Burglary", "count": 12}
    """

    type = serializers.CharField(help_text="Incident crime type.")
    count = serializers.IntegerField()


class DashboardStatsSerializer(serializers.Serializer):
    """
    Top-level response serializer for ``GET /api/stats/dashboard/``.

    Response shape::

        {
            "activeCases": 4,
            "totalArrests": 18,
            "convictedCount": 6,
            "totalPeople": 40,
            "arrestsByLocation": [{"location": "LOC-001", "count": 7}, ...],
            "crimeTypeDistribution": [{"type": "Burglary", "count": 12}, ...]
        }
    """

    # ── Scalar counters ──────────────────────────────────────────────
    activeCases = serializers.IntegerField(
        source="active_cases",
        help_text="Cases that are open, under investigation or pending.",
    )
    totalArrests = serializers.IntegerField(source="total_arrests")
    convictedCount = serializers.IntegerField(
        source="convicted_count",
        help_text="Cases whose status is 'closed'.",
    )
    totalPeople = serializers.IntegerField(source="total_people")

    # ── Top-N breakdowns ─────────────────────────────────────────────
    arrestsByLocation = LocationCountSerializer(
        source="arrests_by_location",
        many=True,
        help_text="Top five locations by arrest count.",
    )
    crimeTypeDistribution = CrimeTypeCountSerializer(
        source="crime_type_distribution",
        many=True,
        help_text="Top five incident crime types.",
    )

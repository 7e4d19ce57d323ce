"""
Core app services — **Service Layer**.

Contains cross-app aggregation logic.  Views delegate to the service
classes defined here, keeping views thin and ensuring testability.

Cross-app import rule
---------------------
``records`` depends on ``core`` (``TimeStampedModel``), so models from
other apps are resolved lazily through ``django.apps.apps.get_model``
inside methods, never imported at module level.
"""

from __future__ import annotations

from typing import Any

from django.apps import apps
from django.db.models import Count, Q, Value
from django.db.models.functions import Coalesce, NullIf


# ════════════════════════════════════════════════════════════════════
#  Dashboard Aggregation Service
# ════════════════════════════════════════════════════════════════════

class DashboardAggregationService:
    """
    Produces the statistics dict consumed by ``DashboardStatsSerializer``.

    The numbers are department-wide and identical for every caller; the
    dashboard is public.

    Case status is free text, so "active" is a pattern match: ``open``
    (any casing), anything matching ``under.*investigation``, or anything
    containing ``pending``.  ``convictedCount`` counts *closed cases*,
    not convicted charges.
    """

    #: Number of groups returned by each top-N breakdown.
    TOP_GROUPS_LIMIT: int = 5

    #: Label for arrests without a location and incidents without a crime type.
    UNKNOWN_LABEL: str = "Unknown"

    ACTIVE_CASE_FILTER = (
        Q(status__iexact="open")
        | Q(status__iregex=r"under.*investigation")
        | Q(status__icontains="pending")
    )

    # ── Public API ──────────────────────────────────────────────────

    def get_stats(self) -> dict[str, Any]:
        """Return the full dashboard statistics dictionary."""
        Case = apps.get_model("records", "Case")
        Arrest = apps.get_model("records", "Arrest")
        Person = apps.get_model("records", "Person")

        # Single aggregate query for the case counters
        case_counts = Case.objects.aggregate(
            active_cases=Count("id", filter=self.ACTIVE_CASE_FILTER),
            closed_cases=Count("id", filter=Q(status__iexact="closed")),
        )

        return {
            "active_cases": case_counts["active_cases"],
            "total_arrests": Arrest.objects.count(),
            "convicted_count": case_counts["closed_cases"],
            "total_people": Person.objects.count(),
            "arrests_by_location": self._get_arrests_by_location(),
            "crime_type_distribution": self._get_crime_type_distribution(),
        }

    # ── Private helpers ─────────────────────────────────────────────

    def _get_arrests_by_location(self) -> list[dict[str, Any]]:
        """Top locations by arrest count; blank locations share one bucket."""
        Arrest = apps.get_model("records", "Arrest")
        rows = (
            Arrest.objects
            .annotate(
                location=Coalesce(
                    NullIf("location_id", Value("")),
                    Value(self.UNKNOWN_LABEL),
                ),
            )
            .values("location")
            .annotate(count=Count("id"))
            .order_by("-count", "location")[: self.TOP_GROUPS_LIMIT]
        )
        return [{"location": row["location"], "count": row["count"]} for row in rows]

    def _get_crime_type_distribution(self) -> list[dict[str, Any]]:
        """Top incident crime types by count; blank types share one bucket."""
        Incident = apps.get_model("records", "Incident")
        rows = (
            Incident.objects
            .annotate(
                crime=Coalesce(
                    NullIf("crime_type", Value("")),
                    Value(self.UNKNOWN_LABEL),
                ),
            )
            .values("crime")
            .annotate(count=Count("id"))
            .order_by("-count", "crime")[: self.TOP_GROUPS_LIMIT]
        )
        return [{"type": row["crime"], "count": row["count"]} for row in rows]

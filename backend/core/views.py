"""
Core app views — **Thin Views**.

Each view delegates all business logic to the corresponding service in
``core.services`` and only serialises the result.

No model imports, no aggregation logic, no cross-app queries.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_spectacular.utils import OpenApiResponse, extend_schema

from .serializers import DashboardStatsSerializer
from .services import DashboardAggregationService


class DashboardStatsView(APIView):
    """
    **GET /api/stats/dashboard/**

    Return aggregated dashboard statistics: active cases, arrests,
    closed-case count, people on record and the top arrest locations
    and incident crime types.

    **Authentication**: None (public endpoint).

    **Response** (``200 OK``):
        Serialised by ``DashboardStatsSerializer``.
    """

    permission_classes = [AllowAny]
    authentication_classes = []  # No authentication required

    @extend_schema(
        summary="Dashboard statistics",
        description=(
            "Return aggregated statistics for the dashboard. "
            "This endpoint is public and does not require authentication."
        ),
        responses={200: OpenApiResponse(response=DashboardStatsSerializer, description="Dashboard stats.")},
        tags=["Dashboard"],
    )
    def get(self, request: Request) -> Response:
        data = DashboardAggregationService().get_stats()
        serializer = DashboardStatsSerializer(data)
        return Response(serializer.data, status=status.HTTP_200_OK)

"""
Core app URL configuration.

URL prefix (registered in ``backend/urls.py``)::

    path('api/stats/', include('core.urls'))

Endpoint summary
----------------
GET  /api/stats/dashboard/   — Aggregated dashboard statistics (public).
"""

from django.urls import path

from . import views

app_name = "core"

urlpatterns = [
    path(
        "dashboard/",
        views.DashboardStatsView.as_view(),
        name="dashboard-stats",
    ),
]

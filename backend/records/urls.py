"""
Records app URL configuration.

URL prefix (registered in ``backend/urls.py``)::

    path('api/dynamic/', include('records.urls'))

Endpoint summary
----------------
GET    /{collection}/                 — List documents (newest first).
POST   /{collection}/                 — Create a document.
GET    /{collection}/schema/          — Field descriptions.
POST   /{collection}/math/group-by/   — Count documents per field value.
GET    /{collection}/{pk}/            — Retrieve a document.
PUT    /{collection}/{pk}/            — Update a document.
PATCH  /{collection}/{pk}/            — Update a document.
DELETE /{collection}/{pk}/            — Delete a document.
"""

from django.urls import path

from . import views

app_name = "records"

urlpatterns = [
    path(
        "<str:collection>/schema/",
        views.CollectionSchemaView.as_view(),
        name="collection-schema",
    ),
    path(
        "<str:collection>/math/group-by/",
        views.CollectionGroupByView.as_view(),
        name="collection-group-by",
    ),
    path(
        "<str:collection>/<int:pk>/",
        views.DocumentDetailView.as_view(),
        name="document-detail",
    ),
    path(
        "<str:collection>/",
        views.CollectionListView.as_view(),
        name="collection-list",
    ),
]

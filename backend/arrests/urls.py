"""
Arrests app URL configuration.

URL prefix (registered in ``backend/urls.py``)::

    path('api/arrest/', include('arrests.urls'))

Endpoint summary
----------------
POST /register/   — Register an arrest with its charge.
"""

from django.urls import path

from . import views

app_name = "arrests"

urlpatterns = [
    path("register/", views.ArrestRegistrationView.as_view(), name="arrest-register"),
]

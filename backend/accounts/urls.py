"""
Accounts app URL configuration.

Included in the project-level ``urls.py`` as::

    path('api/auth/', include('accounts.urls')),

Endpoint Map
------------
    POST   /register/         → RegisterView
    POST   /login/            → LoginView
    POST   /token/refresh/    → TokenRefreshView (SimpleJWT)
"""

from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from .views import LoginView, RegisterView

app_name = "accounts"

urlpatterns = [
    path("register/", RegisterView.as_view(), name="register"),
    path("login/", LoginView.as_view(), name="login"),
    path("token/refresh/", TokenRefreshView.as_view(), name="token-refresh"),
]

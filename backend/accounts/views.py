"""
Accounts app views.

All views follow the **Thin View** pattern: validate input via
serializers, delegate to the service layer, and return the result
wrapped in a DRF ``Response``.  **No business logic** resides here.

View Map
--------
- ``RegisterView`` — POST /auth/register/
- ``LoginView``    — POST /auth/login/
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.domain.exceptions import DomainError

from .serializers import (
    AuthResponseSerializer,
    LoginRequestSerializer,
    RegisterRequestSerializer,
    UserSummarySerializer,
)
from .services import AuthenticationService, UserRegistrationService


def _auth_payload(user) -> dict:
    payload = AuthenticationService.generate_tokens(user)
    payload["user"] = UserSummarySerializer(user).data
    return payload


class RegisterView(APIView):
    """
    POST /api/auth/register/

    Public endpoint.  Creates a new user and signs them in.

    Request body  → ``RegisterRequestSerializer``
    Response body → ``AuthResponseSerializer`` (201 Created)
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        summary="Register",
        request=RegisterRequestSerializer,
        responses={
            201: OpenApiResponse(response=AuthResponseSerializer, description="User created."),
            400: OpenApiResponse(description="Invalid data or username already exists."),
        },
        tags=["Auth"],
    )
    def post(self, request: Request) -> Response:
        serializer = RegisterRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = UserRegistrationService.register_user(serializer.validated_data)
        return Response(_auth_payload(user), status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """
    POST /api/auth/login/

    Public endpoint.  Verifies username + password and returns a token
    pair with the user summary.

    Request body  → ``LoginRequestSerializer``
    Response body → ``AuthResponseSerializer`` (200 OK)
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        summary="Login",
        request=LoginRequestSerializer,
        responses={
            200: OpenApiResponse(response=AuthResponseSerializer, description="Authenticated."),
            400: OpenApiResponse(description="Invalid credentials."),
        },
        tags=["Auth"],
    )
    def post(self, request: Request) -> Response:
        serializer = LoginRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = AuthenticationService.authenticate(
            username=serializer.validated_data["username"],
            password=serializer.validated_data["password"],
            request=request,
        )
        if user is None:
            raise DomainError("Invalid credentials")

        return Response(_auth_payload(user), status=status.HTTP_200_OK)

"""
Arrests app views.

``ArrestRegistrationView`` is the one endpoint that answers in the
``{"success": ..., ...}`` envelope instead of the project-wide
``{"detail": ...}`` shape, so it maps domain errors to responses itself
rather than leaving them to ``domain_exception_handler``.
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.domain.exceptions import (
    DomainError,
    MissingFields,
    NotFound,
    TransactionFailed,
)
from core.permissions import IsOfficer
from records.models import Arrest, Charge
from records.serializers import serializer_for

from .serializers import (
    ArrestRegistrationErrorSerializer,
    ArrestRegistrationRequestSerializer,
    ArrestRegistrationResponseSerializer,
)
from .services import ArrestRegistrationService

logger = logging.getLogger(__name__)


def _failure(error: str, status_code: int, details: str | None = None) -> Response:
    body = {"success": False, "error": error}
    if details is not None:
        body["details"] = details
    return Response(body, status=status_code)


class ArrestRegistrationView(APIView):
    """
    **POST /api/arrest/register/**

    Registers an arrest and its charge in one transaction: verifies the
    person, open case and location, assigns the next free ``ARR-NNN`` /
    ``CHG-NNN`` IDs, normalises the case status to ``"open"`` and tags
    the person as a ``"suspect"``.

    **Authentication**: Required, officer role.

    Status codes
    ------------
    - 200 — ``{"success": true, "message": ..., "data": {"arrest", "charge"}}``
    - 400 — missing required fields or an ``arrestDate`` of unsupported type
    - 404 — person, open case or location not found
    - 500 — the transaction was rolled back; ``details`` names the cause
    """

    permission_classes = [IsOfficer]

    @extend_schema(
        summary="Register an arrest",
        request=ArrestRegistrationRequestSerializer,
        responses={
            200: OpenApiResponse(response=ArrestRegistrationResponseSerializer, description="Registered."),
            400: OpenApiResponse(response=ArrestRegistrationErrorSerializer, description="Missing fields."),
            403: OpenApiResponse(description="Officer role required."),
            404: OpenApiResponse(response=ArrestRegistrationErrorSerializer, description="Reference not found."),
            500: OpenApiResponse(response=ArrestRegistrationErrorSerializer, description="Rolled back."),
        },
        tags=["Arrests"],
    )
    def post(self, request: Request) -> Response:
        try:
            result = ArrestRegistrationService.register_arrest(request.data)
        except MissingFields as exc:
            return _failure(exc.message, status.HTTP_400_BAD_REQUEST)
        except NotFound as exc:
            return _failure(exc.message, status.HTTP_404_NOT_FOUND)
        except DomainError as exc:
            return _failure(exc.message, status.HTTP_400_BAD_REQUEST)
        except TransactionFailed as exc:
            return _failure(exc.message, status.HTTP_500_INTERNAL_SERVER_ERROR, details=exc.details)
        except Exception as exc:
            logger.exception("Arrest registration failed unexpectedly")
            return _failure(
                TransactionFailed.default_message,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                details=str(exc),
            )

        return Response(
            {
                "success": True,
                "message": "Arrest successfully registered",
                "data": {
                    "arrest": serializer_for(Arrest)(result.arrest).data,
                    "charge": serializer_for(Charge)(result.charge).data,
                },
            },
            status=status.HTTP_200_OK,
        )

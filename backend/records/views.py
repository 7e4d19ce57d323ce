"""
Records app views — **Thin Views**.

Generic endpoints over every registered collection.  Each view resolves
the collection from the URL through ``RecordCollectionService.for_name``
(unknown names → 404 via the domain exception handler), delegates one
call to the service and wraps the result in a ``Response``.

View Map
--------
- ``CollectionListView``    — GET/POST  /dynamic/{collection}/
- ``DocumentDetailView``    — GET/PUT/PATCH/DELETE  /dynamic/{collection}/{pk}/
- ``CollectionSchemaView``  — GET  /dynamic/{collection}/schema/
- ``CollectionGroupByView`` — POST /dynamic/{collection}/math/group-by/
"""

from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.permissions import IsOfficerOrReadOnly

from .serializers import (
    DocumentEnvelopeSerializer,
    GroupByBucketSerializer,
    GroupByRequestSerializer,
    SchemaFieldSerializer,
)
from .services import RecordCollectionService


class CollectionListView(APIView):
    """
    **GET /api/dynamic/{collection}/** — newest documents first (max 200).

    **POST /api/dynamic/{collection}/** — create a document.

    **Authentication**: Required.  Creating requires the officer role.
    """

    permission_classes = [IsOfficerOrReadOnly]

    @extend_schema(
        summary="List documents",
        responses={
            200: OpenApiResponse(description="Array of documents, newest first."),
            404: OpenApiResponse(description="Unknown collection."),
        },
        tags=["Records"],
    )
    def get(self, request: Request, collection: str) -> Response:
        service = RecordCollectionService.for_name(collection)
        return Response(service.list_documents(), status=status.HTTP_200_OK)

    @extend_schema(
        summary="Create document",
        request=OpenApiTypes.OBJECT,
        responses={
            201: OpenApiResponse(response=DocumentEnvelopeSerializer, description="Created."),
            400: OpenApiResponse(description="Validation error."),
            404: OpenApiResponse(description="Unknown collection."),
        },
        tags=["Records"],
    )
    def post(self, request: Request, collection: str) -> Response:
        service = RecordCollectionService.for_name(collection)
        document = service.create_document(request.data)
        return Response(
            {"message": "Document created successfully!", "result": document},
            status=status.HTTP_201_CREATED,
        )


class DocumentDetailView(APIView):
    """
    **GET /api/dynamic/{collection}/{pk}/** — one document.

    **PUT|PATCH /api/dynamic/{collection}/{pk}/** — update the supplied
    fields (both verbs are partial updates).

    **DELETE /api/dynamic/{collection}/{pk}/** — delete; the response
    echoes the removed document.

    **Authentication**: Required.  Changes require the officer role.
    """

    permission_classes = [IsOfficerOrReadOnly]

    @extend_schema(
        summary="Retrieve document",
        responses={200: OpenApiResponse(description="The document."), 404: OpenApiResponse(description="Not found.")},
        tags=["Records"],
    )
    def get(self, request: Request, collection: str, pk: int) -> Response:
        service = RecordCollectionService.for_name(collection)
        document = service.get_document(pk)
        return Response(service.serializer_class(document).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Update document",
        request=OpenApiTypes.OBJECT,
        responses={
            200: OpenApiResponse(response=DocumentEnvelopeSerializer, description="Updated."),
            400: OpenApiResponse(description="Validation error."),
            404: OpenApiResponse(description="Not found."),
        },
        tags=["Records"],
    )
    def put(self, request: Request, collection: str, pk: int) -> Response:
        service = RecordCollectionService.for_name(collection)
        document = service.update_document(pk, request.data)
        return Response(
            {"message": "Document updated successfully!", "result": document},
            status=status.HTTP_200_OK,
        )

    @extend_schema(
        summary="Partially update document",
        request=OpenApiTypes.OBJECT,
        responses={200: OpenApiResponse(response=DocumentEnvelopeSerializer, description="Updated.")},
        tags=["Records"],
    )
    def patch(self, request: Request, collection: str, pk: int) -> Response:
        return self.put(request, collection, pk)

    @extend_schema(
        summary="Delete document",
        responses={
            200: OpenApiResponse(response=DocumentEnvelopeSerializer, description="Deleted."),
            404: OpenApiResponse(description="Not found."),
        },
        tags=["Records"],
    )
    def delete(self, request: Request, collection: str, pk: int) -> Response:
        service = RecordCollectionService.for_name(collection)
        document = service.delete_document(pk)
        return Response(
            {"message": "Document deleted successfully!", "result": document},
            status=status.HTTP_200_OK,
        )


class CollectionSchemaView(APIView):
    """
    **GET /api/dynamic/{collection}/schema/**

    Describe the collection's editable fields (name, type, required) so
    the client can build create/edit forms without hard-coding them.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Collection schema",
        responses={200: OpenApiResponse(response=SchemaFieldSerializer(many=True), description="Field list.")},
        tags=["Records"],
    )
    def get(self, request: Request, collection: str) -> Response:
        service = RecordCollectionService.for_name(collection)
        return Response(service.describe_schema(), status=status.HTTP_200_OK)


class CollectionGroupByView(APIView):
    """
    **POST /api/dynamic/{collection}/math/group-by/**

    Body: ``{"groupByField": "crimeType"}``.  Returns
    ``[{"_id": <value>, "count": <n>}, ...]`` largest group first.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Group-by count",
        request=GroupByRequestSerializer,
        responses={
            200: OpenApiResponse(response=GroupByBucketSerializer(many=True), description="Buckets."),
            400: OpenApiResponse(description="Missing or unknown field."),
        },
        tags=["Records"],
    )
    def post(self, request: Request, collection: str) -> Response:
        service = RecordCollectionService.for_name(collection)
        serializer = GroupByRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        buckets = service.group_by(serializer.validated_data.get("groupByField"))
        return Response(buckets, status=status.HTTP_200_OK)

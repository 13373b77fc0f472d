"""Visit request API views.

Public creation from the booking form; admin listing and status updates.
"""

import logging

from rest_framework import generics, status
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from admin_auth_app.api.permissions import IsAdminStaff
from common.api.mixins import LocalizedNotFoundMixin, validate_patch_only_status
from visits.models import VisitRequest
from .serializers import (
    VisitRequestCreateSerializer,
    VisitRequestOutputSerializer,
    VisitRequestStatusPatchSerializer,
)

logger = logging.getLogger(__name__)


class VisitRequestCreateAPIView(generics.CreateAPIView):
    """POST /api/visit-requests/ -> book a measuring visit."""

    authentication_classes = []
    permission_classes = [AllowAny]
    serializer_class = VisitRequestCreateSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        visit = serializer.save()
        return Response(VisitRequestOutputSerializer(visit).data, status=status.HTTP_201_CREATED)


class AdminVisitRequestListAPIView(generics.ListAPIView):
    """GET /api/admin/visit-requests/ -> newest first, optional ?status= filter."""

    permission_classes = [IsAdminStaff]
    serializer_class = VisitRequestOutputSerializer

    def get_queryset(self):
        qs = VisitRequest.objects.all().order_by("-created_at", "-id")
        value = self.request.query_params.get("status")
        if value:
            if value not in VisitRequest.Status.values:
                raise ValidationError({"status": "حالة الطلب غير صالحة"})
            qs = qs.filter(status=value)
        return qs


class AdminVisitRequestDetailAPIView(LocalizedNotFoundMixin, generics.RetrieveUpdateAPIView):
    """GET: retrieve one visit request. PATCH: set its status."""

    http_method_names = ["get", "patch", "head", "options"]
    permission_classes = [IsAdminStaff]
    queryset = VisitRequest.objects.all()
    not_found_message = "الطلب غير موجود"

    def get_serializer_class(self):
        if self.request.method == "PATCH":
            return VisitRequestStatusPatchSerializer
        return VisitRequestOutputSerializer

    def partial_update(self, request, *args, **kwargs):
        validate_patch_only_status(request.data)
        instance = self.get_object()
        previous = instance.status
        serializer = self.get_serializer(instance, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        logger.info("Visit request %s status %s -> %s", instance.id, previous, instance.status)
        return Response(VisitRequestOutputSerializer(instance).data, status=status.HTTP_200_OK)
